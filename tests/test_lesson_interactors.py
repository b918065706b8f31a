import pytest

from conftest import STRANGER_ID
from course_studio.application.exceptions.base import (
    AccessDeniedError,
    EntityNotFoundError,
    InvalidEntityIdError,
    InvalidPayloadError,
)
from course_studio.application.interactors.lesson.create_lesson import (
    CreateLessonInteractor,
    CreateLessonRequest,
)
from course_studio.application.interactors.lesson.delete_lesson import (
    DeleteLessonInteractor,
    DeleteLessonRequest,
)
from course_studio.application.interactors.lesson.get_lesson import (
    GetLessonInteractor,
    GetLessonRequest,
)
from course_studio.application.interactors.lesson.list_lessons import (
    ListLessonsInteractor,
    ListLessonsRequest,
)
from course_studio.application.interactors.lesson.patch_lesson import (
    PatchLessonInteractor,
    PatchLessonRequest,
)
from course_studio.application.interactors.lesson.replace_lesson import (
    ReplaceLessonInteractor,
    ReplaceLessonRequest,
)
from course_studio.application.payloads import LessonData
from course_studio.domain.course import LessonType


@pytest.fixture
def interactor_deps(course_repository, identity_provider, id_generator):
    return {
        "course_repository": course_repository,
        "identity_provider": identity_provider,
        "id_generator": id_generator,
    }


def _titles(lessons):
    return [lesson.title for lesson in lessons]


def _orders(lessons):
    return [lesson.order for lesson in lessons]


@pytest.mark.asyncio
async def test_list_lessons(interactor_deps, stored_course):
    course = await stored_course()
    interactor = ListLessonsInteractor(**interactor_deps)

    lessons = await interactor(
        ListLessonsRequest(course_id=course._id, section_id=course.sections[0]._id),
    )

    assert _titles(lessons) == ["Setup", "Hello", "Recap"]


@pytest.mark.asyncio
async def test_get_lesson_from_other_section(interactor_deps, stored_course):
    """Урок ищется только внутри указанного раздела"""
    course = await stored_course()
    intro, advanced = course.sections
    interactor = GetLessonInteractor(**interactor_deps)

    with pytest.raises(EntityNotFoundError):
        await interactor(
            GetLessonRequest(
                course_id=course._id,
                section_id=advanced._id,
                lesson_id=intro.lessons[0]._id,
            ),
        )


@pytest.mark.asyncio
async def test_get_lesson_invalid_id(interactor_deps, stored_course):
    course = await stored_course()
    interactor = GetLessonInteractor(**interactor_deps)

    with pytest.raises(InvalidEntityIdError):
        await interactor(
            GetLessonRequest(
                course_id=course._id,
                section_id=course.sections[0]._id,
                lesson_id="123",
            ),
        )


@pytest.mark.asyncio
async def test_create_lesson_appends_with_defaults(
    interactor_deps,
    stored_course,
    course_repository,
):
    course = await stored_course()
    advanced = course.sections[1]
    interactor = CreateLessonInteractor(**interactor_deps)

    lesson = await interactor(
        CreateLessonRequest(
            course_id=course._id,
            section_id=advanced._id,
            lesson=LessonData(title="Decorators", duration=12),
        ),
    )

    assert lesson.order == 0
    assert lesson.type == LessonType.VIDEO
    assert lesson.duration == 12
    assert lesson.is_preview is False
    stored = course_repository.courses[course._id]
    assert stored.sections[1].lessons == [lesson]


@pytest.mark.asyncio
async def test_create_lesson_ignores_client_order(interactor_deps, stored_course):
    course = await stored_course()
    intro = course.sections[0]
    interactor = CreateLessonInteractor(**interactor_deps)

    lesson = await interactor(
        CreateLessonRequest(
            course_id=course._id,
            section_id=intro._id,
            lesson=LessonData(title="Extra", order=0),
        ),
    )

    assert lesson.order == 3


@pytest.mark.asyncio
async def test_create_lesson_requires_title(interactor_deps, stored_course):
    course = await stored_course()
    interactor = CreateLessonInteractor(**interactor_deps)

    with pytest.raises(InvalidPayloadError) as exc_info:
        await interactor(
            CreateLessonRequest(
                course_id=course._id,
                section_id=course.sections[0]._id,
                lesson=LessonData(content="no title"),
            ),
        )

    assert exc_info.value.message == "Lesson title is required"


@pytest.mark.asyncio
async def test_create_lesson_rejects_negative_duration(interactor_deps, stored_course):
    course = await stored_course()
    interactor = CreateLessonInteractor(**interactor_deps)

    with pytest.raises(InvalidPayloadError):
        await interactor(
            CreateLessonRequest(
                course_id=course._id,
                section_id=course.sections[0]._id,
                lesson=LessonData(title="Negative", duration=-3),
            ),
        )


@pytest.mark.asyncio
async def test_replace_lesson_resets_omitted_fields(interactor_deps, stored_course):
    course = await stored_course()
    intro = course.sections[0]
    hello = intro.lessons[1]
    patch = PatchLessonInteractor(**interactor_deps)
    replace = ReplaceLessonInteractor(**interactor_deps)

    await patch(
        PatchLessonRequest(
            course_id=course._id,
            section_id=intro._id,
            lesson_id=hello._id,
            lesson=LessonData(content="Some text", is_preview=True),
        ),
    )
    lesson = await replace(
        ReplaceLessonRequest(
            course_id=course._id,
            section_id=intro._id,
            lesson_id=hello._id,
            lesson=LessonData(title="Hello again", type=LessonType.TEXT),
        ),
    )

    assert lesson._id == hello._id
    assert lesson.order == 1
    assert lesson.type == LessonType.TEXT
    assert lesson.content == ""
    assert lesson.is_preview is False


@pytest.mark.asyncio
async def test_replace_lesson_with_order_moves_and_reindexes(
    interactor_deps,
    stored_course,
    course_repository,
):
    course = await stored_course()
    intro = course.sections[0]
    setup = intro.lessons[0]
    interactor = ReplaceLessonInteractor(**interactor_deps)

    lesson = await interactor(
        ReplaceLessonRequest(
            course_id=course._id,
            section_id=intro._id,
            lesson_id=setup._id,
            lesson=LessonData(title="Setup v2", order=2),
        ),
    )

    assert lesson._id == setup._id
    assert lesson.order == 2
    lessons = course_repository.courses[course._id].sections[0].lessons
    assert _titles(lessons) == ["Hello", "Recap", "Setup v2"]
    assert _orders(lessons) == [0, 1, 2]


@pytest.mark.asyncio
async def test_replace_lesson_missing(interactor_deps, stored_course, id_generator):
    course = await stored_course()
    interactor = ReplaceLessonInteractor(**interactor_deps)

    with pytest.raises(EntityNotFoundError):
        await interactor(
            ReplaceLessonRequest(
                course_id=course._id,
                section_id=course.sections[0]._id,
                lesson_id=id_generator.new_id(),
                lesson=LessonData(title="Ghost"),
            ),
        )


@pytest.mark.asyncio
async def test_replace_lesson_by_stranger(
    interactor_deps,
    stored_course,
    course_repository,
    identity_provider,
):
    course = await stored_course()
    intro = course.sections[0]
    identity_provider.user_id = STRANGER_ID
    interactor = ReplaceLessonInteractor(**interactor_deps)

    with pytest.raises(AccessDeniedError):
        await interactor(
            ReplaceLessonRequest(
                course_id=course._id,
                section_id=intro._id,
                lesson_id=intro.lessons[0]._id,
                lesson=LessonData(title="Mine now", type="podcast"),
            ),
        )

    assert course_repository.saves == 0
    assert _titles(course_repository.courses[course._id].sections[0].lessons) == [
        "Setup",
        "Hello",
        "Recap",
    ]


@pytest.mark.asyncio
async def test_replace_lesson_unknown_type(
    interactor_deps,
    stored_course,
    course_repository,
):
    course = await stored_course()
    intro = course.sections[0]
    interactor = ReplaceLessonInteractor(**interactor_deps)

    with pytest.raises(InvalidPayloadError):
        await interactor(
            ReplaceLessonRequest(
                course_id=course._id,
                section_id=intro._id,
                lesson_id=intro.lessons[0]._id,
                lesson=LessonData(title="Setup", type="podcast"),
            ),
        )

    assert course_repository.saves == 0


@pytest.mark.asyncio
async def test_patch_lesson_only_supplied_keys(
    interactor_deps,
    stored_course,
    course_repository,
):
    course = await stored_course()
    intro = course.sections[0]
    setup = intro.lessons[0]
    interactor = PatchLessonInteractor(**interactor_deps)

    await interactor(
        PatchLessonRequest(
            course_id=course._id,
            section_id=intro._id,
            lesson_id=setup._id,
            lesson=LessonData(video_url="https://videos.example.com/setup.mp4"),
        ),
    )

    stored = course_repository.courses[course._id].sections[0].lessons[0]
    assert stored.video_url == "https://videos.example.com/setup.mp4"
    assert stored.title == "Setup"
    assert stored.order == 0


@pytest.mark.asyncio
async def test_patch_lesson_order_moves_it(
    interactor_deps,
    stored_course,
    course_repository,
):
    course = await stored_course()
    intro = course.sections[0]
    interactor = PatchLessonInteractor(**interactor_deps)

    await interactor(
        PatchLessonRequest(
            course_id=course._id,
            section_id=intro._id,
            lesson_id=intro.lessons[2]._id,
            lesson=LessonData(order=0),
        ),
    )

    lessons = course_repository.courses[course._id].sections[0].lessons
    assert _titles(lessons) == ["Recap", "Setup", "Hello"]
    assert _orders(lessons) == [0, 1, 2]


@pytest.mark.asyncio
async def test_patch_lesson_by_stranger(
    interactor_deps,
    stored_course,
    course_repository,
    identity_provider,
):
    course = await stored_course()
    intro = course.sections[0]
    identity_provider.user_id = STRANGER_ID
    interactor = PatchLessonInteractor(**interactor_deps)

    with pytest.raises(AccessDeniedError):
        await interactor(
            PatchLessonRequest(
                course_id=course._id,
                section_id=intro._id,
                lesson_id=intro.lessons[0]._id,
                lesson=LessonData(title="Mine now"),
            ),
        )

    assert course_repository.saves == 0


@pytest.mark.asyncio
async def test_delete_lesson_reindexes(
    interactor_deps,
    stored_course,
    course_repository,
):
    course = await stored_course()
    intro = course.sections[0]
    interactor = DeleteLessonInteractor(**interactor_deps)

    await interactor(
        DeleteLessonRequest(
            course_id=course._id,
            section_id=intro._id,
            lesson_id=intro.lessons[0]._id,
        ),
    )

    lessons = course_repository.courses[course._id].sections[0].lessons
    assert _titles(lessons) == ["Hello", "Recap"]
    assert _orders(lessons) == [0, 1]


@pytest.mark.asyncio
async def test_delete_lesson_twice(interactor_deps, stored_course):
    course = await stored_course()
    intro = course.sections[0]
    interactor = DeleteLessonInteractor(**interactor_deps)
    request = DeleteLessonRequest(
        course_id=course._id,
        section_id=intro._id,
        lesson_id=intro.lessons[1]._id,
    )

    await interactor(request)

    with pytest.raises(EntityNotFoundError):
        await interactor(request)
