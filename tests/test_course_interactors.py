import pytest

from course_studio.application.exceptions.base import (
    AccessDeniedError,
    EntityNotFoundError,
    InvalidEntityIdError,
    InvalidPayloadError,
    UnauthenticatedError,
)
from course_studio.application.interactors.course.create_course import (
    CreateCourseInteractor,
    CreateCourseRequest,
)
from course_studio.application.interactors.course.delete_course import (
    DeleteCourseInteractor,
    DeleteCourseRequest,
)
from course_studio.application.interactors.course.get_course import (
    GetCourseInteractor,
    GetCourseRequest,
)
from course_studio.application.interactors.course.patch_course import (
    PatchCourseInteractor,
    PatchCourseRequest,
)
from course_studio.application.interactors.course.replace_course import (
    ReplaceCourseInteractor,
    ReplaceCourseRequest,
)
from course_studio.application.payloads import CourseFields, LessonData, SectionData
from course_studio.domain.course import CourseLevel, CourseStatus, LessonType
from conftest import OWNER_ID, STRANGER_ID


@pytest.fixture
def create_course(course_repository, identity_provider):
    return CreateCourseInteractor(
        course_repository=course_repository,
        identity_provider=identity_provider,
    )


@pytest.fixture
def get_course(course_repository, identity_provider, id_generator):
    return GetCourseInteractor(
        course_repository=course_repository,
        identity_provider=identity_provider,
        id_generator=id_generator,
    )


@pytest.fixture
def replace_course(course_repository, identity_provider, id_generator):
    return ReplaceCourseInteractor(
        course_repository=course_repository,
        identity_provider=identity_provider,
        id_generator=id_generator,
    )


@pytest.fixture
def patch_course(course_repository, identity_provider, id_generator):
    return PatchCourseInteractor(
        course_repository=course_repository,
        identity_provider=identity_provider,
        id_generator=id_generator,
    )


@pytest.fixture
def delete_course(course_repository, identity_provider, id_generator):
    return DeleteCourseInteractor(
        course_repository=course_repository,
        identity_provider=identity_provider,
        id_generator=id_generator,
    )


# ============= Create =============


@pytest.mark.asyncio
async def test_create_course_defaults(create_course, course_repository):
    course = await create_course(CreateCourseRequest(title="Python Basics"))

    assert course._id in course_repository.courses
    assert course.owner_id == OWNER_ID
    assert course.status == CourseStatus.DRAFT
    assert course.level == CourseLevel.BEGINNER
    assert course.category == "Other"
    assert course.price == 0
    assert course.sections == []
    assert course.enrolled_students == 0
    assert course.ratings.average == 0
    assert course.ratings.count == 0


@pytest.mark.asyncio
async def test_create_course_deduplicates_tags(create_course):
    course = await create_course(
        CreateCourseRequest(title="Python", tags=["py", "web", "py"]),
    )

    assert course.tags == ["py", "web"]


@pytest.mark.asyncio
@pytest.mark.parametrize("title", [None, "", "   "])
async def test_create_course_requires_title(create_course, course_repository, title):
    with pytest.raises(InvalidPayloadError) as exc_info:
        await create_course(CreateCourseRequest(title=title))

    assert exc_info.value.message == "Title is required"
    assert course_repository.courses == {}


@pytest.mark.asyncio
async def test_create_course_rejects_negative_price(create_course):
    with pytest.raises(InvalidPayloadError):
        await create_course(CreateCourseRequest(title="Python", price=-1))


@pytest.mark.asyncio
async def test_create_course_requires_identity(create_course, identity_provider):
    identity_provider.user_id = None

    with pytest.raises(UnauthenticatedError):
        await create_course(CreateCourseRequest(title="Python"))


@pytest.mark.asyncio
async def test_create_course_accepts_numeric_string_price(create_course):
    course = await create_course(CreateCourseRequest(title="Python", price="19.5"))

    assert course.price == 19.5


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "request_data",
    [
        CreateCourseRequest(title="Python", level="expert"),
        CreateCourseRequest(title="Python", price=True),
        CreateCourseRequest(title="Python", tags=["py", 3]),
        CreateCourseRequest(title=42),
    ],
)
async def test_create_course_rejects_mistyped_fields(
    create_course,
    course_repository,
    request_data,
):
    with pytest.raises(InvalidPayloadError):
        await create_course(request_data)

    assert course_repository.courses == {}


# ============= Get =============


@pytest.mark.asyncio
async def test_get_course_by_anyone(get_course, stored_course, identity_provider):
    course = await stored_course()
    identity_provider.user_id = STRANGER_ID

    found = await get_course(GetCourseRequest(course_id=course._id))

    assert found.title == course.title
    assert len(found.sections) == 2


@pytest.mark.asyncio
async def test_get_course_invalid_id(get_course):
    with pytest.raises(InvalidEntityIdError):
        await get_course(GetCourseRequest(course_id="not-an-id"))


@pytest.mark.asyncio
async def test_get_course_not_found(get_course, id_generator):
    with pytest.raises(EntityNotFoundError):
        await get_course(GetCourseRequest(course_id=id_generator.new_id()))


# ============= Replace =============


@pytest.mark.asyncio
async def test_replace_course_keeps_omitted_fields(replace_course, stored_course):
    course = await stored_course(description="Basics", price=15)

    updated = await replace_course(
        ReplaceCourseRequest(
            course_id=course._id,
            fields=CourseFields(title="Python Pro"),
        ),
    )

    assert updated.title == "Python Pro"
    assert updated.description == "Basics"
    assert updated.price == 15
    assert len(updated.sections) == 2
    assert updated.updated_at >= course.updated_at


@pytest.mark.asyncio
async def test_replace_course_requires_title(replace_course, stored_course):
    course = await stored_course()

    with pytest.raises(InvalidPayloadError):
        await replace_course(
            ReplaceCourseRequest(
                course_id=course._id,
                fields=CourseFields(description="No title"),
            ),
        )


@pytest.mark.asyncio
async def test_replace_course_forbidden_wins_over_bad_payload(
    replace_course,
    stored_course,
    identity_provider,
):
    """Чужой курс: 403 даже при некорректном теле запроса"""
    course = await stored_course()
    identity_provider.user_id = STRANGER_ID

    with pytest.raises(AccessDeniedError):
        await replace_course(
            ReplaceCourseRequest(course_id=course._id, fields=CourseFields()),
        )


@pytest.mark.asyncio
async def test_replace_course_with_sections_keeps_ids_and_reindexes(
    replace_course,
    stored_course,
):
    course = await stored_course()
    intro, advanced = course.sections
    recap = intro.lessons[2]

    updated = await replace_course(
        ReplaceCourseRequest(
            course_id=course._id,
            fields=CourseFields(
                title="Python Basics",
                sections=[
                    SectionData(section_id=advanced._id, title="Advanced", order=7),
                    SectionData(
                        section_id=intro._id,
                        title="Intro",
                        lessons=[
                            LessonData(lesson_id=recap._id, title="Recap"),
                            LessonData(title="Quiz", type="quiz", duration="5"),
                        ],
                    ),
                ],
            ),
        ),
    )

    assert [section._id for section in updated.sections] == [advanced._id, intro._id]
    assert [section.order for section in updated.sections] == [0, 1]
    assert updated.sections[1].description == "Welcome"
    lessons = updated.sections[1].lessons
    assert [lesson.title for lesson in lessons] == ["Recap", "Quiz"]
    assert [lesson.order for lesson in lessons] == [0, 1]
    assert lessons[0]._id == recap._id
    assert lessons[1].type == LessonType.QUIZ
    assert lessons[1].duration == 5.0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("lesson", "reason"),
    [
        (LessonData(), "Each lesson must have a title"),
        (LessonData(title="Quiz", duration=-1), "Duration must not be negative"),
        (
            LessonData(title="Quiz", type="podcast"),
            "Lesson type must be one of: video, text, quiz",
        ),
    ],
)
async def test_replace_course_rejects_bad_nested_lesson(
    replace_course,
    stored_course,
    course_repository,
    lesson,
    reason,
):
    course = await stored_course()

    with pytest.raises(InvalidPayloadError) as exc_info:
        await replace_course(
            ReplaceCourseRequest(
                course_id=course._id,
                fields=CourseFields(
                    title="Renamed",
                    sections=[
                        SectionData(
                            title="Intro",
                            lessons=[LessonData(title="Ok"), lesson],
                        ),
                    ],
                ),
            ),
        )

    assert exc_info.value.message == reason
    assert course_repository.saves == 0
    assert course_repository.courses[course._id].title == course.title


# ============= Patch =============


@pytest.mark.asyncio
async def test_patch_course_only_supplied_keys(
    patch_course,
    stored_course,
    course_repository,
):
    course = await stored_course(description="Basics", price=15)

    await patch_course(
        PatchCourseRequest(
            course_id=course._id,
            fields=CourseFields(status=CourseStatus.PUBLISHED),
        ),
    )

    stored = course_repository.courses[course._id]
    assert stored.status == CourseStatus.PUBLISHED
    assert stored.title == course.title
    assert stored.description == "Basics"
    assert stored.price == 15
    assert stored.sections == course.sections
    assert stored.created_at == course.created_at


@pytest.mark.asyncio
async def test_patch_course_sections_replace_whole_list(patch_course, stored_course):
    course = await stored_course()
    intro = course.sections[0]

    updated = await patch_course(
        PatchCourseRequest(
            course_id=course._id,
            fields=CourseFields(
                sections=[
                    SectionData(title="Wrap-up"),
                    SectionData(section_id=intro._id, title="Intro"),
                ],
            ),
        ),
    )

    assert [section.title for section in updated.sections] == ["Wrap-up", "Intro"]
    assert [section.order for section in updated.sections] == [0, 1]
    assert updated.sections[1]._id == intro._id
    assert updated.sections[1].lessons == intro.lessons


@pytest.mark.asyncio
async def test_patch_course_invalid_section_changes_nothing(
    patch_course,
    stored_course,
    course_repository,
):
    course = await stored_course()

    with pytest.raises(InvalidPayloadError) as exc_info:
        await patch_course(
            PatchCourseRequest(
                course_id=course._id,
                fields=CourseFields(
                    title="Changed",
                    sections=[SectionData(title="Ok"), SectionData(title="")],
                ),
            ),
        )

    assert exc_info.value.message == "Each section must have a title"
    assert course_repository.courses[course._id].title == course.title
    assert course_repository.saves == 0


@pytest.mark.asyncio
async def test_patch_course_empty_title_rejected(patch_course, stored_course):
    course = await stored_course()

    with pytest.raises(InvalidPayloadError):
        await patch_course(
            PatchCourseRequest(course_id=course._id, fields=CourseFields(title="")),
        )


@pytest.mark.asyncio
async def test_patch_course_by_stranger_leaves_course_untouched(
    patch_course,
    stored_course,
    course_repository,
    identity_provider,
):
    course = await stored_course()
    identity_provider.user_id = STRANGER_ID

    with pytest.raises(AccessDeniedError) as exc_info:
        await patch_course(
            PatchCourseRequest(
                course_id=course._id,
                fields=CourseFields(title="Hijacked"),
            ),
        )

    assert exc_info.value.message == "Not authorized to modify this course"
    assert course_repository.courses[course._id].title == course.title
    assert course_repository.saves == 0


# ============= Delete =============


@pytest.mark.asyncio
async def test_delete_course_twice(delete_course, stored_course, course_repository):
    course = await stored_course()

    await delete_course(DeleteCourseRequest(course_id=course._id))
    assert course._id not in course_repository.courses

    with pytest.raises(EntityNotFoundError):
        await delete_course(DeleteCourseRequest(course_id=course._id))


@pytest.mark.asyncio
async def test_delete_course_by_stranger(
    delete_course,
    stored_course,
    course_repository,
    identity_provider,
):
    course = await stored_course()
    identity_provider.user_id = STRANGER_ID

    with pytest.raises(AccessDeniedError):
        await delete_course(DeleteCourseRequest(course_id=course._id))

    assert course._id in course_repository.courses
