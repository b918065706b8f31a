from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from starlette import status

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
from course_studio.presentation.api.base_schema import MessageResponse
from course_studio.presentation.api.lesson.schema import (
    LessonPayloadSchema,
    LessonResponse,
    LessonSchema,
    LessonsResponse,
)

lesson_router = APIRouter(
    prefix="/courses/{course_id}/sections/{section_id}/lessons",
    tags=["lessons"],
)


@lesson_router.get(
    "",
    status_code=status.HTTP_200_OK,
)
@inject
async def list_lessons(
    course_id: str,
    section_id: str,
    interactor: FromDishka[ListLessonsInteractor],
) -> LessonsResponse:
    lessons = await interactor(
        ListLessonsRequest(course_id=course_id, section_id=section_id),
    )

    return LessonsResponse(
        lessons=[LessonSchema.model_validate(lesson) for lesson in lessons],
    )


@lesson_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
@inject
async def create_lesson(
    course_id: str,
    section_id: str,
    request_schema: LessonPayloadSchema,
    interactor: FromDishka[CreateLessonInteractor],
) -> LessonResponse:
    lesson = await interactor(
        CreateLessonRequest(
            course_id=course_id,
            section_id=section_id,
            lesson=request_schema.to_data(),
        ),
    )

    return LessonResponse(
        message="Lesson added successfully",
        lesson=LessonSchema.model_validate(lesson),
    )


@lesson_router.get(
    "/{lesson_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def get_lesson(
    course_id: str,
    section_id: str,
    lesson_id: str,
    interactor: FromDishka[GetLessonInteractor],
) -> LessonResponse:
    lesson = await interactor(
        GetLessonRequest(
            course_id=course_id,
            section_id=section_id,
            lesson_id=lesson_id,
        ),
    )

    return LessonResponse(lesson=LessonSchema.model_validate(lesson))


@lesson_router.put(
    "/{lesson_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def replace_lesson(
    course_id: str,
    section_id: str,
    lesson_id: str,
    request_schema: LessonPayloadSchema,
    interactor: FromDishka[ReplaceLessonInteractor],
) -> LessonResponse:
    """
    Replace lesson by ID

    Omitted fields are reset to defaults, order is kept unless given
    """
    lesson = await interactor(
        ReplaceLessonRequest(
            course_id=course_id,
            section_id=section_id,
            lesson_id=lesson_id,
            lesson=request_schema.to_data(),
        ),
    )

    return LessonResponse(
        message="Lesson updated successfully",
        lesson=LessonSchema.model_validate(lesson),
    )


@lesson_router.patch(
    "/{lesson_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def patch_lesson(
    course_id: str,
    section_id: str,
    lesson_id: str,
    request_schema: LessonPayloadSchema,
    interactor: FromDishka[PatchLessonInteractor],
) -> LessonResponse:
    lesson = await interactor(
        PatchLessonRequest(
            course_id=course_id,
            section_id=section_id,
            lesson_id=lesson_id,
            lesson=request_schema.to_data(),
        ),
    )

    return LessonResponse(
        message="Lesson updated successfully",
        lesson=LessonSchema.model_validate(lesson),
    )


@lesson_router.delete(
    "/{lesson_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_lesson(
    course_id: str,
    section_id: str,
    lesson_id: str,
    interactor: FromDishka[DeleteLessonInteractor],
) -> MessageResponse:
    await interactor(
        DeleteLessonRequest(
            course_id=course_id,
            section_id=section_id,
            lesson_id=lesson_id,
        ),
    )

    return MessageResponse(message="Lesson deleted successfully")
