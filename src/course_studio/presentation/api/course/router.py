from typing import Literal

from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter, Query
from starlette import status

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
from course_studio.application.interactors.course.list_courses import (
    DEFAULT_LIMIT,
    DEFAULT_SORT,
    ListCoursesInteractor,
    ListCoursesRequest,
)
from course_studio.application.interactors.course.patch_course import (
    PatchCourseInteractor,
    PatchCourseRequest,
)
from course_studio.application.interactors.course.replace_course import (
    ReplaceCourseInteractor,
    ReplaceCourseRequest,
)
from course_studio.domain.course import CourseStatus
from course_studio.presentation.api.base_schema import MessageResponse
from course_studio.presentation.api.course.schema import (
    CourseFieldsSchema,
    CourseResponse,
    CourseSchema,
    CoursesResponse,
    CreateCourseRequestSchema,
)

course_router = APIRouter(prefix="/courses", tags=["courses"])


@course_router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def list_courses(
    interactor: FromDishka[ListCoursesInteractor],
    owner: str | None = Query(None, description="Owner id, or 'me'"),
    course_status: CourseStatus | None = Query(None, alias="status"),
    category: str | None = None,
    price_min: float | None = None,
    price_max: float | None = None,
    search: str | None = None,
    sort: str = DEFAULT_SORT,
    order: Literal["asc", "desc"] = "desc",
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
) -> CoursesResponse:
    """
    List courses

    Filters are combined with AND. Search matches title or description,
    case-insensitive. count is the total number of matches.
    """
    result = await interactor(
        ListCoursesRequest(
            owner=owner,
            status=course_status,
            category=category,
            price_min=price_min,
            price_max=price_max,
            search=search,
            sort=sort,
            descending=order == "desc",
            page=page,
            limit=limit,
        ),
    )

    return CoursesResponse(
        courses=[CourseSchema.model_validate(course) for course in result.courses],
        count=result.count,
    )


@course_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
@inject
async def create_course(
    request_schema: CreateCourseRequestSchema,
    interactor: FromDishka[CreateCourseInteractor],
) -> CourseResponse:
    course = await interactor(
        CreateCourseRequest(
            title=request_schema.title,
            description=request_schema.description,
            price=request_schema.price,
            thumbnail_url=request_schema.thumbnail_url,
            level=request_schema.level,
            category=request_schema.category,
            tags=request_schema.tags,
        ),
    )

    return CourseResponse(
        message="Course created successfully",
        course=CourseSchema.model_validate(course),
    )


@course_router.get(
    "/{course_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def get_course(
    course_id: str,
    interactor: FromDishka[GetCourseInteractor],
) -> CourseResponse:
    """
    Get course by ID

    Returns the whole aggregate with sections and lessons
    """
    course = await interactor(GetCourseRequest(course_id=course_id))

    return CourseResponse(course=CourseSchema.model_validate(course))


@course_router.put(
    "/{course_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def replace_course(
    course_id: str,
    request_schema: CourseFieldsSchema,
    interactor: FromDishka[ReplaceCourseInteractor],
) -> CourseResponse:
    """
    Replace course by ID

    Title is required. Omitted optional fields keep their values.
    """
    course = await interactor(
        ReplaceCourseRequest(
            course_id=course_id,
            fields=request_schema.to_fields(),
        ),
    )

    return CourseResponse(
        message="Course updated successfully",
        course=CourseSchema.model_validate(course),
    )


@course_router.patch(
    "/{course_id}",
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@inject
async def patch_course(
    course_id: str,
    request_schema: CourseFieldsSchema,
    interactor: FromDishka[PatchCourseInteractor],
) -> CourseResponse:
    """
    Update course by ID

    Updates only provided fields. A provided sections list
    replaces the whole list.
    """
    course = await interactor(
        PatchCourseRequest(
            course_id=course_id,
            fields=request_schema.to_fields(),
        ),
    )

    return CourseResponse(
        message="Course updated successfully",
        course=CourseSchema.model_validate(course),
    )


@course_router.delete(
    "/{course_id}",
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_course(
    course_id: str,
    interactor: FromDishka[DeleteCourseInteractor],
) -> MessageResponse:
    await interactor(DeleteCourseRequest(course_id=course_id))

    return MessageResponse(message="Course deleted successfully")
