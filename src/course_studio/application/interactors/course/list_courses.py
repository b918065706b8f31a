import logging
from dataclasses import dataclass

from course_studio.application.course_repo import CourseFilter, CourseRepository
from course_studio.application.exceptions.base import (
    InvalidPayloadError,
    InvalidSortFieldError,
)
from course_studio.application.identity import IdentityProvider
from course_studio.domain.course import Course, CourseStatus

logger = logging.getLogger(__name__)

SELF_OWNER_ALIASES = frozenset({"me", "self"})

# Public sort key -> stored field
SORTABLE_FIELDS: dict[str, str] = {
    "title": "title",
    "price": "price",
    "level": "level",
    "category": "category",
    "status": "status",
    "enrolledStudents": "enrolled_students",
    "rating": "ratings.average",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}
_SNAKE_CASE_ALIASES: dict[str, str] = {
    "enrolled_students": "enrolled_students",
    "created_at": "created_at",
    "updated_at": "updated_at",
}

DEFAULT_SORT = "createdAt"
DEFAULT_LIMIT = 10


@dataclass(frozen=True, slots=True, kw_only=True)
class ListCoursesRequest:
    owner: str | None = None
    status: CourseStatus | None = None
    category: str | None = None
    price_min: float | None = None
    price_max: float | None = None
    search: str | None = None
    sort: str = DEFAULT_SORT
    descending: bool = True
    page: int = 1
    limit: int = DEFAULT_LIMIT


@dataclass(slots=True, frozen=True)
class ListCoursesResponse:
    courses: list[Course]
    count: int


def resolve_sort_field(sort: str) -> str:
    field_name = SORTABLE_FIELDS.get(sort) or _SNAKE_CASE_ALIASES.get(sort)

    if field_name is None:
        raise InvalidSortFieldError(
            field_name=sort,
            allowed=tuple(SORTABLE_FIELDS),
        )

    return field_name


@dataclass(slots=True, frozen=True)
class ListCoursesInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider

    async def __call__(
        self,
        request_data: ListCoursesRequest,
    ) -> ListCoursesResponse:
        user_id = self.identity_provider.get_current_user_id()

        if request_data.page < 1 or request_data.limit < 1:
            raise InvalidPayloadError(reason="page and limit must be positive")

        owner_id = request_data.owner
        if owner_id in SELF_OWNER_ALIASES:
            owner_id = user_id

        course_filter = CourseFilter(
            owner_id=owner_id,
            status=request_data.status,
            category=request_data.category,
            price_min=request_data.price_min,
            price_max=request_data.price_max,
            search=request_data.search or None,
        )

        direction = -1 if request_data.descending else 1
        # _id keeps pages stable when the sort key has duplicates
        sort = [
            (resolve_sort_field(request_data.sort), direction),
            ("_id", direction),
        ]
        skip = (request_data.page - 1) * request_data.limit

        logger.info(
            "Listing courses: filter=%s, skip=%s, limit=%s, sort=%s",
            course_filter,
            skip,
            request_data.limit,
            sort,
        )

        count = await self.course_repository.count(course_filter)
        courses = await self.course_repository.get_all(
            course_filter,
            skip=skip,
            limit=request_data.limit,
            sort=sort,
        )

        logger.info("Found %s courses, returning %s", count, len(courses))
        return ListCoursesResponse(courses=courses, count=count)
