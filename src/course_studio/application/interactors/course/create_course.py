import logging
from dataclasses import dataclass
from typing import Any

from course_studio.application.course_repo import CourseRepository
from course_studio.application.identity import IdentityProvider
from course_studio.application.payloads import unique_tags
from course_studio.application.validation import (
    COURSE_TITLE_REQUIRED,
    parse_choice,
    parse_number,
    parse_tags,
    parse_text,
    require_title,
)
from course_studio.domain.course import Course, CourseLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateCourseRequest:
    title: Any = None
    description: Any = None
    price: Any = None
    thumbnail_url: Any = None
    level: Any = None
    category: Any = None
    tags: Any = None


@dataclass(slots=True, frozen=True)
class CreateCourseInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider

    async def __call__(
        self,
        request_data: CreateCourseRequest,
    ) -> Course:
        user_id = self.identity_provider.get_current_user_id()
        logger.info("Creating course for user: %s", user_id)

        title = require_title(request_data.title, COURSE_TITLE_REQUIRED)
        price = parse_number(request_data.price, "Price")
        level = parse_choice(CourseLevel, request_data.level, "Level")
        description = parse_text(request_data.description, "Description")
        thumbnail_url = parse_text(request_data.thumbnail_url, "Thumbnail URL")
        category = parse_text(request_data.category, "Category")
        tags = parse_tags(request_data.tags)

        # New courses always start as drafts with no content
        course = Course(
            title=title,
            owner_id=user_id,
            description=description or "",
            price=price or 0.0,
            thumbnail_url=thumbnail_url,
            level=level or CourseLevel.BEGINNER,
            category=category or "Other",
            tags=unique_tags(tags or []),
        )

        await self.course_repository.add(course)

        logger.info("Course created: %s with ID: %s", course.title, course._id)  # noqa: SLF001
        return course
