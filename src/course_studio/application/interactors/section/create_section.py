import logging
from dataclasses import dataclass
from typing import Any

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.application.validation import (
    SECTION_TITLE_REQUIRED,
    parse_text,
    require_title,
)
from course_studio.domain.course import Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateSectionRequest:
    course_id: str
    title: Any = None
    description: Any = None


@dataclass(slots=True, frozen=True)
class CreateSectionInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: CreateSectionRequest) -> Section:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(self.id_generator, request_data.course_id)

        logger.info("Adding section to course: %s", request_data.course_id)

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)

        title = require_title(request_data.title, SECTION_TITLE_REQUIRED)
        description = parse_text(request_data.description, "Description")

        section = Section(
            _id=self.id_generator.new_id(),
            title=title,
            description=description or "",
        )
        course.append_section(section)
        course.touch()

        await self.course_repository.save(course)

        logger.info(
            "Section %s added to course %s at position %s",
            section._id,  # noqa: SLF001
            request_data.course_id,
            section.order,
        )
        return section
