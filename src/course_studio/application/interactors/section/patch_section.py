import logging
from dataclasses import dataclass
from typing import Any

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import get_section, load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.application.payloads import build_lessons
from course_studio.application.validation import (
    SECTION_TITLE_REQUIRED,
    parse_position,
    parse_text,
    require_title,
    validate_lessons,
)
from course_studio.domain.course import Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class PatchSectionRequest:
    course_id: str
    section_id: str
    title: Any = None
    description: Any = None
    lessons: Any = None
    order: Any = None


@dataclass(slots=True, frozen=True)
class PatchSectionInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: PatchSectionRequest) -> Section:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(
            self.id_generator,
            request_data.course_id,
            request_data.section_id,
        )

        logger.info(
            "Patching section %s of course %s",
            request_data.section_id,
            request_data.course_id,
        )

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)
        section = get_section(course, request_data.section_id)

        # Validate everything first: a rejected patch changes nothing
        if request_data.title is not None:
            require_title(request_data.title, SECTION_TITLE_REQUIRED)
        description = parse_text(request_data.description, "Description")
        order = parse_position(request_data.order)
        lessons = None
        if request_data.lessons is not None:
            lessons = validate_lessons(request_data.lessons)

        if request_data.title is not None:
            section.title = request_data.title

        if description is not None:
            section.description = description

        if lessons is not None:
            section.replace_lessons(
                build_lessons(
                    lessons,
                    section.lessons,
                    self.id_generator,
                ),
            )

        if order is not None:
            course.move_section(section, order)

        course.touch()
        await self.course_repository.save(course)

        logger.info("Section patched: %s", request_data.section_id)
        return section
