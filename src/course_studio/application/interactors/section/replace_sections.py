import logging
from dataclasses import dataclass
from typing import Any

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.exceptions.base import InvalidPayloadError
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.application.payloads import build_sections
from course_studio.application.validation import (
    SECTIONS_REQUIRED,
    validate_sections,
)
from course_studio.domain.course import Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplaceSectionsRequest:
    course_id: str
    sections: Any = None


@dataclass(slots=True, frozen=True)
class ReplaceSectionsInteractor:
    """Bulk update of a course's sections, list position becomes the order"""

    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(
        self,
        request_data: ReplaceSectionsRequest,
    ) -> list[Section]:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(self.id_generator, request_data.course_id)

        logger.info("Replacing sections of course: %s", request_data.course_id)

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)

        if request_data.sections is None:
            raise InvalidPayloadError(reason=SECTIONS_REQUIRED)
        sections = validate_sections(request_data.sections)

        course.replace_sections(
            build_sections(sections, course.sections, self.id_generator),
        )
        course.touch()

        await self.course_repository.save(course)

        logger.info(
            "Course %s now has %s sections",
            request_data.course_id,
            len(course.sections),
        )
        return course.sections
