import logging
from dataclasses import dataclass

from course_studio.application.course_lookup import get_section, load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.domain.course import Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class GetSectionRequest:
    course_id: str
    section_id: str


@dataclass(slots=True, frozen=True)
class GetSectionInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: GetSectionRequest) -> Section:
        self.identity_provider.get_current_user_id()
        ensure_valid_ids(
            self.id_generator,
            request_data.course_id,
            request_data.section_id,
        )

        logger.info(
            "Getting section %s of course %s",
            request_data.section_id,
            request_data.course_id,
        )

        course = await load_course(self.course_repository, request_data.course_id)
        return get_section(course, request_data.section_id)
