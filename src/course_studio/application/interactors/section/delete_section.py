import logging
from dataclasses import dataclass

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import get_section, load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class DeleteSectionRequest:
    course_id: str
    section_id: str


@dataclass(slots=True, frozen=True)
class DeleteSectionInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: DeleteSectionRequest) -> None:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(
            self.id_generator,
            request_data.course_id,
            request_data.section_id,
        )

        logger.info(
            "Deleting section %s of course %s",
            request_data.section_id,
            request_data.course_id,
        )

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)
        get_section(course, request_data.section_id)

        course.remove_section(request_data.section_id)
        course.touch()

        await self.course_repository.save(course)

        logger.info(
            "Section deleted: %s, %s sections left",
            request_data.section_id,
            len(course.sections),
        )
