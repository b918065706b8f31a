import logging
from dataclasses import dataclass

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.exceptions.base import EntityNotFoundError
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.domain.course import Course

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class DeleteCourseRequest:
    course_id: str


@dataclass(slots=True, frozen=True)
class DeleteCourseInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: DeleteCourseRequest) -> None:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(self.id_generator, request_data.course_id)

        logger.info("Deleting course: %s", request_data.course_id)

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)

        # Sections and lessons go away with the aggregate
        deleted = await self.course_repository.delete(request_data.course_id)
        if not deleted:
            raise EntityNotFoundError(
                entity_type=Course,
                field_name="_id",
                field_value=request_data.course_id,
            )

        logger.info("Course deleted: %s", request_data.course_id)
