import logging
from dataclasses import dataclass

from course_studio.application.course_lookup import load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.domain.course import Course

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class GetCourseRequest:
    course_id: str


@dataclass(slots=True, frozen=True)
class GetCourseInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: GetCourseRequest) -> Course:
        self.identity_provider.get_current_user_id()
        ensure_valid_ids(self.id_generator, request_data.course_id)

        logger.info("Getting course: %s", request_data.course_id)
        course = await load_course(self.course_repository, request_data.course_id)

        logger.info("Course found: %s", course.title)
        return course
