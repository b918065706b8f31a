import logging
from dataclasses import dataclass

from course_studio.application.course_lookup import get_section, load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.domain.course import Lesson

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ListLessonsRequest:
    course_id: str
    section_id: str


@dataclass(slots=True, frozen=True)
class ListLessonsInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: ListLessonsRequest) -> list[Lesson]:
        self.identity_provider.get_current_user_id()
        ensure_valid_ids(
            self.id_generator,
            request_data.course_id,
            request_data.section_id,
        )

        course = await load_course(self.course_repository, request_data.course_id)
        section = get_section(course, request_data.section_id)

        logger.info(
            "%s lessons retrieved for section %s",
            len(section.lessons),
            request_data.section_id,
        )
        return section.lessons
