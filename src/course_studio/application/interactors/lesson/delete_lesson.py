import logging
from dataclasses import dataclass

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import (
    get_lesson,
    get_section,
    load_course,
)
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class DeleteLessonRequest:
    course_id: str
    section_id: str
    lesson_id: str


@dataclass(slots=True, frozen=True)
class DeleteLessonInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: DeleteLessonRequest) -> None:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(
            self.id_generator,
            request_data.course_id,
            request_data.section_id,
            request_data.lesson_id,
        )

        logger.info("Deleting lesson: %s", request_data.lesson_id)

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)
        section = get_section(course, request_data.section_id)
        get_lesson(section, request_data.lesson_id)

        section.remove_lesson(request_data.lesson_id)
        course.touch()

        await self.course_repository.save(course)

        logger.info(
            "Lesson deleted: %s, %s lessons left in section %s",
            request_data.lesson_id,
            len(section.lessons),
            request_data.section_id,
        )
