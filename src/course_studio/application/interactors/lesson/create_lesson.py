import logging
from dataclasses import dataclass

from course_studio.application.access import ensure_owner
from course_studio.application.course_lookup import get_section, load_course
from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator, ensure_valid_ids
from course_studio.application.identity import IdentityProvider
from course_studio.application.payloads import LessonData, build_lesson
from course_studio.application.validation import (
    LESSON_TITLE_REQUIRED,
    parse_lesson,
    require_title,
)
from course_studio.domain.course import Lesson

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateLessonRequest:
    course_id: str
    section_id: str
    lesson: LessonData


@dataclass(slots=True, frozen=True)
class CreateLessonInteractor:
    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: CreateLessonRequest) -> Lesson:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(
            self.id_generator,
            request_data.course_id,
            request_data.section_id,
        )

        logger.info("Adding lesson to section: %s", request_data.section_id)

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)
        section = get_section(course, request_data.section_id)

        require_title(request_data.lesson.title, LESSON_TITLE_REQUIRED)
        data = parse_lesson(request_data.lesson)

        lesson = build_lesson(self.id_generator.new_id(), data)
        section.append_lesson(lesson)
        course.touch()

        await self.course_repository.save(course)

        logger.info(
            "Lesson %s added to section %s at position %s",
            lesson._id,  # noqa: SLF001
            request_data.section_id,
            lesson.order,
        )
        return lesson
