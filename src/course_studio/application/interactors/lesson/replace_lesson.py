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
from course_studio.application.payloads import LessonData, build_lesson
from course_studio.application.validation import (
    LESSON_TITLE_REQUIRED,
    parse_lesson,
    require_title,
)
from course_studio.domain.course import Lesson

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplaceLessonRequest:
    course_id: str
    section_id: str
    lesson_id: str
    lesson: LessonData


@dataclass(slots=True, frozen=True)
class ReplaceLessonInteractor:
    """
    Full update of a lesson.

    Unlike sections, omitted fields are reset to their creation
    defaults. Only the position survives unless a new one is given.
    """

    course_repository: CourseRepository
    identity_provider: IdentityProvider
    id_generator: IdGenerator

    async def __call__(self, request_data: ReplaceLessonRequest) -> Lesson:
        user_id = self.identity_provider.get_current_user_id()
        ensure_valid_ids(
            self.id_generator,
            request_data.course_id,
            request_data.section_id,
            request_data.lesson_id,
        )

        logger.info("Replacing lesson: %s", request_data.lesson_id)

        course = await load_course(self.course_repository, request_data.course_id)
        ensure_owner(course, user_id)
        section = get_section(course, request_data.section_id)
        lesson = get_lesson(section, request_data.lesson_id)

        require_title(request_data.lesson.title, LESSON_TITLE_REQUIRED)
        data = parse_lesson(request_data.lesson)

        replacement = build_lesson(lesson._id, data, lesson.order)  # noqa: SLF001
        position = section.lessons.index(lesson)
        section.lessons[position] = replacement

        if data.order is not None:
            section.move_lesson(replacement, data.order)

        course.touch()
        await self.course_repository.save(course)

        logger.info("Lesson replaced: %s", request_data.lesson_id)
        return replacement
