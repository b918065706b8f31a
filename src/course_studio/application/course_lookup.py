import logging

from course_studio.application.course_repo import CourseRepository
from course_studio.application.exceptions.base import EntityNotFoundError
from course_studio.domain.course import Course, Lesson, Section

logger = logging.getLogger(__name__)


async def load_course(
        course_repository: CourseRepository,
        course_id: str,
) -> Course:
    course = await course_repository.get_by_id(course_id)

    if course is None:
        logger.info("Course not found: %s", course_id)
        raise EntityNotFoundError(
            entity_type=Course,
            field_name="_id",
            field_value=course_id,
        )

    return course


def get_section(course: Course, section_id: str) -> Section:
    section = course.find_section(section_id)

    if section is None:
        logger.info("Section %s not found in course %s", section_id, course._id)  # noqa: SLF001
        raise EntityNotFoundError(
            entity_type=Section,
            field_name="_id",
            field_value=section_id,
        )

    return section


def get_lesson(section: Section, lesson_id: str) -> Lesson:
    lesson = section.find_lesson(lesson_id)

    if lesson is None:
        logger.info("Lesson %s not found in section %s", lesson_id, section._id)  # noqa: SLF001
        raise EntityNotFoundError(
            entity_type=Lesson,
            field_name="_id",
            field_value=lesson_id,
        )

    return lesson
