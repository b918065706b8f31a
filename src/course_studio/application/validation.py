import math
from dataclasses import replace
from enum import Enum
from typing import Any, TypeVar

from course_studio.application.exceptions.base import InvalidPayloadError
from course_studio.application.payloads import CourseFields, LessonData, SectionData
from course_studio.domain.course import CourseLevel, CourseStatus, LessonType

COURSE_TITLE_REQUIRED = "Title is required"
SECTION_TITLE_REQUIRED = "Section title is required"
LESSON_TITLE_REQUIRED = "Lesson title is required"
EACH_SECTION_TITLE = "Each section must have a title"
EACH_LESSON_TITLE = "Each lesson must have a title"
SECTIONS_REQUIRED = "Sections array is required"

E = TypeVar("E", bound=Enum)


def require_title(title: Any, reason: str) -> str:
    if title is not None and not isinstance(title, str):
        raise InvalidPayloadError(reason="Title must be a string")
    if title is None or not title.strip():
        raise InvalidPayloadError(reason=reason)
    return title


def parse_text(value: Any, field_name: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise InvalidPayloadError(reason=f"{field_name} must be a string")


def parse_number(value: Any, field_name: str) -> float | None:
    """Числа и числовые строки, отрицательные значения отклоняются"""
    if value is None:
        return None

    if isinstance(value, bool):
        raise InvalidPayloadError(reason=f"{field_name} must be a number")

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            raise InvalidPayloadError(
                reason=f"{field_name} must be a number",
            ) from None
    else:
        raise InvalidPayloadError(reason=f"{field_name} must be a number")

    if not math.isfinite(number):
        raise InvalidPayloadError(reason=f"{field_name} must be a number")
    ensure_non_negative(number, field_name)
    return number


def parse_position(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidPayloadError(reason="Order must be an integer")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, int):
        return value
    raise InvalidPayloadError(reason="Order must be an integer")


def parse_flag(value: Any, field_name: str) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise InvalidPayloadError(reason=f"{field_name} must be true or false")


def parse_choice(enum_type: type[E], value: Any, field_name: str) -> E | None:
    if value is None:
        return None
    try:
        return enum_type(value)
    except (ValueError, TypeError):
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise InvalidPayloadError(
            reason=f"{field_name} must be one of: {allowed}",
        ) from None


def parse_tags(value: Any) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise InvalidPayloadError(reason="Tags must be an array of strings")
    return value


def parse_lesson(lesson: LessonData) -> LessonData:
    """Typed copy of a lesson payload, title presence is checked by callers"""
    return replace(
        lesson,
        lesson_id=parse_text(lesson.lesson_id, "Lesson _id"),
        title=parse_text(lesson.title, "Lesson title"),
        type=parse_choice(LessonType, lesson.type, "Lesson type"),
        content=parse_text(lesson.content, "Content"),
        video_url=parse_text(lesson.video_url, "Video URL"),
        duration=parse_number(lesson.duration, "Duration"),
        is_preview=parse_flag(lesson.is_preview, "isPreview"),
        order=parse_position(lesson.order),
    )


def validate_lessons(lessons: Any) -> list[LessonData]:
    if not isinstance(lessons, list):
        raise InvalidPayloadError(reason="Lessons must be an array")

    parsed = []
    for lesson in lessons:
        if not isinstance(lesson, LessonData):
            raise InvalidPayloadError(reason="Each lesson must be an object")
        require_title(lesson.title, EACH_LESSON_TITLE)
        parsed.append(parse_lesson(lesson))
    return parsed


def parse_section(section: SectionData) -> SectionData:
    return replace(
        section,
        section_id=parse_text(section.section_id, "Section _id"),
        title=parse_text(section.title, "Section title"),
        description=parse_text(section.description, "Description"),
        lessons=(
            validate_lessons(section.lessons)
            if section.lessons is not None
            else None
        ),
        order=parse_position(section.order),
    )


def validate_sections(sections: Any) -> list[SectionData]:
    """Проверить разделы и вложенные уроки до любых изменений"""
    if not isinstance(sections, list):
        raise InvalidPayloadError(reason="Sections must be an array")

    parsed = []
    for section in sections:
        if not isinstance(section, SectionData):
            raise InvalidPayloadError(reason="Each section must be an object")
        require_title(section.title, EACH_SECTION_TITLE)
        parsed.append(parse_section(section))
    return parsed


def parse_course_fields(fields: CourseFields) -> CourseFields:
    return replace(
        fields,
        title=parse_text(fields.title, "Title"),
        description=parse_text(fields.description, "Description"),
        price=parse_number(fields.price, "Price"),
        thumbnail_url=parse_text(fields.thumbnail_url, "Thumbnail URL"),
        level=parse_choice(CourseLevel, fields.level, "Level"),
        category=parse_text(fields.category, "Category"),
        tags=parse_tags(fields.tags),
        status=parse_choice(CourseStatus, fields.status, "Status"),
        sections=(
            validate_sections(fields.sections)
            if fields.sections is not None
            else None
        ),
    )


def ensure_non_negative(value: float | None, field_name: str) -> None:
    if value is not None and value < 0:
        raise InvalidPayloadError(reason=f"{field_name} must not be negative")
