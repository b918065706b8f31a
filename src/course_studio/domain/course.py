from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from course_studio.domain.ordering import move, reindex


def utc_now() -> datetime:
    return datetime.now(UTC)


class CourseStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class CourseLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class LessonType(str, Enum):
    VIDEO = "video"
    TEXT = "text"
    QUIZ = "quiz"


@dataclass
class Lesson:
    _id: str
    title: str
    order: int = 0
    type: LessonType = LessonType.VIDEO
    content: str = ""
    video_url: str = ""
    duration: float = 0.0
    is_preview: bool = False


@dataclass
class Section:
    _id: str
    title: str
    order: int = 0
    description: str = ""
    lessons: list[Lesson] = field(default_factory=list)

    def find_lesson(self, lesson_id: str) -> Lesson | None:
        return next(
            (lesson for lesson in self.lessons if lesson._id == lesson_id),  # noqa: SLF001
            None,
        )

    def append_lesson(self, lesson: Lesson) -> None:
        lesson.order = len(self.lessons)
        self.lessons.append(lesson)

    def replace_lessons(self, lessons: list[Lesson]) -> None:
        self.lessons = lessons
        reindex(self.lessons)

    def move_lesson(self, lesson: Lesson, position: int) -> None:
        move(self.lessons, lesson, position)

    def remove_lesson(self, lesson_id: str) -> bool:
        lesson = self.find_lesson(lesson_id)
        if lesson is None:
            return False

        self.lessons.remove(lesson)
        reindex(self.lessons)
        return True


@dataclass
class Ratings:
    average: float = 0.0
    count: int = 0


@dataclass
class Course:
    """Course aggregate: sections and lessons live only inside it"""

    title: str
    owner_id: str
    _id: str | None = None
    description: str = ""
    price: float = 0.0
    thumbnail_url: str | None = None
    level: CourseLevel = CourseLevel.BEGINNER
    category: str = "Other"
    tags: list[str] = field(default_factory=list)
    status: CourseStatus = CourseStatus.DRAFT
    sections: list[Section] = field(default_factory=list)
    enrolled_students: int = 0
    ratings: Ratings = field(default_factory=Ratings)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def find_section(self, section_id: str) -> Section | None:
        return next(
            (
                section
                for section in self.sections
                if section._id == section_id  # noqa: SLF001
            ),
            None,
        )

    def append_section(self, section: Section) -> None:
        section.order = len(self.sections)
        self.sections.append(section)

    def replace_sections(self, sections: list[Section]) -> None:
        self.sections = sections
        reindex(self.sections)

    def move_section(self, section: Section, position: int) -> None:
        move(self.sections, section, position)

    def remove_section(self, section_id: str) -> bool:
        section = self.find_section(section_id)
        if section is None:
            return False

        self.sections.remove(section)
        reindex(self.sections)
        return True

    def touch(self) -> None:
        self.updated_at = utc_now()
