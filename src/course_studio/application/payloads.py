from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from course_studio.application.id_generator import IdGenerator
from course_studio.domain.course import Course, Lesson, LessonType, Section


@dataclass(frozen=True, slots=True, kw_only=True)
class LessonData:
    """
    Lesson as supplied by a client, None marks an absent key.

    Values arrive untyped, validation.parse_lesson returns a typed copy.
    """

    lesson_id: Any = None
    title: Any = None
    type: Any = None
    content: Any = None
    video_url: Any = None
    duration: Any = None
    is_preview: Any = None
    order: Any = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SectionData:
    section_id: Any = None
    title: Any = None
    description: Any = None
    lessons: Any = None
    order: Any = None


def unique_tags(tags: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(tags))


def build_lesson(lesson_id: str, data: LessonData, order: int = 0) -> Lesson:
    """Build a lesson, absent fields take creation defaults"""
    return Lesson(
        _id=lesson_id,
        title=data.title or "",
        order=order,
        type=data.type or LessonType.VIDEO,
        content=data.content or "",
        video_url=data.video_url or "",
        duration=data.duration or 0,
        is_preview=data.is_preview or False,
    )


@dataclass
class _IdAllocator:
    """
    Keeps a requested id only if it names an existing sibling
    and has not been claimed yet, otherwise allocates a fresh one.
    """

    id_generator: IdGenerator
    known: set[str]
    used: set[str]

    def allocate(self, requested: str | None) -> str:
        if requested in self.known and requested not in self.used:
            self.used.add(requested)
            return requested

        new_id = self.id_generator.new_id()
        self.used.add(new_id)
        return new_id


def build_lessons(
        lessons: Sequence[LessonData],
        existing: Sequence[Lesson],
        id_generator: IdGenerator,
) -> list[Lesson]:
    allocator = _IdAllocator(
        id_generator=id_generator,
        known={lesson._id for lesson in existing},  # noqa: SLF001
        used=set(),
    )
    return [
        build_lesson(allocator.allocate(data.lesson_id), data, order=position)
        for position, data in enumerate(lessons)
    ]


def build_sections(
        sections: Sequence[SectionData],
        existing: Sequence[Section],
        id_generator: IdGenerator,
) -> list[Section]:
    """
    Build a replacement section list.

    A section that keeps the id of an existing one also keeps its
    description and lessons when those keys are absent.
    """
    existing_by_id = {section._id: section for section in existing}  # noqa: SLF001
    allocator = _IdAllocator(
        id_generator=id_generator,
        known=set(existing_by_id),
        used=set(),
    )

    result = []
    for position, data in enumerate(sections):
        section_id = allocator.allocate(data.section_id)
        previous = existing_by_id.get(section_id)

        if data.lessons is not None:
            lessons = build_lessons(
                data.lessons,
                previous.lessons if previous else [],
                id_generator,
            )
        else:
            lessons = previous.lessons if previous else []

        if data.description is not None:
            description = data.description
        else:
            description = previous.description if previous else ""

        result.append(
            Section(
                _id=section_id,
                title=data.title or "",
                order=position,
                description=description,
                lessons=lessons,
            ),
        )

    return result


@dataclass(frozen=True, slots=True, kw_only=True)
class CourseFields:
    """
    Patchable course fields, None marks an absent key.

    cleared names nullable fields explicitly sent as null.
    """

    title: Any = None
    description: Any = None
    price: Any = None
    thumbnail_url: Any = None
    level: Any = None
    category: Any = None
    tags: Any = None
    status: Any = None
    sections: Any = None
    cleared: frozenset[str] = field(default_factory=frozenset)


def apply_course_fields(
        course: Course,
        fields: CourseFields,
        id_generator: IdGenerator,
) -> None:
    """Shallow merge: a present key replaces the whole value"""
    if fields.title is not None:
        course.title = fields.title

    if fields.description is not None:
        course.description = fields.description

    if fields.price is not None:
        course.price = fields.price

    if fields.thumbnail_url is not None:
        course.thumbnail_url = fields.thumbnail_url
    elif "thumbnail_url" in fields.cleared:
        course.thumbnail_url = None

    if fields.level is not None:
        course.level = fields.level

    if fields.category is not None:
        course.category = fields.category

    if fields.tags is not None:
        course.tags = unique_tags(fields.tags)

    if fields.status is not None:
        course.status = fields.status

    if fields.sections is not None:
        course.replace_sections(
            build_sections(fields.sections, course.sections, id_generator),
        )
