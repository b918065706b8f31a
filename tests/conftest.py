from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pytest
from bson import ObjectId

from course_studio.application.course_repo import CourseFilter, CourseRepository
from course_studio.application.exceptions.base import (
    EntityNotFoundError,
    UnauthenticatedError,
)
from course_studio.application.identity import IdentityProvider
from course_studio.domain.course import Course, Lesson, Section
from course_studio.infrastructure.ids import ObjectIdGenerator

OWNER_ID = "owner-1"
STRANGER_ID = "stranger-2"


# ============= Test doubles =============


def _field_value(course: Course, path: str) -> Any:
    value: Any = course
    for part in path.split("."):
        value = getattr(value, part)
    if isinstance(value, Enum):
        return value.value
    return value


def _matches(course: Course, course_filter: CourseFilter) -> bool:
    if course_filter.owner_id is not None and course.owner_id != course_filter.owner_id:
        return False
    if course_filter.status is not None and course.status != course_filter.status:
        return False
    if course_filter.category is not None and course.category != course_filter.category:
        return False
    if course_filter.price_min is not None and course.price < course_filter.price_min:
        return False
    if course_filter.price_max is not None and course.price > course_filter.price_max:
        return False
    if course_filter.search:
        needle = course_filter.search.lower()
        if needle not in course.title.lower() and needle not in course.description.lower():
            return False
    return True


@dataclass
class FakeCourseRepository(CourseRepository):
    """In-memory storage, hands out copies like a real database would"""

    courses: dict[str, Course] = field(default_factory=dict)
    saves: int = 0

    async def add(self, course: Course) -> None:
        course._id = str(ObjectId())
        self.courses[course._id] = deepcopy(course)

    async def get_by_id(self, course_id: str) -> Course | None:
        course = self.courses.get(course_id)
        return deepcopy(course) if course is not None else None

    async def save(self, course: Course) -> None:
        if course._id not in self.courses:
            raise EntityNotFoundError(entity_type=Course)
        self.saves += 1
        self.courses[course._id] = deepcopy(course)

    async def delete(self, course_id: str) -> bool:
        return self.courses.pop(course_id, None) is not None

    async def get_all(
            self,
            course_filter: CourseFilter,
            skip: int = 0,
            limit: int = 0,
            sort: list[tuple[str, int]] | None = None,
    ) -> list[Course]:
        found = [
            course
            for course in self.courses.values()
            if _matches(course, course_filter)
        ]
        # Stable sorts applied from the least significant key
        for path, direction in reversed(sort or []):
            found.sort(
                key=lambda course, path=path: _field_value(course, path),
                reverse=direction < 0,
            )
        found = found[skip:]
        if limit > 0:
            found = found[:limit]
        return deepcopy(found)

    async def count(self, course_filter: CourseFilter) -> int:
        return sum(
            1 for course in self.courses.values() if _matches(course, course_filter)
        )


@dataclass
class StubIdentityProvider(IdentityProvider):
    user_id: str | None = OWNER_ID

    def get_current_user_id(self) -> str:
        if self.user_id is None:
            raise UnauthenticatedError()
        return self.user_id


# ============= Fixtures =============


@pytest.fixture
def course_repository():
    return FakeCourseRepository()


@pytest.fixture
def identity_provider():
    """Caller is the owner unless a test switches user_id"""
    return StubIdentityProvider()


@pytest.fixture
def id_generator():
    return ObjectIdGenerator()


@pytest.fixture
def lesson_factory(id_generator):
    def _create(title: str = "Lesson", order: int = 0, **kwargs: Any) -> Lesson:
        return Lesson(_id=id_generator.new_id(), title=title, order=order, **kwargs)

    return _create


@pytest.fixture
def section_factory(id_generator):
    def _create(
            title: str = "Section",
            order: int = 0,
            lessons: list[Lesson] | None = None,
            **kwargs: Any,
    ) -> Section:
        return Section(
            _id=id_generator.new_id(),
            title=title,
            order=order,
            lessons=lessons or [],
            **kwargs,
        )

    return _create


@pytest.fixture
def stored_course(course_repository, section_factory, lesson_factory):
    """
    Owned course with two sections, the first one holding three lessons.

    Returns an async callable so tests decide when it is persisted.
    """

    async def _store(**kwargs: Any) -> Course:
        intro = section_factory(
            title="Intro",
            order=0,
            description="Welcome",
            lessons=[
                lesson_factory("Setup", 0),
                lesson_factory("Hello", 1),
                lesson_factory("Recap", 2),
            ],
        )
        advanced = section_factory(title="Advanced", order=1)
        course = Course(
            title=kwargs.pop("title", "Python Basics"),
            owner_id=kwargs.pop("owner_id", OWNER_ID),
            sections=[intro, advanced],
            **kwargs,
        )
        await course_repository.add(course)
        return course

    return _store
