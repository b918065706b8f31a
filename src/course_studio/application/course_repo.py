from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol

from course_studio.domain.course import Course, CourseStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class CourseFilter:
    """Критерии отбора курсов, все условия объединяются через AND"""

    owner_id: str | None = None
    status: CourseStatus | None = None
    category: str | None = None
    price_min: float | None = None
    price_max: float | None = None
    search: str | None = None


class CourseRepository(Protocol):
    @abstractmethod
    async def add(self, course: Course) -> None:
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, course_id: str) -> Course | None:
        raise NotImplementedError

    @abstractmethod
    async def save(self, course: Course) -> None:
        """Replace the whole stored aggregate with the given one"""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, course_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def get_all(
            self,
            course_filter: CourseFilter,
            skip: int = 0,
            limit: int = 0,
            sort: list[tuple[str, int]] | None = None,
    ) -> list[Course]:
        raise NotImplementedError

    @abstractmethod
    async def count(self, course_filter: CourseFilter) -> int:
        raise NotImplementedError
