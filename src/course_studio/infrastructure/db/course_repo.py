import logging
from dataclasses import dataclass
from typing import Any

from adaptix import Retort
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from course_studio.application.course_repo import CourseFilter, CourseRepository
from course_studio.application.exceptions.base import (
    EntityNotFoundError,
    PersistenceError,
)
from course_studio.domain.course import Course
from course_studio.infrastructure.db.query_builder import build_course_filter

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MongoCourseRepository(CourseRepository):
    """Each course is stored as one document, sections and lessons embedded"""

    collection: AsyncIOMotorCollection[dict[str, Any]]
    retort: Retort

    def _dump(self, course: Course) -> dict[str, Any]:
        course_dict = self.retort.dump(course)
        course_dict.pop("_id", None)
        return course_dict

    async def add(self, course: Course) -> None:
        try:
            result = await self.collection.insert_one(self._dump(course))
        except PyMongoError as e:
            logger.exception("Failed to insert course")
            raise PersistenceError(operation="insert") from e

        course._id = str(result.inserted_id)  # noqa: SLF001
        logger.info("Course added with ID: %s", result.inserted_id)

    async def get_by_id(self, course_id: str) -> Course | None:
        try:
            course_doc = await self.collection.find_one(
                {"_id": ObjectId(course_id)},
            )
        except PyMongoError as e:
            logger.exception("Failed to load course %s", course_id)
            raise PersistenceError(operation="find") from e

        if not course_doc:
            logger.info("Course not found: %s", course_id)
            return None

        return self.retort.load(course_doc, Course)

    async def save(self, course: Course) -> None:
        course_id = course._id  # noqa: SLF001
        if course_id is None:
            raise EntityNotFoundError(entity_type=Course)

        try:
            result = await self.collection.replace_one(
                {"_id": ObjectId(course_id)},
                self._dump(course),
            )
        except PyMongoError as e:
            logger.exception("Failed to save course %s", course_id)
            raise PersistenceError(operation="replace") from e

        if result.matched_count == 0:
            logger.warning("Course not found for update: %s", course_id)
            raise EntityNotFoundError(
                entity_type=Course,
                field_name="_id",
                field_value=course_id,
            )

        logger.info("Course saved: %s", course_id)

    async def delete(self, course_id: str) -> bool:
        try:
            result = await self.collection.delete_one(
                {"_id": ObjectId(course_id)},
            )
        except PyMongoError as e:
            logger.exception("Failed to delete course %s", course_id)
            raise PersistenceError(operation="delete") from e

        if result.deleted_count == 0:
            logger.warning("Course not found for deletion: %s", course_id)
            return False

        logger.info("Course deleted: %s", course_id)
        return True

    async def get_all(
        self,
        course_filter: CourseFilter,
        skip: int = 0,
        limit: int = 0,
        sort: list[tuple[str, int]] | None = None,
    ) -> list[Course]:
        """
        Получить курсы с фильтрацией, пагинацией и сортировкой

        Args:
            course_filter: критерии отбора
            skip: Количество документов для пропуска
            limit: Максимальное количество документов (0 = без лимита)
            sort: Список кортежей (field, direction),
            где direction: 1=asc, -1=desc
        """
        query = build_course_filter(course_filter)

        cursor = self.collection.find(query)

        if sort:
            cursor = cursor.sort(sort)

        if skip > 0:
            cursor = cursor.skip(skip)

        if limit > 0:
            cursor = cursor.limit(limit)

        try:
            course_docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.exception("Failed to list courses")
            raise PersistenceError(operation="find") from e

        courses = self.retort.load(course_docs, list[Course])

        logger.info("Loaded %s courses with filter: %s", len(courses), query)
        return courses

    async def count(self, course_filter: CourseFilter) -> int:
        query = build_course_filter(course_filter)

        try:
            return await self.collection.count_documents(query)
        except PyMongoError as e:
            logger.exception("Failed to count courses")
            raise PersistenceError(operation="count") from e
