import logging
from collections.abc import AsyncIterator
from datetime import datetime
from typing import Any

from adaptix import P, Retort, dumper, loader, name_mapping
from bson import ObjectId
from dishka import Provider, Scope, provide
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from starlette.requests import Request

from course_studio.application.course_repo import CourseRepository
from course_studio.application.id_generator import IdGenerator
from course_studio.application.identity import IdentityProvider
from course_studio.bootstrap.configs import AuthConfig, MongoDBConfig
from course_studio.domain.course import Course, Lesson, Section
from course_studio.infrastructure.db.course_repo import MongoCourseRepository
from course_studio.infrastructure.db.indexes import ensure_course_indexes
from course_studio.infrastructure.identity import HeaderIdentityProvider
from course_studio.infrastructure.ids import ObjectIdGenerator

logger = logging.getLogger(__name__)


def build_mongo_retort() -> Retort:
    return Retort(
        recipe=[
            loader(
                P[Course]._id,  # noqa: SLF001
                lambda x: str(x) if isinstance(x, ObjectId) else x,
            ),
            # _id is private by name, keep it on dump and load
            name_mapping(Course, skip=()),
            name_mapping(Section, skip=()),
            name_mapping(Lesson, skip=()),
            # BSON stores datetimes natively
            loader(datetime, lambda x: x),
            dumper(datetime, lambda x: x),
        ],
    )


class InfrastructureProvider(Provider):
    scope = Scope.REQUEST

    id_generator = provide(
        ObjectIdGenerator,
        provides=IdGenerator,
        scope=Scope.APP,
    )

    @provide(scope=Scope.APP)
    async def get_mongo_client(
        self,
        config: MongoDBConfig,
    ) -> AsyncIterator[AsyncIOMotorClient[dict[str, Any]]]:
        client: AsyncIOMotorClient[dict[str, Any]] = AsyncIOMotorClient(
            config.uri,
            tz_aware=True,
        )
        logger.debug("MongoDB client was initialized")
        yield client
        client.close()
        logger.debug("MongoDB client was closed")

    @provide(scope=Scope.APP)
    def get_database(
        self,
        client: AsyncIOMotorClient[dict[str, Any]],
        config: MongoDBConfig,
    ) -> AsyncIOMotorDatabase[dict[str, Any]]:
        database = client[config.db_name]
        logger.debug("Database '%s' was initialized", config.db_name)
        return database

    @provide(scope=Scope.APP)
    async def get_collection(
        self,
        database: AsyncIOMotorDatabase[dict[str, Any]],
        config: MongoDBConfig,
    ) -> AsyncIOMotorCollection[dict[str, Any]]:
        collection = database[config.collection_name]
        await ensure_course_indexes(collection)
        return collection

    @provide(scope=Scope.APP)
    def get_mongo_retort(self) -> Retort:
        return build_mongo_retort()

    @provide
    def get_course_repository(
        self,
        collection: AsyncIOMotorCollection[dict[str, Any]],
        retort: Retort,
    ) -> CourseRepository:
        return MongoCourseRepository(collection=collection, retort=retort)

    @provide
    def get_identity_provider(
        self,
        request: Request,
        config: AuthConfig,
    ) -> IdentityProvider:
        return HeaderIdentityProvider(
            request=request,
            header_name=config.user_id_header,
        )
