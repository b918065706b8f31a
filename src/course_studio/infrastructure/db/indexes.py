import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, TEXT

logger = logging.getLogger(__name__)


async def ensure_course_indexes(
    collection: AsyncIOMotorCollection[dict[str, Any]],
) -> None:
    """Create indexes used by course listing, no-op when they exist"""
    await collection.create_index([("title", TEXT), ("description", TEXT)])
    await collection.create_index([("owner_id", ASCENDING)])
    await collection.create_index([("category", ASCENDING)])
    await collection.create_index([("level", ASCENDING)])
    await collection.create_index([("status", ASCENDING)])
    await collection.create_index([("price", ASCENDING)])
    await collection.create_index([("created_at", DESCENDING)])

    logger.info("Indexes ensured for collection '%s'", collection.name)
