# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import DetectionFields, TimelineFields


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get MongoDB client instance (singleton pattern)

    Returns:
        MongoDB client, shared by the database handle and transaction sessions
    """
    global _mongo_client

    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    return _mongo_client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_database = get_client()[settings.mongo_database_name]
    return _mongo_database


def get_inspection_collection() -> AsyncIOMotorCollection:
    """
    Get inspections collection from MongoDB

    Returns:
        MongoDB collection for inspections
    """
    return get_database()["inspections"]


def get_detection_collection() -> AsyncIOMotorCollection:
    """
    Get inspection detections collection from MongoDB

    Returns:
        MongoDB collection for detections
    """
    return get_database()["inspection_detections"]


def get_timeline_collection() -> AsyncIOMotorCollection:
    """
    Get detection timeline collection from MongoDB

    Returns:
        MongoDB collection for timeline events
    """
    return get_database()["inspection_timeline"]


async def ensure_indexes() -> None:
    """Create the lookup indexes used by the detection and timeline queries"""
    await get_detection_collection().create_index(
        [(DetectionFields.INSPECTION_NUMBER, ASCENDING)]
    )
    await get_timeline_collection().create_index(
        [(TimelineFields.INSPECTION_NUMBER, ASCENDING), (TimelineFields.CREATED_AT, DESCENDING)]
    )
    await get_timeline_collection().create_index(
        [(TimelineFields.DETECTION_ID, ASCENDING), (TimelineFields.CREATED_AT, DESCENDING)]
    )


def close_connection() -> None:
    """Close the MongoDB client (call on application shutdown)"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
