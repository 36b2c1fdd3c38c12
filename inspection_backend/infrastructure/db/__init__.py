from .mongo_connection import (
    get_client,
    get_database,
    get_inspection_collection,
    get_detection_collection,
    get_timeline_collection,
    ensure_indexes,
    close_connection,
)
from .mongo_detection_repository import MongoDetectionRepository
from .mongo_timeline_repository import MongoTimelineRepository
from .mongo_inspection_repository import MongoInspectionRepository
from .mongo_transaction_manager import MongoTransactionManager

__all__ = [
    "get_client",
    "get_database",
    "get_inspection_collection",
    "get_detection_collection",
    "get_timeline_collection",
    "ensure_indexes",
    "close_connection",
    "MongoDetectionRepository",
    "MongoTimelineRepository",
    "MongoInspectionRepository",
    "MongoTransactionManager",
]
