# Standard library imports
from datetime import timedelta
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RepositoryError, ValidationError
from ...domain.repositories.timeline_repository import TimelineRepository
from ...domain.models.timeline_event import TimelineEvent, TimelineEventType
from ...domain.constants import TimelineFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_timeline_collection

# Newest first; _id breaks ties between events stamped in the same millisecond
_NEWEST_FIRST = [(TimelineFields.CREATED_AT, -1), (TimelineFields.MONGO_ID, -1)]


class MongoTimelineRepository(TimelineRepository):
    """MongoDB implementation of TimelineRepository"""

    def __init__(self, timeline_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.timeline_collection = (
            timeline_collection if timeline_collection is not None else get_timeline_collection()
        )

    async def append(
        self,
        detection_id: Optional[str],
        inspection_number: str,
        event_type: str,
        author: str,
        comment: str,
        session: Optional[Any] = None,
    ) -> TimelineEvent:
        if event_type not in TimelineEventType.ALL:
            raise ValidationError(f"Unknown timeline event type: {event_type}")

        now = utc_now()
        # BSON dates hold milliseconds; round up so the stamp is never before the call
        remainder = now.microsecond % 1000
        created_at = now + timedelta(microseconds=1000 - remainder) if remainder else now

        doc = {
            TimelineFields.DETECTION_ID: detection_id,
            TimelineFields.INSPECTION_NUMBER: inspection_number,
            TimelineFields.TYPE: event_type,
            TimelineFields.AUTHOR: author,
            TimelineFields.COMMENT: comment,
            TimelineFields.CREATED_AT: created_at,
        }
        try:
            result = await self.timeline_collection.insert_one(doc, session=session)
        except PyMongoError as e:
            raise RepositoryError(f"Error appending timeline event: {str(e)}", operation="append")

        return TimelineEvent(
            id=str(result.inserted_id),
            detection_id=detection_id,
            inspection_number=inspection_number,
            type=event_type,
            author=author,
            comment=comment,
            created_at=created_at,
        )

    async def list_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> List[TimelineEvent]:
        return await self._list({TimelineFields.INSPECTION_NUMBER: inspection_number}, session)

    async def list_by_detection(
        self, detection_id: str, session: Optional[Any] = None
    ) -> List[TimelineEvent]:
        return await self._list({TimelineFields.DETECTION_ID: detection_id}, session)

    async def delete_all_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> int:
        try:
            result = await self.timeline_collection.delete_many(
                {TimelineFields.INSPECTION_NUMBER: inspection_number}, session=session
            )
        except PyMongoError as e:
            raise RepositoryError(
                f"Error purging timeline for inspection: {str(e)}",
                operation="delete_all_by_inspection",
            )
        return result.deleted_count

    async def _list(self, query: Dict[str, Any], session: Optional[Any]) -> List[TimelineEvent]:
        try:
            cursor = self.timeline_collection.find(query, session=session).sort(_NEWEST_FIRST)
            items: List[TimelineEvent] = []
            async for doc in cursor:
                items.append(self._document_to_event(doc))
            return items
        except PyMongoError as e:
            raise RepositoryError(f"Error listing timeline events: {str(e)}", operation="list")

    def _document_to_event(self, doc: dict) -> TimelineEvent:
        return TimelineEvent(
            id=str(doc.get(TimelineFields.MONGO_ID)),
            detection_id=doc.get(TimelineFields.DETECTION_ID),
            inspection_number=doc.get(TimelineFields.INSPECTION_NUMBER) or "",
            type=doc.get(TimelineFields.TYPE) or "",
            author=doc.get(TimelineFields.AUTHOR) or "",
            comment=doc.get(TimelineFields.COMMENT) or "",
            created_at=ensure_utc(doc.get(TimelineFields.CREATED_AT)) or utc_now(),
        )
