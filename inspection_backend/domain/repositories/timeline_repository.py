from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..models.timeline_event import TimelineEvent


class TimelineRepository(ABC):
    """
    Repository interface for the append-only detection timeline.

    Events are never updated or deleted singly; they are only purged together
    with their inspection.
    """

    @abstractmethod
    async def append(
        self,
        detection_id: Optional[str],
        inspection_number: str,
        event_type: str,
        author: str,
        comment: str,
        session: Optional[Any] = None,
    ) -> TimelineEvent:
        """Persist one event stamped with the current server time"""
        pass

    @abstractmethod
    async def list_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> List[TimelineEvent]:
        """Events of an inspection, newest first"""
        pass

    @abstractmethod
    async def list_by_detection(
        self, detection_id: str, session: Optional[Any] = None
    ) -> List[TimelineEvent]:
        """Events of a detection, newest first"""
        pass

    @abstractmethod
    async def delete_all_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> int:
        """Purge all events of an inspection, returning how many were removed"""
        pass
