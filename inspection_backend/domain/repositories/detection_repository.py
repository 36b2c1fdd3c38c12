from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from ..models.detection import Detection, DetectionGeometry, RawDetection


class DetectionRepository(ABC):
    """
    Repository interface - defines contract for detection data access.

    Every method takes an optional storage session so that writes can join a
    transaction opened by a TransactionManager.
    """

    @abstractmethod
    async def insert_batch(
        self,
        inspection_number: str,
        raw_detections: Sequence[RawDetection],
        session: Optional[Any] = None,
    ) -> List[Detection]:
        """Create one detection per raw detection, copying fields verbatim"""
        pass

    @abstractmethod
    async def insert(self, detection: Detection, session: Optional[Any] = None) -> Detection:
        """Create a single detection and return it with its id set"""
        pass

    @abstractmethod
    async def list_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> List[Detection]:
        """List all detections of an inspection in insertion order"""
        pass

    @abstractmethod
    async def get_by_id(self, detection_id: str, session: Optional[Any] = None) -> Detection:
        """Get detection by ID, raising NotFoundError if absent"""
        pass

    @abstractmethod
    async def update(
        self,
        detection_id: str,
        geometry: DetectionGeometry,
        session: Optional[Any] = None,
    ) -> Detection:
        """Overwrite geometry/confidence/class id, raising NotFoundError if absent"""
        pass

    @abstractmethod
    async def delete_by_id(self, detection_id: str, session: Optional[Any] = None) -> None:
        """Delete detection by ID, raising NotFoundError if absent"""
        pass

    @abstractmethod
    async def delete_all_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> int:
        """Delete all detections of an inspection, returning how many were removed"""
        pass
