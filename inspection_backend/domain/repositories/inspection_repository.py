from abc import ABC, abstractmethod
from typing import Any, Optional

from ..models.inspection import Inspection


class InspectionRepository(ABC):
    """Repository interface - the subset of inspection access the detection subsystem needs"""

    @abstractmethod
    async def find_by_number(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> Optional[Inspection]:
        """Find inspection by its inspection number"""
        pass

    @abstractmethod
    async def set_image_url(self, inspection_number: str, image_url: str) -> None:
        """Record where the inspection image is stored"""
        pass

    @abstractmethod
    async def delete_by_number(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> bool:
        """Delete inspection, returning False if it did not exist"""
        pass
