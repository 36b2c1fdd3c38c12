from .detection_repository import DetectionRepository
from .timeline_repository import TimelineRepository
from .inspection_repository import InspectionRepository
from .transaction_manager import TransactionManager

__all__ = [
    "DetectionRepository",
    "TimelineRepository",
    "InspectionRepository",
    "TransactionManager",
]
