from .detection import Detection, DetectionGeometry, RawDetection
from .timeline_event import TimelineEvent, TimelineEventType
from .inspection import Inspection

__all__ = [
    "Detection",
    "DetectionGeometry",
    "RawDetection",
    "TimelineEvent",
    "TimelineEventType",
    "Inspection",
]
