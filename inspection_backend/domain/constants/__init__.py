"""Constants for domain model field names"""

from .detection_fields import DetectionFields
from .timeline_fields import TimelineFields
from .inspection_fields import InspectionFields

__all__ = [
    "DetectionFields",
    "TimelineFields",
    "InspectionFields",
]
