# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class RawDetection:
    """
    A single prediction as produced by the detection model, prior to storage.
    """
    width: float
    height: float
    x: float
    y: float
    confidence: float
    class_id: int
    class_name: Optional[str] = None
    detection_id: Optional[str] = None
    parent_id: Optional[str] = None


@dataclass
class DetectionGeometry:
    """The mutable part of a detection: box, confidence and class id."""
    width: float
    height: float
    x: float
    y: float
    confidence: float
    class_id: int


@dataclass
class Detection:
    """
    Pure domain model for one detected object instance on an inspection image.

    x/y follow the detection model's convention (box center for Roboflow).
    detection_id and parent_id are the model's own identifiers and are not
    unique across re-analysis runs; id is the store-assigned identity.
    """
    id: Optional[str]
    inspection_number: str
    width: float
    height: float
    x: float
    y: float
    confidence: float
    class_id: int
    class_name: Optional[str] = None
    detection_id: Optional[str] = None
    parent_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.inspection_number:
            raise ValueError("Inspection number is required")

    @classmethod
    def from_raw(cls, inspection_number: str, raw: RawDetection) -> "Detection":
        return cls(
            id=None,
            inspection_number=inspection_number,
            width=float(raw.width),
            height=float(raw.height),
            x=float(raw.x),
            y=float(raw.y),
            confidence=float(raw.confidence),
            class_id=int(raw.class_id),
            class_name=raw.class_name,
            detection_id=raw.detection_id,
            parent_id=raw.parent_id,
        )

    def apply_geometry(self, geometry: DetectionGeometry) -> None:
        # class_name and parent_id are not part of an edit
        self.width = float(geometry.width)
        self.height = float(geometry.height)
        self.x = float(geometry.x)
        self.y = float(geometry.y)
        self.confidence = float(geometry.confidence)
        self.class_id = int(geometry.class_id)
