from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.models.detection import Detection, DetectionGeometry, RawDetection
from ...domain.models.timeline_event import TimelineEvent


class DetectionWriteRequest(BaseModel):
    """DTO for adding or editing a detection; author/comment go to the timeline"""
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    x: float
    y: float
    confidence: float = Field(ge=0, le=1)
    class_id: int
    class_name: Optional[str] = None  # used on add only
    parent_id: Optional[str] = None  # used on add only

    author: str
    comment: str = ""

    def to_raw(self) -> RawDetection:
        return RawDetection(
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
            confidence=self.confidence,
            class_id=self.class_id,
            class_name=self.class_name,
            parent_id=self.parent_id,
        )

    def to_geometry(self) -> DetectionGeometry:
        return DetectionGeometry(
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
            confidence=self.confidence,
            class_id=self.class_id,
        )


class DetectionDeleteRequest(BaseModel):
    """DTO for deleting a detection"""
    author: str
    comment: str = ""


class DetectionResponse(BaseModel):
    """DTO for detection response"""
    id: str
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

    @classmethod
    def from_domain(cls, detection: Detection) -> "DetectionResponse":
        return cls(
            id=detection.id or "",
            inspection_number=detection.inspection_number,
            width=detection.width,
            height=detection.height,
            x=detection.x,
            y=detection.y,
            confidence=detection.confidence,
            class_id=detection.class_id,
            class_name=detection.class_name,
            detection_id=detection.detection_id,
            parent_id=detection.parent_id,
        )


class TimelineEventResponse(BaseModel):
    id: str
    detection_id: Optional[str] = None
    inspection_number: str
    type: str
    author: str
    comment: str
    created_at: datetime

    @classmethod
    def from_domain(cls, event: TimelineEvent) -> "TimelineEventResponse":
        return cls(
            id=event.id or "",
            detection_id=event.detection_id,
            inspection_number=event.inspection_number,
            type=event.type,
            author=event.author,
            comment=event.comment,
            created_at=event.created_at,
        )


class AnalysisResponse(BaseModel):
    """DTO returned after an inspection image has been stored and analyzed"""
    inspection_number: str
    image_url: str
    replaced: int = 0
    detections: List[DetectionResponse] = Field(default_factory=list)
