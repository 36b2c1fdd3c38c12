"""
Wire format of the detection model (Roboflow workflow) response.

Only the fields the detection subsystem stores are modelled; anything else
in the payload (output images, video metadata) is ignored.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.detection import RawDetection


class RoboflowImageMeta(BaseModel):
    width: Optional[int] = None
    height: Optional[int] = None


class RoboflowPrediction(BaseModel):
    """One detected box"""
    model_config = ConfigDict(populate_by_name=True)

    width: float
    height: float
    x: float
    y: float
    confidence: float
    class_id: int
    class_name: Optional[str] = Field(default=None, alias="class")
    detection_id: Optional[str] = None
    parent_id: Optional[str] = None

    def to_raw(self) -> RawDetection:
        return RawDetection(
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
            confidence=self.confidence,
            class_id=self.class_id,
            class_name=self.class_name,
            detection_id=self.detection_id,
            parent_id=self.parent_id,
        )


class RoboflowPredictionGroup(BaseModel):
    image: Optional[RoboflowImageMeta] = None
    predictions: Optional[List[RoboflowPrediction]] = None


class RoboflowOutput(BaseModel):
    predictions: Optional[RoboflowPredictionGroup] = None


class RoboflowResponse(BaseModel):
    """Top-level workflow response: a list of outputs, each with a prediction group"""
    outputs: List[RoboflowOutput] = Field(default_factory=list)
