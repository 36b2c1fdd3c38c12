from .detection_dto import (
    DetectionWriteRequest,
    DetectionDeleteRequest,
    DetectionResponse,
    TimelineEventResponse,
    AnalysisResponse,
)
from .roboflow_dto import (
    RoboflowResponse,
    RoboflowOutput,
    RoboflowPredictionGroup,
    RoboflowPrediction,
)

__all__ = [
    "DetectionWriteRequest",
    "DetectionDeleteRequest",
    "DetectionResponse",
    "TimelineEventResponse",
    "AnalysisResponse",
    "RoboflowResponse",
    "RoboflowOutput",
    "RoboflowPredictionGroup",
    "RoboflowPrediction",
]
