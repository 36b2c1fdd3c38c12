from .detection_lifecycle_service import DetectionLifecycleService, flatten_predictions

__all__ = ["DetectionLifecycleService", "flatten_predictions"]
