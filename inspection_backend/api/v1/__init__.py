from .detection_controller import router as detection_router
from .inspection_controller import router as inspection_router


__all__ = ["detection_router", "inspection_router"]
