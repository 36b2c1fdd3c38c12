from .roboflow_client import RoboflowClient

__all__ = ["RoboflowClient"]
