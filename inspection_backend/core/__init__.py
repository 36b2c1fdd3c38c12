from .config import Settings, get_settings
from .exceptions import (
    InspectionBackendError,
    NotFoundError,
    ValidationError,
    ExternalServiceError,
    RepositoryError,
)

__all__ = [
    "Settings",
    "get_settings",
    "InspectionBackendError",
    "NotFoundError",
    "ValidationError",
    "ExternalServiceError",
    "RepositoryError",
]
