from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .external_provider import ExternalProvider
from .detection_provider import DetectionProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ExternalProvider",
    "DetectionProvider",
]
