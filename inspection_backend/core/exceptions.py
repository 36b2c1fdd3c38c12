"""
Exception hierarchy for the inspection backend.

Raised by repositories, the detection lifecycle service and external clients.
The API layer maps each kind to an HTTP status code.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class InspectionBackendError(Exception):
    """Base exception for all inspection backend errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(InspectionBackendError):
    """Raised when a referenced inspection or detection does not exist."""

    def __init__(self, entity: str, identifier: Any):
        super().__init__(
            f"{entity} not found with id: {identifier}",
            details={"entity": entity, "id": identifier},
        )
        self.entity = entity
        self.identifier = identifier


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(InspectionBackendError):
    """Raised when input validation fails."""
    pass


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalServiceError(InspectionBackendError):
    """Raised when the detection model call fails or returns malformed data."""

    def __init__(
        self,
        message: str,
        service: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.service = service
        self.status_code = status_code


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


class RepositoryError(InspectionBackendError):
    """Raised when a storage operation fails unexpectedly."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message, details={"operation": operation} if operation else None)
        self.operation = operation
