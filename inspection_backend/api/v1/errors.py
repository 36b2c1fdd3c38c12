# Standard library imports
import logging

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...core.exceptions import (
    ExternalServiceError,
    InspectionBackendError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(error: InspectionBackendError) -> HTTPException:
    """
    Map a backend error to the HTTP error returned to the client

    Args:
        error: Error raised by a service, use case or repository

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)
    if isinstance(error, ExternalServiceError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error.message)

    logger.error(f"Unhandled backend error: {error.message}", exc_info=error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error"
    )
