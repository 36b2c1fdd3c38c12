"""
Detections API: list/add/edit/delete detections of an inspection image and
read the annotation timeline.
"""

# Standard library imports
import logging
from typing import List

# External package imports
from fastapi import APIRouter, Response, status

# Local application imports
from ...application.dto.detection_dto import (
    DetectionDeleteRequest,
    DetectionResponse,
    DetectionWriteRequest,
    TimelineEventResponse,
)
from ...application.services.detection_lifecycle_service import DetectionLifecycleService
from ...core.exceptions import InspectionBackendError
from ...di.container import get_container
from .errors import to_http_exception

logger = logging.getLogger(__name__)
router = APIRouter(tags=["detections"])


@router.get("/{inspection_number}/analyze", response_model=List[DetectionResponse])
async def list_detections(inspection_number: str) -> List[DetectionResponse]:
    """
    List all detections of an inspection, in the order they were stored
    """
    service = get_container().get(DetectionLifecycleService)

    try:
        detections = await service.list_detections(inspection_number)
    except InspectionBackendError as e:
        raise to_http_exception(e)
    return [DetectionResponse.from_domain(d) for d in detections]


@router.post(
    "/{inspection_number}/analyze",
    response_model=DetectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_detection(
    inspection_number: str,
    request: DetectionWriteRequest,
) -> DetectionResponse:
    """
    Manually add a detection to an inspection

    Args:
        inspection_number: Inspection the detection belongs to
        request: Box, class and the author/comment recorded on the timeline

    Returns:
        DetectionResponse of the created detection
    """
    service = get_container().get(DetectionLifecycleService)

    try:
        detection = await service.add_detection(
            inspection_number=inspection_number,
            fields=request.to_raw(),
            author=request.author,
            comment=request.comment,
        )
    except InspectionBackendError as e:
        raise to_http_exception(e)
    return DetectionResponse.from_domain(detection)


@router.get("/{inspection_number}/analyze/timeline", response_model=List[TimelineEventResponse])
async def list_inspection_timeline(inspection_number: str) -> List[TimelineEventResponse]:
    """
    Timeline of an inspection's detections, newest first
    """
    service = get_container().get(DetectionLifecycleService)

    try:
        events = await service.list_timeline(inspection_number)
    except InspectionBackendError as e:
        raise to_http_exception(e)
    return [TimelineEventResponse.from_domain(event) for event in events]


@router.put("/analyze/{detect_id}", response_model=DetectionResponse)
async def update_detection(
    detect_id: str,
    request: DetectionWriteRequest,
) -> DetectionResponse:
    """
    Edit a detection's box, confidence and class id

    class_name and parent_id in the request are ignored on edit.
    """
    service = get_container().get(DetectionLifecycleService)

    try:
        detection = await service.update_detection(
            detection_id=detect_id,
            geometry=request.to_geometry(),
            author=request.author,
            comment=request.comment,
        )
    except InspectionBackendError as e:
        raise to_http_exception(e)
    return DetectionResponse.from_domain(detection)


@router.delete(
    "/analyze/{detect_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_detection(
    detect_id: str,
    request: DetectionDeleteRequest,
) -> Response:
    service = get_container().get(DetectionLifecycleService)

    try:
        await service.delete_detection(
            detection_id=detect_id,
            author=request.author,
            comment=request.comment,
        )
    except InspectionBackendError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/analyze/{detect_id}/timeline", response_model=List[TimelineEventResponse])
async def list_detection_timeline(detect_id: str) -> List[TimelineEventResponse]:
    """
    Timeline of a single detection, newest first. Still available after the
    detection itself has been deleted.
    """
    service = get_container().get(DetectionLifecycleService)

    try:
        events = await service.list_detection_timeline(detect_id)
    except InspectionBackendError as e:
        raise to_http_exception(e)
    return [TimelineEventResponse.from_domain(event) for event in events]
