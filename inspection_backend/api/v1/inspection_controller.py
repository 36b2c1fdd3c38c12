"""
Inspections API: upload-and-analyze an inspection image, serve it, delete an inspection.
"""

# Standard library imports
import logging
import mimetypes

# External package imports
from fastapi import APIRouter, File, Form, HTTPException, Response, UploadFile, status

# Local application imports
from ...application.dto.detection_dto import AnalysisResponse
from ...application.use_cases.inspection.analyze_inspection_image import AnalyzeInspectionImageUseCase
from ...application.use_cases.inspection.delete_inspection import DeleteInspectionUseCase
from ...core.exceptions import InspectionBackendError
from ...di.container import get_container
from ...domain.repositories.inspection_repository import InspectionRepository
from ...infrastructure.storage.local_image_storage import LocalImageStorage
from .errors import to_http_exception

logger = logging.getLogger(__name__)
router = APIRouter(tags=["inspections"])


@router.post("/{inspection_number}/image", response_model=AnalysisResponse)
async def upload_inspection_image(
    inspection_number: str,
    image: UploadFile = File(...),
    replace_existing: bool = Form(False),
) -> AnalysisResponse:
    """
    Store an inspection image, run the detection model and ingest its detections

    Args:
        inspection_number: Inspection the image belongs to
        image: Uploaded image file
        replace_existing: Discard current detections before ingesting the new ones

    Returns:
        AnalysisResponse with the stored image URL and the created detections
    """
    use_case = get_container().get(AnalyzeInspectionImageUseCase)
    image_bytes = await image.read()

    try:
        return await use_case.execute(
            inspection_number=inspection_number,
            filename=image.filename,
            image_bytes=image_bytes,
            replace_existing=replace_existing,
        )
    except InspectionBackendError as e:
        raise to_http_exception(e)


@router.delete(
    "/{inspection_number}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_inspection(inspection_number: str) -> Response:
    """
    Delete an inspection with all of its detections and timeline events
    """
    use_case = get_container().get(DeleteInspectionUseCase)

    try:
        await use_case.execute(inspection_number)
    except InspectionBackendError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{inspection_number}/image")
async def get_inspection_image(inspection_number: str) -> Response:
    """
    Serve the stored image of an inspection
    """
    container = get_container()
    inspection = await container.get(InspectionRepository).find_by_number(inspection_number)
    if inspection is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inspection not found")
    if not inspection.image_url:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not available for this inspection")

    try:
        data = await container.get(LocalImageStorage).read(inspection.image_url)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid image path")
    except FileNotFoundError:
        logger.warning(f"Image {inspection.image_url} of inspection {inspection_number} missing on disk")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found")

    media_type = mimetypes.guess_type(inspection.image_url)[0] or "application/octet-stream"
    return Response(content=data, media_type=media_type)
