# Standard library imports
import base64
import logging
from typing import Optional, TYPE_CHECKING

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.inspection_repository import InspectionRepository
from ...dto.detection_dto import AnalysisResponse, DetectionResponse
from ...services.detection_lifecycle_service import DetectionLifecycleService

if TYPE_CHECKING:
    from ....infrastructure.external.roboflow_client import RoboflowClient
    from ....infrastructure.storage.local_image_storage import LocalImageStorage

logger = logging.getLogger(__name__)


class AnalyzeInspectionImageUseCase:
    """Use case for storing an inspection image and ingesting its detections"""

    def __init__(
        self,
        inspection_repository: InspectionRepository,
        lifecycle_service: DetectionLifecycleService,
        image_storage: "LocalImageStorage",
        detection_client: "RoboflowClient",
    ) -> None:
        self.inspection_repository = inspection_repository
        self.lifecycle_service = lifecycle_service
        self.image_storage = image_storage
        self.detection_client = detection_client

    async def execute(
        self,
        inspection_number: str,
        filename: Optional[str],
        image_bytes: bytes,
        replace_existing: bool = False,
    ) -> AnalysisResponse:
        """
        Store the image, run the detection model on it and ingest the result

        Args:
            inspection_number: Inspection the image belongs to
            filename: Original upload filename
            image_bytes: Raw image bytes
            replace_existing: Swap the inspection's current detections for the new ones

        Returns:
            AnalysisResponse with the image URL and the created detections

        Raises:
            NotFoundError: If the inspection does not exist
            ExternalServiceError: If the detection model call fails; nothing is ingested
        """
        inspection = await self.inspection_repository.find_by_number(inspection_number)
        if inspection is None:
            raise NotFoundError("Inspection", inspection_number)

        image_url = await self.image_storage.store(inspection_number, filename, image_bytes)
        await self.inspection_repository.set_image_url(inspection_number, image_url)

        encoded = base64.b64encode(image_bytes).decode("utf-8")
        batch = await self.detection_client.analyze(encoded)

        replaced = 0
        if replace_existing:
            replaced, detections = await self.lifecycle_service.replace_detections(inspection_number, batch)
        else:
            detections = await self.lifecycle_service.ingest(inspection_number, batch)
        logger.info(
            f"Analyzed image {image_url} for inspection {inspection_number}: "
            f"{len(detections)} detection(s), {replaced} replaced"
        )

        return AnalysisResponse(
            inspection_number=inspection_number,
            image_url=image_url,
            replaced=replaced,
            detections=[DetectionResponse.from_domain(d) for d in detections],
        )
