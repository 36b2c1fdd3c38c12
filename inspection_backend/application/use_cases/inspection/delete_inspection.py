import logging

from ....core.exceptions import NotFoundError
from ....domain.repositories.inspection_repository import InspectionRepository
from ...services.detection_lifecycle_service import DetectionLifecycleService

logger = logging.getLogger(__name__)


class DeleteInspectionUseCase:
    """Deletes an inspection together with its detections and their timeline"""

    def __init__(
        self,
        inspection_repository: InspectionRepository,
        lifecycle_service: DetectionLifecycleService,
    ) -> None:
        self.inspection_repository = inspection_repository
        self.lifecycle_service = lifecycle_service

    async def execute(self, inspection_number: str) -> None:
        inspection = await self.inspection_repository.find_by_number(inspection_number)
        if inspection is None:
            raise NotFoundError("Inspection", inspection_number)

        await self.lifecycle_service.purge_inspection(inspection_number, remove_inspection=True)
        logger.info(f"Deleted inspection {inspection_number}")
