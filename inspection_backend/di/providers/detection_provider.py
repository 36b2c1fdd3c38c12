from typing import TYPE_CHECKING
from ...domain.repositories.detection_repository import DetectionRepository
from ...domain.repositories.timeline_repository import TimelineRepository
from ...domain.repositories.inspection_repository import InspectionRepository
from ...domain.repositories.transaction_manager import TransactionManager
from ...application.services.detection_lifecycle_service import DetectionLifecycleService
from ...application.use_cases.inspection.analyze_inspection_image import AnalyzeInspectionImageUseCase
from ...application.use_cases.inspection.delete_inspection import DeleteInspectionUseCase
from ...infrastructure.external.roboflow_client import RoboflowClient
from ...infrastructure.storage.local_image_storage import LocalImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DetectionProvider:
    """Detection provider - registers the lifecycle service and inspection use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the detection lifecycle service and the use cases built on it.
        Created on-demand via factories.
        """
        container.register_factory(
            DetectionLifecycleService,
            lambda: DetectionLifecycleService(
                detection_repository=container.get(DetectionRepository),
                timeline_repository=container.get(TimelineRepository),
                inspection_repository=container.get(InspectionRepository),
                transaction_manager=container.get(TransactionManager),
            )
        )

        container.register_factory(
            AnalyzeInspectionImageUseCase,
            lambda: AnalyzeInspectionImageUseCase(
                inspection_repository=container.get(InspectionRepository),
                lifecycle_service=container.get(DetectionLifecycleService),
                image_storage=container.get(LocalImageStorage),
                detection_client=container.get(RoboflowClient),
            )
        )

        container.register_factory(
            DeleteInspectionUseCase,
            lambda: DeleteInspectionUseCase(
                inspection_repository=container.get(InspectionRepository),
                lifecycle_service=container.get(DetectionLifecycleService),
            )
        )
