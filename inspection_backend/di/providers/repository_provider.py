from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.detection_repository import DetectionRepository
from ...domain.repositories.timeline_repository import TimelineRepository
from ...domain.repositories.inspection_repository import InspectionRepository
from ...domain.repositories.transaction_manager import TransactionManager
from ...infrastructure.db.mongo_detection_repository import MongoDetectionRepository
from ...infrastructure.db.mongo_timeline_repository import MongoTimelineRepository
from ...infrastructure.db.mongo_inspection_repository import MongoInspectionRepository
from ...infrastructure.db.mongo_transaction_manager import MongoTransactionManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            InspectionRepository,
            MongoInspectionRepository(inspection_collection=container.get("inspection_collection"))
        )

        container.register_singleton(
            DetectionRepository,
            MongoDetectionRepository(detection_collection=container.get("detection_collection"))
        )

        container.register_singleton(
            TimelineRepository,
            MongoTimelineRepository(timeline_collection=container.get("timeline_collection"))
        )

        container.register_singleton(
            TransactionManager,
            MongoTransactionManager(
                client=container.get("mongo_client"),
                enabled=get_settings().mongo_transactions_enabled,
            )
        )
