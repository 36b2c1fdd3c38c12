"""Detection lifecycle orchestration: ingest, manual edits and the audit timeline."""
import logging
from typing import List, Tuple

from ...core.exceptions import NotFoundError, ValidationError
from ...domain.models.detection import Detection, DetectionGeometry, RawDetection
from ...domain.models.timeline_event import TimelineEvent, TimelineEventType
from ...domain.repositories.detection_repository import DetectionRepository
from ...domain.repositories.inspection_repository import InspectionRepository
from ...domain.repositories.timeline_repository import TimelineRepository
from ...domain.repositories.transaction_manager import TransactionManager
from ..dto.roboflow_dto import RoboflowResponse

logger = logging.getLogger(__name__)


def flatten_predictions(batch: RoboflowResponse) -> List[RawDetection]:
    """
    Collect every prediction of a workflow response, in output order.

    Outputs whose prediction group (or its prediction list) is missing are
    skipped rather than treated as an error.
    """
    raw: List[RawDetection] = []
    for output in batch.outputs:
        group = output.predictions
        if group is None or group.predictions is None:
            continue
        raw.extend(prediction.to_raw() for prediction in group.predictions)
    return raw


class DetectionLifecycleService:
    """
    The only component allowed to mutate detections.

    Every user mutation (add, edit, delete) writes exactly one timeline event
    inside the same transaction as the detection write. Bulk ingest of model
    output is not a user action and writes no timeline events.
    """

    def __init__(
        self,
        detection_repository: DetectionRepository,
        timeline_repository: TimelineRepository,
        inspection_repository: InspectionRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.detection_repository = detection_repository
        self.timeline_repository = timeline_repository
        self.inspection_repository = inspection_repository
        self.transaction_manager = transaction_manager

    async def ingest(self, inspection_number: str, batch: RoboflowResponse) -> List[Detection]:
        """
        Store every prediction of a detection model response for an inspection.

        Args:
            inspection_number: Inspection the analyzed image belongs to
            batch: Parsed detection model response

        Returns:
            The created detections, one per prediction

        Raises:
            NotFoundError: If the inspection does not exist
        """
        raw_detections = flatten_predictions(batch)

        async with self.transaction_manager.transaction() as session:
            await self._require_inspection(inspection_number, session)
            created = await self.detection_repository.insert_batch(
                inspection_number, raw_detections, session=session
            )

        logger.info(
            f"Ingested {len(created)} detection(s) from {len(batch.outputs)} output(s) "
            f"for inspection {inspection_number}"
        )
        return created

    async def add_detection(
        self,
        inspection_number: str,
        fields: RawDetection,
        author: str,
        comment: str,
    ) -> Detection:
        """
        Manually add one detection and record an `add` event.

        Raises:
            NotFoundError: If the inspection does not exist
            ValidationError: If author is blank
        """
        self._require_author(author)

        async with self.transaction_manager.transaction() as session:
            await self._require_inspection(inspection_number, session)
            detection = await self.detection_repository.insert(
                Detection.from_raw(inspection_number, fields), session=session
            )
            await self.timeline_repository.append(
                detection.id,
                inspection_number,
                TimelineEventType.ADD,
                author,
                comment,
                session=session,
            )

        logger.info(f"Detection {detection.id} added to inspection {inspection_number} by {author}")
        return detection

    async def update_detection(
        self,
        detection_id: str,
        geometry: DetectionGeometry,
        author: str,
        comment: str,
    ) -> Detection:
        """
        Overwrite a detection's box, confidence and class id and record an `edit` event.

        Raises:
            NotFoundError: If the detection does not exist (no event is written)
            ValidationError: If author is blank
        """
        self._require_author(author)

        async with self.transaction_manager.transaction() as session:
            existing = await self.detection_repository.get_by_id(detection_id, session=session)
            updated = await self.detection_repository.update(detection_id, geometry, session=session)
            await self.timeline_repository.append(
                updated.id,
                existing.inspection_number,
                TimelineEventType.EDIT,
                author,
                comment,
                session=session,
            )

        logger.info(f"Detection {detection_id} edited by {author}")
        return updated

    async def delete_detection(self, detection_id: str, author: str, comment: str) -> None:
        """
        Remove the detection, then record a `delete` event.

        The event keeps the removed detection's id for the audit trail.
        delete_by_id is the existence check that counts: if a concurrent
        delete got there first it raises before any event is written.

        Raises:
            NotFoundError: If the detection does not exist (no event is written)
            ValidationError: If author is blank
        """
        self._require_author(author)

        async with self.transaction_manager.transaction() as session:
            existing = await self.detection_repository.get_by_id(detection_id, session=session)
            await self.detection_repository.delete_by_id(detection_id, session=session)
            await self.timeline_repository.append(
                existing.id,
                existing.inspection_number,
                TimelineEventType.DELETE,
                author,
                comment,
                session=session,
            )

        logger.info(f"Detection {detection_id} deleted by {author}")

    async def list_detections(self, inspection_number: str) -> List[Detection]:
        return await self.detection_repository.list_by_inspection(inspection_number)

    async def list_timeline(self, inspection_number: str) -> List[TimelineEvent]:
        return await self.timeline_repository.list_by_inspection(inspection_number)

    async def list_detection_timeline(self, detection_id: str) -> List[TimelineEvent]:
        return await self.timeline_repository.list_by_detection(detection_id)

    async def replace_detections(
        self, inspection_number: str, batch: RoboflowResponse
    ) -> Tuple[int, List[Detection]]:
        """
        Swap an inspection's detections for a new model response in one transaction.

        Timeline history of the replaced detections is kept.

        Returns:
            (detections removed, detections created)

        Raises:
            NotFoundError: If the inspection does not exist (nothing is removed)
        """
        raw_detections = flatten_predictions(batch)

        async with self.transaction_manager.transaction() as session:
            await self._require_inspection(inspection_number, session)
            removed = await self.detection_repository.delete_all_by_inspection(
                inspection_number, session=session
            )
            created = await self.detection_repository.insert_batch(
                inspection_number, raw_detections, session=session
            )

        logger.info(
            f"Replaced {removed} detection(s) of inspection {inspection_number} "
            f"with {len(created)} new detection(s)"
        )
        return removed, created

    async def purge_inspection(
        self, inspection_number: str, remove_inspection: bool = False
    ) -> Tuple[int, int]:
        """
        Remove all detections and timeline events of an inspection.

        Args:
            inspection_number: Inspection to purge
            remove_inspection: Also delete the inspection record, in the same transaction

        Returns:
            (detections removed, timeline events removed)
        """
        async with self.transaction_manager.transaction() as session:
            detections_removed = await self.detection_repository.delete_all_by_inspection(
                inspection_number, session=session
            )
            events_removed = await self.timeline_repository.delete_all_by_inspection(
                inspection_number, session=session
            )
            if remove_inspection:
                await self.inspection_repository.delete_by_number(inspection_number, session=session)

        logger.info(
            f"Purged inspection {inspection_number}: {detections_removed} detection(s), "
            f"{events_removed} timeline event(s)"
        )
        return detections_removed, events_removed

    async def _require_inspection(self, inspection_number: str, session) -> None:
        inspection = await self.inspection_repository.find_by_number(inspection_number, session=session)
        if inspection is None:
            raise NotFoundError("Inspection", inspection_number)

    @staticmethod
    def _require_author(author: str) -> None:
        if not author or not author.strip():
            raise ValidationError("Author is required for detection changes")
