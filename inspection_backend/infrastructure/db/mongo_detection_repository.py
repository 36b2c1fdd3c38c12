# Standard library imports
from typing import Any, Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import NotFoundError, RepositoryError
from ...domain.repositories.detection_repository import DetectionRepository
from ...domain.models.detection import Detection, DetectionGeometry, RawDetection
from ...domain.constants import DetectionFields
from .mongo_connection import get_detection_collection


def _to_object_id(detection_id: str) -> Optional[ObjectId]:
    if not detection_id:
        return None
    try:
        return ObjectId(detection_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoDetectionRepository(DetectionRepository):
    """MongoDB implementation of DetectionRepository"""

    def __init__(self, detection_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.detection_collection = (
            detection_collection if detection_collection is not None else get_detection_collection()
        )

    async def insert_batch(
        self,
        inspection_number: str,
        raw_detections: Sequence[RawDetection],
        session: Optional[Any] = None,
    ) -> List[Detection]:
        """
        Bulk insert raw detections for an inspection

        Args:
            inspection_number: Owning inspection
            raw_detections: Raw detections from the detection model
            session: Optional Motor session to join a transaction

        Returns:
            Created Detection domain models with their IDs set, in input order
        """
        detections = [Detection.from_raw(inspection_number, raw) for raw in raw_detections]
        if not detections:
            return []

        try:
            result = await self.detection_collection.insert_many(
                [self._detection_to_dict(detection) for detection in detections],
                ordered=True,
                session=session,
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error inserting detections: {str(e)}", operation="insert_batch")

        for detection, inserted_id in zip(detections, result.inserted_ids):
            detection.id = str(inserted_id)
        return detections

    async def insert(self, detection: Detection, session: Optional[Any] = None) -> Detection:
        if not detection:
            raise ValueError("Detection cannot be None")

        try:
            result = await self.detection_collection.insert_one(
                self._detection_to_dict(detection), session=session
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error inserting detection: {str(e)}", operation="insert")

        detection.id = str(result.inserted_id)
        return detection

    async def list_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> List[Detection]:
        if not inspection_number:
            return []

        try:
            cursor = self.detection_collection.find(
                {DetectionFields.INSPECTION_NUMBER: inspection_number}, session=session
            ).sort(DetectionFields.MONGO_ID, 1)
            detections = []
            async for document in cursor:
                detections.append(self._document_to_detection(document))
            return detections
        except PyMongoError as e:
            raise RepositoryError(
                f"Error listing detections for inspection: {str(e)}", operation="list_by_inspection"
            )

    async def get_by_id(self, detection_id: str, session: Optional[Any] = None) -> Detection:
        object_id = _to_object_id(detection_id)
        if object_id is None:
            raise NotFoundError("Detection", detection_id)

        try:
            document = await self.detection_collection.find_one(
                {DetectionFields.MONGO_ID: object_id}, session=session
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error finding detection by ID: {str(e)}", operation="get_by_id")

        if document is None:
            raise NotFoundError("Detection", detection_id)
        return self._document_to_detection(document)

    async def update(
        self,
        detection_id: str,
        geometry: DetectionGeometry,
        session: Optional[Any] = None,
    ) -> Detection:
        object_id = _to_object_id(detection_id)
        if object_id is None:
            raise NotFoundError("Detection", detection_id)

        changes = {
            DetectionFields.WIDTH: float(geometry.width),
            DetectionFields.HEIGHT: float(geometry.height),
            DetectionFields.X: float(geometry.x),
            DetectionFields.Y: float(geometry.y),
            DetectionFields.CONFIDENCE: float(geometry.confidence),
            DetectionFields.CLASS_ID: int(geometry.class_id),
        }
        try:
            document = await self.detection_collection.find_one_and_update(
                {DetectionFields.MONGO_ID: object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
                session=session,
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error updating detection: {str(e)}", operation="update")

        if document is None:
            raise NotFoundError("Detection", detection_id)
        return self._document_to_detection(document)

    async def delete_by_id(self, detection_id: str, session: Optional[Any] = None) -> None:
        object_id = _to_object_id(detection_id)
        if object_id is None:
            raise NotFoundError("Detection", detection_id)

        try:
            result = await self.detection_collection.delete_one(
                {DetectionFields.MONGO_ID: object_id}, session=session
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting detection: {str(e)}", operation="delete_by_id")

        if result.deleted_count == 0:
            raise NotFoundError("Detection", detection_id)

    async def delete_all_by_inspection(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> int:
        try:
            result = await self.detection_collection.delete_many(
                {DetectionFields.INSPECTION_NUMBER: inspection_number}, session=session
            )
        except PyMongoError as e:
            raise RepositoryError(
                f"Error deleting detections for inspection: {str(e)}",
                operation="delete_all_by_inspection",
            )
        return result.deleted_count

    def _document_to_detection(self, document: Dict[str, Any]) -> Detection:
        """
        Convert MongoDB document to Detection domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Detection domain model
        """
        return Detection(
            id=str(document.get(DetectionFields.MONGO_ID)),
            inspection_number=document.get(DetectionFields.INSPECTION_NUMBER, ""),
            width=document.get(DetectionFields.WIDTH, 0.0),
            height=document.get(DetectionFields.HEIGHT, 0.0),
            x=document.get(DetectionFields.X, 0.0),
            y=document.get(DetectionFields.Y, 0.0),
            confidence=document.get(DetectionFields.CONFIDENCE, 0.0),
            class_id=document.get(DetectionFields.CLASS_ID, 0),
            class_name=document.get(DetectionFields.CLASS_NAME),
            detection_id=document.get(DetectionFields.DETECTION_ID),
            parent_id=document.get(DetectionFields.PARENT_ID),
        )

    def _detection_to_dict(self, detection: Detection) -> Dict[str, Any]:
        """
        Convert Detection domain model to MongoDB document (without _id)

        Args:
            detection: Detection domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            DetectionFields.INSPECTION_NUMBER: detection.inspection_number,
            DetectionFields.WIDTH: detection.width,
            DetectionFields.HEIGHT: detection.height,
            DetectionFields.X: detection.x,
            DetectionFields.Y: detection.y,
            DetectionFields.CONFIDENCE: detection.confidence,
            DetectionFields.CLASS_ID: detection.class_id,
            DetectionFields.CLASS_NAME: detection.class_name,
            DetectionFields.DETECTION_ID: detection.detection_id,
            DetectionFields.PARENT_ID: detection.parent_id,
        }
