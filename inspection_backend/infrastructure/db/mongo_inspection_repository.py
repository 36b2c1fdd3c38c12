# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import NotFoundError, RepositoryError
from ...domain.repositories.inspection_repository import InspectionRepository
from ...domain.models.inspection import Inspection
from ...domain.constants import InspectionFields
from .mongo_connection import get_inspection_collection


class MongoInspectionRepository(InspectionRepository):
    """MongoDB implementation of InspectionRepository"""

    def __init__(self, inspection_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.inspection_collection = (
            inspection_collection if inspection_collection is not None else get_inspection_collection()
        )

    async def find_by_number(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> Optional[Inspection]:
        """
        Find inspection by inspection number

        Args:
            inspection_number: The inspection number (stored as _id)
            session: Optional Motor session

        Returns:
            Inspection domain model if found, None otherwise
        """
        if not inspection_number:
            return None

        try:
            document = await self.inspection_collection.find_one(
                {InspectionFields.MONGO_ID: inspection_number}, session=session
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error finding inspection: {str(e)}", operation="find_by_number")

        if document is None:
            return None
        return self._document_to_inspection(document)

    async def set_image_url(self, inspection_number: str, image_url: str) -> None:
        try:
            result = await self.inspection_collection.update_one(
                {InspectionFields.MONGO_ID: inspection_number},
                {"$set": {InspectionFields.IMAGE_URL: image_url}},
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error updating inspection image: {str(e)}", operation="set_image_url")

        if result.matched_count == 0:
            raise NotFoundError("Inspection", inspection_number)

    async def delete_by_number(
        self, inspection_number: str, session: Optional[Any] = None
    ) -> bool:
        try:
            result = await self.inspection_collection.delete_one(
                {InspectionFields.MONGO_ID: inspection_number}, session=session
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting inspection: {str(e)}", operation="delete_by_number")
        return result.deleted_count > 0

    def _document_to_inspection(self, document: Dict[str, Any]) -> Inspection:
        return Inspection(
            inspection_number=str(document.get(InspectionFields.MONGO_ID)),
            transformer_number=document.get(InspectionFields.TRANSFORMER_NUMBER),
            inspection_date=document.get(InspectionFields.INSPECTION_DATE),
            inspection_time=document.get(InspectionFields.INSPECTION_TIME),
            branch=document.get(InspectionFields.BRANCH),
            status=document.get(InspectionFields.STATUS),
            image_url=document.get(InspectionFields.IMAGE_URL),
        )
