"""
Unit tests for MongoDetectionRepository with a mocked Motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from inspection_backend.core.exceptions import NotFoundError, RepositoryError
from inspection_backend.domain.models.detection import DetectionGeometry, RawDetection
from inspection_backend.infrastructure.db.mongo_detection_repository import MongoDetectionRepository


class _Cursor:
    """Stands in for a Motor cursor: sync sort(), async iteration"""

    def __init__(self, documents):
        self.documents = documents
        self.sort_args = None

    def sort(self, *args):
        self.sort_args = args
        return self

    def __aiter__(self):
        self._iterator = iter(self.documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration


def _document(object_id: ObjectId, **overrides) -> dict:
    document = {
        "_id": object_id,
        "inspection_number": "INS-001",
        "width": 40.0,
        "height": 30.0,
        "x": 100.0,
        "y": 80.0,
        "confidence": 0.87,
        "class_id": 1,
        "class_name": "Loose Joint Faulty",
        "detection_id": "rf-1",
        "parent_id": "image",
    }
    document.update(overrides)
    return document


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def repository(collection):
    return MongoDetectionRepository(collection)


class TestInsert:
    @pytest.mark.asyncio
    async def test_insert_batch_sets_ids_in_order(self, repository, collection):
        ids = [ObjectId(), ObjectId()]
        collection.insert_many = AsyncMock(return_value=MagicMock(inserted_ids=ids))
        raw = [
            RawDetection(width=1, height=2, x=3, y=4, confidence=0.5, class_id=0, class_name="A"),
            RawDetection(width=5, height=6, x=7, y=8, confidence=0.6, class_id=1),
        ]
        session = object()

        created = await repository.insert_batch("INS-001", raw, session=session)

        assert [d.id for d in created] == [str(i) for i in ids]
        documents = collection.insert_many.call_args.args[0]
        assert documents[0]["inspection_number"] == "INS-001"
        assert documents[0]["class_name"] == "A"
        assert documents[1]["class_name"] is None
        assert "_id" not in documents[0]
        assert collection.insert_many.call_args.kwargs == {"ordered": True, "session": session}

    @pytest.mark.asyncio
    async def test_insert_batch_empty_skips_database(self, repository, collection):
        collection.insert_many = AsyncMock()
        assert await repository.insert_batch("INS-001", []) == []
        collection.insert_many.assert_not_called()

    @pytest.mark.asyncio
    async def test_insert_batch_wraps_driver_errors(self, repository, collection):
        collection.insert_many = AsyncMock(side_effect=PyMongoError("boom"))
        raw = [RawDetection(width=1, height=2, x=3, y=4, confidence=0.5, class_id=0)]
        with pytest.raises(RepositoryError) as exc_info:
            await repository.insert_batch("INS-001", raw)
        assert exc_info.value.operation == "insert_batch"


class TestRead:
    @pytest.mark.asyncio
    async def test_list_by_inspection_sorted_by_id(self, repository, collection):
        first, second = ObjectId(), ObjectId()
        cursor = _Cursor([_document(first), _document(second, x=5.0)])
        collection.find.return_value = cursor

        detections = await repository.list_by_inspection("INS-001")

        assert [d.id for d in detections] == [str(first), str(second)]
        assert detections[1].x == 5.0
        assert cursor.sort_args == ("_id", 1)
        assert collection.find.call_args.args[0] == {"inspection_number": "INS-001"}

    @pytest.mark.asyncio
    async def test_get_by_id_maps_document(self, repository, collection):
        object_id = ObjectId()
        collection.find_one = AsyncMock(return_value=_document(object_id))

        detection = await repository.get_by_id(str(object_id))

        assert detection.id == str(object_id)
        assert detection.class_name == "Loose Joint Faulty"
        assert detection.parent_id == "image"

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, repository, collection):
        collection.find_one = AsyncMock(return_value=None)
        with pytest.raises(NotFoundError):
            await repository.get_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self, repository, collection):
        collection.find_one = AsyncMock()
        with pytest.raises(NotFoundError):
            await repository.get_by_id("not-an-object-id")
        collection.find_one.assert_not_called()


class TestWrite:
    @pytest.mark.asyncio
    async def test_update_sets_geometry_only(self, repository, collection):
        object_id = ObjectId()
        collection.find_one_and_update = AsyncMock(return_value=_document(object_id, x=9.0))
        geometry = DetectionGeometry(width=1, height=2, x=9, y=4, confidence=0.3, class_id=2)

        detection = await repository.update(str(object_id), geometry)

        assert detection.x == 9.0
        query, update = collection.find_one_and_update.call_args.args
        assert query == {"_id": object_id}
        assert update == {
            "$set": {"width": 1.0, "height": 2.0, "x": 9.0, "y": 4.0, "confidence": 0.3, "class_id": 2}
        }
        assert collection.find_one_and_update.call_args.kwargs["return_document"] == ReturnDocument.AFTER

    @pytest.mark.asyncio
    async def test_update_missing(self, repository, collection):
        collection.find_one_and_update = AsyncMock(return_value=None)
        geometry = DetectionGeometry(width=1, height=2, x=3, y=4, confidence=0.3, class_id=2)
        with pytest.raises(NotFoundError):
            await repository.update(str(ObjectId()), geometry)

    @pytest.mark.asyncio
    async def test_delete_by_id_missing(self, repository, collection):
        collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))
        with pytest.raises(NotFoundError):
            await repository.delete_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_delete_all_by_inspection_returns_count(self, repository, collection):
        collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=4))
        assert await repository.delete_all_by_inspection("INS-001") == 4
        assert collection.delete_many.call_args.args[0] == {"inspection_number": "INS-001"}
