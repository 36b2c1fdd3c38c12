"""
Shared pytest fixtures for inspection backend tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from inspection_backend.application.services.detection_lifecycle_service import DetectionLifecycleService
from tests.fakes import (
    InMemoryDetectionRepository,
    InMemoryInspectionRepository,
    InMemoryTimelineRepository,
    RecordingTransactionManager,
)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_inspections_db",
        "ROBOFLOW_API_KEY": "test_roboflow_key_placeholder",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_transactions_enabled = False
    mock.roboflow_api_url = "https://detect.example.test/workflow"
    mock.roboflow_api_key = "test_roboflow_key"
    mock.roboflow_timeout_seconds = 5.0
    mock.upload_dir = str(tmp_path / "uploads")
    mock.cors_origins = ["http://localhost:5173"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("inspection_backend.core.config.get_settings", return_value=mock), patch(
        "inspection_backend.infrastructure.external.roboflow_client.get_settings", return_value=mock
    ), patch(
        "inspection_backend.infrastructure.storage.local_image_storage.get_settings", return_value=mock
    ), patch("inspection_backend.infrastructure.http_client_factory.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def detection_repo():
    return InMemoryDetectionRepository()


@pytest.fixture
def timeline_repo():
    return InMemoryTimelineRepository()


@pytest.fixture
def inspection_repo():
    return InMemoryInspectionRepository("INS-001", "INS-002")


@pytest.fixture
def transaction_manager(detection_repo, timeline_repo, inspection_repo):
    return RecordingTransactionManager(detection_repo, timeline_repo, inspection_repo)


@pytest.fixture
def lifecycle_service(detection_repo, timeline_repo, inspection_repo, transaction_manager):
    return DetectionLifecycleService(
        detection_repository=detection_repo,
        timeline_repository=timeline_repo,
        inspection_repository=inspection_repo,
        transaction_manager=transaction_manager,
    )
