"""
Unit tests for BaseContainer and provider wiring.
"""
from unittest.mock import MagicMock

import pytest

from inspection_backend.application.services.detection_lifecycle_service import DetectionLifecycleService
from inspection_backend.di.base_container import BaseContainer
from inspection_backend.di.providers.detection_provider import DetectionProvider
from inspection_backend.domain.repositories import (
    DetectionRepository,
    InspectionRepository,
    TimelineRepository,
    TransactionManager,
)


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory(list, lambda: [])
        assert container.get(list) is not container.get(list)

    def test_missing_dependency(self):
        with pytest.raises(ValueError, match="Dependency not registered: DetectionRepository"):
            BaseContainer().get(DetectionRepository)


class TestDetectionProvider:
    def test_lifecycle_service_wired_from_repositories(self):
        container = BaseContainer()
        for key in (DetectionRepository, TimelineRepository, InspectionRepository, TransactionManager):
            container.register_singleton(key, MagicMock())

        DetectionProvider.register(container)
        service = container.get(DetectionLifecycleService)

        assert isinstance(service, DetectionLifecycleService)
        assert service.detection_repository is container.get(DetectionRepository)
        assert service.transaction_manager is container.get(TransactionManager)
