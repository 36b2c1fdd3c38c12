import logging
from typing import TYPE_CHECKING
from ...infrastructure.external.roboflow_client import RoboflowClient
from ...infrastructure.storage.local_image_storage import LocalImageStorage
from ...infrastructure.http_client_factory import get_shared_http_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class ExternalProvider:
    """External collaborator provider - detection model client and image storage"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register external collaborators as singletons.
        """
        try:
            container.get(RoboflowClient)
        except ValueError:
            container.register_singleton(
                RoboflowClient,
                RoboflowClient(http_client=get_shared_http_client())
            )

        try:
            container.get(LocalImageStorage)
        except ValueError:
            container.register_singleton(LocalImageStorage, LocalImageStorage())

        logger.info("Registered external services (RoboflowClient, LocalImageStorage)")
