from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_client,
    get_database,
    get_inspection_collection,
    get_detection_collection,
    get_timeline_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client, database and collections in the container.
        Repositories and the transaction manager take their handles from here.
        """
        container.register_singleton("mongo_client", get_client())
        container.register_singleton("database", get_database())
        container.register_singleton("inspection_collection", get_inspection_collection())
        container.register_singleton("detection_collection", get_detection_collection())
        container.register_singleton("timeline_collection", get_timeline_collection())
