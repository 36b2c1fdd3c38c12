# Standard library imports
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient

# Local application imports
from ...domain.repositories.transaction_manager import TransactionManager
from .mongo_connection import get_client

logger = logging.getLogger(__name__)


class MongoTransactionManager(TransactionManager):
    """
    MongoDB implementation of TransactionManager.

    With transactions enabled every boundary is a client session running a
    multi-document transaction (replica set or sharded cluster required).
    Disabled, the boundary yields None and each write commits on its own.
    """

    def __init__(self, client: Optional[AsyncIOMotorClient] = None, enabled: bool = False) -> None:
        self.client = client if client is not None else get_client()
        self.enabled = enabled
        if not enabled:
            logger.info("MongoDB transactions disabled; paired writes are not atomic")

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Optional[Any]]:
        if not self.enabled:
            yield None
            return

        async with await self.client.start_session() as session:
            async with session.start_transaction():
                yield session
