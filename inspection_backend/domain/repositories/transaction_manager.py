from abc import ABC, abstractmethod
from typing import Any, AsyncContextManager, Optional


class TransactionManager(ABC):
    """Opens an atomic boundary around paired detection/timeline writes"""

    @abstractmethod
    def transaction(self) -> AsyncContextManager[Optional[Any]]:
        """
        Async context manager yielding a storage session (or None when the
        backend has no transactions). Commits on normal exit, aborts on error.
        """
        pass
