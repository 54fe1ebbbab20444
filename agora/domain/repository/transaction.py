"""Transaction scope interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionScope(ABC):
    """Savepoints within the current unit of work.

    Side effects that must not abort the surrounding transaction run
    inside a savepoint: any error inside it rolls back to the savepoint
    and then propagates to the caller.
    """

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Open a savepoint for the duration of an ``async with`` block."""
        pass
