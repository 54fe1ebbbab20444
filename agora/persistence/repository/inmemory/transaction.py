"""In-memory transaction scope for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from agora.domain.repository.transaction import TransactionScope


class InMemoryTransactionScope(TransactionScope):
    """Savepoints that only count how they were left.

    In-memory writes are not transactional, so nothing is undone.
    """

    def __init__(self) -> None:
        self.committed = 0
        self.rolled_back = 0

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        try:
            yield
        except Exception:
            self.rolled_back += 1
            raise
        self.committed += 1
