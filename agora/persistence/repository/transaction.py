"""PostgreSQL transaction scope."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import TransactionScope


class PostgresTransactionScope(TransactionScope):
    """Savepoints on the request's session via SAVEPOINT / ROLLBACK TO."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
