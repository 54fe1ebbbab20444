"""Compare-and-set vote write shared by the post and comment tables."""

import logfire
from sqlalchemy import Table, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Votable
from agora.persistence.mappers import vote_state_to_dict


async def compare_and_set_votes(
    session: AsyncSession, table: Table, content: Votable, expected_version: int
) -> bool:
    """Write vote sets, score and version in one guarded UPDATE.

    Under READ COMMITTED a concurrent writer holding the row lock makes this
    statement wait; once that writer commits the version predicate is
    re-checked against the new row and no longer matches.

    Returns:
        True if exactly one row was written
    """
    stmt = (
        update(table)
        .where(table.c.id == content.id)
        .where(table.c.version == expected_version)
        .values(**vote_state_to_dict(content))
    )
    result = await session.execute(stmt)
    await session.flush()

    written = result.rowcount == 1
    if not written:
        logfire.info(
            "Vote compare-and-set lost",
            table=table.name,
            content_id=str(content.id),
            expected_version=expected_version,
        )
    return written
