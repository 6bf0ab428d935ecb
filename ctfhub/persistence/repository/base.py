"""Shared helpers for PostgreSQL repositories."""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

import logfire
from sqlalchemy import Table, delete, select
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ctfhub.persistence.error import PersistenceError


class PostgresRepository:
    """Base class holding the request-scoped session.

    Statements go through ``_execute`` so that driver failures surface as
    ``PersistenceError`` instead of leaking SQLAlchemy types upwards.

    Row locks are always taken as ``FOR NO KEY UPDATE``. That lock still
    admits the ``FOR KEY SHARE`` lock PostgreSQL takes on a referenced row
    when another transaction inserts a foreign key to it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any) -> Result:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error(
                "Database statement failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise PersistenceError(str(e)) from e

    async def _sync_links(
        self,
        table: Table,
        owner_column: str,
        owner_id: UUID,
        link_column: str,
        link_ids: Sequence[UUID],
    ) -> None:
        """Make an ordered junction list match ``link_ids``.

        Only changed rows are written, so saving an aggregate never touches
        (or key-share locks) rows it did not change. Kept rows keep their
        position; new rows are appended after the highest one.
        """
        owner = table.c[owner_column]
        link = table.c[link_column]

        result = await self._execute(
            select(link, table.c.position).where(owner == owner_id)
        )
        current = {row[link_column]: row["position"] for row in result.mappings()}
        wanted = list(dict.fromkeys(link_ids))

        removed = [link_id for link_id in current if link_id not in wanted]
        if removed:
            await self._execute(
                delete(table).where(owner == owner_id, link.in_(removed))
            )

        added = [link_id for link_id in wanted if link_id not in current]
        if added:
            start = max(current.values(), default=-1) + 1
            await self._execute(
                table.insert().values(
                    [
                        {owner_column: owner_id, link_column: link_id, "position": start + i}
                        for i, link_id in enumerate(added)
                    ]
                )
            )
