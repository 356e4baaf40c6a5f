"""
Recipe API - Persistence Gateway
==================================

What:  The only object handlers use to reach the datastore.
Why:   Handlers need exactly three primitives: read one row, read many rows,
       write (insert/delete). Keeping them behind one small class means services
       never touch sessions or cursors, and tests can swap in an AsyncMock.
How:   Every primitive takes a SQLAlchemy Core statement. Values are bound
       parameters of that statement, never string-formatted into SQL.
When:  One gateway per request, wrapping that request's AsyncSession.

Suspension point:
    Each primitive is a coroutine; awaiting it is where the request yields
    control to the event loop while the datastore works.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy import Delete, Executable, Insert
from sqlalchemy.ext.asyncio import AsyncSession


Row = Dict[str, Any]


@dataclass(frozen=True)
class WriteResult:
    """Outcome of an insert or delete."""

    rowcount: int
    inserted_id: Optional[int] = None


class PersistenceGateway:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_one(self, statement: Executable) -> Optional[Row]:
        """Execute a read and return the first row as a dict, or None."""
        result = await self.session.execute(statement)
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def fetch_all(self, statement: Executable) -> List[Row]:
        """Execute a read and return every row as a dict (empty list when none)."""
        result = await self.session.execute(statement)
        return [dict(row) for row in result.mappings().all()]

    async def execute_write(self, statement: Insert | Delete) -> WriteResult:
        """
        Execute an insert or delete in its own transaction.

        Returns the affected row count and, for single-row inserts, the
        datastore-assigned primary key. Rolls back and re-raises on failure.
        """
        try:
            result = await self.session.execute(statement)
            inserted_id = None
            if result.is_insert and result.inserted_primary_key:
                inserted_id = result.inserted_primary_key[0]
            rowcount = result.rowcount
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return WriteResult(rowcount=rowcount, inserted_id=inserted_id)
