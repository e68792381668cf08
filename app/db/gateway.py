"""
Query gateway: the only place statements reach the database.

Statements are SQLAlchemy constructs, so every user-supplied value travels as
a bound parameter. Driver and connection failures surface as StorageError.
"""
import logging
from typing import Any, Sequence

from sqlalchemy import Executable, Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StorageError

logger = logging.getLogger(__name__)

# asyncpg lets socket errors (ConnectionRefusedError etc.) through unwrapped
DB_ERRORS = (SQLAlchemyError, OSError)


def _driver_message(exc: Exception) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class QueryGateway:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _fail(self, exc: Exception, action: str) -> StorageError:
        await self.session.rollback()
        message = _driver_message(exc)
        logger.error("gateway: %s failed: %s", action, message)
        return StorageError(message)

    async def _run(self, statement: Executable) -> Any:
        try:
            return await self.session.execute(statement)
        except DB_ERRORS as exc:
            raise await self._fail(exc, "query") from exc

    async def fetch_all(self, statement: Executable) -> Sequence[Row]:
        result = await self._run(statement)
        return result.all()

    async def fetch_one(self, statement: Executable) -> Row | None:
        result = await self._run(statement)
        return result.first()

    async def execute(self, statement: Executable) -> int:
        """Run a write and commit it. Returns the affected row count."""
        result = await self._run(statement)
        try:
            await self.session.commit()
        except DB_ERRORS as exc:
            raise await self._fail(exc, "commit") from exc
        return result.rowcount
