# wellbeing/services/data_source.py

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.config import DB_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

T = TypeVar("T")

DATA_SOURCE_DATABASE = "Database"
DATA_SOURCE_NOT_CONFIGURED = "Static Data (Database Not Configured)"
DATA_SOURCE_UNAVAILABLE = "Static Data (Database Unavailable)"

# DB 를 쓸 수 없다고 판단하는 예외들 (연결 실패, 드라이버 오류, timeout)
DB_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


class FallbackRepository:
    """
    Base for repositories that read from the database and substitute static
    seed data whenever the database is not configured, fails, or times out.

    `data_source` reports where the last answer came from.
    """

    def __init__(self, db: Optional[AsyncSession], timeout: float = DB_TIMEOUT_SECONDS):
        self.db = db
        self.timeout = timeout
        self.data_source = DATA_SOURCE_DATABASE if db is not None else DATA_SOURCE_NOT_CONFIGURED

    async def _with_fallback(
        self,
        action: str,
        query: Callable[[AsyncSession], Awaitable[T]],
        fallback: Callable[[], T],
    ) -> T:
        if self.db is None:
            return fallback()

        try:
            result = await asyncio.wait_for(query(self.db), timeout=self.timeout)
            self.data_source = DATA_SOURCE_DATABASE
            return result
        except DB_ERRORS as e:
            logger.warning(f"{action} failed, falling back to static data: {e!r}")
            self.data_source = DATA_SOURCE_UNAVAILABLE
            await self._rollback()
            return fallback()

    async def _rollback(self):
        try:
            await self.db.rollback()
        except DB_ERRORS as e:
            logger.warning(f"Session rollback failed: {e!r}")
