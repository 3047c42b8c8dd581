import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from wellbeing.config import DATABASE_URL, DB_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def build_engine(url: str):
    if not url:
        return None

    if url.startswith("sqlite"):
        # aiosqlite 연결은 이벤트 루프에 묶이므로 풀링하지 않음
        return create_async_engine(url, poolclass=NullPool)

    # pool_pre_ping=True → 연결 끊김 자동 복구
    # pool_recycle=3600 → 1시간마다 재연결
    return create_async_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=10,
        max_overflow=20,
    )


# Engine 생성 (DATABASE_URL 이 비어 있으면 None → static 데이터 모드)
engine = build_engine(DATABASE_URL)

# 세션 팩토리
SessionLocal = (
    async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    if engine is not None
    else None
)

# Base 클래스 (모든 모델이 상속)
Base = declarative_base()


# Dependency - API에서 DB 세션 생성/닫기
async def get_db():
    if SessionLocal is None:
        yield None
        return

    db: AsyncSession = SessionLocal()
    try:
        yield db
    finally:
        await db.close()


async def is_database_connected(timeout: float = DB_TIMEOUT_SECONDS) -> bool:
    if engine is None:
        return False

    async def _ping():
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    try:
        await asyncio.wait_for(_ping(), timeout=timeout)
        return True
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
        logger.warning(f"Database connectivity check failed: {e}")
        return False
