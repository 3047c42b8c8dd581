import logging
from datetime import datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.models.mood_records import MoodRecord
from wellbeing.models.recommendations import Recommendation
from wellbeing.models.users import User
from wellbeing.services.data_source import DB_ERRORS
from wellbeing.services.user_service import static_users
from wellbeing.utils.constants import (
    RECOMMENDATION_CATALOG,
    SEED_MOOD_RECORDS,
    SEED_OTHER_MOOD_RECORDS,
)

logger = logging.getLogger(__name__)


async def _is_empty(db: AsyncSession, model) -> bool:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one() == 0


async def seed_database(db: AsyncSession) -> None:
    """비어 있는 테이블에만 예시 데이터를 채움 (사용자 3명, 기분 기록 10개, 추천 25개)"""
    now = datetime.now()

    try:
        if await _is_empty(db, User):
            db.add_all(static_users(now))
            await db.flush()
            logger.info("Seeded users")

        if await _is_empty(db, MoodRecord):
            db.add_all(
                MoodRecord(
                    id=mood_id,
                    user_id=user_id,
                    mood_score=score,
                    notes=notes,
                    recorded_at=now - timedelta(days=days_ago),
                )
                for (mood_id, user_id, score, notes, days_ago) in SEED_MOOD_RECORDS + SEED_OTHER_MOOD_RECORDS
            )
            logger.info("Seeded mood records")

        if await _is_empty(db, Recommendation):
            db.add_all(Recommendation(**item) for item in RECOMMENDATION_CATALOG)
            logger.info("Seeded recommendations")

        await db.commit()

    except DB_ERRORS as e:
        logger.warning(f"Seeding skipped, database unavailable: {e!r}")
        await db.rollback()
