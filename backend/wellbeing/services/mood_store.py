# wellbeing/services/mood_store.py

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.models.mood_records import MoodRecord
from wellbeing.schemas.moods import MoodEntry, clamp_score
from wellbeing.services.data_source import FallbackRepository
from wellbeing.utils.constants import SEED_MOOD_RECORDS, SEED_OTHER_MOOD_RECORDS

logger = logging.getLogger(__name__)


def _entry_from_seed(row, now: datetime, user_id: Optional[int] = None) -> MoodEntry:
    mood_id, seed_user_id, score, notes, days_ago = row
    return MoodEntry(
        id=mood_id,
        user_id=user_id if user_id is not None else seed_user_id,
        score=score,
        notes=notes,
        recorded_at=now - timedelta(days=days_ago),
    )


def static_user_moods(user_id: int, now: Optional[datetime] = None) -> List[MoodEntry]:
    # 어떤 사용자든 같은 7개의 예시 기록을 돌려줌
    now = now or datetime.now()
    return [_entry_from_seed(row, now, user_id) for row in SEED_MOOD_RECORDS]


def static_all_moods(now: Optional[datetime] = None) -> List[MoodEntry]:
    now = now or datetime.now()
    return [_entry_from_seed(row, now) for row in SEED_MOOD_RECORDS + SEED_OTHER_MOOD_RECORDS]


def to_entry(record: MoodRecord) -> MoodEntry:
    return MoodEntry(
        id=record.id,
        user_id=record.user_id,
        score=record.mood_score,
        notes=record.notes,
        recorded_at=record.recorded_at or datetime.now(),
    )


class MoodStore(FallbackRepository):
    """Mood entries per user: query-by-user, query-all, query-by-id, record, delete."""

    async def get_by_user(self, user_id: int) -> List[MoodEntry]:
        async def query(db: AsyncSession):
            result = await db.execute(
                select(MoodRecord)
                .where(MoodRecord.user_id == user_id)
                .order_by(MoodRecord.recorded_at.asc(), MoodRecord.id.asc())
            )
            return [to_entry(r) for r in result.scalars().all()]

        return await self._with_fallback(
            f"Loading mood records for user {user_id}",
            query,
            lambda: static_user_moods(user_id),
        )

    async def get_all(self) -> List[MoodEntry]:
        async def query(db: AsyncSession):
            result = await db.execute(select(MoodRecord).order_by(MoodRecord.id.asc()))
            return [to_entry(r) for r in result.scalars().all()]

        return await self._with_fallback("Loading all mood records", query, static_all_moods)

    async def get_by_id(self, mood_id: int) -> Optional[MoodEntry]:
        async def query(db: AsyncSession):
            record = await db.get(MoodRecord, mood_id)
            return to_entry(record) if record else None

        def fallback():
            return next((m for m in static_all_moods() if m.id == mood_id), None)

        return await self._with_fallback(f"Loading mood record {mood_id}", query, fallback)

    async def record(self, user_id: int, score: int, notes: Optional[str] = None) -> MoodEntry:
        score = clamp_score(score)
        logger.info(f"Mood recorded: user={user_id}, score={score}, notes={notes!r}")

        async def query(db: AsyncSession):
            record = MoodRecord(user_id=user_id, mood_score=score, notes=notes)
            db.add(record)
            await db.commit()
            await db.refresh(record)
            return to_entry(record)

        def fallback():
            # static 모드에서는 저장하지 않고 그대로 돌려줌
            next_id = len(SEED_MOOD_RECORDS) + len(SEED_OTHER_MOOD_RECORDS) + 1
            return MoodEntry(id=next_id, user_id=user_id, score=score, notes=notes,
                             recorded_at=datetime.now())

        return await self._with_fallback("Recording mood", query, fallback)

    async def delete(self, mood_id: int) -> bool:
        async def query(db: AsyncSession):
            result = await db.execute(delete(MoodRecord).where(MoodRecord.id == mood_id))
            await db.commit()
            return result.rowcount > 0

        def fallback():
            return any(m.id == mood_id for m in static_all_moods())

        return await self._with_fallback(f"Deleting mood record {mood_id}", query, fallback)
