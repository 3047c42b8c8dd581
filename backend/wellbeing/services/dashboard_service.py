import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.database import is_database_connected
from wellbeing.schemas.dashboard import DashboardStats
from wellbeing.services.mood_store import MoodStore
from wellbeing.services.recommendation_catalog import RecommendationCatalog
from wellbeing.services.user_service import UserService
from wellbeing.services.wellbeing_service import average_mood

logger = logging.getLogger(__name__)

ACTIVE_WINDOW_DAYS = 7


async def get_dashboard_stats(db: Optional[AsyncSession], now: Optional[datetime] = None) -> DashboardStats:
    now = now or datetime.now()

    users, data_source = await UserService(db).list_users()
    moods = await MoodStore(db).get_all()
    catalog = await RecommendationCatalog(db).get_all()

    # 최근 7일 이내 로그인한 사용자
    since = now - timedelta(days=ACTIVE_WINDOW_DAYS)
    active_users = sum(1 for u in users if u.last_login_at and u.last_login_at >= since)

    connected = await is_database_connected()
    logger.info(f"Dashboard stats: users={len(users)}, moods={len(moods)}, db_connected={connected}")

    return DashboardStats(
        total_users=len(users),
        active_users=active_users,
        total_mood_entries=len(moods),
        average_mood=average_mood(moods, digits=1),
        total_recommendations=len(catalog),
        database_status="Connected" if connected else "Disconnected",
        data_source=data_source,
        last_updated=now,
    )
