from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.database import get_db
from wellbeing.schemas.dashboard import DashboardStats
from wellbeing.services.dashboard_service import get_dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def stats(db: AsyncSession = Depends(get_db)):
    return await get_dashboard_stats(db)
