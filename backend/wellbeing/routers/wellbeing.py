import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.config import DEFAULT_USER_ID
from wellbeing.database import get_db
from wellbeing.schemas.moods import (
    MoodCreateRequest,
    MoodEntry,
    MoodListResponse,
    MoodTotalsResponse,
    WellbeingMetrics,
)
from wellbeing.schemas.recommendations import Recommendation
from wellbeing.services.mood_store import MoodStore
from wellbeing.services.recommendation_catalog import RecommendationCatalog
from wellbeing.services.recommendation_engine import RecommendationEngine
from wellbeing.services.wellbeing_service import get_mood_totals, get_wellbeing_metrics

logger = logging.getLogger(__name__)

router = APIRouter()


# 기본 사용자의 평균 / 일별 추세
@router.get("", response_model=WellbeingMetrics)
async def wellbeing_metrics(db: AsyncSession = Depends(get_db)):
    moods = await MoodStore(db).get_by_user(DEFAULT_USER_ID)
    return get_wellbeing_metrics(moods)


# 전체 기록 합계 (관리자용)
@router.get("/metrics", response_model=MoodTotalsResponse)
async def mood_totals(db: AsyncSession = Depends(get_db)):
    store = MoodStore(db)
    moods = await store.get_all()
    return get_mood_totals(moods, store.data_source)


@router.post("/mood", response_model=MoodEntry)
async def record_mood(payload: MoodCreateRequest, db: AsyncSession = Depends(get_db)):
    user_id = payload.user_id or DEFAULT_USER_ID
    return await MoodStore(db).record(user_id, payload.score, payload.notes)


@router.get("/mood", response_model=MoodListResponse)
async def list_moods(db: AsyncSession = Depends(get_db)):
    store = MoodStore(db)
    moods = await store.get_all()
    return MoodListResponse(moods=moods, data_source=store.data_source)


@router.get("/mood/entry/{mood_id}", response_model=MoodEntry)
async def get_mood(mood_id: int, db: AsyncSession = Depends(get_db)):
    mood = await MoodStore(db).get_by_id(mood_id)
    if not mood:
        raise HTTPException(status_code=404, detail=f"Mood record with ID {mood_id} not found")
    return mood


@router.delete("/mood/entry/{mood_id}", status_code=204)
async def delete_mood(mood_id: int, db: AsyncSession = Depends(get_db)):
    if not await MoodStore(db).delete(mood_id):
        raise HTTPException(status_code=404, detail=f"Mood record with ID {mood_id} not found")
    return Response(status_code=204)


@router.get("/mood/{user_id}", response_model=MoodListResponse)
async def user_moods(user_id: int, db: AsyncSession = Depends(get_db)):
    store = MoodStore(db)
    moods = await store.get_by_user(user_id)
    return MoodListResponse(moods=moods, data_source=store.data_source)


@router.get("/recommendations", response_model=List[Recommendation])
async def recommendations(
    user_id: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    user_id = user_id or DEFAULT_USER_ID

    history = await MoodStore(db).get_by_user(user_id)
    catalog = await RecommendationCatalog(db).get_all()

    result = RecommendationEngine.personalize(history, catalog)
    logger.info(f"Generated {len(result)} recommendations for user {user_id}")
    return result


@router.get("/recommendations/catalog", response_model=List[Recommendation])
async def recommendation_catalog(db: AsyncSession = Depends(get_db)):
    return await RecommendationCatalog(db).get_all()
