from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.config import AI_STATUS_TTL_SECONDS
from wellbeing.database import get_db
from wellbeing.schemas.ai import AIStatus
from wellbeing.schemas.analysis import MoodAnalysis
from wellbeing.schemas.recommendations import PersonalizedRecommendationResponse
from wellbeing.services.ai_client import TextGenerator, get_text_generator
from wellbeing.services.ai_service import check_ai_status, personalized_recommendation
from wellbeing.services.mood_analyzer import analyze_mood
from wellbeing.services.mood_store import MoodStore

router = APIRouter()


@router.get("/analyze/{mood_id}", response_model=MoodAnalysis)
async def analyze(
    mood_id: int,
    db: AsyncSession = Depends(get_db),
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    entry = await MoodStore(db).get_by_id(mood_id)
    if not entry:
        raise HTTPException(status_code=404, detail=f"Mood record with ID {mood_id} not found")

    return await analyze_mood(entry, generator)


@router.get("/recommendation/{user_id}", response_model=PersonalizedRecommendationResponse)
async def recommendation(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    history = await MoodStore(db).get_by_user(user_id)
    text = await personalized_recommendation(history, generator)
    return PersonalizedRecommendationResponse(recommendation=text)


@router.get("/status", response_model=AIStatus)
async def status(
    request: Request,
    generator: Optional[TextGenerator] = Depends(get_text_generator),
):
    # 마지막 결과는 app.state 에 보관하고 다음 호출 때 넘겨줌
    previous = getattr(request.app.state, "ai_status", None)
    result = await check_ai_status(generator, previous, AI_STATUS_TTL_SECONDS)
    request.app.state.ai_status = result
    return result
