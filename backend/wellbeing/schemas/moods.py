from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date, datetime

MIN_MOOD_SCORE = 1
MAX_MOOD_SCORE = 5


def clamp_score(score: int) -> int:
    return max(MIN_MOOD_SCORE, min(MAX_MOOD_SCORE, int(score)))


class MoodEntry(BaseModel):
    id: int
    user_id: int
    score: int
    notes: Optional[str] = None
    recorded_at: datetime

    @field_validator("score")
    @classmethod
    def _clamp(cls, v: int) -> int:
        return clamp_score(v)


class MoodCreateRequest(BaseModel):
    user_id: Optional[int] = None  # 없으면 기본 사용자
    score: int = Field(..., description="1 (very low) ~ 5 (very good)")
    notes: Optional[str] = None

    # int 변환은 pydantic 이 먼저 처리 (실패 시 422)
    @field_validator("score")
    @classmethod
    def _clamp(cls, v: int) -> int:
        return clamp_score(v)


class MoodListResponse(BaseModel):
    moods: List[MoodEntry]
    data_source: str


class MoodTrend(BaseModel):
    date: date
    average_mood: float


class WellbeingMetrics(BaseModel):
    average_mood: float
    mood_entries_count: int
    mood_trends: List[MoodTrend]


class MoodTotalsResponse(BaseModel):
    total_entries: int
    average_mood: float
    data_source: str
    last_updated: datetime
