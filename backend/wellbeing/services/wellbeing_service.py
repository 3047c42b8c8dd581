from datetime import datetime
from typing import List, Sequence

import pandas as pd

from wellbeing.schemas.moods import MoodEntry, MoodTotalsResponse, MoodTrend, WellbeingMetrics


def _to_frame(entries: Sequence[MoodEntry]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"score": m.score, "recorded_at": m.recorded_at} for m in entries],
        columns=["score", "recorded_at"],
    )


def build_mood_trends(entries: Sequence[MoodEntry]) -> List[MoodTrend]:
    """Per-day average mood, oldest day first."""
    if not entries:
        return []

    df = _to_frame(entries)
    df["date"] = pd.to_datetime(df["recorded_at"]).dt.date

    daily = df.groupby("date")["score"].mean().sort_index()

    return [
        MoodTrend(date=day, average_mood=round(float(avg), 2))
        for day, avg in daily.items()
    ]


def average_mood(entries: Sequence[MoodEntry], digits: int = 2) -> float:
    if not entries:
        return 0.0
    return round(float(_to_frame(entries)["score"].mean()), digits)


def get_wellbeing_metrics(entries: Sequence[MoodEntry]) -> WellbeingMetrics:
    return WellbeingMetrics(
        average_mood=average_mood(entries),
        mood_entries_count=len(entries),
        mood_trends=build_mood_trends(entries),
    )


def get_mood_totals(entries: Sequence[MoodEntry], data_source: str) -> MoodTotalsResponse:
    return MoodTotalsResponse(
        total_entries=len(entries),
        average_mood=average_mood(entries),
        data_source=data_source,
        last_updated=datetime.now(),
    )
