# wellbeing/services/recommendation_engine.py

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from wellbeing.schemas.moods import MoodEntry
from wellbeing.schemas.recommendations import Recommendation
from wellbeing.utils.constants import (
    CATEGORY_EXERCISE,
    CATEGORY_MINDFULNESS,
    CATEGORY_OVERVIEW,
    CATEGORY_SOCIAL,
    CATEGORY_WORK_LIFE,
)

logger = logging.getLogger(__name__)

# 동점일 때는 이 순서를 유지
CATEGORIES = (CATEGORY_MINDFULNESS, CATEGORY_EXERCISE, CATEGORY_SOCIAL, CATEGORY_WORK_LIFE)

GENERIC_COUNT = 5        # 기록이 없을 때 돌려줄 개수
PER_CATEGORY = 2         # 카테고리별 추천 개수
MIN_TOTAL = 6            # overview + 5
MAX_TOTAL = 8            # overview + 7

OVERVIEW_ID = 0
OVERVIEW_TITLE = "Your Personalized Wellbeing Plan"

# (keywords, weight deltas) - applied to all notes joined and lower-cased
KEYWORD_RULES = [
    (("stress", "anxious", "anxiety", "overwhelm", "worried"),
     {CATEGORY_MINDFULNESS: 3, CATEGORY_WORK_LIFE: 2}),
    (("tired", "exhausted", "energy", "sleep"),
     {CATEGORY_EXERCISE: 2, CATEGORY_MINDFULNESS: 1}),
    (("team", "colleague", "meeting", "collaboration"),
     {CATEGORY_SOCIAL: 3}),
    (("deadline", "workload", "balance", "overwork"),
     {CATEGORY_WORK_LIFE: 3}),
]

BAND_MESSAGES = {
    ("low", "declining"): "Your wellbeing seems to have been challenged recently. We've focused on recommendations that can help you regain balance and improve your mental state.",
    ("low", "improving"): "While your mood has been improving, we're providing supportive strategies to continue this positive trajectory and boost your wellbeing further.",
    ("low", "stable"): "Your mood has been consistently lower than ideal. These recommendations are designed to help elevate your wellbeing and introduce positive changes.",
    ("medium", "declining"): "We've noticed your mood trending downward. These recommendations focus on stopping this decline and rebuilding your positive momentum.",
    ("medium", "improving"): "You're on a positive path! These recommendations will help maintain your improving mood and continue building your wellbeing.",
    ("medium", "stable"): "Your wellbeing appears stable in the moderate range. These recommendations aim to help you take the next step toward thriving rather than just coping.",
    ("good", "declining"): "While your overall mood has been good, we've noticed a recent downward trend. These recommendations will help you address this early and maintain your wellbeing.",
    ("good", "improving"): "Excellent progress! Your wellbeing is trending very positively. We've selected recommendations to help you maintain and build on these great results.",
    ("good", "stable"): "Your wellbeing is consistently good. These recommendations focus on maintaining this positive state and introducing new practices to your routine.",
}

FOCUS_MESSAGES = {
    CATEGORY_MINDFULNESS: "We're especially focusing on mindfulness practices to help you manage stress and improve mental clarity.",
    CATEGORY_EXERCISE: "We're highlighting physical activity recommendations to boost your energy and mood through movement.",
    CATEGORY_SOCIAL: "We're emphasizing social connection strategies to strengthen your support network and sense of belonging.",
    CATEGORY_WORK_LIFE: "We're prioritizing work-life balance techniques to help you create healthier boundaries and reduce burnout risk.",
}


def mood_band(average: float) -> str:
    if average < 2.5:
        return "low"
    elif average < 3.5:
        return "medium"
    return "good"


def trend_band(trend: float) -> str:
    if trend < -0.5:
        return "declining"
    elif trend > 0.5:
        return "improving"
    return "stable"


class RecommendationEngine:

    # 1) 평균 / 추세 계산
    @staticmethod
    def summarize(history: Sequence[MoodEntry]) -> Tuple[float, float]:
        average = sum(m.score for m in history) / len(history)
        ordered = sorted(history, key=lambda m: m.recorded_at)
        trend = float(ordered[-1].score - ordered[0].score) if len(ordered) > 1 else 0.0
        return average, trend

    # 2) 카테고리 가중치 계산
    @staticmethod
    def score_categories(history: Sequence[MoodEntry]) -> Dict[str, int]:
        weights = {category: 0 for category in CATEGORIES}
        average, trend = RecommendationEngine.summarize(history)

        band = mood_band(average)
        if band == "low":
            weights[CATEGORY_MINDFULNESS] += 3
            weights[CATEGORY_SOCIAL] += 2
        elif band == "medium":
            weights[CATEGORY_EXERCISE] += 2
            weights[CATEGORY_WORK_LIFE] += 2
        else:
            weights[CATEGORY_SOCIAL] += 2
            weights[CATEGORY_WORK_LIFE] += 1

        direction = trend_band(trend)
        if direction == "declining":
            weights[CATEGORY_MINDFULNESS] += 2
            weights[CATEGORY_EXERCISE] += 1
        elif direction == "improving":
            weights[CATEGORY_SOCIAL] += 1
            weights[CATEGORY_EXERCISE] += 1

        all_notes = " ".join((m.notes or "").lower() for m in history)
        for keywords, deltas in KEYWORD_RULES:
            if any(k in all_notes for k in keywords):
                for category, delta in deltas.items():
                    weights[category] += delta

        return weights

    @staticmethod
    def rank_categories(weights: Dict[str, int]) -> List[Tuple[str, int]]:
        # sorted() is stable, so ties keep CATEGORIES order
        return sorted(weights.items(), key=lambda kv: kv[1], reverse=True)

    @staticmethod
    def build_overview(average: float, trend: float, focus_category: str) -> Recommendation:
        message = BAND_MESSAGES[(mood_band(average), trend_band(trend))]
        focus = FOCUS_MESSAGES.get(focus_category)
        if focus:
            message = f"{message} {focus}"

        return Recommendation(
            id=OVERVIEW_ID,
            title=OVERVIEW_TITLE,
            description=message,
            category=CATEGORY_OVERVIEW,
        )

    # 3) 개인화 추천 목록 생성
    @staticmethod
    def personalize(
        history: Sequence[MoodEntry],
        catalog: Sequence[Recommendation],
        rng: Optional[random.Random] = None,
    ) -> List[Recommendation]:
        if not history:
            return list(catalog[:GENERIC_COUNT])

        rng = rng or random.Random()

        try:
            average, trend = RecommendationEngine.summarize(history)
            ranked = RecommendationEngine.rank_categories(
                RecommendationEngine.score_categories(history)
            )

            overview = RecommendationEngine.build_overview(average, trend, ranked[0][0])
            picked = [overview]
            used_ids = {overview.id}

            def take(pool: List[Recommendation], count: int) -> int:
                chosen = rng.sample(pool, min(count, len(pool)))
                picked.extend(chosen)
                used_ids.update(r.id for r in chosen)
                return len(chosen)

            def unused(category: Optional[str] = None) -> List[Recommendation]:
                return [
                    r for r in catalog
                    if r.id not in used_ids and (category is None or r.category == category)
                ]

            for category, weight in ranked:
                if weight > 0:
                    take(unused(category), PER_CATEGORY)

            # overview + 5 개가 안 되면 다른 카테고리, 그다음 남은 전체에서 채움
            needed = MIN_TOTAL - len(picked)
            if needed > 0:
                represented = {r.category for r in picked}
                remaining_categories = [
                    c for c in dict.fromkeys(r.category for r in catalog) if c not in represented
                ]
                for category in remaining_categories:
                    needed -= take(unused(category), needed)
                    if needed <= 0:
                        break

                if needed > 0:
                    take(unused(), needed)

            return picked[:MAX_TOTAL]

        except Exception:
            logger.exception("Error generating personalized recommendations")
            return list(catalog[:MAX_TOTAL])
