# wellbeing/services/ai_service.py

import logging
from datetime import datetime
from typing import Optional, Sequence

from wellbeing.config import AI_STATUS_TTL_SECONDS
from wellbeing.schemas.ai import AIStatus
from wellbeing.schemas.moods import MoodEntry
from wellbeing.services.ai_client import AIServiceError, TextGenerator

logger = logging.getLogger(__name__)

RECENT_ENTRIES = 3

DISABLED_RECOMMENDATION = (
    "Take regular breaks during work. "
    "Consider a 5-minute walk every hour to boost energy and focus."
)
NO_HISTORY_RECOMMENDATION = "Start tracking your mood regularly to receive personalized recommendations."

RECOMMENDATION_SYSTEM_PROMPT = (
    "You are an expert in workplace wellbeing and employee mental health. "
    "Based on the user's mood history, provide ONE specific, practical recommendation "
    "they could implement today or this week to improve their wellbeing. "
    "Keep it under 2 sentences."
)

# AI 호출 실패 시 시각(hour*100 + minute)으로 하나 선택
FALLBACK_TIPS = [
    "Consider taking short breaks throughout your workday to recharge. Even a five-minute break every hour can significantly improve your focus and wellbeing.",
    "Try the 20-20-20 rule when working at your computer: every 20 minutes, look at something 20 feet away for 20 seconds to reduce eye strain and mental fatigue.",
    "Schedule focused work blocks of 25-30 minutes with short breaks in between to maintain high productivity and mental clarity throughout your day.",
    "Consider keeping a gratitude journal by writing down three things you're thankful for each day, which research shows can significantly improve wellbeing over time.",
    "Start your workday with a quick 2-minute planning session to identify your top priorities, which can reduce stress and increase productivity.",
    "Try a 5-minute desk stretching routine to release tension in your neck, shoulders, and back, areas that commonly hold stress during the workday.",
    "For better work-life balance, establish clear boundaries like setting specific end times for your workday and taking a full lunch break away from your desk.",
    "Practice a brief mindfulness exercise before important meetings or challenging tasks to improve focus and reduce stress response.",
    "Stay hydrated throughout your workday by keeping a water bottle at your desk. Even mild dehydration can affect concentration and energy levels.",
    "Incorporate a short walk into your day, even just 10 minutes, which can boost mood, creativity, and help manage stress.",
]

STATUS_PROBE_PROMPT = "Hello"
STATUS_PROBE_SYSTEM_PROMPT = "You are a helpful assistant."
STATUS_PROBE_MAX_TOKENS = 5
STATUS_PROBE_TIMEOUT = 5.0


def fallback_tip(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return FALLBACK_TIPS[(now.hour * 100 + now.minute) % len(FALLBACK_TIPS)]


def build_recommendation_prompt(history: Sequence[MoodEntry]) -> str:
    recent = sorted(history, key=lambda m: m.recorded_at, reverse=True)[:RECENT_ENTRIES]

    lines = ["Recent mood entries:"]
    for mood in recent:
        notes = mood.notes or "No notes provided"
        lines.append(f"- Date: {mood.recorded_at:%Y-%m-%d %H:%M}, Score: {mood.score}/5, Notes: '{notes}'")

    average = sum(m.score for m in recent) / len(recent)
    lines.append("")
    lines.append(f"Average mood score: {average:.1f}/5")
    return "\n".join(lines)


async def personalized_recommendation(
    history: Sequence[MoodEntry],
    generator: Optional[TextGenerator],
    now: Optional[datetime] = None,
) -> str:
    if generator is None:
        logger.info("AI features are disabled. Returning standard recommendation.")
        return DISABLED_RECOMMENDATION

    if not history:
        return NO_HISTORY_RECOMMENDATION

    try:
        reply = await generator.generate(build_recommendation_prompt(history), RECOMMENDATION_SYSTEM_PROMPT)
    except (AIServiceError, OSError) as e:
        logger.error(f"Error generating AI recommendation: {e}")
        return fallback_tip(now)

    return reply.strip() if reply and reply.strip() else fallback_tip(now)


async def check_ai_status(
    generator: Optional[TextGenerator],
    previous: Optional[AIStatus] = None,
    ttl_seconds: float = AI_STATUS_TTL_SECONDS,
    now: Optional[datetime] = None,
) -> AIStatus:
    """
    Report whether the AI endpoint answers.

    The caller owns the last result and passes it back as `previous`;
    a result younger than `ttl_seconds` is returned as-is with `cached=True`.
    """
    now = now or datetime.now()

    if generator is None:
        return AIStatus(
            status="disabled",
            message="AI features are disabled in configuration",
            is_available=False,
            checked_at=now,
        )

    if previous is not None and previous.status != "disabled":
        age = (now - previous.checked_at).total_seconds()
        if 0 <= age < ttl_seconds:
            return previous.model_copy(update={"cached": True})

    try:
        await generator.generate(
            STATUS_PROBE_PROMPT,
            STATUS_PROBE_SYSTEM_PROMPT,
            max_tokens=STATUS_PROBE_MAX_TOKENS,
            timeout=STATUS_PROBE_TIMEOUT,
        )
    except (AIServiceError, OSError) as e:
        logger.error(f"Error checking AI service status: {e}")
        return AIStatus(
            status="offline",
            message=f"AI service is unreachable: {e}",
            is_available=False,
            checked_at=now,
            response_code=getattr(e, "status_code", None),
            error=str(e),
        )

    return AIStatus(
        status="online",
        message="AI service is online and responding",
        is_available=True,
        checked_at=now,
        response_code=200,
    )
