# wellbeing/services/mood_analyzer.py

import json
import logging
from typing import Any, List, Optional

from wellbeing.schemas.analysis import MoodAnalysis
from wellbeing.schemas.moods import MoodEntry, clamp_score
from wellbeing.services.ai_client import AIServiceError, TextGenerator

logger = logging.getLogger(__name__)

MAX_THEMES = 3
MAX_ACTIVITIES = 3
SENTIMENTS = ("positive", "neutral", "negative")

DEFAULT_SENTIMENT = "neutral"
DEFAULT_THEMES = ["general wellbeing"]
DEFAULT_INSIGHTS = "Regular mood tracking helps build awareness of your wellbeing patterns."
DEFAULT_ACTIVITIES = ["Take a short break", "Stay hydrated", "Practice deep breathing"]
FALLBACK_INSIGHTS = (
    "We've received your mood entry. "
    "Regular tracking helps build awareness of your wellbeing patterns."
)

ANALYSIS_SYSTEM_PROMPT = (
    "You are an empathetic AI assistant specializing in workplace wellbeing analysis. "
    "Analyze the user's mood entry and provide insights in JSON format with these fields: "
    "sentiment (positive, neutral, or negative), mainThemes (array of 1-3 themes), "
    "insights (brief analysis, max 2 sentences), and suggestedActivities "
    "(array of 1-3 specific activities)."
)

# score → (theme, insight, activities)
BASE_ANALYSIS = {
    1: ("emotional wellbeing",
        "Your mood score of 1/5 suggests you're having a difficult day. "
        "Consider reaching out to a colleague or taking a mental health break.",
        ["Take a mental health break", "Practice self-compassion exercises",
         "Connect with a supportive colleague"]),
    2: ("stress management",
        "Your mood score of 2/5 indicates some challenges today. "
        "Small breaks and mindfulness can help improve your outlook.",
        ["Try a 5-minute mindfulness exercise", "Take a short walk outside",
         "Listen to calming music"]),
    3: ("balance",
        "Your neutral mood score of 3/5 suggests a balanced day. "
        "This is a good time to focus on maintenance activities for wellbeing.",
        ["Do a quick desk stretch routine", "Drink a glass of water",
         "Prioritize your tasks for the day"]),
    4: ("productivity",
        "Your positive mood score of 4/5 shows you're having a good day. "
        "This is an excellent time to tackle challenging tasks or help others.",
        ["Take on a challenging task", "Share your positivity with colleagues",
         "Document what's working well"]),
    5: ("peak performance",
        "Your excellent mood score of 5/5 indicates you're at your best today. "
        "Harness this energy for creative work and challenging tasks.",
        ["Work on creative projects", "Mentor or help a colleague",
         "Set ambitious goals while motivation is high"]),
}

# 순서대로 적용: activities 는 마지막으로 매칭된 그룹이 덮어씀
KEYWORD_GROUPS = [
    {
        "keywords": ("work", "project", "deadline", "meeting", "boss", "task", "client"),
        "theme": "work pressure",
        "activities": None,
        "insight": "Your notes mention work-related topics",
    },
    {
        "keywords": ("tired", "sleep", "exhausted", "fatigue", "energy", "rest", "nap"),
        "theme": "energy levels",
        "activities": ["Take a power nap (15-20 min)", "Have a healthy snack for energy",
                       "Try a desk stretching routine"],
        "insight": "Your notes suggest energy may be a factor today",
    },
    {
        "keywords": ("stress", "anxiety", "worry", "overwhelm", "pressure", "tense", "nervous"),
        "theme": "stress management",
        "activities": ["Practice deep breathing for 2 minutes", "Try progressive muscle relaxation",
                       "Take a short mindful walk"],
        "insight": "Your notes indicate some stress or pressure",
    },
    {
        "keywords": ("distract", "focus", "concentrate", "attention", "productive"),
        "theme": "focus and concentration",
        "activities": ["Try the Pomodoro technique (25min work, 5min break)",
                       "Clear your workspace of distractions",
                       "Set a clear intention for your next work session"],
        "insight": None,
    },
    {
        "keywords": ("colleague", "team", "social", "friend", "conflict", "communication"),
        "theme": "workplace relationships",
        "activities": ["Schedule a coffee chat with a colleague",
                       "Practice active listening in your next meeting",
                       "Express appreciation to someone on your team"],
        "insight": None,
    },
    {
        "keywords": ("happy", "joy", "accomplish", "success", "proud", "excited", "grateful"),
        "theme": "positive emotions",
        "activities": ["Share your success with someone", "Journal about what went well",
                       "Build on this momentum with another goal"],
        "insight": "Your notes reflect positive emotions or accomplishments",
    },
]


def determine_sentiment(score: int) -> str:
    if score <= 2:
        return "negative"
    if score >= 4:
        return "positive"
    return "neutral"


def fallback_analysis() -> MoodAnalysis:
    return MoodAnalysis(
        sentiment=DEFAULT_SENTIMENT,
        themes=list(DEFAULT_THEMES),
        insights=FALLBACK_INSIGHTS,
        activities=list(DEFAULT_ACTIVITIES),
    )


def _dedupe(items: List[str], limit: int) -> List[str]:
    return list(dict.fromkeys(i for i in items if i))[:limit]


def sanitize_analysis(analysis: Optional[MoodAnalysis]) -> MoodAnalysis:
    if analysis is None:
        return fallback_analysis()

    return MoodAnalysis(
        sentiment=analysis.sentiment or DEFAULT_SENTIMENT,
        themes=_dedupe(analysis.themes or [], MAX_THEMES) or list(DEFAULT_THEMES),
        insights=analysis.insights or DEFAULT_INSIGHTS,
        activities=_dedupe(analysis.activities or [], MAX_ACTIVITIES) or list(DEFAULT_ACTIVITIES),
    )


def _format_time(entry: MoodEntry) -> str:
    # e.g. "3:05 PM"
    return entry.recorded_at.strftime("%I:%M %p").lstrip("0")


def analyze_rule_based(entry: MoodEntry) -> MoodAnalysis:
    try:
        score = clamp_score(entry.score)
        theme, insights, activities = BASE_ANALYSIS[score]
        keyword_themes: List[str] = []
        activities = list(activities)

        notes = (entry.notes or "").lower()
        if notes:
            noted_at = f" (noted at {_format_time(entry)})"

            for group in KEYWORD_GROUPS:
                if not any(k in notes for k in group["keywords"]):
                    continue

                keyword_themes.append(group["theme"])
                if group["activities"]:
                    activities = list(group["activities"])
                if group["insight"]:
                    insights += f" {group['insight']}{noted_at}."

        # 키워드 테마만으로 3개가 차면 점수 기반 테마는 뺌
        if len(keyword_themes) >= MAX_THEMES:
            themes = keyword_themes
        else:
            themes = [theme] + keyword_themes

        return sanitize_analysis(MoodAnalysis(
            sentiment=determine_sentiment(score),
            themes=themes,
            insights=insights,
            activities=activities,
        ))

    except Exception:
        logger.exception("Error generating rule-based analysis")
        return fallback_analysis()


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v]
    return []


def _from_json(data: Any, score: int) -> MoodAnalysis:
    if not isinstance(data, dict):
        return fallback_analysis()

    sentiment = str(data.get("sentiment") or "").strip().lower()
    if sentiment not in SENTIMENTS:
        sentiment = determine_sentiment(score)

    themes = data.get("mainThemes", data.get("main_themes", data.get("themes")))
    activities = data.get("suggestedActivities",
                          data.get("suggested_activities", data.get("activities")))
    insights = data.get("insights")

    return MoodAnalysis(
        sentiment=sentiment,
        themes=_as_list(themes),
        insights=str(insights) if insights else None,
        activities=_as_list(activities),
    )


def parse_ai_analysis(response: str, entry: MoodEntry) -> MoodAnalysis:
    score = clamp_score(entry.score)
    text = (response or "").strip()

    try:
        if text.startswith("{"):
            return sanitize_analysis(_from_json(json.loads(text), score))

        # AI 가 JSON 을 설명 문장으로 감싸는 경우
        start = text.find("{")
        end = text.rfind("}")
        if start >= 0 and end > start:
            return sanitize_analysis(_from_json(json.loads(text[start:end + 1]), score))

    except ValueError as e:
        logger.error(f"Error parsing AI response for mood analysis: {e}")
        return fallback_analysis()

    # JSON 이 없으면 텍스트를 그대로 insights 로 사용
    return sanitize_analysis(MoodAnalysis(
        sentiment=determine_sentiment(score),
        themes=list(DEFAULT_THEMES),
        insights=text[:100] + "..." if len(text) > 100 else text,
        activities=["Take a short break", "Practice mindfulness", "Stay hydrated"],
    ))


def build_analysis_prompt(entry: MoodEntry) -> str:
    notes = entry.notes or "No notes provided"
    return f"Analyze this mood entry - Rating: {clamp_score(entry.score)}/5, Notes: '{notes}'"


async def analyze_mood(entry: MoodEntry, generator: Optional[TextGenerator] = None) -> MoodAnalysis:
    if generator is None:
        return analyze_rule_based(entry)

    try:
        response = await generator.generate(build_analysis_prompt(entry), ANALYSIS_SYSTEM_PROMPT)
    except (AIServiceError, OSError) as e:
        logger.warning(f"AI analysis failed for mood {entry.id}, using rule-based analysis: {e}")
        return analyze_rule_based(entry)

    return parse_ai_analysis(response, entry)
