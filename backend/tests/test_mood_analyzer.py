import asyncio
import json

from conftest import FakeGenerator, make_entry
from wellbeing.schemas.analysis import MoodAnalysis
from wellbeing.services.mood_analyzer import (
    ANALYSIS_SYSTEM_PROMPT,
    DEFAULT_ACTIVITIES,
    DEFAULT_THEMES,
    FALLBACK_INSIGHTS,
    KEYWORD_GROUPS,
    analyze_mood,
    analyze_rule_based,
    build_analysis_prompt,
    determine_sentiment,
    parse_ai_analysis,
    sanitize_analysis,
)

SOCIAL_ACTIVITIES = next(g["activities"] for g in KEYWORD_GROUPS if g["theme"] == "workplace relationships")


def test_sentiment_bands():
    assert [determine_sentiment(s) for s in range(1, 6)] == [
        "negative", "negative", "neutral", "positive", "positive",
    ]


def test_sanitize_fills_every_field():
    result = sanitize_analysis(MoodAnalysis())

    assert result.sentiment
    assert result.themes
    assert result.insights
    assert result.activities


def test_sanitize_none_is_fallback():
    result = sanitize_analysis(None)

    assert result.insights == FALLBACK_INSIGHTS
    assert result.themes == DEFAULT_THEMES


def test_sanitize_dedupes_and_caps():
    result = sanitize_analysis(MoodAnalysis(
        sentiment="positive",
        themes=["a", "a", "b", "c", "d"],
        insights="ok",
        activities=["x", "", "y", "z", "w"],
    ))

    assert result.themes == ["a", "b", "c"]
    assert result.activities == ["x", "y", "z"]


def test_rule_based_without_notes():
    result = analyze_rule_based(make_entry(4))

    assert result.sentiment == "positive"
    assert result.themes == ["productivity"]
    assert "4/5" in result.insights
    assert len(result.activities) == 3


def test_stress_and_team_notes_use_social_activities():
    result = analyze_rule_based(make_entry(3, "Stressed about the team situation"))

    assert result.activities == SOCIAL_ACTIVITIES
    assert "stress management" in result.themes
    assert "workplace relationships" in result.themes
    assert len(result.themes) <= 3


def test_keyword_insight_mentions_time():
    result = analyze_rule_based(make_entry(2, "so tired today"))

    assert "energy may be a factor today (noted at 3:05 PM)." in result.insights
    assert result.sentiment == "negative"


def test_work_group_keeps_previous_activities():
    result = analyze_rule_based(make_entry(5, "finished the project"))

    assert "work pressure" in result.themes
    assert result.activities[0] == "Work on creative projects"


def test_parse_plain_json():
    response = json.dumps({
        "sentiment": "Positive",
        "mainThemes": ["growth"],
        "insights": "Nice work.",
        "suggestedActivities": ["Celebrate"],
    })

    result = parse_ai_analysis(response, make_entry(4))

    assert result.sentiment == "positive"
    assert result.themes == ["growth"]
    assert result.insights == "Nice work."
    assert result.activities == ["Celebrate"]


def test_parse_json_wrapped_in_text():
    response = 'Here you go: {"sentiment": "weird", "mainThemes": "sleep"} hope it helps'

    result = parse_ai_analysis(response, make_entry(1))

    # unknown sentiment → derived from the score
    assert result.sentiment == "negative"
    assert result.themes == ["sleep"]
    assert result.activities == DEFAULT_ACTIVITIES


def test_parse_malformed_json_is_fallback():
    result = parse_ai_analysis("{not json", make_entry(3))

    assert result.insights == FALLBACK_INSIGHTS


def test_parse_free_text_is_truncated():
    text = "You seem to be doing fine overall. " * 10

    result = parse_ai_analysis(text, make_entry(3))

    assert result.sentiment == "neutral"
    assert result.insights.endswith("...")
    assert len(result.insights) == 103


def test_analyze_mood_uses_generator():
    generator = FakeGenerator(reply='{"sentiment": "neutral", "mainThemes": ["focus"]}')
    entry = make_entry(3, "meh")

    result = asyncio.run(analyze_mood(entry, generator))

    assert result.themes == ["focus"]
    assert generator.calls[0]["prompt"] == build_analysis_prompt(entry)
    assert generator.calls[0]["system_prompt"] == ANALYSIS_SYSTEM_PROMPT


def test_analyze_mood_falls_back_to_rules(failing_generator):
    entry = make_entry(2)

    result = asyncio.run(analyze_mood(entry, failing_generator))

    assert result == analyze_rule_based(entry)


def test_keyword_themes_take_all_slots_when_three_fire():
    result = analyze_rule_based(make_entry(3, "stressed about team work"))

    assert result.themes == ["work pressure", "stress management", "workplace relationships"]
    assert result.activities == SOCIAL_ACTIVITIES


def test_theme_cap_holds_when_four_groups_fire():
    result = analyze_rule_based(make_entry(3, "tired and stressed about team work"))

    assert len(result.themes) == 3
    assert "balance" not in result.themes
