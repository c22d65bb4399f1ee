"""Shared domain models for MoodLens."""
from .mood import (
    Mood,
    POSITIVE_MOODS,
    NEGATIVE_MOODS,
    TrendDirection,
    ClassificationResult,
    MoodRecord,
    TimelinePoint,
    TrendSummary,
    MoodStat,
    MoodPatterns,
    coerce_history,
    empty_mood_scores,
)

__all__ = [
    "Mood",
    "POSITIVE_MOODS",
    "NEGATIVE_MOODS",
    "TrendDirection",
    "ClassificationResult",
    "MoodRecord",
    "TimelinePoint",
    "TrendSummary",
    "MoodStat",
    "MoodPatterns",
    "coerce_history",
    "empty_mood_scores",
]
