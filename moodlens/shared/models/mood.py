"""Mood domain models.

This file defines the closed mood enumeration and the immutable records the
classification pipeline and trend analyzer produce and consume.
Results are plain data: persisting them is the caller's job.
"""
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class Mood(Enum):
    """The ten mood categories a journal entry can be assigned.

    Member order is significant: it is the tie-break order used when two
    categories share the highest score.
    """
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    ANXIOUS = "anxious"
    EXCITED = "excited"
    CALM = "calm"
    GRATEFUL = "grateful"
    LONELY = "lonely"
    CONFUSED = "confused"
    NEUTRAL = "neutral"

    @classmethod
    def parse(cls, value: Any) -> Optional["Mood"]:
        """Resolve a member from a Mood or a case-insensitive string.

        Args:
            value: Candidate mood value

        Returns:
            Matching Mood, or None if the value is not one of the ten moods
        """
        if isinstance(value, Mood):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def is_positive(self) -> bool:
        return self in POSITIVE_MOODS

    @property
    def is_negative(self) -> bool:
        return self in NEGATIVE_MOODS


POSITIVE_MOODS: FrozenSet[Mood] = frozenset({
    Mood.HAPPY, Mood.EXCITED, Mood.GRATEFUL, Mood.CALM,
})

NEGATIVE_MOODS: FrozenSet[Mood] = frozenset({
    Mood.SAD, Mood.ANGRY, Mood.ANXIOUS, Mood.LONELY,
})


class TrendDirection(Enum):
    """Direction of recent mood movement."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


def empty_mood_scores() -> Dict[Mood, float]:
    """Return a score vector with every mood set to zero, in enum order."""
    return {mood: 0 for mood in Mood}


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one journal entry.

    Immutable - one result per classification call. When
    self_harm_detected is set the mood is always SAD at 0.95 confidence.
    """
    detected_mood: Mood
    confidence: float
    manual_mood: Optional[Any] = None  # Passed through verbatim, never validated
    self_harm_detected: bool = False
    sentiment_score: float = 0.0
    matched_keywords: FrozenSet[str] = frozenset()
    mood_scores: Mapping[Mood, float] = field(default_factory=empty_mood_scores)
    reasoning: str = ""

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be 0.0-1.0, got {self.confidence}")
        if set(self.mood_scores) != set(Mood):
            raise ValueError(
                f"Mood scores must cover all {len(Mood)} moods, "
                f"got {sorted(m.value for m in self.mood_scores)}"
            )
        # Freeze the caller's containers so the record cannot drift after creation
        ordered = {mood: self.mood_scores[mood] for mood in Mood}
        object.__setattr__(self, "mood_scores", MappingProxyType(ordered))
        object.__setattr__(self, "matched_keywords", frozenset(self.matched_keywords))

    @property
    def manual_mood_value(self) -> Optional[Any]:
        if isinstance(self.manual_mood, Mood):
            return self.manual_mood.value
        return self.manual_mood

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses and storage."""
        return {
            "detectedMood": self.detected_mood.value,
            "confidence": self.confidence,
            "manualMood": self.manual_mood_value,
            "selfHarmDetected": self.self_harm_detected,
            "sentimentScore": self.sentiment_score,
            "matchedKeywords": sorted(self.matched_keywords),
            "moodScores": {mood.value: score for mood, score in self.mood_scores.items()},
            "reasoning": self.reasoning,
        }


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            # fromisoformat rejects a trailing Z before Python 3.11
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.warning(
                "MOOD_RECORD_TIMESTAMP_INVALID",
                extra={"value_length": len(value)},
            )
    return None


def _parse_number(value: Any, cast=float) -> Optional[Any]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # JSON accepts 1e999 as inf; neither inf nor nan is a usable score
    if not math.isfinite(number):
        return None
    return cast(number)


def _first_present(value: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if value.get(key) is not None:
            return value[key]
    return None


@dataclass(frozen=True)
class MoodRecord:
    """A past classification supplied by the caller for trend analysis."""
    mood: Mood
    created_at: Optional[datetime] = None
    confidence: float = 0.0
    intensity: Optional[int] = None

    @classmethod
    def from_value(cls, value: Any) -> "MoodRecord":
        """Coerce caller-supplied history data into a MoodRecord.

        Accepts an existing MoodRecord, a flat mapping
        ({"mood": "happy", "createdAt": ...}), a stored mood record
        ({"detectedMood": "happy", ...}) or a journal entry whose mood is
        nested ({"mood": {"detected": ..., "manual": ..., "confidence": ...}}).
        Other objects, ClassificationResult included, are read through
        their attributes (detected_mood, manual_mood, confidence).
        Moods resolve as detected, then manual, then neutral.

        Args:
            value: Record-like object

        Returns:
            MoodRecord; unknown moods resolve to NEUTRAL
        """
        if isinstance(value, MoodRecord):
            return value
        if not isinstance(value, Mapping):
            value = getattr(value, "__dict__", {})

        raw_mood = _first_present(value, "mood", "detectedMood", "detected_mood")
        confidence = value.get("confidence")
        if isinstance(raw_mood, Mapping):
            confidence = raw_mood.get("confidence", confidence)
            raw_mood = raw_mood.get("detected") or raw_mood.get("manual")
        elif raw_mood is None:
            raw_mood = _first_present(value, "manualMood", "manual_mood")

        mood = Mood.parse(raw_mood)
        if mood is None:
            logger.warning(
                "MOOD_RECORD_UNKNOWN_MOOD" if raw_mood is not None else "MOOD_RECORD_MISSING_MOOD",
                extra={"action": "DEFAULTING_TO_NEUTRAL"},
            )
            mood = Mood.NEUTRAL

        created_at = value.get("createdAt", value.get("created_at"))

        return cls(
            mood=mood,
            created_at=_parse_timestamp(created_at),
            confidence=_parse_number(confidence) or 0.0,
            intensity=_parse_number(value.get("intensity"), int),
        )


@dataclass(frozen=True)
class TimelinePoint:
    """One entry of a trend timeline."""
    created_at: Optional[datetime]
    mood: Mood
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.created_at.isoformat() if self.created_at else None,
            "mood": self.mood.value,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class TrendSummary:
    """Aggregate view over a sequence of past classifications.

    Derived on demand from the supplied history; never mutated in place.
    """
    dominant_mood: Mood
    trend_direction: TrendDirection
    mood_distribution: Mapping[Mood, int] = field(default_factory=dict)
    insights: Tuple[str, ...] = ()
    timeline: Tuple[TimelinePoint, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "mood_distribution", MappingProxyType(dict(self.mood_distribution))
        )
        object.__setattr__(self, "insights", tuple(self.insights))
        object.__setattr__(self, "timeline", tuple(self.timeline))

    @property
    def total_entries(self) -> int:
        return sum(self.mood_distribution.values())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "trend": self.trend_direction.value,
            "dominantMood": self.dominant_mood.value,
            "moodDistribution": {
                mood.value: count for mood, count in self.mood_distribution.items()
            },
            "moodScores": [point.to_dict() for point in self.timeline],
            "insights": list(self.insights),
        }


@dataclass(frozen=True)
class MoodStat:
    """Per-mood aggregate across a history window."""
    mood: Mood
    count: int
    avg_confidence: float
    avg_intensity: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mood": self.mood.value,
            "count": self.count,
            "avgConfidence": round(self.avg_confidence, 3),
            "avgIntensity": (
                round(self.avg_intensity, 2) if self.avg_intensity is not None else None
            ),
        }


@dataclass(frozen=True)
class MoodPatterns:
    """Mood counts grouped by hour of day and weekday, plus window insights."""
    by_hour: Mapping[int, Mapping[Mood, int]] = field(default_factory=dict)
    by_weekday: Mapping[str, Mapping[Mood, int]] = field(default_factory=dict)
    avg_intensity_by_hour: Mapping[int, float] = field(default_factory=dict)
    insights: Tuple[Dict[str, str], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": {
                hour: {mood.value: n for mood, n in counts.items()}
                for hour, counts in self.by_hour.items()
            },
            "dayOfWeek": {
                day: {mood.value: n for mood, n in counts.items()}
                for day, counts in self.by_weekday.items()
            },
            "timeIntensity": {
                hour: round(avg, 2) for hour, avg in self.avg_intensity_by_hour.items()
            },
            "insights": [dict(insight) for insight in self.insights],
        }


def coerce_history(history: Any) -> List[MoodRecord]:
    """Coerce an iterable of record-like values into MoodRecords."""
    if not history:
        return []
    return [MoodRecord.from_value(item) for item in history]
