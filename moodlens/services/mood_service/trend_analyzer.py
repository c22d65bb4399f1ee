"""Trend analysis over past classifications.

Operates on a history window the caller supplies (oldest first); it
never reads storage itself. All functions are pure and recompute from
scratch on every call.
"""
import logging
import math
from typing import Any, Dict, Iterable, List, Optional

from moodlens.shared.models import (
    Mood,
    MoodPatterns,
    MoodRecord,
    MoodStat,
    TimelinePoint,
    TrendDirection,
    TrendSummary,
    coerce_history,
)
from .config import ClassifierThresholds

logger = logging.getLogger(__name__)


NO_ENTRIES_INSIGHT = "No entries available for analysis"

WEEKDAY_NAMES = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)


def _round_percent(fraction: float) -> int:
    """Round half up, so 12.5% reports as 13% rather than banker's 12%."""
    return int(math.floor(fraction * 100 + 0.5))


class TrendAnalyzer:
    """Derives dominant mood, trend direction and insights from history."""

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = thresholds or ClassifierThresholds()

    def analyze(self, history: Optional[Iterable[Any]]) -> TrendSummary:
        """Summarize a history window.

        Args:
            history: Ordered record-like values, oldest first. Each needs
                at least a mood and a created-at timestamp.

        Returns:
            TrendSummary

        Logs:
            - TREND_ANALYSIS_COMPLETED: After summarization
        """
        records = coerce_history(history)
        if not records:
            return TrendSummary(
                dominant_mood=Mood.NEUTRAL,
                trend_direction=TrendDirection.STABLE,
                mood_distribution={},
                insights=(NO_ENTRIES_INSIGHT,),
            )

        distribution = self.mood_distribution(records)
        dominant = self.dominant_mood(distribution)
        direction = self.trend_direction(records)
        insights = self.generate_insights(distribution, direction, dominant)

        summary = TrendSummary(
            dominant_mood=dominant,
            trend_direction=direction,
            mood_distribution=distribution,
            insights=tuple(insights),
            timeline=tuple(
                TimelinePoint(
                    created_at=record.created_at,
                    mood=record.mood,
                    confidence=record.confidence,
                )
                for record in records
            ),
        )

        logger.info(
            "TREND_ANALYSIS_COMPLETED",
            extra={
                "record_count": len(records),
                "dominant_mood": dominant.value,
                "trend": direction.value,
                "insight_count": len(insights),
            },
        )
        return summary

    def mood_distribution(self, records: List[MoodRecord]) -> Dict[Mood, int]:
        """Count records per mood, keyed in first-seen order."""
        counts: Dict[Mood, int] = {}
        for record in records:
            counts[record.mood] = counts.get(record.mood, 0) + 1
        return counts

    def dominant_mood(self, distribution: Dict[Mood, int]) -> Mood:
        """Mode of the distribution; ties go to the mood seen first."""
        dominant = Mood.NEUTRAL
        best = 0
        for mood, count in distribution.items():
            if count > best:
                best = count
                dominant = mood
        return dominant

    def trend_direction(self, records: List[MoodRecord]) -> TrendDirection:
        """Direction over the most recent window of records.

        Args:
            records: Full history, oldest first

        Returns:
            IMPROVING if positives lead negatives by more than the margin,
            DECLINING for the reverse, else STABLE
        """
        window = records[-self.thresholds.TREND_WINDOW:]
        positive = sum(1 for record in window if record.mood.is_positive)
        negative = sum(1 for record in window if record.mood.is_negative)

        if positive > negative + self.thresholds.TREND_MARGIN:
            return TrendDirection.IMPROVING
        elif negative > positive + self.thresholds.TREND_MARGIN:
            return TrendDirection.DECLINING
        return TrendDirection.STABLE

    def generate_insights(
        self,
        distribution: Dict[Mood, int],
        direction: TrendDirection,
        dominant: Mood,
    ) -> List[str]:
        """Build the user-facing insight lines, in display order."""
        insights = []
        total = sum(distribution.values())

        if direction is TrendDirection.IMPROVING:
            insights.append(
                "Your mood has been improving recently. Keep up the positive momentum!"
            )
        elif direction is TrendDirection.DECLINING:
            insights.append(
                "Your mood has been declining recently. Consider reaching out for support."
            )

        if total:
            percentage = _round_percent(distribution.get(dominant, 0) / total)
            insights.append(
                f"Your most common mood is {dominant.value} ({percentage}% of entries)"
            )

        if distribution.get(Mood.GRATEFUL, 0) > 0:
            insights.append(
                "You frequently express gratitude, which is great for mental well-being!"
            )

        if distribution.get(Mood.ANXIOUS, 0) > total * self.thresholds.ANXIETY_WARNING_RATIO:
            insights.append(
                "You experience anxiety frequently. Consider stress management techniques."
            )

        return insights

    def mood_stats(self, history: Optional[Iterable[Any]]) -> List[MoodStat]:
        """Per-mood count, average confidence and average intensity.

        Args:
            history: Record-like values

        Returns:
            MoodStat list, most frequent first (ties keep first-seen order)
        """
        records = coerce_history(history)
        grouped: Dict[Mood, List[MoodRecord]] = {}
        for record in records:
            grouped.setdefault(record.mood, []).append(record)

        stats = []
        for mood, items in grouped.items():
            intensities = [r.intensity for r in items if r.intensity is not None]
            stats.append(MoodStat(
                mood=mood,
                count=len(items),
                avg_confidence=sum(r.confidence for r in items) / len(items),
                avg_intensity=(
                    sum(intensities) / len(intensities) if intensities else None
                ),
            ))

        # sorted() is stable, so equal counts keep first-seen order
        return sorted(stats, key=lambda stat: stat.count, reverse=True)

    def patterns(self, history: Optional[Iterable[Any]]) -> MoodPatterns:
        """Group moods by hour and weekday and rate the recent window.

        Records without a timestamp still count toward the window insight
        but are left out of the time groupings. The hour with the highest
        average intensity becomes the "Best Writing Time" insight.

        Args:
            history: Record-like values, oldest first

        Returns:
            MoodPatterns
        """
        records = coerce_history(history)
        by_hour: Dict[int, Dict[Mood, int]] = {}
        by_weekday: Dict[str, Dict[Mood, int]] = {}
        hour_intensities: Dict[int, List[int]] = {}

        for record in records:
            if record.created_at is None:
                continue
            hour = record.created_at.hour
            hour_counts = by_hour.setdefault(hour, {})
            hour_counts[record.mood] = hour_counts.get(record.mood, 0) + 1
            if record.intensity is not None:
                hour_intensities.setdefault(hour, []).append(record.intensity)
            day = WEEKDAY_NAMES[record.created_at.weekday()]
            day_counts = by_weekday.setdefault(day, {})
            day_counts[record.mood] = day_counts.get(record.mood, 0) + 1

        avg_intensity_by_hour = {
            hour: sum(values) / len(values)
            for hour, values in sorted(hour_intensities.items())
        }
        insights = self._best_time_insights(avg_intensity_by_hour)
        insights.extend(self._window_insights(records))

        return MoodPatterns(
            by_hour=dict(sorted(by_hour.items())),
            by_weekday={day: by_weekday[day] for day in WEEKDAY_NAMES if day in by_weekday},
            avg_intensity_by_hour=avg_intensity_by_hour,
            insights=tuple(insights),
        )

    def _best_time_insights(self, avg_intensity_by_hour: Dict[int, float]) -> List[Dict[str, str]]:
        if not avg_intensity_by_hour:
            return []
        # Ties keep the earliest hour
        best_hour = max(avg_intensity_by_hour, key=lambda hour: avg_intensity_by_hour[hour])
        return [{
            "type": "time",
            "title": "Best Writing Time",
            "description": f"You tend to feel most intense emotions around {best_hour}:00",
            "recommendation": "Consider journaling during this time for deeper insights",
        }]

    def _window_insights(self, records: List[MoodRecord]) -> List[Dict[str, str]]:
        t = self.thresholds
        window = records[-t.TREND_WINDOW:]
        if len(window) < t.PATTERN_MIN_RECORDS:
            return []

        ratio = sum(1 for r in window if r.mood.is_positive) / len(window)
        if ratio > t.PATTERN_POSITIVE_RATIO:
            return [{
                "type": "trend",
                "title": "Positive Trend",
                "description": "You've been experiencing mostly positive emotions recently",
                "recommendation": (
                    "Keep up the great work! Consider what's contributing to this positivity"
                ),
            }]
        if ratio < t.PATTERN_CHALLENGING_RATIO:
            return [{
                "type": "trend",
                "title": "Challenging Period",
                "description": "You've been going through a difficult time recently",
                "recommendation": (
                    "Consider reaching out to friends, family, or a professional for support"
                ),
            }]
        return []


# Module-level singleton
_analyzer: TrendAnalyzer | None = None


def get_trend_analyzer() -> TrendAnalyzer:
    """Get the singleton TrendAnalyzer instance."""
    global _analyzer
    if _analyzer is None:
        _analyzer = TrendAnalyzer()
    return _analyzer


def analyze_trend(history: Optional[Iterable[Any]]) -> TrendSummary:
    """Summarize a caller-supplied history window."""
    return get_trend_analyzer().analyze(history)


def summarize_mood_stats(history: Optional[Iterable[Any]]) -> List[MoodStat]:
    """Per-mood aggregates over a caller-supplied history window."""
    return get_trend_analyzer().mood_stats(history)


def analyze_patterns(history: Optional[Iterable[Any]]) -> MoodPatterns:
    """Time-of-day and weekday mood groupings over a history window."""
    return get_trend_analyzer().patterns(history)
