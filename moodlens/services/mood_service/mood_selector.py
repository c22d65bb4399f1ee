"""Winner selection and confidence calibration.

Confidence is a coarse, deliberately discontinuous banding of the winning
score, matching the 0/5/10 granularity of the cascade.
"""
from dataclasses import dataclass
from typing import Mapping, Optional

from moodlens.shared.models import Mood
from .config import ClassifierThresholds


@dataclass(frozen=True)
class MoodSelection:
    """Selected mood with its effective score and calibrated confidence."""
    mood: Mood
    score: float
    confidence: float


class MoodSelector:
    """Picks the winning mood from a score vector."""

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = thresholds or ClassifierThresholds()

    def select(self, mood_scores: Mapping[Mood, float]) -> MoodSelection:
        """Select the winning mood and its confidence.

        The strictly greatest score wins; ties go to the mood that comes
        first in Mood enumeration order. A winner below the minimum score,
        or a NEUTRAL winner (the cascade's "no signal" branch), becomes
        NEUTRAL at the below-threshold effective score.

        Args:
            mood_scores: Score per mood; missing moods count as 0

        Returns:
            MoodSelection
        """
        winner = Mood.NEUTRAL
        best = 0
        for mood in Mood:
            value = mood_scores.get(mood, 0)
            if value > best:
                best = value
                winner = mood

        if best < self.thresholds.MIN_CATEGORY_SCORE or winner is Mood.NEUTRAL:
            winner = Mood.NEUTRAL
            best = self.thresholds.BELOW_THRESHOLD_SCORE

        return MoodSelection(mood=winner, score=best, confidence=self.confidence_for(best))

    def confidence_for(self, score: float) -> float:
        """Map a winning score to its confidence band.

        Args:
            score: Effective winning score

        Returns:
            0.90 / 0.70 / 0.50 / 0.30 by band
        """
        t = self.thresholds
        if score >= t.HIGH_BAND_MIN:
            return t.HIGH_CONFIDENCE
        elif score >= t.MEDIUM_BAND_MIN:
            return t.MEDIUM_CONFIDENCE
        elif score >= t.LOW_BAND_MIN:
            return t.LOW_CONFIDENCE
        else:
            return t.MINIMAL_CONFIDENCE
