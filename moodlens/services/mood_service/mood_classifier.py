"""Priority-cascade mood classifier.

Categories are checked in a fixed order and the first one with any
marker phrase in the text takes the full category score; nothing is
blended or accumulated across categories. Overlapping vocabularies
("amazing" reads as happy or excited) are resolved by that order alone,
which keeps every outcome reproducible and auditable per category.

When no category matches, the sentiment score picks a weaker happy, sad
or neutral score instead.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Sequence, Tuple

from moodlens.shared.models import Mood, empty_mood_scores
from .config import MOOD_CASCADE, ClassifierThresholds
from .text_normalizer import normalize_phrases

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryScores:
    """Per-mood score vector produced by the cascade."""
    scores: Dict[Mood, float] = field(default_factory=empty_mood_scores)
    matched_category: Optional[Mood] = None  # None when sentiment decided
    matched_phrases: FrozenSet[str] = frozenset()

    @property
    def used_fallback(self) -> bool:
        return self.matched_category is None


class MoodClassifier:
    """Ordered (category, phrases) cascade with sentiment fallback."""

    def __init__(
        self,
        cascade: Optional[Sequence[Tuple[Mood, Sequence[str]]]] = None,
        thresholds: Optional[ClassifierThresholds] = None,
    ):
        """Initialize classifier.

        Args:
            cascade: Ordered (mood, marker phrases) pairs (defaults to MOOD_CASCADE)
            thresholds: Scoring thresholds
        """
        self.thresholds = thresholds or ClassifierThresholds()
        source = cascade if cascade is not None else MOOD_CASCADE
        self._cascade: Tuple[Tuple[Mood, Tuple[Tuple[str, str], ...]], ...] = tuple(
            (mood, normalize_phrases(phrases)) for mood, phrases in source
        )

        logger.info(
            "MOOD_CLASSIFIER_INITIALIZED",
            extra={
                "cascade_order": [mood.value for mood, _ in self._cascade],
                "marker_count": sum(len(p) for _, p in self._cascade),
            },
        )

    @property
    def cascade_order(self) -> Tuple[Mood, ...]:
        return tuple(mood for mood, _ in self._cascade)

    def match_category(self, lowered_text: str, mood: Mood) -> FrozenSet[str]:
        """Return the marker phrases of one category found in the text.

        Args:
            lowered_text: Cleaned lowercase journal text
            mood: Category to check

        Returns:
            Matched marker phrases (empty if the category is not in the cascade)
        """
        for category, phrases in self._cascade:
            if category is mood:
                return self._matches(lowered_text, phrases)
        return frozenset()

    def score(self, lowered_text: str, sentiment_score: float) -> CategoryScores:
        """Score text against the cascade.

        Substring containment runs on the whole string, so multi-word
        markers ("feel terrible", "can't wait") match across tokens.

        Args:
            lowered_text: Cleaned lowercase journal text
            sentiment_score: Normalized sentiment from SentimentScorer

        Returns:
            CategoryScores with all ten moods present
        """
        scores = empty_mood_scores()

        for mood, phrases in self._cascade:
            matched = self._matches(lowered_text, phrases)
            if matched:
                scores[mood] = self.thresholds.CATEGORY_MATCH_SCORE
                return CategoryScores(
                    scores=scores,
                    matched_category=mood,
                    matched_phrases=matched,
                )

        scores[self._fallback_mood(sentiment_score)] = self.thresholds.SENTIMENT_FALLBACK_SCORE
        return CategoryScores(scores=scores)

    def _fallback_mood(self, sentiment_score: float) -> Mood:
        if sentiment_score > self.thresholds.POSITIVE_SENTIMENT_MIN:
            return Mood.HAPPY
        if sentiment_score < self.thresholds.NEGATIVE_SENTIMENT_MAX:
            return Mood.SAD
        return Mood.NEUTRAL

    @staticmethod
    def _matches(
        lowered_text: str,
        phrases: Tuple[Tuple[str, str], ...],
    ) -> FrozenSet[str]:
        if not lowered_text:
            return frozenset()
        return frozenset(
            original for original, cleaned in phrases if cleaned in lowered_text
        )
