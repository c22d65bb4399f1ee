"""Lexicon-based sentiment scoring.

A lightweight polarity signal used as the fallback branch of the mood
cascade and stored on every result for analytics. It is not a mood.
"""
from dataclasses import dataclass
from typing import FrozenSet, Optional, Sequence

from .config import NEGATIVE_WORDS, POSITIVE_WORDS


@dataclass(frozen=True)
class SentimentScore:
    """Normalized polarity plus the counts behind it."""
    score: float
    positive_count: int = 0
    negative_count: int = 0
    token_count: int = 0


NEUTRAL_SENTIMENT = SentimentScore(score=0.0)


class SentimentScorer:
    """Scores tokens against positive/negative word lists.

    Negative words weigh twice as much as positive ones. The raw sum is
    divided by the token count so long entries are not automatically
    more extreme.
    """

    POSITIVE_WEIGHT = 1
    NEGATIVE_WEIGHT = 2

    def __init__(
        self,
        positive_words: Optional[FrozenSet[str]] = None,
        negative_words: Optional[FrozenSet[str]] = None,
    ):
        self._positive = positive_words if positive_words is not None else POSITIVE_WORDS
        self._negative = negative_words if negative_words is not None else NEGATIVE_WORDS

    def score(self, tokens: Sequence[str]) -> SentimentScore:
        """Score a token sequence.

        Args:
            tokens: Lowercase tokens from the text normalizer

        Returns:
            SentimentScore; 0.0 for empty input
        """
        if not tokens:
            return NEUTRAL_SENTIMENT

        positive = 0
        negative = 0
        for token in tokens:
            if token in self._positive:
                positive += 1
            elif token in self._negative:
                negative += 1

        raw = positive * self.POSITIVE_WEIGHT - negative * self.NEGATIVE_WEIGHT
        return SentimentScore(
            score=raw / max(len(tokens), 1),
            positive_count=positive,
            negative_count=negative,
            token_count=len(tokens),
        )
