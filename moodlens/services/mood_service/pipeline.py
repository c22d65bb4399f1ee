"""Mood classification pipeline - the service entry point.

Flow:
    raw text -> TextNormalizer -> CrisisDetector (short-circuits on hit)
             -> SentimentScorer -> MoodClassifier -> MoodSelector
             -> ClassificationResult

The pipeline is a pure function of its input. Collaborators hold only
read-only lexicon tables, so a single instance is safe to share across
concurrent calls. It never raises on malformed input; empty or invalid
text degrades to a zero-confidence neutral result.
"""
import logging
import time
from typing import Any, FrozenSet, Mapping, Optional, Sequence, Tuple

from moodlens.shared.models import ClassificationResult, Mood, empty_mood_scores
from moodlens.shared.utils import fingerprint_text
from .config import MOOD_KEYWORDS, ClassifierThresholds
from .crisis_detector import CrisisDetector, CrisisMatch
from .mood_classifier import MoodClassifier
from .mood_selector import MoodSelector
from .sentiment_scorer import SentimentScorer
from .text_normalizer import TextNormalizer, stem

logger = logging.getLogger(__name__)


NO_TEXT_REASONING = "No text provided"
CRISIS_REASONING = "Crisis content detected - self-harm indicators found"

# Tokens shorter than this never match "inside" a keyword; keeps "i" and
# "a" from matching half the vocabulary.
MIN_REVERSE_MATCH_LENGTH = 4


class MoodClassificationPipeline:
    """Deterministic rule-based journal mood classifier.

    Crisis detection always runs first and takes absolute precedence over
    category scoring.
    """

    def __init__(
        self,
        thresholds: Optional[ClassifierThresholds] = None,
        normalizer: Optional[TextNormalizer] = None,
        crisis_detector: Optional[CrisisDetector] = None,
        sentiment_scorer: Optional[SentimentScorer] = None,
        classifier: Optional[MoodClassifier] = None,
        selector: Optional[MoodSelector] = None,
        keyword_lists: Optional[Mapping[Mood, Sequence[str]]] = None,
    ):
        """Initialize pipeline with its collaborators.

        Args:
            thresholds: Shared scoring thresholds
            normalizer: Text normalizer (injected for testing)
            crisis_detector: Crisis phrase detector (injected for testing)
            sentiment_scorer: Lexicon sentiment scorer
            classifier: Category cascade
            selector: Winner selection and calibration
            keyword_lists: Per-mood vocabularies for keyword reporting
        """
        self.thresholds = thresholds or ClassifierThresholds()
        self.normalizer = normalizer or TextNormalizer()
        self.crisis_detector = crisis_detector or CrisisDetector()
        self.sentiment_scorer = sentiment_scorer or SentimentScorer()
        self.classifier = classifier or MoodClassifier(thresholds=self.thresholds)
        self.selector = selector or MoodSelector(thresholds=self.thresholds)

        lists = keyword_lists if keyword_lists is not None else MOOD_KEYWORDS
        self._stemmed_keywords: Tuple[Tuple[str, str], ...] = tuple(
            (keyword, stem(keyword))
            for mood in Mood
            for keyword in lists.get(mood, ())
        )

        logger.info(
            "MOOD_PIPELINE_INITIALIZED",
            extra={
                "crisis_phrase_count": self.crisis_detector.phrase_count,
                "keyword_count": len(self._stemmed_keywords),
            },
        )

    def classify(self, text: Any, manual_mood: Any = None) -> ClassificationResult:
        """Classify one journal entry.

        Args:
            text: Raw journal text; None or non-string is treated as empty
            manual_mood: User-selected mood, passed through verbatim

        Returns:
            ClassificationResult

        Logs:
            - MOOD_CLASSIFICATION_STARTED: Before classification
            - MOOD_CLASSIFICATION_CRISIS: If crisis phrases override scoring
            - MOOD_CLASSIFICATION_COMPLETED: After a normal classification
        """
        start_time = time.perf_counter()
        text_hash = fingerprint_text(text)

        logger.info(
            "MOOD_CLASSIFICATION_STARTED",
            extra={
                "text_hash": text_hash,
                "text_length": len(text) if isinstance(text, str) else 0,
                "has_manual_mood": manual_mood is not None,
            },
        )

        normalized = self.normalizer.normalize(text)
        if normalized.is_empty:
            return self._empty_result(manual_mood)

        # Crisis check runs before, and independently of, category scoring
        crisis = self.crisis_detector.detect(normalized.lowered)
        if crisis.detected:
            return self._crisis_result(crisis, manual_mood, text_hash, start_time)

        sentiment = self.sentiment_scorer.score(normalized.tokens)
        category_scores = self.classifier.score(normalized.lowered, sentiment.score)
        selection = self.selector.select(category_scores.scores)

        result = ClassificationResult(
            detected_mood=selection.mood,
            confidence=selection.confidence,
            manual_mood=manual_mood,
            self_harm_detected=False,
            sentiment_score=sentiment.score,
            matched_keywords=self.detect_keywords(normalized.tokens),
            mood_scores=category_scores.scores,
            reasoning=self._build_reasoning(
                selection.mood, category_scores.scores, sentiment.score
            ),
        )

        logger.info(
            "MOOD_CLASSIFICATION_COMPLETED",
            extra={
                "text_hash": text_hash,
                "detected_mood": result.detected_mood.value,
                "confidence": result.confidence,
                "matched_category": (
                    category_scores.matched_category.value
                    if category_scores.matched_category else None
                ),
                "sentiment_score": sentiment.score,
                "keyword_count": len(result.matched_keywords),
                "latency_ms": (time.perf_counter() - start_time) * 1000,
            },
        )
        return result

    def detect_keywords(self, tokens: Sequence[str]) -> FrozenSet[str]:
        """Report which mood vocabulary keywords the tokens touch.

        Uses the suffix-strip stem: a keyword counts if a token contains
        its stem, or its stem contains a token of at least
        MIN_REVERSE_MATCH_LENGTH characters.

        The unrestricted form of this match (any token inside any stem)
        would report "calm" for the token "a" and "happy" for "app"; the
        length floor is the only departure from plain two-way containment.
        It affects matched_keywords only, never the selected mood.

        Args:
            tokens: Lowercase tokens

        Returns:
            Deduplicated matched keywords
        """
        if not tokens:
            return frozenset()
        found = set()
        for keyword, stemmed in self._stemmed_keywords:
            for token in tokens:
                if stemmed in token or (
                    len(token) >= MIN_REVERSE_MATCH_LENGTH and token in stemmed
                ):
                    found.add(keyword)
                    break
        return frozenset(found)

    def _build_reasoning(
        self,
        mood: Mood,
        mood_scores: Mapping[Mood, float],
        sentiment_score: float,
    ) -> str:
        reasons = []
        if sentiment_score > self.thresholds.POSITIVE_SENTIMENT_MIN:
            reasons.append("Positive sentiment detected")
        elif sentiment_score < self.thresholds.NEGATIVE_SENTIMENT_MAX:
            reasons.append("Negative sentiment detected")

        # The neutral fallback score is "no signal", not a keyword hit
        if mood is not Mood.NEUTRAL and mood_scores.get(mood, 0) > 0:
            reasons.append(f"Keywords related to {mood.value} mood found")

        if not reasons:
            reasons.append("Neutral sentiment and no specific mood indicators")
        return ", ".join(reasons)

    def _empty_result(self, manual_mood: Any) -> ClassificationResult:
        return ClassificationResult(
            detected_mood=Mood.NEUTRAL,
            confidence=0.0,
            manual_mood=manual_mood,
            self_harm_detected=False,
            sentiment_score=0.0,
            matched_keywords=frozenset(),
            mood_scores=empty_mood_scores(),
            reasoning=NO_TEXT_REASONING,
        )

    def _crisis_result(
        self,
        crisis: CrisisMatch,
        manual_mood: Any,
        text_hash: str,
        start_time: float,
    ) -> ClassificationResult:
        """Build the fixed crisis override result.

        The caller is expected to raise a safety alert with helpline
        information whenever self_harm_detected is set.
        """
        scores = empty_mood_scores()
        scores[Mood.SAD] = self.thresholds.CRISIS_SAD_SCORE

        logger.critical(
            "MOOD_CLASSIFICATION_CRISIS",
            extra={
                "text_hash": text_hash,
                "crisis_match_count": len(crisis.matched_phrases),
                "latency_ms": (time.perf_counter() - start_time) * 1000,
                "action": "SAFETY_ALERT_REQUIRED",
            },
        )

        return ClassificationResult(
            detected_mood=Mood.SAD,
            confidence=self.thresholds.CRISIS_CONFIDENCE,
            manual_mood=manual_mood,
            self_harm_detected=True,
            sentiment_score=self.thresholds.CRISIS_SENTIMENT_SCORE,
            matched_keywords=crisis.matched_phrases,
            mood_scores=scores,
            reasoning=CRISIS_REASONING,
        )


# Module-level singleton
_pipeline: MoodClassificationPipeline | None = None


def get_pipeline() -> MoodClassificationPipeline:
    """Get the singleton MoodClassificationPipeline instance."""
    global _pipeline
    if _pipeline is None:
        _pipeline = MoodClassificationPipeline()
    return _pipeline


def classify(text: Any, manual_mood: Any = None) -> ClassificationResult:
    """Classify journal text with the shared pipeline.

    Args:
        text: Raw journal text
        manual_mood: Optional user-selected mood, passed through verbatim

    Returns:
        ClassificationResult
    """
    return get_pipeline().classify(text, manual_mood)
