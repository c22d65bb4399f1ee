"""Crisis and self-harm phrase detection.

This is the highest-priority check in the pipeline. It runs before any
mood scoring and a single hit overrides everything else: the entry is
classified SAD at fixed confidence and flagged for the caller's safety
alert. Matching is plain substring containment on cleaned lowercase text,
favouring recall over precision.
"""
import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from .config import CRISIS_PHRASES
from .text_normalizer import normalize_phrases

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrisisMatch:
    """Outcome of a crisis scan. Embedded in results, never stored alone."""
    detected: bool
    matched_phrases: FrozenSet[str] = frozenset()

    def __bool__(self) -> bool:
        return self.detected


NO_CRISIS = CrisisMatch(detected=False)


class CrisisDetector:
    """Substring scanner over the fixed crisis phrase list."""

    def __init__(self, phrases: Optional[Iterable[str]] = None):
        """Initialize detector with its phrase table.

        Args:
            phrases: Override phrase list (defaults to CRISIS_PHRASES)
        """
        # Sorted so matched phrase reporting does not depend on set order
        source = sorted(phrases if phrases is not None else CRISIS_PHRASES)
        self._phrases: Tuple[Tuple[str, str], ...] = normalize_phrases(source)

        logger.info(
            "CRISIS_DETECTOR_INITIALIZED",
            extra={"crisis_phrase_count": len(self._phrases)},
        )

    @property
    def phrase_count(self) -> int:
        return len(self._phrases)

    def detect(self, lowered_text: str) -> CrisisMatch:
        """Scan cleaned lowercase text for crisis phrases.

        Args:
            lowered_text: Output of the text normalizer, lowercased

        Returns:
            CrisisMatch with every phrase that occurs in the text
        """
        if not lowered_text:
            return NO_CRISIS

        matched = frozenset(
            original
            for original, cleaned in self._phrases
            if cleaned in lowered_text
        )
        if not matched:
            return NO_CRISIS

        logger.critical(
            "CRISIS_PHRASES_MATCHED",
            extra={"match_count": len(matched)},
        )
        return CrisisMatch(detected=True, matched_phrases=matched)
