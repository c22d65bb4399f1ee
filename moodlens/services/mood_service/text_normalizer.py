"""Text normalization for mood classification.

Journal entries arrive as free-form text, sometimes with markup pasted
from rich-text editors. Everything downstream (crisis detection,
sentiment, the category cascade) works on the cleaned lowercase form
produced here, so phrase tables are cleaned the same way at load time.

Normalization never raises: missing or non-string input cleans to "".
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Tuple

logger = logging.getLogger(__name__)


_TAG_PATTERN = re.compile(r"<[^>]*>")
_NON_WORD_PATTERN = re.compile(r"[^\w\s]")
_WHITESPACE_PATTERN = re.compile(r"\s+")

# Single trailing suffix; first alternative that matches at the end wins
_SUFFIX_PATTERN = re.compile(r"(ing|ed|s)$")


def clean_text(text: Any) -> str:
    """Strip markup and punctuation, collapse whitespace.

    Args:
        text: Raw journal text

    Returns:
        Cleaned text with original casing, or "" for empty/invalid input
    """
    if not text or not isinstance(text, str):
        return ""
    result = _TAG_PATTERN.sub("", text)
    result = _NON_WORD_PATTERN.sub(" ", result)
    result = _WHITESPACE_PATTERN.sub(" ", result)
    return result.strip()


def tokenize(text: str) -> Tuple[str, ...]:
    """Split on whitespace, discarding empty tokens."""
    if not text:
        return ()
    return tuple(token for token in text.split() if token)


def stem(word: str) -> str:
    """Crude suffix strip used only for keyword cross-matching.

    Not linguistic stemming: "feeling" -> "feel", "worried" -> "worri",
    "tears" -> "tear".
    """
    return _SUFFIX_PATTERN.sub("", word.lower(), count=1)


def normalize_phrases(phrases: Iterable[str]) -> Tuple[Tuple[str, str], ...]:
    """Clean a phrase table so it lines up with cleaned journal text.

    "can't wait" becomes "can t wait", matching how the apostrophe in the
    journal text is replaced.

    Args:
        phrases: Raw phrases as written in the lexicon

    Returns:
        (original_phrase, cleaned_lowercase_phrase) pairs, input order kept
    """
    pairs = []
    for phrase in phrases:
        cleaned = clean_text(phrase).lower()
        if cleaned:
            pairs.append((phrase, cleaned))
    return tuple(pairs)


@dataclass(frozen=True)
class NormalizedText:
    """Cleaned journal text in the forms the pipeline consumes."""
    cleaned: str
    lowered: str
    tokens: Tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.lowered

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class TextNormalizer:
    """Cleans and tokenizes journal text.

    Stateless; one instance can be shared by any number of concurrent
    classifications.
    """

    def normalize(self, text: Any) -> NormalizedText:
        """Normalize raw text for classification.

        Applies in order:
        1. Remove HTML-like tags
        2. Replace non-word characters with spaces
        3. Collapse whitespace and trim
        4. Lowercase and tokenize

        Args:
            text: Raw journal text (may be None or empty)

        Returns:
            NormalizedText; empty fields for empty input
        """
        cleaned = clean_text(text)
        lowered = cleaned.lower()
        return NormalizedText(
            cleaned=cleaned,
            lowered=lowered,
            tokens=tokenize(lowered),
        )


# Module-level singleton
_normalizer: TextNormalizer | None = None


def get_normalizer() -> TextNormalizer:
    """Get the singleton TextNormalizer instance."""
    global _normalizer
    if _normalizer is None:
        _normalizer = TextNormalizer()
    return _normalizer


def normalize_text(text: Any) -> NormalizedText:
    """Convenience function to normalize text."""
    return get_normalizer().normalize(text)
