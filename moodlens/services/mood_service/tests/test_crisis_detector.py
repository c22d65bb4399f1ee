"""Tests for CrisisDetector - safety-critical phrase detection.

Recall matters more than precision here, so these tests check that
phrases are caught inside longer sentences and after text cleaning.
"""
import pytest

from moodlens.services.mood_service.config import CRISIS_PHRASES
from moodlens.services.mood_service.crisis_detector import CrisisDetector, NO_CRISIS
from moodlens.services.mood_service.text_normalizer import normalize_text


@pytest.fixture
def detector():
    """Create a CrisisDetector instance for testing."""
    return CrisisDetector()


class TestCrisisDetection:
    """Tests for crisis phrase matching."""

    @pytest.mark.parametrize("text", [
        "I want to die",
        "sometimes I think everyone would be better off without me",
        "I just want to disappear",
        "Life is meaningless lately",
        "I cant go on",
        "I can't go on",
        "I keep thinking about self-harm",
        "I wish I was dead",
    ])
    def test_detects_phrase_in_sentence(self, detector, text):
        result = detector.detect(normalize_text(text).lowered)
        assert result.detected is True
        assert result.matched_phrases

    def test_single_match_is_enough(self, detector):
        result = detector.detect("i feel hopeless")
        assert result.detected is True
        assert result.matched_phrases == frozenset({"hopeless"})

    def test_reports_every_matched_phrase(self, detector):
        result = detector.detect("i want to die i hate myself")
        assert result.matched_phrases == frozenset({
            "want to die", "i want to die", "hate myself",
        })

    def test_safe_text(self, detector):
        result = detector.detect("i had a lovely walk in the park")
        assert result == NO_CRISIS
        assert not result

    def test_empty_text(self, detector):
        assert detector.detect("") == NO_CRISIS


class TestPhraseTable:
    """Tests for the crisis phrase table."""

    def test_default_table_loaded(self, detector):
        assert detector.phrase_count == len(CRISIS_PHRASES)

    def test_custom_phrases(self):
        detector = CrisisDetector(phrases=["red flag"])
        assert detector.detect("this is a red flag").detected is True
        assert detector.detect("i want to die").detected is False
