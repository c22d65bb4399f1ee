"""Tests for Mood Service configuration."""
import pytest

from moodlens.services.mood_service.config import (
    CRISIS_PHRASES,
    MOOD_CASCADE,
    ClassifierThresholds,
    MoodServiceConfig,
)
from moodlens.shared.models import Mood


class TestMoodServiceConfig:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("MOOD_PATTERN_VERSION", "DEFAULT_HELPLINE_COUNTRY", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        config = MoodServiceConfig.from_env()

        assert config.default_country == "US"
        assert config.log_level == "INFO"
        assert config.pattern_version == MoodServiceConfig.pattern_version

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MOOD_PATTERN_VERSION", "test-1")
        monkeypatch.setenv("DEFAULT_HELPLINE_COUNTRY", "UK")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = MoodServiceConfig.from_env()

        assert config.pattern_version == "test-1"
        assert config.default_country == "UK"
        assert config.log_level == "DEBUG"


class TestClassifierThresholds:
    """Tests for pinned classifier constants."""

    def test_band_values(self):
        t = ClassifierThresholds()
        assert (t.HIGH_BAND_MIN, t.MEDIUM_BAND_MIN, t.LOW_BAND_MIN) == (8, 5, 3)
        assert t.POSITIVE_SENTIMENT_MIN == 0.15
        assert t.NEGATIVE_SENTIMENT_MAX == -0.15

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ClassifierThresholds().TREND_WINDOW = 3


class TestPhraseTables:
    """Tests for lexicon table shape."""

    def test_cascade_order(self):
        assert [mood for mood, _ in MOOD_CASCADE] == [
            Mood.EXCITED, Mood.SAD, Mood.ANGRY, Mood.ANXIOUS, Mood.CONFUSED,
            Mood.LONELY, Mood.HAPPY, Mood.GRATEFUL, Mood.CALM,
        ]

    def test_crisis_phrases_lowercase(self):
        assert all(phrase == phrase.lower() for phrase in CRISIS_PHRASES)
