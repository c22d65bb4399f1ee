"""Tests for helpline lookup, safety alerts, mood theming and recommendations."""
import pytest

from moodlens.shared.models import Mood
from moodlens.services.mood_service.helplines import (
    HELPLINES,
    SAFETY_ALERT_MESSAGE,
    build_safety_alert,
    get_helpline_info,
)
from moodlens.services.mood_service.pipeline import classify
from moodlens.services.mood_service.theming import (
    MOOD_RECOMMENDATIONS,
    MOOD_THEMES,
    get_mood_recommendation,
    get_mood_theme,
)


class TestHelplineLookup:
    """Tests for the static helpline directory."""

    @pytest.mark.parametrize("code", ["US", "UK", "CA", "AU", "IN"])
    def test_known_countries(self, code):
        assert get_helpline_info(code).country_code == code

    def test_default_is_us(self):
        assert get_helpline_info().number == "988"

    @pytest.mark.parametrize("code", ["ZZ", "", None, "usa"])
    def test_unknown_falls_back_to_us(self, code):
        assert get_helpline_info(code) is HELPLINES["US"]

    def test_case_insensitive(self):
        assert get_helpline_info(" uk ").name == "Samaritans"

    def test_to_dict_fields(self):
        assert get_helpline_info("AU").to_dict() == {
            "number": "13 11 14",
            "textNumber": "Text 0477 13 11 14",
            "website": "https://www.lifeline.org.au",
            "name": "Lifeline Australia",
        }


class TestSafetyAlert:
    """Tests for the crisis alert payload."""

    def test_alert_for_crisis(self):
        alert = build_safety_alert(classify("I want to die"), country_code="CA")

        assert alert["hasSelfHarmContent"] is True
        assert alert["message"] == SAFETY_ALERT_MESSAGE
        assert alert["helpline"]["name"] == "Crisis Services Canada"

    def test_no_alert_without_crisis(self):
        assert build_safety_alert(classify("Today was a good day")) is None


class TestMoodTheme:
    """Tests for mood color/emoji theming."""

    def test_every_mood_has_theme(self):
        assert set(MOOD_THEMES) == set(Mood)

    def test_lookup_by_string(self):
        assert get_mood_theme("happy").color == "#FFD700"

    def test_unknown_falls_back_to_neutral(self):
        assert get_mood_theme("ecstatic") == MOOD_THEMES[Mood.NEUTRAL]


class TestMoodRecommendation:
    """Tests for per-mood recommendation text."""

    def test_every_mood_has_recommendation(self):
        assert set(MOOD_RECOMMENDATIONS) == set(Mood)

    def test_lookup(self):
        assert get_mood_recommendation(Mood.LONELY) == (
            "Reach out to friends or family. You're not alone."
        )
        assert get_mood_recommendation("ANXIOUS").startswith("Try some relaxation")

    def test_unknown_falls_back_to_neutral(self):
        assert get_mood_recommendation(None) == MOOD_RECOMMENDATIONS[Mood.NEUTRAL]
