"""Tests for MoodClassificationPipeline - end-to-end classification.

Crisis precedence is safety-critical: any crisis phrase must force the
SAD / 0.95 / self-harm result no matter what else the entry says.
"""
import json

import pytest

from moodlens.shared.models import ClassificationResult, Mood
from moodlens.services.mood_service.pipeline import (
    CRISIS_REASONING,
    NO_TEXT_REASONING,
    MoodClassificationPipeline,
    classify,
)


@pytest.fixture
def pipeline():
    """Create a MoodClassificationPipeline instance for testing."""
    return MoodClassificationPipeline()


class TestEmptyInput:
    """Tests for missing or empty text."""

    @pytest.mark.parametrize("text", ["", None, "   ", "!!! ...", 42])
    def test_empty_text_is_neutral_zero_confidence(self, pipeline, text):
        """Empty or invalid text degrades to neutral, never raises."""
        result = pipeline.classify(text)

        assert result.detected_mood == Mood.NEUTRAL
        assert result.confidence == 0
        assert result.self_harm_detected is False
        assert result.sentiment_score == 0
        assert result.matched_keywords == frozenset()
        assert result.reasoning == NO_TEXT_REASONING
        assert all(score == 0 for score in result.mood_scores.values())

    def test_empty_text_keeps_manual_mood(self, pipeline):
        result = pipeline.classify("", manual_mood="calm")
        assert result.manual_mood == "calm"


class TestCrisisPrecedence:
    """Tests for the crisis override."""

    @pytest.mark.parametrize("text", [
        "I want to die",
        "I want to die but also I feel so excited",
        "Honestly I feel worthless and so happy about nothing",
        "I can't go on like this",
        "Everything is pointless, I am grateful for nothing",
    ])
    def test_crisis_overrides_every_category(self, pipeline, text):
        """Crisis phrases force sad at 0.95 regardless of other content."""
        result = pipeline.classify(text)

        assert result.self_harm_detected is True
        assert result.detected_mood == Mood.SAD
        assert result.confidence == 0.95
        assert result.reasoning == CRISIS_REASONING

    def test_crisis_result_reports_matched_phrases(self, pipeline):
        result = pipeline.classify("I want to die, I feel hopeless")
        assert {"want to die", "i want to die", "hopeless"} <= result.matched_keywords

    def test_crisis_scores_keep_all_moods(self, pipeline):
        result = pipeline.classify("I want to kill myself")
        assert set(result.mood_scores) == set(Mood)
        assert result.mood_scores[Mood.SAD] == 15
        assert result.sentiment_score == -10.0

    def test_crisis_detected_through_markup(self, pipeline):
        result = pipeline.classify("<b>I want</b> to <i>die</i>")
        assert result.self_harm_detected is True


class TestCategoryCascade:
    """Tests for the priority cascade through the full pipeline."""

    def test_excited_beats_sad(self, pipeline):
        """Excited is checked before sad."""
        result = pipeline.classify("I am so excited and so sad")
        assert result.detected_mood == Mood.EXCITED
        assert result.confidence == 0.90

    def test_happy_beats_grateful(self, pipeline):
        """Happy is checked before grateful."""
        result = pipeline.classify("I feel so happy and grateful today, thank you!")

        assert result.detected_mood == Mood.HAPPY
        assert result.confidence == 0.90
        assert result.self_harm_detected is False
        assert {"happy", "grateful"} <= result.matched_keywords

    def test_apostrophe_phrase_matches(self, pipeline):
        result = pipeline.classify("I can't wait for the concert!")
        assert result.detected_mood == Mood.EXCITED

    @pytest.mark.parametrize("text,expected", [
        ("I have been crying all night", Mood.SAD),
        ("My brother makes me furious", Mood.ANGRY),
        ("I am nervous about tomorrow", Mood.ANXIOUS),
        ("I don't know what to think", Mood.CONFUSED),
        ("I spent the weekend by myself", Mood.LONELY),
        ("Today was a good day", Mood.HAPPY),
        ("I appreciate my friends", Mood.GRATEFUL),
        ("I feel relaxed after yoga", Mood.CALM),
    ])
    def test_each_category_reachable(self, pipeline, text, expected):
        result = pipeline.classify(text)
        assert result.detected_mood == expected
        assert result.confidence == 0.90
        assert result.mood_scores[expected] == 10

    def test_only_winning_category_scored(self, pipeline):
        result = pipeline.classify("I am nervous about tomorrow")
        nonzero = {mood for mood, score in result.mood_scores.items() if score}
        assert nonzero == {Mood.ANXIOUS}


class TestSentimentFallback:
    """Tests for entries with no category marker."""

    def test_neutral_below_threshold(self, pipeline):
        """No markers and flat sentiment yields low-confidence neutral."""
        result = pipeline.classify("The meeting is at noon on Tuesday")

        assert result.detected_mood == Mood.NEUTRAL
        assert result.confidence == 0.30
        assert result.reasoning == "Neutral sentiment and no specific mood indicators"

    def test_positive_sentiment_falls_back_to_happy(self, pipeline):
        result = pipeline.classify("nice lovely pleasant")

        assert result.detected_mood == Mood.HAPPY
        assert result.confidence == 0.70
        assert result.mood_scores[Mood.HAPPY] == 5
        assert result.reasoning.startswith("Positive sentiment detected")

    def test_negative_sentiment_falls_back_to_sad(self, pipeline):
        result = pipeline.classify("terrible awful horrible")

        assert result.detected_mood == Mood.SAD
        assert result.confidence == 0.70
        assert result.sentiment_score == pytest.approx(-2.0)
        assert result.reasoning.startswith("Negative sentiment detected")


class TestResultContract:
    """Tests for determinism and result invariants."""

    @pytest.mark.parametrize("text", [
        "I am so excited and so sad",
        "The meeting is at noon on Tuesday",
        "I want to die",
        "",
    ])
    def test_deterministic(self, pipeline, text):
        """Same text in, same result out."""
        assert pipeline.classify(text) == pipeline.classify(text)

    def test_separate_instances_agree(self, pipeline):
        text = "I feel relaxed after yoga"
        assert MoodClassificationPipeline().classify(text) == pipeline.classify(text)

    def test_manual_mood_passed_through_unvalidated(self, pipeline):
        result = pipeline.classify("Today was a good day", manual_mood="not-a-mood")
        assert result.manual_mood == "not-a-mood"
        assert result.detected_mood == Mood.HAPPY

    def test_result_has_all_mood_keys(self, pipeline):
        result = pipeline.classify("Today was a good day")
        assert isinstance(result, ClassificationResult)
        assert list(result.mood_scores) == list(Mood)

    def test_to_dict_shape(self, pipeline):
        data = pipeline.classify("I feel relaxed after yoga", manual_mood="calm").to_dict()

        assert data["detectedMood"] == "calm"
        assert data["manualMood"] == "calm"
        assert data["selfHarmDetected"] is False
        assert len(data["moodScores"]) == 10
        assert data["matchedKeywords"] == sorted(data["matchedKeywords"])

    def test_module_level_classify(self):
        assert classify("I am so excited").detected_mood == Mood.EXCITED

    def test_lone_surrogate_still_classifies(self, pipeline):
        """JSON bodies can decode to str values holding unpaired surrogates."""
        result = pipeline.classify(json.loads('"I feel so happy \\ud83d today"'))

        assert result.detected_mood == Mood.HAPPY
        assert result.confidence == 0.9

    def test_to_dict_keeps_full_sentiment_precision(self, pipeline):
        result = pipeline.classify("It went good")
        assert result.sentiment_score == pytest.approx(1 / 3)
        assert result.to_dict()["sentimentScore"] == result.sentiment_score


class TestKeywordDetection:
    """Tests for stem-based keyword reporting."""

    def test_stemmed_token_matches(self, pipeline):
        assert "laugh" in pipeline.detect_keywords(("laughing",))

    def test_short_tokens_do_not_match_inside_keywords(self, pipeline):
        assert pipeline.detect_keywords(("i", "a", "to")) == frozenset()

    def test_multi_word_keyword_matches_token(self, pipeline):
        assert "let down" in pipeline.detect_keywords(("feeling", "let", "down"))

    def test_no_tokens(self, pipeline):
        assert pipeline.detect_keywords(()) == frozenset()
