"""Mood Service: rule-based journal mood classification.

Every entry passes through crisis detection first; a crisis phrase
overrides all mood scoring and flags the result for a safety alert.

Components:
- text_normalizer.py: markup/punctuation stripping and tokenizing
- crisis_detector.py: self-harm phrase detection (highest priority)
- sentiment_scorer.py: lexicon polarity score
- mood_classifier.py: priority cascade over mood marker phrases
- mood_selector.py: winner selection and confidence bands
- pipeline.py: classify() entry point
- trend_analyzer.py: dominant mood, trend direction, insights, stats
- helplines.py: helpline directory and safety alert payloads
- theming.py: mood color/emoji and recommendation text for dashboards
- handler.py: Flask HTTP endpoints (/health, /classify, /trends, /helplines)

Usage:
    from moodlens.services.mood_service import classify, analyze_trend
    result = classify("I feel so happy today", manual_mood="happy")
    summary = analyze_trend([{"mood": "happy", "createdAt": "2026-01-01T09:00:00"}])
"""

from .config import ClassifierThresholds, MoodServiceConfig, CRISIS_PHRASES, MOOD_CASCADE
from .crisis_detector import CrisisDetector, CrisisMatch
from .helplines import HelplineRecord, build_safety_alert, get_helpline_info
from .mood_classifier import CategoryScores, MoodClassifier
from .mood_selector import MoodSelection, MoodSelector
from .pipeline import MoodClassificationPipeline, classify, get_pipeline
from .sentiment_scorer import SentimentScore, SentimentScorer
from .text_normalizer import NormalizedText, TextNormalizer, normalize_text
from .theming import MoodTheme, get_mood_recommendation, get_mood_theme
from .trend_analyzer import (
    TrendAnalyzer,
    analyze_patterns,
    analyze_trend,
    summarize_mood_stats,
)

__all__ = [
    "ClassifierThresholds",
    "MoodServiceConfig",
    "CRISIS_PHRASES",
    "MOOD_CASCADE",
    "CrisisDetector",
    "CrisisMatch",
    "HelplineRecord",
    "build_safety_alert",
    "get_helpline_info",
    "CategoryScores",
    "MoodClassifier",
    "MoodSelection",
    "MoodSelector",
    "MoodClassificationPipeline",
    "classify",
    "get_pipeline",
    "SentimentScore",
    "SentimentScorer",
    "NormalizedText",
    "TextNormalizer",
    "normalize_text",
    "MoodTheme",
    "get_mood_theme",
    "get_mood_recommendation",
    "TrendAnalyzer",
    "analyze_patterns",
    "analyze_trend",
    "summarize_mood_stats",
]
