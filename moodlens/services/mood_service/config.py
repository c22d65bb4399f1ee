"""Mood Service configuration, calibration thresholds and lexicons.

The numeric thresholds below are hand-tuned and have no documented
derivation. Changing any of them silently changes classification
outcomes for stored history, so they are pinned here and nowhere else.
"""
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from moodlens.shared.models import Mood


@dataclass(frozen=True)
class ClassifierThresholds:
    """Scoring, calibration and trend thresholds."""
    # Sentiment fallback cutoffs (score is normalized by token count)
    POSITIVE_SENTIMENT_MIN: float = 0.15
    NEGATIVE_SENTIMENT_MAX: float = -0.15

    # Cascade scores
    CATEGORY_MATCH_SCORE: int = 10
    SENTIMENT_FALLBACK_SCORE: int = 5

    # Selector: winners below this are forced to neutral at effective score 1
    MIN_CATEGORY_SCORE: int = 3
    BELOW_THRESHOLD_SCORE: int = 1

    # Confidence bands by winning score
    HIGH_BAND_MIN: int = 8
    MEDIUM_BAND_MIN: int = 5
    LOW_BAND_MIN: int = 3
    HIGH_CONFIDENCE: float = 0.90
    MEDIUM_CONFIDENCE: float = 0.70
    LOW_CONFIDENCE: float = 0.50
    MINIMAL_CONFIDENCE: float = 0.30

    # Crisis override
    CRISIS_CONFIDENCE: float = 0.95
    CRISIS_SENTIMENT_SCORE: float = -10.0
    CRISIS_SAD_SCORE: int = 15

    # Trend analysis
    TREND_WINDOW: int = 7
    TREND_MARGIN: int = 1
    ANXIETY_WARNING_RATIO: float = 0.3

    # Window positivity insight
    PATTERN_MIN_RECORDS: int = 3
    PATTERN_POSITIVE_RATIO: float = 0.6
    PATTERN_CHALLENGING_RATIO: float = 0.3


@dataclass(frozen=True)
class MoodServiceConfig:
    """Runtime configuration for the mood service."""

    # Version tracking for lexicon changes, reported by /health
    pattern_version: str = "2026.10.19"

    # Helpline directory used when a caller gives no country
    default_country: str = "US"

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "MoodServiceConfig":
        """Build configuration from environment variables."""
        return cls(
            pattern_version=os.getenv("MOOD_PATTERN_VERSION", cls.pattern_version),
            default_country=os.getenv("DEFAULT_HELPLINE_COUNTRY", cls.default_country),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
        )


# Self-harm and crisis phrases. Any single substring hit overrides all
# mood scoring.
CRISIS_PHRASES: FrozenSet[str] = frozenset({
    # Direct self-harm language
    "hurt myself",
    "kill myself",
    "harm myself",
    "cut myself",
    "self harm",
    "suicide",
    "end my life",
    "take my life",
    "end it all",
    "want to die",
    "i want to die",
    "should die",
    "wish i was dead",
    "rather be dead",
    "better off dead",
    "not worth living",
    "tired of living",
    "done with life",

    # Hopelessness and perceived burden
    "give up",
    "no point",
    "hopeless",
    "worthless",
    "pointless",
    "useless",
    "burden",
    "everyone would be better",
    "no one cares",
    "no one would miss me",
    "disappear",
    "fade away",
    "life is meaningless",
    "nothing matters",
    "cant go on",
    "can't go on",
    "hate myself",
    "hate my life",
})

# Sentiment lexicon. Whole-token lookup; negatives weigh 2, positives 1.
POSITIVE_WORDS: FrozenSet[str] = frozenset({
    "good", "great", "happy", "love", "wonderful", "fantastic", "awesome",
    "joy", "blessed", "grateful", "peaceful", "calm", "content", "satisfied",
    "proud", "accomplished", "successful", "optimistic", "cheerful",
    "delighted", "perfect", "brilliant", "excellent", "beautiful", "lovely",
    "nice", "pleasant", "enjoyable",
})

NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    "bad", "sad", "hate", "terrible", "awful", "horrible", "angry",
    "frustrated", "depressed", "upset", "worried", "anxious", "stressed",
    "hopeless", "worthless", "lonely", "isolated", "disappointed", "cry",
    "crying", "hurt", "pain", "miserable", "devastated", "heartbroken",
    "furious", "mad", "irritated", "annoyed", "disgusted", "bitter",
    "resentful",
})

# Priority cascade: first category with any marker hit wins outright.
# Order resolves overlapping vocabularies (excited before happy, happy
# before grateful) and must not be reordered.
MOOD_CASCADE: Tuple[Tuple[Mood, Tuple[str, ...]], ...] = (
    (Mood.EXCITED, (
        "excited", "thrilled", "pumped", "can't wait", "hyped", "stoked",
    )),
    (Mood.SAD, (
        "sad", "crying", "cry", "depressed", "down", "blue", "heartbroken",
        "devastated", "miserable", "feel terrible", "feel awful", "hopeless",
    )),
    (Mood.ANGRY, (
        "angry", "mad", "furious", "frustrated", "pissed", "hate",
        "irritated", "annoyed", "rage", "livid", "outraged",
    )),
    (Mood.ANXIOUS, (
        "anxious", "worried", "nervous", "stressed", "panic", "overwhelmed",
        "fear", "scared", "afraid", "terrified", "uneasy",
    )),
    (Mood.CONFUSED, (
        "confused", "don't know", "unsure", "unclear", "lost", "puzzled",
        "mixed up", "uncertain", "bewildered",
    )),
    (Mood.LONELY, (
        "lonely", "alone", "isolated", "no one cares", "by myself",
        "abandoned", "left out", "disconnected",
    )),
    (Mood.HAPPY, (
        "happy", "joy", "cheerful", "delighted", "good day", "feel good",
        "wonderful day", "great day", "amazing", "fantastic", "awesome",
        "brilliant",
    )),
    (Mood.GRATEFUL, (
        "grateful", "thankful", "blessed", "appreciate", "thank you",
        "gratitude",
    )),
    (Mood.CALM, (
        "calm", "peaceful", "relaxed", "serene", "tranquil", "zen",
        "meditation", "mindful",
    )),
)

# Broader per-mood vocabularies. Only used to report which keywords a
# text touches (matched_keywords); they never drive the cascade.
MOOD_KEYWORDS: Mapping[Mood, Tuple[str, ...]] = MappingProxyType({
    Mood.HAPPY: (
        "happy", "joy", "delighted", "cheerful", "ecstatic", "amazing",
        "wonderful", "fantastic", "great", "awesome", "brilliant", "love",
        "adore", "enjoy", "fun", "laugh", "smile", "celebrate", "success",
        "achievement", "accomplish", "proud", "grateful", "blessed",
    ),
    Mood.SAD: (
        "sad", "depressed", "down", "blue", "melancholy", "gloomy",
        "miserable", "cry", "tears", "hurt", "pain", "loss", "grief",
        "sorrow", "lonely", "disappointed", "let down", "heartbroken",
        "devastated", "hopeless", "empty", "numb", "broken", "defeated",
        "overwhelmed",
    ),
    Mood.ANGRY: (
        "angry", "mad", "furious", "rage", "irritated", "annoyed",
        "frustrated", "pissed", "livid", "outraged", "enraged", "hate",
        "disgusted", "repulsed", "fuming", "seething", "infuriated",
        "aggravated", "bothered", "upset", "displeased", "resentful",
        "bitter", "hostile", "aggressive",
    ),
    Mood.ANXIOUS: (
        "anxious", "worried", "nervous", "stressed", "tense", "uneasy",
        "restless", "panic", "fear", "scared", "afraid", "terrified",
        "overwhelmed", "pressure", "deadline", "exam", "interview",
        "presentation", "uncertain", "doubt", "apprehensive", "jittery",
        "on edge", "frazzled", "burned out",
    ),
    Mood.EXCITED: (
        "excited", "thrilled", "pumped", "hyped", "energized",
        "enthusiastic", "eager", "anticipating", "looking forward",
        "can't wait", "stoked", "buzzing", "fired up", "motivated",
        "inspired", "passionate", "zealous", "vibrant", "dynamic", "lively",
        "animated", "spirited",
    ),
    Mood.CALM: (
        "calm", "peaceful", "serene", "tranquil", "relaxed", "chill", "zen",
        "meditation", "mindful", "centered", "balanced", "grounded",
        "stable", "content", "satisfied", "at ease", "comfortable", "cozy",
        "warm", "gentle", "soft", "quiet", "still", "harmonious",
    ),
    Mood.GRATEFUL: (
        "grateful", "thankful", "appreciate", "blessed", "fortunate",
        "lucky", "thank you", "gratitude", "appreciation", "acknowledge",
        "recognize", "value", "treasure", "cherish", "honor", "respect",
        "admire", "inspired by", "moved by", "touched", "humbled",
        "privileged",
    ),
    Mood.LONELY: (
        "lonely", "alone", "isolated", "disconnected", "separated",
        "abandoned", "left out", "excluded", "rejected", "unwanted",
        "unloved", "ignored", "forgotten", "distant", "remote", "solitary",
        "single", "by myself", "no one", "nobody", "empty", "void", "hollow",
    ),
    Mood.CONFUSED: (
        "confused", "lost", "uncertain", "unclear", "puzzled", "bewildered",
        "perplexed", "disoriented", "mixed up", "torn", "conflicted",
        "dilemma", "doubt", "question", "wonder", "unsure", "hesitant",
        "indecisive", "ambiguous", "vague", "muddled", "chaotic",
    ),
})
