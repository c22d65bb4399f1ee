"""Display theming for moods: dashboard color, emoji and recommendation text."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from moodlens.shared.models import Mood


@dataclass(frozen=True)
class MoodTheme:
    color: str
    emoji: str

    def to_dict(self) -> Dict[str, str]:
        return {"color": self.color, "emoji": self.emoji}


MOOD_THEMES: Mapping[Mood, MoodTheme] = MappingProxyType({
    Mood.HAPPY: MoodTheme("#FFD700", "😊"),     # Gold
    Mood.SAD: MoodTheme("#4169E1", "😢"),       # Royal Blue
    Mood.ANGRY: MoodTheme("#DC143C", "😠"),     # Crimson
    Mood.ANXIOUS: MoodTheme("#FF8C00", "😰"),   # Dark Orange
    Mood.EXCITED: MoodTheme("#FF1493", "🤩"),   # Deep Pink
    Mood.CALM: MoodTheme("#20B2AA", "😌"),      # Light Sea Green
    Mood.GRATEFUL: MoodTheme("#32CD32", "🙏"),  # Lime Green
    Mood.LONELY: MoodTheme("#708090", "😔"),    # Slate Gray
    Mood.CONFUSED: MoodTheme("#9370DB", "😕"),  # Medium Purple
    Mood.NEUTRAL: MoodTheme("#808080", "😐"),   # Gray
})


def get_mood_theme(mood: Any) -> MoodTheme:
    """Theme for a mood or mood string; unknown values get the neutral theme."""
    parsed = Mood.parse(mood)
    return MOOD_THEMES[parsed if parsed is not None else Mood.NEUTRAL]


NO_HISTORY_RECOMMENDATION = "Start journaling to track your mood patterns!"

MOOD_RECOMMENDATIONS: Mapping[Mood, str] = MappingProxyType({
    Mood.HAPPY: "Keep up the positive energy! Consider sharing your joy with others.",
    Mood.SAD: (
        "It's okay to feel sad. Consider reaching out to friends "
        "or doing something you enjoy."
    ),
    Mood.ANGRY: "Take some deep breaths. Physical activity or meditation might help.",
    Mood.ANXIOUS: "Try some relaxation techniques like deep breathing or mindfulness.",
    Mood.EXCITED: "Channel this energy into something productive or creative!",
    Mood.CALM: "This peaceful state is perfect for reflection and planning.",
    Mood.GRATEFUL: "Gratitude is powerful! Consider writing down what you're thankful for.",
    Mood.LONELY: "Reach out to friends or family. You're not alone.",
    Mood.CONFUSED: "Take time to process your thoughts. Journaling can help clarify things.",
    Mood.NEUTRAL: "A balanced state. Perfect time for self-reflection.",
})


def get_mood_recommendation(mood: Any) -> str:
    """Suggestion shown alongside a user's current (most frequent) mood.

    Args:
        mood: Mood or mood string

    Returns:
        Recommendation text; unknown values get the neutral suggestion
    """
    parsed = Mood.parse(mood)
    return MOOD_RECOMMENDATIONS[parsed if parsed is not None else Mood.NEUTRAL]
