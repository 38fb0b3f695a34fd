"""
Enumerations used by the models.
"""
from enum import Enum
from typing import Optional


class MoodEmoji(str, Enum):
    """The five selectable moods, from very sad to very happy."""

    VERY_SAD = "😢"
    SAD = "😞"
    NEUTRAL = "😐"
    HAPPY = "😊"
    VERY_HAPPY = "😄"

    @property
    def score(self) -> int:
        return _SCORES[self]

    @classmethod
    def from_value(cls, value: str) -> Optional["MoodEmoji"]:
        try:
            return cls(value)
        except ValueError:
            return None


_SCORES = {
    MoodEmoji.VERY_SAD: 1,
    MoodEmoji.SAD: 2,
    MoodEmoji.NEUTRAL: 3,
    MoodEmoji.HAPPY: 4,
    MoodEmoji.VERY_HAPPY: 5,
}

NEUTRAL_MOOD_VALUE = 3
