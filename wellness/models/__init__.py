# Import all models for easy access
from .base import BaseModel
from .enums import MoodEmoji
from .habit import Habit
from .mood_entry import MoodEntry

__all__ = [
    "BaseModel",
    "Habit",
    "MoodEmoji",
    "MoodEntry",
]
