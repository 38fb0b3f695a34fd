from .base import Subscription
from .habit_repository import HabitRepository
from .mood_entry_repository import MoodEntryRepository

__all__ = [
    "HabitRepository",
    "MoodEntryRepository",
    "Subscription",
]
