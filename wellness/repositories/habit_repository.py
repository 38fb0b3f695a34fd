"""
Habit persistence.
"""
from typing import Any, Sequence

from sqlmodel import col

from wellness.models.habit import Habit

from .base import Repository


class HabitRepository(Repository[Habit]):
    """Habits, listed by name ascending."""

    model = Habit

    def _ordering(self) -> Sequence[Any]:
        return (col(Habit.name).asc(), col(Habit.id).asc())
