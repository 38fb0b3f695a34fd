"""
Mood entry persistence.
"""
from typing import Any, List, Sequence

from sqlmodel import col, select

from wellness.models.mood_entry import MoodEntry

from .base import Repository


class MoodEntryRepository(Repository[MoodEntry]):
    """Mood entries, newest first."""

    model = MoodEntry

    def _ordering(self) -> Sequence[Any]:
        return (col(MoodEntry.timestamp).desc(), col(MoodEntry.id).asc())

    def get_since(self, timestamp_ms: int) -> List[MoodEntry]:
        """Entries logged at or after ``timestamp_ms``, oldest first."""
        with self.database.session() as session:
            statement = (
                select(MoodEntry)
                .where(col(MoodEntry.timestamp) >= timestamp_ms)
                .order_by(col(MoodEntry.timestamp).asc(), col(MoodEntry.id).asc())
            )
            return list(session.exec(statement).all())
