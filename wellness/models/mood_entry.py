"""
Mood journal entry model.
"""
from sqlalchemy import BigInteger, Column
from sqlmodel import Field, Index

from .base import BaseModel
from .enums import NEUTRAL_MOOD_VALUE, MoodEmoji


class MoodEntry(BaseModel, table=True):
    """
    A logged mood. Entries are never edited after creation.

    ``date_string`` and ``time_string`` are local-time projections of
    ``timestamp`` kept for display.
    """
    __tablename__ = "mood_entries"

    emoji: str = Field(..., max_length=16)
    note: str = Field(default="")
    timestamp: int = Field(sa_column=Column(BigInteger, nullable=False))
    date_string: str = Field(..., max_length=10)
    time_string: str = Field(..., max_length=5)

    __table_args__ = (
        Index("idx_mood_entries_timestamp", "timestamp"),
    )

    @property
    def mood_value(self) -> int:
        mood = MoodEmoji.from_value(self.emoji)
        return mood.score if mood else NEUTRAL_MOOD_VALUE
