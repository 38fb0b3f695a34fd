"""
Mood entry schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wellness.core.time_utils import DATE_FORMAT, TIME_FORMAT, from_epoch_millis
from wellness.models.enums import MoodEmoji


class MoodEntryCreate(BaseModel):
    emoji: MoodEmoji
    note: str = ""

    @field_validator("note", mode="before")
    @classmethod
    def normalize_note(cls, value: Optional[str]) -> str:
        if value is None:
            return ""
        return str(value).strip()


class MoodEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    emoji: str
    note: str
    timestamp: int
    date_string: str
    time_string: str
    mood_value: int


class TrendPoint(BaseModel):
    """One point of the mood trend series (label is MM-DD)."""
    label: str
    value: int
    timestamp: int


class LegacyMoodEntry(BaseModel):
    """A mood entry as serialized in the old preferences blob (camelCase keys)."""
    id: str
    emoji: str
    note: Optional[str] = ""
    timestamp: int
    date_string: Optional[str] = Field(default=None, alias="dateString")
    time_string: Optional[str] = Field(default=None, alias="timeString")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def fill_projections(self) -> "LegacyMoodEntry":
        if self.note is None:
            self.note = ""
        if not self.date_string or not self.time_string:
            local = from_epoch_millis(self.timestamp)
            self.date_string = self.date_string or local.strftime(DATE_FORMAT)
            self.time_string = self.time_string or local.strftime(TIME_FORMAT)
        return self
