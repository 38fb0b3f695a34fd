"""
Mood service for logging mood entries and summarizing them.
"""
from datetime import datetime, timedelta
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from wellness.core.exceptions import ValidationError
from wellness.core.logging_config import log_info
from wellness.core.time_utils import (
    DATE_FORMAT,
    TIME_FORMAT,
    Clock,
    local_now,
    to_epoch_millis,
)
from wellness.models.mood_entry import MoodEntry
from wellness.repositories.mood_entry_repository import MoodEntryRepository
from wellness.schemas.mood import MoodEntryCreate, TrendPoint

SUMMARY_TITLE = "My Wellness Mood Summary"
SHARE_SUBJECT = "My Mood Journal Summary"
NO_ENTRIES_MESSAGE = "No mood entries to share"
TREND_WINDOW = timedelta(days=7)


def mood_bucket(average: float) -> str:
    """Qualitative label for an average mood value on the 1..5 scale."""
    if average >= 4.5:
        return "very positive"
    if average >= 3.5:
        return "positive"
    if average >= 2.5:
        return "neutral"
    if average >= 1.5:
        return "somewhat negative"
    return "negative"


def average_mood(entries: List[MoodEntry]) -> Optional[float]:
    if not entries:
        return None
    return sum(entry.mood_value for entry in entries) / len(entries)


class MoodService:
    """Service class for mood journal operations."""

    def __init__(self, repository: MoodEntryRepository, clock: Optional[Clock] = None):
        self.repository = repository
        self.clock = clock or local_now

    def log_mood(self, emoji: str, note: Optional[str] = "", now: Optional[datetime] = None) -> MoodEntry:
        try:
            data = MoodEntryCreate(emoji=emoji, note=note)
        except PydanticValidationError as exc:
            raise ValidationError(f"Unknown mood '{emoji}'") from exc

        logged_at = now or self.clock()
        local = logged_at.astimezone()
        entry = MoodEntry(
            emoji=data.emoji.value,
            note=data.note,
            timestamp=to_epoch_millis(logged_at),
            date_string=local.strftime(DATE_FORMAT),
            time_string=local.strftime(TIME_FORMAT),
        )
        self.repository.insert(entry)
        log_info(f"Mood logged: {entry.id}", emoji=entry.emoji)
        return entry

    def list_entries(self) -> List[MoodEntry]:
        return self.repository.get_all()

    def get_entry(self, entry_id: str) -> Optional[MoodEntry]:
        return self.repository.get_by_id(entry_id)

    def delete_entry(self, entry_id: str) -> bool:
        entry = self.repository.get_by_id(entry_id)
        if entry is None:
            return False
        deleted = self.repository.delete(entry)
        if deleted:
            log_info(f"Mood entry deleted: {entry_id}")
        return deleted

    def build_summary(self) -> str:
        """Plain-text summary handed to the share facility."""
        entries = self.repository.get_all()
        average = average_mood(entries)
        if average is None:
            raise ValidationError(NO_ENTRIES_MESSAGE)
        lines = [
            SUMMARY_TITLE,
            "",
            f"Total entries: {len(entries)}",
            f"Average mood: {mood_bucket(average)}",
            f"Latest mood: {entries[0].emoji}",
        ]
        return "\n".join(lines) + "\n"

    def weekly_trend(self, now: Optional[datetime] = None) -> List[TrendPoint]:
        """Mood values of the last seven days, oldest first, labelled MM-DD."""
        reference = now or self.clock()
        since = to_epoch_millis(reference - TREND_WINDOW)
        return [
            TrendPoint(
                label=entry.date_string[5:],
                value=entry.mood_value,
                timestamp=entry.timestamp,
            )
            for entry in self.repository.get_since(since)
        ]

    @staticmethod
    def describe_entry(entry: MoodEntry) -> str:
        lines = [
            f"Emoji: {entry.emoji}",
            f"Date: {entry.date_string}",
            f"Time: {entry.time_string}",
        ]
        if entry.note:
            lines.append("")
            lines.append(f"Note: {entry.note}")
        return "\n".join(lines)
