"""
One-time move of the legacy preference blobs into the database.
"""
import json
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wellness.core.exceptions import MigrationError
from wellness.core.logging_config import log_error, log_info, log_warning
from wellness.core.preferences import PreferencesStore
from wellness.models.habit import Habit
from wellness.models.mood_entry import MoodEntry
from wellness.repositories.habit_repository import HabitRepository
from wellness.repositories.mood_entry_repository import MoodEntryRepository
from wellness.schemas.habit import LegacyHabit
from wellness.schemas.mood import LegacyMoodEntry
from wellness.services.settings_service import (
    LEGACY_HABITS_KEY,
    LEGACY_MOOD_ENTRIES_KEY,
    ReminderSettings,
)

LegacyT = TypeVar("LegacyT", bound=BaseModel)


class LegacyMigration:
    """
    Copy legacy habits and mood entries into the repositories.

    Records keep their original ids, so a repeated run overwrites instead of
    duplicating. The completion flag is only set after both collections are
    stored; a failed run is logged and retried on the next start.
    Individual records that fail validation are logged and skipped.
    """

    def __init__(
        self,
        preferences: PreferencesStore,
        habit_repository: HabitRepository,
        mood_repository: MoodEntryRepository,
    ):
        self.preferences = preferences
        self.settings = ReminderSettings(preferences)
        self.habit_repository = habit_repository
        self.mood_repository = mood_repository

    def _load_blob(self, key: str, schema: Type[LegacyT]) -> List[LegacyT]:
        raw: Any = self.preferences.get(key)
        if raw is None or raw == "":
            return []
        try:
            items = json.loads(raw) if isinstance(raw, str) else raw
        except json.JSONDecodeError as exc:
            raise MigrationError(f"Legacy '{key}' value could not be read") from exc
        if items is None:
            return []
        if not isinstance(items, list):
            raise MigrationError(f"Legacy '{key}' value is not a list")

        records = []
        for index, item in enumerate(items):
            try:
                records.append(schema.model_validate(item))
            except PydanticValidationError as exc:
                # one bad record must not hold back the rest
                log_warning(
                    "Skipping invalid legacy record",
                    key=key,
                    index=index,
                    errors=exc.error_count(),
                )
        return records

    def run(self) -> bool:
        """Migrate once. Returns True when this call completed the migration."""
        if self.settings.is_migration_completed():
            return False

        try:
            legacy_habits = self._load_blob(LEGACY_HABITS_KEY, LegacyHabit)
            self.habit_repository.insert_all(
                [
                    Habit(
                        id=item.id,
                        name=item.name,
                        target_count=item.target_count,
                        current_count=item.current_count,
                        last_updated=item.last_updated or "",
                    )
                    for item in legacy_habits
                ]
            )

            legacy_moods = self._load_blob(LEGACY_MOOD_ENTRIES_KEY, LegacyMoodEntry)
            self.mood_repository.insert_all(
                [
                    MoodEntry(
                        id=item.id,
                        emoji=item.emoji,
                        note=item.note or "",
                        timestamp=item.timestamp,
                        date_string=item.date_string,
                        time_string=item.time_string,
                    )
                    for item in legacy_moods
                ]
            )

            self.settings.set_migration_completed(True)
            self.preferences.remove(LEGACY_HABITS_KEY, LEGACY_MOOD_ENTRIES_KEY)
        except Exception as exc:  # retried on next start
            log_error(exc, step="legacy_migration")
            return False

        log_info(
            "Legacy data migrated",
            habits=len(legacy_habits),
            mood_entries=len(legacy_moods),
        )
        return True
