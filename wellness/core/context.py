"""
Composition root: builds the storage handles, repositories and services.
"""
from typing import Optional

from wellness.core.config import Settings
from wellness.core.config import settings as default_settings
from wellness.core.database import Database
from wellness.core.preferences import PreferencesStore
from wellness.core.time_utils import Clock
from wellness.repositories.habit_repository import HabitRepository
from wellness.repositories.mood_entry_repository import MoodEntryRepository
from wellness.services.habit_service import HabitService
from wellness.services.migration_service import LegacyMigration
from wellness.services.mood_service import MoodService
from wellness.services.settings_service import ReminderSettings


class AppContext:
    """
    Owns the single database handle of the process.

    The legacy migration runs the first time a repository or service is
    requested.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        database: Optional[Database] = None,
        preferences: Optional[PreferencesStore] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config or default_settings
        self.clock = clock
        self.database = database or Database(self.config.database_url)
        self.database.create_schema()
        self.preferences = preferences or PreferencesStore(self.config.preferences_file)
        self.reminder_settings = ReminderSettings(self.preferences)

        self._habit_repository = HabitRepository(self.database)
        self._mood_repository = MoodEntryRepository(self.database)
        self.migration = LegacyMigration(
            self.preferences,
            self._habit_repository,
            self._mood_repository,
        )
        self._migration_attempted = False
        self._habit_service: Optional[HabitService] = None
        self._mood_service: Optional[MoodService] = None

    def ensure_migrated(self) -> None:
        if self._migration_attempted:
            return
        self._migration_attempted = True
        self.migration.run()

    @property
    def habit_repository(self) -> HabitRepository:
        self.ensure_migrated()
        return self._habit_repository

    @property
    def mood_repository(self) -> MoodEntryRepository:
        self.ensure_migrated()
        return self._mood_repository

    @property
    def habit_service(self) -> HabitService:
        if self._habit_service is None:
            self._habit_service = HabitService(self.habit_repository, clock=self.clock)
        return self._habit_service

    @property
    def mood_service(self) -> MoodService:
        if self._mood_service is None:
            self._mood_service = MoodService(self.mood_repository, clock=self.clock)
        return self._mood_service

    def clear_all(self) -> None:
        """Erase preferences and every stored habit and mood entry."""
        self.preferences.clear()
        self._habit_repository.delete_all()
        self._mood_repository.delete_all()

    def close(self) -> None:
        self.database.dispose()

    def __enter__(self) -> "AppContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
