"""
Shared fixtures: in-memory database, temp preferences file and a fixed clock.
"""
from datetime import datetime, timedelta

import pytest

from wellness.core.database import Database
from wellness.core.preferences import PreferencesStore
from wellness.repositories.habit_repository import HabitRepository
from wellness.repositories.mood_entry_repository import MoodEntryRepository


class FakeClock:
    """Callable clock returning a local, timezone-aware time that tests can move."""

    def __init__(self, start: datetime):
        self.now = start.astimezone()

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)

    def next_day(self) -> None:
        self.advance(days=1)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 3, 14, 9, 30))


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def habit_repository(database) -> HabitRepository:
    return HabitRepository(database)


@pytest.fixture
def mood_repository(database) -> MoodEntryRepository:
    return MoodEntryRepository(database)


@pytest.fixture
def preferences(tmp_path) -> PreferencesStore:
    return PreferencesStore(tmp_path / "wellness_prefs.json")
