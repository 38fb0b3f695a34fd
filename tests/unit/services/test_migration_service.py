"""
Tests for the one-time legacy preferences migration.
"""
import json

from wellness.repositories.habit_repository import HabitRepository
from wellness.services.migration_service import LegacyMigration
from wellness.services.settings_service import (
    LEGACY_HABITS_KEY,
    LEGACY_MIGRATION_FLAG_KEY,
    LEGACY_MOOD_ENTRIES_KEY,
    ReminderSettings,
)

LEGACY_HABITS = [
    {"id": "h-1", "name": "Walk", "targetCount": 3, "currentCount": 1, "lastUpdated": "2026-03-13"},
    {"id": "h-2", "name": "Drink Water", "targetCount": 8, "currentCount": 0},
]

LEGACY_MOODS = [
    {
        "id": "m-1",
        "emoji": "😊",
        "note": "nice",
        "timestamp": 1_773_480_600_000,
        "dateString": "2026-03-14",
        "timeString": "09:30",
    },
    {"id": "m-2", "emoji": "😢", "timestamp": 1_773_394_200_000},
]


def _seed_legacy(preferences):
    preferences.put(LEGACY_HABITS_KEY, json.dumps(LEGACY_HABITS))
    preferences.put(LEGACY_MOOD_ENTRIES_KEY, json.dumps(LEGACY_MOODS))


def _snapshot(habit_repository, mood_repository):
    return (
        [habit.model_dump() for habit in habit_repository.get_all()],
        [entry.model_dump() for entry in mood_repository.get_all()],
    )


def test_migration_copies_records_sets_flag_and_clears_blobs(
    preferences, habit_repository, mood_repository
):
    _seed_legacy(preferences)
    migration = LegacyMigration(preferences, habit_repository, mood_repository)

    assert migration.run() is True

    habits = {habit.id: habit for habit in habit_repository.get_all()}
    assert set(habits) == {"h-1", "h-2"}
    assert habits["h-1"].current_count == 1
    assert habits["h-1"].last_updated == "2026-03-13"
    assert habits["h-2"].last_updated == ""

    entries = mood_repository.get_all()
    assert [entry.id for entry in entries] == ["m-1", "m-2"]
    assert entries[0].note == "nice"
    assert entries[1].note == ""
    assert entries[1].date_string
    assert entries[1].time_string

    assert ReminderSettings(preferences).is_migration_completed() is True
    assert not preferences.contains(LEGACY_HABITS_KEY)
    assert not preferences.contains(LEGACY_MOOD_ENTRIES_KEY)


def test_second_run_is_noop_once_flag_is_set(preferences, habit_repository, mood_repository):
    _seed_legacy(preferences)
    migration = LegacyMigration(preferences, habit_repository, mood_repository)
    migration.run()

    assert migration.run() is False


def test_rerun_without_flag_gives_same_contents(preferences, habit_repository, mood_repository):
    _seed_legacy(preferences)
    LegacyMigration(preferences, habit_repository, mood_repository).run()
    first = _snapshot(habit_repository, mood_repository)

    # simulate a crash after the inserts but before the flag was written
    _seed_legacy(preferences)
    ReminderSettings(preferences).set_migration_completed(False)
    LegacyMigration(preferences, habit_repository, mood_repository).run()

    assert _snapshot(habit_repository, mood_repository) == first


def test_missing_legacy_data_still_completes(preferences, habit_repository, mood_repository):
    migration = LegacyMigration(preferences, habit_repository, mood_repository)

    assert migration.run() is True
    assert habit_repository.get_all() == []
    assert ReminderSettings(preferences).is_migration_completed() is True


def test_corrupt_blob_is_logged_and_retried_later(preferences, habit_repository, mood_repository):
    preferences.put(LEGACY_HABITS_KEY, "{not json")
    migration = LegacyMigration(preferences, habit_repository, mood_repository)

    assert migration.run() is False
    assert ReminderSettings(preferences).is_migration_completed() is False
    assert preferences.contains(LEGACY_HABITS_KEY)

    preferences.put(LEGACY_HABITS_KEY, json.dumps(LEGACY_HABITS))
    assert migration.run() is True
    assert len(habit_repository.get_all()) == 2


def test_storage_failure_leaves_flag_unset(preferences, habit_repository, mood_repository, monkeypatch):
    _seed_legacy(preferences)

    def broken_insert_all(self, items):
        raise RuntimeError("disk full")

    monkeypatch.setattr(HabitRepository, "insert_all", broken_insert_all)
    migration = LegacyMigration(preferences, habit_repository, mood_repository)

    assert migration.run() is False
    assert ReminderSettings(preferences).is_migration_completed() is False
    assert preferences.contains(LEGACY_MOOD_ENTRIES_KEY)


def test_invalid_records_are_skipped_and_the_rest_migrate(
    preferences, habit_repository, mood_repository
):
    habits = LEGACY_HABITS + [
        {"id": "h-empty", "name": "  ", "targetCount": 2, "currentCount": 0},
        {"id": "h-zero", "name": "Stretch", "targetCount": 0, "currentCount": 0},
    ]
    moods = LEGACY_MOODS + [{"id": "m-bad", "emoji": "😊"}]
    preferences.put(LEGACY_HABITS_KEY, json.dumps(habits))
    preferences.put(LEGACY_MOOD_ENTRIES_KEY, json.dumps(moods))
    migration = LegacyMigration(preferences, habit_repository, mood_repository)

    assert migration.run() is True

    assert sorted(habit.id for habit in habit_repository.get_all()) == ["h-1", "h-2"]
    assert [entry.id for entry in mood_repository.get_all()] == ["m-1", "m-2"]
    assert ReminderSettings(preferences).is_migration_completed() is True
    assert not preferences.contains(LEGACY_HABITS_KEY)


def test_flag_from_older_preference_files_is_honoured(
    preferences, habit_repository, mood_repository
):
    _seed_legacy(preferences)
    preferences.put(LEGACY_MIGRATION_FLAG_KEY, True)
    settings = ReminderSettings(preferences)

    assert settings.is_migration_completed() is True
    assert LegacyMigration(preferences, habit_repository, mood_repository).run() is False
    assert habit_repository.get_all() == []

    settings.set_migration_completed(False)
    assert settings.is_migration_completed() is False
