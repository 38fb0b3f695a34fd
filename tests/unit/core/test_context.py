"""
Tests for the composition root.
"""
import json

from wellness.core.config import Settings
from wellness.core.context import AppContext
from wellness.core.database import Database
from wellness.services.settings_service import LEGACY_HABITS_KEY


def _context(tmp_path, clock=None) -> AppContext:
    return AppContext(
        config=Settings(data_dir=tmp_path),
        database=Database("sqlite://"),
        clock=clock,
    )


def test_settings_derive_paths_from_data_dir(tmp_path):
    config = Settings(data_dir=tmp_path)

    assert config.database_url == f"sqlite:///{tmp_path / 'wellness.db'}"
    assert config.preferences_file == tmp_path / "wellness_prefs.json"


def test_migration_runs_on_first_repository_access(tmp_path):
    prefs_path = tmp_path / "wellness_prefs.json"
    prefs_path.write_text(
        json.dumps(
            {
                LEGACY_HABITS_KEY: json.dumps(
                    [{"id": "h-1", "name": "Walk", "targetCount": 2, "currentCount": 0}]
                )
            }
        ),
        encoding="utf-8",
    )

    with _context(tmp_path) as context:
        assert context.reminder_settings.is_migration_completed() is False

        habits = context.habit_repository.get_all()

        assert [habit.id for habit in habits] == ["h-1"]
        assert context.reminder_settings.is_migration_completed() is True


def test_services_share_the_same_database(tmp_path, clock):
    with _context(tmp_path, clock) as context:
        habit = context.habit_service.add_habit("Walk", 2)
        context.mood_service.log_mood("😊")

        assert context.habit_repository.get_by_id(habit.id) is not None
        assert len(context.mood_repository.get_all()) == 1


def test_clear_all_erases_everything(tmp_path, clock):
    with _context(tmp_path, clock) as context:
        context.habit_service.add_habit("Walk", 2)
        context.mood_service.log_mood("😊")
        context.reminder_settings.set_reminder_enabled(True)

        context.clear_all()

        assert context.habit_repository.get_all() == []
        assert context.mood_repository.get_all() == []
        assert context.reminder_settings.is_reminder_enabled() is False


def test_file_database_persists_between_contexts(tmp_path, clock):
    config = Settings(data_dir=tmp_path / "data")
    with AppContext(config=config, clock=clock) as context:
        habit = context.habit_service.add_habit("Walk", 2)
        context.habit_service.increment(habit.id)

    with AppContext(config=config, clock=clock) as context:
        reloaded = context.habit_service.get_habit(habit.id)

    assert reloaded.current_count == 1
