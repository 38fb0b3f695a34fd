"""
Typed accessors for the flat preference keys.

No range checks happen here; callers validate values before storing them.
"""
from wellness.core.preferences import PreferencesStore

KEY_REMINDER_ENABLED = "reminder_enabled"
KEY_REMINDER_INTERVAL = "reminder_interval"
KEY_LAST_REMINDER_TIME = "last_reminder_time"
KEY_MIGRATION_COMPLETED = "migration_completed"
# Completion flag name used by older preference files.
LEGACY_MIGRATION_FLAG_KEY = "migrated_to_room"

# Whole-collection JSON blobs written by the pre-database releases.
LEGACY_HABITS_KEY = "habits"
LEGACY_MOOD_ENTRIES_KEY = "mood_entries"

DEFAULT_REMINDER_INTERVAL = 60


class ReminderSettings:
    def __init__(self, store: PreferencesStore):
        self.store = store

    def is_reminder_enabled(self) -> bool:
        return self.store.get_bool(KEY_REMINDER_ENABLED, False)

    def set_reminder_enabled(self, enabled: bool) -> None:
        self.store.put(KEY_REMINDER_ENABLED, bool(enabled))

    def get_reminder_interval(self) -> int:
        """Reminder interval in minutes (default: 60)."""
        return self.store.get_int(KEY_REMINDER_INTERVAL, DEFAULT_REMINDER_INTERVAL)

    def set_reminder_interval(self, interval_minutes: int) -> None:
        self.store.put(KEY_REMINDER_INTERVAL, int(interval_minutes))

    def get_last_reminder_time(self) -> int:
        return self.store.get_int(KEY_LAST_REMINDER_TIME, 0)

    def set_last_reminder_time(self, timestamp_ms: int) -> None:
        self.store.put(KEY_LAST_REMINDER_TIME, int(timestamp_ms))

    def is_migration_completed(self) -> bool:
        return self.store.get_bool(KEY_MIGRATION_COMPLETED, False) or self.store.get_bool(
            LEGACY_MIGRATION_FLAG_KEY, False
        )

    def set_migration_completed(self, completed: bool) -> None:
        self.store.put(KEY_MIGRATION_COMPLETED, bool(completed))
        if not completed:
            self.store.remove(LEGACY_MIGRATION_FLAG_KEY)
