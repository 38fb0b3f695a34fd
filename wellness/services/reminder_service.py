"""
Hydration reminder: a repeating scheduler job that posts a notification.
"""
from typing import Optional, Protocol

from apscheduler.schedulers.base import BaseScheduler
from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.panel import Panel

from wellness.core.exceptions import ValidationError
from wellness.core.logging_config import log_error, log_info
from wellness.core.time_utils import Clock, local_now, to_epoch_millis
from wellness.services.settings_service import ReminderSettings

REMINDER_JOB_ID = "hydration_reminder"
ROLLOVER_JOB_ID = "daily_habit_rollover"
INTERVAL_STEP_MINUTES = 15


class NotificationChannel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    channel_id: str
    title: str
    text: str
    # command that brings the main interface up when the user acts on it
    open_command: str


HYDRATION_CHANNEL = NotificationChannel(
    id="hydration_reminder_channel",
    name="Hydration Reminders",
    description="Reminders to drink water throughout the day",
)

HYDRATION_NOTIFICATION = Notification(
    id=1001,
    channel_id=HYDRATION_CHANNEL.id,
    title="Time to Hydrate!",
    text="Don't forget to drink water 💧",
    open_command="wellness-admin habit list",
)


class Notifier(Protocol):
    def ensure_channel(self, channel: NotificationChannel) -> None:
        ...

    def notify(self, notification: Notification) -> None:
        ...


class ConsoleNotifier:
    """Shows notifications in the terminal. Posting the same id replaces the last one."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.channels: dict[str, NotificationChannel] = {}
        self.active: dict[int, Notification] = {}

    def ensure_channel(self, channel: NotificationChannel) -> None:
        self.channels.setdefault(channel.id, channel)

    def notify(self, notification: Notification) -> None:
        channel = self.channels.get(notification.channel_id)
        self.active[notification.id] = notification
        self.console.print(
            Panel(
                f"{notification.text}\n\n[dim]Open: {notification.open_command}[/dim]",
                title=notification.title,
                subtitle=channel.name if channel else None,
            )
        )


def validate_interval(interval_minutes: int) -> int:
    """Reminder intervals are positive multiples of 15 minutes."""
    try:
        value = int(interval_minutes)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Reminder interval must be a number of minutes") from exc
    if value < INTERVAL_STEP_MINUTES or value % INTERVAL_STEP_MINUTES != 0:
        raise ValidationError(
            f"Reminder interval must be a positive multiple of {INTERVAL_STEP_MINUTES} minutes"
        )
    return value


def save_reminder_settings(settings: ReminderSettings, enabled: bool, interval_minutes: int) -> int:
    """Validate the interval and store both settings. Returns the stored interval."""
    interval = validate_interval(interval_minutes)
    settings.set_reminder_enabled(enabled)
    settings.set_reminder_interval(interval)
    return interval


def format_interval(minutes: int) -> str:
    hours, mins = divmod(minutes, 60)
    hour_label = f"{hours} hour{'s' if hours > 1 else ''}"
    if hours > 0 and mins > 0:
        return f"{hour_label} {mins} min"
    if hours > 0:
        return hour_label
    return f"{mins} minutes"


class ReminderScheduler:
    """
    Binding between the reminder settings and an APScheduler scheduler.

    There is at most one reminder job: scheduling again replaces it.
    """

    def __init__(
        self,
        scheduler: BaseScheduler,
        notifier: Notifier,
        settings: Optional[ReminderSettings] = None,
        clock: Optional[Clock] = None,
    ):
        self.scheduler = scheduler
        self.notifier = notifier
        self.settings = settings
        self.clock = clock or local_now

    def schedule_repeating(self, interval_minutes: int) -> None:
        self.cancel()
        self.scheduler.add_job(
            self.on_fire,
            "interval",
            minutes=interval_minutes,
            id=REMINDER_JOB_ID,
            name="Hydration reminder",
            replace_existing=True,
        )
        log_info("Hydration reminder scheduled", interval_minutes=interval_minutes)

    def cancel(self) -> None:
        if self.scheduler.get_job(REMINDER_JOB_ID) is None:
            return
        self.scheduler.remove_job(REMINDER_JOB_ID)
        log_info("Hydration reminder cancelled")

    def is_scheduled(self) -> bool:
        return self.scheduler.get_job(REMINDER_JOB_ID) is not None

    def on_fire(self) -> None:
        self.notifier.ensure_channel(HYDRATION_CHANNEL)
        self.notifier.notify(HYDRATION_NOTIFICATION)
        if self.settings is not None:
            self.settings.set_last_reminder_time(to_epoch_millis(self.clock()))

    def send_test(self) -> None:
        self.on_fire()

    def apply_settings(self, enabled: bool, interval_minutes: int) -> None:
        """Validate, persist, then schedule or cancel the reminder."""
        if self.settings is not None:
            interval = save_reminder_settings(self.settings, enabled, interval_minutes)
        else:
            interval = validate_interval(interval_minutes)
        if enabled:
            self.schedule_repeating(interval)
        else:
            self.cancel()

    def restore(self) -> bool:
        """Re-register the reminder from stored settings."""
        if self.settings is None or not self.settings.is_reminder_enabled():
            return False
        try:
            interval = validate_interval(self.settings.get_reminder_interval())
        except ValidationError as exc:
            log_error(exc, interval=self.settings.get_reminder_interval())
            return False
        self.schedule_repeating(interval)
        return True


def schedule_daily_rollover(scheduler: BaseScheduler, callback, hour: int = 0, minute: int = 0) -> None:
    scheduler.add_job(
        callback,
        "cron",
        hour=hour,
        minute=minute,
        id=ROLLOVER_JOB_ID,
        replace_existing=True,
    )
