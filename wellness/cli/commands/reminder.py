"""
Hydration reminder commands.
"""
from typing import Annotated, Optional

import typer
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.blocking import BlockingScheduler
from rich.table import Table

from wellness.cli.commands.utils import console, fail, get_context
from wellness.core.exceptions import ValidationError
from wellness.services.reminder_service import (
    ConsoleNotifier,
    ReminderScheduler,
    format_interval,
    save_reminder_settings,
    schedule_daily_rollover,
)

app = typer.Typer(help="Configure hydration reminders")


@app.command("set")
def set_reminder(
    enabled: Annotated[bool, typer.Option("--enabled/--disabled")] = True,
    interval: Annotated[Optional[int], typer.Option("--interval", "-i", help="Minutes, multiple of 15")] = None,
):
    """Save reminder settings."""
    context = get_context()
    settings = context.reminder_settings
    requested = interval if interval is not None else settings.get_reminder_interval()
    try:
        minutes = save_reminder_settings(settings, enabled, requested)
    except ValidationError as exc:
        fail(str(exc))
        return
    if enabled:
        console.print(f"[green]Reminders enabled![/green] Every {format_interval(minutes)}")
    else:
        console.print("Reminders disabled")


@app.command("status")
def reminder_status():
    """Show the stored reminder settings."""
    settings = get_context().reminder_settings
    table = Table(title="Hydration Reminder")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Enabled", "yes" if settings.is_reminder_enabled() else "no")
    table.add_row("Interval", format_interval(settings.get_reminder_interval()))
    table.add_row("Last reminder (ms)", str(settings.get_last_reminder_time()))
    console.print(table)


@app.command("test")
def test_notification():
    """Send a test notification now."""
    reminders = ReminderScheduler(
        BackgroundScheduler(),
        ConsoleNotifier(console),
        settings=get_context().reminder_settings,
    )
    reminders.send_test()
    console.print("Test notification sent!")


@app.command("run")
def run_reminders():
    """Run the reminder and daily rollover jobs in the foreground."""
    context = get_context()
    scheduler = BlockingScheduler()
    reminders = ReminderScheduler(
        scheduler,
        ConsoleNotifier(console),
        settings=context.reminder_settings,
    )
    if not reminders.restore():
        console.print("[yellow]Reminders are disabled; only the daily habit reset will run.[/yellow]")
    schedule_daily_rollover(scheduler, context.habit_service.roll_over_all)
    console.print("Press Ctrl+C to stop.")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        console.print("Stopped")
