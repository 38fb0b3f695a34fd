"""
Mood journal commands.
"""
import json
from typing import Annotated, Optional

import typer
from rich.table import Table

from wellness.cli.commands.utils import confirm_action, console, fail, get_context
from wellness.core.exceptions import ValidationError
from wellness.models.enums import MoodEmoji
from wellness.schemas.mood import MoodEntryResponse
from wellness.services.mood_service import SHARE_SUBJECT

app = typer.Typer(help="Log and review moods")


def _resolve_emoji(value: str) -> str:
    """Accept either the emoji itself or its name, e.g. 'very_happy'."""
    if MoodEmoji.from_value(value):
        return value
    key = value.strip().upper().replace("-", "_").replace(" ", "_")
    if key in MoodEmoji.__members__:
        return MoodEmoji[key].value
    return value


@app.command("log")
def log_mood(
    mood: Annotated[str, typer.Argument(help="Emoji or name: very_sad, sad, neutral, happy, very_happy")],
    note: Annotated[Optional[str], typer.Option("--note", "-n")] = "",
):
    """Log how you feel right now."""
    try:
        entry = get_context().mood_service.log_mood(_resolve_emoji(mood), note)
    except ValidationError as exc:
        fail(str(exc))
        return
    console.print(f"[green]Mood logged![/green] {entry.emoji} ({entry.id})")


@app.command("list")
def list_moods(
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table")] = False,
):
    """Show the mood history, newest first."""
    entries = get_context().mood_service.list_entries()
    if as_json:
        payload = [MoodEntryResponse.model_validate(entry).model_dump() for entry in entries]
        typer.echo(json.dumps(payload, ensure_ascii=False))
        return
    if not entries:
        console.print("[yellow]No mood entries yet.[/yellow]")
        return
    table = Table(title="Mood Journal")
    table.add_column("ID", style="dim")
    table.add_column("Mood", justify="center")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Note")
    for entry in entries:
        table.add_row(entry.id, entry.emoji, entry.date_string, entry.time_string, entry.note)
    console.print(table)


@app.command("show")
def show_mood(entry_id: Annotated[str, typer.Argument(help="Mood entry id")]):
    """Show one mood entry."""
    service = get_context().mood_service
    entry = service.get_entry(entry_id)
    if entry is None:
        fail("Mood entry not found")
        return
    console.print(service.describe_entry(entry))


@app.command("delete")
def delete_mood(
    entry_id: Annotated[str, typer.Argument(help="Mood entry id")],
    assume_yes: Annotated[bool, typer.Option("--yes", "-y")] = False,
):
    """Delete a mood entry."""
    service = get_context().mood_service
    if service.get_entry(entry_id) is None:
        fail("Mood entry not found")
        return
    if not assume_yes and not confirm_action("Delete this mood entry?", default=False):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(code=0)
    service.delete_entry(entry_id)
    console.print("Mood entry deleted")


@app.command("summary")
def share_summary():
    """Print a shareable mood summary."""
    try:
        summary = get_context().mood_service.build_summary()
    except ValidationError as exc:
        fail(str(exc))
        return
    console.print(f"[bold]{SHARE_SUBJECT}[/bold]")
    typer.echo(summary)


@app.command("trend")
def mood_trend():
    """Show mood values for the last seven days."""
    points = get_context().mood_service.weekly_trend()
    if not points:
        console.print("[yellow]No mood entries in the last 7 days.[/yellow]")
        return
    table = Table(title="Mood Trend (Last 7 Days)")
    table.add_column("Day")
    table.add_column("Mood", justify="right")
    table.add_column("")
    for point in points:
        table.add_row(point.label, str(point.value), "█" * point.value)
    console.print(table)
