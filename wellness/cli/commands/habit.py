"""
Habit tracker commands.
"""
import json
from typing import Annotated, Optional

import typer
from rich.table import Table

from wellness.cli.commands.utils import confirm_action, console, fail, get_context
from wellness.core.exceptions import ValidationError
from wellness.schemas.habit import HabitResponse

app = typer.Typer(help="Track daily habits")


@app.command("add")
def add_habit(
    name: Annotated[str, typer.Argument(help="Habit name, e.g. 'Drink Water'")],
    target: Annotated[str, typer.Argument(help="Daily target count")],
):
    """Add a new habit."""
    try:
        habit = get_context().habit_service.add_habit(name, target)
    except ValidationError as exc:
        fail(str(exc))
        return
    console.print(f"[green]Habit added![/green] {habit.name} ({habit.id})")


@app.command("list")
def list_habits(
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table")] = False,
):
    """List habits with today's progress."""
    habits = get_context().habit_service.list_habits()
    if as_json:
        payload = [HabitResponse.model_validate(habit).model_dump() for habit in habits]
        typer.echo(json.dumps(payload, ensure_ascii=False))
        return
    if not habits:
        console.print("[yellow]No habits yet. Add one with 'habit add'.[/yellow]")
        return

    table = Table(title="Today's Habits")
    table.add_column("ID", style="dim")
    table.add_column("Habit", style="cyan")
    table.add_column("Progress", justify="right")
    table.add_column("%", justify="right")
    table.add_column("Done", justify="center")
    for habit in habits:
        table.add_row(
            habit.id,
            habit.name,
            f"{habit.current_count}/{habit.target_count}",
            str(habit.completion_percentage),
            "✓" if habit.is_completed else "",
        )
    console.print(table)


@app.command("increment")
def increment_habit(habit_id: Annotated[str, typer.Argument(help="Habit id")]):
    """Record one more repetition for today."""
    result = get_context().habit_service.increment(habit_id)
    if result is None:
        fail("Habit not found")
        return
    habit = result.habit
    console.print(f"{habit.name}: {habit.current_count}/{habit.target_count}")
    if result.completed_now:
        console.print("[bold green]Habit completed! 🎉[/bold green]")


@app.command("edit")
def edit_habit(
    habit_id: Annotated[str, typer.Argument(help="Habit id")],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    target: Annotated[Optional[str], typer.Option("--target", "-t")] = None,
):
    """Rename a habit or change its daily target."""
    service = get_context().habit_service
    habit = service.get_habit(habit_id)
    if habit is None:
        fail("Habit not found")
        return
    try:
        updated = service.edit_habit(
            habit_id,
            name if name is not None else habit.name,
            target if target is not None else habit.target_count,
        )
    except ValidationError as exc:
        fail(str(exc))
        return
    if updated is None:
        fail("Habit not found")
        return
    console.print("[green]Habit updated![/green]")


@app.command("delete")
def delete_habit(
    habit_id: Annotated[str, typer.Argument(help="Habit id")],
    assume_yes: Annotated[bool, typer.Option("--yes", "-y")] = False,
):
    """Delete a habit."""
    service = get_context().habit_service
    habit = service.get_habit(habit_id)
    if habit is None:
        fail("Habit not found")
        return
    if not assume_yes and not confirm_action(
        f'Are you sure you want to delete "{habit.name}"?', default=False
    ):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(code=0)
    service.delete_habit(habit_id)
    console.print("Habit deleted")
