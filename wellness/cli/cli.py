"""
Main CLI application using Typer.

Entry point: python -m wellness.cli
CLI Name: wellness-admin
"""
import typer

from wellness import __version__ as app_version
from wellness.cli.commands import db, habit, mood, reminder

app = typer.Typer(
    name="wellness-admin",
    help="Wellness tracker - daily habits, mood journal and hydration reminders",
)


@app.command()
def version():
    """Show CLI version information."""
    typer.echo(f"Wellness CLI version {app_version}")


# Register command groups
app.add_typer(habit.app, name="habit")
app.add_typer(mood.app, name="mood")
app.add_typer(reminder.app, name="reminder")
app.add_typer(db.app, name="db")
