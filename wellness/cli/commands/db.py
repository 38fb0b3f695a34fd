"""
Database maintenance commands.
"""
from pathlib import Path
from typing import Annotated

import typer
from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine

from wellness.cli.commands.utils import confirm_action, console, get_context
from wellness.cli.logging import setup_cli_logging
from wellness.core.config import settings

app = typer.Typer(help="Database maintenance")


def _resolve_alembic_ini() -> Path:
    alembic_ini = Path("alembic.ini")
    if alembic_ini.exists():
        return alembic_ini
    project_dir = Path(__file__).parent.parent.parent.parent
    return project_dir / "alembic.ini"


def _alembic_config() -> Config:
    alembic_ini = _resolve_alembic_ini()
    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(alembic_ini.parent / "alembic"))
    config.set_main_option("sqlalchemy.url", settings.database_url)
    return config


@app.command("upgrade")
def upgrade(revision: Annotated[str, typer.Argument()] = "head"):
    """Apply schema revisions."""
    logger = setup_cli_logging("db")
    logger.info(f"Upgrading database to {revision}")
    command.upgrade(_alembic_config(), revision)
    console.print(f"[green]Database upgraded to {revision}[/green]")


@app.command("current")
def current():
    """Show the applied and latest schema revisions."""
    config = _alembic_config()
    script = ScriptDirectory.from_config(config)
    engine = create_engine(settings.database_url)
    try:
        with engine.connect() as connection:
            current_rev = MigrationContext.configure(connection).get_current_revision()
    finally:
        engine.dispose()
    console.print(f"Current revision: {current_rev or 'none'}")
    console.print(f"Head revision: {script.get_current_head()}")


@app.command("migrate-legacy")
def migrate_legacy():
    """Move habits and moods left in the preferences file into the database."""
    context = get_context()
    if context.reminder_settings.is_migration_completed():
        console.print("Legacy data already migrated")
        return
    if context.migration.run():
        console.print("[green]Legacy data migrated[/green]")
    else:
        console.print("[red]Legacy migration failed; it will be retried on next start[/red]")
        raise typer.Exit(code=1)


@app.command("reset")
def reset(assume_yes: Annotated[bool, typer.Option("--yes", "-y")] = False):
    """Delete all habits, mood entries and settings."""
    if not assume_yes and not confirm_action(
        "This will erase all wellness data. Continue?", default=False
    ):
        console.print("[yellow]Reset cancelled[/yellow]")
        raise typer.Exit(code=0)
    get_context().clear_all()
    console.print("All data cleared")
