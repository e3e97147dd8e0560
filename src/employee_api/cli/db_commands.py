"""Database schema management commands."""

import typer
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from src.employee_api.core.services import DbManageService, DbSessionService
from src.employee_api.runtime.context import get_config
from src.employee_api.runtime.init_db import init_db

console = Console()

db_app = typer.Typer(help="Manage the employee database schema")


@db_app.command("init")
def init() -> None:
    """Create the employees table if it does not exist."""
    init_db()
    console.print(
        f"[green]✅ Schema ready at {get_config().database.url}[/green]"
    )


@db_app.command("drop")
def drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Drop the employees table and every row in it."""
    config = get_config()
    if config.app.environment == "production" and not force:
        console.print("[red]❌ Refusing to drop tables in production without --force[/red]")
        raise typer.Exit(code=1)

    if not force and not Confirm.ask(
        f"Drop all tables in [bold]{config.database.url}[/bold]?"
    ):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=0)

    database_service = DbSessionService(config)
    try:
        DbManageService(database_service.engine).drop_all()
    finally:
        database_service.dispose()
    console.print("[green]✅ Tables dropped[/green]")


@db_app.command("status")
def status() -> None:
    """Show database connectivity and pool state."""
    config = get_config()
    database_service = DbSessionService(config)
    try:
        healthy = database_service.health_check()
        pool_status = database_service.get_pool_status()
    finally:
        database_service.dispose()

    table = Table(title="Database status")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Backend", "sqlite" if config.database.is_sqlite else "server")
    table.add_row("Environment", config.app.environment)
    table.add_row("Reachable", "✅" if healthy else "❌")
    for key, value in pool_status.items():
        table.add_row(f"Pool {key}", str(value))
    console.print(table)

    if not healthy:
        raise typer.Exit(code=1)
