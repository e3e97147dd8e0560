"""Main CLI application module."""

import typer

from .db_commands import db_app
from .employee_commands import employee_app

# Create the main CLI application
app = typer.Typer(
    help="Employee API - service and database management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(db_app, name="db")
app.add_typer(employee_app, name="employees")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (defaults to config)"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from src.employee_api.api.http.app import app as http_app
    from src.employee_api.runtime.context import get_config

    config = get_config()
    uvicorn.run(
        http_app,
        host=host or config.app.host,
        port=port or config.app.port,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
