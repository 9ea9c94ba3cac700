"""Tollgate CLI application using Typer.

Commands for running the service and preparing its environment.
"""

import asyncio
import secrets

import typer
from rich.console import Console

from tollgate.bootstrap import configure_logging, run
from tollgate.infrastructure.persistence import create_engine, create_tables
from tollgate_config import ConfigError, Settings, load_settings

app = typer.Typer(
    name="tollgate",
    help="Tollgate - credential-issuance microservice",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


def _load_settings_or_exit() -> Settings:
    try:
        return load_settings()
    except ConfigError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e


@app.command("serve")
def serve() -> None:
    """Connect to the message bus and serve auth requests."""
    settings = _load_settings_or_exit()
    configure_logging(settings.log_level)
    asyncio.run(run(settings))


@app.command("init-db")
def init_db() -> None:
    """Create the database tables (idempotent)."""
    settings = _load_settings_or_exit()
    configure_logging(settings.log_level)

    async def _init() -> None:
        engine = create_engine(settings.database_url)
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_init())
    console.print("[green]Database tables are ready.[/green]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate a signing secret for JWT_SECRET."""
    # 64 bytes gives a strong HS256 key
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET[/cyan]={jwt_secret}")
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
