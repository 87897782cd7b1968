#!/usr/bin/env python3
"""Drop and recreate the Colisee tournament tables."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import dotenv_values, find_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from config import DatabaseConfig, load_database_config
from db import create_db_engine
from logger import configure_logging
from schema import (
    SCHEMA_TABLES,
    InitializationBlockedError,
    existing_schema_tables,
    initialize_database,
)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Colisee database schema jobs.",
)


def _resolve_config(env_file: Path | None) -> DatabaseConfig:
    # Real environment variables win over values from the file.
    if env_file is not None:
        if not env_file.is_file():
            raise typer.BadParameter(f"env file not found: {env_file}")
        dotenv_path = str(env_file)
    else:
        dotenv_path = find_dotenv(usecwd=True)

    file_values = dotenv_values(dotenv_path) if dotenv_path else {}
    environ = {key: value for key, value in file_values.items() if value is not None}
    environ.update(os.environ)
    return load_database_config(environ)


@app.command("init")
def init_database(
    force: Annotated[
        bool,
        typer.Option("--force", help="Allow resetting a production database."),
    ] = False,
    show_ddl: Annotated[
        bool,
        typer.Option("--show-ddl", help="Print the CREATE TABLE statements that were run."),
    ] = False,
    env_file: Annotated[
        Optional[Path],
        typer.Option("--env-file", help="Read settings from this dotenv file."),
    ] = None,
) -> None:
    """Drop all schema tables and create them again."""
    config = _resolve_config(env_file)

    engine = create_db_engine(config)
    try:
        ddl = initialize_database(engine, config, force=force)
    except InitializationBlockedError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        engine.dispose()

    if show_ddl:
        for statement in ddl.split(";"):
            typer.echo(f"{statement};")
    typer.echo(
        f"completed environment={config.environment.value} tables={len(SCHEMA_TABLES)}"
    )


@app.command("status")
def show_status(
    env_file: Annotated[
        Optional[Path],
        typer.Option("--env-file", help="Read settings from this dotenv file."),
    ] = None,
) -> None:
    """Show the resolved connection and which schema tables exist."""
    config = _resolve_config(env_file)
    typer.echo(f"environment={config.environment.value}")
    typer.echo(f"url={config.url().render_as_string(hide_password=True)}")

    engine = create_db_engine(config)
    try:
        present = set(existing_schema_tables(engine))
    finally:
        engine.dispose()

    for table in SCHEMA_TABLES:
        marker = "present" if table.name in present else "missing"
        typer.echo(f"{table.name}: {marker}")


if __name__ == "__main__":
    configure_logging()
    app()
