"""Destructive drop-and-recreate of the tournament schema."""

from __future__ import annotations

from sqlalchemy import Table, inspect
from sqlalchemy.engine import Dialect, Engine
from sqlalchemy.schema import CreateTable

from config import DatabaseConfig
from logger import get_logger
from models import Base, Game, GameSubmission, Submission, Team

logger = get_logger(__name__)

# Creation order: every table follows the tables it references.
SCHEMA_TABLES: tuple[Table, ...] = (
    Team.__table__,
    Submission.__table__,
    Game.__table__,
    GameSubmission.__table__,
)


class InitializationBlockedError(RuntimeError):
    """Raised when a schema reset is attempted on production without force."""


def render_create_statements(dialect: Dialect) -> list[str]:
    """Compile CREATE TABLE statements for the schema without executing them."""
    return [str(CreateTable(table).compile(dialect=dialect)).strip() for table in SCHEMA_TABLES]


def existing_schema_tables(engine: Engine) -> list[str]:
    """Names of schema tables currently present, in creation order."""
    present = set(inspect(engine).get_table_names())
    return [table.name for table in SCHEMA_TABLES if table.name in present]


def initialize_database(engine: Engine, config: DatabaseConfig, *, force: bool = False) -> str:
    """Drop and recreate teams, submissions, games and games_submissions.

    Production databases are refused unless ``force`` is set. Returns the
    executed CREATE TABLE statements joined with ``";"`` for inspection.
    """
    if config.is_production and not force:
        raise InitializationBlockedError(
            "Cannot initialize database on production unless force=True."
        )

    logger.info(
        "Resetting schema environment=%s force=%s", config.environment.value, force
    )

    statements: list[str] = []
    with engine.begin() as connection:
        Base.metadata.drop_all(bind=connection, tables=list(SCHEMA_TABLES), checkfirst=True)
        logger.info("Dropped tables: %s", ", ".join(table.name for table in SCHEMA_TABLES))

        for table in SCHEMA_TABLES:
            create = CreateTable(table)
            connection.execute(create)
            statements.append(str(create.compile(dialect=connection.dialect)).strip())
            logger.info("Created table %s", table.name)

    return ";".join(statements)


__all__ = [
    "InitializationBlockedError",
    "SCHEMA_TABLES",
    "existing_schema_tables",
    "initialize_database",
    "render_create_statements",
]
