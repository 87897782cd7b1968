"""Database connection configuration resolved from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from sqlalchemy.engine import URL

ENVIRONMENT_VARIABLE = "COLISEE_ENV"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 5432
DEFAULT_USER = "postgres"
DEFAULT_PASSWORD = "postgres"
DEFAULT_NAME = "postgres"
DEFAULT_SQLITE_PATH = Path("./db.sqlite")


class Environment(str, Enum):
    """Runtime mode selecting which database engine backs the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


_DEVELOPMENT_NAMES = frozenset({"development", "dev"})


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection parameters for one process, resolved once at startup."""

    environment: Environment = Environment.PRODUCTION
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user: str = DEFAULT_USER
    password: str = field(default=DEFAULT_PASSWORD, repr=False)
    name: str = DEFAULT_NAME
    sqlite_path: Path = DEFAULT_SQLITE_PATH

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    def url(self) -> URL:
        """SQLAlchemy URL for the engine matching this environment."""
        if self.is_development:
            return URL.create("sqlite", database=str(self.sqlite_path))
        return URL.create(
            "postgresql+psycopg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
        )


def parse_environment(value: str | None) -> Environment:
    """Map the mode flag to an Environment; anything but development is production."""
    if value is not None and value.strip().lower() in _DEVELOPMENT_NAMES:
        return Environment.DEVELOPMENT
    return Environment.PRODUCTION


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"DB_PORT must be an integer, got {value!r}") from None
    if not 1 <= port <= 65535:
        raise ValueError(f"DB_PORT must be between 1 and 65535, got {port}")
    return port


def _get(environ: Mapping[str, str], key: str, default: str) -> str:
    # Empty strings count as unset.
    value = environ.get(key)
    return value if value else default


def load_database_config(environ: Mapping[str, str] | None = None) -> DatabaseConfig:
    """Build a DatabaseConfig from environment variables with fixed defaults."""
    if environ is None:
        environ = os.environ

    return DatabaseConfig(
        environment=parse_environment(environ.get(ENVIRONMENT_VARIABLE)),
        host=_get(environ, "DB_HOST", DEFAULT_HOST),
        port=_parse_port(_get(environ, "DB_PORT", str(DEFAULT_PORT))),
        user=_get(environ, "DB_USER", DEFAULT_USER),
        password=_get(environ, "DB_PASS", DEFAULT_PASSWORD),
        name=_get(environ, "DB_NAME", DEFAULT_NAME),
        sqlite_path=Path(_get(environ, "DB_SQLITE_PATH", str(DEFAULT_SQLITE_PATH))),
    )


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_NAME",
    "DEFAULT_PASSWORD",
    "DEFAULT_PORT",
    "DEFAULT_SQLITE_PATH",
    "DEFAULT_USER",
    "ENVIRONMENT_VARIABLE",
    "DatabaseConfig",
    "Environment",
    "load_database_config",
    "parse_environment",
]
