"""Tests for engine construction."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import text

from config import DatabaseConfig, Environment
from db import create_db_engine, create_session_factory


def test_development_engine_creates_sqlite_file(tmp_path: Path) -> None:
    sqlite_path = tmp_path / "nested" / "db.sqlite"
    engine = create_db_engine(
        DatabaseConfig(environment=Environment.DEVELOPMENT, sqlite_path=sqlite_path)
    )
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        assert engine.dialect.name == "sqlite"
        assert sqlite_path.exists()
    finally:
        engine.dispose()


def test_development_engine_enforces_foreign_keys(tmp_path: Path) -> None:
    engine = create_db_engine(
        DatabaseConfig(environment=Environment.DEVELOPMENT, sqlite_path=tmp_path / "db.sqlite")
    )
    try:
        with engine.connect() as connection:
            assert connection.execute(text("PRAGMA foreign_keys")).scalar_one() == 1
    finally:
        engine.dispose()


def test_session_factory_is_bound_to_engine(tmp_path: Path) -> None:
    engine = create_db_engine(
        DatabaseConfig(environment=Environment.DEVELOPMENT, sqlite_path=tmp_path / "db.sqlite")
    )
    try:
        session_factory = create_session_factory(engine)
        with session_factory() as session:
            assert session.get_bind() is engine
            assert session.execute(text("SELECT 2")).scalar_one() == 2
    finally:
        engine.dispose()


def test_production_engine_targets_postgres_without_connecting() -> None:
    engine = create_db_engine(DatabaseConfig(environment=Environment.PRODUCTION))
    try:
        assert engine.dialect.name == "postgresql"
        assert engine.url.host == "localhost"
        assert engine.url.port == 5432
        assert engine.url.database == "postgres"
    finally:
        engine.dispose()


def test_engines_ping_connections_before_use(tmp_path: Path) -> None:
    for config in (
        DatabaseConfig(environment=Environment.DEVELOPMENT, sqlite_path=tmp_path / "db.sqlite"),
        DatabaseConfig(environment=Environment.PRODUCTION),
    ):
        engine = create_db_engine(config)
        try:
            assert engine.pool._pre_ping is True
        finally:
            engine.dispose()


def test_development_ddl_rolls_back_with_transaction(tmp_path: Path) -> None:
    engine = create_db_engine(
        DatabaseConfig(environment=Environment.DEVELOPMENT, sqlite_path=tmp_path / "db.sqlite")
    )
    try:
        with engine.connect() as connection:
            connection.execute(text("CREATE TABLE scratch (id INTEGER)"))
            connection.rollback()
            tables = connection.execute(
                text("SELECT name FROM sqlite_master WHERE type = 'table'")
            ).scalars().all()
        assert "scratch" not in tables
    finally:
        engine.dispose()
