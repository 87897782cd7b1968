"""Database engine/session helpers."""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import Session, sessionmaker

from config import DatabaseConfig


def _configure_sqlite_connection(dbapi_connection: Any, connection_record: Any) -> None:
    # pysqlite autocommit mode; transactions are started by _begin_sqlite_transaction
    # so DDL is covered by them too.
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_sqlite_transaction(connection: Connection) -> None:
    connection.exec_driver_sql("BEGIN")


def create_db_engine(config: DatabaseConfig) -> Engine:
    """Create a SQLAlchemy engine for the configured environment.

    Development uses a local SQLite file with foreign keys enforced and
    transactional DDL; production connects to PostgreSQL. Driver errors are
    not caught.
    """
    if config.is_development:
        config.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(config.url(), pool_pre_ping=True, future=True)
        event.listen(engine, "connect", _configure_sqlite_connection)
        event.listen(engine, "begin", _begin_sqlite_transaction)
        return engine
    return create_engine(config.url(), pool_pre_ping=True, future=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the provided engine."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)
