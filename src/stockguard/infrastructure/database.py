"""Engine and session factory construction."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker

from stockguard.infrastructure.config import Settings
from stockguard.infrastructure.persistence.orm import Base

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine and make sure the schema exists."""
    if settings.is_sqlite:
        engine = _create_sqlite_engine(settings)
    else:
        engine = create_engine(settings.database_url, pool_pre_ping=True)
    Base.metadata.create_all(engine)
    logger.debug("Database ready at %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def _create_sqlite_engine(settings: Settings) -> Engine:
    url = make_url(settings.database_url)
    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        url,
        connect_args={"timeout": settings.sqlite_timeout, "check_same_thread": False},
    )

    # pysqlite starts transactions lazily and in DEFERRED mode, which lets two
    # writers read the same stock and deadlock on upgrade.  Take the write
    # lock up front instead; concurrent writers then queue on the timeout.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        dbapi_connection.execute("PRAGMA foreign_keys = ON")

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine
