"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.orm import sessionmaker

from stockguard.infrastructure.config import Settings
from stockguard.infrastructure.database import create_db_engine, create_session_factory
from stockguard.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@lru_cache(maxsize=None)
def session_factory(settings: Settings) -> sessionmaker:
    return create_session_factory(create_db_engine(settings))


def unit_of_work(settings: Settings) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory(settings))
