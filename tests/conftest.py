# tests/conftest.py

from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from taskman.db.session import init_db


@pytest.fixture()
def engine() -> Engine:
    """
    In-memory SQLite shared across sessions of one test.

    StaticPool keeps a single connection, otherwise every new
    connection would see an empty database.
    """
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    return eng


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as s:
        yield s
