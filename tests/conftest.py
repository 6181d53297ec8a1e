from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy.engine import Engine

from taskbook.infra.db import create_db_engine, init_db, make_session_factory
from taskbook.infra.store import TaskStore


def sqlite_url(path: Path) -> str:
    return f"sqlite:///{path.as_posix()}"


@pytest.fixture()
def engine(tmp_path: Path):
    engine = create_db_engine(sqlite_url(tmp_path / "Tasks.db"))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def store(engine: Engine) -> TaskStore:
    return TaskStore(make_session_factory(engine))
