from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.migration import MigrationContext
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool

from taskbook.config import SETTINGS
from taskbook.domain.errors import StorageError

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"
SCHEMA_HEAD = "0001_create_tasks"

Base = declarative_base()


def create_db_engine(url: str) -> Engine:
    # NullPool: every session opens its own connection and closes it on exit.
    return create_engine(url, poolclass=NullPool)


engine = create_db_engine(SETTINGS.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False)


def alembic_config(connection: Connection) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.attributes["connection"] = connection
    return config


def current_revision(connection: Connection) -> str | None:
    return MigrationContext.configure(connection).get_current_revision()


def init_db(bind: Engine | None = None) -> None:
    """Bring the database schema to head.

    Schema upgrades are lossy: a tasks table without a version stamp is
    dropped and recreated rather than migrated.
    """
    bind = bind or engine
    try:
        with bind.begin() as connection:
            if inspect(connection).has_table("tasks") and current_revision(connection) is None:
                logger.warning("Dropping unversioned tasks table at %s", bind.url)
                connection.execute(text("DROP TABLE tasks"))
            command.upgrade(alembic_config(connection), "head")
    except SQLAlchemyError as exc:
        logger.exception("Failed to initialise database at %s", bind.url)
        raise StorageError(f"Cannot open task database: {exc}") from exc
