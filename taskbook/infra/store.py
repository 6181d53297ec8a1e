from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from taskbook.domain.entities import TaskEntity
from taskbook.domain.errors import StorageError

from .db import SessionLocal
from .models import TaskModel

logger = logging.getLogger(__name__)


def _to_entity(model: TaskModel) -> TaskEntity:
    return TaskEntity(
        id=model.id,
        title=model.title,
        description=model.description,
        due_date=model.due_date,
    )


class TaskStore:
    """CRUD over the ``tasks`` table.

    Each method opens its own session and closes it before returning, so no
    connection is held between calls. There is no locking: the store assumes
    a single writer.
    """

    def __init__(self, session_factory: sessionmaker | Callable[[], Session] | None = None) -> None:
        self._session_factory = session_factory or SessionLocal

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            logger.exception("Task store failed to %s", action)
            raise StorageError(f"Failed to {action}: {exc}") from exc

    def create_task(self, title: str, description: str, due_date: str) -> int:
        with self._session("create task") as session:
            task = TaskModel(title=title, description=description, due_date=due_date)
            session.add(task)
            session.commit()
            session.refresh(task)
            logger.debug("Created task %s due %s", task.id, due_date)
            return task.id

    def get_all_tasks(self) -> list[TaskEntity]:
        with self._session("read tasks") as session:
            stmt = select(TaskModel).order_by(TaskModel.id.asc())
            return [_to_entity(task) for task in session.scalars(stmt)]

    def update_task(self, task_id: int, title: str, description: str, due_date: str) -> int:
        """Overwrite the task with ``task_id``; return the number of rows changed (0 or 1)."""
        with self._session("update task") as session:
            result = session.execute(
                update(TaskModel)
                .where(TaskModel.id == task_id)
                .values(title=title, description=description, due_date=due_date)
            )
            session.commit()
            logger.debug("Updated task %s (%s row(s))", task_id, result.rowcount)
            return result.rowcount

    def delete_task(self, task_id: int) -> None:
        with self._session("delete task") as session:
            result = session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            session.commit()
            logger.debug("Deleted task %s (%s row(s))", task_id, result.rowcount)
