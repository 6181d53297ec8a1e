from __future__ import annotations

import logging
from typing import Protocol

from taskbook.domain.entities import TaskEntity
from taskbook.domain.errors import StalePositionError

logger = logging.getLogger(__name__)


class TaskStorage(Protocol):
    def create_task(self, title: str, description: str, due_date: str) -> int: ...

    def get_all_tasks(self) -> list[TaskEntity]: ...

    def update_task(self, task_id: int, title: str, description: str, due_date: str) -> int: ...

    def delete_task(self, task_id: int) -> None: ...


def _due_date_key(task: TaskEntity) -> str:
    return task.due_date


class TaskListController:
    """Due-date ordered working list kept in step with a task store.

    Every mutation goes to the store first; the in-memory list is only
    patched once the store call has returned. Positions passed to ``edit``
    and ``remove_at`` refer to the ordering last published through
    ``tasks``, and callers must re-read ``tasks`` after each mutation.
    """

    def __init__(self, store: TaskStorage) -> None:
        self._store = store
        self._tasks: list[TaskEntity] = []

    @property
    def tasks(self) -> tuple[TaskEntity, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def task_at(self, position: int) -> TaskEntity:
        if not 0 <= position < len(self._tasks):
            raise IndexError(f"task position {position} out of range")
        return self._tasks[position]

    def load(self) -> list[TaskEntity]:
        tasks = list(self._store.get_all_tasks())
        self._sort(tasks)
        self._tasks = tasks
        return list(tasks)

    def add(self, title: str, description: str, due_date: str) -> int:
        task_id = self._store.create_task(title, description, due_date)
        self._tasks.append(
            TaskEntity(id=task_id, title=title, description=description, due_date=due_date)
        )
        self._sort(self._tasks)
        return task_id

    def edit(
        self,
        task_id: int,
        position: int,
        title: str,
        description: str,
        due_date: str,
    ) -> bool:
        current = self.task_at(position)
        if current.id != task_id:
            raise StalePositionError(position, task_id, current.id)

        affected = self._store.update_task(task_id, title, description, due_date)
        if affected < 1:
            logger.warning("Task %s not found, nothing updated", task_id)
            return False

        self._tasks[position] = TaskEntity(
            id=task_id, title=title, description=description, due_date=due_date
        )
        self._sort(self._tasks)
        return True

    def remove_at(self, position: int) -> TaskEntity:
        task = self.task_at(position)
        self._store.delete_task(task.id)
        del self._tasks[position]
        return task

    @staticmethod
    def _sort(tasks: list[TaskEntity]) -> None:
        # Plain string order on YYYY-MM-DD; list.sort is stable so ties keep their order.
        tasks.sort(key=_due_date_key)
