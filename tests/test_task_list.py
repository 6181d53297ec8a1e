from __future__ import annotations

from dataclasses import replace

import pytest

from taskbook.domain.entities import TaskEntity
from taskbook.domain.errors import StalePositionError, StorageError
from taskbook.infra.store import TaskStore
from taskbook.services.task_list import TaskListController


class FakeStore:
    def __init__(self) -> None:
        self.tasks: list[TaskEntity] = []
        self._id = 1
        self.fail = False
        self.calls: list[str] = []

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise StorageError(f"{name} failed")

    def create_task(self, title: str, description: str, due_date: str) -> int:
        self._check("create_task")
        task = TaskEntity(id=self._id, title=title, description=description, due_date=due_date)
        self.tasks.append(task)
        self._id += 1
        return task.id

    def get_all_tasks(self) -> list[TaskEntity]:
        self._check("get_all_tasks")
        return list(self.tasks)

    def update_task(self, task_id: int, title: str, description: str, due_date: str) -> int:
        self._check("update_task")
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                self.tasks[index] = replace(
                    task, title=title, description=description, due_date=due_date
                )
                return 1
        return 0

    def delete_task(self, task_id: int) -> None:
        self._check("delete_task")
        self.tasks = [t for t in self.tasks if t.id != task_id]


def _seeded(due_dates: list[str]) -> tuple[FakeStore, TaskListController]:
    store = FakeStore()
    for index, due in enumerate(due_dates):
        store.create_task(f"task {index}", "desc", due)
    controller = TaskListController(store)
    controller.load()
    return store, controller


def test_load_sorts_by_due_date_and_keeps_ties_in_order() -> None:
    _, controller = _seeded(["2024-03-01", "2024-01-15", "2024-01-15"])

    assert [task.title for task in controller.tasks] == ["task 1", "task 2", "task 0"]


def test_load_on_empty_store() -> None:
    controller = TaskListController(FakeStore())

    assert controller.load() == []
    assert len(controller) == 0


def test_malformed_due_dates_sort_by_raw_text() -> None:
    _, controller = _seeded(["2024-1-5", "2024-01-15", "2023-12-31"])

    assert [task.due_date for task in controller.tasks] == [
        "2023-12-31",
        "2024-01-15",
        "2024-1-5",
    ]


def test_load_failure_keeps_previous_list() -> None:
    store, controller = _seeded(["2024-01-01"])
    before = controller.tasks
    store.fail = True

    with pytest.raises(StorageError):
        controller.load()
    assert controller.tasks == before


def test_add_returns_id_and_inserts_in_order() -> None:
    _, controller = _seeded(["2024-01-01", "2024-03-01"])

    task_id = controller.add("middle", "desc", "2024-02-01")

    assert task_id == 3
    assert [task.due_date for task in controller.tasks] == [
        "2024-01-01",
        "2024-02-01",
        "2024-03-01",
    ]
    assert controller.task_at(1) == TaskEntity(
        id=3, title="middle", description="desc", due_date="2024-02-01"
    )


def test_add_after_equal_due_dates_goes_last() -> None:
    _, controller = _seeded(["2024-01-01"])

    controller.add("later", "desc", "2024-01-01")

    assert [task.title for task in controller.tasks] == ["task 0", "later"]


def test_add_failure_leaves_list_unchanged() -> None:
    store, controller = _seeded(["2024-01-01"])
    before = controller.tasks
    store.fail = True

    with pytest.raises(StorageError):
        controller.add("new", "desc", "2024-02-01")
    assert controller.tasks == before


def test_edit_updates_and_resorts() -> None:
    _, controller = _seeded(["2024-01-01", "2024-02-01"])
    first = controller.task_at(0)

    assert controller.edit(first.id, 0, "moved", "later", "2024-03-01") is True

    assert [task.id for task in controller.tasks] == [2, first.id]
    assert controller.task_at(1).title == "moved"


def test_edit_missing_row_returns_false_and_keeps_list() -> None:
    store, controller = _seeded(["2024-01-01", "2024-02-01"])
    before = controller.tasks
    store.tasks = [t for t in store.tasks if t.id != 1]

    assert controller.edit(1, 0, "x", "y", "2024-05-05") is False
    assert controller.tasks == before


def test_edit_with_stale_position_is_rejected() -> None:
    store, controller = _seeded(["2024-01-01", "2024-02-01"])
    store.calls.clear()

    with pytest.raises(StalePositionError):
        controller.edit(2, 0, "x", "y", "2024-05-05")
    assert store.calls == []


def test_edit_out_of_range_position() -> None:
    _, controller = _seeded(["2024-01-01"])

    with pytest.raises(IndexError):
        controller.edit(1, 5, "x", "y", "2024-05-05")


def test_remove_at_deletes_from_store_then_list() -> None:
    store, controller = _seeded(["2024-02-01", "2024-01-01"])

    removed = controller.remove_at(0)

    assert removed.due_date == "2024-01-01"
    assert [task.id for task in store.tasks] == [1]
    assert [task.id for task in controller.tasks] == [1]


def test_remove_at_failure_keeps_task_in_list() -> None:
    store, controller = _seeded(["2024-01-01"])
    before = controller.tasks
    store.fail = True

    with pytest.raises(StorageError):
        controller.remove_at(0)
    assert controller.tasks == before


def test_remove_at_out_of_range() -> None:
    store, controller = _seeded([])
    store.calls.clear()

    with pytest.raises(IndexError):
        controller.remove_at(0)
    assert store.calls == []


def test_working_list_matches_store_after_mutations(store: TaskStore) -> None:
    controller = TaskListController(store)
    controller.load()

    controller.add("b", "desc", "2024-02-01")
    controller.add("a", "desc", "2024-01-01")
    controller.add("c", "desc", "2024-03-01")
    controller.edit(controller.task_at(0).id, 0, "a", "moved", "2024-04-01")
    controller.remove_at(0)

    expected = sorted(store.get_all_tasks(), key=lambda task: task.due_date)
    assert list(controller.tasks) == expected
    assert [task.title for task in controller.tasks] == ["c", "a"]


def test_scenario_buy_milk(store: TaskStore) -> None:
    controller = TaskListController(store)
    controller.load()

    task_id = controller.add("Buy milk", "2%", "2024-05-01")
    assert task_id == 1
    assert controller.edit(task_id, 0, "Buy milk", "whole", "2024-05-02") is True

    reloaded = TaskListController(store)
    reloaded.load()
    assert reloaded.tasks == (
        TaskEntity(id=1, title="Buy milk", description="whole", due_date="2024-05-02"),
    )
