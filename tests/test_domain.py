from __future__ import annotations

import pytest

from taskbook.domain.entities import UNSAVED_ID, TaskEntity
from taskbook.domain.validation import (
    DESCRIPTION_REQUIRED,
    DUE_DATE_REQUIRED,
    TITLE_REQUIRED,
    validate_task_fields,
)


def test_new_task_is_unpersisted() -> None:
    task = TaskEntity(title="Buy milk", description="2%", due_date="2024-05-01")

    assert task.id == UNSAVED_ID
    assert not task.is_persisted
    assert TaskEntity("a", "b", "2024-01-01", id=7).is_persisted


@pytest.mark.parametrize(
    ("fields", "expected"),
    [
        (("", "desc", "2024-01-01"), TITLE_REQUIRED),
        (("   ", "desc", "2024-01-01"), TITLE_REQUIRED),
        (("title", " \n", "2024-01-01"), DESCRIPTION_REQUIRED),
        (("title", "desc", ""), DUE_DATE_REQUIRED),
        (("", "", ""), TITLE_REQUIRED),
        (("title", "desc", "2024-01-01"), None),
    ],
)
def test_validate_task_fields(fields: tuple[str, str, str], expected: str | None) -> None:
    assert validate_task_fields(*fields) == expected
