from __future__ import annotations

from dataclasses import dataclass

UNSAVED_ID = 0


@dataclass(frozen=True)
class TaskEntity:
    """A single task as rendered and persisted.

    ``due_date`` is a zero-padded ``YYYY-MM-DD`` string. It is never parsed:
    ordering relies on plain string comparison, which matches calendar order
    only while that format holds.
    """

    title: str
    description: str
    due_date: str
    id: int = UNSAVED_ID

    @property
    def is_persisted(self) -> bool:
        return self.id != UNSAVED_ID
