from __future__ import annotations


class StorageError(Exception):
    """The task database could not be opened, read or written."""


class StalePositionError(LookupError):
    """A list position no longer points at the task the caller expects."""

    def __init__(self, position: int, expected_id: int, actual_id: int) -> None:
        super().__init__(
            f"position {position} holds task {actual_id}, expected task {expected_id}"
        )
        self.position = position
        self.expected_id = expected_id
        self.actual_id = actual_id
