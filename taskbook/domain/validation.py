from __future__ import annotations

TITLE_REQUIRED = "Title is required"
DESCRIPTION_REQUIRED = "Description is required"
DUE_DATE_REQUIRED = "Due Date is required"


def validate_task_fields(title: str, description: str, due_date: str) -> str | None:
    """Return the message for the first missing field, or ``None``."""
    if not title.strip():
        return TITLE_REQUIRED
    if not description.strip():
        return DESCRIPTION_REQUIRED
    if not due_date.strip():
        return DUE_DATE_REQUIRED
    return None
