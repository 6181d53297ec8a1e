from __future__ import annotations

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QDateEdit,
    QDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
)

from taskbook.config import SETTINGS
from taskbook.domain.entities import TaskEntity
from taskbook.domain.validation import (
    DESCRIPTION_REQUIRED,
    TITLE_REQUIRED,
    validate_task_fields,
)


class TaskFormDialog(QDialog):
    """Add/edit form. In edit mode the fields start from ``task``."""

    def __init__(self, task: TaskEntity | None = None, parent=None):
        super().__init__(parent)
        self.task = task
        self.setWindowTitle("Edit task" if task else "New task")
        self.setObjectName("TaskFormDialog")
        self.resize(420, 360)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Title")

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Description")
        self.description_input.setMinimumHeight(120)

        self.due_input = QDateEdit()
        self.due_input.setCalendarPopup(True)
        self.due_input.setDisplayFormat(SETTINGS.date_format)
        self.due_input.setMinimumDate(QDate.currentDate())
        self.due_input.setDate(QDate.currentDate())

        if task:
            self.title_input.setText(task.title)
            self.description_input.setPlainText(task.description)
            saved = QDate.fromString(task.due_date, "yyyy-MM-dd")
            if saved.isValid():
                # Keep past due dates selectable when editing an existing task.
                self.due_input.setMinimumDate(min(saved, QDate.currentDate()))
                self.due_input.setDate(saved)

        self.save_button = QPushButton("Edit" if task else "Save")
        self.save_button.clicked.connect(self._submit)

        cancel_button = QPushButton("Cancel")
        cancel_button.setProperty("variant", "ghost")
        cancel_button.clicked.connect(self.reject)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(cancel_button)
        buttons.addWidget(self.save_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)
        layout.addWidget(QLabel("Title"))
        layout.addWidget(self.title_input)
        layout.addWidget(QLabel("Description"))
        layout.addWidget(self.description_input)
        layout.addWidget(QLabel("Due date"))
        layout.addWidget(self.due_input)
        layout.addLayout(buttons)

    def values(self) -> tuple[str, str, str]:
        return (
            self.title_input.text().strip(),
            self.description_input.toPlainText().strip(),
            self.due_input.date().toString("yyyy-MM-dd").strip(),
        )

    def _submit(self) -> None:
        error = validate_task_fields(*self.values())
        if error:
            QMessageBox.warning(self, "Missing field", error)
            if error == TITLE_REQUIRED:
                self.title_input.setFocus()
            elif error == DESCRIPTION_REQUIRED:
                self.description_input.setFocus()
            else:
                self.due_input.setFocus()
            return
        self.accept()


class TaskDetailDialog(QDialog):
    def __init__(self, task: TaskEntity, parent=None):
        super().__init__(parent)
        self.setWindowTitle(task.title)
        self.resize(420, 280)

        title = QLabel(task.title)
        title.setStyleSheet("font-size: 16px; font-weight: 600;")
        title.setWordWrap(True)

        description = QLabel(task.description)
        description.setWordWrap(True)

        due_date = QLabel(task.due_date)

        card = QFrame()
        card.setObjectName("TaskDetailCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)
        card_layout.setSpacing(12)
        card_layout.addWidget(title)
        card_layout.addWidget(description)
        card_layout.addWidget(due_date)
        card_layout.addStretch()

        close_button = QPushButton("Close")
        close_button.clicked.connect(self.accept)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(close_button)

        layout = QVBoxLayout(self)
        layout.addWidget(card)
        layout.addLayout(buttons)
