from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMenu,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from taskbook.domain.entities import TaskEntity


class TaskItemWidget(QWidget):
    def __init__(self, task: TaskEntity, position: int, on_edit, on_delete, parent=None):
        super().__init__(parent)
        self.task = task
        self.position = position
        self._on_edit = on_edit
        self._on_delete = on_delete

        self.setObjectName("TaskCard")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setMinimumHeight(64)

        title = QLabel(task.title)
        title.setProperty("class", "task-title")
        title.setWordWrap(True)
        title.setStyleSheet("font-weight: 600;")

        description = QLabel(task.description)
        description.setProperty("class", "task-meta")
        description.setWordWrap(True)

        due_date = QLabel(f"Due Date: {task.due_date}")
        due_date.setProperty("class", "task-meta")

        self.options_button = QToolButton()
        self.options_button.setText("⋮")
        self.options_button.setPopupMode(QToolButton.InstantPopup)
        self.options_button.setAutoRaise(True)
        self.options_button.setMenu(self._build_menu())

        text_column = QVBoxLayout()
        text_column.setSpacing(4)
        text_column.addWidget(title)
        text_column.addWidget(description)
        text_column.addWidget(due_date)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(8)
        layout.addLayout(text_column, 1)
        layout.addWidget(self.options_button, 0, Qt.AlignTop)

    def _build_menu(self) -> QMenu:
        menu = QMenu(self)
        edit_action = menu.addAction("Edit")
        edit_action.triggered.connect(lambda _checked=False: self._on_edit(self.position))
        delete_action = menu.addAction("Delete")
        delete_action.triggered.connect(lambda _checked=False: self._on_delete(self.position))
        return menu
