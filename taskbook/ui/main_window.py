from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from taskbook.domain.errors import StorageError
from taskbook.infra.store import TaskStore
from taskbook.services.task_list import TaskListController

from .dialogs import TaskDetailDialog, TaskFormDialog
from .widgets import TaskItemWidget

logger = logging.getLogger(__name__)


class MainWindow(QWidget):
    def __init__(self, controller: TaskListController | None = None):
        super().__init__()
        self.setWindowTitle("Task Manager")
        self.resize(560, 720)

        if controller is None:
            controller = TaskListController(TaskStore())
        self.controller = controller

        header = QHBoxLayout()
        header_title = QLabel("My tasks")
        header_title.setProperty("class", "panel-title")
        header_title.setStyleSheet("font-size: 16px; font-weight: 600;")
        self.count_label = QLabel("")
        self.count_label.setProperty("class", "stats-badge")

        add_button = QPushButton("New task")
        add_button.clicked.connect(self.new_task)

        header.addWidget(header_title)
        header.addStretch()
        header.addWidget(self.count_label)
        header.addWidget(add_button)

        self.task_list = QListWidget()
        self.task_list.setObjectName("TaskList")
        self.task_list.setSpacing(6)
        self.task_list.setFrameShape(QFrame.NoFrame)
        self.task_list.itemDoubleClicked.connect(self.on_item_double_clicked)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)
        layout.addLayout(header)
        layout.addWidget(self.task_list)

        QShortcut(QKeySequence("Ctrl+N"), self, self.new_task)

        try:
            self.controller.load()
        except StorageError as exc:
            QMessageBox.critical(self, "Storage error", f"Couldn't load tasks.\n{exc}")
        self.render_tasks()

    def render_tasks(self) -> None:
        self.task_list.clear()
        for position, task in enumerate(self.controller.tasks):
            item = QListWidgetItem()
            item.setData(Qt.UserRole, task.id)
            widget = TaskItemWidget(task, position, self.edit_task, self.delete_task)
            self.task_list.addItem(item)
            self.task_list.setItemWidget(item, widget)
            item.setSizeHint(widget.sizeHint())
        self.count_label.setText(f"Tasks: {len(self.controller)}")

    def on_item_double_clicked(self, item: QListWidgetItem) -> None:
        task = self.controller.task_at(self.task_list.row(item))
        TaskDetailDialog(task, self).exec()

    def new_task(self) -> None:
        dialog = TaskFormDialog(parent=self)
        if not dialog.exec():
            return
        try:
            self.controller.add(*dialog.values())
        except StorageError as exc:
            QMessageBox.warning(self, "Storage error", f"Couldn't save task.\n{exc}")
            return
        self.render_tasks()

    def edit_task(self, position: int) -> None:
        task = self.controller.task_at(position)
        dialog = TaskFormDialog(task, self)
        if not dialog.exec():
            return
        try:
            updated = self.controller.edit(task.id, position, *dialog.values())
        except StorageError as exc:
            QMessageBox.warning(self, "Storage error", f"Couldn't update task!\n{exc}")
            return
        if updated:
            QMessageBox.information(self, "Done", "Task updated successfully")
        else:
            QMessageBox.warning(self, "Not found", "Couldn't update task!")
        self.render_tasks()

    def delete_task(self, position: int) -> None:
        try:
            task = self.controller.remove_at(position)
        except StorageError as exc:
            QMessageBox.warning(self, "Storage error", f"Couldn't delete task.\n{exc}")
            return
        logger.info("Deleted task %s", task.id)
        self.render_tasks()
