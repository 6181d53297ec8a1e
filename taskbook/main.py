from __future__ import annotations

import sys

from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication, QMessageBox, QStyleFactory

from taskbook.domain.errors import StorageError
from taskbook.infra.db import init_db
from taskbook.infra.logging import setup_logging
from taskbook.ui.main_window import MainWindow


def _apply_palette(app: QApplication) -> None:
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor("#F8FAFC"))
    palette.setColor(QPalette.WindowText, QColor("#0F172A"))
    palette.setColor(QPalette.Base, QColor("#FFFFFF"))
    palette.setColor(QPalette.AlternateBase, QColor("#F1F5F9"))
    palette.setColor(QPalette.Text, QColor("#0F172A"))
    palette.setColor(QPalette.Button, QColor("#E2E8F0"))
    palette.setColor(QPalette.ButtonText, QColor("#0F172A"))
    palette.setColor(QPalette.Highlight, QColor("#2563EB"))
    palette.setColor(QPalette.HighlightedText, QColor("#FFFFFF"))
    app.setPalette(palette)


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    try:
        init_db()
    except StorageError as exc:
        QMessageBox.critical(None, "DB error", str(exc))
        sys.exit(1)

    app.setStyle(QStyleFactory.create("Fusion"))
    _apply_palette(app)
    app.setFont(QFont("Segoe UI", 10))

    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
