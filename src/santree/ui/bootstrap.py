"""Qt application bootstrap helpers."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from santree.ui.settings import AppSettings


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from santree.ui.styles.theme import APP_STYLE

    app.setApplicationName("SanTree")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from santree.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
