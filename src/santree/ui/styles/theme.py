"""Visual theme constants and QSS styles for SanTree."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class TreeTheme:
    """Colour scheme for the move-tree diagram."""

    background: QColor
    root_fill: QColor  # start marker
    odd_fill: QColor  # odd depth
    even_fill: QColor  # even depth below the root
    border: QColor
    text: QColor
    left_edge: QColor  # solid
    right_edge: QColor  # dashed

    @classmethod
    def default(cls) -> TreeTheme:
        return cls(
            background=QColor(255, 255, 255),
            root_fill=QColor(255, 230, 100),  # yellow
            odd_fill=QColor(200, 200, 200),  # gray
            even_fill=QColor(230, 240, 255),  # light blue
            border=QColor(0, 0, 0),
            text=QColor(0, 0, 178),
            left_edge=QColor(0, 0, 0),
            right_edge=QColor(128, 128, 128),
        )

    def fill_for_depth(self, depth: int) -> QColor:
        if depth == 0:
            return self.root_fill
        if depth % 2 == 1:
            return self.odd_fill
        return self.even_fill


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: sans-serif;
}

QGroupBox {
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
    border-radius: 4px;
    margin-top: 14px;
    padding-top: 6px;
}
QGroupBox::title {
    subcontrol-origin: margin;
    left: 8px;
}

QPlainTextEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: monospace;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
