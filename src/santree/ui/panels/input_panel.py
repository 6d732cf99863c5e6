"""InputPanel — game text entry with a parse button."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFontDatabase
from PyQt6.QtWidgets import (
    QGroupBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from santree.ui.i18n import t


class InputPanel(QWidget):
    """Titled text area for SAN game text.

    Signals:
        parse_requested(str): Emitted with the current text when the user
            clicks the parse button.
    """

    parse_requested = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._group = QGroupBox()
        group_layout = QVBoxLayout(self._group)

        self._editor = QPlainTextEdit()
        self._editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setPointSize(12)
        self._editor.setFont(font)
        self._editor.setFixedHeight(140)
        group_layout.addWidget(self._editor)

        self._btn_parse = QPushButton()
        self._btn_parse.setMinimumHeight(36)
        self._btn_parse.clicked.connect(self._on_parse_clicked)
        group_layout.addWidget(self._btn_parse)

        layout.addWidget(self._group)

    def retranslate_ui(self) -> None:
        s = t()
        self._group.setTitle(s.input_title)
        self._btn_parse.setText(s.parse_button)

    def text(self) -> str:
        return self._editor.toPlainText()

    def set_text(self, text: str) -> None:
        self._editor.setPlainText(text)

    def clear(self) -> None:
        self._editor.clear()

    def _on_parse_clicked(self) -> None:
        self.parse_requested.emit(self.text())
