"""MainWindow — top-level window assembling the input panel and tree view."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from santree.core.enums import Color
from santree.core.errors import EmptyGameError, InvalidMoveError, NoTurnsError
from santree.core.tree import MoveTree, parse_game
from santree.ui.i18n import LANGUAGES, set_language, t
from santree.ui.panels.input_panel import InputPanel
from santree.ui.settings import AppSettings
from santree.ui.tree.tree_view import TreeView

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for SanTree."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self._shown_game_text: str | None = None
        set_language(self._settings.language)

        self.setMinimumSize(900, 640)
        self.resize(1400, 1000)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self.retranslate_ui()

        self._input_panel.set_text(self._settings.sample_game)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._input_panel = InputPanel()
        root.addWidget(self._input_panel)

        self._tree_view = TreeView(metrics=self._settings.layout_metrics())
        root.addWidget(self._tree_view, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_file = menu_bar.addMenu("")
        assert self._menu_file is not None

        self._act_clear = QAction(self)
        self._act_clear.setShortcut("Ctrl+L")
        self._act_clear.triggered.connect(self._on_clear)
        self._menu_file.addAction(self._act_clear)

        self._menu_file.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_file.addAction(self._act_quit)

        self._menu_language = menu_bar.addMenu("")
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        self._language_group.setExclusive(True)
        for language in LANGUAGES:
            action = QAction(language, self)
            action.setCheckable(True)
            action.setChecked(language == self._settings.language)
            action.triggered.connect(
                lambda _checked=False, name=language: self._on_language(name)
            )
            self._language_group.addAction(action)
            self._menu_language.addAction(action)

    def _connect_signals(self) -> None:
        self._input_panel.parse_requested.connect(self._on_parse_requested)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        assert self._menu_file is not None and self._menu_language is not None
        self._menu_file.setTitle(s.menu_file)
        self._menu_language.setTitle(s.menu_language)
        self._act_clear.setText(s.menu_clear)
        self._act_quit.setText(s.menu_quit)
        self._input_panel.retranslate_ui()
        self._status_label.setText(s.status_ready)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_parse_requested(self, text: str) -> None:
        s = t()
        try:
            tree = parse_game(text, start_label=s.start_label)
        except EmptyGameError:
            QMessageBox.warning(self, s.input_required_title, s.input_required)
            return
        except NoTurnsError:
            self._show_parse_error(s.parse_error_no_turns)
            return
        except InvalidMoveError as exc:
            side = s.side_white if exc.side == Color.WHITE else s.side_black
            self._show_parse_error(
                s.parse_error_invalid_move.format(
                    side=side, notation=exc.notation, turn=exc.turn
                )
            )
            return

        self._shown_game_text = text
        self._show_tree(tree)

    def _show_tree(self, tree: MoveTree) -> None:
        _LOGGER.info(
            "Displaying tree: %d turns, %d moves", tree.turn_count, tree.move_count
        )
        self._tree_view.tree_scene.set_tree(tree)
        self._tree_view.scroll_to_root()
        self._status_label.setText(
            t().status_parsed.format(turns=tree.turn_count, moves=tree.move_count)
        )

    def _show_parse_error(self, message: str) -> None:
        self._shown_game_text = None
        self._tree_view.tree_scene.clear_tree()
        self._status_label.setText(t().status_failed)
        QMessageBox.critical(self, t().parse_error_title, message)

    def _on_clear(self) -> None:
        self._shown_game_text = None
        self._input_panel.clear()
        self._tree_view.tree_scene.clear_tree()
        self._status_label.setText(t().status_ready)

    def _on_language(self, language: str) -> None:
        self._settings.language = language
        set_language(language)
        self.retranslate_ui()
        if self._shown_game_text is not None:
            # Root label follows the language.
            self._show_tree(
                parse_game(self._shown_game_text, start_label=t().start_label)
            )
