"""Internationalisation strings for the SanTree UI.

Usage::

    from santree.ui.i18n import t, set_language

    set_language("Spanish")
    print(t().parse_button)    # "Analizar y visualizar"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_clear: str
    menu_quit: str
    menu_language: str

    status_ready: str
    status_parsed: str  # e.g. "Parsed {turns} turns, {moves} moves"
    status_failed: str

    # ── Input panel ──────────────────────────────────────────────────────
    input_title: str
    parse_button: str

    # ── Tree diagram ─────────────────────────────────────────────────────
    start_label: str

    # ── Dialogs ──────────────────────────────────────────────────────────
    input_required_title: str
    input_required: str
    parse_error_title: str
    parse_error_no_turns: str
    parse_error_invalid_move: str  # "Invalid {side} move {notation} in turn {turn}."
    side_white: str
    side_black: str


_EN = Strings(
    window_title="Chess SAN Parser and Visualizer",
    menu_file="&File",
    menu_clear="&Clear",
    menu_quit="&Quit",
    menu_language="&Language",
    status_ready="Ready",
    status_parsed="Parsed {turns} turns, {moves} moves",
    status_failed="Parsing failed",
    input_title="Enter Chess Game in SAN Notation",
    parse_button="Parse and Visualize",
    start_label="Game",
    input_required_title="Input Required",
    input_required="Please enter a chess game in SAN notation.",
    parse_error_title="Parsing Error",
    parse_error_no_turns="Error parsing game or no valid moves found.",
    parse_error_invalid_move="Invalid {side} move “{notation}” in turn {turn}.",
    side_white="white",
    side_black="black",
)

_ES = Strings(
    window_title="Analizador y visualizador de partidas SAN",
    menu_file="&Archivo",
    menu_clear="&Limpiar",
    menu_quit="&Salir",
    menu_language="&Idioma",
    status_ready="Listo",
    status_parsed="{turns} turnos, {moves} jugadas",
    status_failed="Error al analizar",
    input_title="Introduce una partida en notación SAN",
    parse_button="Analizar y visualizar",
    start_label="Partida",
    input_required_title="Entrada requerida",
    input_required="Introduce una partida de ajedrez en notación SAN.",
    parse_error_title="Error de análisis",
    parse_error_no_turns="Error al analizar la partida o no se encontraron jugadas válidas.",
    parse_error_invalid_move="Jugada {side} inválida “{notation}” en el turno {turn}.",
    side_white="blanca",
    side_black="negra",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Spanish": _ES,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
