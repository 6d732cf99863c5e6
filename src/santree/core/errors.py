"""Errors raised while turning game text into a move tree."""

from __future__ import annotations

from santree.core.enums import Color


class GameTextError(ValueError):
    """Base class for game text that cannot be turned into a tree."""


class EmptyGameError(GameTextError):
    """The game text is empty or only whitespace."""

    def __init__(self) -> None:
        super().__init__("Game text is empty")


class NoTurnsError(GameTextError):
    """No ``"<N>. move"`` unit could be found in the game text."""

    def __init__(self) -> None:
        super().__init__("No valid turns found in game text")


class InvalidMoveError(GameTextError):
    """A move token is not well-formed SAN."""

    def __init__(self, turn: int, side: Color, notation: str) -> None:
        super().__init__(f"Invalid {side} move {notation!r} in turn {turn}")
        self.turn = turn
        self.side = side
        self.notation = notation
