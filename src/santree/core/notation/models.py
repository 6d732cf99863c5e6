"""Shared notation-layer data models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from santree.core.enums import Color
from santree.core.move import Move


@dataclass(frozen=True, slots=True)
class Turn:
    """One numbered ``"N. white [black]"`` unit of game text."""

    number: int
    white: str | None
    black: str | None = None

    def moves(self) -> Iterator[Move]:
        """Yield the plies of this turn in playing order."""
        if self.white is not None:
            yield Move(self.white, Color.WHITE)
        if self.black is not None:
            yield Move(self.black, Color.BLACK)
