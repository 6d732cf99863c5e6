"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from santree.core.enums import Color


@dataclass(frozen=True, slots=True)
class Move:
    """A single SAN token played by one side.

    Attributes:
        notation: Raw SAN text, e.g. ``"Nf3"`` or ``"exd8=Q+"``.
        side: The side that played it.
    """

    notation: str
    side: Color

    @property
    def is_valid(self) -> bool:
        """Whether :attr:`notation` is syntactically well-formed SAN."""
        from santree.core.notation.san import is_valid_san

        return is_valid_san(self.notation, self.side)

    def __str__(self) -> str:
        return self.notation
