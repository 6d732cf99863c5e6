"""Core enumerations for the notation domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()
