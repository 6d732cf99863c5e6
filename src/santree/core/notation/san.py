"""SAN (Standard Algebraic Notation) syntax validation.

Only the lexical shape of a move is checked. There is no board behind the
pattern, so ``Ke5`` on move one is accepted just like ``e4``.
"""

from __future__ import annotations

import re

from santree.core.enums import Color

_FILE = "[a-h]"
_RANK = "[1-8]"
_SQUARE = _FILE + _RANK
_PIECE = "[KQRBN]"

_PAWN_MOVE = f"(?:{_SQUARE}|{_FILE}x{_SQUARE})"  # e4, exd5
_PAWN_PROMOTION = f"{_PAWN_MOVE}(?:=[QRBN])?"  # e8=Q, dxc1=N
_PIECE_MOVE = f"{_PIECE}{_FILE}?{_RANK}?x?{_SQUARE}"  # Nf3, Nbd7, R1e2, Qh4xe1
_CASTLING = "O-O(?:-O)?"
_CHECK_SUFFIX = "[+#]?"

SAN_PATTERN = re.compile(
    f"(?:{_PAWN_PROMOTION}|{_PIECE_MOVE}|{_CASTLING}){_CHECK_SUFFIX}"
)


def is_valid_san(notation: str, side: Color | None = None) -> bool:
    """Return ``True`` when *notation* is a well-formed SAN move.

    *side* is accepted for symmetry with :class:`~santree.core.move.Move` but
    does not change the pattern.
    """
    if not isinstance(notation, str):
        return False
    return SAN_PATTERN.fullmatch(notation) is not None
