"""Notation package: SAN validation and turn scanning."""

from santree.core.notation.models import Turn
from santree.core.notation.san import SAN_PATTERN, is_valid_san
from santree.core.notation.turns import TURN_PATTERN, count_turn_headers, iter_turns

__all__ = [
    "SAN_PATTERN",
    "TURN_PATTERN",
    "Turn",
    "count_turn_headers",
    "is_valid_san",
    "iter_turns",
]
