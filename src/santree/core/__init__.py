"""Core domain layer: SAN validation and move-tree construction, no Qt.

Quick start::

    from santree.core import parse_game

    tree = parse_game("1. e4 e5 2. Nf3 Nc6")
    for node in tree.nodes():
        print(node.label)
"""

from santree.core.enums import Color
from santree.core.errors import (
    EmptyGameError,
    GameTextError,
    InvalidMoveError,
    NoTurnsError,
)
from santree.core.move import Move
from santree.core.notation import Turn, is_valid_san, iter_turns
from santree.core.tree import (
    START_LABEL,
    MoveNode,
    MoveTree,
    build_move_tree,
    parse_game,
)

__all__ = [
    # Enums
    "Color",
    # Domain objects
    "Move",
    "MoveNode",
    "MoveTree",
    "Turn",
    # Notation
    "is_valid_san",
    "iter_turns",
    # Tree construction
    "START_LABEL",
    "build_move_tree",
    "parse_game",
    # Errors
    "EmptyGameError",
    "GameTextError",
    "InvalidMoveError",
    "NoTurnsError",
]
