"""Binary move tree built from SAN game text.

Nodes are linked breadth-first: a queue holds the nodes still waiting for
children, starting with the synthetic root. Each turn takes the next node off
the queue, hangs white's move on its left and black's reply on its right,
and queues both new nodes in that order. The tree therefore fills level by
level, left to right.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from santree.core.enums import Color
from santree.core.errors import EmptyGameError, InvalidMoveError, NoTurnsError
from santree.core.move import Move
from santree.core.notation.models import Turn
from santree.core.notation.turns import iter_turns

_LOGGER = logging.getLogger(__name__)

START_LABEL = "Game"


@dataclass(slots=True)
class MoveNode:
    """A node of the move tree.

    The root carries no move and only a start marker label. Every other node
    stands for one ply.
    """

    label: str
    move: Move | None = None
    turn: int | None = None
    left: MoveNode | None = None
    right: MoveNode | None = None

    @property
    def is_root(self) -> bool:
        return self.move is None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def iter_preorder(self) -> Iterator[MoveNode]:
        """Depth-first walk: node, left subtree, right subtree."""
        stack: list[MoveNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)


@dataclass(frozen=True, slots=True)
class MoveTree:
    """Result of a parse: the tree root plus how many turns were read."""

    root: MoveNode
    turn_count: int

    def nodes(self) -> Iterator[MoveNode]:
        return self.root.iter_preorder()

    def moves(self) -> Iterator[Move]:
        """Yield every move in the tree, preorder."""
        for node in self.nodes():
            if node.move is not None:
                yield node.move

    @property
    def move_count(self) -> int:
        return sum(1 for _ in self.moves())

    @property
    def depth(self) -> int:
        """Number of levels below the root."""

        def _depth(node: MoveNode | None) -> int:
            if node is None:
                return 0
            return 1 + max(_depth(node.left), _depth(node.right))

        return _depth(self.root) - 1


def _node_for(move: Move, turn: int) -> MoveNode:
    if not move.is_valid:
        _LOGGER.warning(
            "Invalid %s move %r in turn %d", move.side, move.notation, turn
        )
        raise InvalidMoveError(turn, move.side, move.notation)
    label = f"{turn}. {move}" if move.side == Color.WHITE else str(move)
    return MoveNode(label=label, move=move, turn=turn)


def _attach_turn(pending: deque[MoveNode], turn: Turn) -> bool:
    """Link one turn's nodes under the next pending parent.

    Returns ``False`` when no parent slot is left.
    """
    placed = [(move, _node_for(move, turn.number)) for move in turn.moves()]

    if not pending:
        _LOGGER.error("No parent node available for turn %d", turn.number)
        return False

    parent = pending.popleft()
    for move, node in placed:
        if move.side == Color.WHITE:
            parent.left = node
        else:
            parent.right = node
        pending.append(node)
    return True


def build_move_tree(text: str, *, start_label: str = START_LABEL) -> MoveTree:
    """Build a :class:`MoveTree` from SAN game *text*.

    Stops at the first malformed move by raising :class:`InvalidMoveError`.
    Text without any turn yields a tree holding only the root.
    """
    root = MoveNode(label=start_label)
    pending: deque[MoveNode] = deque([root])
    turn_count = 0

    for turn in iter_turns(text):
        if turn.white is None:
            _LOGGER.debug("Turn %d has no white move, skipping", turn.number)
            continue
        if not _attach_turn(pending, turn):
            break
        turn_count += 1

    _LOGGER.debug("Built move tree from %d turns", turn_count)
    return MoveTree(root=root, turn_count=turn_count)


def parse_game(text: str, *, start_label: str = START_LABEL) -> MoveTree:
    """Validate *text* at the caller boundary and build its move tree.

    Raises:
        EmptyGameError: *text* is blank.
        NoTurnsError: no turn could be read from *text*.
        InvalidMoveError: a move is not well-formed SAN.
    """
    game_text = text.strip()
    if not game_text:
        raise EmptyGameError()

    tree = build_move_tree(game_text, start_label=start_label)
    if tree.turn_count == 0:
        raise NoTurnsError()
    return tree
