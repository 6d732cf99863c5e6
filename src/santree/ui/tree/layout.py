"""Pixel layout of a move tree, independent of Qt.

Nodes are placed by an in-order walk: each node gets its own column, so a
parent always sits between its left and right subtrees and no two boxes
overlap. The row is the node's depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from santree.core.tree import MoveNode

EdgeSide = Literal["left", "right"]


@dataclass(frozen=True, slots=True)
class LayoutMetrics:
    """Box size and spacing in scene pixels."""

    node_width: int = 140
    node_height: int = 60
    h_gap: int = 24
    v_spacing: int = 120
    margin: int = 20


@dataclass(frozen=True, slots=True)
class PlacedNode:
    node: MoveNode
    x: float  # top-left
    y: float
    depth: int
    column: int


@dataclass(frozen=True, slots=True)
class Edge:
    parent: PlacedNode
    child: PlacedNode
    side: EdgeSide


@dataclass(frozen=True, slots=True)
class TreeLayout:
    """Placed nodes in preorder plus parent-child edges."""

    nodes: tuple[PlacedNode, ...]
    edges: tuple[Edge, ...]
    width: float
    height: float

    @classmethod
    def empty(cls) -> TreeLayout:
        return cls(nodes=(), edges=(), width=0.0, height=0.0)


def _columns(root: MoveNode) -> dict[int, int]:
    """Map ``id(node)`` to its in-order index."""
    columns: dict[int, int] = {}
    stack: list[MoveNode] = []
    node: MoveNode | None = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        columns[id(node)] = len(columns)
        node = node.right
    return columns


def compute_layout(
    root: MoveNode | None, metrics: LayoutMetrics | None = None
) -> TreeLayout:
    """Place every node under *root* and collect the edges between them."""
    if root is None:
        return TreeLayout.empty()
    m = metrics or LayoutMetrics()
    columns = _columns(root)

    placed: list[PlacedNode] = []
    edges: list[Edge] = []

    def place(node: MoveNode, depth: int) -> PlacedNode:
        column = columns[id(node)]
        item = PlacedNode(
            node=node,
            x=m.margin + column * (m.node_width + m.h_gap),
            y=m.margin + depth * m.v_spacing,
            depth=depth,
            column=column,
        )
        placed.append(item)
        if node.left is not None:
            edges.append(Edge(item, place(node.left, depth + 1), "left"))
        if node.right is not None:
            edges.append(Edge(item, place(node.right, depth + 1), "right"))
        return item

    place(root, 0)

    max_depth = max(p.depth for p in placed)
    width = 2 * m.margin + len(columns) * m.node_width + (len(columns) - 1) * m.h_gap
    height = 2 * m.margin + max_depth * m.v_spacing + m.node_height
    return TreeLayout(
        nodes=tuple(placed), edges=tuple(edges), width=width, height=height
    )
