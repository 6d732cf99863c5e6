"""TreeScene — QGraphicsScene that draws a move tree."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QRectF, Qt
from PyQt6.QtGui import QBrush, QFont, QPainterPath, QPen
from PyQt6.QtWidgets import (
    QGraphicsLineItem,
    QGraphicsPathItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from santree.core.tree import MoveTree
from santree.ui.styles.theme import TreeTheme
from santree.ui.tree.layout import (
    Edge,
    LayoutMetrics,
    PlacedNode,
    TreeLayout,
    compute_layout,
)


def label_font() -> QFont:
    """Bold application font used for node labels."""
    font = QFont()
    font.setPointSize(11)
    font.setBold(True)
    return font

class TreeScene(QGraphicsScene):
    """Renders rounded move boxes joined by parent-child edges.

    Left edges (white replies) are solid, right edges (black replies) dashed.
    """

    CORNER_RADIUS = 10

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        metrics: LayoutMetrics | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = TreeTheme.default()
        self._metrics = metrics or LayoutMetrics()
        self._tree: MoveTree | None = None
        self._layout = TreeLayout.empty()

        self._node_items: list[QGraphicsPathItem] = []
        self._label_items: list[QGraphicsSimpleTextItem] = []
        self._edge_items: list[QGraphicsLineItem] = []

        self.setBackgroundBrush(QBrush(self._theme.background))

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def tree(self) -> MoveTree | None:
        return self._tree

    @property
    def tree_layout(self) -> TreeLayout:
        return self._layout

    def set_tree(self, tree: MoveTree | None) -> None:
        """Replace the displayed tree (full redraw)."""
        self._tree = tree
        self._layout = compute_layout(
            tree.root if tree is not None else None, self._metrics
        )
        self._redraw()

    def clear_tree(self) -> None:
        self.set_tree(None)

    # ── Drawing ──────────────────────────────────────────────────────────

    def _remove_items(self) -> None:
        for item in (*self._edge_items, *self._label_items, *self._node_items):
            self.removeItem(item)
        self._edge_items.clear()
        self._label_items.clear()
        self._node_items.clear()

    def _redraw(self) -> None:
        self._remove_items()
        for edge in self._layout.edges:
            self._draw_edge(edge)
        font = label_font()
        for placed in self._layout.nodes:
            self._draw_node(placed, font)
        self.setSceneRect(0, 0, self._layout.width, self._layout.height)

    def _draw_node(self, placed: PlacedNode, font: QFont) -> None:
        m = self._metrics
        rect = QRectF(placed.x, placed.y, m.node_width, m.node_height)
        path = QPainterPath()
        path.addRoundedRect(rect, self.CORNER_RADIUS, self.CORNER_RADIUS)

        box = QGraphicsPathItem(path)
        box.setBrush(QBrush(self._theme.fill_for_depth(placed.depth)))
        box.setPen(QPen(self._theme.border, 1))
        box.setZValue(1)
        self.addItem(box)
        self._node_items.append(box)

        label = QGraphicsSimpleTextItem(placed.node.label)
        label.setFont(font)
        label.setBrush(QBrush(self._theme.text))
        bounds = label.boundingRect()
        label.setPos(
            rect.center().x() - bounds.width() / 2,
            rect.center().y() - bounds.height() / 2,
        )
        label.setZValue(2)
        self.addItem(label)
        self._label_items.append(label)

    def _draw_edge(self, edge: Edge) -> None:
        m = self._metrics
        x1 = edge.parent.x + m.node_width / 2
        y1 = edge.parent.y + m.node_height
        x2 = edge.child.x + m.node_width / 2
        y2 = edge.child.y

        if edge.side == "left":
            pen = QPen(self._theme.left_edge, 2)
        else:
            pen = QPen(self._theme.right_edge, 2, Qt.PenStyle.DashLine)

        line = QGraphicsLineItem(x1, y1, x2, y2)
        line.setPen(pen)
        line.setZValue(0)
        self.addItem(line)
        self._edge_items.append(line)
