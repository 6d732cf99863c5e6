"""TreeView — scrollable QGraphicsView for the tree scene."""

from __future__ import annotations

from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from santree.ui.tree.layout import LayoutMetrics
from santree.ui.tree.tree_scene import TreeScene


class TreeView(QGraphicsView):
    """Displays the tree scene with scroll bars and hand-drag panning."""

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        metrics: LayoutMetrics | None = None,
    ) -> None:
        self._scene = TreeScene(metrics=metrics)
        super().__init__(self._scene, parent)

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self.setDragMode(QGraphicsView.DragMode.ScrollHandDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(480, 320)

    @property
    def tree_scene(self) -> TreeScene:
        return self._scene

    def scroll_to_root(self) -> None:
        """Centre the view on the root node, if any."""
        layout = self._scene.tree_layout
        if not layout.nodes:
            return
        root = layout.nodes[0]
        self.centerOn(root.x, root.y)
