"""
layout_engine.py — Layout pass orchestrator.

The LayoutEngine walks a tree from every root, depth first:
1. Hands the root constraints to each root's strategy
2. Strategies recurse into their children through the engine
3. Every child's rectangle is written as soon as its size is known
4. Each root's own rectangle is written last, centered on the viewport

A pass always runs to completion. Child ids that no longer resolve to a node
are skipped without writing anything.
"""

from typing import Optional
import logging

from ..dsl.schema import Constraints, NodeStyle, Offset, Size
from .layout_strategies import strategy_for
from .tree import TreeAdapter

logger = logging.getLogger(__name__)


class LayoutInProgressError(RuntimeError):
    """Raised when a pass is started while another is still running."""


class LayoutEngine:
    """
    Runs layout passes over a tree adapter.

    Usage:
        engine = LayoutEngine(tree)
        engine.run_for_viewport(1280, 720)
    """

    def __init__(self, tree: TreeAdapter):
        self.tree = tree
        self._running = False
        self._written = 0

    def run(self, root_constraints: Constraints) -> int:
        """
        Lay out every root with the given constraints.

        Returns:
            Number of rectangles written during the pass
        """
        if self._running:
            raise LayoutInProgressError("A layout pass is already running on this tree")

        self._running = True
        self._written = 0
        try:
            roots = self.tree.roots()
            logger.debug(f"Layout pass started: {len(roots)} roots, {root_constraints}")
            for root_id in roots:
                size = self.layout_child(root_id, root_constraints)
                if size is None:
                    continue
                self._write(root_id, Offset(), size)
        finally:
            self._running = False

        logger.debug(f"Layout pass finished: {self._written} rectangles written")
        return self._written

    def run_for_viewport(self, width: float, height: float) -> int:
        """Lay out every root against a viewport of the given size."""
        return self.run(Constraints.loose(width, height))

    # =========================================================================
    # LayoutContext (used by strategies)
    # =========================================================================

    def lookup_style(self, node_id: str) -> Optional[NodeStyle]:
        view = self.tree.lookup(node_id)
        return view.style if view else None

    def layout_child(self, node_id: str, constraints: Constraints) -> Optional[Size]:
        view = self.tree.lookup(node_id)
        if view is None:
            logger.debug(f"Skipping dangling node id: {node_id}")
            return None
        return strategy_for(view.style).layout(constraints, view.children, self)

    def place(self, node_id: str, position: Offset, size: Size) -> None:
        self._write(node_id, position, size)

    def _write(self, node_id: str, position: Offset, size: Size) -> None:
        transform = self.tree.transform(node_id)
        if transform is None:
            return
        transform.position = position
        transform.size = size
        self._written += 1


def layout_tree(tree: TreeAdapter, width: float, height: float) -> int:
    """Run a single pass over a tree for a viewport."""
    return LayoutEngine(tree).run_for_viewport(width, height)
