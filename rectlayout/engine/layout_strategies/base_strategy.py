"""
base_strategy.py — Abstract base class for layout strategies.

A strategy receives constraints from its parent and a LayoutContext for its
children. It decides the constraints each child gets, places each child
through the context, and returns its own size.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, Sequence

from ...dsl.schema import Constraints, Offset, Size


class LayoutContext(Protocol):
    """Capabilities the engine hands to a running strategy."""

    def lookup_style(self, node_id: str) -> Optional[Any]:
        """Style of a child, or None if the id is dangling."""
        ...

    def layout_child(self, node_id: str, constraints: Constraints) -> Optional[Size]:
        """Lay out a child subtree and return its size, or None if dangling."""
        ...

    def place(self, node_id: str, position: Offset, size: Size) -> None:
        """Write a child's rectangle. Dangling ids are ignored."""
        ...


class BaseLayoutStrategy(ABC):
    """
    Abstract base class for layout strategies.

    Each strategy is bound to one immutable style instance.
    """

    def __init__(self, style: Any):
        self.style = style

    @abstractmethod
    def layout(
        self,
        constraints: Constraints,
        children: Sequence[str],
        context: LayoutContext,
    ) -> Size:
        """
        Lay out children and resolve this node's size.

        Args:
            constraints: Limits offered by the parent
            children: Ordered child ids (may include dangling ids)
            context: Engine capabilities for recursing into children

        Returns:
            This node's resolved size
        """
        pass
