"""
expanded_strategy.py — Fill-available-space layout strategy.

Used as a flexible child of a row. The flex weight is read by the enclosing
row, never by the strategy itself.
"""

from typing import Sequence

from .base_strategy import BaseLayoutStrategy, LayoutContext
from ...dsl.schema import Constraints, ExpandedStyle, Offset, Size


class ExpandedStrategy(BaseLayoutStrategy):
    """Takes the maximum offered size and passes its constraints through."""

    style: ExpandedStyle

    def layout(
        self,
        constraints: Constraints,
        children: Sequence[str],
        context: LayoutContext,
    ) -> Size:
        for child_id in children:
            child_size = context.layout_child(child_id, constraints)
            if child_size is not None:
                context.place(child_id, Offset(), child_size)

        return constraints.biggest
