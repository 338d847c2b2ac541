"""
row_strategy.py — Horizontal flow layout strategy.

Children are laid out left to right. The row's width is shared among its
children in proportion to their flex weight; every child is pinned to the
full row height.
"""

import logging
from typing import List, Sequence, Tuple

from .base_strategy import BaseLayoutStrategy, LayoutContext
from ...dsl.schema import Constraints, Offset, RowStyle, Size, flex_weight

logger = logging.getLogger(__name__)


class RowStrategy(BaseLayoutStrategy):
    """
    Row layout strategy.

    Key behavior:
    - Own width is the preferred width clamped into the constraints
    - Own height is always the maximum offered height
    - Children without a flex weight count as flex 1.0
    """

    style: RowStyle

    def layout(
        self,
        constraints: Constraints,
        children: Sequence[str],
        context: LayoutContext,
    ) -> Size:
        width = self.resolve_width(constraints)
        height = constraints.max_height

        weighted = self._weighted_children(children, context)
        total_flex = sum(flex for _, flex in weighted)
        if weighted and total_flex <= 0:
            logger.warning(
                f"Row has {len(weighted)} children but zero total flex; "
                "children get zero width"
            )

        offset = 0.0
        for child_id, flex in weighted:
            child_width = self.share(width, flex, total_flex)
            child_size = context.layout_child(
                child_id, Constraints.tight(child_width, height)
            )
            if child_size is None:
                continue

            context.place(
                child_id,
                Offset(x=offset - width / 2 + child_width / 2, y=0.0),
                child_size,
            )
            offset += child_width

        return Size(width=width, height=height)

    def resolve_width(self, constraints: Constraints) -> float:
        """Clamp the preferred width; the minimum wins when min > max."""
        width = self.style.width
        if width > constraints.max_width:
            width = constraints.max_width
        if width < constraints.min_width:
            width = constraints.min_width
        return width

    @staticmethod
    def share(width: float, flex: float, total_flex: float) -> float:
        """Width given to one child; zero when there is no flex to share."""
        if total_flex <= 0:
            return 0.0
        return (width / total_flex) * flex

    @staticmethod
    def _weighted_children(
        children: Sequence[str],
        context: LayoutContext,
    ) -> List[Tuple[str, float]]:
        """Pair each present child with its flex weight, dropping dangling ids."""
        weighted = []
        for child_id in children:
            style = context.lookup_style(child_id)
            if style is None:
                continue
            weighted.append((child_id, flex_weight(style)))
        return weighted
