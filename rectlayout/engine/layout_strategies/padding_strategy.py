"""
padding_strategy.py — Inset layout strategy.

Shrinks the constraints handed to children by fixed insets and shifts the
children by the inset imbalance. The padded node itself always reports the
full outer maximum as its size.
"""

from typing import Sequence

from .base_strategy import BaseLayoutStrategy, LayoutContext
from ...dsl.schema import Constraints, Offset, PaddingStyle, Size


class PaddingStrategy(BaseLayoutStrategy):
    """
    Padding layout strategy.

    Insets larger than the offered space produce negative child ranges;
    these are passed down unmodified.
    """

    style: PaddingStyle

    def layout(
        self,
        constraints: Constraints,
        children: Sequence[str],
        context: LayoutContext,
    ) -> Size:
        padded = self.child_constraints(constraints)
        # Same offset for every child, independent of the child's size
        position = self.child_offset()

        for child_id in children:
            child_size = context.layout_child(child_id, padded)
            if child_size is not None:
                context.place(child_id, position, child_size)

        return constraints.biggest

    def child_constraints(self, constraints: Constraints) -> Constraints:
        return constraints.deflate(self.style.horizontal, self.style.vertical)

    def child_offset(self) -> Offset:
        return Offset(
            x=-self.style.horizontal / 2 + self.style.left,
            y=-self.style.vertical / 2 + self.style.bottom,
        )
