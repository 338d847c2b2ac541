"""Pytest configuration and fixtures."""

import pytest

from rectlayout.dsl.schema import Constraints, ExpandedStyle, PaddingStyle, RowStyle, Size
from rectlayout.engine.tree import InMemoryTree


class RecordingContext:
    """LayoutContext stand-in that records calls made by a strategy.

    Children answer with the largest size their constraints allow unless a
    fixed size is configured for them.
    """

    def __init__(self, styles: dict, sizes: dict | None = None):
        self.styles = styles
        self.sizes = sizes or {}
        self.requests: list[tuple[str, Constraints]] = []
        self.placed: dict = {}

    def lookup_style(self, node_id):
        return self.styles.get(node_id)

    def layout_child(self, node_id, constraints):
        if node_id not in self.styles:
            return None
        self.requests.append((node_id, constraints))
        return self.sizes.get(node_id, constraints.biggest)

    def place(self, node_id, position, size):
        self.placed[node_id] = (position, size)


@pytest.fixture
def make_context():
    """Factory for recording contexts."""
    return RecordingContext


@pytest.fixture
def flex_row_tree() -> InMemoryTree:
    """Row(900) with Expanded children of flex 1, 2 and 3."""
    tree = InMemoryTree()
    tree.add_node("root", RowStyle(width=900.0))
    tree.add_node("a", ExpandedStyle(flex=1.0), parent="root", depth=1)
    tree.add_node("b", ExpandedStyle(flex=2.0), parent="root", depth=1)
    tree.add_node("c", ExpandedStyle(flex=3.0), parent="root", depth=1)
    return tree


@pytest.fixture
def padded_tree() -> InMemoryTree:
    """Padding of 10 on every side wrapping a single Expanded child."""
    tree = InMemoryTree()
    tree.add_node("pad", PaddingStyle.uniform(10.0))
    tree.add_node("content", ExpandedStyle(), parent="pad")
    return tree


@pytest.fixture
def viewport() -> Size:
    return Size(width=900.0, height=600.0)
