# rectlayout: constraint-based rectangle layout

from .dsl.schema import (
    DEFAULT_FLEX,
    Constraints,
    ExpandedStyle,
    NodeStyle,
    Offset,
    PaddingStyle,
    RectTransform,
    RowStyle,
    Size,
    flex_weight,
)

from .engine import (
    InMemoryTree,
    LayoutEngine,
    LayoutInProgressError,
    NodeView,
    Placement,
    TreeAdapter,
    layout_tree,
    sync_placements,
)

__version__ = "0.1.0"
