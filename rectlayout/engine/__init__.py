# Layout engine

from .tree import (
    InMemoryTree,
    NodeView,
    TreeAdapter,
    TreeNode,
)

from .layout_strategies import (
    BaseLayoutStrategy,
    ExpandedStrategy,
    PaddingStrategy,
    RowStrategy,
    STRATEGIES,
    get_strategy,
    register_strategy,
)

from .layout_engine import (
    LayoutEngine,
    LayoutInProgressError,
    layout_tree,
)

from .placement import (
    Placement,
    sync_placements,
)
