"""
layout_strategies — Pluggable layout computation strategies.

This package contains the built-in node layout strategies:

- RowStrategy: Left-to-right flow sharing width by flex weight
- ExpandedStrategy: Fills all offered space, passes constraints through
- PaddingStrategy: Insets children by fixed margins

Each strategy implements the BaseLayoutStrategy interface and is selected
by the `kind` tag of a node's style.
"""

from typing import Type

from .base_strategy import BaseLayoutStrategy, LayoutContext
from .row_strategy import RowStrategy
from .expanded_strategy import ExpandedStrategy
from .padding_strategy import PaddingStrategy

__all__ = [
    'BaseLayoutStrategy',
    'LayoutContext',
    'RowStrategy',
    'ExpandedStrategy',
    'PaddingStrategy',
    'get_strategy',
    'register_strategy',
    'strategy_for',
    'STRATEGIES',
]


# Strategy registry for lookup by style kind
STRATEGIES = {
    'row': RowStrategy,
    'expanded': ExpandedStrategy,
    'padding': PaddingStrategy,
}


def get_strategy(kind: str) -> Type[BaseLayoutStrategy]:
    """Get a strategy class by style kind."""
    strategy_class = STRATEGIES.get(kind.lower())
    if not strategy_class:
        raise ValueError(f"Unknown strategy: {kind}. Available: {list(STRATEGIES.keys())}")
    return strategy_class


def strategy_for(style) -> BaseLayoutStrategy:
    """Bind the strategy matching a style's kind to that style."""
    return get_strategy(style.kind)(style)


def register_strategy(kind: str, strategy_class: Type[BaseLayoutStrategy]) -> None:
    """Register an additional strategy under a style kind."""
    STRATEGIES[kind.lower()] = strategy_class
