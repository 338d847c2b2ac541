"""
tree.py — Tree query adapter used by the layout engine.

The engine never owns the node tree. It reads each node's style and ordered
children through a TreeAdapter and writes resolved rectangles back through
the same adapter. InMemoryTree is the default arena-backed implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..dsl.schema import NodeStyle, RectTransform


@dataclass(frozen=True)
class NodeView:
    """Read-only view of a node: its style and ordered child ids."""
    style: NodeStyle
    children: tuple = ()


class TreeAdapter(ABC):
    """
    Storage-agnostic access to a layout tree.

    Lookups on ids that do not exist return None rather than raising, so the
    engine can skip dangling child references.
    """

    @abstractmethod
    def lookup(self, node_id: str) -> Optional[NodeView]:
        """Return the node's style and children, or None if it is gone."""

    @abstractmethod
    def transform(self, node_id: str) -> Optional[RectTransform]:
        """Return the node's writable rectangle, or None if it is gone."""

    @abstractmethod
    def roots(self) -> List[str]:
        """Ids of every node without a parent, in insertion order."""


# =============================================================================
# IN-MEMORY ARENA
# =============================================================================

@dataclass
class TreeNode:
    """A stored node record."""
    id: str
    style: NodeStyle
    parent: Optional[str] = None
    children: List[str] = field(default_factory=list)
    transform: RectTransform = field(default_factory=RectTransform)


class InMemoryTree(TreeAdapter):
    """Dictionary-backed tree store keyed by string ids."""

    def __init__(self):
        self._nodes: Dict[str, TreeNode] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(list(self._nodes.values()))

    def add_node(
        self,
        node_id: str,
        style: NodeStyle,
        parent: Optional[str] = None,
        depth: int = 0,
    ) -> TreeNode:
        """
        Insert a node, appending it to its parent's children.

        Raises:
            ValueError: if the id is taken or the parent does not exist.
        """
        if node_id in self._nodes:
            raise ValueError(f"Duplicate node id: {node_id}")
        if parent is not None and parent not in self._nodes:
            raise ValueError(f"Unknown parent '{parent}' for node '{node_id}'")

        node = TreeNode(
            id=node_id,
            style=style,
            parent=parent,
            transform=RectTransform(depth=depth),
        )
        self._nodes[node_id] = node
        if parent is not None:
            self._nodes[parent].children.append(node_id)
        return node

    def remove_node(self, node_id: str) -> None:
        """
        Drop a single node from the store.

        The parent keeps its edge to the removed id and the removed node's
        children keep pointing at it, matching an entity store where a
        despawned entity leaves stale references behind.
        """
        self._nodes.pop(node_id, None)

    def get_node(self, node_id: str) -> Optional[TreeNode]:
        return self._nodes.get(node_id)

    def children_of(self, node_id: str) -> List[str]:
        node = self._nodes.get(node_id)
        return list(node.children) if node else []

    def parent_of(self, node_id: str) -> Optional[str]:
        node = self._nodes.get(node_id)
        return node.parent if node else None

    # TreeAdapter

    def lookup(self, node_id: str) -> Optional[NodeView]:
        node = self._nodes.get(node_id)
        if node is None:
            return None
        return NodeView(style=node.style, children=tuple(node.children))

    def transform(self, node_id: str) -> Optional[RectTransform]:
        node = self._nodes.get(node_id)
        return node.transform if node else None

    def roots(self) -> List[str]:
        return [node.id for node in self._nodes.values() if node.parent is None]
