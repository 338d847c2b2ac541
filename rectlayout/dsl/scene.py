"""Scene description models and tree construction.

A scene is a list of root node trees, typically loaded from JSON:

    {"nodes": [{"id": "root", "style": {"kind": "row", "width": 900},
                "children": [{"id": "a", "style": {"kind": "expanded", "flex": 1}}]}]}
"""

from pathlib import Path
from typing import Iterator, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rectlayout.dsl.schema import ExpandedStyle, NodeStyle, PaddingStyle, RowStyle
from rectlayout.engine.tree import InMemoryTree


class SceneNode(BaseModel):
    """A node and its subtree."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique node id")
    style: NodeStyle
    depth: int = Field(default=0, description="Paint order")
    children: list["SceneNode"] = Field(default_factory=list)

    def walk(self) -> Iterator["SceneNode"]:
        """Yield this node and its descendants, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


class Scene(BaseModel):
    """A forest of root nodes."""

    model_config = ConfigDict(frozen=True)

    nodes: list[SceneNode] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "Scene":
        seen: set[str] = set()
        for root in self.nodes:
            for node in root.walk():
                if node.id in seen:
                    raise ValueError(f"Duplicate node id: {node.id}")
                seen.add(node.id)
        return self


def load_scene(path: Union[str, Path]) -> Scene:
    """Read a scene from a JSON file."""
    return Scene.model_validate_json(Path(path).read_text(encoding="utf-8"))


def build_tree(scene: Scene) -> InMemoryTree:
    """Insert every scene node into a fresh in-memory tree."""
    tree = InMemoryTree()

    def insert(node: SceneNode, parent: str | None) -> None:
        tree.add_node(node.id, node.style, parent=parent, depth=node.depth)
        for child in node.children:
            insert(child, node.id)

    for root in scene.nodes:
        insert(root, None)
    return tree


def demo_scene(window_width: float = 1280.0) -> Scene:
    """Three flexed panels across the window; the widest holds a padded row."""
    inner_row = SceneNode(
        id="inner_row",
        style=RowStyle(width=1000.0),
        depth=1,
        children=[
            SceneNode(id="inner_left", style=ExpandedStyle(flex=1.0), depth=1),
            SceneNode(id="inner_right", style=ExpandedStyle(flex=1.0), depth=1),
        ],
    )
    padded = SceneNode(
        id="padded",
        style=PaddingStyle.uniform(10.0),
        depth=1,
        children=[inner_row],
    )
    root = SceneNode(
        id="root",
        style=RowStyle(width=window_width),
        depth=0,
        children=[
            SceneNode(id="panel_1", style=ExpandedStyle(flex=1.0), depth=1),
            SceneNode(id="panel_2", style=ExpandedStyle(flex=2.0), depth=1),
            SceneNode(id="panel_3", style=ExpandedStyle(flex=3.0), depth=1, children=[padded]),
        ],
    )
    return Scene(nodes=[root])
