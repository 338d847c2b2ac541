"""
placement.py — Copies resolved rectangles into renderer-ready placements.

Read only after a layout pass has completed. Positions stay center-relative
to the parent frame; depth becomes the z coordinate.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .tree import InMemoryTree


class Placement(BaseModel):
    """Translation and size of one node as a renderer consumes it."""

    model_config = ConfigDict(frozen=True)

    node_id: str
    x: float
    y: float
    z: float = Field(description="Paint order taken from the node depth")
    width: float
    height: float


def sync_placements(tree: InMemoryTree) -> List[Placement]:
    """Build placements for every node in insertion order."""
    placements = []
    for node in tree:
        rect = node.transform
        placements.append(Placement(
            node_id=node.id,
            x=rect.position.x,
            y=rect.position.y,
            z=float(rect.depth),
            width=rect.size.width,
            height=rect.size.height,
        ))
    return placements
