"""Pydantic v2 models for layout primitives and node styles.

Units are whatever the caller passes in for the viewport. Positions are
center-anchored: a node's position is the offset of its center from the
center of the space its parent allotted it.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_FLEX = 1.0


# ============================================================================
# Geometry Models
# ============================================================================


class Constraints(BaseModel):
    """Inclusive size range a parent offers a child.

    min <= max is expected but not enforced; inverted or negative ranges
    are passed through as-is.
    """

    model_config = ConfigDict(frozen=True)

    min_width: float = Field(default=0.0, description="Smallest acceptable width")
    max_width: float = Field(default=0.0, description="Largest acceptable width")
    min_height: float = Field(default=0.0, description="Smallest acceptable height")
    max_height: float = Field(default=0.0, description="Largest acceptable height")

    @classmethod
    def loose(cls, width: float, height: float) -> "Constraints":
        """Constraints from zero up to the given size (used for roots)."""
        return cls(min_width=0.0, max_width=width, min_height=0.0, max_height=height)

    @classmethod
    def tight(cls, width: float, height: float) -> "Constraints":
        """Constraints pinned exactly to the given size."""
        return cls(min_width=width, max_width=width, min_height=height, max_height=height)

    def deflate(self, horizontal: float, vertical: float) -> "Constraints":
        """Subtract insets from both bounds of each axis, without clamping."""
        return Constraints(
            min_width=self.min_width - horizontal,
            max_width=self.max_width - horizontal,
            min_height=self.min_height - vertical,
            max_height=self.max_height - vertical,
        )

    @property
    def biggest(self) -> "Size":
        """The largest size these constraints allow."""
        return Size(width=self.max_width, height=self.max_height)


class Size(BaseModel):
    """A resolved width and height."""

    model_config = ConfigDict(frozen=True)

    width: float = 0.0
    height: float = 0.0


class Offset(BaseModel):
    """Center-relative 2D position."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class RectTransform(BaseModel):
    """Resolved rectangle of a node, rewritten on every layout pass."""

    position: Offset = Field(default_factory=Offset)
    size: Size = Field(default_factory=Size)
    depth: int = Field(default=0, description="Paint order, passed through untouched")


# ============================================================================
# Style Models
# ============================================================================


class RowStyle(BaseModel):
    """Lay children out left to right, sharing the row width by flex."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["row"] = "row"
    width: float = Field(description="Preferred width, clamped to the constraints")


class ExpandedStyle(BaseModel):
    """Fill all offered space; flex is read by an enclosing row."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["expanded"] = "expanded"
    flex: float = Field(default=DEFAULT_FLEX, ge=0.0, description="Share of the parent row")


class PaddingStyle(BaseModel):
    """Inset children by fixed margins."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["padding"] = "padding"
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "PaddingStyle":
        """Same inset on every side."""
        return cls(top=value, bottom=value, left=value, right=value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


NodeStyle = Annotated[
    Union[RowStyle, ExpandedStyle, PaddingStyle],
    Field(discriminator="kind"),
]


def flex_weight(style: NodeStyle) -> float:
    """Flex share a row assigns to a child with this style."""
    if style.kind == "expanded":
        return style.flex
    return DEFAULT_FLEX
