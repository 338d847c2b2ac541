"""Tests for the layout engine traversal."""

import logging
from typing import Literal

import pytest
from pydantic import BaseModel

from rectlayout.dsl.schema import (
    Constraints,
    ExpandedStyle,
    Offset,
    PaddingStyle,
    RowStyle,
    Size,
)
from rectlayout.engine.layout_engine import LayoutEngine, LayoutInProgressError, layout_tree
from rectlayout.engine.layout_strategies import STRATEGIES, BaseLayoutStrategy, register_strategy
from rectlayout.engine.tree import InMemoryTree


def snapshot(tree: InMemoryTree) -> dict:
    return {node.id: node.transform.model_dump() for node in tree}


class TestScenarios:
    """End-to-end layout scenarios."""

    def test_flex_row(self, flex_row_tree: InMemoryTree, viewport: Size) -> None:
        """Test Row(900) with flex 1/2/3 children in a 900x600 viewport."""
        written = LayoutEngine(flex_row_tree).run_for_viewport(viewport.width, viewport.height)
        assert written == 4

        expected = {"a": (150.0, -375.0), "b": (300.0, -150.0), "c": (450.0, 225.0)}
        for node_id, (width, x) in expected.items():
            rect = flex_row_tree.transform(node_id)
            assert rect.size.width == pytest.approx(width)
            assert rect.size.height == 600.0
            assert rect.position.x == pytest.approx(x)
            assert rect.position.y == 0.0

        root = flex_row_tree.transform("root")
        assert root.position == Offset()
        assert root.size == Size(width=900.0, height=600.0)

    def test_padding_scenario(self, padded_tree: InMemoryTree) -> None:
        LayoutEngine(padded_tree).run_for_viewport(200.0, 100.0)

        assert padded_tree.transform("pad").size == Size(width=200.0, height=100.0)
        content = padded_tree.transform("content")
        assert content.size == Size(width=180.0, height=80.0)
        assert content.position == Offset(x=0.0, y=0.0)

    def test_nested_tree(self) -> None:
        """Test Row > Expanded > Padding > Row > Expanded x2."""
        tree = InMemoryTree()
        tree.add_node("root", RowStyle(width=600.0))
        tree.add_node("side", ExpandedStyle(flex=1.0), parent="root")
        tree.add_node("main", ExpandedStyle(flex=2.0), parent="root")
        tree.add_node("pad", PaddingStyle.uniform(10.0), parent="main")
        tree.add_node("inner", RowStyle(width=1000.0), parent="pad")
        tree.add_node("left", ExpandedStyle(), parent="inner")
        tree.add_node("right", ExpandedStyle(), parent="inner")

        layout_tree(tree, 600.0, 400.0)

        assert tree.transform("main").size == Size(width=400.0, height=400.0)
        assert tree.transform("main").position.x == pytest.approx(100.0)
        assert tree.transform("pad").size == Size(width=400.0, height=400.0)
        assert tree.transform("pad").position == Offset()
        assert tree.transform("inner").size == Size(width=380.0, height=380.0)
        assert tree.transform("left").size == Size(width=190.0, height=380.0)
        assert tree.transform("left").position.x == pytest.approx(-95.0)
        assert tree.transform("right").position.x == pytest.approx(95.0)

    def test_root_constraints_passed_through(self) -> None:
        tree = InMemoryTree()
        tree.add_node("root", RowStyle(width=10.0))
        LayoutEngine(tree).run(Constraints(min_width=40.0, max_width=80.0, min_height=0.0, max_height=30.0))
        assert tree.transform("root").size == Size(width=40.0, height=30.0)


class TestTraversal:
    """Tests for traversal properties."""

    def test_idempotent(self, flex_row_tree: InMemoryTree) -> None:
        engine = LayoutEngine(flex_row_tree)
        engine.run_for_viewport(900.0, 600.0)
        first = snapshot(flex_row_tree)
        engine.run_for_viewport(900.0, 600.0)
        assert snapshot(flex_row_tree) == first

    def test_multiple_roots(self) -> None:
        tree = InMemoryTree()
        tree.add_node("r1", RowStyle(width=50.0))
        tree.add_node("r2", PaddingStyle.uniform(1.0))
        tree.add_node("child", ExpandedStyle(), parent="r2")
        LayoutEngine(tree).run_for_viewport(100.0, 20.0)

        assert tree.transform("r1").size == Size(width=50.0, height=20.0)
        assert tree.transform("r2").size == Size(width=100.0, height=20.0)
        assert tree.transform("child").size == Size(width=98.0, height=18.0)

    def test_depth_untouched(self, flex_row_tree: InMemoryTree) -> None:
        LayoutEngine(flex_row_tree).run_for_viewport(900.0, 600.0)
        assert flex_row_tree.transform("root").depth == 0
        assert flex_row_tree.transform("a").depth == 1

    def test_dangling_child_does_not_affect_siblings(self, flex_row_tree: InMemoryTree) -> None:
        flex_row_tree.remove_node("b")
        written = LayoutEngine(flex_row_tree).run_for_viewport(900.0, 600.0)

        assert written == 3
        assert flex_row_tree.transform("b") is None
        assert flex_row_tree.transform("a").size.width == pytest.approx(225.0)
        assert flex_row_tree.transform("c").size.width == pytest.approx(675.0)
        assert flex_row_tree.transform("a").position.x == pytest.approx(-337.5)
        assert flex_row_tree.transform("c").position.x == pytest.approx(112.5)

    def test_orphans_of_removed_node_untouched(self) -> None:
        """Test children of a removed node are unreachable and keep their rectangles."""
        tree = InMemoryTree()
        tree.add_node("root", ExpandedStyle())
        tree.add_node("mid", ExpandedStyle(), parent="root")
        tree.add_node("leaf", ExpandedStyle(), parent="mid")
        tree.remove_node("mid")

        LayoutEngine(tree).run_for_viewport(10.0, 10.0)
        assert tree.transform("leaf").size == Size()
        assert tree.transform("leaf").position == Offset()

    def test_dangling_logged(self, padded_tree: InMemoryTree, caplog) -> None:
        padded_tree.remove_node("content")
        with caplog.at_level(logging.DEBUG, logger="rectlayout.engine.layout_engine"):
            written = LayoutEngine(padded_tree).run_for_viewport(50.0, 50.0)
        assert written == 1
        assert "dangling node id: content" in caplog.text

    def test_zero_flex_warns(self, caplog) -> None:
        tree = InMemoryTree()
        tree.add_node("root", RowStyle(width=100.0))
        tree.add_node("a", ExpandedStyle(flex=0.0), parent="root")
        with caplog.at_level(logging.WARNING):
            LayoutEngine(tree).run_for_viewport(100.0, 100.0)
        assert tree.transform("a").size == Size(width=0.0, height=100.0)
        assert "zero total flex" in caplog.text

    def test_empty_tree(self) -> None:
        assert LayoutEngine(InMemoryTree()).run_for_viewport(100.0, 100.0) == 0


class TestReentrancy:
    """Tests for the single in-flight pass rule."""

    def test_nested_run_rejected(self) -> None:
        class ReentrantStrategy(BaseLayoutStrategy):
            def layout(self, constraints, children, context):
                context.run(constraints)
                return constraints.biggest

        class ReentrantStyle(BaseModel):
            kind: Literal["reentrant"] = "reentrant"

        register_strategy("reentrant", ReentrantStrategy)
        try:
            tree = InMemoryTree()
            tree.add_node("root", ReentrantStyle())
            engine = LayoutEngine(tree)
            with pytest.raises(LayoutInProgressError):
                engine.run_for_viewport(10.0, 10.0)
            # Guard is released after the failed pass
            STRATEGIES["reentrant"] = STRATEGIES["expanded"]
            assert engine.run_for_viewport(10.0, 10.0) == 1
        finally:
            STRATEGIES.pop("reentrant", None)


class TestCustomStrategy:
    """Tests for registering extra strategies."""

    def test_registered_strategy_used(self) -> None:
        class SquareStrategy(BaseLayoutStrategy):
            def layout(self, constraints, children, context):
                side = min(constraints.max_width, constraints.max_height)
                for child_id in children:
                    size = context.layout_child(child_id, Constraints.tight(side, side))
                    if size is not None:
                        context.place(child_id, Offset(), size)
                return Size(width=side, height=side)

        class SquareStyle(BaseModel):
            kind: Literal["square"] = "square"

        register_strategy("square", SquareStrategy)
        try:
            tree = InMemoryTree()
            tree.add_node("root", SquareStyle())
            tree.add_node("child", ExpandedStyle(), parent="root")
            LayoutEngine(tree).run_for_viewport(300.0, 200.0)
            assert tree.transform("root").size == Size(width=200.0, height=200.0)
            assert tree.transform("child").size == Size(width=200.0, height=200.0)
        finally:
            STRATEGIES.pop("square", None)
