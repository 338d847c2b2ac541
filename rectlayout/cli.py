"""Command line entry point: lay out a scene and print placements as JSON."""

import json
import logging
import sys

from rectlayout.config import get_settings
from rectlayout.dsl.scene import build_tree, demo_scene, load_scene
from rectlayout.engine.layout_engine import LayoutEngine
from rectlayout.engine.placement import sync_placements

logger = logging.getLogger("rectlayout.cli")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    import argparse

    settings = get_settings()

    parser = argparse.ArgumentParser(description="Lay out a rectangle tree for a viewport")
    parser.add_argument("--scene", help="Scene JSON file (default: built-in demo scene)")
    parser.add_argument("--width", type=float, default=settings.viewport_width, help="Viewport width")
    parser.add_argument("--height", type=float, default=settings.viewport_height, help="Viewport height")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format=settings.log_format,
        stream=sys.stderr,
    )

    scene = load_scene(args.scene) if args.scene else demo_scene(args.width)
    tree = build_tree(scene)
    written = LayoutEngine(tree).run_for_viewport(args.width, args.height)
    logger.info(f"Laid out {written} nodes for viewport {args.width}x{args.height}")

    placements = [p.model_dump() for p in sync_placements(tree)]
    json.dump(placements, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
