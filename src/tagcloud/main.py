"""Main entry point for tagcloud."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import CloudConfig, ConfigLoader, RandomSizes, RenderOptions
from .core.geometry import Point, Rectangle
from .layout import INDEX_KINDS, cloud_bounds, find_intersections, max_distance_from_center, tightness_ratio
from .render import CloudDrawer


def _parse_pair(value: str, separator: str, name: str) -> tuple[int, int]:
    """Parse strings like '400,300' or '1920x1080'."""
    parts = value.split(separator)
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"{name} must look like A{separator}B, got '{value}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"{name} must contain integers, got '{value}'") from None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tagcloud",
        description="Tagcloud - Circular Cloud Rectangle Layouter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help="YAML cloud definition (command line options override it)",
    )
    parser.add_argument(
        "-n", "--count",
        type=int,
        help="Number of random rectangles to lay out",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for generated sizes",
    )
    parser.add_argument(
        "--min-size",
        type=int,
        help="Smallest generated width/height (default: 1 or the config value)",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        help="Largest generated width/height (default: 100 or the config value)",
    )
    parser.add_argument(
        "--center",
        metavar="X,Y",
        type=lambda v: _parse_pair(v, ",", "center"),
        help="Cloud center (default: 0,0 or the config value)",
    )
    parser.add_argument(
        "--index",
        choices=INDEX_KINDS,
        help="Collision index to use (default: brute)",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Place the largest rectangles first",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render the layout to an image file",
    )
    parser.add_argument(
        "--resolution",
        metavar="WxH",
        type=lambda v: _parse_pair(v, "x", "resolution"),
        help="Render resolution (default: 800x800 or the config value)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every placement",
    )
    args = parser.parse_args(argv)
    args.parser = parser
    return args


def build_config(args: argparse.Namespace) -> CloudConfig:
    """Merge the optional config file with command line overrides."""
    config = ConfigLoader().load(args.config) if args.config else CloudConfig()

    if args.count is not None:
        config.sizes = None
        config.random = RandomSizes(count=args.count)
    random_overrides = {
        key: value
        for key, value in (
            ("seed", args.seed),
            ("min_size", args.min_size),
            ("max_size", args.max_size),
        )
        if value is not None
    }
    if random_overrides:
        if config.random is None:
            raise ValueError(
                "--seed, --min-size and --max-size need random sizes (use -n or a config 'random' section)"
            )
        for key, value in random_overrides.items():
            setattr(config.random, key, value)
    if args.center is not None:
        config.center = Point(*args.center)
    if args.index is not None:
        config.index_type = args.index
        if args.index != "grid":
            config.index_options = {}
    if args.sort:
        config.sort = "largest_first"
    if args.resolution is not None:
        width, height = args.resolution
        config.render = RenderOptions(
            width=width,
            height=height,
            background=config.render.background,
            outline=config.render.outline,
            margin=config.render.margin,
        )
    return config


def summarize(center: Point, rectangles: Sequence[Rectangle]) -> list[str]:
    """Describe a finished layout as printable lines."""
    lines = [f"Placed {len(rectangles)} rectangles around ({center.x}, {center.y})"]
    if not rectangles:
        return lines
    bounds = cloud_bounds(rectangles)
    lines.append(
        f"Bounds: ({bounds.left}, {bounds.top}) - ({bounds.right}, {bounds.bottom}) "
        f"[{bounds.width}x{bounds.height}]"
    )
    lines.append(f"Max distance from center: {max_distance_from_center(center, rectangles):.1f}")
    lines.append(f"Tightness ratio: {tightness_ratio(center, rectangles):.3f}")
    overlaps = find_intersections(rectangles)
    if overlaps:
        lines.append(f"WARNING: {len(overlaps)} overlapping pairs")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tagcloud layouter."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        sizes = config.resolve_sizes()
        layouter = config.create_layouter()
        drawer = CloudDrawer(
            width=config.render.width,
            height=config.render.height,
            background=config.render.background,
            outline=config.render.outline,
            margin=config.render.margin,
        ) if args.render else None
        # InvalidSizeError is a ValueError
        for size in sizes:
            layouter.place_next(size)
    except (FileNotFoundError, ValueError) as e:
        args.parser.error(str(e))

    print("Tagcloud - Circular Cloud Rectangle Layouter")
    print("=" * 44)

    rectangles = layouter.rectangles
    for line in summarize(layouter.center, rectangles):
        print(line)

    if drawer is not None:
        output_path = Path(args.render)
        print(f"\nRendering to {output_path} ({drawer.width}x{drawer.height})...")
        drawer.save(rectangles, layouter.center, output_path)
        print(f"Saved render to {output_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
