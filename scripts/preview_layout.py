"""
Preview a layout for a folder of images.

Reads image sizes, runs the layout engine and prints the placements as
JSON. Optionally writes a wireframe PNG of the result.

Usage:
    python scripts/preview_layout.py photos/ --strategy masonry --canvas "Desktop QHD"
    python scripts/preview_layout.py a.jpg b.png --canvas 1080x1920 --preview out.png
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

# Add src to path so we can import wallpaper_layout
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from wallpaper_layout.core.models import CanvasBounds, CANVAS_PRESETS
from wallpaper_layout.images import describe_images, find_image_files, ImageNotFoundError
from wallpaper_layout.layout import (
    FloorPolicy,
    InvalidImageDescriptor,
    LayoutConfig,
    LayoutEngine,
    LayoutError,
    LayoutStrategy,
    summarize_ratios,
)
from wallpaper_layout.layout.visualizer import save_layout_preview

logger = logging.getLogger("preview_layout")


def _parse_canvas(value: str) -> CanvasBounds:
    try:
        return CanvasBounds.from_preset(value)
    except KeyError:
        pass
    try:
        return CanvasBounds.parse(value)
    except ValueError:
        presets = ", ".join(p.name for p in CANVAS_PRESETS)
        raise argparse.ArgumentTypeError(
            f"{value!r} is neither WIDTHxHEIGHT nor a preset ({presets})"
        )


def _collect_paths(inputs: List[Path]) -> List[Path]:
    paths: List[Path] = []
    for item in inputs:
        if item.is_dir():
            paths.extend(find_image_files(item))
        else:
            paths.append(item)
    return paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview an aspect-ratio-preserving layout")
    parser.add_argument("inputs", nargs="+", type=Path, help="Image files or directories")
    parser.add_argument(
        "--strategy",
        default=LayoutStrategy.FLOW.value,
        choices=[s.value for s in LayoutStrategy],
        help="Placement strategy",
    )
    parser.add_argument("--canvas", type=_parse_canvas, default=CanvasBounds(), help="Preset name or WIDTHxHEIGHT")
    parser.add_argument("--spacing", type=float, default=LayoutConfig.spacing)
    parser.add_argument("--margin", type=float, default=LayoutConfig.margin)
    parser.add_argument("--min-size", type=float, default=LayoutConfig.min_image_size)
    parser.add_argument("--max-scale-down", type=float, default=LayoutConfig.max_scale_down)
    parser.add_argument("--no-stacking", action="store_true", help="Flat z-order, no organic jitter")
    parser.add_argument("--prioritize-large", action="store_true", help="Place large images first")
    parser.add_argument("--per-axis-floor", action="store_true", help="Clamp each side to the minimum size independently")
    parser.add_argument("--seed", type=int, default=None, help="Seed for organic jitter")
    parser.add_argument("--preview", type=Path, help="Write a wireframe PNG here")
    parser.add_argument("--preview-scale", type=float, default=0.5)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = replace(
            LayoutConfig(),
            spacing=args.spacing,
            margin=args.margin,
            min_image_size=args.min_size,
            max_scale_down=args.max_scale_down,
            allow_stacking=not args.no_stacking,
            prioritize_large_images=args.prioritize_large,
            floor_policy=FloorPolicy.PER_AXIS if args.per_axis_floor else FloorPolicy.UNIFORM,
            seed=args.seed,
        )
        images = describe_images(_collect_paths(args.inputs))
    except (ValueError, ImageNotFoundError) as e:
        logger.error(str(e))
        return 2

    logger.info(
        f"{len(images)} images: "
        + ", ".join(f"{group}={count}" for group, count in summarize_ratios(images).items())
    )

    try:
        result = LayoutEngine().run(args.strategy, images, config, args.canvas)
    except InvalidImageDescriptor as e:
        logger.error(f"Invalid input: {e}")
        return 2
    except LayoutError as e:
        logger.error(f"Layout failed: {e}")
        return 1

    payload = {
        "canvas": {"width": args.canvas.width, "height": args.canvas.height},
        "requested": result.requested.value,
        "applied": result.applied.value,
        "warnings": list(result.warnings),
        "placements": [rect.to_dict() for rect in result.placements],
    }
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")

    if args.preview:
        save_layout_preview(
            result.placements,
            args.canvas,
            args.preview,
            margin=config.margin,
            scale=args.preview_scale,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
