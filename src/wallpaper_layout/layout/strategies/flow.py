"""
Module: layout.strategies.flow

Purpose:
    Natural flow layout (row packer). Images are laid left to right at a
    natural width, wrapped into rows when the canvas width runs out, and
    every row is then scaled by one factor to fit the available width.

Key Functions:
    - plan_rows(): Row-break pass (natural sizes, no scaling)
    - flow_layout(): Full strategy with row finalisation

Algorithm:
    1. natural width = min(intrinsic width, 30% of available width),
       floored up front under the uniform floor
    2. Break the row when the next image would pass the right margin
    3. Row scale = max(max_scale_down, min(1, free width / natural widths))
    4. Enforce min_image_size according to config.floor_policy

Used By:
    - layout.strategies.grouped: One flow layout per ratio group
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from wallpaper_layout.core.models import CanvasBounds, ImageDescriptor, PlacementRect

from ..config import FloorPolicy, LayoutConfig
from ..scaling import Size, apply_min_size
from .base import prioritized, with_stacking_order

logger = logging.getLogger(__name__)

# Largest share of the available width one image may take before scaling
NATURAL_WIDTH_FRACTION = 0.3


@dataclass(frozen=True)
class RowItem:
    """
    Image with its pre-scale row size.

    Under the uniform floor the size is already floored, so the row-break
    test sees the width the image will actually take.
    """

    image: ImageDescriptor
    natural_width: float
    natural_height: float


@dataclass
class FlowRow:
    """
    One row of the flow layout before finalisation.

    Attributes:
        y: Top edge of the row
        items: Images in left-to-right order
    """

    y: float
    items: List[RowItem] = field(default_factory=list)

    @property
    def natural_width(self) -> float:
        """Sum of natural widths (spacing excluded)."""
        return sum(item.natural_width for item in self.items)

    @property
    def natural_height(self) -> float:
        """Tallest natural height in the row."""
        return max((item.natural_height for item in self.items), default=0.0)


def plan_rows(
    images: Sequence[ImageDescriptor],
    config: LayoutConfig,
    bounds: CanvasBounds,
) -> List[FlowRow]:
    """
    Split images into rows using their natural sizes.

    Row ``y`` values here advance by natural row heights; flow_layout
    recomputes them from finalised heights under the uniform floor.
    Under the uniform floor natural sizes are floored first, so rows of
    small images wrap instead of running past the right margin.

    Args:
        images: Images in placement order
        config: Layout configuration
        bounds: Canvas size

    Returns:
        Rows in top-to-bottom order (empty list for no images)
    """
    margin = config.margin
    available_width = bounds.available_width(margin)

    rows: List[FlowRow] = []
    row = FlowRow(y=margin)
    row_x = margin

    for image in images:
        natural_width = min(image.width, available_width * NATURAL_WIDTH_FRACTION)
        natural_height = natural_width / image.aspect_ratio
        if config.floor_policy is FloorPolicy.UNIFORM:
            natural_width, natural_height = apply_min_size(
                natural_width, natural_height, image.aspect_ratio, config.min_image_size
            )

        if row.items and row_x + natural_width > available_width + margin:
            rows.append(row)
            row = FlowRow(y=row.y + row.natural_height + config.spacing)
            row_x = margin

        row.items.append(RowItem(image, natural_width, natural_height))
        row_x += natural_width + config.spacing

    if row.items:
        rows.append(row)
    return rows


def row_scale(row: FlowRow, available_width: float, config: LayoutConfig) -> float:
    """Single scale factor applied to every image in a row."""
    free_width = available_width - (len(row.items) - 1) * config.spacing
    total = row.natural_width
    fit = min(1.0, free_width / total) if total > 0 else 1.0
    return max(config.max_scale_down, fit)


def _floored(width: float, height: float, ratio: float, config: LayoutConfig) -> Size:
    if config.floor_policy is FloorPolicy.PER_AXIS:
        return Size(max(config.min_image_size, width), max(config.min_image_size, height))
    return apply_min_size(width, height, ratio, config.min_image_size)


def _finalize_row(
    row: FlowRow,
    y: float,
    available_width: float,
    config: LayoutConfig,
) -> List[PlacementRect]:
    scale = row_scale(row, available_width, config)
    placements: List[PlacementRect] = []
    x = config.margin

    for item in row.items:
        width = item.natural_width * scale
        height = item.natural_height * scale
        size = _floored(width, height, item.image.aspect_ratio, config)
        placements.append(
            PlacementRect(item.image.image_id, x=x, y=y, width=size.width, height=size.height)
        )
        # Per-axis advances by the unfloored width
        advance = width if config.floor_policy is FloorPolicy.PER_AXIS else size.width
        x += advance + config.spacing

    logger.debug(f"Row at y={y:.1f}: {len(row.items)} images, scale={scale:.3f}")
    return placements


def layout_flow_rows(
    images: Sequence[ImageDescriptor],
    config: LayoutConfig,
    bounds: CanvasBounds,
) -> List[PlacementRect]:
    """Flow placements without z-order assignment."""
    available_width = bounds.available_width(config.margin)
    placements: List[PlacementRect] = []
    y = config.margin

    for row in plan_rows(prioritized(images, config), config, bounds):
        if config.floor_policy is FloorPolicy.PER_AXIS:
            y = row.y
        row_placements = _finalize_row(row, y, available_width, config)
        placements.extend(row_placements)
        y += max(rect.height for rect in row_placements) + config.spacing

    return placements


def flow_layout(
    images: Sequence[ImageDescriptor],
    config: LayoutConfig,
    bounds: CanvasBounds,
    rng: Optional[random.Random] = None,
) -> List[PlacementRect]:
    """
    Natural flow strategy.

    Args:
        images: Images to place
        config: Layout configuration
        bounds: Canvas size
        rng: Unused; accepted for the common strategy signature

    Returns:
        Placements in row-major emission order
    """
    return with_stacking_order(layout_flow_rows(images, config, bounds), config)
