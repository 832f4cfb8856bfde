"""
Module: layout.strategies.grid

Purpose:
    Proportional grid layout. Splits the available area into an even
    row/column grid and centres each image, ratio-exact, in its cell.
    This is the engine's fallback when another strategy distorts images.

Key Functions:
    - grid_dimensions(): (cols, rows) for n images
    - grid_cells(): Cell rectangles in row-major order
    - proportional_grid_layout(): Strategy entry point
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from wallpaper_layout.core.models import CanvasBounds, ImageDescriptor, PlacementRect

from ..config import LayoutConfig
from ..scaling import scale_to_fit
from .base import with_stacking_order


@dataclass(frozen=True)
class GridCell:
    """Grid cell in canvas coordinates."""

    row: int
    col: int
    x: float
    y: float
    width: float
    height: float


def grid_dimensions(image_count: int) -> Tuple[int, int]:
    """
    Columns and rows for a near-square grid.

    Example:
        >>> grid_dimensions(5)
        (3, 2)
    """
    if image_count <= 0:
        return (0, 0)
    cols = math.ceil(math.sqrt(image_count))
    rows = math.ceil(image_count / cols)
    return (cols, rows)


def grid_cells(
    image_count: int,
    config: LayoutConfig,
    bounds: CanvasBounds,
) -> List[GridCell]:
    """First ``image_count`` cells of the grid, row-major."""
    cols, rows = grid_dimensions(image_count)
    if image_count <= 0:
        return []

    margin = config.margin
    spacing = config.spacing
    cell_width = (bounds.available_width(margin) - (cols - 1) * spacing) / cols
    cell_height = (bounds.available_height(margin) - (rows - 1) * spacing) / rows

    cells = []
    for index in range(image_count):
        row, col = divmod(index, cols)
        cells.append(
            GridCell(
                row=row,
                col=col,
                x=margin + col * (cell_width + spacing),
                y=margin + row * (cell_height + spacing),
                width=cell_width,
                height=cell_height,
            )
        )
    return cells


def proportional_grid_layout(
    images: Sequence[ImageDescriptor],
    config: LayoutConfig,
    bounds: CanvasBounds,
    rng: Optional[random.Random] = None,
) -> List[PlacementRect]:
    """
    Proportional grid strategy.

    Images keep caller order (no large-image prioritisation).

    Args:
        images: Images to place
        config: Layout configuration
        bounds: Canvas size
        rng: Unused; accepted for the common strategy signature

    Returns:
        One placement per image, centred in its cell
    """
    placements: List[PlacementRect] = []
    for image, cell in zip(images, grid_cells(len(images), config, bounds)):
        size = scale_to_fit(image, cell.width, cell.height, config.min_image_size)
        placements.append(
            PlacementRect(
                image.image_id,
                x=cell.x + (cell.width - size.width) / 2,
                y=cell.y + (cell.height - size.height) / 2,
                width=size.width,
                height=size.height,
            )
        )
    return with_stacking_order(placements, config)
