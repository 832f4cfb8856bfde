"""
Module: layout.strategies.masonry

Purpose:
    Masonry layout (column packer). Images fill fixed-width columns,
    each going to whichever column is currently shortest.

Key Functions:
    - column_count(): Number of columns for n images
    - masonry_layout(): Greedy shortest-column placement
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Sequence

from wallpaper_layout.core.models import CanvasBounds, ImageDescriptor, PlacementRect

from ..config import LayoutConfig
from ..scaling import scale_to_fit
from .base import prioritized, with_stacking_order

logger = logging.getLogger(__name__)

MIN_COLUMNS = 2
MAX_COLUMNS = 5
# Column images may be up to this many column widths tall
MAX_HEIGHT_FACTOR = 2


def column_count(image_count: int) -> int:
    """ceil(sqrt(n)) clamped to [2, 5]."""
    return max(MIN_COLUMNS, min(MAX_COLUMNS, math.ceil(math.sqrt(image_count))))


def masonry_layout(
    images: Sequence[ImageDescriptor],
    config: LayoutConfig,
    bounds: CanvasBounds,
    rng: Optional[random.Random] = None,
) -> List[PlacementRect]:
    """
    Masonry strategy.

    Ties between equally short columns go to the lowest column index.
    Ratio-exact: sizes come from scale_to_fit only.

    Args:
        images: Images to place
        config: Layout configuration
        bounds: Canvas size
        rng: Unused; accepted for the common strategy signature

    Returns:
        Placements in emission order
    """
    if not images:
        return []

    margin = config.margin
    spacing = config.spacing
    columns = column_count(len(images))
    column_width = (bounds.available_width(margin) - (columns - 1) * spacing) / columns
    column_heights = [margin] * columns

    placements: List[PlacementRect] = []
    for image in prioritized(images, config):
        # min() returns the first minimum, i.e. the lowest index on ties
        column = min(range(columns), key=column_heights.__getitem__)
        size = scale_to_fit(
            image,
            column_width,
            column_width * MAX_HEIGHT_FACTOR,
            config.min_image_size,
        )
        placements.append(
            PlacementRect(
                image.image_id,
                x=margin + column * (column_width + spacing),
                y=column_heights[column],
                width=size.width,
                height=size.height,
            )
        )
        column_heights[column] += size.height + spacing

    logger.debug(
        f"Masonry: {columns} columns of {column_width:.1f}px, "
        f"heights={[round(h, 1) for h in column_heights]}"
    )
    return with_stacking_order(placements, config)
