"""
Module: layout.strategies.grouped

Purpose:
    Aspect-grouped layout. Images are bucketed by aspect-ratio category
    and each bucket is laid out as its own flow block; blocks are stacked
    top to bottom in first-seen group order.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from wallpaper_layout.core.models import CanvasBounds, ImageDescriptor, PlacementRect

from ..classification import partition_by_group
from ..config import LayoutConfig
from .base import with_stacking_order
from .flow import layout_flow_rows

logger = logging.getLogger(__name__)

# Gap between group blocks, in multiples of config.spacing
GROUP_GAP_FACTOR = 2


def aspect_grouped_layout(
    images: Sequence[ImageDescriptor],
    config: LayoutConfig,
    bounds: CanvasBounds,
    rng: Optional[random.Random] = None,
) -> List[PlacementRect]:
    """
    Aspect-grouped strategy.

    Args:
        images: Images to place
        config: Layout configuration
        bounds: Canvas size
        rng: Unused; accepted for the common strategy signature

    Returns:
        Placements grouped by ratio category
    """
    placements: List[PlacementRect] = []
    current_y = config.margin

    for group, group_images in partition_by_group(images).items():
        block = layout_flow_rows(group_images, config, bounds)
        top = min(rect.y for rect in block)
        block_height = max(rect.bottom for rect in block) - top

        placements.extend(rect.translated(dy=current_y - top) for rect in block)
        logger.debug(
            f"Group {group!r}: {len(group_images)} images at y={current_y:.1f}, "
            f"height={block_height:.1f}"
        )
        current_y += block_height + GROUP_GAP_FACTOR * config.spacing

    return with_stacking_order(placements, config)
