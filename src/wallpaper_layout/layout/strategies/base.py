"""
Module: layout.strategies.base

Purpose:
    Helpers shared by the placement strategies: the common strategy
    signature, large-image prioritisation and z-order assignment.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from wallpaper_layout.core.models import CanvasBounds, ImageDescriptor, PlacementRect

from ..config import LayoutConfig

StrategyFunction = Callable[
    [Sequence[ImageDescriptor], LayoutConfig, CanvasBounds, Optional[random.Random]],
    List[PlacementRect],
]


def prioritized(images: Sequence[ImageDescriptor], config: LayoutConfig) -> List[ImageDescriptor]:
    """
    Placement order for strategies that honour ``prioritize_large_images``.

    Sorts by intrinsic area, largest first; the sort is stable so equal
    areas keep caller order.
    """
    if config.prioritize_large_images:
        return sorted(images, key=lambda image: image.area, reverse=True)
    return list(images)


def with_stacking_order(
    placements: Sequence[PlacementRect],
    config: LayoutConfig,
) -> List[PlacementRect]:
    """Assign z-order: emission index when stacking, otherwise flat 0."""
    return [
        replace(rect, order=index if config.allow_stacking else 0)
        for index, rect in enumerate(placements)
    ]
