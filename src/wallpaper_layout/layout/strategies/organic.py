"""
Module: layout.strategies.organic

Purpose:
    Organic stack layout. Starts from the masonry layout and nudges every
    image after the first by a small random offset so the result looks
    like loosely stacked photos. Positions are clamped inside the margins.

Key Functions:
    - organic_layout(): Strategy entry point

Randomness:
    Offsets come from the ``rng`` argument, else ``random.Random(config.seed)``.
    Each jittered placement draws x then y.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import List, Optional, Sequence

from wallpaper_layout.core.models import CanvasBounds, ImageDescriptor, PlacementRect

from ..config import LayoutConfig
from .masonry import masonry_layout

# Offsets span [-spacing * 0.25, +spacing * 0.25]
JITTER_FRACTION = 0.5


def _clamp(value: float, low: float, high: float) -> float:
    # low wins when the image is larger than the free span
    return max(low, min(value, high))


def organic_layout(
    images: Sequence[ImageDescriptor],
    config: LayoutConfig,
    bounds: CanvasBounds,
    rng: Optional[random.Random] = None,
) -> List[PlacementRect]:
    """
    Organic stack strategy.

    Jitter only applies when ``allow_stacking`` is set; clamping applies
    to every placement.

    Args:
        images: Images to place
        config: Layout configuration
        bounds: Canvas size
        rng: Random source for offsets

    Returns:
        Masonry placements with jittered positions
    """
    if rng is None:
        rng = random.Random(config.seed)

    margin = config.margin
    max_offset = config.spacing * JITTER_FRACTION
    placements: List[PlacementRect] = []

    for index, rect in enumerate(masonry_layout(images, config, bounds)):
        x, y = rect.x, rect.y
        if config.allow_stacking and index > 0:
            x += (rng.random() - 0.5) * max_offset
            y += (rng.random() - 0.5) * max_offset

        x = _clamp(x, margin, bounds.width - rect.width - margin)
        y = _clamp(y, margin, bounds.height - rect.height - margin)
        placements.append(replace(rect, x=x, y=y))

    return placements
