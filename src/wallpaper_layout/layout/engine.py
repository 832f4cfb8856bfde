"""
Module: layout.engine

Purpose:
    Orchestrate a layout call: check inputs, run the requested strategy,
    validate the result and fall back to the proportional grid when any
    image would be distorted.

    Strategy → Validate → (Grid fallback → Validate)

Key Functions:
    - apply_layout(): One-shot helper with default config and canvas

Key Classes:
    - LayoutEngine: Strategy dispatch with validation fallback
    - LayoutResult: Placements plus diagnostics

Dependencies:
    - layout.strategies: Strategy implementations
    - layout.validator: Ratio checks

Used By:
    - scripts.preview_layout: CLI preview
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Sequence, Tuple, Union

from wallpaper_layout.core.models import (
    CanvasBounds,
    ImageDescriptor,
    InvalidImageDescriptor,
    PlacementRect,
)

from .config import LayoutConfig
from .errors import LayoutInvariantError
from .strategies import LayoutStrategy, get_strategy_function
from .validator import ValidationReport, validate_layout

logger = logging.getLogger(__name__)

FALLBACK_STRATEGY = LayoutStrategy.PROPORTIONAL_GRID


@dataclass(frozen=True)
class LayoutResult:
    """
    Layout output with diagnostics (immutable).

    Attributes:
        placements: Validated placements in emission order
        requested: Strategy the caller asked for
        applied: Strategy that produced the placements
        warnings: Messages about fallbacks
        duration_seconds: Wall time of the call

    Example:
        >>> result = LayoutEngine().run("masonry", images, LayoutConfig(), CanvasBounds())
        >>> result.fell_back
        False
    """

    placements: Tuple[PlacementRect, ...]
    requested: LayoutStrategy
    applied: LayoutStrategy
    warnings: Tuple[str, ...] = ()
    duration_seconds: float = 0.0

    @property
    def fell_back(self) -> bool:
        """True when the grid fallback replaced the requested layout."""
        return self.requested is not self.applied

    @property
    def placement_count(self) -> int:
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        return not self.placements

    def bounding_box(self) -> Optional[Tuple[float, float, float, float]]:
        """(left, top, right, bottom) around all placements, or None."""
        if not self.placements:
            return None
        return (
            min(rect.x for rect in self.placements),
            min(rect.y for rect in self.placements),
            max(rect.right for rect in self.placements),
            max(rect.bottom for rect in self.placements),
        )


def _index_images(images: Sequence[ImageDescriptor]) -> Dict[Hashable, ImageDescriptor]:
    """
    Map ids to descriptors, rejecting bad input before any ratio math.

    Raises:
        InvalidImageDescriptor: Non-positive size or duplicate id
    """
    by_id: Dict[Hashable, ImageDescriptor] = {}
    for image in images:
        width = getattr(image, "width", None)
        height = getattr(image, "height", None)
        if not isinstance(image, ImageDescriptor) or not (width > 0 and height > 0):
            raise InvalidImageDescriptor(
                f"Invalid image descriptor: {image!r}",
                image_id=getattr(image, "image_id", None),
            )
        if image.image_id in by_id:
            raise InvalidImageDescriptor(
                f"Duplicate image id: {image.image_id!r}", image_id=image.image_id
            )
        by_id[image.image_id] = image
    return by_id


class LayoutEngine:
    """
    Runs placement strategies with ratio validation.

    Stateless between calls; one instance can be shared freely.

    Args:
        validate: Validate strategy output and fall back to the grid.
                  Disable only to inspect raw strategy output.
    """

    def __init__(self, validate: bool = True):
        self.validate = validate

    def run(
        self,
        strategy: Union[str, LayoutStrategy],
        images: Sequence[ImageDescriptor],
        config: LayoutConfig,
        bounds: CanvasBounds,
        rng: Optional[random.Random] = None,
    ) -> LayoutResult:
        """
        Compute a layout.

        Args:
            strategy: Strategy enum member or name
            images: Images in caller order
            config: Layout configuration
            bounds: Canvas size
            rng: Random source for the organic strategy

        Returns:
            LayoutResult whose placements all pass validation

        Raises:
            UnknownStrategyError: Unrecognised strategy name
            InvalidImageDescriptor: Bad dimensions or duplicate ids
            LayoutInvariantError: The grid fallback also failed validation
        """
        start_time = time.perf_counter()
        requested = LayoutStrategy.from_name(strategy)
        by_id = _index_images(images)

        if not images:
            return LayoutResult(placements=(), requested=requested, applied=requested)

        placements = get_strategy_function(requested)(images, config, bounds, rng)
        applied = requested
        warnings: List[str] = []

        if self.validate:
            report = validate_layout(placements, by_id)
            if not report.is_valid:
                message = (
                    f"{requested.value} layout failed ratio validation "
                    f"({report.summary()}); using {FALLBACK_STRATEGY.value}"
                )
                logger.warning(message)
                warnings.append(message)
                placements = self._run_fallback(images, config, bounds, by_id)
                applied = FALLBACK_STRATEGY

        duration = time.perf_counter() - start_time
        logger.info(
            f"Applied {applied.value} layout to {len(placements)} images "
            f"on {bounds.width}x{bounds.height} in {duration * 1000:.1f}ms"
        )
        return LayoutResult(
            placements=tuple(placements),
            requested=requested,
            applied=applied,
            warnings=tuple(warnings),
            duration_seconds=duration,
        )

    def apply(
        self,
        strategy: Union[str, LayoutStrategy],
        images: Sequence[ImageDescriptor],
        config: LayoutConfig,
        bounds: CanvasBounds,
        rng: Optional[random.Random] = None,
    ) -> List[PlacementRect]:
        """Like run(), returning only the placement list."""
        return list(self.run(strategy, images, config, bounds, rng).placements)

    def _run_fallback(
        self,
        images: Sequence[ImageDescriptor],
        config: LayoutConfig,
        bounds: CanvasBounds,
        by_id: Dict[Hashable, ImageDescriptor],
    ) -> List[PlacementRect]:
        placements = get_strategy_function(FALLBACK_STRATEGY)(images, config, bounds, None)
        report: ValidationReport = validate_layout(placements, by_id)
        if not report.is_valid:
            logger.error(f"Fallback layout failed ratio validation: {report.summary()}")
            raise LayoutInvariantError(
                f"{FALLBACK_STRATEGY.value} fallback distorted images: {report.summary()}",
                report,
            )
        return placements


def apply_layout(
    strategy: Union[str, LayoutStrategy],
    images: Sequence[ImageDescriptor],
    config: Optional[LayoutConfig] = None,
    bounds: Optional[CanvasBounds] = None,
    rng: Optional[random.Random] = None,
) -> List[PlacementRect]:
    """
    Lay out images with default settings where none are given.

    Example:
        >>> rects = apply_layout("proportional-grid", [ImageDescriptor("a", 1600, 900)])
        >>> len(rects)
        1
    """
    return LayoutEngine().apply(
        strategy,
        images,
        config or LayoutConfig(),
        bounds or CanvasBounds(),
        rng,
    )
