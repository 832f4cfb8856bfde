"""
Module: layout.config

Purpose:
    Configuration for the layout engine. Defines spacing, margins,
    minimum rendered size and scaling limits shared by all strategies.

Key Classes:
    - LayoutConfig: Immutable per-call layout configuration
    - StackDirection: Preferred stacking direction
    - FloorPolicy: How the minimum-size floor is enforced

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - layout.strategies: Every placement strategy
    - layout.engine: Orchestrator
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Defaults of the wallpaper creator's auto-fit panel
DEFAULT_SPACING = 10
DEFAULT_MARGIN = 20
DEFAULT_MIN_IMAGE_SIZE = 100
DEFAULT_MAX_SCALE_DOWN = 0.3


class StackDirection(Enum):
    """Preferred stacking direction for overlapping placements."""

    AUTO = "auto"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class FloorPolicy(Enum):
    """
    How row-based strategies enforce ``min_image_size``.

    Attributes:
        UNIFORM: Rescale both axes by the same factor so the smaller side
                 reaches the floor. Ratio-exact.
        PER_AXIS: Clamp width and height independently. Distorts images
                  whose smaller side is under the floor; the engine then
                  falls back to the proportional grid.
    """

    UNIFORM = "uniform"
    PER_AXIS = "per-axis"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for a single layout call (immutable).

    Build a new config with ``dataclasses.replace`` to change settings.

    Attributes:
        spacing: Gap between neighbouring images (px)
        margin: Empty border around the canvas edge (px)
        min_image_size: Smallest rendered side (px)
        max_scale_down: Lowest row scale factor flow layouts may apply
        allow_stacking: Emit increasing z-order and enable organic jitter
        stack_direction: Preferred stacking direction (informational)
        balance_composition: Balance hint for callers (informational)
        prioritize_large_images: Place larger intrinsic areas first
        floor_policy: Minimum-size enforcement for flow rows
        seed: Seed for organic jitter when no generator is supplied

    Invariants:
        - spacing >= 0
        - margin >= 0
        - min_image_size >= 1
        - 0 < max_scale_down <= 1

    Example:
        >>> config = LayoutConfig(spacing=0, margin=0)
        >>> config.min_image_size
        100
    """

    spacing: float = DEFAULT_SPACING
    margin: float = DEFAULT_MARGIN
    min_image_size: float = DEFAULT_MIN_IMAGE_SIZE
    max_scale_down: float = DEFAULT_MAX_SCALE_DOWN

    # Stacking
    allow_stacking: bool = True
    stack_direction: StackDirection = StackDirection.AUTO

    # Composition hints
    balance_composition: bool = True
    prioritize_large_images: bool = False

    floor_policy: FloorPolicy = FloorPolicy.UNIFORM
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.spacing < 0:
            raise ValueError(f"spacing must be non-negative: {self.spacing}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.min_image_size < 1:
            raise ValueError(f"min_image_size must be >= 1: {self.min_image_size}")
        if not 0 < self.max_scale_down <= 1:
            raise ValueError(
                f"max_scale_down must be in (0, 1]: {self.max_scale_down}"
            )
        if not isinstance(self.stack_direction, StackDirection):
            raise ValueError(f"Invalid stack_direction: {self.stack_direction!r}")
        if not isinstance(self.floor_policy, FloorPolicy):
            raise ValueError(f"Invalid floor_policy: {self.floor_policy!r}")
