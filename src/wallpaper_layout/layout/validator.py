"""
Module: layout.validator

Purpose:
    Ratio-preservation checks for computed layouts. A placement passes
    when its rendered width/height is within RATIO_TOLERANCE of the
    source image's intrinsic ratio.

Key Functions:
    - validate_rect(): Check one placement against its source
    - validate_layout(): Check a whole layout, collecting failures

Key Classes:
    - ValidationReport: Outcome of validate_layout()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, List, Mapping, Sequence

from wallpaper_layout.core.models import ImageDescriptor, PlacementRect

# Absolute tolerance on width/height
RATIO_TOLERANCE = 0.01


def validate_rect(rect: PlacementRect, image: ImageDescriptor) -> bool:
    """
    Check that a placement keeps its source image's proportions.

    Args:
        rect: Placement to check
        image: Source image the placement was computed for

    Returns:
        True if |rect ratio - intrinsic ratio| <= RATIO_TOLERANCE
    """
    if rect.width <= 0 or rect.height <= 0:
        return False
    return abs(rect.width / rect.height - image.aspect_ratio) <= RATIO_TOLERANCE


@dataclass(frozen=True)
class RatioViolation:
    """A placement whose rendered ratio differs from the source."""

    image_id: Hashable
    expected_ratio: float
    actual_ratio: float

    def __str__(self) -> str:
        return (
            f"{self.image_id!r}: expected ratio {self.expected_ratio:.4f}, "
            f"got {self.actual_ratio:.4f}"
        )


@dataclass(frozen=True)
class ValidationReport:
    """
    Result of validating a layout.

    Attributes:
        checked: Number of placements checked
        violations: Distorted placements
        missing: Placement ids with no matching source image
    """

    checked: int
    violations: tuple[RatioViolation, ...] = ()
    missing: tuple[Hashable, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.violations and not self.missing

    def summary(self) -> str:
        """One-line description for log messages."""
        if self.is_valid:
            return f"{self.checked} placements preserve their aspect ratio"
        parts: List[str] = []
        if self.violations:
            parts.append(f"{len(self.violations)} distorted ({self.violations[0]})")
        if self.missing:
            parts.append(f"{len(self.missing)} without source image")
        return f"{self.checked} placements checked: " + ", ".join(parts)


def validate_layout(
    placements: Sequence[PlacementRect],
    images: Mapping[Hashable, ImageDescriptor],
) -> ValidationReport:
    """
    Validate every placement in a layout.

    Args:
        placements: Layout output
        images: Source images keyed by image_id

    Returns:
        ValidationReport listing any failures
    """
    violations: List[RatioViolation] = []
    missing: List[Hashable] = []

    for rect in placements:
        image = images.get(rect.image_id)
        if image is None:
            missing.append(rect.image_id)
            continue
        if not validate_rect(rect, image):
            violations.append(
                RatioViolation(rect.image_id, image.aspect_ratio, rect.aspect_ratio)
            )

    return ValidationReport(
        checked=len(placements),
        violations=tuple(violations),
        missing=tuple(missing),
    )
