"""
Module: layout.classification

Purpose:
    Aspect-ratio classification for source images. Maps each intrinsic
    ratio onto a named category from a fixed, ordered catalogue and
    partitions image lists by category group.

Key Functions:
    - classify(): First matching category for an image
    - partition_by_group(): Group images by category, order preserved
    - describe_ratio(): Thumbnail label such as "Wide (1.78)"
    - summarize_ratios(): Group -> image count

Dependencies:
    - core.models.images: ImageDescriptor

Used By:
    - layout.strategies.grouped: Aspect-grouped layout
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from wallpaper_layout.core.models import ImageDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AspectRatioCategory:
    """
    Named aspect-ratio band.

    Attributes:
        name: Display name
        ratio: Nominal width/height ratio (None for synthetic fallbacks)
        tolerance: Maximum absolute distance from ratio to match
        group: Grouping key
    """

    name: str
    ratio: Optional[float]
    tolerance: float
    group: str

    def matches(self, ratio: float) -> bool:
        """Check if ratio lies within this band (inclusive)."""
        if self.ratio is None:
            return False
        return abs(ratio - self.ratio) <= self.tolerance


# Checked in order - first match wins, so overlapping bands resolve to
# the earlier (narrower) entry.
CATEGORIES: tuple[AspectRatioCategory, ...] = (
    AspectRatioCategory("Square", 1.0, 0.05, "square"),
    AspectRatioCategory("Portrait", 0.75, 0.15, "portrait"),
    AspectRatioCategory("Landscape", 1.33, 0.15, "landscape"),
    AspectRatioCategory("Wide", 1.78, 0.2, "wide"),
    AspectRatioCategory("Panoramic", 2.5, 0.5, "panoramic"),
    AspectRatioCategory("Ultra-wide", 3.5, 1.0, "ultrawide"),
)

FALLBACK_LANDSCAPE = AspectRatioCategory("Landscape", None, 0.0, "landscape")
FALLBACK_PORTRAIT = AspectRatioCategory("Portrait", None, 0.0, "portrait")


def classify(image: ImageDescriptor) -> AspectRatioCategory:
    """
    Classify an image by its intrinsic aspect ratio.

    Total and deterministic: ratios outside every band fall back to a
    synthetic Landscape (ratio > 1) or Portrait category.

    Args:
        image: Source image

    Returns:
        Matching AspectRatioCategory

    Example:
        >>> classify(ImageDescriptor("a", 1920, 1080)).name
        'Wide'
        >>> classify(ImageDescriptor("b", 100, 1000)).name
        'Portrait'
    """
    ratio = image.aspect_ratio
    for category in CATEGORIES:
        if category.matches(ratio):
            return category
    return FALLBACK_LANDSCAPE if ratio > 1 else FALLBACK_PORTRAIT


def partition_by_group(
    images: Iterable[ImageDescriptor],
) -> Dict[str, List[ImageDescriptor]]:
    """
    Bucket images by category group.

    Groups appear in first-seen order and each bucket keeps input order.

    Args:
        images: Images in caller order

    Returns:
        Dict mapping group key to its images
    """
    groups: Dict[str, List[ImageDescriptor]] = {}
    for image in images:
        groups.setdefault(classify(image).group, []).append(image)
    logger.debug(
        "Partitioned images into groups: "
        + ", ".join(f"{g}={len(items)}" for g, items in groups.items())
    )
    return groups


def describe_ratio(image: ImageDescriptor) -> str:
    """Thumbnail label, e.g. ``"Landscape (1.33)"``."""
    return f"{classify(image).name} ({image.aspect_ratio:.2f})"


def summarize_ratios(images: Iterable[ImageDescriptor]) -> Dict[str, int]:
    """Count images per category group, in first-seen order."""
    return {group: len(items) for group, items in partition_by_group(images).items()}
