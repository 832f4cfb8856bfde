"""
Module: layout.scaling

Purpose:
    Ratio-preserving size computations shared by the strategies.

Key Functions:
    - scale_to_fit(): Fit an image into a box, then apply the size floor
    - apply_min_size(): Uniformly enlarge a size to meet the floor
"""

from __future__ import annotations

from typing import NamedTuple

from wallpaper_layout.core.models import ImageDescriptor


class Size(NamedTuple):
    """Width/height pair in canvas pixels."""

    width: float
    height: float


def apply_min_size(width: float, height: float, ratio: float, min_size: float) -> Size:
    """
    Enlarge a size so neither side is below ``min_size``.

    The smaller side (decided by the ratio) is set to the floor and the
    other side is derived from the ratio, so the result is ratio-exact.
    For a positive ratio-exact input this equals multiplying both sides
    by ``min_size / min(width, height)``.

    Args:
        width: Current width
        height: Current height
        ratio: Intrinsic width / height
        min_size: Floor for both sides

    Returns:
        The input unchanged if it already meets the floor
    """
    if width >= min_size and height >= min_size:
        return Size(width, height)
    if ratio < 1:
        return Size(min_size, min_size / ratio)
    return Size(min_size * ratio, min_size)


def scale_to_fit(
    image: ImageDescriptor,
    max_width: float,
    max_height: float,
    min_size: float,
) -> Size:
    """
    Largest ratio-exact size inside a box, floored at ``min_size``.

    Args:
        image: Source image
        max_width: Box width
        max_height: Box height
        min_size: Minimum rendered side

    Returns:
        Size with ``width / height == ratio``

    Boxes from degenerate canvases (zero or negative height) still give
    a ratio-exact size; the width binds unless the box ratio exceeds
    the image ratio.

    Example:
        >>> scale_to_fit(ImageDescriptor("a", 200, 100), 930, 1040, 100)
        Size(width=930, height=465.0)
    """
    ratio = image.aspect_ratio
    if max_height == 0:
        # width / 0 is +inf for a positive width
        height_binds = max_width > 0
    else:
        # max_height may be negative on degenerate canvases
        height_binds = max_width / max_height > ratio

    if height_binds:
        height = max_height
        width = height * ratio
    else:
        width = max_width
        height = width / ratio
    return apply_min_size(width, height, ratio, min_size)
