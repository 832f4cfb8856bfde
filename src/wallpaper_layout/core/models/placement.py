"""
Module: core.models.placement

Purpose:
    Provides PlacementRect - one positioned image in a computed layout.
    Layouts are recomputed on every call; rects carry no state beyond
    their coordinates and draw order.

Key Classes:
    - PlacementRect: Image rectangle on the canvas with z-order

Dependencies:
    - dataclasses (std)

Used By:
    - layout.strategies: Produced by every strategy
    - layout.validator: Checked against source ratios
    - layout.visualizer: Drawn as wireframes
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Hashable


@dataclass(frozen=True, slots=True)
class PlacementRect:
    """
    Positioned image rectangle.

    Coordinates are floats in canvas pixels; the rendering collaborator
    decides how to round them.

    Attributes:
        image_id: Identifier of the source ImageDescriptor
        x: Left edge
        y: Top edge
        width: Rendered width
        height: Rendered height
        order: Z-index (emission index when stacking, else 0)

    Example:
        >>> rect = PlacementRect("a", x=20, y=20, width=400, height=225)
        >>> rect.bottom
        245
    """

    image_id: Hashable
    x: float
    y: float
    width: float
    height: float
    order: int = 0

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (y + height)."""
        return self.y + self.height

    @property
    def aspect_ratio(self) -> float:
        """Rendered width / height (inf for a zero-height rect)."""
        if self.height == 0:
            return float("inf")
        return self.width / self.height

    def translated(self, dx: float = 0, dy: float = 0) -> PlacementRect:
        """Return a copy moved by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def to_dict(self) -> dict:
        """Serialize for the rendering/history collaborator."""
        return {
            "id": self.image_id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "order": self.order,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PlacementRect:
        """Deserialize from a dictionary produced by to_dict()."""
        return cls(
            image_id=data["id"],
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            order=data.get("order", 0),
        )

    def __repr__(self) -> str:
        return (
            f"PlacementRect({self.image_id!r}, x={self.x:.1f}, y={self.y:.1f}, "
            f"{self.width:.1f}x{self.height:.1f}, order={self.order})"
        )
