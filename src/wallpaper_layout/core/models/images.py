"""
Module: core.models.images

Purpose:
    Provides the ImageDescriptor dataclass - the engine's view of a source
    image. Only the identifier and intrinsic pixel size matter for layout;
    decoded pixels stay with the upload collaborator.

Key Classes:
    - ImageDescriptor: Immutable image identity + intrinsic dimensions
    - InvalidImageDescriptor: Raised for non-positive dimensions

Dependencies:
    - dataclasses (std)

Used By:
    - layout.classification: Ratio categories
    - layout.strategies: All placement strategies
    - layout.validator: Ratio checks
    - images.provider: Builds descriptors from files
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Hashable, Optional


class InvalidImageDescriptor(ValueError):
    """Image dimensions cannot produce a defined aspect ratio."""

    def __init__(self, message: str, image_id: Any = None):
        super().__init__(message)
        self.image_id = image_id


@dataclass(frozen=True, slots=True)
class ImageDescriptor:
    """
    Source image specification.

    Attributes:
        image_id: Caller-assigned identifier, unique within one layout call
        width: Intrinsic width in pixels
        height: Intrinsic height in pixels
        name: Optional display name (e.g. source filename)

    Invariants:
        - width > 0
        - height > 0
        - both dimensions finite

    Example:
        >>> img = ImageDescriptor("sunset", width=1600, height=900)
        >>> round(img.aspect_ratio, 3)
        1.778
    """

    image_id: Hashable
    width: float
    height: float
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Reject dimensions that would make the ratio undefined."""
        for axis, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidImageDescriptor(
                    f"{axis} must be a number: {value!r}", image_id=self.image_id
                )
            if not math.isfinite(value) or value <= 0:
                raise InvalidImageDescriptor(
                    f"{axis} must be positive: {value}", image_id=self.image_id
                )

    @property
    def aspect_ratio(self) -> float:
        """Intrinsic width divided by intrinsic height."""
        return self.width / self.height

    @property
    def area(self) -> float:
        """Intrinsic pixel area, used for large-image prioritisation."""
        return self.width * self.height

    def to_dict(self) -> dict:
        """Serialize for project payloads."""
        d = {"id": self.image_id, "width": self.width, "height": self.height}
        if self.name is not None:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ImageDescriptor:
        """Deserialize from a dictionary produced by to_dict()."""
        return cls(
            image_id=data["id"],
            width=data["width"],
            height=data["height"],
            name=data.get("name"),
        )
