"""
Module: core.models.canvas

Purpose:
    Target canvas size plus the catalogue of standard wallpaper sizes.

Key Classes:
    - CanvasBounds: Immutable canvas width/height
    - CanvasPreset: Named wallpaper size

Dependencies:
    - dataclasses (std)

Used By:
    - layout.engine: Available area for every strategy
    - scripts.preview_layout: --canvas option
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CanvasBounds:
    """
    Canvas size in pixels.

    Attributes:
        width: Canvas width
        height: Canvas height

    Example:
        >>> CanvasBounds.parse("2560x1440")
        CanvasBounds(width=2560, height=1440)
    """

    width: float = 1920
    height: float = 1080

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def available_width(self, margin: float) -> float:
        """Width left for content after a margin on both sides."""
        return self.width - 2 * margin

    def available_height(self, margin: float) -> float:
        """Height left for content after a margin on both sides."""
        return self.height - 2 * margin

    @classmethod
    def parse(cls, text: str) -> CanvasBounds:
        """
        Parse a "WIDTHxHEIGHT" string.

        Raises:
            ValueError: If text is not two positive integers joined by x
        """
        match = re.fullmatch(r"\s*(\d+)\s*[xX×]\s*(\d+)\s*", text)
        if match is None:
            raise ValueError(f"Expected WIDTHxHEIGHT, got {text!r}")
        return cls(width=int(match.group(1)), height=int(match.group(2)))

    @classmethod
    def from_preset(cls, name: str) -> CanvasBounds:
        """
        Look up a named wallpaper size (case-insensitive).

        Raises:
            KeyError: If no preset has that name
        """
        key = name.strip().lower()
        for preset in CANVAS_PRESETS:
            if preset.name.lower() == key:
                return preset.bounds
        valid = ", ".join(p.name for p in CANVAS_PRESETS)
        raise KeyError(f"Unknown canvas preset {name!r} (valid: {valid})")


@dataclass(frozen=True, slots=True)
class CanvasPreset:
    """Named wallpaper size."""

    name: str
    width: int
    height: int

    @property
    def bounds(self) -> CanvasBounds:
        return CanvasBounds(width=self.width, height=self.height)

    @property
    def label(self) -> str:
        """Menu label, e.g. "Desktop FHD (1920×1080)"."""
        return f"{self.name} ({self.width}×{self.height})"


CANVAS_PRESETS: tuple[CanvasPreset, ...] = (
    CanvasPreset("Desktop FHD", 1920, 1080),
    CanvasPreset("Desktop QHD", 2560, 1440),
    CanvasPreset("Desktop 4K", 3840, 2160),
    CanvasPreset("Mobile Portrait", 1080, 1920),
    CanvasPreset("Mobile iPhone", 1170, 2532),
    CanvasPreset("Tablet iPad", 2048, 2732),
    CanvasPreset("Ultrawide", 3440, 1440),
    CanvasPreset("Square", 1080, 1080),
)
