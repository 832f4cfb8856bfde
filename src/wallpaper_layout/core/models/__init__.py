"""
Module: core.models

Purpose:
    Frozen dataclasses describing layout inputs and outputs.

Key Classes:
    - ImageDescriptor: Source image identity and intrinsic size
    - CanvasBounds: Target canvas size
    - PlacementRect: Positioned output rectangle
"""

from .images import ImageDescriptor, InvalidImageDescriptor
from .canvas import CanvasBounds, CanvasPreset, CANVAS_PRESETS
from .placement import PlacementRect

__all__ = [
    "ImageDescriptor",
    "InvalidImageDescriptor",
    "CanvasBounds",
    "CanvasPreset",
    "CANVAS_PRESETS",
    "PlacementRect",
]
