"""
Module: core

Purpose:
    Immutable value types shared by the layout engine and its
    collaborators (upload, rendering, persistence).
"""

from .models import (
    ImageDescriptor,
    InvalidImageDescriptor,
    CanvasBounds,
    CanvasPreset,
    CANVAS_PRESETS,
    PlacementRect,
)

__all__ = [
    "ImageDescriptor",
    "InvalidImageDescriptor",
    "CanvasBounds",
    "CanvasPreset",
    "CANVAS_PRESETS",
    "PlacementRect",
]
