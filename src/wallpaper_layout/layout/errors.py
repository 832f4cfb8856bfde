"""
Module: layout.errors

Purpose:
    Exception taxonomy for the layout engine. All errors are local
    computation failures on malformed input; nothing here is retryable.

Key Classes:
    - LayoutError: Base class for engine errors
    - UnknownStrategyError: Strategy name not in the catalogue
    - LayoutInvariantError: Fallback layout failed ratio validation
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wallpaper_layout.core.models.images import InvalidImageDescriptor

if TYPE_CHECKING:
    from .validator import ValidationReport


class LayoutError(Exception):
    """Error during layout computation."""
    pass


class UnknownStrategyError(LayoutError, ValueError):
    """Requested strategy name is not recognised."""
    pass


class LayoutInvariantError(LayoutError):
    """
    The proportional-grid fallback produced distorted rectangles.

    Should not happen for valid descriptors; surfaced instead of
    returning a layout that breaks the ratio guarantee.

    Attributes:
        report: Validation report of the rejected fallback layout
    """

    def __init__(self, message: str, report: ValidationReport):
        super().__init__(message)
        self.report = report


__all__ = [
    "LayoutError",
    "UnknownStrategyError",
    "LayoutInvariantError",
    "InvalidImageDescriptor",
]
