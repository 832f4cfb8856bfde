"""
Module: layout

Purpose:
    Aspect-ratio-preserving layout engine. Places a collection of images
    on a canvas with one of five strategies without distorting any image.

Key Functions:
    - apply_layout(): Main entry point with default settings
    - classify(): Aspect-ratio category of an image
    - scale_to_fit(): Ratio-exact box fitting
    - validate_rect(): Ratio check for one placement

Key Classes:
    - LayoutEngine: Strategy dispatch with grid fallback
    - LayoutConfig: Per-call configuration
    - LayoutStrategy: Strategy enum
    - LayoutResult: Placements plus diagnostics

Dependencies:
    - wallpaper_layout.core.models: ImageDescriptor, CanvasBounds, PlacementRect
    - PIL: Preview rendering (visualizer only)
"""

from .config import LayoutConfig, StackDirection, FloorPolicy
from .errors import (
    LayoutError,
    UnknownStrategyError,
    LayoutInvariantError,
    InvalidImageDescriptor,
)
from .classification import (
    AspectRatioCategory,
    CATEGORIES,
    classify,
    partition_by_group,
    describe_ratio,
    summarize_ratios,
)
from .scaling import Size, scale_to_fit, apply_min_size
from .strategies import LayoutStrategy, StrategyInfo, STRATEGY_INFO, get_strategy_function
from .validator import RATIO_TOLERANCE, ValidationReport, validate_rect, validate_layout
from .engine import LayoutEngine, LayoutResult, apply_layout

__all__ = [
    # Config
    "LayoutConfig",
    "StackDirection",
    "FloorPolicy",
    # Errors
    "LayoutError",
    "UnknownStrategyError",
    "LayoutInvariantError",
    "InvalidImageDescriptor",
    # Classification
    "AspectRatioCategory",
    "CATEGORIES",
    "classify",
    "partition_by_group",
    "describe_ratio",
    "summarize_ratios",
    # Scaling
    "Size",
    "scale_to_fit",
    "apply_min_size",
    # Strategies
    "LayoutStrategy",
    "StrategyInfo",
    "STRATEGY_INFO",
    "get_strategy_function",
    # Validation
    "RATIO_TOLERANCE",
    "ValidationReport",
    "validate_rect",
    "validate_layout",
    # Engine
    "LayoutEngine",
    "LayoutResult",
    "apply_layout",
]
