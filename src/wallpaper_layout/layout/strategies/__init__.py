"""
Module: layout.strategies

Purpose:
    The five interchangeable placement strategies. All share the
    signature ``(images, config, bounds, rng=None) -> list[PlacementRect]``
    and are dispatched by LayoutStrategy.

Key Functions:
    - get_strategy_function(): Strategy callable for an enum member
    - flow_layout(), masonry_layout(), proportional_grid_layout(),
      aspect_grouped_layout(), organic_layout()

Key Classes:
    - LayoutStrategy: Strategy enum
    - StrategyInfo: Display metadata
"""

from __future__ import annotations

from typing import Dict, Union

from .base import StrategyFunction
from .catalog import LayoutStrategy, StrategyInfo, STRATEGY_INFO
from .flow import flow_layout, plan_rows
from .masonry import masonry_layout, column_count
from .grid import proportional_grid_layout, grid_dimensions, grid_cells
from .grouped import aspect_grouped_layout
from .organic import organic_layout

_STRATEGY_FUNCTIONS: Dict[LayoutStrategy, StrategyFunction] = {
    LayoutStrategy.FLOW: flow_layout,
    LayoutStrategy.MASONRY: masonry_layout,
    LayoutStrategy.PROPORTIONAL_GRID: proportional_grid_layout,
    LayoutStrategy.ASPECT_GROUPED: aspect_grouped_layout,
    LayoutStrategy.ORGANIC: organic_layout,
}

_missing = set(LayoutStrategy) - set(_STRATEGY_FUNCTIONS)
if _missing:
    raise RuntimeError(f"Strategies without an implementation: {_missing}")


def get_strategy_function(strategy: Union[str, LayoutStrategy]) -> StrategyFunction:
    """
    Look up the implementation for a strategy.

    Raises:
        UnknownStrategyError: If a string name is not recognised
    """
    return _STRATEGY_FUNCTIONS[LayoutStrategy.from_name(strategy)]


__all__ = [
    "LayoutStrategy",
    "StrategyInfo",
    "STRATEGY_INFO",
    "StrategyFunction",
    "get_strategy_function",
    "flow_layout",
    "plan_rows",
    "masonry_layout",
    "column_count",
    "proportional_grid_layout",
    "grid_dimensions",
    "grid_cells",
    "aspect_grouped_layout",
    "organic_layout",
]
