"""
Module: layout.strategies.catalog

Purpose:
    Closed set of placement strategies and their display metadata.

Key Classes:
    - LayoutStrategy: Enum of strategy names
    - StrategyInfo: Display name, description and guarantees
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from ..errors import UnknownStrategyError

# Names accepted by from_name() in addition to the enum values
_ALIASES = {
    "natural-flow": "flow",
}


class LayoutStrategy(Enum):
    """
    Placement strategies understood by the engine.

    Example:
        >>> LayoutStrategy.from_name("natural-flow")
        <LayoutStrategy.FLOW: 'flow'>
    """

    FLOW = "flow"
    MASONRY = "masonry"
    PROPORTIONAL_GRID = "proportional-grid"
    ASPECT_GROUPED = "aspect-grouped"
    ORGANIC = "organic"

    @classmethod
    def from_name(cls, name: Union[str, LayoutStrategy]) -> LayoutStrategy:
        """
        Resolve a strategy from its name (case-insensitive).

        Raises:
            UnknownStrategyError: If the name matches no strategy
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("_", "-")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise UnknownStrategyError(
                f"Unknown layout strategy {name!r} (valid: {valid})"
            ) from None


@dataclass(frozen=True)
class StrategyInfo:
    """Menu metadata for a strategy."""

    display_name: str
    description: str
    preserves_ratio: bool
    allows_stacking: bool


STRATEGY_INFO: Dict[LayoutStrategy, StrategyInfo] = {
    LayoutStrategy.FLOW: StrategyInfo(
        "Natural Flow",
        "Images flow naturally in rows, maintaining original proportions",
        preserves_ratio=True,
        allows_stacking=True,
    ),
    LayoutStrategy.MASONRY: StrategyInfo(
        "Masonry Stack",
        "Pinterest-style columns with natural heights",
        preserves_ratio=True,
        allows_stacking=True,
    ),
    LayoutStrategy.PROPORTIONAL_GRID: StrategyInfo(
        "Proportional Grid",
        "Grid that adapts to image proportions",
        preserves_ratio=True,
        allows_stacking=False,
    ),
    LayoutStrategy.ASPECT_GROUPED: StrategyInfo(
        "Aspect Grouped",
        "Group similar aspect ratios together",
        preserves_ratio=True,
        allows_stacking=True,
    ),
    LayoutStrategy.ORGANIC: StrategyInfo(
        "Organic Stack",
        "Natural photo-like stacking with slight overlaps",
        preserves_ratio=True,
        allows_stacking=True,
    ),
}
