"""
Unit tests for the strategy catalogue and dispatch table.
"""

import pytest

from wallpaper_layout.layout import (
    LayoutError,
    LayoutStrategy,
    STRATEGY_INFO,
    UnknownStrategyError,
    get_strategy_function,
)
from wallpaper_layout.layout.strategies import (
    aspect_grouped_layout,
    flow_layout,
    masonry_layout,
    organic_layout,
    proportional_grid_layout,
)


class TestLayoutStrategyFromName:
    """Tests for LayoutStrategy.from_name()."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("flow", LayoutStrategy.FLOW),
            ("natural-flow", LayoutStrategy.FLOW),
            ("Masonry", LayoutStrategy.MASONRY),
            ("proportional_grid", LayoutStrategy.PROPORTIONAL_GRID),
            (" aspect-grouped ", LayoutStrategy.ASPECT_GROUPED),
            ("ORGANIC", LayoutStrategy.ORGANIC),
        ],
    )
    def test_from_name_when_known_name_then_member(self, name, expected):
        assert LayoutStrategy.from_name(name) is expected

    def test_from_name_when_member_then_returned_unchanged(self):
        assert LayoutStrategy.from_name(LayoutStrategy.MASONRY) is LayoutStrategy.MASONRY

    @pytest.mark.parametrize("name", ["spiral", "", "grid"])
    def test_from_name_when_unknown_then_raises(self, name):
        with pytest.raises(UnknownStrategyError, match="Unknown layout strategy"):
            LayoutStrategy.from_name(name)

    def test_unknown_strategy_error_when_caught_then_is_layout_and_value_error(self):
        with pytest.raises(LayoutError):
            LayoutStrategy.from_name("spiral")
        with pytest.raises(ValueError):
            LayoutStrategy.from_name("spiral")


class TestStrategyDispatch:
    """Tests for get_strategy_function() and STRATEGY_INFO."""

    @pytest.mark.parametrize(
        "strategy,function",
        [
            (LayoutStrategy.FLOW, flow_layout),
            (LayoutStrategy.MASONRY, masonry_layout),
            (LayoutStrategy.PROPORTIONAL_GRID, proportional_grid_layout),
            (LayoutStrategy.ASPECT_GROUPED, aspect_grouped_layout),
            (LayoutStrategy.ORGANIC, organic_layout),
        ],
    )
    def test_dispatch_when_member_then_matching_function(self, strategy, function):
        assert get_strategy_function(strategy) is function
        assert get_strategy_function(strategy.value) is function

    def test_info_when_listed_then_covers_every_strategy(self):
        assert set(STRATEGY_INFO) == set(LayoutStrategy)
        assert all(info.preserves_ratio for info in STRATEGY_INFO.values())

    def test_info_when_grid_then_no_stacking(self):
        assert not STRATEGY_INFO[LayoutStrategy.PROPORTIONAL_GRID].allows_stacking
        assert STRATEGY_INFO[LayoutStrategy.ORGANIC].display_name == "Organic Stack"
