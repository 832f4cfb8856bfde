"""
Unit tests for the natural flow (row packer) strategy.

Canvas 1000 wide with margin 20 gives an available width of 960, so the
natural width cap is 288px.
"""

import pytest

from wallpaper_layout.core.models import CanvasBounds
from wallpaper_layout.layout import FloorPolicy, LayoutConfig, validate_rect
from wallpaper_layout.layout.strategies import flow_layout, plan_rows
from wallpaper_layout.layout.strategies.flow import row_scale


@pytest.fixture
def canvas():
    return CanvasBounds(1000, 800)


@pytest.fixture
def config():
    return LayoutConfig(spacing=10, margin=20, min_image_size=10)


class TestPlanRows:
    """Tests for the row-break pass."""

    def test_plan_when_empty_then_no_rows(self, config, canvas):
        assert plan_rows([], config, canvas) == []

    def test_plan_when_three_fit_then_fourth_breaks(self, make_image, config, canvas):
        """288 * 3 + 2 * 10 = 884 <= 960 but a fourth image would not fit."""
        images = [make_image(400, 300) for _ in range(4)]

        rows = plan_rows(images, config, canvas)

        assert [len(row.items) for row in rows] == [3, 1]

    def test_plan_when_seven_images_then_rows_match_boundary_crossings(self, make_image, config, canvas):
        images = [make_image(400, 300) for _ in range(7)]

        rows = plan_rows(images, config, canvas)

        assert [len(row.items) for row in rows] == [3, 3, 1]

    def test_plan_when_rows_built_then_content_fits_available_width(self, make_image, mixed_images, config, canvas):
        """Pre-scale content never exceeds the width by more than one image."""
        available = canvas.available_width(config.margin)
        for row in plan_rows(mixed_images, config, canvas):
            content = row.natural_width + (len(row.items) - 1) * config.spacing
            widest = max(item.natural_width for item in row.items)
            assert content <= available + widest

    def test_plan_when_small_image_then_natural_width_is_intrinsic(self, make_image, config, canvas):
        rows = plan_rows([make_image(120, 60)], config, canvas)
        item = rows[0].items[0]
        assert item.natural_width == 120
        assert item.natural_height == 60

    def test_plan_when_large_image_then_natural_width_capped(self, make_image, config, canvas):
        rows = plan_rows([make_image(4000, 2000)], config, canvas)
        assert rows[0].items[0].natural_width == pytest.approx(288)

    def test_row_scale_when_content_fits_then_one(self, make_image, config, canvas):
        rows = plan_rows([make_image(400, 300) for _ in range(3)], config, canvas)
        assert row_scale(rows[0], 960, config) == 1.0

    def test_row_scale_when_content_too_wide_then_clamped_by_max_scale_down(self, make_image, config, canvas):
        rows = plan_rows([make_image(400, 300) for _ in range(3)], config, canvas)
        # 3 * 288 = 864 natural; 100px available would need scale < 0.3
        assert row_scale(rows[0], 100, config) == config.max_scale_down


class TestFlowLayout:
    """Tests for flow_layout()."""

    def test_layout_when_empty_then_empty(self, config, canvas):
        assert flow_layout([], config, canvas) == []

    def test_layout_when_one_row_then_left_to_right_with_spacing(self, make_image, config, canvas):
        images = [make_image(400, 300) for _ in range(3)]

        rects = flow_layout(images, config, canvas)

        assert [r.x for r in rects] == pytest.approx([20, 318, 616])
        assert all(r.y == 20 for r in rects)
        assert all(r.width == pytest.approx(288) for r in rects)
        assert all(r.height == pytest.approx(216) for r in rects)

    def test_layout_when_row_breaks_then_next_row_below_tallest(self, make_image, config, canvas):
        images = [make_image(400, 300) for _ in range(4)]

        rects = flow_layout(images, config, canvas)

        assert rects[3].x == 20
        assert rects[3].y == pytest.approx(20 + 216 + 10)

    def test_layout_when_stacking_then_orders_follow_emission(self, make_image, config, canvas):
        rects = flow_layout([make_image(400, 300) for _ in range(5)], config, canvas)
        assert [r.order for r in rects] == [0, 1, 2, 3, 4]

    def test_layout_when_prioritizing_large_then_largest_first(self, make_image, canvas):
        config = LayoutConfig(min_image_size=10, prioritize_large_images=True)
        images = [make_image(100, 100, "small"), make_image(800, 600, "big"), make_image(300, 300, "mid")]

        rects = flow_layout(images, config, canvas)

        assert [r.image_id for r in rects] == ["big", "mid", "small"]

    def test_layout_when_uniform_floor_then_ratio_preserved(self, make_image, canvas):
        """A 10:1 strip is enlarged uniformly instead of clamped per axis."""
        config = LayoutConfig(min_image_size=100)
        img = make_image(1000, 100)

        rect = flow_layout([img], config, canvas)[0]

        assert rect.height == pytest.approx(100)
        assert rect.width == pytest.approx(1000)
        assert validate_rect(rect, img)

    def test_layout_when_per_axis_floor_then_strip_is_distorted(self, make_image, canvas):
        """Per-axis clamping floors each side independently."""
        config = LayoutConfig(min_image_size=100, floor_policy=FloorPolicy.PER_AXIS)
        img = make_image(1000, 100)

        rect = flow_layout([img], config, canvas)[0]

        assert rect.width == pytest.approx(288)
        assert rect.height == 100
        assert not validate_rect(rect, img)

    def test_layout_when_per_axis_floor_then_advance_uses_unfloored_width(self, make_image, canvas):
        config = LayoutConfig(min_image_size=100, floor_policy=FloorPolicy.PER_AXIS)
        images = [make_image(50, 50), make_image(50, 50)]

        rects = flow_layout(images, config, canvas)

        assert rects[1].x == pytest.approx(20 + 50 + 10)

    def test_layout_when_uniform_floor_then_neighbours_do_not_overlap(self, make_image, canvas):
        config = LayoutConfig(min_image_size=100)
        images = [make_image(50, 50), make_image(50, 50)]

        rects = flow_layout(images, config, canvas)

        assert rects[1].x == pytest.approx(rects[0].right + config.spacing)

    def test_layout_when_mixed_images_then_all_ratio_exact(self, mixed_images, default_config, fhd_canvas):
        by_id = {img.image_id: img for img in mixed_images}
        for rect in flow_layout(mixed_images, default_config, fhd_canvas):
            assert validate_rect(rect, by_id[rect.image_id])

    def test_layout_when_many_small_images_then_rows_wrap_inside_margin(self, make_image, default_config, fhd_canvas):
        """64px thumbnails are floored to 100px, so 17 fit per 1880px row."""
        images = [make_image(64, 64) for _ in range(25)]

        rects = flow_layout(images, default_config, fhd_canvas)

        assert max(r.right for r in rects) <= fhd_canvas.width - default_config.margin
        assert sorted({r.y for r in rects}) == pytest.approx([20, 130])
        assert all(r.width == pytest.approx(100) for r in rects)
        assert rects[17].x == pytest.approx(20)

    def test_plan_when_uniform_floor_then_break_uses_floored_width(self, make_image, default_config, fhd_canvas):
        rows = plan_rows([make_image(64, 64) for _ in range(25)], default_config, fhd_canvas)

        assert [len(row.items) for row in rows] == [17, 8]
        assert rows[0].items[0].natural_width == pytest.approx(100)
