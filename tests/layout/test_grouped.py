"""
Unit tests for the aspect-grouped strategy.
"""

import pytest

from wallpaper_layout.layout import LayoutConfig, classify, validate_rect
from wallpaper_layout.layout.strategies import aspect_grouped_layout


@pytest.fixture
def config():
    return LayoutConfig(spacing=10, margin=20, min_image_size=10)


class TestAspectGroupedLayout:
    """Tests for aspect_grouped_layout()."""

    def test_layout_when_empty_then_empty(self, config, fhd_canvas):
        assert aspect_grouped_layout([], config, fhd_canvas) == []

    def test_layout_when_two_groups_then_blocks_stacked_in_first_seen_order(self, make_image, config, fhd_canvas):
        """Squares (564px natural) form the first block; wide images start 2 * spacing below."""
        images = [
            make_image(1000, 1000, "s1"),
            make_image(1920, 1080, "w1"),
            make_image(1000, 1000, "s2"),
            make_image(1000, 1000, "s3"),
        ]

        rects = aspect_grouped_layout(images, config, fhd_canvas)
        by_id = {r.image_id: r for r in rects}

        assert [r.image_id for r in rects] == ["s1", "s2", "s3", "w1"]
        assert all(by_id[i].y == pytest.approx(20) for i in ("s1", "s2", "s3"))
        assert by_id["s1"].height == pytest.approx(564)
        assert by_id["w1"].y == pytest.approx(20 + 564 + 2 * 10)
        assert by_id["w1"].x == pytest.approx(20)

    def test_layout_when_mixed_then_every_image_placed_once(self, mixed_images, config, fhd_canvas):
        rects = aspect_grouped_layout(mixed_images, config, fhd_canvas)

        assert sorted(r.image_id for r in rects) == sorted(i.image_id for i in mixed_images)

    def test_layout_when_mixed_then_groups_do_not_interleave(self, mixed_images, config, fhd_canvas):
        by_id = {img.image_id: img for img in mixed_images}
        rects = aspect_grouped_layout(mixed_images, config, fhd_canvas)

        seen = []
        for rect in rects:
            group = classify(by_id[rect.image_id]).group
            if not seen or seen[-1] != group:
                assert group not in seen
                seen.append(group)

    def test_layout_when_mixed_then_blocks_do_not_overlap_vertically(self, mixed_images, config, fhd_canvas):
        by_id = {img.image_id: img for img in mixed_images}
        rects = aspect_grouped_layout(mixed_images, config, fhd_canvas)

        extents = {}
        for rect in rects:
            group = classify(by_id[rect.image_id]).group
            top, bottom = extents.get(group, (rect.y, rect.bottom))
            extents[group] = (min(top, rect.y), max(bottom, rect.bottom))

        ordered = list(extents.values())
        for (_, previous_bottom), (next_top, _) in zip(ordered, ordered[1:]):
            assert next_top == pytest.approx(previous_bottom + 2 * config.spacing)

    def test_layout_when_mixed_then_ratio_exact(self, mixed_images, default_config, fhd_canvas):
        by_id = {img.image_id: img for img in mixed_images}
        for rect in aspect_grouped_layout(mixed_images, default_config, fhd_canvas):
            assert validate_rect(rect, by_id[rect.image_id])

    def test_layout_when_stacking_then_orders_renumbered_across_groups(self, mixed_images, config, fhd_canvas):
        rects = aspect_grouped_layout(mixed_images, config, fhd_canvas)
        assert [r.order for r in rects] == list(range(len(mixed_images)))
