"""
Unit tests for aspect-ratio classification.
"""

import pytest

from wallpaper_layout.core.models import ImageDescriptor
from wallpaper_layout.layout import (
    CATEGORIES,
    classify,
    describe_ratio,
    partition_by_group,
    summarize_ratios,
)


def _img(width, height, image_id="x"):
    return ImageDescriptor(image_id, width, height)


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "width,height,expected_name",
        [
            (1000, 1000, "Square"),
            (1040, 1000, "Square"),
            (900, 1200, "Portrait"),
            (700, 1000, "Portrait"),
            (1400, 1050, "Landscape"),
            (1400, 1000, "Landscape"),
            (1920, 1080, "Wide"),
            (1900, 1000, "Wide"),
            (2400, 1000, "Panoramic"),
            (3500, 1000, "Ultra-wide"),
            (4400, 1000, "Ultra-wide"),
        ],
    )
    def test_classify_when_in_band_then_returns_category(self, width, height, expected_name):
        assert classify(_img(width, height)).name == expected_name

    def test_classify_when_square_band_overlaps_landscape_then_first_wins(self):
        """1.04 is within Square's band; catalogue order decides."""
        assert classify(_img(1040, 1000)).group == "square"

    def test_classify_when_wider_than_every_band_then_synthetic_landscape(self):
        category = classify(_img(6000, 1000))
        assert category.name == "Landscape"
        assert category.group == "landscape"
        assert category.ratio is None

    def test_classify_when_between_bands_then_landscape_fallback(self):
        """1.5 misses Landscape (1.33±0.15) and Wide (1.78±0.2)."""
        category = classify(_img(1500, 1000))
        assert category.group == "landscape"
        assert category not in CATEGORIES

    def test_classify_when_tall_outside_bands_then_synthetic_portrait(self):
        category = classify(_img(300, 1000))
        assert category.name == "Portrait"
        assert category.ratio is None

    def test_classify_when_phone_screenshot_then_portrait_fallback(self):
        """9:16 (0.5625) is outside Portrait's 0.75±0.15 band."""
        assert classify(_img(1080, 1920)).group == "portrait"

    def test_classify_when_repeated_then_deterministic(self):
        img = _img(1234, 987)
        assert classify(img) == classify(img)

    def test_catalogue_when_listed_then_declared_order(self):
        assert [c.name for c in CATEGORIES] == [
            "Square", "Portrait", "Landscape", "Wide", "Panoramic", "Ultra-wide",
        ]


class TestPartitionByGroup:
    """Tests for partition_by_group()."""

    def test_partition_when_empty_then_empty_dict(self):
        assert partition_by_group([]) == {}

    def test_partition_when_mixed_then_first_seen_group_order(self):
        images = [
            _img(1920, 1080, "w1"),
            _img(1000, 1000, "s1"),
            _img(1920, 1080, "w2"),
            _img(900, 1200, "p1"),
            _img(1000, 1000, "s2"),
        ]

        groups = partition_by_group(images)

        assert list(groups) == ["wide", "square", "portrait"]
        assert [i.image_id for i in groups["wide"]] == ["w1", "w2"]
        assert [i.image_id for i in groups["square"]] == ["s1", "s2"]

    def test_partition_when_mixed_then_every_image_in_exactly_one_group(self, mixed_images):
        groups = partition_by_group(mixed_images)

        flattened = [img for bucket in groups.values() for img in bucket]
        assert sum(len(bucket) for bucket in groups.values()) == len(mixed_images)
        assert sorted(i.image_id for i in flattened) == sorted(i.image_id for i in mixed_images)
        for group, bucket in groups.items():
            assert all(classify(img).group == group for img in bucket)

    def test_partition_when_fallback_and_catalogue_landscape_then_share_group(self):
        groups = partition_by_group([_img(1400, 1050, "l"), _img(6000, 1000, "f")])
        assert list(groups) == ["landscape"]
        assert len(groups["landscape"]) == 2


class TestRatioSummaries:
    """Tests for describe_ratio() and summarize_ratios()."""

    def test_describe_ratio_when_full_hd_then_wide_label(self):
        assert describe_ratio(_img(1920, 1080)) == "Wide (1.78)"

    def test_describe_ratio_when_fallback_then_uses_fallback_name(self):
        assert describe_ratio(_img(300, 1000)) == "Portrait (0.30)"

    def test_summarize_ratios_when_mixed_then_counts_per_group(self):
        images = [_img(1000, 1000, "a"), _img(1920, 1080, "b"), _img(1000, 1000, "c")]
        assert summarize_ratios(images) == {"square": 2, "wide": 1}
