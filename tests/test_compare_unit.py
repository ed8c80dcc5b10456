"""
Unit tests for the comparator library.

Tests the comparator family:
- scalar three-way helper
- priority chains of each named comparator
- antisymmetry and sort consistency
- registry lookup by name
"""

from functools import cmp_to_key

import pytest

from chromasort.services.colors.color import Color, InvalidArgumentError
from chromasort.services.colors.compare import (
    COMPARATORS, MODE_DESCRIPTIONS, CompareMode, Ordering,
    available_modes, by_hsl, by_hue_bucket_then_brightness, by_hue_then_brightness,
    by_hue_then_distance_from_origin, by_magnitude_from_origin, by_rgb, by_shl, by_slh,
    compare_scalar, distance_from_origin, get_comparator, hue_bucket_comparator, sort_colors
)


class TestCompareScalar:
    """Test the three-way scalar helper"""

    def test_orderings(self):
        assert compare_scalar(2, 1) is Ordering.GREATER
        assert compare_scalar(1, 2) is Ordering.LESS
        assert compare_scalar(1.5, 1.5) is Ordering.EQUAL

    def test_ordering_is_cmp_compatible(self):
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1
        assert not Ordering.EQUAL


class TestChannelComparators:
    """Test RGB and HSL priority chains"""

    def test_by_rgb_priority(self):
        assert by_rgb(Color(1, 255, 255), Color(2, 0, 0)) is Ordering.LESS
        assert by_rgb(Color(5, 2, 255), Color(5, 3, 0)) is Ordering.LESS
        assert by_rgb(Color(5, 5, 9), Color(5, 5, 8)) is Ordering.GREATER
        assert by_rgb(Color(5, 5, 5), Color(5, 5, 5)) is Ordering.EQUAL

    def test_by_hsl_hue_first(self, primaries):
        assert by_hsl(primaries["red"], primaries["green"]) is Ordering.LESS
        assert by_hsl(primaries["blue"], primaries["green"]) is Ordering.GREATER

    def test_by_hsl_saturation_breaks_hue_tie(self):
        # Same hue (0), different saturation
        vivid = Color(255, 0, 0)
        muted = Color(192, 64, 64)
        assert vivid.hue == muted.hue == 0
        assert by_hsl(muted, vivid) is Ordering.LESS

    def test_by_slh_saturation_then_lightness(self):
        dark_grey = Color(50, 50, 50)
        light_grey = Color(200, 200, 200)
        red = Color(255, 0, 0)
        assert by_slh(dark_grey, light_grey) is Ordering.LESS
        assert by_slh(light_grey, red) is Ordering.LESS

    def test_slh_and_shl_differ_on_lightness_vs_hue(self):
        a = Color(255, 0, 0)    # s=100, l=50, h=0
        b = Color(0, 0, 128)    # s=100, l~25, h=240
        assert a.saturation == b.saturation
        assert by_slh(a, b) is Ordering.GREATER   # lightness decides
        assert by_shl(a, b) is Ordering.LESS      # hue decides

    @pytest.mark.parametrize("comparator", [by_rgb, by_hsl, by_slh, by_shl])
    def test_antisymmetry(self, comparator, sample_colors):
        for a in sample_colors[::3]:
            for b in sample_colors[::5]:
                assert comparator(a, b) == -comparator(b, a)

    def test_sort_by_rgb_is_lexicographic(self, sample_colors):
        ordered = sorted(sample_colors, key=cmp_to_key(by_rgb))
        keys = [c.rgb for c in ordered]
        assert keys == sorted(keys)


class TestHueComparators:
    """Test hue-led comparators and their accepted ties"""

    def test_hue_then_brightness(self):
        dark_red = Color(128, 0, 0)
        red = Color(255, 0, 0)
        green = Color(0, 255, 0)
        assert by_hue_then_brightness(dark_red, red) is Ordering.LESS
        assert by_hue_then_brightness(red, green) is Ordering.LESS

    def test_hue_then_brightness_ignores_remaining_channels(self):
        """Greys differing only in lightness are still ordered by brightness"""
        assert by_hue_then_brightness(Color(10, 10, 10), Color(20, 20, 20)) is Ordering.LESS
        same = Color(40, 80, 120)
        assert by_hue_then_brightness(same, Color(40, 80, 120)) is Ordering.EQUAL

    def test_hue_then_distance(self):
        assert by_hue_then_distance_from_origin(Color(100, 0, 0), Color(200, 0, 0)) is Ordering.LESS
        assert by_hue_then_distance_from_origin(Color(200, 0, 0), Color(0, 10, 0)) is Ordering.LESS

    def test_distance_from_origin(self):
        assert distance_from_origin(Color(0, 0, 0)) == 0
        assert distance_from_origin(Color(3, 4, 0)) == pytest.approx(5)
        assert distance_from_origin(Color(255, 255, 255)) == pytest.approx(255 * 3 ** 0.5)


class TestMagnitudeComparator:
    """Test the naive vector-length ordering"""

    def test_orders_by_length(self):
        assert by_magnitude_from_origin(Color(0, 0, 0), Color(0, 0, 1)) is Ordering.LESS
        assert by_magnitude_from_origin(Color(255, 255, 255), Color(255, 255, 0)) is Ordering.GREATER

    def test_equal_length_distinct_colors_collapse(self):
        """Permuted channels have the same length and compare EQUAL"""
        assert by_magnitude_from_origin(Color(10, 20, 30), Color(30, 10, 20)) is Ordering.EQUAL

    def test_sort_is_stable_on_ties(self):
        first, second = Color(0, 0, 50), Color(50, 0, 0)
        ordered = sort_colors([first, second, Color(0, 0, 0)], CompareMode.MAGNITUDE)
        assert ordered == [Color(0, 0, 0), first, second]
        assert ordered[1] is first


class TestHueBucketComparator:
    """Test hue bucketing"""

    def test_default_has_six_buckets(self):
        assert by_hue_bucket_then_brightness.buckets == 6

    def test_same_bucket_orders_by_brightness(self):
        # Hues 0 and ~30 fall in bucket 0 (width 60)
        red = Color(255, 0, 0)
        orange = Color(255, 128, 0)
        assert red.hue // 60 == orange.hue // 60 == 0
        assert by_hue_bucket_then_brightness(orange, red) is Ordering.GREATER

    def test_bucket_dominates_brightness(self):
        bright_red = Color(255, 0, 0)        # bucket 0
        dark_green = Color(0, 60, 0)         # bucket 2
        assert bright_red.brightness > dark_green.brightness
        assert by_hue_bucket_then_brightness(bright_red, dark_green) is Ordering.LESS

    def test_custom_bucket_count(self):
        two = hue_bucket_comparator(2)
        red = Color(255, 0, 0)                # hue 0 -> bucket 0
        blue = Color(0, 0, 60)                # hue 240 -> bucket 1
        dim_green = Color(0, 30, 0)           # hue 120 -> bucket 0
        assert two(dim_green, red) is Ordering.LESS
        assert two(red, blue) is Ordering.LESS

    @pytest.mark.parametrize("buckets", [0, -6, 7, 11, 1.5, True])
    def test_invalid_bucket_counts(self, buckets):
        with pytest.raises(InvalidArgumentError):
            hue_bucket_comparator(buckets)


class TestRegistry:
    """Test comparator lookup by name"""

    def test_every_mode_registered_and_described(self):
        assert set(COMPARATORS) == set(CompareMode)
        assert set(MODE_DESCRIPTIONS) == set(CompareMode)
        assert available_modes() == list(CompareMode)

    @pytest.mark.parametrize("name,expected", [
        ("rgb", by_rgb),
        ("hsl", by_hsl),
        ("slh", by_slh),
        ("shl", by_shl),
        ("hue_brightness", by_hue_then_brightness),
        ("magnitude", by_magnitude_from_origin),
        ("hue_step", by_hue_then_distance_from_origin),
        ("hue_bucket", by_hue_bucket_then_brightness),
    ])
    def test_lookup_by_string(self, name, expected):
        assert get_comparator(name) is expected
        assert get_comparator(CompareMode(name)) is expected

    def test_hue_bucket_lookup_with_custom_count(self):
        comparator = get_comparator("hue_bucket", hue_buckets=12)
        assert comparator.buckets == 12

    def test_unknown_mode(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            get_comparator("rainbow")
        assert "rainbow" in str(exc_info.value)

    def test_sort_colors_returns_new_list(self, sample_colors):
        original = list(sample_colors)
        ordered = sort_colors(sample_colors, "hsl")
        assert sample_colors == original
        assert sorted(ordered, key=lambda c: c.rgb) == sorted(original, key=lambda c: c.rgb)
        hues = [c.hue for c in ordered]
        assert hues == sorted(hues)
