"""
ChromaSort Colors Module

Provides the Color value type, RGB -> HSL conversion, perceived brightness
and the comparator registry used to order palettes for display.
"""

from .color import (
    Color, ColorError, InvalidArgumentError, MissingFieldError, ParseError,
    parse_color, rgb_to_hsl, perceived_brightness
)
from .compare import (
    Ordering, CompareMode, COMPARATORS, MODE_DESCRIPTIONS,
    compare_scalar, get_comparator, available_modes, sort_colors, hue_bucket_comparator,
    by_rgb, by_hsl, by_slh, by_shl, by_hue_then_brightness, by_magnitude_from_origin,
    by_hue_then_distance_from_origin, by_hue_bucket_then_brightness
)
