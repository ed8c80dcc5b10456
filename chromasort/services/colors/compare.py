"""
Color comparators for palette display ordering.

Every comparator takes two Colors and returns an Ordering, so any of them
can be handed to ``functools.cmp_to_key``. They are built by chaining
``compare_scalar`` over a priority list of keys and stopping at the first
non-equal key (lexicographic order).
"""

import math
from enum import Enum, IntEnum
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Sequence, Union

from .color import Color, InvalidArgumentError


class Ordering(IntEnum):
    """Three-way comparison result, usable as a ``cmp``-style int."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


Comparator = Callable[[Color, Color], Ordering]
KeyFunc = Callable[[Color], float]

DEFAULT_HUE_BUCKETS = 6


def compare_scalar(x: float, y: float) -> Ordering:
    """Compare two numbers: GREATER if x > y, LESS if x < y, else EQUAL."""
    if x > y:
        return Ordering.GREATER
    if x < y:
        return Ordering.LESS
    return Ordering.EQUAL


def compare_by_keys(a: Color, b: Color, keys: Sequence[KeyFunc]) -> Ordering:
    """Lexicographic comparison over ``keys``, short-circuiting on the first difference."""
    for key in keys:
        result = compare_scalar(key(a), key(b))
        if result:
            return result
    return Ordering.EQUAL


def distance_from_origin(color: Color) -> float:
    """Euclidean length of the (R, G, B) vector, i.e. distance to black."""
    return math.sqrt(color.red ** 2 + color.green ** 2 + color.blue ** 2)


def _red(c: Color) -> float:
    return c.red


def _green(c: Color) -> float:
    return c.green


def _blue(c: Color) -> float:
    return c.blue


def _hue(c: Color) -> float:
    return c.hue


def _saturation(c: Color) -> float:
    return c.saturation


def _lightness(c: Color) -> float:
    return c.lightness


def _brightness(c: Color) -> float:
    return c.brightness


def by_rgb(a: Color, b: Color) -> Ordering:
    """Sort by red, green, then blue. The most basic ordering."""
    return compare_by_keys(a, b, (_red, _green, _blue))


def by_hsl(a: Color, b: Color) -> Ordering:
    """Sort by hue, saturation, then lightness."""
    return compare_by_keys(a, b, (_hue, _saturation, _lightness))


def by_slh(a: Color, b: Color) -> Ordering:
    return compare_by_keys(a, b, (_saturation, _lightness, _hue))


def by_shl(a: Color, b: Color) -> Ordering:
    return compare_by_keys(a, b, (_saturation, _hue, _lightness))


def by_hue_then_brightness(a: Color, b: Color) -> Ordering:
    """
    Sort by hue, then perceived brightness.

    Colors that tie on both are EQUAL even when saturation or lightness differ.
    """
    return compare_by_keys(a, b, (_hue, _brightness))


def by_magnitude_from_origin(a: Color, b: Color) -> Ordering:
    """
    Sort by the length of the (R, G, B) vector.

    A naive partial ordering: distinct colors with the same length are EQUAL.
    """
    return compare_scalar(distance_from_origin(a), distance_from_origin(b))


def by_hue_then_distance_from_origin(a: Color, b: Color) -> Ordering:
    """Sort by hue, stepping through each hue by distance from black."""
    return compare_by_keys(a, b, (_hue, distance_from_origin))


def hue_bucket_comparator(buckets: int = DEFAULT_HUE_BUCKETS) -> Comparator:
    """
    Build a comparator that groups hues into ``buckets`` equal-width slices
    of the hue circle, then sorts by brightness inside each slice.

    Raises:
        InvalidArgumentError: If buckets is not a positive divisor of 360
    """
    if isinstance(buckets, bool) or not isinstance(buckets, int) or buckets <= 0 or 360 % buckets:
        raise InvalidArgumentError(f"Hue bucket count must evenly divide 360, got {buckets!r}")

    width = 360 / buckets

    def bucket(c: Color) -> int:
        return int(c.hue // width)

    def by_hue_bucket_then_brightness(a: Color, b: Color) -> Ordering:
        return compare_by_keys(a, b, (bucket, _brightness))

    by_hue_bucket_then_brightness.buckets = buckets
    return by_hue_bucket_then_brightness


by_hue_bucket_then_brightness = hue_bucket_comparator(DEFAULT_HUE_BUCKETS)


class CompareMode(str, Enum):
    """Closed set of comparator names addressable by the presentation layer."""
    RGB = "rgb"
    HSL = "hsl"
    SLH = "slh"
    SHL = "shl"
    HUE_BRIGHTNESS = "hue_brightness"
    MAGNITUDE = "magnitude"
    HUE_STEP = "hue_step"
    HUE_BUCKET = "hue_bucket"


COMPARATORS: Dict[CompareMode, Comparator] = {
    CompareMode.RGB: by_rgb,
    CompareMode.HSL: by_hsl,
    CompareMode.SLH: by_slh,
    CompareMode.SHL: by_shl,
    CompareMode.HUE_BRIGHTNESS: by_hue_then_brightness,
    CompareMode.MAGNITUDE: by_magnitude_from_origin,
    CompareMode.HUE_STEP: by_hue_then_distance_from_origin,
    CompareMode.HUE_BUCKET: by_hue_bucket_then_brightness,
}

MODE_DESCRIPTIONS: Dict[CompareMode, str] = {
    CompareMode.RGB: "Red, then green, then blue. The most basic of all possible orderings.",
    CompareMode.HSL: "Hue, then saturation, then lightness. Less naive than RGB, but still very simple.",
    CompareMode.SLH: "Saturation, then lightness, then hue. Greys collect at the start.",
    CompareMode.SHL: "Saturation, then hue, then lightness.",
    CompareMode.HUE_BRIGHTNESS: "Hue, then perceived brightness. Colors equal on both keep their input order.",
    CompareMode.MAGNITUDE: "Distance from black in RGB space. Colors at the same distance keep their input order.",
    CompareMode.HUE_STEP: "Hue, then distance from black as a tiebreak.",
    CompareMode.HUE_BUCKET: "Hue grouped into equal slices of the color wheel, then perceived brightness within each slice.",
}


def available_modes() -> List[CompareMode]:
    return list(CompareMode)


def get_comparator(mode: Union[CompareMode, str], hue_buckets: int = DEFAULT_HUE_BUCKETS) -> Comparator:
    """
    Look up a comparator by mode.

    Args:
        mode: A CompareMode or its string value
        hue_buckets: Bucket count used when mode is ``hue_bucket``

    Raises:
        InvalidArgumentError: If mode names no comparator
    """
    try:
        mode = CompareMode(mode)
    except ValueError:
        valid = ", ".join(m.value for m in CompareMode)
        raise InvalidArgumentError(f"Unknown compare mode {mode!r} (expected one of: {valid})") from None

    if mode is CompareMode.HUE_BUCKET and hue_buckets != DEFAULT_HUE_BUCKETS:
        return hue_bucket_comparator(hue_buckets)
    return COMPARATORS[mode]


def sort_colors(colors: Iterable[Color], mode: Union[CompareMode, str],
                hue_buckets: int = DEFAULT_HUE_BUCKETS) -> List[Color]:
    """Return a new list of colors, stably sorted with the named comparator."""
    comparator = get_comparator(mode, hue_buckets)
    return sorted(colors, key=cmp_to_key(comparator))
