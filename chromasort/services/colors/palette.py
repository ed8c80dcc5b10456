"""
Palette Generation Module

Builds display palettes by walking the RGB cube and orders them with the
comparator registry.
"""

from typing import Iterable, List, Optional, Union

from chromasort.config import config
from chromasort.utils.logging import get_logger

from .color import Color, InvalidArgumentError
from .compare import CompareMode, sort_colors

log = get_logger()


def generate_rgb_cube(levels: int = 4, step: int = 68) -> List[Color]:
    """
    Enumerate an evenly stepped grid through the RGB cube.

    Args:
        levels: Number of values per channel
        step: Channel increment between values (channel value = index * step)

    Returns:
        levels**3 colors ordered red-major, then green, then blue

    Raises:
        InvalidArgumentError: If the grid would leave the [0, 255] range
    """
    if not config.validate_palette(levels, step):
        raise InvalidArgumentError(
            f"Invalid palette grid: levels={levels}, step={step} "
            f"(need levels >= 1, step >= 0 and (levels - 1) * step <= 255)"
        )

    values = [i * step for i in range(levels)]
    return [
        Color(red, green, blue)
        for red in values
        for green in values
        for blue in values
    ]


def sort_palette(colors: Iterable[Color],
                 mode: Union[CompareMode, str, None] = None,
                 hue_buckets: Optional[int] = None) -> List[Color]:
    """
    Sort colors with the named comparator, falling back to configured defaults.

    Raises:
        InvalidArgumentError: If mode or hue_buckets is invalid
    """
    mode = mode or config.DEFAULT_MODE
    hue_buckets = config.HUE_BUCKETS if hue_buckets is None else hue_buckets

    mode_name = mode.value if isinstance(mode, CompareMode) else str(mode)

    with log.timed("sort_palette", mode=mode_name) as fields:
        ordered = sort_colors(colors, mode, hue_buckets)
        fields["count"] = len(ordered)

    return ordered


def build_palette(mode: Union[CompareMode, str, None] = None,
                  levels: Optional[int] = None,
                  step: Optional[int] = None,
                  hue_buckets: Optional[int] = None) -> List[Color]:
    """Generate the RGB cube palette and sort it for display."""
    levels = config.PALETTE_LEVELS if levels is None else levels
    step = config.PALETTE_STEP if step is None else step

    colors = generate_rgb_cube(levels, step)
    log.debug("Generated RGB cube palette", {"levels": levels, "step": step, "count": len(colors)})

    return sort_palette(colors, mode, hue_buckets)
