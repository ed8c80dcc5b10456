"""
Swatch Rendering Module

Creates PNG swatch grids of sorted palettes for quick visual comparison
of the available orderings.
"""

import base64
import io
import math
from typing import Any, Dict, Optional, Sequence

from PIL import Image

from chromasort.config import config
from chromasort.utils.logging import get_logger

from .color import Color

log = get_logger()

BACKGROUND_RGB = (255, 255, 255)


class SwatchTooLargeError(ValueError):
    """Requested swatch grid exceeds the configured pixel area."""

    def __init__(self, width: int, height: int, max_pixels: int):
        self.width = width
        self.height = height
        self.max_pixels = max_pixels
        super().__init__(
            f"Swatch of {width}x{height} ({width * height} pixels) exceeds the {max_pixels} pixel limit"
        )


def create_color_chip(color: Color, chip_size: int = 40) -> Image.Image:
    """
    Create a single color chip image.

    Args:
        color: Color to render
        chip_size: Size of the square chip in pixels

    Returns:
        PIL Image of the color chip
    """
    return Image.new('RGB', (chip_size, chip_size), color.rgb)


def render_palette_grid(colors: Sequence[Color],
                        columns: int = 8,
                        chip_size: int = 40,
                        spacing: int = 2,
                        max_pixels: Optional[int] = None) -> Image.Image:
    """
    Lay chips out row-major in the order given.

    Args:
        colors: Colors in display order
        columns: Chips per row; use len(colors) for a single strip
        chip_size: Size of each chip in pixels
        spacing: Gap between chips in pixels
        max_pixels: Cap on width * height; defaults to the configured limit

    Returns:
        PIL Image of the grid

    Raises:
        ValueError: If colors is empty or columns/chip_size are not positive
        SwatchTooLargeError: If the grid area is over max_pixels
    """
    if not colors:
        raise ValueError("Empty colors list provided")
    if columns <= 0 or chip_size <= 0:
        raise ValueError(f"columns and chip_size must be positive (got {columns}, {chip_size})")

    columns = min(columns, len(colors))
    rows = math.ceil(len(colors) / columns)

    width = columns * chip_size + (columns - 1) * spacing
    height = rows * chip_size + (rows - 1) * spacing

    max_pixels = config.MAX_SWATCH_PIXELS if max_pixels is None else max_pixels
    if width * height > max_pixels:
        raise SwatchTooLargeError(width, height, max_pixels)

    grid = Image.new('RGB', (width, height), BACKGROUND_RGB)

    for index, color in enumerate(colors):
        row, col = divmod(index, columns)
        x_pos = col * (chip_size + spacing)
        y_pos = row * (chip_size + spacing)
        grid.paste(create_color_chip(color, chip_size), (x_pos, y_pos))

    log.debug("Rendered palette grid", {"count": len(colors), "columns": columns, "rows": rows})
    return grid


def render_palette_swatch(colors: Sequence[Color],
                          columns: int = 8,
                          chip_size: int = 40,
                          spacing: int = 2,
                          max_pixels: Optional[int] = None) -> str:
    """
    Render colors as a base64-encoded PNG swatch grid.

    Returns:
        Base64-encoded PNG image string
    """
    grid = render_palette_grid(colors, columns, chip_size, spacing, max_pixels)

    buffer = io.BytesIO()
    grid.save(buffer, format='PNG')

    return base64.b64encode(buffer.getvalue()).decode('utf-8')


def create_swatch_metadata(colors: Sequence[Color], columns: int, chip_size: int, spacing: int) -> Dict[str, Any]:
    """Describe swatch layout parameters and content."""
    columns = min(columns, len(colors)) if colors else 0
    return {
        "chip_size_px": chip_size,
        "spacing_px": spacing,
        "columns": columns,
        "rows": math.ceil(len(colors) / columns) if columns else 0,
        "total_colors": len(colors),
        "color_order": [c.hex_string for c in colors],
    }
