"""
Color value type.

RGB is the canonical storage. HSL and perceived brightness are derived once,
at construction, so a Color is immutable and safe to share between threads.
"""

import math
import re
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple, Union

HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")

# (long name, short name) per channel; long name wins when both are present
CHANNEL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("red", "R"),
    ("green", "G"),
    ("blue", "B"),
)

# Perceived brightness weights for R, G, B
# http://www.nbdtech.com/Blog/archive/2008/04/27/Calculating-the-Perceived-Brightness-of-a-Color.aspx
BRIGHTNESS_WEIGHTS: Tuple[float, float, float] = (0.241, 0.691, 0.068)


class ColorError(ValueError):
    """Base class for color construction errors."""
    pass


class InvalidArgumentError(ColorError):
    """Construction called with an absent or unsupported argument."""
    pass


class ParseError(ColorError):
    """Hex color string has the wrong length or non-hex characters."""

    def __init__(self, value: str, reason: str = "Unparseable color string"):
        self.value = value
        super().__init__(f"{reason} ({value!r})")


class MissingFieldError(ColorError):
    """Structured color record is missing a channel."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"Missing {channel} value in color record")


def rgb_to_hsl(red: int, green: int, blue: int) -> Tuple[float, float, float]:
    """
    Convert 8-bit RGB to HSL.

    Args:
        red, green, blue: Channel values in [0, 255]

    Returns:
        Tuple of (hue, saturation, lightness) with hue in degrees [0, 360)
        and saturation/lightness as percentages [0, 100]
    """
    r = red / 255
    g = green / 255
    b = blue / 255

    cmax = max(r, g, b)
    cmin = min(r, g, b)

    lightness = (cmax + cmin) / 2

    # Greyscale: by convention hue is zero (red)
    if cmax == cmin:
        hue = 0.0
        saturation = 0.0
    else:
        delta = cmax - cmin

        if lightness > 0.5:
            saturation = delta / (2 - cmax - cmin)
        else:
            saturation = delta / (cmax + cmin)

        if cmax == r:
            hue = math.fmod((g - b) / delta, 6)
        elif cmax == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4

    # Normalize hue to degrees
    hue = math.fmod(hue * 60, 360)
    while hue < 0:
        hue += 360

    return hue, saturation * 100, lightness * 100


def perceived_brightness(red: int, green: int, blue: int) -> float:
    """Weighted quadratic brightness heuristic over raw 0-255 channels."""
    wr, wg, wb = BRIGHTNESS_WEIGHTS
    return math.sqrt(wr * red ** 2 + wg * green ** 2 + wb * blue ** 2)


def _validate_channel(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise InvalidArgumentError(f"{name} must be in [0, 255], got {value}")
    return value


@dataclass(frozen=True)
class Color:
    """
    One point in RGB color space with derived HSL and brightness.

    Build instances through ``from_hex_string``, ``from_components`` or
    ``parse_color``. The plain constructor takes three ints and validates them too.
    """
    red: int
    green: int
    blue: int
    hue: float = field(init=False, repr=False, compare=False)
    saturation: float = field(init=False, repr=False, compare=False)
    lightness: float = field(init=False, repr=False, compare=False)
    brightness: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            _validate_channel(name, getattr(self, name))

        hue, saturation, lightness = rgb_to_hsl(self.red, self.green, self.blue)
        object.__setattr__(self, "hue", hue)
        object.__setattr__(self, "saturation", saturation)
        object.__setattr__(self, "lightness", lightness)
        object.__setattr__(self, "brightness", perceived_brightness(self.red, self.green, self.blue))

    @classmethod
    def from_hex_string(cls, value: str) -> "Color":
        """
        Parse ``#RGB`` or ``#RRGGBB`` (leading ``#`` optional, any case).

        Raises:
            InvalidArgumentError: If value is not a string
            ParseError: If the digits are not 3 or 6 hex characters
        """
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Hex color must be a string, got {type(value).__name__}")

        digits = value[1:] if value.startswith("#") else value

        if len(digits) not in (3, 6):
            raise ParseError(value)
        if not HEX_DIGITS_RE.fullmatch(digits):
            kind = "shorthand" if len(digits) == 3 else "longhand"
            raise ParseError(value, f"Invalid {kind} hex color")

        if len(digits) == 3:
            # #RGB => #RRGGBB
            red, green, blue = (int(d, 16) * 17 for d in digits)
        else:
            red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))

        return cls(red, green, blue)

    @classmethod
    def from_components(cls, record: Mapping[str, Any]) -> "Color":
        """
        Build from a mapping with ``red``/``green``/``blue`` or ``R``/``G``/``B``.

        Raises:
            InvalidArgumentError: If record is not a mapping or a value is not
                an integer in [0, 255]
            MissingFieldError: If a channel is absent under both names
        """
        if not isinstance(record, abc.Mapping):
            raise InvalidArgumentError(f"Color record must be a mapping, got {type(record).__name__}")

        channels = []
        for long_name, short_name in CHANNEL_FIELDS:
            if long_name in record:
                channels.append(record[long_name])
            elif short_name in record:
                channels.append(record[short_name])
            else:
                raise MissingFieldError(long_name)

        return cls(*channels)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    @property
    def hsl(self) -> Tuple[float, float, float]:
        return self.hue, self.saturation, self.lightness

    @property
    def hex_string(self) -> str:
        """Uppercase ``#RRGGBB``."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def __str__(self) -> str:
        return self.hex_string


ColorInput = Union[str, Mapping[str, Any], Color]


def parse_color(value: ColorInput) -> Color:
    """
    Construct a Color from a hex string or a channel record.

    Raises:
        InvalidArgumentError: If value is None or of an unsupported type
        ParseError: If a string is not a valid hex color
        MissingFieldError: If a record lacks a channel
    """
    if value is None:
        raise InvalidArgumentError("Color requires an argument")
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex_string(value)
    if isinstance(value, abc.Mapping):
        return Color.from_components(value)
    raise InvalidArgumentError(f"Invalid argument passed to Color: {type(value).__name__}")
