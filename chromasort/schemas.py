"""
ChromaSort API Schemas
Pydantic models for palette and sort request/response validation.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from chromasort.services.colors.color import Color


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("chromasort", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# COLOR SCHEMAS
# ============================================================================

class ColorInfo(BaseModel):
    """A single color with its RGB channels and derived values."""
    hex: str = Field(
        ...,
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Hex color code in format #RRGGBB"
    )
    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)
    hue: float = Field(..., ge=0.0, lt=360.0, description="Hue in degrees [0, 360)")
    saturation: float = Field(..., ge=0.0, le=100.0, description="Saturation percent [0, 100]")
    lightness: float = Field(..., ge=0.0, le=100.0, description="Lightness percent [0, 100]")
    brightness: float = Field(..., ge=0.0, description="Perceived brightness, roughly [0, 255]")

    @classmethod
    def from_color(cls, color: Color) -> "ColorInfo":
        return cls(
            hex=color.hex_string,
            red=color.red,
            green=color.green,
            blue=color.blue,
            hue=color.hue,
            saturation=color.saturation,
            lightness=color.lightness,
            brightness=color.brightness,
        )


class ModeInfo(BaseModel):
    """A selectable sort mode."""
    name: str = Field(..., description="Registry name of the comparator")
    description: str = Field(..., description="Human-readable description of the ordering")


class ModesResponse(BaseModel):
    """All available sort modes."""
    default: str = Field(..., description="Mode used when a request names none")
    modes: List[ModeInfo]


class PaletteResponse(BaseModel):
    """A sorted palette."""
    mode: str = Field(..., description="Sort mode applied")
    count: int = Field(..., ge=0, description="Number of colors")
    colors: List[ColorInfo]


# ============================================================================
# SORT SCHEMAS
# ============================================================================

class SortRequest(BaseModel):
    """Sort an arbitrary list of colors."""
    mode: Optional[str] = Field(None, description="Sort mode; defaults to the configured mode")
    hue_buckets: Optional[int] = Field(None, ge=1, le=360, description="Bucket count for hue_bucket mode")
    colors: List[Union[str, Dict[str, Any]]] = Field(
        ...,
        min_length=1,
        description="Hex strings (#RGB or #RRGGBB) or records with red/green/blue (or R/G/B)"
    )


class SwatchResponse(BaseModel):
    """Base64 PNG swatch of a sorted palette."""
    mode: str
    swatch_png_b64: str = Field(..., description="Base64-encoded PNG of the sorted palette grid")
    metadata: Dict[str, Any] = Field(..., description="Swatch layout parameters and color order")
