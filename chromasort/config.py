"""
ChromaSort Configuration
Manages environment variables and defaults for the palette sorting services.
"""
import os
from typing import List


class Config:
    """Configuration class for ChromaSort services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("CHROMASORT_LOG_LEVEL", "INFO")
    LOG_JSON: bool = bool(int(os.environ.get("CHROMASORT_LOG_JSON", "0")))

    # Sorting defaults
    DEFAULT_MODE: str = os.environ.get("CHROMASORT_DEFAULT_MODE", "rgb")
    HUE_BUCKETS: int = int(os.environ.get("CHROMASORT_HUE_BUCKETS", "6"))

    # Palette generation (RGB cube walk)
    PALETTE_LEVELS: int = int(os.environ.get("CHROMASORT_PALETTE_LEVELS", "4"))
    PALETTE_STEP: int = int(os.environ.get("CHROMASORT_PALETTE_STEP", "68"))  # 4 * 17

    # Swatch rendering
    SWATCH_CHIP_PX: int = int(os.environ.get("CHROMASORT_SWATCH_CHIP_PX", "40"))
    SWATCH_COLUMNS: int = int(os.environ.get("CHROMASORT_SWATCH_COLUMNS", "8"))
    MAX_SWATCH_PIXELS: int = int(os.environ.get("CHROMASORT_MAX_SWATCH_PIXELS", "16000000"))

    # Request limits
    MAX_SORT_COLORS: int = int(os.environ.get("CHROMASORT_MAX_SORT_COLORS", "4096"))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "CHROMASORT_ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:3001"
    )

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Split the comma-separated origin list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_mode(cls, mode: str) -> bool:
        """Validate sort mode name."""
        from chromasort.services.colors.compare import CompareMode
        return mode in {m.value for m in CompareMode}

    @classmethod
    def validate_hue_buckets(cls, buckets: int) -> bool:
        """Validate hue bucket count (must evenly divide the hue circle)."""
        return buckets > 0 and 360 % buckets == 0

    @classmethod
    def validate_palette(cls, levels: int, step: int) -> bool:
        """Validate RGB cube parameters."""
        return levels >= 1 and step >= 0 and (levels - 1) * step <= 255

    @classmethod
    def validate_chip_size(cls, chip_size: int) -> bool:
        """Validate swatch chip size."""
        return 4 <= chip_size <= 256

    @classmethod
    def validate_max_swatch_pixels(cls, max_pixels: int) -> bool:
        """Validate swatch pixel-area cap."""
        return max_pixels > 0


# Global config instance
config = Config()
