"""
ChromaSort v1 API Routes
Exposes the comparator registry, palette generation and sorting over HTTP.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from chromasort.config import config
from chromasort.schemas import (
    ColorInfo, ErrorResponse, ModeInfo, ModesResponse, PaletteResponse, SortRequest, SwatchResponse
)
from chromasort.services.colors.color import Color, ColorError, parse_color
from chromasort.services.colors.compare import MODE_DESCRIPTIONS, CompareMode, available_modes
from chromasort.services.colors.palette import build_palette, sort_palette
from chromasort.services.colors.swatches import (
    SwatchTooLargeError, create_swatch_metadata, render_palette_swatch
)
from chromasort.utils.logging import get_logger

router = APIRouter(prefix="/v1", tags=["Palette Sorting"])
log = get_logger()

MODE_PATTERN = "^(" + "|".join(m.value for m in CompareMode) + ")$"
ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid color, mode or palette parameters"}}
SWATCH_ERROR_RESPONSES = {
    **ERROR_RESPONSES,
    413: {"model": ErrorResponse, "description": "Swatch grid exceeds the pixel limit"},
}


def _bad_request(error: ColorError, operation: str) -> HTTPException:
    log.warning(f"{operation} rejected", {"error": str(error), "error_type": type(error).__name__})
    return HTTPException(status_code=400, detail=str(error))


def _check_hue_buckets(hue_buckets: Optional[int], operation: str) -> None:
    if hue_buckets is not None and not config.validate_hue_buckets(hue_buckets):
        log.warning(f"{operation} rejected", {"hue_buckets": hue_buckets})
        raise HTTPException(
            status_code=400,
            detail=f"Hue bucket count must evenly divide 360, got {hue_buckets}"
        )


def _palette_response(mode: str, colors: List[Color]) -> PaletteResponse:
    return PaletteResponse(
        mode=mode,
        count=len(colors),
        colors=[ColorInfo.from_color(c) for c in colors]
    )


@router.get("/modes",
            response_model=ModesResponse,
            summary="List Sort Modes",
            description="Names and descriptions of every available comparator")
def list_modes() -> ModesResponse:
    return ModesResponse(
        default=config.DEFAULT_MODE,
        modes=[ModeInfo(name=m.value, description=MODE_DESCRIPTIONS[m]) for m in available_modes()]
    )


@router.get("/palette",
            response_model=PaletteResponse,
            responses=ERROR_RESPONSES,
            summary="Sorted RGB Cube Palette",
            description="Walk the RGB cube in even steps and sort the result with the chosen mode")
def get_palette(
    mode: Optional[str] = Query(None, pattern=MODE_PATTERN, description="Sort mode"),
    levels: Optional[int] = Query(None, ge=1, le=16, description="Values per channel"),
    step: Optional[int] = Query(None, ge=0, le=255, description="Channel increment between values"),
    hue_buckets: Optional[int] = Query(None, ge=1, le=360, description="Bucket count for hue_bucket mode")
) -> PaletteResponse:
    mode = mode or config.DEFAULT_MODE
    _check_hue_buckets(hue_buckets, "Palette request")

    try:
        colors = build_palette(mode, levels, step, hue_buckets)
    except ColorError as e:
        raise _bad_request(e, "Palette request")

    log.info("Palette built", {"mode": mode, "count": len(colors)})
    return _palette_response(mode, colors)


@router.post("/sort",
             response_model=PaletteResponse,
             responses=ERROR_RESPONSES,
             summary="Sort Colors",
             description="Sort caller-supplied colors (hex strings or channel records)")
def sort_request(request: SortRequest) -> PaletteResponse:
    if len(request.colors) > config.MAX_SORT_COLORS:
        raise HTTPException(
            status_code=413,
            detail=f"Too many colors ({len(request.colors)} > {config.MAX_SORT_COLORS})"
        )

    mode = request.mode or config.DEFAULT_MODE
    _check_hue_buckets(request.hue_buckets, "Sort request")

    try:
        colors = [parse_color(value) for value in request.colors]
        ordered = sort_palette(colors, mode, request.hue_buckets)
    except ColorError as e:
        raise _bad_request(e, "Sort request")

    log.info("Colors sorted", {"mode": mode, "count": len(ordered)})
    return _palette_response(mode, ordered)


@router.get("/palette/swatch",
            response_model=SwatchResponse,
            responses=SWATCH_ERROR_RESPONSES,
            summary="Sorted Palette Swatch",
            description="Render the sorted RGB cube palette as a PNG grid")
def get_palette_swatch(
    mode: Optional[str] = Query(None, pattern=MODE_PATTERN, description="Sort mode"),
    levels: Optional[int] = Query(None, ge=1, le=16, description="Values per channel"),
    step: Optional[int] = Query(None, ge=0, le=255, description="Channel increment between values"),
    hue_buckets: Optional[int] = Query(None, ge=1, le=360, description="Bucket count for hue_bucket mode"),
    columns: Optional[int] = Query(None, ge=1, le=256, description="Chips per row"),
    chip_size: Optional[int] = Query(None, ge=4, le=256, description="Chip size in pixels"),
    spacing: int = Query(2, ge=0, le=16, description="Gap between chips in pixels")
) -> SwatchResponse:
    mode = mode or config.DEFAULT_MODE
    columns = columns or config.SWATCH_COLUMNS
    chip_size = chip_size or config.SWATCH_CHIP_PX
    _check_hue_buckets(hue_buckets, "Swatch request")

    try:
        colors = build_palette(mode, levels, step, hue_buckets)
    except ColorError as e:
        raise _bad_request(e, "Swatch request")

    try:
        swatch = render_palette_swatch(colors, columns, chip_size, spacing)
    except SwatchTooLargeError as e:
        log.warning("Swatch request rejected", {"error": str(e), "max_pixels": e.max_pixels})
        raise HTTPException(status_code=413, detail=str(e))

    log.info("Swatch rendered", {"mode": mode, "count": len(colors), "columns": columns})

    return SwatchResponse(
        mode=mode,
        swatch_png_b64=swatch,
        metadata=create_swatch_metadata(colors, columns, chip_size, spacing)
    )
