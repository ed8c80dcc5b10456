from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

from chromasort import __version__
from chromasort.api.v1 import router as v1_router
from chromasort.config import config
from chromasort.schemas import HealthResponse
from chromasort.utils.logging import get_logger

log = get_logger()


def validate_settings() -> None:
    """Fail fast on configuration that would make every request fail."""
    problems = []
    if not config.validate_mode(config.DEFAULT_MODE):
        problems.append(f"CHROMASORT_DEFAULT_MODE={config.DEFAULT_MODE!r} is not a known sort mode")
    if not config.validate_hue_buckets(config.HUE_BUCKETS):
        problems.append(f"CHROMASORT_HUE_BUCKETS={config.HUE_BUCKETS} must evenly divide 360")
    if not config.validate_palette(config.PALETTE_LEVELS, config.PALETTE_STEP):
        problems.append(
            f"CHROMASORT_PALETTE_LEVELS={config.PALETTE_LEVELS} with "
            f"CHROMASORT_PALETTE_STEP={config.PALETTE_STEP} leaves the 0-255 range"
        )
    if not config.validate_chip_size(config.SWATCH_CHIP_PX):
        problems.append(f"CHROMASORT_SWATCH_CHIP_PX={config.SWATCH_CHIP_PX} must be within 4-256")
    if not config.validate_max_swatch_pixels(config.MAX_SWATCH_PIXELS):
        problems.append(f"CHROMASORT_MAX_SWATCH_PIXELS={config.MAX_SWATCH_PIXELS} must be positive")

    if problems:
        for problem in problems:
            log.error("Invalid configuration", {"problem": problem})
        raise RuntimeError("; ".join(problems))


validate_settings()

app = FastAPI(
    title="ChromaSort",
    description="Color model and comparator menu for ordering palettes",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def healthz() -> HealthResponse:
    return HealthResponse(ok=True, version=__version__)


log.info("ChromaSort API ready", {"version": __version__, "default_mode": config.DEFAULT_MODE})
