"""
PaletteEngine v1 API Routes
Implements /v1/palette and /v1/colors endpoints on top of the colors service.
"""
import time

from fastapi import APIRouter, HTTPException

from app.config import config
from app.schemas import (
    ColorEntry, ColorParseRequest, ColorParseResponse, ErrorResponse, HsvEntry,
    MetricsResponse, PaletteRequest, PaletteResponse, StrategiesResponse,
)
from app.services.colors import (
    InvalidPaletteRequest, PaletteStrategy, generate_palette, parse_color_text, rgb_to_hsv,
)
from app.utils.ids import generate_request_id
from app.utils.logging import logger
from app.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Palette"])


def _parse_required_color(text: str, field: str):
    color = parse_color_text(text, allow_alpha=True)
    if color is None:
        raise HTTPException(status_code=400, detail=f"Invalid color text for {field}: {text!r}")
    return color


@router.get("/palette/strategies", response_model=StrategiesResponse)
def list_strategies() -> StrategiesResponse:
    """List supported palette strategies."""
    return StrategiesResponse(
        strategies=[strategy.value for strategy in PaletteStrategy],
        max_palette_size=config.MAX_PALETTE_SIZE
    )


@router.post(
    "/palette",
    response_model=PaletteResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Generate Palette",
    description="Generate an ordered color picker palette from a primary/secondary pair"
)
def create_palette(request: PaletteRequest) -> PaletteResponse:
    request_id = generate_request_id()
    start_time = time.time()
    metrics = get_metrics()

    log_extra = {
        "request_id": request_id,
        "strategy": request.strategy.value,
        "amount": request.amount
    }
    logger.info(f"Palette request {request_id} started", extra=log_extra)
    if config.METRICS_ENABLED:
        metrics.increment_palette_request(request.strategy.value)

    try:
        if not config.validate_amount(request.amount):
            raise InvalidPaletteRequest(
                f"amount must be between 0 and {config.MAX_PALETTE_SIZE}, got {request.amount}"
            )

        primary = _parse_required_color(request.primary, "primary")
        secondary = None
        if request.secondary is not None:
            secondary = _parse_required_color(request.secondary, "secondary")

        colors = generate_palette(request.strategy, request.amount, primary, secondary)

    except HTTPException:
        if config.METRICS_ENABLED:
            metrics.increment_failure_count("invalid_color_text")
        logger.warning(f"Palette request {request_id} rejected: invalid color text", extra=log_extra)
        raise

    except InvalidPaletteRequest as e:
        if config.METRICS_ENABLED:
            metrics.increment_failure_count("invalid_request")
        logger.warning(f"Palette request {request_id} rejected: {e}", extra=log_extra)
        raise HTTPException(status_code=400, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    if config.METRICS_ENABLED:
        metrics.record_timing("palette", duration_ms)
        metrics.record_palette_size(len(colors))

    logger.info(
        f"Palette request {request_id} completed in {duration_ms:.2f}ms",
        extra={**log_extra, "duration_ms": round(duration_ms, 2)}
    )

    return PaletteResponse(
        request_id=request_id,
        strategy=request.strategy,
        amount=len(colors),
        colors=[ColorEntry.from_rgb(color) for color in colors]
    )


@router.post(
    "/colors/parse",
    response_model=ColorParseResponse,
    summary="Parse Color Text",
    description="Parse #rrggbb / #aarrggbb text; unparseable text yields valid=false"
)
def parse_color(request: ColorParseRequest) -> ColorParseResponse:
    color = parse_color_text(request.text, request.allow_alpha, request.default_alpha)

    if config.METRICS_ENABLED:
        get_metrics().increment_parse_request(color is not None)

    if color is None:
        logger.debug("Color text did not parse", extra={"text": request.text})
        return ColorParseResponse(valid=False)

    return ColorParseResponse(
        valid=True,
        color=ColorEntry.from_rgb(color),
        hsv=HsvEntry.from_hsv(rgb_to_hsv(color))
    )


@router.get("/metrics", response_model=MetricsResponse)
def metrics_summary() -> MetricsResponse:
    """In-process metrics snapshot."""
    return MetricsResponse(**get_metrics().get_summary())
