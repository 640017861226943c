"""
PaletteEngine API Schemas
Pydantic models for palette generation and color text request/response validation.
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from app.config import config
from app.services.colors import Hsv, PaletteStrategy, Rgb, format_color_text


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field(config.SERVICE_NAME, description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


class ColorEntry(BaseModel):
    """A single RGBA color as returned to the host."""
    hex: str = Field(
        ...,
        pattern=r"^#[0-9a-f]{6}$",
        description="Color in format #rrggbb (alpha excluded)"
    )
    alpha: int = Field(..., ge=0, le=255, description="Alpha channel (0=transparent, 255=opaque)")
    text: str = Field(
        ...,
        pattern=r"^[0-9a-f]{8}$",
        description="Color text in aarrggbb form, accepted back by /v1/colors/parse"
    )

    @classmethod
    def from_rgb(cls, color: Rgb) -> "ColorEntry":
        return cls(hex=color.to_hex(), alpha=color.a, text=format_color_text(color))


class HsvEntry(BaseModel):
    """Floating point HSV view of a color."""
    hue: float = Field(..., ge=0.0, lt=360.0, description="Hue in degrees")
    saturation: float = Field(..., ge=0.0, le=100.0, description="Saturation percentage")
    value: float = Field(..., ge=0.0, le=100.0, description="Value percentage")

    @classmethod
    def from_hsv(cls, color: Hsv) -> "HsvEntry":
        return cls(hue=color.hue, saturation=color.saturation, value=color.value)


# ============================================================================
# PALETTE GENERATION SCHEMAS
# ============================================================================

class PaletteRequest(BaseModel):
    """Palette generation request."""
    strategy: PaletteStrategy = Field(..., description="Palette generation mode")
    amount: int = Field(
        config.DEFAULT_AMOUNT,
        ge=0,
        description="Number of colors to generate, at most Config.MAX_PALETTE_SIZE"
    )
    primary: str = Field(..., description="Primary color as #rrggbb or #aarrggbb")
    secondary: Optional[str] = Field(
        None,
        description="Secondary color as #rrggbb or #aarrggbb; only used by primary_to_secondary"
    )


class PaletteResponse(BaseModel):
    """Generated palette in picker order."""
    request_id: str = Field(..., description="Request ID for log correlation")
    strategy: PaletteStrategy = Field(..., description="Strategy used")
    amount: int = Field(..., ge=0, description="Number of colors returned")
    colors: List[ColorEntry] = Field(..., description="Ordered palette colors")


class StrategiesResponse(BaseModel):
    """Supported strategies and limits."""
    strategies: List[str] = Field(..., description="Strategy wire values")
    max_palette_size: int = Field(..., description="Largest palette a request may ask for")


# ============================================================================
# COLOR TEXT SCHEMAS
# ============================================================================

class ColorParseRequest(BaseModel):
    """Color text as typed into a picker."""
    text: str = Field(..., max_length=64, description="Hex color text, optional leading #")
    allow_alpha: bool = Field(False, description="Accept the 8 digit aarrggbb form")
    default_alpha: Optional[int] = Field(
        None,
        ge=0,
        le=255,
        description="Alpha used for the 6 digit form (defaults to 255)"
    )


class ColorParseResponse(BaseModel):
    """Parse outcome. Unparseable text is reported with valid=false, not as an error."""
    valid: bool = Field(..., description="Whether the text matched a supported form")
    color: Optional[ColorEntry] = Field(None, description="Parsed color")
    hsv: Optional[HsvEntry] = Field(None, description="Floating point HSV of the parsed color")


class MetricsResponse(BaseModel):
    """In-process metrics snapshot."""
    uptime_seconds: float
    counters: Dict[str, int]
    timing_stats: Dict[str, Dict[str, float]]
    palette_size_stats: Dict[str, float]
