"""
PaletteEngine Color Model

Lossless conversions between 8-bit RGBA colors and a floating point
hue/saturation/value representation, RGB interpolation, and hex text
parsing/formatting for color picker input.
"""

import colorsys
import math
import re
from dataclasses import dataclass, replace
from typing import Optional

_HEX8_RE = re.compile(r"[0-9a-f]{8}", re.IGNORECASE)
_HEX6_RE = re.compile(r"[0-9a-f]{6}", re.IGNORECASE)

# Absorbs float noise from the HSV math so x.5 always rounds up
_ROUNDING_EPSILON = 1e-9


def _clamp_channel(value: float) -> int:
    return max(0, min(255, math.floor(value + 0.5 + _ROUNDING_EPSILON)))


@dataclass(frozen=True)
class Rgb:
    """An 8-bit RGBA color. Alpha defaults to fully opaque."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            channel = getattr(self, name)
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValueError(f"Channel {name} must be an int, got {type(channel).__name__}")
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel {name} out of range [0, 255]: {channel}")

    def with_alpha(self, alpha: int) -> "Rgb":
        """Return the same color with a different alpha."""
        return replace(self, a=alpha)

    def to_hex(self) -> str:
        """Format as ``#rrggbb`` (alpha omitted)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Hsv:
    """
    Floating point HSV color.

    Hue is in degrees [0, 360), saturation and value are percentages [0, 100].
    Components are kept as floats so repeated conversions never accumulate
    rounding error.
    """
    hue: float
    saturation: float
    value: float

    def __post_init__(self):
        if not 0.0 <= self.hue < 360.0:
            raise ValueError(f"Hue out of range [0, 360): {self.hue}")
        if not 0.0 <= self.saturation <= 100.0:
            raise ValueError(f"Saturation out of range [0, 100]: {self.saturation}")
        if not 0.0 <= self.value <= 100.0:
            raise ValueError(f"Value out of range [0, 100]: {self.value}")

    def with_hue(self, hue: float) -> "Hsv":
        return replace(self, hue=hue)


BLACK = Rgb(0, 0, 0)
WHITE = Rgb(255, 255, 255)


def rgb_to_hsv(color: Rgb) -> Hsv:
    """
    Convert an RGB color to floating point HSV. Alpha is dropped.

    Args:
        color: Source color

    Returns:
        Hsv with hue in degrees and saturation/value as percentages
    """
    h, s, v = colorsys.rgb_to_hsv(color.r / 255.0, color.g / 255.0, color.b / 255.0)
    hue = h * 360.0
    # colorsys can land on exactly 1.0 for hues just under red
    if hue >= 360.0:
        hue -= 360.0
    return Hsv(hue, s * 100.0, v * 100.0)


def hsv_to_rgb(color: Hsv, alpha: int = 255) -> Rgb:
    """
    Convert floating point HSV back to 8-bit RGB.

    Channels are rounded to the nearest integer here and only here, so
    ``hsv_to_rgb(rgb_to_hsv(c)) == c`` holds for every opaque color.

    Args:
        color: Source HSV color
        alpha: Alpha of the returned color

    Returns:
        Rgb color
    """
    r, g, b = colorsys.hsv_to_rgb(color.hue / 360.0, color.saturation / 100.0, color.value / 100.0)
    return Rgb(_clamp_channel(r * 255), _clamp_channel(g * 255), _clamp_channel(b * 255), alpha)


def lerp_rgb(start: Rgb, end: Rgb, t: float) -> Rgb:
    """
    Linearly interpolate every channel, alpha included.

    ``t`` outside [0, 1] extrapolates; channels are clamped to [0, 255].
    """
    return Rgb(
        _clamp_channel(start.r + (end.r - start.r) * t),
        _clamp_channel(start.g + (end.g - start.g) * t),
        _clamp_channel(start.b + (end.b - start.b) * t),
        _clamp_channel(start.a + (end.a - start.a) * t),
    )


def parse_color_text(text: str, allow_alpha: bool = False, default_alpha: Optional[int] = None) -> Optional[Rgb]:
    """
    Parse hex color text typed into a color picker.

    Accepts an optional leading ``#`` followed by ``AARRGGBB`` (only when
    ``allow_alpha`` is set) or ``RRGGBB``. The six digit form takes
    ``default_alpha`` when given, otherwise 255.

    Args:
        text: Raw user text
        allow_alpha: Whether the eight digit form is accepted
        default_alpha: Alpha for the six digit form

    Returns:
        Parsed color, or None when the text matches neither form

    Raises:
        ValueError: If default_alpha is outside [0, 255]; that is a caller bug,
            not bad user text
    """
    if default_alpha is not None and not 0 <= default_alpha <= 255:
        raise ValueError(f"default_alpha out of range [0, 255]: {default_alpha}")

    if text.startswith("#"):
        text = text[1:]

    if allow_alpha and _HEX8_RE.fullmatch(text):
        value = int(text, 16)
        return Rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF)

    if _HEX6_RE.fullmatch(text):
        value = int(text, 16)
        alpha = 255 if default_alpha is None else default_alpha
        return Rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)

    return None


def format_color_text(color: Rgb) -> str:
    """Format as lowercase ``aarrggbb``, the inverse of ``parse_color_text(..., allow_alpha=True)``."""
    return f"{color.a:02x}{color.r:02x}{color.g:02x}{color.b:02x}"
