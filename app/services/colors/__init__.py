"""
PaletteEngine Colors Module

Color model conversions (RGB <-> floating point HSV, interpolation, hex text)
and procedural palette generation for color picker hosts.
"""

from .model import (
    BLACK, WHITE, Hsv, Rgb, format_color_text, hsv_to_rgb, lerp_rgb, parse_color_text, rgb_to_hsv,
)
from .palette import (
    InvalidPaletteRequest, PaletteStrategy, accent_offsets, chunk_sizes, generate_palette, normalize_hue,
)

__version__ = "1.0.0"
