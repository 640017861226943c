"""
PaletteEngine - Procedural Palette Generator

Builds ordered color picker palettes from a primary/secondary color pair.
Two strategies are plain gradients; the rest pick accent hues around the
primary (analogous or harmonic intervals) and fill one chunk of the palette
per accent with a dark -> accent -> bright ramp.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from loguru import logger

from .model import BLACK, WHITE, Hsv, Rgb, hsv_to_rgb, lerp_rgb, rgb_to_hsv


# Saturation/value shift applied to each accent to derive its dark and bright ends
ACCENT_SHADE_SHIFT = 50.0


class InvalidPaletteRequest(ValueError):
    """Raised for palette requests that cannot be satisfied (negative amount, unknown strategy)."""


class PaletteStrategy(str, Enum):
    """Supported palette generation modes."""
    PRIMARY_TO_SECONDARY = "primary_to_secondary"
    LIGHT_TO_DARK = "light_to_dark"
    SIMILAR_3 = "similar_3"
    SIMILAR_4 = "similar_4"
    COMPLEMENT = "complement"
    TRIADIC = "triadic"
    SQUARE = "square"
    SPLIT_COMPLEMENT = "split_complement"


@dataclass(frozen=True)
class AccentPlan:
    """How many accent hues a strategy uses and how far apart they sit."""
    chunks: int
    hue_variance: int


ANALOGOUS_PLANS = {
    PaletteStrategy.SIMILAR_3: AccentPlan(chunks=3, hue_variance=60),
    PaletteStrategy.SIMILAR_4: AccentPlan(chunks=4, hue_variance=40),
}

HARMONIC_PLANS = {
    PaletteStrategy.COMPLEMENT: AccentPlan(chunks=2, hue_variance=180),
    PaletteStrategy.TRIADIC: AccentPlan(chunks=3, hue_variance=120),
    PaletteStrategy.SQUARE: AccentPlan(chunks=4, hue_variance=90),
    PaletteStrategy.SPLIT_COMPLEMENT: AccentPlan(chunks=4, hue_variance=40),
}

# Extra rotation for the last two accents of a split complement
SPLIT_COMPLEMENT_BUMP = 100


def coerce_strategy(strategy: Union[PaletteStrategy, str]) -> PaletteStrategy:
    """Accept an enum member or its wire value."""
    try:
        return PaletteStrategy(strategy)
    except ValueError:
        valid = ", ".join(s.value for s in PaletteStrategy)
        raise InvalidPaletteRequest(f"Unknown palette strategy {strategy!r}; expected one of: {valid}")


def normalize_hue(hue: float) -> float:
    """
    Wrap a hue in degrees into [0, 360).

    Signed remainder first, then a single correction in either direction.
    The upper correction catches values like ``-1e-14 + 360`` that round to
    exactly 360.
    """
    wrapped = math.fmod(hue, 360.0)
    if wrapped < 0:
        wrapped += 360.0
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped


def chunk_sizes(amount: int, chunks: int) -> List[int]:
    """
    Split ``amount`` colors across ``chunks`` accents.

    Every chunk gets ``amount // chunks``; the last one also absorbs the
    remainder. Sizes may be zero when ``amount < chunks``.
    """
    if chunks <= 0:
        raise InvalidPaletteRequest(f"chunks must be positive, got {chunks}")
    if amount < 0:
        raise InvalidPaletteRequest(f"amount must be non-negative, got {amount}")

    base = amount // chunks
    sizes = [base] * chunks
    sizes[-1] += amount % chunks
    return sizes


def accent_offsets(strategy: Union[PaletteStrategy, str]) -> List[int]:
    """
    Hue offsets in degrees (before wrapping) of each accent relative to the primary.

    Analogous: symmetric around 0, e.g. {-60, 0, 60} for three accents and
    {-80, -40, 40, 80} for four, where 0 is skipped when the count is even.
    Harmonic: one full turn plus even steps around the wheel, except split
    complement which bumps the last two accents by another 100 degrees.
    """
    strategy = coerce_strategy(strategy)

    if strategy in ANALOGOUS_PLANS:
        plan = ANALOGOUS_PLANS[strategy]
        hue_range = (plan.chunks // 2) * plan.hue_variance
        offsets = []
        for i in range(plan.chunks):
            offset = -hue_range + plan.hue_variance * i
            if plan.chunks % 2 == 0 and offset >= 0:
                offset += plan.hue_variance
            offsets.append(offset)
        return offsets

    if strategy in HARMONIC_PLANS:
        plan = HARMONIC_PLANS[strategy]
        if strategy == PaletteStrategy.SPLIT_COMPLEMENT:
            return [
                plan.hue_variance * i + (SPLIT_COMPLEMENT_BUMP if i >= 2 else 0)
                for i in range(plan.chunks)
            ]
        hue_range = plan.chunks * plan.hue_variance
        return [hue_range + plan.hue_variance * i for i in range(plan.chunks)]

    raise InvalidPaletteRequest(f"Strategy {strategy.value} does not use accent hues")


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def _ramp(start: Rgb, end: Rgb, count: int, alpha: int) -> List[Rgb]:
    """Sample ``count`` colors from the half-open interval [start, end)."""
    return [lerp_rgb(start, end, i / count).with_alpha(alpha) for i in range(count)]


def _gradient_primary_to_secondary(amount: int, primary: Rgb, secondary: Rgb) -> List[Rgb]:
    colors = []
    for i in range(amount):
        fraction = i / amount
        # lerp_rgb rounds alpha on its own, independent of the color channels
        colors.append(lerp_rgb(primary, secondary, fraction))
    return colors


def _gradient_light_to_dark(amount: int, primary: Rgb) -> List[Rgb]:
    half_amount = amount // 2
    remaining = amount - half_amount
    black = BLACK.with_alpha(primary.a)
    white = WHITE.with_alpha(primary.a)

    return _ramp(black, primary, half_amount, primary.a) + _ramp(primary, white, remaining, primary.a)


def _accent_chunks(plan: AccentPlan, offsets: List[int], amount: int, primary: Rgb) -> List[Rgb]:
    """Fill one chunk per accent hue with a dark -> accent -> bright ramp."""
    primary_hsv = rgb_to_hsv(primary)
    dark_saturation = _clamp_percent(primary_hsv.saturation + ACCENT_SHADE_SHIFT)
    dark_value = _clamp_percent(primary_hsv.value - ACCENT_SHADE_SHIFT)
    bright_saturation = _clamp_percent(primary_hsv.saturation - ACCENT_SHADE_SHIFT)
    bright_value = _clamp_percent(primary_hsv.value + ACCENT_SHADE_SHIFT)

    sizes = chunk_sizes(amount, plan.chunks)
    logger.debug(f"Accent plan: offsets={offsets} chunk_sizes={sizes}")

    colors: List[Rgb] = []
    for offset, size in zip(offsets, sizes):
        hue = normalize_hue(primary_hsv.hue + offset)

        accent = hsv_to_rgb(primary_hsv.with_hue(hue), primary.a)
        dark = hsv_to_rgb(Hsv(hue, dark_saturation, dark_value), primary.a)
        bright = hsv_to_rgb(Hsv(hue, bright_saturation, bright_value), primary.a)

        half_chunk = size // 2
        remainder_chunk = size - half_chunk
        colors.extend(_ramp(dark, accent, half_chunk, primary.a))
        colors.extend(_ramp(accent, bright, remainder_chunk, primary.a))

    return colors


def generate_palette(
    strategy: Union[PaletteStrategy, str],
    amount: int,
    primary: Rgb,
    secondary: Optional[Rgb] = None,
) -> List[Rgb]:
    """
    Generate an ordered palette.

    Args:
        strategy: Palette generation mode (enum member or wire value)
        amount: Number of colors to produce, >= 0
        primary: Base color every strategy starts from
        secondary: End color, only read by PRIMARY_TO_SECONDARY

    Returns:
        List of exactly ``amount`` colors in picker order

    Raises:
        InvalidPaletteRequest: For a negative amount, an unknown strategy or a
            missing secondary color
    """
    strategy = coerce_strategy(strategy)
    if amount < 0:
        raise InvalidPaletteRequest(f"amount must be non-negative, got {amount}")

    if amount == 0:
        return []

    if strategy == PaletteStrategy.PRIMARY_TO_SECONDARY:
        if secondary is None:
            raise InvalidPaletteRequest("primary_to_secondary requires a secondary color")
        return _gradient_primary_to_secondary(amount, primary, secondary)

    if strategy == PaletteStrategy.LIGHT_TO_DARK:
        return _gradient_light_to_dark(amount, primary)

    plan = ANALOGOUS_PLANS.get(strategy) or HARMONIC_PLANS[strategy]
    return _accent_chunks(plan, accent_offsets(strategy), amount, primary)
