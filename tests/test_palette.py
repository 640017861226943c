"""
Unit tests for the procedural palette generator.

Tests the gradient strategies, accent hue placement, chunk distribution
and hue wraparound so palettes come out the right size and order.
"""

import pytest

from app.services.colors import (
    InvalidPaletteRequest, PaletteStrategy, Rgb, accent_offsets, chunk_sizes,
    generate_palette, normalize_hue, rgb_to_hsv,
)

BLACK = Rgb(0, 0, 0)
WHITE = Rgb(255, 255, 255)

ACCENT_STRATEGIES = [
    PaletteStrategy.SIMILAR_3,
    PaletteStrategy.SIMILAR_4,
    PaletteStrategy.COMPLEMENT,
    PaletteStrategy.TRIADIC,
    PaletteStrategy.SQUARE,
    PaletteStrategy.SPLIT_COMPLEMENT,
]


class TestHueNormalization:
    """Test hue wraparound into [0, 360)."""

    def test_in_range_unchanged(self):
        assert normalize_hue(0.0) == 0.0
        assert normalize_hue(123.5) == 123.5
        assert normalize_hue(359.9) == pytest.approx(359.9)

    def test_wraps_positive_overflow(self):
        assert normalize_hue(360.0) == 0.0
        assert normalize_hue(420.0) == 60.0
        assert normalize_hue(780.0) == 60.0

    def test_wraps_negative(self):
        assert normalize_hue(-60.0) == 300.0
        assert normalize_hue(-360.0) == 0.0
        assert normalize_hue(-450.0) == 270.0

    def test_tiny_negative_does_not_land_on_360(self):
        assert normalize_hue(-1e-14) == 0.0

    def test_range_over_two_turns_each_way(self):
        hue = -720.0
        while hue <= 720.0:
            wrapped = normalize_hue(hue)
            assert 0.0 <= wrapped < 360.0, f"{hue} normalized to {wrapped}"
            hue += 7.25


class TestChunkSizes:
    """Test distribution of palette entries across accent chunks."""

    def test_even_split(self):
        assert chunk_sizes(12, 3) == [4, 4, 4]

    def test_last_chunk_absorbs_remainder(self):
        assert chunk_sizes(10, 4) == [2, 2, 2, 4]
        assert chunk_sizes(7, 2) == [3, 4]

    def test_fewer_colors_than_chunks(self):
        assert chunk_sizes(2, 3) == [0, 0, 2]
        assert chunk_sizes(0, 4) == [0, 0, 0, 0]

    @pytest.mark.parametrize("chunks", [2, 3, 4])
    def test_coverage_sums_to_amount(self, chunks):
        for amount in range(0, 300):
            sizes = chunk_sizes(amount, chunks)
            assert len(sizes) == chunks
            assert sum(sizes) == amount
            assert all(size >= 0 for size in sizes)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidPaletteRequest):
            chunk_sizes(5, 0)
        with pytest.raises(InvalidPaletteRequest):
            chunk_sizes(-1, 3)


class TestAccentOffsets:
    """Test accent hue placement per strategy."""

    def test_analogous_offsets(self):
        assert accent_offsets(PaletteStrategy.SIMILAR_3) == [-60, 0, 60]
        # 0 is skipped for an even accent count
        assert accent_offsets(PaletteStrategy.SIMILAR_4) == [-80, -40, 40, 80]

    def test_harmonic_offsets(self):
        assert accent_offsets(PaletteStrategy.COMPLEMENT) == [360, 540]
        assert accent_offsets(PaletteStrategy.TRIADIC) == [360, 480, 600]
        assert accent_offsets(PaletteStrategy.SQUARE) == [360, 450, 540, 630]

    def test_split_complement_offsets(self):
        assert accent_offsets(PaletteStrategy.SPLIT_COMPLEMENT) == [0, 40, 180, 220]

    def test_gradients_have_no_accents(self):
        with pytest.raises(InvalidPaletteRequest):
            accent_offsets(PaletteStrategy.LIGHT_TO_DARK)


class TestPaletteLength:
    """Every strategy returns exactly the requested number of colors."""

    @pytest.mark.parametrize("strategy", list(PaletteStrategy))
    def test_length_matches_amount(self, strategy):
        primaries = [Rgb(255, 0, 0), Rgb(12, 200, 99, 40), Rgb(128, 128, 128), BLACK, WHITE]
        for primary in primaries:
            for amount in range(0, 41):
                palette = generate_palette(strategy, amount, primary, WHITE)
                assert len(palette) == amount, f"{strategy.value} amount={amount} primary={primary}"

    @pytest.mark.parametrize("strategy", list(PaletteStrategy))
    def test_zero_amount_is_empty(self, strategy):
        assert generate_palette(strategy, 0, Rgb(1, 2, 3), Rgb(4, 5, 6)) == []

    def test_largest_palette(self):
        palette = generate_palette(PaletteStrategy.SQUARE, 256, Rgb(40, 90, 200))
        assert len(palette) == 256


class TestGradientStrategies:
    """Test primary_to_secondary and light_to_dark."""

    def test_primary_to_secondary_grayscale_ramp(self):
        palette = generate_palette(PaletteStrategy.PRIMARY_TO_SECONDARY, 4, BLACK, WHITE)

        assert palette == [
            Rgb(0, 0, 0),
            Rgb(64, 64, 64),
            Rgb(128, 128, 128),
            Rgb(191, 191, 191),
        ]
        lightness = [color.r for color in palette]
        assert lightness == sorted(set(lightness))

    def test_primary_to_secondary_never_emits_secondary(self):
        palette = generate_palette(PaletteStrategy.PRIMARY_TO_SECONDARY, 1, Rgb(10, 20, 30), WHITE)
        assert palette == [Rgb(10, 20, 30)]

    def test_primary_to_secondary_interpolates_alpha(self):
        palette = generate_palette(
            PaletteStrategy.PRIMARY_TO_SECONDARY, 2, Rgb(0, 0, 0, 0), Rgb(0, 0, 0, 255)
        )
        assert [color.a for color in palette] == [0, 128]

    def test_primary_to_secondary_requires_secondary(self):
        with pytest.raises(InvalidPaletteRequest):
            generate_palette(PaletteStrategy.PRIMARY_TO_SECONDARY, 3, BLACK)

    def test_light_to_dark_red(self, red):
        palette = generate_palette(PaletteStrategy.LIGHT_TO_DARK, 10, red)

        assert palette[:5] == [
            Rgb(0, 0, 0),
            Rgb(51, 0, 0),
            Rgb(102, 0, 0),
            Rgb(153, 0, 0),
            Rgb(204, 0, 0),
        ]
        assert palette[5:] == [
            Rgb(255, 0, 0),
            Rgb(255, 51, 51),
            Rgb(255, 102, 102),
            Rgb(255, 153, 153),
            Rgb(255, 204, 204),
        ]

    def test_light_to_dark_odd_amount_gives_second_half_the_extra(self, red):
        palette = generate_palette(PaletteStrategy.LIGHT_TO_DARK, 3, red)
        assert palette == [Rgb(0, 0, 0), Rgb(255, 0, 0), Rgb(255, 128, 128)]

    def test_light_to_dark_single_color_is_primary(self, red):
        assert generate_palette(PaletteStrategy.LIGHT_TO_DARK, 1, red) == [red]

    def test_light_to_dark_holds_primary_alpha(self):
        primary = Rgb(20, 200, 60, 77)
        palette = generate_palette(PaletteStrategy.LIGHT_TO_DARK, 9, primary)
        assert all(color.a == 77 for color in palette)

    def test_secondary_ignored_by_light_to_dark(self, red):
        a = generate_palette(PaletteStrategy.LIGHT_TO_DARK, 8, red, BLACK)
        b = generate_palette(PaletteStrategy.LIGHT_TO_DARK, 8, red, WHITE)
        assert a == b


class TestAccentStrategies:
    """Test analogous and harmonic strategies."""

    def test_complement_blue(self, blue):
        palette = generate_palette(PaletteStrategy.COMPLEMENT, 6, blue)

        # First accent: the primary hue itself, dark -> accent -> toward bright
        assert palette[:3] == [Rgb(0, 0, 128), Rgb(0, 0, 255), Rgb(64, 64, 255)]
        # Second accent: 180 degrees around the wheel
        assert palette[3:] == [Rgb(128, 128, 0), Rgb(255, 255, 0), Rgb(255, 255, 64)]

        primary_hue = rgb_to_hsv(blue).hue
        second_hue = rgb_to_hsv(palette[4]).hue
        assert second_hue == pytest.approx(normalize_hue(primary_hue + 180.0))

    def test_similar_3_accents_straddle_primary(self, red):
        palette = generate_palette(PaletteStrategy.SIMILAR_3, 6, red)

        # Chunks of 2: [dark, accent] per accent
        accents = [palette[1], palette[3], palette[5]]
        assert accents == [Rgb(255, 0, 255), Rgb(255, 0, 0), Rgb(255, 255, 0)]

    def test_similar_4_skips_primary_hue(self, red):
        palette = generate_palette(PaletteStrategy.SIMILAR_4, 8, red)
        accent_hues = [rgb_to_hsv(palette[i]).hue for i in (1, 3, 5, 7)]
        assert accent_hues == pytest.approx([280.0, 320.0, 40.0, 80.0], abs=0.5)

    def test_triadic_hues(self, red):
        palette = generate_palette(PaletteStrategy.TRIADIC, 3, red)
        # One color per chunk: half is 0, so each chunk emits only its accent
        assert palette == [Rgb(255, 0, 0), Rgb(0, 255, 0), Rgb(0, 0, 255)]

    def test_square_hues(self, red):
        palette = generate_palette(PaletteStrategy.SQUARE, 4, red)
        hues = [rgb_to_hsv(color).hue for color in palette]
        assert hues == pytest.approx([0.0, 90.0, 180.0, 270.0], abs=0.5)

    def test_split_complement_hues(self, red):
        palette = generate_palette(PaletteStrategy.SPLIT_COMPLEMENT, 4, red)
        hues = [rgb_to_hsv(color).hue for color in palette]
        assert hues == pytest.approx([0.0, 40.0, 180.0, 220.0], abs=0.5)

    def test_remainder_goes_to_last_chunk(self, blue):
        palette = generate_palette(PaletteStrategy.COMPLEMENT, 5, blue)
        # [2, 3] split: first chunk is dark + accent, second gets the extra color
        assert palette[:2] == [Rgb(0, 0, 128), Rgb(0, 0, 255)]
        assert palette[2:] == [Rgb(128, 128, 0), Rgb(255, 255, 0), Rgb(255, 255, 64)]

    def test_fewer_colors_than_accents(self, red):
        palette = generate_palette(PaletteStrategy.SQUARE, 2, red)
        # Only the last chunk is non-empty
        assert len(palette) == 2
        assert rgb_to_hsv(palette[0]).hue == pytest.approx(270.0, abs=0.5)

    @pytest.mark.parametrize("strategy", ACCENT_STRATEGIES)
    def test_accent_palettes_hold_primary_alpha(self, strategy):
        primary = Rgb(200, 40, 90, 33)
        palette = generate_palette(strategy, 17, primary)
        assert all(color.a == 33 for color in palette)

    @pytest.mark.parametrize("strategy", ACCENT_STRATEGIES)
    def test_deterministic(self, strategy):
        primary = Rgb(90, 160, 30)
        assert generate_palette(strategy, 23, primary) == generate_palette(strategy, 23, primary)

    def test_dark_and_bright_shades_clamp(self):
        # A fully saturated, fully bright primary: dark keeps S at 100, bright keeps V at 100
        palette = generate_palette(PaletteStrategy.COMPLEMENT, 4, Rgb(0, 255, 0))
        dark = rgb_to_hsv(palette[0])
        assert dark.saturation == pytest.approx(100.0)
        assert dark.value == pytest.approx(50.0, abs=0.5)


class TestInvalidRequests:
    """Test request validation."""

    def test_negative_amount(self, red):
        with pytest.raises(InvalidPaletteRequest):
            generate_palette(PaletteStrategy.SQUARE, -1, red)

    def test_unknown_strategy(self, red):
        with pytest.raises(InvalidPaletteRequest):
            generate_palette("rainbow", 4, red)

    def test_invalid_request_is_value_error(self, red):
        with pytest.raises(ValueError):
            generate_palette(PaletteStrategy.TRIADIC, -5, red)

    def test_strategy_accepts_wire_value(self, red):
        assert generate_palette("triadic", 3, red) == generate_palette(PaletteStrategy.TRIADIC, 3, red)
