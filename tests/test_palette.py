"""Unit tests for palette generation."""

import logging
import re

import pytest

from landingkit.colors import (
    DEFAULT_FALLBACK_COLOR,
    SHADE_CONFIG,
    adjust_saturation,
    generate_palette,
    hex_to_hsl,
)
from landingkit.exceptions import InvalidColorFormatError
from landingkit.models import Shade

SHADE_KEYS = ["50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950"]
HEX_RE = re.compile(r"#[0-9a-f]{6}")

SAMPLE_COLORS = ["#0284c7", "#f97316", "#6b8e23", "#000000", "#ffffff", "#808080", "#ff00aa", "#10b981"]


class TestShadeConfig:
    """Test the shade table and Shade enum."""

    @pytest.mark.unit
    def test_table_values(self):
        assert SHADE_CONFIG == {
            "50": 95, "100": 90, "200": 80, "300": 70, "400": 60, "500": 50,
            "600": 40, "700": 30, "800": 22, "900": 15, "950": 8,
        }

    @pytest.mark.unit
    def test_shade_order(self):
        assert [shade.value for shade in Shade] == SHADE_KEYS
        assert sorted(reversed(list(Shade)), key=lambda s: s.rank) == list(Shade)
        assert Shade.S50.rank == 0
        assert Shade.S950.rank == 10

    @pytest.mark.unit
    def test_from_key(self):
        assert Shade.from_key("500") is Shade.S500
        assert Shade.from_key(950) is Shade.S950
        assert Shade.from_key(Shade.S50) is Shade.S50
        with pytest.raises(ValueError):
            Shade.from_key("550")


class TestAdjustSaturation:
    """Test the saturation heuristic."""

    @pytest.mark.unit
    def test_light_shades_are_desaturated(self):
        assert adjust_saturation(50, 95) == pytest.approx(40)
        assert adjust_saturation(5, 80) == 10  # floor

    @pytest.mark.unit
    def test_dark_shades_are_boosted(self):
        assert adjust_saturation(50, 8) == pytest.approx(55)
        assert adjust_saturation(98, 15) == 100  # cap

    @pytest.mark.unit
    @pytest.mark.parametrize("lightness", [30, 40, 50, 60, 70])
    def test_mid_shades_unchanged(self, lightness):
        assert adjust_saturation(42.5, lightness) == 42.5


class TestGeneratePalette:
    """Test generate_palette."""

    @pytest.mark.unit
    @pytest.mark.parametrize("color", SAMPLE_COLORS)
    def test_shape(self, color):
        palette = generate_palette(color)
        assert list(palette) == SHADE_KEYS
        assert all(HEX_RE.fullmatch(value) for value in palette.values())

    @pytest.mark.unit
    def test_deterministic(self):
        assert generate_palette("#0284c7") == generate_palette("#0284c7")

    @pytest.mark.unit
    def test_input_format_variants_agree(self):
        assert generate_palette("0284C7") == generate_palette("#0284c7")

    @pytest.mark.unit
    @pytest.mark.parametrize("color", SAMPLE_COLORS)
    def test_lightness_strictly_decreases(self, color):
        lightness = [hex_to_hsl(value).l for value in generate_palette(color).values()]
        assert all(a > b for a, b in zip(lightness, lightness[1:]))

    @pytest.mark.unit
    def test_base_shade_keeps_hue(self):
        base = hex_to_hsl("#0284c7")
        shade_500 = hex_to_hsl(generate_palette("#0284c7")["500"])
        assert shade_500.h == pytest.approx(base.h, abs=1)
        assert shade_500.l == pytest.approx(50, abs=0.5)

    @pytest.mark.unit
    @pytest.mark.parametrize("color", ["#0284c7", "#6b8e23"])
    def test_saturation_heuristic_bounds(self, color):
        saturation = hex_to_hsl(color).s
        palette = generate_palette(color)

        lightest = hex_to_hsl(palette["50"])
        darkest = hex_to_hsl(palette["950"])

        # Conversion rounding at extreme lightness moves saturation a few points
        assert lightest.s <= max(10, saturation * 0.8) + 5
        assert darkest.s >= min(100, saturation) - 3

    @pytest.mark.unit
    def test_invalid_color_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="landingkit.colors.palette"):
            palette = generate_palette("not-a-color")

        assert palette == generate_palette(DEFAULT_FALLBACK_COLOR)
        assert palette == generate_palette("#0284c7")
        assert "Invalid color" in caplog.text
        assert "not-a-color" in caplog.text

    @pytest.mark.unit
    def test_custom_fallback(self):
        assert generate_palette("nope", fallback="#f97316") == generate_palette("#f97316")

    @pytest.mark.unit
    def test_strict_mode_raises(self):
        with pytest.raises(InvalidColorFormatError):
            generate_palette("not-a-color", fallback=None)

    @pytest.mark.unit
    def test_invalid_fallback_raises_instead_of_looping(self):
        with pytest.raises(InvalidColorFormatError):
            generate_palette("nope", fallback="also-nope")


class TestReferencePalettes:
    """Generated palettes match the reference web palettes exactly."""

    @pytest.mark.unit
    def test_default_brand_palette(self):
        assert generate_palette("#0284c7") == {
            "50": "#e8f5fc",
            "100": "#d2ecf9",
            "200": "#a4d9f4",
            "300": "#68cafd",
            "400": "#35b9fd",
            "500": "#03a7fc",
            "600": "#0286ca",
            "700": "#026497",
            "800": "#004a70",
            "900": "#00324d",
            "950": "#001b29",
        }

    @pytest.mark.unit
    def test_channel_ties_round_half_up(self):
        # Red channel of this shade is a .5 tie and rounds up
        assert generate_palette("#fda9aa")["900"] == "#4d0001"
