"""
Tests for the CSS value normalizer.
"""

import pytest

from html_interpreter.exceptions import AdjustFontSizeError
from html_interpreter.models.geometry import Bounds
from html_interpreter.styles.value_normalizer import (
    adjust_values,
    extract_token,
    parse_color,
    parse_declarations,
    parse_size,
    to_float,
    to_int,
)

BOUNDS = Bounds(width=500.0, height=800.0)


class TestParseDeclarations:
    """Test splitting style attributes."""

    def test_basic_pairs(self):
        assert parse_declarations("color: red; font-size: 12px") == [
            ("color", "red"),
            ("font-size", "12px"),
        ]

    def test_permissive_whitespace_and_trailing_semicolons(self):
        pairs = parse_declarations("  color :  #ff0000 ;;margin-left:20px;")
        assert pairs == [("color", "#ff0000"), ("margin-left", "20px")]

    def test_empty_style(self):
        assert parse_declarations("") == []
        assert parse_declarations(None) == []


class TestLenientNumbers:
    """Test leading-number parsing."""

    def test_to_int_reads_prefix(self):
        assert to_int("20px") == 20
        assert to_int(" 50%") == 50
        assert to_int("abc") == 0
        assert to_int(None) == 0

    def test_to_float_reads_prefix(self):
        assert to_float("1.5em") == 1.5
        assert to_float("-0.5") == -0.5
        assert to_float("wide") == 0.0


class TestColors:
    """Test colour normalization."""

    def test_rgb_to_hex(self):
        assert parse_color("rgb(255,0,128)") == "ff0080"

    def test_rgb_with_spaces(self):
        assert parse_color("rgb(1, 2, 3)") == "010203"

    @pytest.mark.parametrize("value, expected", [
        ("#ff0000", "ff0000"),
        ("ff0000", "ff0000"),
        ("#ABCDEF", "ABCDEF"),
    ])
    def test_hex_strips_hash(self, value, expected):
        assert parse_color(value) == expected

    def test_out_of_range_channel_is_not_clamped(self):
        assert parse_color("rgb(300,0,0)") == "12c0000"

    def test_rgba_drops_alpha(self):
        assert parse_color("rgba(255, 0, 128, 0.5)") == "ff0080"

    def test_named_colour_passes_through(self):
        assert parse_color("red") == "red"


class TestFontToken:
    """Test font family extraction."""

    def test_single_quoted(self):
        assert extract_token("'Open Sans', Arial") == "Open Sans"

    def test_double_quoted(self):
        assert extract_token('"Times New Roman", serif') == "Times New Roman"

    def test_bare_list_keeps_first_entry(self):
        assert extract_token("Arial, Helvetica, sans-serif") == "Arial"

    def test_bare_single(self):
        assert extract_token("Courier") == "Courier"


class TestSizes:
    """Test font size resolution."""

    def test_plain_integer(self):
        assert parse_size("14", 12) == 14
        assert parse_size("14px", 12) == 14

    def test_em_is_relative_and_truncated(self):
        assert parse_size("1.5em", 12) == 18
        assert parse_size("1.3em", 10) == 13
        assert parse_size("0.55em", 10) == 5

    def test_adjust_hook_applied_last(self):
        assert parse_size("2em", 10, lambda size: size + 1) == 21

    def test_non_callable_hook_is_a_configuration_error(self):
        with pytest.raises(AdjustFontSizeError):
            parse_size("12", 12, "not callable")


class TestAdjustValues:
    """Test full declaration normalization."""

    def test_rename_table(self):
        options = adjust_values(
            [
                ("font-family", "Arial"),
                ("font-size", "16"),
                ("font-style", "bold, italic"),
                ("letter-spacing", "2"),
                ("background-color", "#ffff00"),
            ],
            12,
            BOUNDS,
        )
        assert options == {
            "font": "Arial",
            "size": 16,
            "styles": {"bold", "italic"},
            "character-spacing": 2.0,
            "background": "ffff00",
        }

    def test_character_spacing_non_numeric_is_zero(self):
        assert adjust_values([("letter-spacing", "wide")], 12, BOUNDS) == {"character-spacing": 0.0}

    def test_percentage_width_and_height(self):
        options = adjust_values([("width", "50%"), ("height", "25%")], 12, BOUNDS)
        assert options["width"] == pytest.approx(250.0)
        assert options["height"] == pytest.approx(200.0)

    def test_literal_width(self):
        assert adjust_values([("width", "120px")], 12, BOUNDS) == {"width": 120}

    def test_unknown_properties_pass_through(self):
        options = adjust_values([("text-align", "center"), ("list-symbol", "'-'")], 12, BOUNDS)
        assert options == {"text-align": "center", "list-symbol": "'-'"}

    def test_accepts_mapping(self):
        options = adjust_values({"font": "Arial", "color": "#ff0000"}, 12, BOUNDS)
        assert options == {"font": "Arial", "color": "ff0000"}

    def test_size_uses_given_font_size(self):
        assert adjust_values([("font-size", "2em")], 20, BOUNDS) == {"size": 40}
