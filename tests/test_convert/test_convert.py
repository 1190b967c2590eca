"""Tests for converting declarations into native styles."""

import pytest

from nativecss.convert import camel_case, to_native
from nativecss.css import Declaration
from nativecss.errors import DeclarationConversionError


def convert(prop: str, value: str) -> tuple[dict, list[DeclarationConversionError]]:
    errors: list[DeclarationConversionError] = []
    style = to_native(Declaration(prop, value), on_error=errors.append)
    return style, errors


class TestCamelCase:
    def test_camel_case(self):
        assert camel_case("border-top-left-radius") == "borderTopLeftRadius"
        assert camel_case("color") == "color"


# ---------------------------------------------------------------------------
# Single values
# ---------------------------------------------------------------------------


class TestColors:
    def test_named(self):
        assert convert("color", "Red") == ({"color": "red"}, [])

    def test_hex_kept_as_written(self):
        assert convert("color", "#FFF") == ({"color": "#FFF"}, [])

    def test_function(self):
        assert convert("background-color", "rgb(0 0 0 / 0.5)") == ({"backgroundColor": "rgb(0 0 0 / 0.5)"}, [])

    def test_invalid(self):
        style, errors = convert("color", "12px")
        assert style == {}
        assert len(errors) == 1
        assert errors[0].reason.startswith("invalid value")

    def test_special_keywords(self):
        assert convert("color", "transparent") == ({"color": "transparent"}, [])
        assert convert("border-top-color", "currentColor") == ({"borderTopColor": "currentcolor"}, [])

    def test_unknown_name(self):
        style, errors = convert("color", "banana")
        assert style == {}
        assert errors[0].reason == "invalid value, expected a color"


class TestLengths:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("10px", 10),
            ("0", 0),
            ("1.5px", 1.5),
            ("0.875rem", 14),
            ("2em", 32),
            ("50%", "50%"),
            ("-0.5rem", -8),
        ],
    )
    def test_width(self, value, expected):
        assert convert("width", value) == ({"width": expected}, [])

    def test_auto_only_where_allowed(self):
        assert convert("margin-top", "auto") == ({"marginTop": "auto"}, [])
        style, errors = convert("width", "auto")
        assert style == {}
        assert len(errors) == 1

    def test_unitless_non_zero_is_invalid(self):
        style, errors = convert("line-height", "1.5")
        assert style == {}
        assert errors[0].property == "line-height"
        assert errors[0].value == "1.5"

    @pytest.mark.parametrize("value", ["1" + "0" * 400 + "px", "1" + "0" * 400 + "rem", "9" * 400 + "%"])
    def test_out_of_range(self, value):
        style, errors = convert("width", value)
        assert style == {}
        assert errors[0].reason == "invalid value, number is out of range"

    def test_integral_numbers_are_ints(self):
        style, _ = convert("font-size", "1rem")
        assert isinstance(style["fontSize"], int)


class TestOtherValues:
    def test_number(self):
        assert convert("opacity", "0.5") == ({"opacity": 0.5}, [])

    def test_keyword(self):
        assert convert("display", "FLEX") == ({"display": "flex"}, [])
        assert convert("flex-direction", "row-reverse") == ({"flexDirection": "row-reverse"}, [])

    def test_unsupported_keyword(self):
        style, errors = convert("display", "grid")
        assert style == {}
        assert "flex" in errors[0].reason

    def test_font_weight(self):
        assert convert("font-weight", "600") == ({"fontWeight": "600"}, [])
        assert convert("font-weight", "bold") == ({"fontWeight": "bold"}, [])
        assert convert("font-weight", "650")[0] == {}

    def test_font_family(self):
        assert convert("font-family", '"Inter", sans-serif') == ({"fontFamily": "Inter"}, [])

    def test_aspect_ratio(self):
        assert convert("aspect-ratio", "16 / 9") == ({"aspectRatio": 16 / 9}, [])
        assert convert("aspect-ratio", "1") == ({"aspectRatio": 1}, [])


# ---------------------------------------------------------------------------
# Shorthands
# ---------------------------------------------------------------------------


class TestShorthands:
    def test_padding_two_values(self):
        style, _ = convert("padding", "1rem 2px")
        assert style == {"paddingTop": 16, "paddingRight": 2, "paddingBottom": 16, "paddingLeft": 2}

    def test_margin_three_values(self):
        style, _ = convert("margin", "1px auto 3px")
        assert style == {"marginTop": 1, "marginRight": "auto", "marginBottom": 3, "marginLeft": "auto"}

    def test_too_many_values(self):
        style, errors = convert("margin", "1px 2px 3px 4px 5px")
        assert style == {}
        assert len(errors) == 1

    def test_border_color_keeps_functions_whole(self):
        style, _ = convert("border-color", "red rgb(0, 0, 0)")
        assert style == {
            "borderTopColor": "red",
            "borderRightColor": "rgb(0, 0, 0)",
            "borderBottomColor": "red",
            "borderLeftColor": "rgb(0, 0, 0)",
        }

    def test_border_radius(self):
        assert convert("border-radius", "0.25rem") == ({"borderRadius": 4}, [])
        style, _ = convert("border-radius", "1px 2px")
        assert style == {
            "borderTopLeftRadius": 1,
            "borderTopRightRadius": 2,
            "borderBottomRightRadius": 1,
            "borderBottomLeftRadius": 2,
        }

    def test_gap(self):
        assert convert("gap", "1rem 2rem") == ({"rowGap": 16, "columnGap": 32}, [])

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1", {"flexGrow": 1, "flexShrink": 1, "flexBasis": "0%"}),
            ("none", {"flexGrow": 0, "flexShrink": 0}),
            ("auto", {"flexGrow": 1, "flexShrink": 1, "flexBasis": "auto"}),
            ("1 1 0%", {"flexGrow": 1, "flexShrink": 1, "flexBasis": "0%"}),
            ("2 10px", {"flexGrow": 2, "flexBasis": 10}),
        ],
    )
    def test_flex(self, value, expected):
        assert convert("flex", value) == (expected, [])

    def test_background_single_color(self):
        assert convert("background", "blue") == ({"backgroundColor": "blue"}, [])
        assert convert("background", "url(a.png) no-repeat")[0] == {}

    def test_text_decoration(self):
        assert convert("text-decoration", "underline") == ({"textDecorationLine": "underline"}, [])


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_custom_property_is_silent(self):
        assert convert("--tw-bg-opacity", "1") == ({}, [])

    def test_unsupported_property(self):
        style, errors = convert("transition", "all 1s")
        assert style == {}
        assert errors == [DeclarationConversionError("transition", "all 1s", "unsupported property")]

    def test_var_is_invalid(self):
        style, errors = convert("color", "var(--tw-text-opacity)")
        assert style == {}
        assert "var()" in errors[0].reason

    def test_css_wide_keyword_is_invalid(self):
        assert len(convert("color", "inherit")[1]) == 1

    def test_no_callback_does_not_raise(self):
        assert to_native(Declaration("display", "grid")) == {}

    def test_error_message(self):
        _, errors = convert("transition", "all 1s")
        assert str(errors[0]) == "transition: all 1s (unsupported property)"
