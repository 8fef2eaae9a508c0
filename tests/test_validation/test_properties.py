"""Tests for the property-name validator."""

import pytest

from stylegen.errors import InvalidPropertyError
from stylegen.validation import (
    ALL_PROPERTIES,
    CSS_PROPERTIES,
    SVG_PROPERTIES,
    is_valid_property,
    validate,
)


class TestCanonicalNames:
    def test_hyphenated(self):
        assert validate("background-color") == "background-color"

    def test_underscore(self):
        assert validate("background_color") == "background-color"

    def test_single_word(self):
        assert validate("opacity") == "opacity"

    def test_surrounding_whitespace(self):
        assert validate("  z_index ") == "z-index"


class TestRejection:
    def test_unknown_property(self):
        with pytest.raises(InvalidPropertyError) as exc_info:
            validate("not-soo-awesome-style-name")
        assert exc_info.value.name == "not-soo-awesome-style-name"
        assert "not-soo-awesome-style-name" in str(exc_info.value)

    def test_typo(self):
        with pytest.raises(InvalidPropertyError):
            validate("background-color-typo")

    def test_empty(self):
        with pytest.raises(InvalidPropertyError):
            validate("")

    def test_value_words_are_not_properties(self):
        for word in ("inherit", "initial", "unset", "vmax"):
            assert not is_valid_property(word)

    def test_selector_in_message(self):
        err = InvalidPropertyError("colour", selector=".layer")
        assert str(err) == "invalid style name: `colour` in selector: `.layer`"


class TestSvgProperties:
    def test_hyphenated_svg(self):
        assert validate("stroke_dasharray") == "stroke-dasharray"

    def test_camel_case_kept(self):
        assert validate("gradientTransform") == "gradientTransform"

    def test_snake_case_maps_to_camel(self):
        assert validate("gradient_units") == "gradientUnits"


class TestExtensions:
    def test_custom_property_verbatim(self):
        assert validate("--main_color") == "--main_color"

    def test_bare_double_dash_rejected(self):
        with pytest.raises(InvalidPropertyError):
            validate("--")

    def test_vendor_prefix(self):
        assert validate("-webkit-user-select") == "-webkit-user-select"
        assert validate("_moz_appearance") == "-moz-appearance"

    def test_vendor_prefix_needs_known_property(self):
        assert not is_valid_property("-webkit-bogus")


class TestTables:
    def test_tables_are_frozen(self):
        assert isinstance(CSS_PROPERTIES, frozenset)
        assert isinstance(SVG_PROPERTIES, frozenset)

    def test_all_is_union(self):
        assert ALL_PROPERTIES == CSS_PROPERTIES | SVG_PROPERTIES

    def test_css_names_are_canonical(self):
        for name in CSS_PROPERTIES:
            assert name == name.lower()
            assert "_" not in name
            assert validate(name) == name

    def test_is_valid_property(self):
        assert is_valid_property("display")
        assert not is_valid_property("displya")
