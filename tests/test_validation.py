# -*- coding: utf-8 -*-
"""Tests for validation module."""

import math

import pytest

from geouri_lib.validation import ascii_lower
from geouri_lib.validation import equals_ignorecase
from geouri_lib.validation import is_alpha
from geouri_lib.validation import is_alphanum
from geouri_lib.validation import is_digit
from geouri_lib.validation import is_hexdigit
from geouri_lib.validation import is_labelchar
from geouri_lib.validation import is_mark
from geouri_lib.validation import is_p_unreserved
from geouri_lib.validation import is_unreserved
from geouri_lib.validation import is_valid_labeltext
from geouri_lib.validation import to_digit
from geouri_lib.validation import validate_crs_label
from geouri_lib.validation import validate_finite
from geouri_lib.validation import validate_labeltext
from geouri_lib.validation import validate_parameter_name


class TestCharacterClasses:
    """Tests for the ASCII character classifiers."""

    def test_digit(self):
        """Test that only 0-9 are digits."""
        assert all(is_digit(ch) for ch in "0123456789")
        assert not is_digit("a")
        assert not is_digit("/")
        assert not is_digit(":")
        # Non-ASCII digits are rejected
        assert not is_digit("٣")  # ARABIC-INDIC DIGIT THREE

    def test_alpha(self):
        """Test that only ASCII letters are alphabetic."""
        assert is_alpha("a")
        assert is_alpha("Z")
        assert not is_alpha("0")
        assert not is_alpha("ä")
        assert not is_alpha("@")
        assert not is_alpha("[")

    def test_alphanum(self):
        """Test alphanumeric characters."""
        assert is_alphanum("q")
        assert is_alphanum("7")
        assert not is_alphanum("-")

    @pytest.mark.parametrize("ch", list("0123456789abcdefABCDEF"))
    def test_hexdigit(self, ch):
        """Test hexadecimal digits in both cases."""
        assert is_hexdigit(ch)

    @pytest.mark.parametrize("ch", ["g", "G", "x", "%", " "])
    def test_not_hexdigit(self, ch):
        """Test characters that are not hexadecimal digits."""
        assert not is_hexdigit(ch)

    def test_mark(self):
        """Test the mark characters."""
        assert all(is_mark(ch) for ch in "-_.!~*'()")
        assert not is_mark("[")
        assert not is_mark("a")

    def test_p_unreserved(self):
        """Test the p-unreserved characters."""
        assert all(is_p_unreserved(ch) for ch in "[]:&+$")
        assert not is_p_unreserved(";")
        assert not is_p_unreserved("=")
        assert not is_p_unreserved(",")

    def test_unreserved(self):
        """Test that unreserved is alphanumerics plus marks."""
        assert is_unreserved("a")
        assert is_unreserved("5")
        assert is_unreserved("~")
        assert not is_unreserved("%")
        assert not is_unreserved(";")

    def test_labelchar(self):
        """Test labeltext characters."""
        assert is_labelchar("a")
        assert is_labelchar("-")
        assert not is_labelchar("_")
        assert not is_labelchar(".")


class TestToDigit:
    """Tests for to_digit function."""

    @pytest.mark.parametrize(
        ("ch", "radix", "expected"),
        [
            ("0", 10, 0),
            ("9", 10, 9),
            ("a", 16, 10),
            ("F", 16, 15),
            ("z", 36, 35),
            ("a", 10, -1),
            ("8", 8, -1),
            ("%", 16, -1),
            ("1", 1, -1),
            ("1", 37, -1),
        ],
    )
    def test_to_digit(self, ch, radix, expected):
        """Test digit conversion in several bases."""
        assert to_digit(ch, radix) == expected


class TestCaseFolding:
    """Tests for ASCII case folding."""

    def test_ascii_lower(self):
        """Test that only ASCII letters are lowercased."""
        assert ascii_lower("WGS84") == "wgs84"
        assert ascii_lower("Foo-Bar") == "foo-bar"
        assert ascii_lower("ÄB") == "Äb"

    def test_equals_ignorecase(self):
        """Test case-insensitive comparison."""
        assert equals_ignorecase("GEO", "geo")
        assert equals_ignorecase("wGs84", "WGS84")
        assert not equals_ignorecase("geo", "ge")


class TestIsValidLabeltext:
    """Tests for is_valid_labeltext function."""

    def test_valid_labels(self):
        """Test valid labels."""
        assert is_valid_labeltext("wgs84")
        assert is_valid_labeltext("A")
        assert is_valid_labeltext("foo-bar")
        assert is_valid_labeltext("-")
        assert is_valid_labeltext("123")

    def test_invalid_empty(self):
        """Test that empty string is invalid."""
        assert not is_valid_labeltext("")

    @pytest.mark.parametrize("label", ["a b", "a_b", "a.b", "a=b", "a;b", "ä"])
    def test_invalid_chars(self, label):
        """Test that characters outside alphanum / '-' are invalid."""
        assert not is_valid_labeltext(label)

    def test_invalid_trailing_newline(self):
        """Test that a trailing newline is not accepted."""
        assert not is_valid_labeltext("abc\n")


class TestValidateLabeltext:
    """Tests for validate_labeltext and its wrappers."""

    def test_valid_label_returned(self):
        """Test that a valid label is returned unchanged."""
        assert validate_labeltext("Foo") == "Foo"
        assert validate_crs_label("wgs84") == "wgs84"
        assert validate_parameter_name("name") == "name"

    def test_invalid_raises(self):
        """Test that an invalid label raises ValueError."""
        with pytest.raises(ValueError, match="Invalid label"):
            validate_labeltext("a b")

    def test_error_names_item(self):
        """Test that the error message names the validated item."""
        with pytest.raises(ValueError, match="CRS label"):
            validate_crs_label("")
        with pytest.raises(ValueError, match="parameter name"):
            validate_parameter_name("x=y")

    def test_error_escapes_control_chars(self):
        """Test that control characters are escaped in the message."""
        with pytest.raises(ValueError, match=r"\\x00"):
            validate_labeltext("a\x00b")


class TestValidateFinite:
    """Tests for validate_finite function."""

    def test_finite(self):
        """Test that finite values are returned."""
        assert validate_finite(1.5) == 1.5
        assert validate_finite(-0.0) == 0.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite(self, value):
        """Test that NaN and infinities are rejected."""
        with pytest.raises(ValueError, match="not a finite number"):
            validate_finite(value)
