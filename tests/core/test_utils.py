import pytest

from quantparse.core.dimensions import DIM_0, Dimensions
from quantparse.core.utils import (
    format_dims,
    from_superscript,
    parse_int,
    to_superscript,
)


@pytest.mark.parametrize("n,expected", [
    (0, "⁰"),
    (2, "²"),
    (-1, "⁻¹"),
    (123, "¹²³"),
    (-45, "⁻⁴⁵"),
])
def test_to_superscript(n, expected):
    assert to_superscript(n) == expected

def test_from_superscript_translates_digits_and_signs():
    assert from_superscript("⁰¹²³⁴⁵⁶⁷⁸⁹") == "0123456789"
    assert from_superscript("⁺⁻") == "+-"
    # other characters are left alone
    assert from_superscript("m²") == "m2"

@pytest.mark.parametrize("text,expected", [
    ("0", 0),
    ("42", 42),
    ("-123", -123),
    ("+7", 7),
    ("⁻¹²³", -123),
    ("⁺⁵", 5),
    ("²", 2),
])
def test_parse_int_accepts_signed_integers(text, expected):
    assert parse_int(text) == expected

@pytest.mark.parametrize("text", ["", "-", "+", "1-", "--2", "+-3", "1+2", "⁻", "¹⁻"])
def test_parse_int_rejects_malformed(text):
    assert parse_int(text) is None

def test_format_dims_plain():
    d = Dimensions({"kg": 1, "m": -1, "s": -2})
    assert format_dims(d) == "m^-1 kg s^-2"

def test_format_dims_pretty():
    d = Dimensions({"m": 2, "mol": -1})
    assert format_dims(d, pretty=True) == "m² mol⁻¹"

def test_format_dims_empty():
    assert format_dims(DIM_0) == ""
    assert format_dims(DIM_0, complete=True) == "scalar"

def test_format_dims_skips_zero_entries_of_plain_mappings():
    assert format_dims({"m": 1, "s": 0}) == "m"
    assert format_dims({"s": 0}, complete=True) == "scalar"
