"""Numeric token extraction from noisy report fields."""

import pytest

from horizons.numeric import extract_number


# --------------------------------------------------------------------------- #
#  Plain literals
# --------------------------------------------------------------------------- #

def test_integer():
    assert extract_number("1234") == 1234.0


def test_exponent():
    assert extract_number("1234e65") == pytest.approx(1.234e68)


def test_negative():
    assert extract_number("-1234") == -1234.0


def test_signed_exponent():
    assert extract_number("2.345471743170112E+08") == 2.345471743170112e8
    assert extract_number("-5.221152230112693E-01") == -0.5221152230112693


# --------------------------------------------------------------------------- #
#  Trailing noise
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize("text, expected", [
    ("2439.4+-0.1", 2439.4),
    ("58.6463 d", 58.6463),
    ("3.70*", 3.70),
    ("11.0\"", 11.0),
    ("6371.01(km)", 6371.01),
])
def test_stops_at_noise(text, expected):
    assert extract_number(text) == expected


# --------------------------------------------------------------------------- #
#  Rejections
# --------------------------------------------------------------------------- #

@pytest.mark.parametrize("text", [
    "1234.1.2",
    "",
    "-",
    "abc",
    "~1600",
    "(km) 12",
    "1.0e",
    "1e999",
])
def test_rejects(text):
    assert extract_number(text) is None


def test_minus_only_leading():
    # A minus after the first character ends the literal
    assert extract_number("12-3") == 12.0
    assert extract_number("--5") is None
