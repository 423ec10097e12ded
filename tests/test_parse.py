import pytest

from color_scale.convert import oklch_to_hex
from color_scale.parse import (
    clamp_oklch,
    is_valid_hex,
    normalize_hex,
    parse_color,
    parse_oklch_string,
)


@pytest.mark.parametrize("s", ["#2a6db6", "#2A6DB6", "#000000"])
def test_valid_hex(s):
    assert is_valid_hex(s)


@pytest.mark.parametrize("s", ["2a6db6", "#2a6db", "#2a6db6ff", "#gggggg", "#fff", ""])
def test_invalid_hex(s):
    assert not is_valid_hex(s)


@pytest.mark.parametrize("s", ["2A6DB6", "##2a6db6", " #2a6db6 "])
def test_normalize_hex(s):
    assert normalize_hex(s) == "#2a6db6"


@pytest.mark.parametrize("s", ["#2a6db", "#gggggg", "blue", ""])
def test_normalize_hex_rejects(s):
    with pytest.raises(ValueError):
        normalize_hex(s)


@pytest.mark.parametrize(
    "s", ["oklch(0.62 0.1 250)", "oklch(62% 0.1 250)", "oklch(62 0.1 250)"]
)
def test_oklch_strings(s):
    assert parse_oklch_string(s) == oklch_to_hex(0.62, 0.1, 250.0)


@pytest.mark.parametrize("s", ["#2a6db6", "rgb(0 0 0)", "not a color", ""])
def test_non_oklch_strings(s):
    assert parse_oklch_string(s) is None


def test_parse_color():
    assert parse_color("oklch(0.62 0.1 250)") == oklch_to_hex(0.62, 0.1, 250.0)
    assert parse_color("2a6db6") == "#2a6db6"
    with pytest.raises(ValueError):
        parse_color("nope")


def test_clamp_oklch():
    assert clamp_oklch(1.5, -0.1, 370.0) == (1.0, 0.0, pytest.approx(10.0))
    assert clamp_oklch(0.5, 0.5, -30.0) == (0.5, 0.4, pytest.approx(330.0))
