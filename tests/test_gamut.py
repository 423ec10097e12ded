import pytest

from color_scale.convert import hex_to_oklch
from color_scale.gamut import is_in_gamut, max_chroma_in_gamut

GRID = [(L, H) for L in (0.2, 0.35, 0.5, 0.62, 0.75, 0.9) for H in range(0, 360, 30)]


def test_gray_axis_in_gamut():
    for L in (0.05, 0.5, 0.95):
        assert is_in_gamut(L, 0.0, 0.0)


def test_vivid_red_out_of_gamut():
    assert not is_in_gamut(0.5, 0.4, 30.0)


@pytest.mark.parametrize("L,H", GRID)
def test_boundary_is_tight(L, H):
    c_max = max_chroma_in_gamut(L, float(H))
    assert c_max >= 0.0
    assert is_in_gamut(L, c_max, float(H))
    assert not is_in_gamut(L, c_max + 0.01, float(H))


@pytest.mark.parametrize("hex_str", ["#2a6db6", "#ff0000", "#00ff00", "#ffff00"])
def test_srgb_colors_fit_under_their_max(hex_str):
    L, C, H = hex_to_oklch(hex_str)
    assert C <= max_chroma_in_gamut(L, H)


def test_cached_and_uncached_agree():
    cached = max_chroma_in_gamut(0.62, 252.0)
    assert max_chroma_in_gamut.__wrapped__(0.62, 252.0) == cached
