import pytest

from color_scale.contrast import BLACK, WHITE, contrast_ratio
from color_scale.scale import ScaleStep, generate_scale_from_hex
from color_scale.tokens import (
    UI_TOKEN_TARGETS,
    derive_ui_tokens,
    page_background,
    pick_by_contrast,
)


@pytest.fixture(scope="module")
def blue():
    return generate_scale_from_hex("#2a6db6")


def test_extreme_targets(blue):
    assert pick_by_contrast(blue, WHITE, 1.0).step == 50
    assert pick_by_contrast(blue, WHITE, 21.0).step == 950
    assert pick_by_contrast(blue, BLACK, 1.0).step == 950
    assert pick_by_contrast(blue, BLACK, 21.0).step == 50


def test_pick_is_nearest(blue):
    picked = pick_by_contrast(blue, WHITE, 4.5)
    best = min(abs(contrast_ratio(s.hex, WHITE) - 4.5) for s in blue)
    assert abs(contrast_ratio(picked.hex, WHITE) - 4.5) == best


def test_ties_keep_first():
    a = ScaleStep(100, 0.9, 0.0, 0.0, "#777777")
    b = ScaleStep(200, 0.9, 0.0, 0.0, "#777777")
    assert pick_by_contrast([a, b], WHITE, 4.5) is a


def test_page_background():
    assert page_background("light") == WHITE
    assert page_background("dark") == BLACK
    with pytest.raises(ValueError):
        page_background("sepia")


def test_ui_tokens(blue):
    tokens = derive_ui_tokens(blue, WHITE)
    assert set(tokens) == set(UI_TOKEN_TARGETS)
    assert all(t.text in (WHITE, BLACK) for t in tokens.values())
    primary = tokens["text-primary"].step
    surface = tokens["surface"].step
    assert contrast_ratio(primary.hex, WHITE) > contrast_ratio(surface.hex, WHITE)
    d = tokens["accent"].to_dict()
    assert d["css"].startswith("oklch(") and d["hex"] == tokens["accent"].step.hex
