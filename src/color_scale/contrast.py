"""WCAG 2.x relative luminance and contrast ratio."""

from __future__ import annotations

from dataclasses import dataclass

from .convert import Hex, hex_to_srgb, srgb_to_linear

WHITE: Hex = "#ffffff"
BLACK: Hex = "#000000"

# label → minimum ratio
WCAG_LEVELS: dict[str, float] = {
    "AA": 4.5,
    "AA-large": 3.0,
    "AAA": 7.0,
    "AAA-large": 4.5,
}


def relative_luminance(hex_str: Hex) -> float:
    r, g, b = (srgb_to_linear(c) for c in hex_to_srgb(hex_str))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(hex_a: Hex, hex_b: Hex) -> float:
    l1 = relative_luminance(hex_a)
    l2 = relative_luminance(hex_b)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


@dataclass(frozen=True)
class ContrastReport:
    fg: Hex
    bg: Hex
    ratio: float
    levels: dict[str, bool]

    def to_dict(self) -> dict[str, object]:
        return {
            "fg": self.fg,
            "bg": self.bg,
            "ratio": round(self.ratio, 2),
            "levels": {k: ("Pass" if v else "Fail") for k, v in self.levels.items()},
        }


def wcag_checks(fg: Hex, bg: Hex) -> ContrastReport:
    ratio = contrast_ratio(fg, bg)
    levels = {label: ratio >= t for label, t in WCAG_LEVELS.items()}
    return ContrastReport(fg=fg, bg=bg, ratio=ratio, levels=levels)


def text_on_bg(bg: Hex) -> Hex:
    # white is preferred as soon as it reaches AA-large
    if contrast_ratio(bg, WHITE) >= WCAG_LEVELS["AA-large"]:
        return WHITE
    return BLACK


__all__ = [
    "BLACK",
    "ContrastReport",
    "WCAG_LEVELS",
    "WHITE",
    "contrast_ratio",
    "relative_luminance",
    "text_on_bg",
    "wcag_checks",
]
