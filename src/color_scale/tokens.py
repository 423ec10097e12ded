from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from .contrast import BLACK, WHITE, contrast_ratio, text_on_bg
from .convert import Hex
from .css import format_oklch
from .scale import ScaleStep

Mode = Literal["light", "dark"]

# semantic role → contrast ratio it should reach against the page background
UI_TOKEN_TARGETS: dict[str, float] = {
    "text-primary": 12.0,
    "text-secondary": 4.5,
    "accent": 4.0,
    "accent-hover": 5.0,
    "surface": 1.1,
    "surface-raised": 1.25,
    "surface-raised-hover": 1.5,
    "border-subtle": 1.3,
    "border": 2.0,
    "border-hover": 3.0,
    "input-bg": 1.05,
}


def page_background(mode: Mode) -> Hex:
    if mode == "light":
        return WHITE
    if mode == "dark":
        return BLACK
    raise ValueError(f"unknown mode '{mode}'")


def pick_by_contrast(scale: Sequence[ScaleStep], bg: Hex, target: float) -> ScaleStep:
    """Step whose contrast against `bg` is closest to `target`; first wins ties."""
    best = scale[0]
    best_diff = float("inf")
    for s in scale:
        diff = abs(contrast_ratio(s.hex, bg) - target)
        if diff < best_diff:
            best_diff, best = diff, s
    return best


@dataclass(frozen=True)
class UiToken:
    name: str
    step: ScaleStep
    text: Hex

    @property
    def css(self) -> str:
        return format_oklch(self.step)

    def to_dict(self) -> dict[str, object]:
        return {
            "step": self.step.step,
            "hex": self.step.hex,
            "css": self.css,
            "text": self.text,
        }


def derive_ui_tokens(
    scale: Sequence[ScaleStep],
    bg: Hex,
    targets: dict[str, float] | None = None,
) -> dict[str, UiToken]:
    out: dict[str, UiToken] = {}
    for name, target in (targets or UI_TOKEN_TARGETS).items():
        step = pick_by_contrast(scale, bg, target)
        out[name] = UiToken(name=name, step=step, text=text_on_bg(step.hex))
    return out


__all__ = [
    "UI_TOKEN_TARGETS",
    "UiToken",
    "derive_ui_tokens",
    "page_background",
    "pick_by_contrast",
]
