from __future__ import annotations

import numpy as np

from .convert import Hex, hex_to_srgb, oklch_to_hex

Hue = float

ACHROMATIC = -1.0  # perceived hue sentinel for grays
MIN_CHROMA = 0.005

# coarse: ±40° in 2° steps, fine: ±2° around the coarse winner in 0.2° steps.
# Changing either grid changes the generated scales.
COARSE_OFFSETS = tuple(float(d) for d in range(-40, 41, 2))
FINE_OFFSETS = tuple(float(d) for d in np.linspace(-2.0, 2.0, 21))


def srgb_hue(r: float, g: float, b: float) -> Hue:
    """HSL hue in [0, 360) of an sRGB triplet, or ACHROMATIC."""
    hi = max(r, g, b)
    lo = min(r, g, b)
    d = hi - lo
    if d < 0.001:
        return ACHROMATIC
    if hi == r:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif hi == g:
        h = (b - r) / d + 2.0
    else:
        h = (r - g) / d + 4.0
    return h / 6.0 * 360.0


def perceived_hue(hex_str: Hex) -> Hue:
    return srgb_hue(*hex_to_srgb(hex_str))


def hue_diff(a: Hue, b: Hue) -> float:
    d = abs(a - b)
    return min(d, 360.0 - d)


def signed_hue_diff(a: Hue, b: Hue) -> float:
    """b - a along the short arc, in [-180, 180]."""
    d = b - a
    if d > 180.0:
        d -= 360.0
    if d < -180.0:
        d += 360.0
    return d


def find_corrected_hue(target: Hue, L: float, C: float, hint_h: Hue) -> Hue:
    """
    OKLCH hue near `hint_h` whose rendered sRGB color shows the perceived hue
    `target` at the given lightness and chroma. Grays and undefined targets
    return `hint_h` untouched.
    """
    if C < MIN_CHROMA or target < 0:
        return hint_h

    best_h = hint_h
    best_diff = float("inf")

    def scan(center: Hue, offsets: tuple[float, ...]) -> None:
        nonlocal best_h, best_diff
        for d in offsets:
            h = (center + d) % 360.0
            ph = perceived_hue(oklch_to_hex(L, C, h))
            if ph < 0:
                continue
            diff = hue_diff(ph, target)
            if diff < best_diff:
                best_diff, best_h = diff, h

    scan(hint_h, COARSE_OFFSETS)
    scan(best_h, FINE_OFFSETS)
    return best_h


__all__ = [
    "ACHROMATIC",
    "find_corrected_hue",
    "hue_diff",
    "perceived_hue",
    "signed_hue_diff",
    "srgb_hue",
]
