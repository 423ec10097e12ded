from __future__ import annotations

from functools import lru_cache

from .convert import oklch_to_linear_rgb

Chroma = float

GAMUT_EPS = 0.001  # tolerance band around the [0, 1] cube
CHROMA_HI = 0.4
CHROMA_ITERS = 20


def is_in_gamut(L: float, C: float, H: float) -> bool:
    lo, hi = -GAMUT_EPS, 1.0 + GAMUT_EPS
    return all(lo <= ch <= hi for ch in oklch_to_linear_rgb(L, C, H))


@lru_cache(maxsize=16384)
def max_chroma_in_gamut(L: float, H: float) -> Chroma:
    """
    Largest chroma at (L, H) that stays inside sRGB.
    Fixed-count bisection: `lo` is always in gamut, `hi` possibly not.
    Cached on the exact (L, H) pair, so cached and uncached results agree.
    """
    lo, hi = 0.0, CHROMA_HI
    for _ in range(CHROMA_ITERS):
        mid = 0.5 * (lo + hi)
        if is_in_gamut(L, mid, H):
            lo = mid
        else:
            hi = mid
    return lo


__all__ = ["is_in_gamut", "max_chroma_in_gamut"]
