# convert.py – sRGB ↔ linear RGB ↔ Oklab ↔ OKLCH (Björn Ottosson, 2020)
#   - IEC 61966-2-1 companding (thresholds 0.04045 / 0.0031308, gamma 2.4)
#   - published Oklab matrices, reproduced digit for digit
#   - hue in degrees, wrapped to [0, 360)

from __future__ import annotations

import math

import numpy as np

Hex = str
Rgb = tuple[float, float, float]
Lab = tuple[float, float, float]
Lch = tuple[float, float, float]

# --- constants ---------------------------------------------------------------
_GAMMA = 2.4
_A = 0.055

_LINEAR_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
_LMS_TO_LAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
_LAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)
_LMS_TO_LINEAR = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)


# --- transfer curve ----------------------------------------------------------
def srgb_to_linear(c: float) -> float:
    return c / 12.92 if c <= 0.04045 else ((c + _A) / (1 + _A)) ** _GAMMA


def linear_to_srgb(c: float) -> float:
    # negative linear values only show up right at the gamut edge; they take
    # the linear segment and get clamped on the way to hex
    return c * 12.92 if c <= 0.0031308 else (1 + _A) * c ** (1 / _GAMMA) - _A


# --- hex ---------------------------------------------------------------------
def hex_to_srgb(hex_str: Hex) -> Rgb:
    h = hex_str.lstrip("#")
    r, g, b = (int(h[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
    return r, g, b


def srgb_to_hex(r: float, g: float, b: float) -> Hex:
    """
    sRGB triplet in [0-1] to #rrggbb. Channels are clamped first and rounded
    half-up, the way `Math.round()` behaves for positive inputs.
    """
    u8 = np.floor(np.clip([r, g, b], 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)
    return f"#{u8[0]:02x}{u8[1]:02x}{u8[2]:02x}"


# --- Oklab -------------------------------------------------------------------
def linear_rgb_to_oklab(r: float, g: float, b: float) -> Lab:
    lms = np.cbrt(_LINEAR_TO_LMS @ np.array([r, g, b], dtype=np.float64))
    L, a, b_ = _LMS_TO_LAB @ lms
    return float(L), float(a), float(b_)


def oklab_to_linear_rgb(L: float, a: float, b: float) -> Rgb:
    lms = (_LAB_TO_LMS @ np.array([L, a, b], dtype=np.float64)) ** 3
    r, g, b_ = _LMS_TO_LINEAR @ lms
    return float(r), float(g), float(b_)


def oklab_to_oklch(L: float, a: float, b: float) -> Lch:
    C = math.sqrt(a * a + b * b)
    H = math.degrees(math.atan2(b, a))
    if H < 0:
        H += 360.0
    return L, C, H


def oklch_to_oklab(L: float, C: float, H: float) -> Lab:
    h = math.radians(H)
    return L, C * math.cos(h), C * math.sin(h)


# --- composite entry / exit points -------------------------------------------
def oklch_to_linear_rgb(L: float, C: float, H: float) -> Rgb:
    return oklab_to_linear_rgb(*oklch_to_oklab(L, C, H))


def hex_to_oklch(hex_str: Hex) -> Lch:
    lin = (srgb_to_linear(c) for c in hex_to_srgb(hex_str))
    return oklab_to_oklch(*linear_rgb_to_oklab(*lin))


def oklch_to_hex(L: float, C: float, H: float) -> Hex:
    lr, lg, lb = oklch_to_linear_rgb(L, C, H)
    return srgb_to_hex(linear_to_srgb(lr), linear_to_srgb(lg), linear_to_srgb(lb))


__all__ = [
    "hex_to_oklch",
    "hex_to_srgb",
    "linear_rgb_to_oklab",
    "linear_to_srgb",
    "oklab_to_linear_rgb",
    "oklab_to_oklch",
    "oklch_to_hex",
    "oklch_to_linear_rgb",
    "oklch_to_oklab",
    "srgb_to_hex",
    "srgb_to_linear",
]
