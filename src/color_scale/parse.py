"""Caller-facing input validation: hex strings, CSS oklch() strings, slider triples."""

from __future__ import annotations

import math
import re

from coloraide import Color

from .convert import Hex, oklch_to_hex

HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

L_RANGE = (0.0, 1.0)
C_RANGE = (0.0, 0.4)


def is_valid_hex(s: str) -> bool:
    return bool(HEX_PATTERN.match(s))


def normalize_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; a missing or repeated leading '#' is tolerated."""
    raw = "#" + (s or "").strip().lstrip("#")
    if not is_valid_hex(raw):
        raise ValueError(f"invalid hex: {s!r}")
    return raw.lower()


def parse_oklch_string(s: str) -> Hex | None:
    """
    `oklch(L C H)` → hex, or None when `s` is not an oklch() color.
    Lightness may be a percentage; a bare lightness above 1 is read as one too.
    """
    m = Color.match((s or "").strip(), fullmatch=True)
    if m is None or m.color.space() != "oklch":
        return None
    L, C, H = (0.0 if math.isnan(v) else float(v) for v in m.color.coords())
    if L > 1:
        L /= 100.0
    return oklch_to_hex(L, C, H)


def parse_color(s: str) -> Hex:
    from_oklch = parse_oklch_string(s)
    if from_oklch is not None:
        return from_oklch
    return normalize_hex(s)


def clamp_oklch(L: float, C: float, H: float) -> tuple[float, float, float]:
    """Range-clamp independent slider values; components are not cross-checked."""
    L = min(L_RANGE[1], max(L_RANGE[0], L))
    C = min(C_RANGE[1], max(C_RANGE[0], C))
    return L, C, H % 360.0


__all__ = [
    "HEX_PATTERN",
    "clamp_oklch",
    "is_valid_hex",
    "normalize_hex",
    "parse_color",
    "parse_oklch_string",
]
