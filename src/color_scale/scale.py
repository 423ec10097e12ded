# scale.py – single-seed 11-step tonal ramp in OKLCH
#
# Passes:
#   1. anchor selection   – which step the base color occupies
#   2. lightness          – pushed (piecewise-linear rescale) or Gaussian shift
#   3. chroma             – blend from base chroma toward a gamut-relative peak
#   4. hue                – corrected endpoints, short-arc interpolation via base

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Union

from .convert import Hex, hex_to_oklch, oklch_to_hex
from .gamut import max_chroma_in_gamut
from .hue import MIN_CHROMA, find_corrected_hue, perceived_hue, signed_hue_diff

log = logging.getLogger(__name__)

Step = int
Lightness = float


@dataclass(frozen=True)
class ScalePreset:
    """Reference lightness table plus the tunables of the generator."""

    table: tuple[tuple[Step, Lightness], ...]
    k_lightness: float = 0.15
    k_chroma: float = 0.15
    light_end_chroma: float = 0.35
    l_clamp: tuple[float, float] = (0.01, 0.995)
    min_gap: float = 0.005

    def __post_init__(self) -> None:
        if len(self.table) < 2:
            raise ValueError("preset needs at least two steps")
        ls = [lightness for _, lightness in self.table]
        if any(b >= a for a, b in zip(ls, ls[1:])):
            raise ValueError("preset lightness must be strictly decreasing")

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(step for step, _ in self.table)

    @property
    def lightness(self) -> tuple[Lightness, ...]:
        return tuple(lightness for _, lightness in self.table)

    @property
    def last(self) -> int:
        return len(self.table) - 1


# Tailwind-like distribution
DEFAULT_PRESET = ScalePreset(
    table=(
        (50, 0.97),
        (100, 0.93),
        (200, 0.88),
        (300, 0.81),
        (400, 0.71),
        (500, 0.62),
        (600, 0.55),
        (700, 0.49),
        (800, 0.42),
        (900, 0.38),
        (950, 0.28),
    )
)


@dataclass(frozen=True)
class ScaleStep:
    step: Step
    lightness: float
    chroma: float
    hue: float
    hex: Hex
    is_base: bool = False

    @property
    def oklch(self) -> tuple[float, float, float]:
        return self.lightness, self.chroma, self.hue

    def to_dict(self) -> dict[str, object]:
        return {
            "step": self.step,
            "l": self.lightness,
            "c": self.chroma,
            "h": self.hue,
            "hex": self.hex,
            "is_base": self.is_base,
        }


# ---- lightness redistribution ----


@dataclass(frozen=True)
class GaussianShift:
    """Shift the table by the base offset, fading out with distance from the anchor."""

    anchor_idx: int
    base_l: Lightness

    def raw(self, preset: ScalePreset) -> list[Lightness]:
        ref = preset.lightness
        shift = self.base_l - ref[self.anchor_idx]
        return [
            lightness + shift * math.exp(-preset.k_lightness * (i - self.anchor_idx) ** 2)
            for i, lightness in enumerate(ref)
        ]


@dataclass(frozen=True)
class PushedRescale:
    """
    Stretch the table piecewise so the anchor lands on `base_l` while both ends
    keep their reference lightness and each segment keeps its relative spacing.
    """

    anchor_idx: int
    base_l: Lightness

    def raw(self, preset: ScalePreset) -> list[Lightness]:
        ref = preset.lightness
        top, bottom, at_anchor = ref[0], ref[-1], ref[self.anchor_idx]
        std_above = top - at_anchor
        new_above = top - self.base_l
        std_below = at_anchor - bottom
        new_below = self.base_l - bottom

        out: list[Lightness] = []
        for i, lightness in enumerate(ref):
            if i <= self.anchor_idx:
                t = (top - lightness) / std_above if std_above > 0 else 1.0
                out.append(top - t * new_above)
            else:
                t = (at_anchor - lightness) / std_below if std_below > 0 else 1.0
                out.append(self.base_l - t * new_below)
        return out


RedistributionMode = Union[GaussianShift, PushedRescale]


def redistribute_lightness(mode: RedistributionMode, preset: ScalePreset) -> list[Lightness]:
    """Raw lightness of `mode`, clamped and forced strictly decreasing."""
    lo, hi = preset.l_clamp
    values = [min(hi, max(lo, v)) for v in mode.raw(preset)]
    for i in range(1, len(values)):
        if values[i] >= values[i - 1]:
            values[i] = values[i - 1] - preset.min_gap
    return values


# ---- anchor ----


@dataclass(frozen=True)
class Anchor:
    base_idx: int
    anchor_idx: int
    effective_sat: float

    @property
    def pushed(self) -> bool:
        return self.anchor_idx > self.base_idx

    def mode(self, base_l: Lightness) -> RedistributionMode:
        if self.pushed:
            return PushedRescale(self.anchor_idx, base_l)
        return GaussianShift(self.anchor_idx, base_l)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def nearest_step_index(base_l: Lightness, preset: ScalePreset = DEFAULT_PRESET) -> int:
    best_idx, best_diff = 0, float("inf")
    for i, lightness in enumerate(preset.lightness):
        diff = abs(lightness - base_l)
        if diff < best_diff:
            best_idx, best_diff = i, diff
    return best_idx


def select_anchor(
    base_l: Lightness,
    base_c: float,
    chroma_ratio: float,
    preset: ScalePreset = DEFAULT_PRESET,
) -> Anchor:
    """
    Light, vivid colors (yellows, yellow-greens) are pushed away from the top
    of the scale. Saturated colors landing on 300/400 are moved to 500: reds
    and pinks lose gamut abruptly around L=0.70-0.80 and the base would stick
    out in chroma there.
    """
    base_idx = nearest_step_index(base_l, preset)
    chroma_weight = min(1.0, base_c / 0.10)
    effective_sat = chroma_ratio * chroma_weight
    push_steps = _round_half_up(2.0 * effective_sat * effective_sat)
    anchor_idx = min(max(push_steps, base_idx), preset.last)
    if effective_sat > 0.7 and 3 <= anchor_idx <= 4 and preset.last >= 5:
        anchor_idx = 5
    return Anchor(base_idx, anchor_idx, effective_sat)


def peak_chroma_ratio(base_c: float, chroma_ratio: float) -> float:
    """
    Share of the gamut maximum that steps far from the anchor aim for.
    Grayish bases (ratio < 0.2) keep their ratio, bases near their own gamut
    edge (ratio > 0.5) get the full boost.
    """
    color_factor = min(1.0, base_c / 0.01)
    boost_gate = min(1.0, max(0.0, (chroma_ratio - 0.2) / 0.3))
    boost = boost_gate * 0.9 * (1.0 - (1.0 - chroma_ratio) ** 3) * color_factor
    return max(chroma_ratio, boost)


# ---- generator ----


@dataclass
class ScaleGenerator:
    preset: ScalePreset = DEFAULT_PRESET

    def generate(self, base_l: float, base_c: float, H: float) -> list[ScaleStep]:
        preset = self.preset

        max_c_base = max_chroma_in_gamut(base_l, H)
        chroma_ratio = min(base_c / max_c_base, 1.0) if max_c_base > 0 else 0.0
        target_hue = perceived_hue(oklch_to_hex(base_l, base_c, H))

        anchor = select_anchor(base_l, base_c, chroma_ratio, preset)
        a = anchor.anchor_idx
        mode = anchor.mode(base_l)
        log.debug(
            "scale base=(%.3f %.3f %.1f) ratio=%.3f base_idx=%d anchor=%d mode=%s",
            base_l, base_c, H, chroma_ratio, anchor.base_idx, a, type(mode).__name__,
        )

        lightness = redistribute_lightness(mode, preset)
        chroma = self._chroma(lightness, base_c, H, chroma_ratio, anchor)
        hues = self._hues(lightness, chroma, H, target_hue, a)

        return [
            ScaleStep(
                step=step,
                lightness=lightness[i],
                chroma=chroma[i],
                hue=hues[i],
                hex=oklch_to_hex(lightness[i], chroma[i], hues[i]),
                is_base=i == a,
            )
            for i, step in enumerate(preset.steps)
        ]

    # ---- internals ----

    def _chroma(
        self,
        lightness: list[float],
        base_c: float,
        H: float,
        chroma_ratio: float,
        anchor: Anchor,
    ) -> list[float]:
        preset = self.preset
        a = anchor.anchor_idx
        peak = peak_chroma_ratio(base_c, chroma_ratio)
        top_c = (
            preset.light_end_chroma * max_chroma_in_gamut(lightness[0], H)
            if anchor.pushed
            else 0.0
        )

        out: list[float] = []
        for i, L in enumerate(lightness):
            max_c = max_chroma_in_gamut(L, H)
            if anchor.pushed and i < a:
                t = i / a if a > 0 else 0.0
                c = min(top_c + (base_c - top_c) * t, max_c)
            else:
                blend = 1.0 - math.exp(-preset.k_chroma * (i - a) ** 2)
                c = base_c + (peak * max_c - base_c) * blend
                c = max(0.0, min(c, max_c))
            out.append(c)
        return out

    def _hues(
        self,
        lightness: list[float],
        chroma: list[float],
        H: float,
        target_hue: float,
        a: int,
    ) -> list[float]:
        # Correcting every step on its own makes reds and pinks jump around;
        # only the two ends are corrected and the rest interpolated through H.
        last = self.preset.last

        def end_hue(i: int) -> float:
            if chroma[i] > MIN_CHROMA:
                return find_corrected_hue(target_hue, lightness[i], chroma[i], H)
            return H

        hue_first = end_hue(0)
        hue_last = end_hue(last)
        diff_above = signed_hue_diff(hue_first, H)
        diff_below = signed_hue_diff(H, hue_last)
        remaining = last - a

        out: list[float] = []
        for i in range(len(lightness)):
            if i == a:
                h = H
            elif i < a:
                h = hue_first + diff_above * (i / a)
            else:
                t = (i - a) / remaining if remaining > 0 else 1.0
                h = H + diff_below * t
            out.append(h % 360.0)
        return out


def generate_scale(
    base_l: float, base_c: float, H: float, preset: ScalePreset = DEFAULT_PRESET
) -> list[ScaleStep]:
    return ScaleGenerator(preset=preset).generate(base_l, base_c, H)


def generate_scale_from_hex(hex_str: Hex, preset: ScalePreset = DEFAULT_PRESET) -> list[ScaleStep]:
    return generate_scale(*hex_to_oklch(hex_str), preset=preset)


def base_step(scale: list[ScaleStep]) -> ScaleStep | None:
    return next((s for s in scale if s.is_base), None)


def dark_scale(scale: list[ScaleStep]) -> list[ScaleStep]:
    """Same step ids, colors taken from the reversed scale (50 gets 950's color)."""
    return [replace(r, step=s.step) for s, r in zip(scale, reversed(scale))]


__all__ = [
    "DEFAULT_PRESET",
    "Anchor",
    "GaussianShift",
    "PushedRescale",
    "RedistributionMode",
    "ScaleGenerator",
    "ScalePreset",
    "ScaleStep",
    "base_step",
    "dark_scale",
    "generate_scale",
    "generate_scale_from_hex",
    "nearest_step_index",
    "peak_chroma_ratio",
    "redistribute_lightness",
    "select_anchor",
]
