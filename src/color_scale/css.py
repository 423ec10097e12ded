from __future__ import annotations

from typing import Sequence

from .scale import ScaleStep, dark_scale


def format_oklch(s: ScaleStep) -> str:
    return f"oklch({s.lightness:.3f} {s.chroma:.3f} {s.hue:.1f})"


def _declaration(name: str, s: ScaleStep) -> str:
    return f"  --{name}-{s.step}: {format_oklch(s)}; /* {s.hex} */"


def generate_css_output(name: str, scale: Sequence[ScaleStep]) -> str:
    """
    Two custom-property blocks for `scale`:
      :root, .light – steps in order
      .dark         – same step ids, values taken from the reversed scale
    """
    light = [_declaration(name, s) for s in scale]
    dark = [_declaration(name, d) for d in dark_scale(list(scale))]
    return (
        "/* Light */\n:root, .light {\n"
        + "\n".join(light)
        + "\n}\n\n/* Dark */\n.dark {\n"
        + "\n".join(dark)
        + "\n}"
    )


__all__ = ["format_oklch", "generate_css_output"]
