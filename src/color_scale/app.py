from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .contrast import wcag_checks
from .convert import hex_to_oklch
from .css import format_oklch, generate_css_output
from .gamut import is_in_gamut
from .parse import clamp_oklch, normalize_hex, parse_color
from .scale import base_step, dark_scale, generate_scale
from .tokens import derive_ui_tokens, page_background

log = logging.getLogger(__name__)

SCALE_NAME_PATTERN = re.compile(r"^[a-zA-Z][\w-]*$")

DEFAULTS: Mapping[str, Any] = {
    "SCALE_NAME": "brand",
    "DEFAULT_COLOR": "#2a6db6",
    "CONTRAST_BG": "#ffffff",
}


def _base_from_args(args: Mapping[str, str], default_color: str) -> tuple[float, float, float]:
    """OKLCH base from `l`/`c`/`h` sliders if all three are given, else from `color`."""
    if all(k in args for k in ("l", "c", "h")):
        try:
            lch = [float(args[k]) for k in ("l", "c", "h")]
        except ValueError:
            raise ValueError("l, c and h must be numbers") from None
        if not all(math.isfinite(v) for v in lch):
            raise ValueError("l, c and h must be finite")
        return clamp_oklch(*lch)
    return hex_to_oklch(parse_color(args.get("color", default_color)))


def _scale_name(args: Mapping[str, str], default: str) -> str:
    name = (args.get("name") or default).strip()
    if not SCALE_NAME_PATTERN.match(name):
        raise ValueError(f"invalid scale name '{name}'")
    return name


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    if config:
        app.config.from_mapping(config)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.errorhandler(ValueError)
    def bad_input(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def failed(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/scale")
    def scale():
        L, C, H = _base_from_args(request.args, app.config["DEFAULT_COLOR"])
        name = _scale_name(request.args, app.config["SCALE_NAME"])
        steps = generate_scale(L, C, H)
        base = base_step(steps)
        return jsonify(
            {
                "name": name,
                "base": {
                    "hex": base.hex if base else None,
                    "oklch": format_oklch(base) if base else None,
                    "in_gamut": is_in_gamut(L, C, H),
                },
                "steps": [s.to_dict() for s in steps],
                "dark_steps": [s.to_dict() for s in dark_scale(steps)],
                "css": generate_css_output(name, steps),
            }
        )

    @app.route("/contrast")
    def contrast():
        fg = parse_color(request.args.get("fg", app.config["DEFAULT_COLOR"]))
        bg = normalize_hex(request.args.get("bg", app.config["CONTRAST_BG"]))
        return jsonify(wcag_checks(fg, bg).to_dict())

    @app.route("/tokens")
    def tokens():
        L, C, H = _base_from_args(request.args, app.config["DEFAULT_COLOR"])
        bg = page_background((request.args.get("mode") or "light").lower())
        picked = derive_ui_tokens(generate_scale(L, C, H), bg)
        return jsonify(
            {
                "background": bg,
                "tokens": {k: v.to_dict() for k, v in picked.items()},
            }
        )

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
