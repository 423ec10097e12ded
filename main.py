"""Perceptual colour-scale engine – development entry point.

Derives an 11-step tonal ramp (50…950) from one base colour in OKLCH, keeping
every step inside sRGB and the base colour's perceived hue across lightness.

Usage
-----
$ pip install -e .                       # flask, numpy, coloraide
$ python main.py                         # JSON service on http://127.0.0.1:5000
$ python main.py "#2a6db6" brand         # print the light/dark CSS blocks

Endpoints
---------
/scale?color=#2a6db6&name=brand     – steps + CSS (or ?l=&c=&h= sliders)
/contrast?fg=#2a6db6&bg=#ffffff     – WCAG ratio and AA/AAA levels
/tokens?color=#2a6db6&mode=dark     – semantic UI tokens picked by contrast
"""

from __future__ import annotations

import sys

from color_scale.app import create_app
from color_scale.css import generate_css_output
from color_scale.parse import parse_color
from color_scale.scale import generate_scale_from_hex


def print_css(color: str, name: str = "brand") -> None:
    print(generate_css_output(name, generate_scale_from_hex(parse_color(color))))


if __name__ == "__main__":
    if len(sys.argv) > 1:
        print_css(*sys.argv[1:3])
    else:
        create_app().run(debug=True, threaded=True)
