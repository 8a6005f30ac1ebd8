"""
String formatters for 0-1 RGB colors (hex, rgb(), hsl(), lch()) and hex parsing.
Non-algorithmic helpers for consumers that build CSS or prompts from palette colors.
"""
import math
import re
from typing import Sequence

from .space import rgb_to_lab

_HEX_RE = re.compile(r"^[0-9A-Fa-f]{6}$")


def _to_byte(c: float) -> int:
    # Round half away from zero like JS Math.round on non-negative input
    return int(math.floor(max(0.0, min(255.0, c * 255.0)) + 0.5))


def rgb_to_hex(color: Sequence[float]) -> str:
    r, g, b = (_to_byte(c) for c in color[:3])
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_str: str) -> tuple[float, float, float, float]:
    """'#RRGGBB' or '#RGB' -> RGBA (0-1). Invalid input -> opaque black."""
    s = hex_str.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if not _HEX_RE.match(s):
        return (0.0, 0.0, 0.0, 1.0)
    return (int(s[0:2], 16) / 255.0, int(s[2:4], 16) / 255.0, int(s[4:6], 16) / 255.0, 1.0)


def rgb_to_rgb_string(color: Sequence[float]) -> str:
    r, g, b = (_to_byte(c) for c in color[:3])
    return f"rgb({r}, {g}, {b})"


def rgb_to_hsl(color: Sequence[float]) -> tuple[int, int, int]:
    """(hue degrees, saturation %, lightness %) rounded to integers."""
    r, g, b = (float(c) for c in color[:3])
    cmax, cmin = max(r, g, b), min(r, g, b)
    diff = cmax - cmin
    total = cmax + cmin
    light = total / 2
    h = s = 0.0
    if diff != 0:
        s = diff / (2 - cmax - cmin) if light > 0.5 else diff / total
        if cmax == r:
            h = ((g - b) / diff + (6 if g < b else 0)) / 6
        elif cmax == g:
            h = ((b - r) / diff + 2) / 6
        else:
            h = ((r - g) / diff + 4) / 6
    return (_round(h * 360), _round(s * 100), _round(light * 100))


def rgb_to_hsl_string(color: Sequence[float]) -> str:
    h, s, light = rgb_to_hsl(color)
    return f"hsl({h}, {s}%, {light}%)"


def rgb_to_lch(color: Sequence[float]) -> tuple[int, int, int]:
    """CIE LCh(ab): (lightness, chroma, hue degrees) rounded to integers."""
    lightness, a, b = rgb_to_lab(color)
    chroma = math.sqrt(a * a + b * b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360
    return (_round(lightness), _round(chroma), _round(hue))


def rgb_to_lch_string(color: Sequence[float]) -> str:
    lightness, chroma, hue = rgb_to_lch(color)
    return f"lch({lightness}% {chroma} {hue})"


def color_to_all_formats(color: Sequence[float]) -> dict[str, str]:
    """All string formats for one color: hex, rgb, hsl, lch."""
    return {
        "hex": rgb_to_hex(color),
        "rgb": rgb_to_rgb_string(color),
        "hsl": rgb_to_hsl_string(color),
        "lch": rgb_to_lch_string(color),
    }


def _round(x: float) -> int:
    return int(math.floor(x + 0.5))
