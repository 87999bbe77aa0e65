"""Theme colors and color utilities for the UI."""

import colorsys
from typing import List, Optional


class TraceColors:
    """Light theme palette for the tracing screen."""

    BG_TOP = "#e0f2f1"
    BG_BOTTOM = "#b2dfdb"

    PRIMARY = "#00796b"
    PRIMARY_LIGHT = "#48a999"
    PRIMARY_DARK = "#004c40"

    # #AARRGGBB
    GUIDE_LINE = "#806496FF"
    GUIDE_MIDDLE = "#4D6496FF"
    OUTLINE_ACTIVE = "#9e9e9e"
    OUTLINE_LOCKED = "#d0d0d0"
    ARROW = "#ff7043"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_MUTED = "#78909c"


def _channels(color: str) -> Optional[List[int]]:
    color = color.strip()
    if not color.startswith("#") or len(color) not in (7, 9):
        return None
    try:
        return [int(color[i:i + 2], 16) for i in range(1, len(color), 2)]
    except ValueError:
        return None


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix two colors written the same way (#RRGGBB or #AARRGGBB).

    t=0 gives a, t=1 gives b. Colors that cannot be parsed, or that mix the
    two forms, give a back unchanged.
    """
    ca, cb = _channels(a), _channels(b)
    if ca is None or cb is None or len(ca) != len(cb):
        return a
    t = max(0.0, min(1.0, float(t)))
    return "#" + "".join(f"{round(x + (y - x) * t):02X}" for x, y in zip(ca, cb))


def outline_hex(done: float, active: bool) -> str:
    """Outline color of a glyph, tinted toward the primary color as it gets traced."""
    base = TraceColors.OUTLINE_ACTIVE if active else TraceColors.OUTLINE_LOCKED
    return blend_hex(base, TraceColors.PRIMARY_LIGHT, 0.5 * done)


def rainbow_hex(t: float) -> str:
    """Fully saturated color for position t along a traced stroke (t wraps at 1)."""
    hue = (float(t) % 1.0 + 1.0) % 1.0
    r, g, b = colorsys.hls_to_rgb(hue, 0.5, 1.0)
    return f"#{round(r * 255):02X}{round(g * 255):02X}{round(b * 255):02X}"
