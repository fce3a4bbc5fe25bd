"""Theme colour expressions."""
from __future__ import annotations

import re

_RGBA_RE = re.compile(
    r"^\s*rgba\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*(-?[\d.eE+-]+)\s*\)\s*$"
)


def rgba(primary_rgb: str, alpha: float) -> str:
    """Append an alpha channel to an ``"R, G, B"`` theme triple.

    Alpha is clamped to [0, 1] since the post-fade easing can leave it.
    """
    alpha = min(1.0, max(0.0, alpha))
    return f"rgba({primary_rgb.strip()}, {alpha})"


def parse_rgba(expression: str) -> tuple[int, int, int, int]:
    """Convert an ``rgba(...)`` expression to 0-255 integer channels."""
    match = _RGBA_RE.match(expression)
    if match is None:
        raise ValueError(f"not an rgba expression: {expression!r}")
    r, g, b = (min(255, max(0, round(float(c)))) for c in match.groups()[:3])
    alpha = min(1.0, max(0.0, float(match.group(4))))
    return r, g, b, round(alpha * 255)
