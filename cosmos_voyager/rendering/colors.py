"""Colour helpers. All colours inside a frame are RGBA tuples."""

from __future__ import annotations

Color = tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)


def hex_to_rgba(value: str, alpha: float | None = None) -> Color:
    """Parse ``#rrggbb`` or ``#rrggbbaa``. ``alpha`` (0–1) overrides."""
    digits = value.lstrip("#")
    if len(digits) not in (6, 8):
        raise ValueError(f"not a hex colour: {value!r}")
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) if len(digits) == 8 else 255
    if alpha is not None:
        a = round(alpha * 255)
    return r, g, b, a


def rgba(rgb: tuple[int, ...], alpha: float = 1.0) -> Color:
    return rgb[0], rgb[1], rgb[2], round(alpha * 255)


def with_alpha(color: Color, alpha: float) -> Color:
    return color[0], color[1], color[2], round(alpha * 255)


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(round(x + (y - x) * t) for x, y in zip(a, b))  # type: ignore[return-value]
