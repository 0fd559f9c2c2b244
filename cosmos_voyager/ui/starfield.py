"""Twinkling star and nebula backdrop — reusable across screens.

Every call scatters fresh stars, so consecutive frames twinkle. None of it
carries meaning; only the map nodes are laid out deterministically.
"""

from __future__ import annotations

import colorsys
import random

from ..rendering.colors import TRANSPARENT, Color
from ..rendering.commands import Circle, Command, RadialGradient

_STAR_TINTS: list[tuple[int, int, int]] = [
    (220, 220, 235),
    (140, 140, 160),
    (255, 255, 255),
]


def _hsla(hue: float, saturation: float, lightness: float, alpha: float) -> Color:
    """HSL (degrees, 0–1, 0–1) to RGBA."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)
    return round(r * 255), round(g * 255), round(b * 255), round(alpha * 255)


class StarField:
    """Random star scatter plus soft nebula blobs."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def stars(self, width: float, height: float, count: int) -> list[Command]:
        """Map stars: mostly 1px, random tint and brightness."""
        commands: list[Command] = []
        for _ in range(count):
            tint = self.rng.choice(_STAR_TINTS)
            brightness = self.rng.uniform(0.3, 1.0)
            commands.append(
                Circle(
                    center=(self.rng.uniform(0, width), self.rng.uniform(0, height)),
                    radius=self.rng.choice([1, 1, 1, 2]),
                    fill=(tint[0], tint[1], tint[2], round(brightness * 255)),
                )
            )
        return commands

    def specks(self, width: float, height: float, count: int) -> list[Command]:
        """Planet-view stars: white, 0.5–1.5px, 30–100% opacity."""
        return [
            Circle(
                center=(self.rng.random() * width, self.rng.random() * height),
                radius=self.rng.random() + 0.5,
                fill=(255, 255, 255, round((self.rng.random() * 0.7 + 0.3) * 255)),
            )
            for _ in range(count)
        ]

    def nebulae(self, width: float, height: float, count: int) -> list[Command]:
        """Soft blue-to-violet blobs (hue 240–300, alpha 0.1)."""
        commands: list[Command] = []
        for _ in range(count):
            center = (self.rng.uniform(0, width), self.rng.uniform(0, height))
            radius = self.rng.uniform(0.1, 0.3) * max(width, height)
            tint = _hsla(self.rng.uniform(240, 300), 0.7, 0.5, 0.1)
            commands.append(
                Circle(
                    center=center,
                    radius=radius,
                    fill=RadialGradient(
                        inner_center=center,
                        inner_radius=0,
                        outer_center=center,
                        outer_radius=radius,
                        stops=((0.0, tint), (1.0, TRANSPARENT)),
                    ),
                )
            )
        return commands
