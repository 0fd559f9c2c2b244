"""Stylised single-planet renderer.

Layers, back to front: background, star specks, ring, atmosphere glow,
base sphere, rotating surface features, shading, edge highlight. Feature
placement re-randomises every frame; the shapes and colours used for each
planet type do not.
"""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from dataclasses import dataclass

from ..constants import PLANET_RADIUS_FACTOR, PLANET_VIEW_STARS, SPACE_BLUE
from ..models.planet import PLANET_TRAITS, Planet, PlanetType
from ..ui.starfield import StarField
from .colors import TRANSPARENT, Color, hex_to_rgba, rgba
from .commands import (
    Arc,
    Bezier,
    Circle,
    Command,
    Ellipse,
    Fill,
    Frame,
    LinearGradient,
    Point,
    RadialGradient,
)
from .layout import rotate_point

FeatureFn = Callable[[random.Random, Point, float, int, float], list[Command]]

GREEN = hex_to_rgba("#4ade80")
OCHRE = hex_to_rgba("#f59e0b")
ICE = (255, 255, 255, 255)
TOXIC_CLOUD = hex_to_rgba("#84cc16")
LAVA = hex_to_rgba("#ef4444")
ISLAND_GREY = hex_to_rgba("#a3a3a3")
EXOTIC_PURPLE = hex_to_rgba("#a855f7")
CRATER_GREY = hex_to_rgba("#a3a3a3")

MIN_FEATURES = 3
MAX_FEATURES = 7


def _scatter(
    rng: random.Random, center: Point, radius: float, reach: float, angle: float
) -> Point:
    """Random point within ``reach × radius`` of the centre, rotated."""
    theta = rng.random() * math.tau
    distance = rng.random() * radius * reach
    point = (center[0] + math.cos(theta) * distance, center[1] + math.sin(theta) * distance)
    return rotate_point(point, center, angle)


# ---------------------------------------------------------------------------
# Surface features per type
# ---------------------------------------------------------------------------


def _lush(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    return [
        Circle(
            _scatter(rng, center, radius, 0.7, angle),
            rng.random() * radius * 0.5 + radius * 0.2,
            fill=(GREEN[0], GREEN[1], GREEN[2], round(0.7 * 255)),
        )
        for _ in range(count)
    ]


def _desert(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    return [
        Circle(
            _scatter(rng, center, radius, 0.7, angle),
            rng.random() * radius * 0.2 + radius * 0.1,
            stroke=OCHRE,
            width=2,
        )
        for _ in range(count)
    ]


def _frozen(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    cx, cy = center
    cap = rotate_point((cx, cy - radius * 0.7), center, angle)
    commands: list[Command] = [Circle(cap, radius * 0.5, fill=rgba(ICE, 0.9))]
    for _ in range(count):
        # [π, 2π) points up in screen space
        theta = math.pi + rng.random() * math.pi
        distance = rng.random() * radius * 0.5
        blob = (cx + math.cos(theta) * distance, cy + math.sin(theta) * distance)
        commands.append(
            Circle(rotate_point(blob, center, angle), radius * 0.15, fill=rgba(ICE, 0.7))
        )
    return commands


def _toxic(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    return [
        Circle(
            _scatter(rng, center, radius, 0.8, angle),
            rng.random() * radius * 0.3 + radius * 0.1,
            fill=rgba(TOXIC_CLOUD, 0.4),
        )
        for _ in range(count)
    ]


def _volcanic(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    commands: list[Command] = []
    for _ in range(count):
        start = rng.random() * math.tau + angle
        sweep = rng.random() * math.pi / 4 - math.pi / 8
        commands.append(
            Arc(
                center,
                radius * (0.7 + rng.random() * 0.3),
                min(start, start + sweep),
                max(start, start + sweep),
                stroke=LAVA,
                width=radius * (0.05 + rng.random() * 0.05),
            )
        )
    return commands


def _ocean(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    return [
        Circle(
            _scatter(rng, center, radius, 0.7, angle),
            rng.random() * radius * 0.15 + radius * 0.05,
            fill=ISLAND_GREY,
        )
        for _ in range(count)
    ]


def _exotic(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    cx, cy = center
    commands: list[Command] = []
    for _ in range(3):
        theta = rng.random() * math.tau

        def at(a: float, r: float) -> Point:
            return rotate_point((cx + math.cos(a) * r, cy + math.sin(a) * r), center, angle)

        commands.append(
            Bezier(
                start=at(theta, radius * 0.2),
                control1=at(theta + 0.5, radius * 0.5),
                control2=at(theta - 0.5, radius * 0.6),
                end=at(theta, radius * 0.9),
                stroke=EXOTIC_PURPLE,
                width=radius * 0.05,
            )
        )
    return commands


def _craters(
    rng: random.Random, center: Point, radius: float, count: int, angle: float
) -> list[Command]:
    return [
        Circle(
            _scatter(rng, center, radius, 0.7, angle),
            rng.random() * radius * 0.2 + radius * 0.05,
            stroke=CRATER_GREY,
            width=2,
        )
        for _ in range(count)
    ]


@dataclass(frozen=True)
class SurfaceStyle:
    features: FeatureFn
    always_ringed: bool = False
    ring_color: Color = hex_to_rgba("#a8a29e")


SURFACE_STYLES: dict[PlanetType, SurfaceStyle] = {
    PlanetType.LUSH: SurfaceStyle(_lush),
    PlanetType.DESERT: SurfaceStyle(_desert),
    PlanetType.TOXIC: SurfaceStyle(_toxic),
    PlanetType.IRRADIATED: SurfaceStyle(_craters),
    PlanetType.FROZEN: SurfaceStyle(_frozen),
    PlanetType.BARREN: SurfaceStyle(_craters),
    PlanetType.EXOTIC: SurfaceStyle(
        _exotic, always_ringed=True, ring_color=hex_to_rgba("#c084fc")
    ),
    PlanetType.OCEAN: SurfaceStyle(_ocean),
    PlanetType.VOLCANIC: SurfaceStyle(_volcanic),
}


def has_rings(planet: Planet) -> bool:
    """Exotic worlds always; otherwise when the id's first char code is a multiple of 3.

    Barren worlds never carry rings.
    """
    if not PLANET_TRAITS[planet.planet_type].can_have_rings:
        return False
    if SURFACE_STYLES[planet.planet_type].always_ringed:
        return True
    return bool(planet.id) and ord(planet.id[0]) % 3 == 0


def has_atmosphere(planet: Planet) -> bool:
    return PLANET_TRAITS[planet.planet_type].has_atmosphere


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class PlanetRenderer:
    """Builds one frame of the rotating planet view."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.starfield = StarField(self.rng)

    def render(self, planet: Planet, width: float, height: float, rotation: float) -> Frame:
        frame = Frame(width, height)
        center = (width / 2, height / 2)
        radius = min(width, height) * PLANET_RADIUS_FACTOR
        main = hex_to_rgba(planet.main_color)
        style = SURFACE_STYLES[planet.planet_type]

        frame.add(Fill(rgba(SPACE_BLUE)))
        frame.extend(self.starfield.specks(width, height, PLANET_VIEW_STARS))

        if has_rings(planet):
            frame.add(
                Ellipse(
                    center,
                    rx=radius * 1.8,
                    ry=radius * 0.4,
                    angle=math.pi / 6,
                    stroke=style.ring_color,
                    width=radius * 0.1,
                )
            )

        if has_atmosphere(planet):
            frame.add(
                Circle(
                    center,
                    radius * 1.15,
                    fill=RadialGradient(
                        center, radius, center, radius * 1.15,
                        stops=((0.0, hex_to_rgba(planet.main_color + "55")), (1.0, TRANSPARENT)),
                    ),
                )
            )

        frame.add(
            Circle(
                center,
                radius,
                fill=LinearGradient(
                    (0, 0), (0, height),
                    stops=((0.0, main), (1.0, hex_to_rgba(planet.secondary_color))),
                ),
            )
        )

        count = self.rng.randint(MIN_FEATURES, MAX_FEATURES)
        frame.extend(style.features(self.rng, center, radius, count, rotation))

        cx, cy = center
        frame.add(
            Circle(
                center,
                radius,
                fill=RadialGradient(
                    (cx - radius * 0.5, cy - radius * 0.5), 0, center, radius * 1.2,
                    stops=(
                        (0.0, (255, 255, 255, round(0.1 * 255))),
                        (0.5, TRANSPARENT),
                        (1.0, (0, 0, 0, round(0.5 * 255))),
                    ),
                ),
            )
        )
        frame.add(Circle(center, radius, stroke=hex_to_rgba(planet.main_color + "70"), width=2))
        return frame


def advance_rotation(rotation: float, step: float) -> float:
    """Next rotation angle, wrapped to [0, 2π)."""
    return (rotation + step) % math.tau
