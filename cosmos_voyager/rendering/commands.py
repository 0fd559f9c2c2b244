"""Draw-call lists.

Renderers never touch a drawing surface; they return a ``Frame`` of
primitive commands that a backend rasterises. Frames can be compared and
inspected directly in tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from .colors import TRANSPARENT, Color, lerp_color

Point = tuple[float, float]
Stop = tuple[float, Color]


def _color_at(stops: tuple[Stop, ...], t: float) -> Color:
    """Interpolated colour at offset ``t`` along gradient stops."""
    if not stops:
        return TRANSPARENT
    t = min(max(t, 0.0), 1.0)
    if t <= stops[0][0]:
        return stops[0][1]
    for (o1, c1), (o2, c2) in zip(stops, stops[1:]):
        if o1 <= t <= o2:
            span = o2 - o1
            return lerp_color(c1, c2, (t - o1) / span if span else 0.0)
    return stops[-1][1]


@dataclass(frozen=True)
class LinearGradient:
    start: Point
    end: Point
    stops: tuple[Stop, ...]

    def color_at(self, t: float) -> Color:
        return _color_at(self.stops, t)


@dataclass(frozen=True)
class RadialGradient:
    """Gradient between two circles, as on an HTML canvas."""

    inner_center: Point
    inner_radius: float
    outer_center: Point
    outer_radius: float
    stops: tuple[Stop, ...]

    def color_at(self, t: float) -> Color:
        return _color_at(self.stops, t)


Paint = Union[Color, LinearGradient, RadialGradient]


@dataclass(frozen=True)
class Fill:
    """Paint the whole frame."""

    color: Color


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    fill: Paint | None = None
    stroke: Color | None = None
    width: float = 1.0


@dataclass(frozen=True)
class Ellipse:
    """Stroked ellipse rotated by ``angle`` radians about its centre."""

    center: Point
    rx: float
    ry: float
    angle: float
    stroke: Color
    width: float = 1.0


@dataclass(frozen=True)
class Arc:
    """Clockwise (screen space) arc from ``start`` to ``end`` radians."""

    center: Point
    radius: float
    start: float
    end: float
    stroke: Color
    width: float = 1.0


@dataclass(frozen=True)
class Bezier:
    """Cubic bezier curve."""

    start: Point
    control1: Point
    control2: Point
    end: Point
    stroke: Color
    width: float = 1.0


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    stroke: Color
    width: float = 1.0


@dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...]
    fill: Color


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float
    fill: Color


@dataclass(frozen=True)
class Text:
    """Text anchored at its top-centre."""

    text: str
    pos: Point
    color: Color
    size: int = 12


Command = Union[Fill, Circle, Ellipse, Arc, Bezier, Polyline, Polygon, Rect, Text]


@dataclass
class Frame:
    """One fully composited image, back to front."""

    width: float
    height: float
    commands: list[Command] = field(default_factory=list)

    def add(self, command: Command) -> None:
        self.commands.append(command)

    def extend(self, commands: list[Command]) -> None:
        self.commands.extend(commands)

    def of_type(self, kind: type) -> list:
        return [c for c in self.commands if isinstance(c, kind)]

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)
