"""Planet, system and galaxy maps with pointer hit-testing."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..constants import (
    GALAXY_HIT_RADIUS,
    GALAXY_MAP_MARGIN,
    LABEL_FONT_SIZE,
    MAP_BACKGROUND,
    MAP_NEBULAE,
    MAP_STARS,
    NEIGHBOUR_LINKS,
    PLANET_HIT_RADIUS,
    PLANET_MAP_MARGIN,
    SYSTEM_HIT_RADIUS,
    SYSTEM_MAP_MARGIN,
    WHITE,
)
from ..models.galaxy import Galaxy, GalaxyName, StarType
from ..models.planet import Planet
from ..ui.starfield import StarField
from .colors import Color, hex_to_rgba, rgba, with_alpha
from .commands import Circle, Fill, Frame, Polygon, Polyline, Rect, Text
from .layout import nearest_neighbours, position, scale_position

TextMeasure = Callable[[str, int], float]


class MapMode(enum.Enum):
    PLANETS = "planets"
    SYSTEMS = "systems"
    GALAXIES = "galaxies"


@dataclass(frozen=True)
class _ModeGeometry:
    margin: float
    hit_radius: float
    glow: float  # glow ring extends this far past the node


_GEOMETRY: dict[MapMode, _ModeGeometry] = {
    MapMode.PLANETS: _ModeGeometry(PLANET_MAP_MARGIN, PLANET_HIT_RADIUS, 4),
    MapMode.SYSTEMS: _ModeGeometry(SYSTEM_MAP_MARGIN, SYSTEM_HIT_RADIUS, 6),
    MapMode.GALAXIES: _ModeGeometry(GALAXY_MAP_MARGIN, GALAXY_HIT_RADIUS, 6),
}

NODE_RADIUS = 5
CURRENT_NODE_RADIUS = 8
LABEL_PADDING = 4

STAR_COLORS: dict[StarType, Color] = {
    StarType.YELLOW: hex_to_rgba("#facc15"),
    StarType.RED: hex_to_rgba("#ef4444"),
    StarType.GREEN: hex_to_rgba("#22c55e"),
    StarType.BLUE: hex_to_rgba("#3b82f6"),
    StarType.ANOMALY: hex_to_rgba("#a855f7"),
}

GALAXY_COLORS: dict[GalaxyName, Color] = {
    GalaxyName.EUCLID: hex_to_rgba("#2dd4bf"),
    GalaxyName.HILBERT: hex_to_rgba("#fbbf24"),
    GalaxyName.CALYPSO: hex_to_rgba("#f472b6"),
    GalaxyName.HESPERIUS: hex_to_rgba("#60a5fa"),
    GalaxyName.HYADES: hex_to_rgba("#f87171"),
}

MUTED = hex_to_rgba("#6b7280")
UNKNOWN_SYSTEM = "Unknown System"


def estimate_text_width(text: str, size: int) -> float:
    """Rough width when no font metrics are available."""
    return 0.6 * size * len(text)


@dataclass(frozen=True)
class MapNode:
    """A planet, system or galaxy as last drawn."""

    id: str
    mode: MapMode
    label: str
    x: float
    y: float
    radius: float
    color: Color
    current: bool = False
    active: bool = True  # discovered system / unlocked galaxy
    galaxy_id: str | None = None

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(x - self.x, y - self.y)


class MapRenderer:
    """Renders one map mode at a time and remembers what it drew.

    Node positions are recomputed from the canvas size on every render;
    ``hit_test`` only ever looks at the most recent render.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        measure_text: TextMeasure | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.starfield = StarField(self.rng)
        self.measure_text = measure_text or estimate_text_width
        self.mode = MapMode.PLANETS
        self.nodes: list[MapNode] = []

    @property
    def detection_radius(self) -> float:
        return _GEOMETRY[self.mode].hit_radius

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def render_planets(
        self,
        planets: Sequence[Planet],
        current_id: str | None,
        width: float,
        height: float,
        hovered_id: str | None = None,
    ) -> Frame:
        """Flat planet list laid out by id digest, joined in list order."""
        geometry = self._begin(MapMode.PLANETS)
        frame = self._background(width, height)

        for planet in planets:
            x, y = position(planet.id, width, height, geometry.margin)
            current = planet.id == current_id
            self.nodes.append(
                MapNode(
                    id=planet.id,
                    mode=MapMode.PLANETS,
                    label=f"{planet.name} · {planet.planet_type.value}",
                    x=x,
                    y=y,
                    radius=CURRENT_NODE_RADIUS if current else NODE_RADIUS,
                    color=hex_to_rgba(planet.main_color),
                    current=current,
                )
            )

        if len(self.nodes) > 1:
            frame.add(
                Polyline(
                    tuple((n.x, n.y) for n in self.nodes),
                    stroke=rgba(WHITE, 0.1),
                )
            )
        for node in self.nodes:
            self._draw_node(frame, node, geometry)
            if node.current:
                self._draw_pennant(frame, node, geometry)
            self._draw_label(frame, node, geometry)
        return frame

    def render_systems(
        self,
        galaxy: Galaxy,
        current_id: str | None,
        width: float,
        height: float,
        hovered_id: str | None = None,
    ) -> Frame:
        """A galaxy's systems at their stored positions.

        Discovered systems link to their two nearest discovered neighbours;
        undiscovered ones are grey and unlinked.
        """
        geometry = self._begin(MapMode.SYSTEMS)
        frame = self._background(width, height)

        for system in galaxy.systems:
            if not system.planets:
                continue
            x, y = scale_position(system.position, width, height, geometry.margin)
            current = system.id == current_id
            if system.discovered:
                count = len(system.planets)
                label = (
                    f"{system.name} · {system.star_type.value} · "
                    f"{count} planet{'s' if count != 1 else ''}"
                )
                color = STAR_COLORS[system.star_type]
            else:
                label = UNKNOWN_SYSTEM
                color = MUTED
            self.nodes.append(
                MapNode(
                    id=system.id,
                    mode=MapMode.SYSTEMS,
                    label=label,
                    x=x,
                    y=y,
                    radius=CURRENT_NODE_RADIUS if current else NODE_RADIUS,
                    color=color,
                    current=current,
                    active=system.discovered,
                    galaxy_id=galaxy.id,
                )
            )

        # Neighbour distances are measured in percentage space
        by_id = {s.id: s for s in galaxy.systems}
        discovered = [n for n in self.nodes if n.active]
        links = nearest_neighbours(
            [by_id[n.id].position for n in discovered], NEIGHBOUR_LINKS
        )
        for node, neighbours in zip(discovered, links):
            for index in neighbours:
                other = discovered[index]
                frame.add(
                    Polyline(
                        ((node.x, node.y), (other.x, other.y)),
                        stroke=with_alpha(node.color, 0.3),
                    )
                )

        for node in self.nodes:
            self._draw_node(frame, node, geometry)
            if node.current or node.id == hovered_id:
                self._draw_label(frame, node, geometry)
        return frame

    def render_galaxies(
        self,
        galaxies: Sequence[Galaxy],
        current_id: str | None,
        width: float,
        height: float,
        hovered_id: str | None = None,
    ) -> Frame:
        """Universe overview, galaxies placed by name digest."""
        geometry = self._begin(MapMode.GALAXIES)
        frame = self._background(width, height)

        for galaxy in galaxies:
            x, y = position(galaxy.name.value, width, height, geometry.margin)
            current = galaxy.id == current_id
            label = f"{galaxy.name.value} · {len(galaxy.systems)} systems"
            if not galaxy.unlocked:
                label += " · locked"
            self.nodes.append(
                MapNode(
                    id=galaxy.id,
                    mode=MapMode.GALAXIES,
                    label=label,
                    x=x,
                    y=y,
                    radius=CURRENT_NODE_RADIUS if current else NODE_RADIUS,
                    color=GALAXY_COLORS[galaxy.name] if galaxy.unlocked else MUTED,
                    current=current,
                    active=galaxy.unlocked,
                    galaxy_id=galaxy.id,
                )
            )

        for node in self.nodes:
            self._draw_node(frame, node, geometry)
            self._draw_label(frame, node, geometry)
        return frame

    # ------------------------------------------------------------------
    # Hit testing
    # ------------------------------------------------------------------

    def hit_test(self, x: float, y: float) -> MapNode | None:
        """First node drawn within the detection radius of (x, y)."""
        radius = self.detection_radius
        for node in self.nodes:
            if node.distance_to(x, y) <= radius:
                return node
        return None

    # ------------------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------------------

    def _begin(self, mode: MapMode) -> _ModeGeometry:
        self.mode = mode
        self.nodes = []
        return _GEOMETRY[mode]

    def _background(self, width: float, height: float) -> Frame:
        frame = Frame(width, height)
        frame.add(Fill(rgba(MAP_BACKGROUND)))
        frame.extend(self.starfield.stars(width, height, MAP_STARS))
        frame.extend(self.starfield.nebulae(width, height, MAP_NEBULAE))
        return frame

    def _draw_node(self, frame: Frame, node: MapNode, geometry: _ModeGeometry) -> None:
        center = (node.x, node.y)
        frame.add(Circle(center, node.radius + geometry.glow, fill=with_alpha(node.color, 0.25)))
        if node.current and node.mode is MapMode.PLANETS:
            frame.add(Circle(center, node.radius, fill=rgba(WHITE)))
            frame.add(Circle(center, node.radius + 2, stroke=rgba(WHITE)))
        else:
            frame.add(Circle(center, node.radius, fill=node.color))
            if node.current:
                frame.add(
                    Circle(center, node.radius + geometry.glow + 2, stroke=node.color, width=1.5)
                )

    def _draw_pennant(self, frame: Frame, node: MapNode, geometry: _ModeGeometry) -> None:
        top = node.y - node.radius - geometry.glow - 4
        frame.add(
            Polygon(
                ((node.x, top - 8), (node.x - 5, top), (node.x + 5, top)),
                fill=node.color,
            )
        )

    def _draw_label(self, frame: Frame, node: MapNode, geometry: _ModeGeometry) -> None:
        text_y = node.y + node.radius + geometry.glow + LABEL_PADDING
        text_w = self.measure_text(node.label, LABEL_FONT_SIZE)
        frame.add(
            Rect(
                node.x - text_w / 2 - LABEL_PADDING,
                text_y - LABEL_PADDING / 2,
                text_w + LABEL_PADDING * 2,
                LABEL_FONT_SIZE + LABEL_PADDING,
                fill=(0, 0, 0, round(0.6 * 255)),
            )
        )
        frame.add(Text(node.label, (node.x, text_y), rgba(WHITE), LABEL_FONT_SIZE))
