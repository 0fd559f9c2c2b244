"""Tests for the planet, system and galaxy maps."""

import random
from dataclasses import replace

import pytest

from cosmos_voyager.constants import MAP_NEBULAE, MAP_STARS
from cosmos_voyager.models.galaxy import Galaxy, GalaxyName, StarSystem, StarType
from cosmos_voyager.models.planet import generate_planet
from cosmos_voyager.rendering.commands import Circle, Fill, Polygon, Polyline, Text
from cosmos_voyager.rendering.map_renderer import (
    MUTED,
    UNKNOWN_SYSTEM,
    MapMode,
    MapRenderer,
)

W, H = 1000, 800
BACKGROUND = 1 + MAP_STARS + MAP_NEBULAE


def _system(system_id, x, y, discovered=True, planets=1, rng=None):
    rng = rng or random.Random(0)
    return StarSystem(
        id=system_id,
        name=f"Sys {system_id}",
        x=x,
        y=y,
        star_type=StarType.YELLOW,
        planets=tuple(generate_planet(rng) for _ in range(planets)),
        discovered=discovered,
    )


def _galaxy(systems):
    return Galaxy(id="g1", name=GalaxyName.EUCLID, systems=tuple(systems), unlocked=True)


class TestPlanetMap:

    def test_nodes_and_connecting_line(self, rng):
        planets = [generate_planet(rng) for _ in range(3)]
        renderer = MapRenderer(random.Random(1))
        frame = renderer.render_planets(planets, planets[0].id, W, H)

        assert renderer.mode is MapMode.PLANETS
        assert [n.id for n in renderer.nodes] == [p.id for p in planets]
        lines = frame.of_type(Polyline)
        assert len(lines) == 1
        assert lines[0].points == tuple((n.x, n.y) for n in renderer.nodes)
        assert len(frame.of_type(Polygon)) == 1  # current-planet pennant

    def test_labels_name_and_type(self, rng):
        planet = generate_planet(rng)
        frame = MapRenderer(random.Random(1)).render_planets([planet], None, W, H)
        labels = [t.text for t in frame.of_type(Text)]
        assert labels == [f"{planet.name} · {planet.planet_type.value}"]
        assert not frame.of_type(Polyline)

    def test_empty_list_draws_background_only(self):
        renderer = MapRenderer(random.Random(1))
        frame = renderer.render_planets([], None, W, H)
        assert len(frame) == BACKGROUND
        assert isinstance(frame.commands[0], Fill)
        assert renderer.nodes == []

    def test_hit_test_at_node_centre(self, rng):
        # digests 97, 65, 35, 122 put every node well apart
        planets = [replace(generate_planet(rng), id=i) for i in ("a", "A", "#", "z")]
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets(planets, None, W, H)
        for node in renderer.nodes:
            assert renderer.hit_test(node.x, node.y) is node
        assert renderer.hit_test(-500, -500) is None


class TestSystemMap:

    def test_each_discovered_system_links_two_neighbours(self):
        systems = [
            _system("a", 10, 10),
            _system("b", 20, 10),
            _system("c", 80, 80),
            _system("d", 90, 90),
            _system("e", 50, 50, discovered=False),
        ]
        renderer = MapRenderer(random.Random(1))
        frame = renderer.render_systems(_galaxy(systems), "a", W, H)
        lines = frame.of_type(Polyline)
        assert len(lines) == 2 * 4

        undiscovered = next(n for n in renderer.nodes if n.id == "e")
        assert undiscovered.color == MUTED
        assert not undiscovered.active
        endpoint_set = {p for line in lines for p in line.points}
        assert (undiscovered.x, undiscovered.y) not in endpoint_set

    def test_systems_without_planets_are_skipped(self):
        systems = [_system("a", 10, 10), _system("b", 20, 20, planets=0)]
        renderer = MapRenderer(random.Random(1))
        renderer.render_systems(_galaxy(systems), None, W, H)
        assert [n.id for n in renderer.nodes] == ["a"]

    def test_labels_only_for_current_and_hovered(self):
        systems = [
            _system("a", 10, 10),
            _system("b", 50, 50, planets=2),
            _system("c", 90, 90, discovered=False),
        ]
        renderer = MapRenderer(random.Random(1))
        frame = renderer.render_systems(_galaxy(systems), "a", W, H, hovered_id="c")
        labels = [t.text for t in frame.of_type(Text)]
        assert labels == ["Sys a · Yellow · 1 planet", UNKNOWN_SYSTEM]

        frame = renderer.render_systems(_galaxy(systems), None, W, H, hovered_id="b")
        assert [t.text for t in frame.of_type(Text)] == ["Sys b · Yellow · 2 planets"]

    def test_layout_is_stable_across_renders(self):
        galaxy = _galaxy([_system("a", 10, 10), _system("b", 60, 30)])
        first = MapRenderer(random.Random(1))
        second = MapRenderer(random.Random(2))
        first.render_systems(galaxy, None, W, H)
        second.render_systems(galaxy, None, W, H)
        assert [(n.x, n.y) for n in first.nodes] == [(n.x, n.y) for n in second.nodes]

    def test_hit_radius_is_twenty_five(self):
        renderer = MapRenderer(random.Random(1))
        renderer.render_systems(_galaxy([_system("a", 50, 50)]), None, W, H)
        node = renderer.nodes[0]
        assert renderer.hit_test(node.x + 24, node.y) is node
        assert renderer.hit_test(node.x + 26, node.y) is None


class TestGalaxyMap:

    def test_locked_galaxies_are_muted(self, universe):
        renderer = MapRenderer(random.Random(1))
        frame = renderer.render_galaxies(universe.galaxies(), "g1", W, H)
        assert renderer.mode is MapMode.GALAXIES
        by_id = {n.id: n for n in renderer.nodes}
        assert by_id["g1"].active
        assert not by_id["g2"].active
        assert by_id["g2"].color == MUTED
        labels = [t.text for t in frame.of_type(Text)]
        assert "Euclid · 8 systems" in labels
        assert "Hilbert · 6 systems · locked" in labels

    def test_current_galaxy_has_ring(self, universe):
        renderer = MapRenderer(random.Random(1))
        frame = renderer.render_galaxies(universe.galaxies(), "g1", W, H)
        rings = [c for c in frame.of_type(Circle) if c.stroke is not None]
        assert len(rings) == 1


@pytest.mark.parametrize("measure", [None, lambda text, size: 10.0])
def test_label_background_width_uses_measure(rng, measure):
    from cosmos_voyager.rendering.commands import Rect

    planet = generate_planet(rng)
    frame = MapRenderer(random.Random(1), measure_text=measure).render_planets([planet], None, W, H)
    (rect,) = frame.of_type(Rect)
    label = f"{planet.name} · {planet.planet_type.value}"
    expected = 10.0 if measure else 0.6 * 12 * len(label)
    assert rect.w == pytest.approx(expected + 8)
    assert rect.fill[3] == round(0.6 * 255)
