"""Tests for the planet view frame."""

import math
import random
from dataclasses import replace

import pytest

from cosmos_voyager.constants import PLANET_VIEW_STARS
from cosmos_voyager.models.planet import PlanetType, generate_planet
from cosmos_voyager.rendering.commands import (
    Arc,
    Bezier,
    Circle,
    Ellipse,
    Fill,
    LinearGradient,
    RadialGradient,
)
from cosmos_voyager.rendering.planet_renderer import (
    MAX_FEATURES,
    MIN_FEATURES,
    SURFACE_STYLES,
    PlanetRenderer,
    advance_rotation,
    has_atmosphere,
    has_rings,
)


def _planet(planet_type, planet_id="b0000000"):
    # "b" is 98, not a multiple of 3, so no incidental ring
    return replace(generate_planet(random.Random(3), planet_type), id=planet_id)


class TestRings:

    def test_exotic_always_ringed(self):
        assert has_rings(_planet(PlanetType.EXOTIC))

    def test_ring_from_first_char(self):
        # "c" is 99
        assert has_rings(_planet(PlanetType.LUSH, "c1234567"))
        assert not has_rings(_planet(PlanetType.LUSH, "b1234567"))

    def test_empty_id_has_no_ring(self):
        assert not has_rings(_planet(PlanetType.OCEAN, ""))

    def test_barren_never_ringed(self):
        planet = _planet(PlanetType.BARREN, "c0000000")
        assert not has_rings(planet)
        frame = PlanetRenderer(random.Random(1)).render(planet, 800, 600, 0.0)
        assert not frame.of_type(Ellipse)


def test_every_type_has_a_surface_style():
    assert set(SURFACE_STYLES) == set(PlanetType)


def test_barren_has_no_atmosphere():
    assert not has_atmosphere(_planet(PlanetType.BARREN))
    assert all(has_atmosphere(_planet(t)) for t in PlanetType if t is not PlanetType.BARREN)


class TestRender:

    def test_layer_order(self):
        planet = _planet(PlanetType.EXOTIC)
        frame = PlanetRenderer(random.Random(1)).render(planet, 800, 600, 0.0)
        commands = list(frame)

        assert isinstance(commands[0], Fill)
        specks = commands[1:1 + PLANET_VIEW_STARS]
        assert all(isinstance(c, Circle) for c in specks)

        ring, glow, base = commands[1 + PLANET_VIEW_STARS:4 + PLANET_VIEW_STARS]
        assert isinstance(ring, Ellipse)
        assert ring.angle == pytest.approx(math.pi / 6)
        assert isinstance(glow.fill, RadialGradient)
        assert isinstance(base.fill, LinearGradient)

        shading, edge = commands[-2:]
        assert isinstance(shading.fill, RadialGradient)
        assert edge.fill is None and edge.stroke is not None

        features = commands[4 + PLANET_VIEW_STARS:-2]
        assert len(features) == 3
        assert all(isinstance(c, Bezier) for c in features)

    def test_barren_skips_atmosphere_glow(self):
        frame = PlanetRenderer(random.Random(1)).render(_planet(PlanetType.BARREN), 800, 600, 0.0)
        base = frame.commands[1 + PLANET_VIEW_STARS]
        assert isinstance(base.fill, LinearGradient)
        assert not frame.of_type(Ellipse)

    def test_radius_follows_shorter_side(self):
        frame = PlanetRenderer(random.Random(1)).render(_planet(PlanetType.BARREN), 800, 600, 0.0)
        base = frame.commands[1 + PLANET_VIEW_STARS]
        assert base.center == (400, 300)
        assert base.radius == pytest.approx(600 * 0.35)

    @pytest.mark.parametrize(
        "planet_type",
        [t for t in PlanetType if t not in (PlanetType.EXOTIC, PlanetType.FROZEN)],
    )
    def test_feature_count_in_range(self, planet_type):
        renderer = PlanetRenderer(random.Random(5))
        planet = _planet(planet_type)
        fixed = 3 + PLANET_VIEW_STARS if has_atmosphere(planet) else 2 + PLANET_VIEW_STARS
        for _ in range(10):
            frame = renderer.render(planet, 400, 400, 0.0)
            assert MIN_FEATURES <= len(frame) - fixed - 2 <= MAX_FEATURES

    def test_volcanic_arcs_are_short(self):
        frame = PlanetRenderer(random.Random(2)).render(_planet(PlanetType.VOLCANIC), 400, 400, 1.0)
        arcs = frame.of_type(Arc)
        assert arcs
        for arc in arcs:
            assert 0 <= arc.end - arc.start <= math.pi / 8 + 1e-9

    def test_frozen_has_polar_cap(self):
        frame = PlanetRenderer(random.Random(2)).render(_planet(PlanetType.FROZEN), 400, 400, 0.0)
        cap = frame.commands[3 + PLANET_VIEW_STARS]
        radius = 400 * 0.35
        assert cap.center == pytest.approx((200, 200 - radius * 0.7))
        assert cap.radius == pytest.approx(radius * 0.5)

    def test_zero_size_canvas_does_not_fail(self):
        frame = PlanetRenderer(random.Random(2)).render(_planet(PlanetType.LUSH), 0, 0, 0.0)
        assert isinstance(frame.commands[0], Fill)


class TestRotation:

    def test_advance(self):
        assert advance_rotation(0.0, 0.001) == pytest.approx(0.001)

    def test_wraps_at_full_turn(self):
        value = advance_rotation(math.tau - 0.0005, 0.001)
        assert 0 <= value < math.tau
        assert value == pytest.approx(0.0005)
