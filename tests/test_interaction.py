"""Tests for map pointer handling."""

import random

import pytest

from cosmos_voyager.interaction import MapInteraction, SelectionCallbacks
from cosmos_voyager.models.planet import generate_planet
from cosmos_voyager.rendering.map_renderer import MapRenderer

W, H = 1000, 800


class Recorder:
    def __init__(self):
        self.calls = []

    def callbacks(self):
        return SelectionCallbacks(
            on_select_planet=lambda pid: self.calls.append(("planet", pid)),
            on_select_system=lambda sid, gid: self.calls.append(("system", sid, gid)),
            on_select_galaxy=lambda gid: self.calls.append(("galaxy", gid)),
            on_initiate_warp=lambda gid: self.calls.append(("warp", gid)),
        )


@pytest.fixture
def recorder():
    return Recorder()


class TestClick:

    def test_click_on_planet_selects_it(self, rng, recorder):
        planet = generate_planet(rng)
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets([planet], None, W, H)
        node = renderer.nodes[0]

        interaction = MapInteraction(renderer, recorder.callbacks())
        assert interaction.click(node.x, node.y) is node
        assert recorder.calls == [("planet", planet.id)]

    def test_click_on_empty_space_does_nothing(self, rng, recorder):
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets([generate_planet(rng)], None, W, H)
        interaction = MapInteraction(renderer, recorder.callbacks())
        assert interaction.click(-100, -100) is None
        assert recorder.calls == []

    def test_click_on_system_passes_galaxy(self, universe, recorder):
        renderer = MapRenderer(random.Random(1))
        galaxy = universe.galaxy("g1")
        renderer.render_systems(galaxy, None, W, H)
        node = renderer.nodes[0]
        MapInteraction(renderer, recorder.callbacks()).click(node.x, node.y)
        assert recorder.calls[0][0] == "system"
        assert recorder.calls[0][2] == "g1"

    def test_galaxy_click_selects_unlocked_and_warps_locked(self, universe, recorder):
        renderer = MapRenderer(random.Random(1))
        renderer.render_galaxies(universe.galaxies(), "g1", W, H)
        interaction = MapInteraction(renderer, recorder.callbacks())
        by_id = {n.id: n for n in renderer.nodes}

        # Nodes may overlap; the first hit wins, so test against what was hit
        hit = interaction.click(by_id["g1"].x, by_id["g1"].y)
        expected = "galaxy" if hit.active else "warp"
        assert recorder.calls[-1] == (expected, hit.id)

        hit = interaction.click(by_id["g5"].x, by_id["g5"].y)
        expected = "galaxy" if hit.active else "warp"
        assert recorder.calls[-1] == (expected, hit.id)

    def test_pixel_ratio_scales_pointer(self, rng, recorder):
        planet = generate_planet(rng)
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets([planet], None, W / 2, H / 2)
        node = renderer.nodes[0]
        interaction = MapInteraction(renderer, recorder.callbacks(), pixel_ratio=2.0)
        assert interaction.click(node.x * 2, node.y * 2) is node

    def test_default_callbacks_are_harmless(self, rng):
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets([generate_planet(rng)], None, W, H)
        node = renderer.nodes[0]
        assert MapInteraction(renderer).click(node.x, node.y) is node


class TestHover:

    def test_redraw_only_when_hover_changes(self, rng):
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets([generate_planet(rng)], None, W, H)
        node = renderer.nodes[0]
        interaction = MapInteraction(renderer)

        assert interaction.move(node.x, node.y) is True
        assert interaction.wants_pointer
        assert interaction.hovered_id == node.id
        assert interaction.move(node.x + 1, node.y) is False
        assert interaction.move(-100, -100) is True
        assert not interaction.wants_pointer
        assert interaction.move(-90, -90) is False

    def test_hover_never_fires_callbacks(self, rng, recorder):
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets([generate_planet(rng)], None, W, H)
        node = renderer.nodes[0]
        MapInteraction(renderer, recorder.callbacks()).move(node.x, node.y)
        assert recorder.calls == []

    def test_leave_clears_hover(self, rng):
        renderer = MapRenderer(random.Random(1))
        renderer.render_planets([generate_planet(rng)], None, W, H)
        node = renderer.nodes[0]
        interaction = MapInteraction(renderer)
        interaction.move(node.x, node.y)
        assert interaction.leave() is True
        assert interaction.hovered is None
        assert interaction.leave() is False
