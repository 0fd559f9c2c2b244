"""Tests for the id-indexed universe store."""

import pytest

from cosmos_voyager.errors import UnknownEntityError
from cosmos_voyager.models.planet import generate_planet


def _undiscovered(universe, galaxy_id="g1"):
    return next(s for s in universe.systems_of(galaxy_id) if not s.discovered)


class TestQueries:

    def test_galaxy_materialises_systems(self, universe):
        galaxy = universe.galaxy("g1")
        assert [s.id for s in galaxy.systems] == [s.id for s in universe.systems_of("g1")]

    def test_lookups_agree(self, universe):
        system = universe.systems_of("g2")[0]
        planet = system.planets[0]
        assert universe.system(system.id) == system
        assert universe.galaxy_of(system.id).id == "g2"
        assert universe.system_of(planet.id).id == system.id
        assert universe.planet(planet.id) == planet

    @pytest.mark.parametrize(
        "method, kind",
        [
            ("galaxy", "galaxy"),
            ("system", "system"),
            ("planet", "planet"),
            ("galaxy_of", "system"),
            ("is_unlocked", "galaxy"),
        ],
    )
    def test_unknown_ids_raise(self, universe, method, kind):
        with pytest.raises(UnknownEntityError) as excinfo:
            getattr(universe, method)("nope")
        assert excinfo.value.kind == kind
        assert excinfo.value.entity_id == "nope"
        assert isinstance(excinfo.value, KeyError)


class TestTransitions:

    def test_discover_system(self, universe):
        system = _undiscovered(universe)
        result = universe.discover_system(system.id)
        assert result.discovered
        assert universe.system(system.id).discovered
        assert any(s.id == system.id and s.discovered for s in universe.galaxy("g1").systems)

    def test_discover_is_idempotent(self, universe):
        system = _undiscovered(universe)
        first = universe.discover_system(system.id)
        assert universe.discover_system(system.id) is first

    def test_discover_leaves_other_systems_alone(self, universe):
        before = {s.id: s.discovered for s in universe.systems_of("g1")}
        target = _undiscovered(universe)
        universe.discover_system(target.id)
        after = {s.id: s.discovered for s in universe.systems_of("g1")}
        before[target.id] = True
        assert after == before

    def test_unlock_galaxy(self, universe):
        assert not universe.is_unlocked("g3")
        galaxy = universe.unlock_galaxy("g3")
        assert galaxy.unlocked
        assert universe.is_unlocked("g3")
        assert universe.unlock_galaxy("g3").unlocked

    def test_add_planet(self, universe, rng):
        system = universe.systems_of("g1")[0]
        planet = generate_planet(rng)
        updated = universe.add_planet(system.id, planet)
        assert updated.planets[-1] == planet
        assert len(updated.planets) == len(system.planets) + 1
        assert universe.planet(planet.id) == planet
        assert universe.system_of(planet.id).id == system.id

    def test_add_planet_unknown_system(self, universe, rng):
        with pytest.raises(UnknownEntityError):
            universe.add_planet("nope", generate_planet(rng))
