"""Id-indexed store for galaxies, systems and planets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

import structlog

from ..errors import UnknownEntityError
from .galaxy import Galaxy, StarSystem
from .planet import Planet

logger = structlog.get_logger(__name__)


class Universe:
    """Arena of immutable records.

    Galaxies keep the ordered ids of their systems instead of embedding
    them, so flipping one system's ``discovered`` flag replaces a single
    record. ``galaxy()`` materialises the full value tree on demand.
    """

    def __init__(self) -> None:
        self._galaxy_order: list[str] = []
        self._galaxies: dict[str, Galaxy] = {}  # stored with systems=()
        self._system_ids: dict[str, list[str]] = {}
        self._systems: dict[str, StarSystem] = {}
        self._system_galaxy: dict[str, str] = {}
        self._planet_system: dict[str, str] = {}

    @classmethod
    def from_galaxies(cls, galaxies: Iterable[Galaxy]) -> Universe:
        universe = cls()
        for galaxy in galaxies:
            universe._add_galaxy(galaxy)
        return universe

    def _add_galaxy(self, galaxy: Galaxy) -> None:
        self._galaxy_order.append(galaxy.id)
        self._galaxies[galaxy.id] = replace(galaxy, systems=())
        self._system_ids[galaxy.id] = []
        for system in galaxy.systems:
            self._system_ids[galaxy.id].append(system.id)
            self._systems[system.id] = system
            self._system_galaxy[system.id] = galaxy.id
            for planet in system.planets:
                self._planet_system[planet.id] = system.id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def galaxy_ids(self) -> list[str]:
        return list(self._galaxy_order)

    def galaxies(self) -> list[Galaxy]:
        return [self.galaxy(galaxy_id) for galaxy_id in self._galaxy_order]

    def galaxy(self, galaxy_id: str) -> Galaxy:
        record = self._galaxies.get(galaxy_id)
        if record is None:
            raise UnknownEntityError("galaxy", galaxy_id)
        return replace(record, systems=tuple(self.systems_of(galaxy_id)))

    def systems_of(self, galaxy_id: str) -> list[StarSystem]:
        if galaxy_id not in self._system_ids:
            raise UnknownEntityError("galaxy", galaxy_id)
        return [self._systems[sid] for sid in self._system_ids[galaxy_id]]

    def system(self, system_id: str) -> StarSystem:
        try:
            return self._systems[system_id]
        except KeyError:
            raise UnknownEntityError("system", system_id) from None

    def galaxy_of(self, system_id: str) -> Galaxy:
        if system_id not in self._system_galaxy:
            raise UnknownEntityError("system", system_id)
        return self.galaxy(self._system_galaxy[system_id])

    def system_of(self, planet_id: str) -> StarSystem:
        if planet_id not in self._planet_system:
            raise UnknownEntityError("planet", planet_id)
        return self._systems[self._planet_system[planet_id]]

    def planet(self, planet_id: str) -> Planet:
        system = self.system_of(planet_id)
        for planet in system.planets:
            if planet.id == planet_id:
                return planet
        raise UnknownEntityError("planet", planet_id)

    def is_unlocked(self, galaxy_id: str) -> bool:
        if galaxy_id not in self._galaxies:
            raise UnknownEntityError("galaxy", galaxy_id)
        return self._galaxies[galaxy_id].unlocked

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def discover_system(self, system_id: str) -> StarSystem:
        """Mark a system discovered. Discovery never reverts."""
        system = self.system(system_id)
        if system.discovered:
            return system
        system = replace(system, discovered=True)
        self._systems[system_id] = system
        logger.info("System discovered", system_id=system_id, name=system.name)
        return system

    def unlock_galaxy(self, galaxy_id: str) -> Galaxy:
        if galaxy_id not in self._galaxies:
            raise UnknownEntityError("galaxy", galaxy_id)
        record = self._galaxies[galaxy_id]
        if not record.unlocked:
            self._galaxies[galaxy_id] = replace(record, unlocked=True)
            logger.info("Galaxy unlocked", galaxy_id=galaxy_id, name=record.name.value)
        return self.galaxy(galaxy_id)

    def add_planet(self, system_id: str, planet: Planet) -> StarSystem:
        """Append a newly discovered planet to a system."""
        system = self.system(system_id)
        system = replace(system, planets=system.planets + (planet,))
        self._systems[system_id] = system
        self._planet_system[planet.id] = system_id
        logger.info("Planet discovered", system_id=system_id, planet_id=planet.id, name=planet.name)
        return system
