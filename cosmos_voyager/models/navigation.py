"""Where the player currently is, and how selections move them."""

from __future__ import annotations

import random

import structlog

from ..errors import UnknownEntityError
from .galaxy import Galaxy, StarSystem
from .planet import Planet, generate_starter_planet
from .universe import Universe

logger = structlog.get_logger(__name__)


class Navigator:
    """View-state holder: current galaxy, system and planet.

    Receives the map selection callbacks. Unknown ids are ignored so a
    stale click can never take the UI down.
    """

    def __init__(self, universe: Universe, rng: random.Random | None = None) -> None:
        self.universe = universe
        self.rng = rng or random.Random()
        self.warp_target_id: str | None = None

        galaxy = universe.galaxies()[0]
        system = self._entry_system(galaxy)
        self.galaxy_id = galaxy.id
        self.system_id = system.id
        self.planet_id = system.planets[0].id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def galaxy(self) -> Galaxy:
        return self.universe.galaxy(self.galaxy_id)

    @property
    def system(self) -> StarSystem:
        return self.universe.system(self.system_id)

    @property
    def planet(self) -> Planet:
        return self.universe.planet(self.planet_id)

    @property
    def warp_target(self) -> Galaxy | None:
        if self.warp_target_id is None:
            return None
        return self.universe.galaxy(self.warp_target_id)

    @staticmethod
    def _entry_system(galaxy: Galaxy) -> StarSystem:
        """First discovered system, else the first one."""
        for system in galaxy.systems:
            if system.discovered:
                return system
        return galaxy.systems[0]

    # ------------------------------------------------------------------
    # Selection callbacks
    # ------------------------------------------------------------------

    def select_planet(self, planet_id: str) -> None:
        try:
            system = self.universe.system_of(planet_id)
            galaxy = self.universe.galaxy_of(system.id)
        except UnknownEntityError:
            logger.warning("Ignoring selection of unknown planet", planet_id=planet_id)
            return
        self.galaxy_id = galaxy.id
        self.system_id = system.id
        self.planet_id = planet_id
        logger.info("Planet selected", planet_id=planet_id)

    def select_system(self, system_id: str, galaxy_id: str) -> None:
        """Move to a system; visiting it marks it discovered."""
        try:
            galaxy = self.universe.galaxy_of(system_id)
        except UnknownEntityError:
            logger.warning("Ignoring selection of unknown system", system_id=system_id)
            return
        if galaxy.id != galaxy_id:
            logger.warning(
                "System does not belong to galaxy", system_id=system_id, galaxy_id=galaxy_id
            )
            return
        system = self.universe.discover_system(system_id)
        self.galaxy_id = galaxy_id
        self.system_id = system_id
        if system.planets:
            self.planet_id = system.planets[0].id
        logger.info("System selected", system_id=system_id, galaxy_id=galaxy_id)

    def select_galaxy(self, galaxy_id: str) -> None:
        try:
            unlocked = self.universe.is_unlocked(galaxy_id)
        except UnknownEntityError:
            logger.warning("Ignoring selection of unknown galaxy", galaxy_id=galaxy_id)
            return
        if not unlocked:
            logger.warning("Galaxy is locked", galaxy_id=galaxy_id)
            return
        self._enter_galaxy(self.universe.galaxy(galaxy_id))
        logger.info("Galaxy selected", galaxy_id=galaxy_id)

    def initiate_warp(self, galaxy_id: str) -> None:
        try:
            unlocked = self.universe.is_unlocked(galaxy_id)
        except UnknownEntityError:
            logger.warning("Ignoring warp to unknown galaxy", galaxy_id=galaxy_id)
            return
        if unlocked:
            self.select_galaxy(galaxy_id)
            return
        self.warp_target_id = galaxy_id
        logger.info("Warp sequence started", galaxy_id=galaxy_id)

    def complete_warp(self) -> None:
        """Unlock the pending target galaxy and jump to its first system."""
        if self.warp_target_id is None:
            return
        galaxy = self.universe.unlock_galaxy(self.warp_target_id)
        self.warp_target_id = None
        system = galaxy.systems[0]
        self.galaxy_id = galaxy.id
        self.system_id = system.id
        self.planet_id = system.planets[0].id
        logger.info("Warp complete", galaxy_id=galaxy.id)

    def cancel_warp(self) -> None:
        if self.warp_target_id is not None:
            logger.info("Warp sequence aborted", galaxy_id=self.warp_target_id)
        self.warp_target_id = None

    def discover_planet(self) -> Planet:
        """Add a fresh starter planet to the current system and go there."""
        planet = generate_starter_planet(self.rng)
        self.universe.add_planet(self.system_id, planet)
        self.planet_id = planet.id
        return planet

    def _enter_galaxy(self, galaxy: Galaxy) -> None:
        system = self._entry_system(galaxy)
        self.galaxy_id = galaxy.id
        self.system_id = system.id
        self.planet_id = system.planets[0].id
