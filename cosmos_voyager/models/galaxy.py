"""Procedural star system and galaxy generation for Cosmos Voyager."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

import structlog

from .planet import Planet, generate_planet, random_id

logger = structlog.get_logger(__name__)


class StarType(enum.Enum):
    """Types of stars. Only affects how the system is drawn."""

    YELLOW = "Yellow"
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    ANOMALY = "Anomaly"


class GalaxyName(enum.Enum):
    """The five galaxies of the universe, in travel order."""

    EUCLID = "Euclid"
    HILBERT = "Hilbert"
    CALYPSO = "Calypso"
    HESPERIUS = "Hesperius"
    HYADES = "Hyades"


# (id, name, system count); only the first starts unlocked
_INITIAL_GALAXIES: list[tuple[str, GalaxyName, int]] = [
    ("g1", GalaxyName.EUCLID, 8),
    ("g2", GalaxyName.HILBERT, 6),
    ("g3", GalaxyName.CALYPSO, 7),
    ("g4", GalaxyName.HESPERIUS, 9),
    ("g5", GalaxyName.HYADES, 12),
]

SYSTEM_ID_LENGTH = 7
MIN_PLANETS = 1
MAX_PLANETS = 4
DISCOVERY_CHANCE = 0.3


@dataclass(frozen=True)
class StarSystem:
    """A star system. Position is in percentage space, 0–100 on both axes."""

    id: str
    name: str
    x: float
    y: float
    star_type: StarType
    planets: tuple[Planet, ...]
    discovered: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Galaxy:
    """A galaxy and its star systems as one value tree."""

    id: str
    name: GalaxyName
    systems: tuple[StarSystem, ...] = ()
    unlocked: bool = False

    @property
    def galaxy_type(self) -> GalaxyName:
        return self.name


# ---------------------------------------------------------------------------
# Name generation
# ---------------------------------------------------------------------------

_PREFIXES = ["Al", "Uy", "Ge", "No", "Ka", "Ix", "Su"]
_SUFFIXES = ["III", "IV", "VII", "-16", "-42b", " Sigma", " Tau", " Prime"]


def _generate_system_name(rng: random.Random) -> str:
    """Catalogue-style system name, e.g. "Ka-42b" or "Uy Sigma"."""
    return rng.choice(_PREFIXES) + rng.choice(_SUFFIXES)


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def generate_star_system(rng: random.Random | None = None) -> StarSystem:
    """A system with 1–4 planets at a random map position."""
    rng = rng or random.Random()
    star_type = rng.choice(list(StarType))
    name = _generate_system_name(rng)
    x = rng.random() * 100
    y = rng.random() * 100
    planet_count = rng.randint(MIN_PLANETS, MAX_PLANETS)
    planets = tuple(generate_planet(rng) for _ in range(planet_count))

    return StarSystem(
        id=random_id(rng, SYSTEM_ID_LENGTH),
        name=name,
        x=x,
        y=y,
        star_type=star_type,
        planets=planets,
        discovered=rng.random() < DISCOVERY_CHANCE,
    )


def generate_galaxy(
    galaxy_id: str,
    name: GalaxyName,
    system_count: int,
    unlocked: bool = False,
    rng: random.Random | None = None,
) -> Galaxy:
    rng = rng or random.Random()
    systems = tuple(generate_star_system(rng) for _ in range(system_count))
    return Galaxy(id=galaxy_id, name=name, systems=systems, unlocked=unlocked)


def generate_initial_universe(rng: random.Random | None = None) -> list[Galaxy]:
    """The five starting galaxies. Only Euclid is unlocked."""
    rng = rng or random.Random()
    galaxies = [
        generate_galaxy(galaxy_id, name, count, unlocked=(index == 0), rng=rng)
        for index, (galaxy_id, name, count) in enumerate(_INITIAL_GALAXIES)
    ]
    logger.info(
        "Universe generated",
        galaxies=len(galaxies),
        systems=sum(len(g.systems) for g in galaxies),
    )
    return galaxies
