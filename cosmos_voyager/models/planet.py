"""Procedural planet generation for Cosmos Voyager."""

from __future__ import annotations

import enum
import random
import string
from dataclasses import dataclass, replace


class PlanetType(enum.Enum):
    """Planet classes. The class decides palette, surface and life."""

    LUSH = "Lush"
    DESERT = "Desert"
    TOXIC = "Toxic"
    IRRADIATED = "Irradiated"
    FROZEN = "Frozen"
    BARREN = "Barren"
    EXOTIC = "Exotic"
    OCEAN = "Ocean"
    VOLCANIC = "Volcanic"


class Rarity(enum.Enum):
    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    ULTRA_RARE = "Ultra-rare"


RARITY_ICONS: dict[Rarity, str] = {
    Rarity.COMMON: "🔹",
    Rarity.UNCOMMON: "🔸",
    Rarity.RARE: "💎",
    Rarity.ULTRA_RARE: "✨",
}

NONE = "None"  # sentinel for lifeless worlds
ABSENT_ATMOSPHERE = "Absent"
STARTER_PLANET_NAME = "Alixia Prime"


@dataclass(frozen=True)
class Resource:
    name: str
    rarity: Rarity
    icon: str


@dataclass(frozen=True)
class Flora:
    name: str
    description: str
    prevalence: str  # Abundant / Common / Infrequent / Sparse / None


@dataclass(frozen=True)
class Fauna:
    name: str
    temperament: str  # Docile / Skittish / Defensive / Aggressive / None
    prevalence: str  # Flourishing / Ample / Irregular / Limited / None


@dataclass(frozen=True)
class Atmosphere:
    type: str
    weather: str
    color: str


@dataclass(frozen=True)
class Planet:
    """A single generated planet. Immutable once created."""

    id: str
    name: str
    planet_type: PlanetType
    description: str
    size: int  # 1–10
    resources: tuple[Resource, ...]
    flora: Flora
    fauna: Fauna
    atmosphere: Atmosphere
    temperature: str
    main_color: str
    secondary_color: str


# ---------------------------------------------------------------------------
# Per-type traits
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlanetTraits:
    """Everything about a planet that is fixed by its type."""

    description: str
    main_color: str
    secondary_color: str
    temperature_range: tuple[int, int]  # inclusive, °C
    has_life: bool = True
    has_atmosphere: bool = True
    can_have_rings: bool = True


PLANET_TRAITS: dict[PlanetType, PlanetTraits] = {
    PlanetType.LUSH: PlanetTraits(
        "A vibrant world teeming with life and abundant resources.",
        "#4ade80", "#22c55e", (15, 29),
    ),
    PlanetType.DESERT: PlanetTraits(
        "An arid planet with vast expanses of sand and minimal vegetation.",
        "#fbbf24", "#f59e0b", (40, 139),
    ),
    PlanetType.TOXIC: PlanetTraits(
        "A hazardous world with poisonous atmosphere and dangerous flora.",
        "#84cc16", "#65a30d", (-20, 59),
    ),
    PlanetType.IRRADIATED: PlanetTraits(
        "A radiation-soaked planet with unique mutated lifeforms.",
        "#fb923c", "#f97316", (-20, 59),
    ),
    PlanetType.FROZEN: PlanetTraits(
        "A frigid world covered in ice and snow with rare crystalline formations.",
        "#93c5fd", "#60a5fa", (-200, -101),
    ),
    PlanetType.BARREN: PlanetTraits(
        "A lifeless rock with minimal atmosphere but potential mineral wealth.",
        "#a8a29e", "#78716c", (-20, 59),
        has_life=False, has_atmosphere=False, can_have_rings=False,
    ),
    PlanetType.EXOTIC: PlanetTraits(
        "A strange anomalous planet defying conventional classification.",
        "#c084fc", "#a855f7", (-20, 59),
    ),
    PlanetType.OCEAN: PlanetTraits(
        "A world covered almost entirely by vast seas and scattered islands.",
        "#38bdf8", "#0ea5e9", (-20, 59),
    ),
    PlanetType.VOLCANIC: PlanetTraits(
        "An unstable planet with active volcanoes and rivers of magma.",
        "#f87171", "#ef4444", (40, 139),
    ),
}


# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------

_PREFIXES = ["Al", "No", "Ke", "Zo", "Ek", "Ix", "Ur", "Ty", "Vi", "Ra"]
_MIDDLES = ["ta", "vi", "ku", "lo", "ni", "sha", "ma", "ra", "di", "xi"]
_SUFFIXES = ["lar", "mus", "rin", "phor", "tis", "gon", "lex", "dor", "kan", "plex"]

_RESOURCE_NAMES = [
    "Copper", "Emeril", "Indium", "Gold", "Silver", "Platinum",
    "Uranium", "Dioxite", "Ammonia", "Phosphorus", "Pyrite",
    "Cadmium", "Activated Copper", "Activated Emeril",
    "Activated Indium", "Magnetized Ferrite", "Rusted Metal",
    "Star Bulb", "Frost Crystal", "Cactus Flesh", "Solanium",
    "Gravitino Ball", "Storm Crystal", "Hexite",
]

_FLORA_DESCRIPTIONS = [
    "Bioluminescent plants that glow with ethereal light",
    "Mushroom-like structures with vibrant caps",
    "Tall, slender crystalline formations that shimmer",
    "Low-lying moss that pulses with electric energy",
    "Floating seed pods that drift through the air",
    "Tentacle-like vines that sway in the breeze",
    "Bubble-producing fungi that pop with musical tones",
    "Palm-like trees with spiral growth patterns",
    "Carnivorous plants with slowly moving appendages",
    "Grass that changes color according to temperature",
]

_FLORA_PREVALENCE = ["Abundant", "Common", "Infrequent", "Sparse", NONE]
_FAUNA_TEMPERAMENTS = ["Docile", "Skittish", "Defensive", "Aggressive", NONE]
_FAUNA_PREVALENCE = ["Flourishing", "Ample", "Irregular", "Limited", NONE]

_WEATHER = [
    "Boiling Monsoons", "Firestorms", "Freezing", "Toxic Rain",
    "Radioactive Storms", "Scalding Heat", "Pleasant",
    "Refreshing Breeze", "Humid", "Dusty", "Foggy",
    "Superheated Rain", "Extreme Wind", "Blissful",
    "Anomalous", "Clear", "Corrupted Blood Storms",
]

_ATMOSPHERE_TYPES = [
    "Nitrogen-rich", "Oxygen-abundant", "Neon-infused",
    "Argon-heavy", "Methane-dense", "Helium-rich",
    "Sulfuric", "Carbon-rich", "Chlorine-heavy",
    "Ammonia-dense",
]

_ID_ALPHABET = string.digits + string.ascii_lowercase
PLANET_ID_LENGTH = 9
MIN_RESOURCES = 2
MAX_RESOURCES = 4


def random_id(rng: random.Random, length: int) -> str:
    """Opaque base-36 identifier."""
    return "".join(rng.choice(_ID_ALPHABET) for _ in range(length))


def _generate_planet_name(rng: random.Random) -> str:
    """Two-morpheme name, or three-morpheme 30% of the time."""
    if rng.random() > 0.7:
        return rng.choice(_PREFIXES) + rng.choice(_MIDDLES) + rng.choice(_SUFFIXES)
    return rng.choice(_PREFIXES) + rng.choice(_SUFFIXES)


def _generate_resource(rng: random.Random) -> Resource:
    rarity = rng.choice(list(Rarity))
    return Resource(
        name=rng.choice(_RESOURCE_NAMES),
        rarity=rarity,
        icon=RARITY_ICONS[rarity],
    )


def _generate_flora(rng: random.Random, traits: PlanetTraits) -> Flora:
    if not traits.has_life:
        return Flora(name=NONE, description=NONE, prevalence=NONE)
    return Flora(
        name=_generate_planet_name(rng) + "weed",
        description=rng.choice(_FLORA_DESCRIPTIONS),
        prevalence=rng.choice(_FLORA_PREVALENCE),
    )


def _generate_fauna(rng: random.Random, traits: PlanetTraits) -> Fauna:
    if not traits.has_life:
        return Fauna(name=NONE, temperament=NONE, prevalence=NONE)
    return Fauna(
        name=_generate_planet_name(rng) + "oid",
        temperament=rng.choice(_FAUNA_TEMPERAMENTS),
        prevalence=rng.choice(_FAUNA_PREVALENCE),
    )


# ---------------------------------------------------------------------------
# Public generators
# ---------------------------------------------------------------------------


def generate_planet(
    rng: random.Random | None = None,
    planet_type: PlanetType | None = None,
) -> Planet:
    """Generate a random planet. ``planet_type`` pins the class."""
    rng = rng or random.Random()
    if planet_type is None:
        planet_type = rng.choice(list(PlanetType))
    traits = PLANET_TRAITS[planet_type]

    low, high = traits.temperature_range
    resource_count = rng.randint(MIN_RESOURCES, MAX_RESOURCES)
    atmosphere_type = (
        rng.choice(_ATMOSPHERE_TYPES) if traits.has_atmosphere else ABSENT_ATMOSPHERE
    )

    return Planet(
        id=random_id(rng, PLANET_ID_LENGTH),
        name=_generate_planet_name(rng),
        planet_type=planet_type,
        description=traits.description,
        size=rng.randint(1, 10),
        resources=tuple(_generate_resource(rng) for _ in range(resource_count)),
        flora=_generate_flora(rng, traits),
        fauna=_generate_fauna(rng, traits),
        atmosphere=Atmosphere(
            type=atmosphere_type,
            weather=rng.choice(_WEATHER),
            color=traits.main_color,
        ),
        temperature=f"{rng.randint(low, high)}°C",
        main_color=traits.main_color,
        secondary_color=traits.secondary_color,
    )


def generate_planets(count: int, rng: random.Random | None = None) -> list[Planet]:
    rng = rng or random.Random()
    return [generate_planet(rng) for _ in range(count)]


def generate_starter_planet(rng: random.Random | None = None) -> Planet:
    """The player's entry point: always a habitable Lush world."""
    planet = generate_planet(rng, planet_type=PlanetType.LUSH)
    return replace(planet, name=STARTER_PLANET_NAME)
