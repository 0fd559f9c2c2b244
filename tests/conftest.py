import os
import random

import pytest

# pygame must never open a real window under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from cosmos_voyager.models.galaxy import generate_initial_universe  # noqa: E402
from cosmos_voyager.models.universe import Universe  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def universe(rng) -> Universe:
    return Universe.from_galaxies(generate_initial_universe(rng))
