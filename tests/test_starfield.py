"""Tests for the star and nebula backdrop."""

import random

from cosmos_voyager.rendering.commands import RadialGradient
from cosmos_voyager.ui.starfield import StarField, _hsla


class TestHsla:

    def test_primary_hues(self):
        assert _hsla(0, 1.0, 0.5, 1.0) == (255, 0, 0, 255)
        assert _hsla(120, 1.0, 0.5, 1.0) == (0, 255, 0, 255)
        assert _hsla(240, 1.0, 0.5, 0.1) == (0, 0, 255, 26)

    def test_hue_wraps(self):
        assert _hsla(360, 1.0, 0.5, 1.0) == _hsla(0, 1.0, 0.5, 1.0)

    def test_grey_without_saturation(self):
        assert _hsla(200, 0.0, 0.5, 1.0) == (128, 128, 128, 255)


def test_nebulae_are_blue_to_violet():
    for command in StarField(random.Random(4)).nebulae(800, 600, 20):
        assert isinstance(command.fill, RadialGradient)
        r, g, b, a = command.fill.stops[0][1]
        assert b >= r and b > g
        assert a == 26
