"""Planet view — the current planet, slowly rotating, with its survey readout."""

from __future__ import annotations

import random

import pygame

from ..constants import (
    LIGHT_GREY,
    PANEL_BG,
    PANEL_BORDER,
    ROTATION_STEP,
    TEAL,
    WHITE,
)
from ..models.navigation import Navigator
from ..models.planet import NONE, Planet
from ..rendering.colors import hex_to_rgba
from ..rendering.planet_renderer import PlanetRenderer, advance_rotation
from ..rendering.pygame_backend import FontCache, present
from ..states import ViewState

PANEL_WIDTH = 340
TOP_BAR = 40


def planet_readout(planet: Planet) -> list[tuple[str, str]]:
    """Survey readout rows as (label, value)."""
    flora = NONE if planet.flora.prevalence == NONE else f"{planet.flora.name} ({planet.flora.prevalence})"
    fauna = NONE if planet.fauna.prevalence == NONE else f"{planet.fauna.name} ({planet.fauna.temperament})"
    rows = [
        ("Type", planet.planet_type.value),
        ("Size", f"{planet.size}/10"),
        ("Temperature", planet.temperature),
        ("Atmosphere", planet.atmosphere.type),
        ("Weather", planet.atmosphere.weather),
        ("Flora", flora),
        ("Fauna", fauna),
    ]
    rows.extend(
        (f"{resource.icon} {resource.name}", resource.rarity.value)
        for resource in planet.resources
    )
    return rows


class PlanetViewScreen:
    """Animated planet canvas plus readout panel."""

    def __init__(
        self,
        navigator: Navigator,
        rng: random.Random | None = None,
        fonts: FontCache | None = None,
        pixel_ratio: float = 1.0,
    ) -> None:
        self.navigator = navigator
        self.renderer = PlanetRenderer(rng)
        self.fonts = fonts or FontCache()
        self.pixel_ratio = pixel_ratio
        self.font_title = pygame.font.Font(None, 36)
        self.font_info = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)

        self.rotation = 0.0
        self._planet_id = navigator.planet_id
        self.next_state: ViewState | None = None

    def handle_events(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_m:
                self.next_state = ViewState.STAR_MAP
            elif event.key == pygame.K_n:
                self.navigator.discover_planet()

    def update(self, dt: float) -> None:
        # A new planet restarts the spin
        if self.navigator.planet_id != self._planet_id:
            self._planet_id = self.navigator.planet_id
            self.rotation = 0.0
        self.rotation = advance_rotation(self.rotation, ROTATION_STEP)

    def draw(self, surface: pygame.Surface | None) -> None:
        if surface is None:
            return
        width, height = surface.get_size()
        canvas_rect = pygame.Rect(0, TOP_BAR, max(1, width - PANEL_WIDTH), max(1, height - TOP_BAR))
        canvas = surface.subsurface(canvas_rect)

        planet = self.navigator.planet
        frame = self.renderer.render(
            planet,
            canvas_rect.width / self.pixel_ratio,
            canvas_rect.height / self.pixel_ratio,
            self.rotation,
        )
        present(frame, canvas, self.pixel_ratio, self.fonts)

        tag = self.font_small.render(f"[{planet.planet_type.value}]", True, TEAL)
        surface.blit(tag, (16, height - 50))

        self._draw_panel(surface, planet, pygame.Rect(width - PANEL_WIDTH, TOP_BAR, PANEL_WIDTH, height - TOP_BAR))

    def _draw_panel(self, surface: pygame.Surface, planet: Planet, rect: pygame.Rect) -> None:
        bg = pygame.Surface(rect.size, pygame.SRCALPHA)
        bg.fill(PANEL_BG)
        surface.blit(bg, rect.topleft)
        pygame.draw.line(surface, PANEL_BORDER, rect.topleft, rect.bottomleft)

        px, py = rect.x + 16, rect.y + 14
        accent = hex_to_rgba(planet.main_color)[:3]
        name_surf = self.font_title.render(planet.name, True, accent)
        surface.blit(name_surf, (px, py))
        py += 34

        for line in self._wrap_text(planet.description, rect.width - 32)[:3]:
            surface.blit(self.font_small.render(line, True, LIGHT_GREY), (px, py))
            py += 18
        py += 10

        for label, value in planet_readout(planet):
            surface.blit(self.font_small.render(label.upper(), True, TEAL), (px, py))
            val = self.font_info.render(value, True, WHITE)
            surface.blit(val, (rect.right - val.get_width() - 16, py - 2))
            py += 24

    def _wrap_text(self, text: str, max_width: int) -> list[str]:
        words = text.split()
        lines: list[str] = []
        current = ""
        for word in words:
            test = f"{current} {word}".strip()
            if self.font_small.size(test)[0] <= max_width:
                current = test
            else:
                if current:
                    lines.append(current)
                current = word
        if current:
            lines.append(current)
        return lines
