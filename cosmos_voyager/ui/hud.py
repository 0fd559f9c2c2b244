"""HUD overlay — where you are, and which keys do what."""

from __future__ import annotations

import pygame

from ..constants import LIGHT_GREY, PANEL_BG, PANEL_BORDER, TEAL, WHITE
from ..models.navigation import Navigator


def breadcrumb(navigator: Navigator) -> list[tuple[str, str]]:
    """(label, value) pairs shown in the top bar."""
    galaxy = navigator.galaxy
    discovered = sum(1 for s in galaxy.systems if s.discovered)
    return [
        ("Galaxy", galaxy.name.value),
        ("System", navigator.system.name),
        ("Planet", navigator.planet.name),
        ("Charted", f"{discovered}/{len(galaxy.systems)}"),
    ]


class HUD:
    """Persistent heads-up display drawn over both views."""

    def __init__(self) -> None:
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)
        self.panel_height = 40

    def draw(self, surface: pygame.Surface, navigator: Navigator, hint: str = "") -> None:
        width, height = surface.get_size()

        # Semi-transparent top bar
        bar = pygame.Surface((width, self.panel_height), pygame.SRCALPHA)
        bar.fill(PANEL_BG)
        surface.blit(bar, (0, 0))
        pygame.draw.line(surface, PANEL_BORDER, (0, self.panel_height), (width, self.panel_height))

        x = 15
        for label, value in breadcrumb(navigator):
            x = self._draw_stat(surface, label, value, x, 12) + 30

        if hint:
            hint_surf = self.font_small.render(hint, True, LIGHT_GREY)
            surface.blit(hint_surf, (10, height - 25))

    def _draw_stat(self, surface: pygame.Surface, label: str, text: str, x: int, y: int) -> int:
        label_surf = self.font_small.render(label.upper(), True, TEAL)
        surface.blit(label_surf, (x, y + 2))
        val_surf = self.font.render(text, True, WHITE)
        surface.blit(val_surf, (x + label_surf.get_width() + 8, y))
        return x + label_surf.get_width() + 8 + val_surf.get_width()
