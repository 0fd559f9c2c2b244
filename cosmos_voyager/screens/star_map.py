"""Star map screen — planets of this system, systems of this galaxy, or all galaxies."""

from __future__ import annotations

import random

import pygame
import structlog

from ..constants import AMBER, LIGHT_GREY, RED_ALERT, TEAL
from ..interaction import MapInteraction, SelectionCallbacks
from ..models.navigation import Navigator
from ..rendering.commands import Frame
from ..rendering.map_renderer import MapMode, MapRenderer
from ..rendering.pygame_backend import FontCache, present
from ..states import ViewState

logger = structlog.get_logger(__name__)

TOP_BAR = 40
BOTTOM_HINT = 30

_MODE_ORDER = [MapMode.SYSTEMS, MapMode.PLANETS, MapMode.GALAXIES]
_MODE_TITLES = {
    MapMode.PLANETS: "SYSTEM CHART",
    MapMode.SYSTEMS: "GALAXY CHART",
    MapMode.GALAXIES: "UNIVERSE CHART",
}


class StarMapScreen:
    """Clickable map with hover labels and the warp confirmation prompt."""

    def __init__(
        self,
        navigator: Navigator,
        rng: random.Random | None = None,
        fonts: FontCache | None = None,
        pixel_ratio: float = 1.0,
    ) -> None:
        self.navigator = navigator
        self.fonts = fonts or FontCache()
        self.pixel_ratio = pixel_ratio
        self.renderer = MapRenderer(rng, measure_text=self.fonts.measure)
        self.interaction = MapInteraction(
            self.renderer,
            SelectionCallbacks(
                on_select_planet=self._on_select_planet,
                on_select_system=self._on_select_system,
                on_select_galaxy=self._on_select_galaxy,
                on_initiate_warp=self._on_initiate_warp,
            ),
            pixel_ratio=pixel_ratio,
        )
        self.mode = MapMode.SYSTEMS
        self.next_state: ViewState | None = None

        self.font_title = pygame.font.Font(None, 32)
        self.font_body = pygame.font.Font(None, 24)

        self._cache: pygame.Surface | None = None
        self._dirty = True
        self._pointer = False

    @property
    def warp_pending(self) -> bool:
        return self.navigator.warp_target_id is not None

    def invalidate(self) -> None:
        """Force a fresh render on the next draw (resize, mode change...)."""
        self._dirty = True

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_events(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            # Warp confirmation intercepts all keys
            if self.warp_pending:
                if event.key == pygame.K_RETURN:
                    self.navigator.complete_warp()
                    self.mode = MapMode.SYSTEMS
                elif event.key == pygame.K_ESCAPE:
                    self.navigator.cancel_warp()
                self.invalidate()
                return
            if event.key == pygame.K_TAB:
                index = _MODE_ORDER.index(self.mode)
                self.mode = _MODE_ORDER[(index + 1) % len(_MODE_ORDER)]
                self.interaction.leave()
                logger.debug("Chart mode changed", mode=self.mode.value)
                self.invalidate()
            elif event.key == pygame.K_m:
                self.next_state = ViewState.PLANET_VIEW
        elif self.warp_pending:
            return
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = self._canvas_pos(event.pos)
            if self.interaction.click(x, y) is not None:
                self.invalidate()
        elif event.type == pygame.MOUSEMOTION:
            x, y = self._canvas_pos(event.pos)
            if self.interaction.move(x, y):
                self.invalidate()
            self._update_cursor()
        elif event.type == pygame.VIDEORESIZE:
            self.invalidate()

    def _canvas_pos(self, pos: tuple[int, int]) -> tuple[int, int]:
        return pos[0], pos[1] - TOP_BAR

    def _update_cursor(self) -> None:
        wants = self.interaction.wants_pointer
        if wants != self._pointer:
            self._pointer = wants
            pygame.mouse.set_cursor(
                pygame.SYSTEM_CURSOR_HAND if wants else pygame.SYSTEM_CURSOR_ARROW
            )

    # ------------------------------------------------------------------
    # Selection callbacks
    # ------------------------------------------------------------------

    def _on_select_planet(self, planet_id: str) -> None:
        self.navigator.select_planet(planet_id)
        self.next_state = ViewState.PLANET_VIEW

    def _on_select_system(self, system_id: str, galaxy_id: str) -> None:
        self.navigator.select_system(system_id, galaxy_id)
        self.mode = MapMode.PLANETS

    def _on_select_galaxy(self, galaxy_id: str) -> None:
        self.navigator.select_galaxy(galaxy_id)
        self.mode = MapMode.SYSTEMS

    def _on_initiate_warp(self, galaxy_id: str) -> None:
        self.navigator.initiate_warp(galaxy_id)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        pass

    def render(self, width: float, height: float) -> Frame:
        """Frame for the current mode at logical size ``width`` × ``height``."""
        nav = self.navigator
        hovered = self.interaction.hovered_id
        if self.mode is MapMode.PLANETS:
            return self.renderer.render_planets(nav.system.planets, nav.planet_id, width, height, hovered)
        if self.mode is MapMode.SYSTEMS:
            return self.renderer.render_systems(nav.galaxy, nav.system_id, width, height, hovered)
        return self.renderer.render_galaxies(nav.universe.galaxies(), nav.galaxy_id, width, height, hovered)

    def draw(self, surface: pygame.Surface | None) -> None:
        if surface is None:
            return
        width, height = surface.get_size()
        size = (max(1, width), max(1, height - TOP_BAR - BOTTOM_HINT))

        if self._dirty or self._cache is None or self._cache.get_size() != size:
            self._cache = pygame.Surface(size)
            frame = self.render(size[0] / self.pixel_ratio, size[1] / self.pixel_ratio)
            present(frame, self._cache, self.pixel_ratio, self.fonts)
            self._dirty = False
        surface.blit(self._cache, (0, TOP_BAR))

        title = self.font_title.render(_MODE_TITLES[self.mode], True, TEAL)
        surface.blit(title, (width - title.get_width() - 16, TOP_BAR + 10))

        if self.warp_pending:
            self._draw_warp_confirm(surface)

    def _draw_warp_confirm(self, surface: pygame.Surface) -> None:
        """Draw the warp confirmation overlay."""
        width, height = surface.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        surface.blit(overlay, (0, 0))

        box_w, box_h = 500, 170
        bx = width // 2 - box_w // 2
        by = height // 2 - box_h // 2
        box = pygame.Surface((box_w, box_h), pygame.SRCALPHA)
        box.fill((10, 10, 20, 240))
        surface.blit(box, (bx, by))
        pygame.draw.rect(surface, AMBER, (bx, by, box_w, box_h), 2, border_radius=6)

        target = self.navigator.warp_target
        name = target.name.value if target else "Unknown"
        title = self.font_title.render("WARP DRIVE SEQUENCE", True, AMBER)
        surface.blit(title, (bx + box_w // 2 - title.get_width() // 2, by + 20))
        body = self.font_body.render(f"Target: {name} Galaxy", True, LIGHT_GREY)
        surface.blit(body, (bx + box_w // 2 - body.get_width() // 2, by + 65))

        enter_txt = self.font_body.render("ENTER — Engage", True, TEAL)
        esc_txt = self.font_body.render("ESC — Abort", True, RED_ALERT)
        surface.blit(enter_txt, (bx + 60, by + box_h - 40))
        surface.blit(esc_txt, (bx + box_w - 180, by + box_h - 40))
