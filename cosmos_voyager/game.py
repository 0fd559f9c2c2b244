"""Cosmos Voyager — main game module (view router)."""

from __future__ import annotations

import random
import sys

import pygame
import structlog

from .config import Settings, load_settings
from .constants import DARK_GREY, TITLE
from .errors import ConfigError
from .log import configure_logging
from .models.galaxy import generate_initial_universe
from .models.navigation import Navigator
from .models.universe import Universe
from .rendering.pygame_backend import FontCache
from .screens.planet_view import PlanetViewScreen
from .screens.star_map import StarMapScreen
from .states import ViewState
from .ui.hud import HUD

logger = structlog.get_logger(__name__)

_HINTS = {
    ViewState.PLANET_VIEW: "M — Star Map    N — Discover Planet    ESC — Quit",
    ViewState.STAR_MAP: "TAB — Chart Mode    Click — Select    M / ESC — Planet View",
}


class Game:
    """Core game class — routes the active view to its screen."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.settings.width, self.settings.height), pygame.RESIZABLE,
        )
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True
        self.state = ViewState.PLANET_VIEW

        rng = random.Random(self.settings.seed)
        self.universe = Universe.from_galaxies(generate_initial_universe(rng))
        self.navigator = Navigator(self.universe, rng)

        # Shared components
        fonts = FontCache()
        self.hud = HUD()
        ratio = self.settings.pixel_ratio
        self.planet_view_screen = PlanetViewScreen(self.navigator, rng, fonts, ratio)
        self.star_map_screen = StarMapScreen(self.navigator, rng, fonts, ratio)
        logger.info("Game started", seed=self.settings.seed, galaxies=len(self.universe.galaxy_ids()))

    @property
    def active_screen(self) -> PlanetViewScreen | StarMapScreen:
        if self.state == ViewState.STAR_MAP:
            return self.star_map_screen
        return self.planet_view_screen

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        while self.running:
            dt = self.clock.tick(self.settings.fps) / 1000.0
            self._handle_events()
            self._update(dt)
            self._draw()

        pygame.quit()
        sys.exit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.VIDEORESIZE:
                logger.debug("Window resized", width=event.w, height=event.h)
                self.star_map_screen.invalidate()
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                if self._handle_escape():
                    continue

            self.active_screen.handle_events(event)

    def _handle_escape(self) -> bool:
        """Back out of the star map, or quit from the planet view.

        Returns False when the active screen should see the key itself.
        """
        if self.state == ViewState.STAR_MAP:
            if self.star_map_screen.warp_pending:
                return False
            self.state = ViewState.PLANET_VIEW
        else:
            self.running = False
        return True

    def _update(self, dt: float) -> None:
        screen = self.active_screen
        screen.update(dt)
        if screen.next_state:
            self.state = screen.next_state
            screen.next_state = None
            if self.state == ViewState.STAR_MAP:
                self.star_map_screen.invalidate()

    def _draw(self) -> None:
        self.screen.fill(DARK_GREY)
        self.active_screen.draw(self.screen)
        self.hud.draw(self.screen, self.navigator, _HINTS[self.state])
        pygame.display.flip()


def main() -> None:
    """Entry point for the cosmos-voyager command."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        configure_logging()
        logger.warning("Falling back to default settings", error=str(exc))
        settings = Settings()
    else:
        configure_logging(settings.log_level, settings.log_json)
    game = Game(settings)
    game.run()


if __name__ == "__main__":
    main()
