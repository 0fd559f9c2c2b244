"""Pointer handling for the maps: clicks select, moves hover."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from .rendering.map_renderer import MapMode, MapNode, MapRenderer

logger = structlog.get_logger(__name__)


def _ignore(*_args: str) -> None:
    return None


@dataclass
class SelectionCallbacks:
    """Fired at most once per click, never on hover."""

    on_select_planet: Callable[[str], None] = _ignore
    on_select_system: Callable[[str, str], None] = _ignore
    on_select_galaxy: Callable[[str], None] = _ignore
    on_initiate_warp: Callable[[str], None] = _ignore


class MapInteraction:
    """Translates pointer events into hit-tests against the last render.

    Event coordinates are device pixels; they are divided by the same
    pixel ratio the frame was rasterised with before testing.
    """

    def __init__(
        self,
        renderer: MapRenderer,
        callbacks: SelectionCallbacks | None = None,
        pixel_ratio: float = 1.0,
    ) -> None:
        self.renderer = renderer
        self.callbacks = callbacks or SelectionCallbacks()
        self.pixel_ratio = pixel_ratio
        self.hovered: MapNode | None = None

    @property
    def hovered_id(self) -> str | None:
        return self.hovered.id if self.hovered else None

    @property
    def wants_pointer(self) -> bool:
        """True while the pointer rests on a node."""
        return self.hovered is not None

    def _to_logical(self, x: float, y: float) -> tuple[float, float]:
        return x / self.pixel_ratio, y / self.pixel_ratio

    def click(self, x: float, y: float) -> MapNode | None:
        node = self.renderer.hit_test(*self._to_logical(x, y))
        if node is None:
            return None

        if node.mode is MapMode.PLANETS:
            self.callbacks.on_select_planet(node.id)
        elif node.mode is MapMode.SYSTEMS:
            self.callbacks.on_select_system(node.id, node.galaxy_id or "")
        elif node.active:
            self.callbacks.on_select_galaxy(node.id)
        else:
            self.callbacks.on_initiate_warp(node.id)
        logger.debug("Map click resolved", mode=node.mode.value, node_id=node.id)
        return node

    def move(self, x: float, y: float) -> bool:
        """Update hover state. Returns True when a redraw is needed."""
        node = self.renderer.hit_test(*self._to_logical(x, y))
        previous = self.hovered_id
        self.hovered = node
        return (node.id if node else None) != previous

    def leave(self) -> bool:
        changed = self.hovered is not None
        self.hovered = None
        return changed
