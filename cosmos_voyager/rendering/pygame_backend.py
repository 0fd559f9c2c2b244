"""Rasterise frames onto pygame surfaces."""

from __future__ import annotations

import math
from collections.abc import Callable

import pygame

from .colors import Color
from .commands import (
    Arc,
    Bezier,
    Circle,
    Ellipse,
    Fill,
    Frame,
    LinearGradient,
    Point,
    Polygon,
    Polyline,
    RadialGradient,
    Rect,
    Text,
)

CURVE_SEGMENTS = 24
MAX_GRADIENT_STEPS = 64


class FontCache:
    """pygame fonts by size, plus text measurement for label layout."""

    def __init__(self) -> None:
        self._fonts: dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def measure(self, text: str, size: int) -> float:
        return float(self.get(size).size(text)[0])


def _bounds(points: list[Point], pad: float) -> pygame.Rect:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left = math.floor(min(xs) - pad)
    top = math.floor(min(ys) - pad)
    return pygame.Rect(left, top, math.ceil(max(xs) + pad) - left + 1, math.ceil(max(ys) + pad) - top + 1)


def _cubic(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    u = 1 - t
    return (
        u ** 3 * p0[0] + 3 * u * u * t * p1[0] + 3 * u * t * t * p2[0] + t ** 3 * p3[0],
        u ** 3 * p0[1] + 3 * u * u * t * p1[1] + 3 * u * t * t * p2[1] + t ** 3 * p3[1],
    )


class Rasteriser:
    """Draws every command of a frame onto one surface.

    Commands are in logical pixels; ``scale`` is the device pixel ratio of
    the target surface.
    """

    def __init__(self, surface: pygame.Surface, scale: float = 1.0, fonts: FontCache | None = None) -> None:
        self.surface = surface
        self.scale = scale
        self.fonts = fonts or FontCache()
        self._handlers: dict[type, Callable] = {
            Fill: self._fill,
            Circle: self._circle,
            Ellipse: self._ellipse,
            Arc: self._arc,
            Bezier: self._bezier,
            Polyline: self._polyline,
            Polygon: self._polygon,
            Rect: self._rect,
            Text: self._text,
        }

    def draw(self, frame: Frame) -> None:
        for command in frame:
            self._handlers[type(command)](command)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _pt(self, point: Point) -> Point:
        return point[0] * self.scale, point[1] * self.scale

    def _blend(self, color: Color, bounds: pygame.Rect, draw: Callable[[pygame.Surface, Callable[[Point], Point]], None]) -> None:
        """Draw opaque colours directly; translucent ones via an SRCALPHA layer."""
        if color[3] <= 0:
            return
        if color[3] >= 255:
            draw(self.surface, lambda p: p)
            return
        layer = pygame.Surface(bounds.size, pygame.SRCALPHA)
        draw(layer, lambda p: (p[0] - bounds.x, p[1] - bounds.y))
        self.surface.blit(layer, bounds.topleft)

    def _gradient_disc(self, center: Point, radius: float, paint: LinearGradient | RadialGradient) -> None:
        """Fill a disc with a gradient, clipped to the disc."""
        size = max(2, math.ceil(radius * 2) + 2)
        origin = (center[0] - size / 2, center[1] - size / 2)
        layer = pygame.Surface((size, size), pygame.SRCALPHA)

        def local(p: Point) -> Point:
            q = self._pt(p)
            return q[0] - origin[0], q[1] - origin[1]

        if isinstance(paint, LinearGradient):
            # Banded by row, evaluated at the disc's centre column
            sx, sy = self._pt(paint.start)
            ex, ey = self._pt(paint.end)
            dx, dy = ex - sx, ey - sy
            length_sq = dx * dx + dy * dy or 1.0
            for row in range(size):
                wx, wy = center[0], origin[1] + row
                t = ((wx - sx) * dx + (wy - sy) * dy) / length_sq
                pygame.draw.line(layer, paint.color_at(t), (0, row), (size, row))
        else:
            layer.fill(paint.color_at(1.0))
            outer = paint.outer_radius * self.scale
            steps = max(8, min(MAX_GRADIENT_STEPS, int(outer)))
            for i in range(steps, -1, -1):
                t = i / steps
                c0, c1 = local(paint.inner_center), local(paint.outer_center)
                c = (c0[0] + (c1[0] - c0[0]) * t, c0[1] + (c1[1] - c0[1]) * t)
                r = (paint.inner_radius + (paint.outer_radius - paint.inner_radius) * t) * self.scale
                if r > 0:
                    pygame.draw.circle(layer, paint.color_at(t), c, r)

        mask = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(mask, (255, 255, 255, 255), (size / 2, size / 2), radius)
        layer.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        self.surface.blit(layer, origin)

    def _stroke_points(self, points: list[Point], color: Color, width: float, closed: bool = False) -> None:
        scaled = [self._pt(p) for p in points]
        w = max(1, round(width * self.scale))
        bounds = _bounds(scaled, w)

        def draw(target: pygame.Surface, offset: Callable[[Point], Point]) -> None:
            pygame.draw.lines(target, color, closed, [offset(p) for p in scaled], w)

        self._blend(color, bounds, draw)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _fill(self, cmd: Fill) -> None:
        if cmd.color[3] >= 255:
            self.surface.fill(cmd.color[:3])
            return
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        overlay.fill(cmd.color)
        self.surface.blit(overlay, (0, 0))

    def _circle(self, cmd: Circle) -> None:
        center = self._pt(cmd.center)
        radius = cmd.radius * self.scale
        if radius <= 0:
            return
        if isinstance(cmd.fill, (LinearGradient, RadialGradient)):
            self._gradient_disc(center, radius, cmd.fill)
        elif cmd.fill is not None:
            self._blend(
                cmd.fill,
                _bounds([center], radius + 1),
                lambda target, off: pygame.draw.circle(target, cmd.fill, off(center), radius),
            )
        if cmd.stroke is not None:
            w = max(1, round(cmd.width * self.scale))
            self._blend(
                cmd.stroke,
                _bounds([center], radius + w + 1),
                lambda target, off: pygame.draw.circle(target, cmd.stroke, off(center), radius, w),
            )

    def _ellipse(self, cmd: Ellipse) -> None:
        rx, ry = cmd.rx * self.scale, cmd.ry * self.scale
        w = max(1, round(cmd.width * self.scale))
        layer = pygame.Surface((math.ceil(rx * 2) + w * 2, math.ceil(ry * 2) + w * 2), pygame.SRCALPHA)
        pygame.draw.ellipse(layer, cmd.stroke, pygame.Rect(w, w, rx * 2, ry * 2), w)
        # pygame rotates anticlockwise; canvas angles turn clockwise on screen
        rotated = pygame.transform.rotate(layer, -math.degrees(cmd.angle))
        cx, cy = self._pt(cmd.center)
        self.surface.blit(rotated, rotated.get_rect(center=(round(cx), round(cy))))

    def _arc(self, cmd: Arc) -> None:
        steps = max(2, CURVE_SEGMENTS)
        points = [
            (
                cmd.center[0] + math.cos(cmd.start + (cmd.end - cmd.start) * i / steps) * cmd.radius,
                cmd.center[1] + math.sin(cmd.start + (cmd.end - cmd.start) * i / steps) * cmd.radius,
            )
            for i in range(steps + 1)
        ]
        self._stroke_points(points, cmd.stroke, cmd.width)

    def _bezier(self, cmd: Bezier) -> None:
        points = [
            _cubic(cmd.start, cmd.control1, cmd.control2, cmd.end, i / CURVE_SEGMENTS)
            for i in range(CURVE_SEGMENTS + 1)
        ]
        self._stroke_points(points, cmd.stroke, cmd.width)

    def _polyline(self, cmd: Polyline) -> None:
        if len(cmd.points) >= 2:
            self._stroke_points(list(cmd.points), cmd.stroke, cmd.width)

    def _polygon(self, cmd: Polygon) -> None:
        scaled = [self._pt(p) for p in cmd.points]
        self._blend(
            cmd.fill,
            _bounds(scaled, 1),
            lambda target, off: pygame.draw.polygon(target, cmd.fill, [off(p) for p in scaled]),
        )

    def _rect(self, cmd: Rect) -> None:
        x, y = self._pt((cmd.x, cmd.y))
        rect = pygame.Rect(round(x), round(y), round(cmd.w * self.scale), round(cmd.h * self.scale))
        if rect.width <= 0 or rect.height <= 0:
            return
        if cmd.fill[3] >= 255:
            pygame.draw.rect(self.surface, cmd.fill, rect)
            return
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.fill(cmd.fill)
        self.surface.blit(layer, rect.topleft)

    def _text(self, cmd: Text) -> None:
        font = self.fonts.get(max(1, round(cmd.size * self.scale)))
        surf = font.render(cmd.text, True, cmd.color[:3])
        surf.set_alpha(cmd.color[3])
        x, y = self._pt(cmd.pos)
        self.surface.blit(surf, (round(x - surf.get_width() / 2), round(y)))


def present(
    frame: Frame,
    surface: pygame.Surface | None,
    scale: float = 1.0,
    fonts: FontCache | None = None,
) -> bool:
    """Draw ``frame`` onto ``surface``. A missing surface skips the frame."""
    if surface is None:
        return False
    Rasteriser(surface, scale, fonts).draw(frame)
    return True
