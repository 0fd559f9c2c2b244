"""Deterministic node placement and neighbour topology for the maps."""

from __future__ import annotations

import math
from collections.abc import Sequence

Point = tuple[float, float]


def digest(identifier: str) -> int:
    """Sum of the identifier's character codes."""
    return sum(ord(ch) for ch in identifier)


def position(identifier: str, width: float, height: float, margin: float) -> Point:
    """Stable pixel position for an id on a ``width`` × ``height`` canvas.

    Same id and same canvas size always give the same point, so lines and
    hit-testing line up between redraws. An empty id lands on the inset
    top-left corner.
    """
    s = digest(identifier)
    x = (s % 100) / 100 * (width - margin * 2) + margin
    y = ((s * 13) % 100) / 100 * (height - margin * 2) + margin
    return x, y


def scale_position(
    percent: Point, width: float, height: float, margin: float
) -> Point:
    """Map a stored 0–100 percentage position into the inset canvas."""
    px, py = percent
    x = px / 100 * (width - margin * 2) + margin
    y = py / 100 * (height - margin * 2) + margin
    return x, y


def nearest_neighbours(points: Sequence[Point], count: int = 2) -> list[list[int]]:
    """Indices of the ``count`` nearest other points, for every point.

    Ties keep list order: the first point encountered wins.
    """
    result: list[list[int]] = []
    for i, (ax, ay) in enumerate(points):
        others = [j for j in range(len(points)) if j != i]
        # sorted() is stable, which gives the list-order tie break
        others.sort(key=lambda j: math.hypot(points[j][0] - ax, points[j][1] - ay))
        result.append(others[:count])
    return result


def rotate_point(point: Point, center: Point, angle: float) -> Point:
    """Rotate ``point`` clockwise (screen space) around ``center``."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return center[0] + dx * cos_a - dy * sin_a, center[1] + dx * sin_a + dy * cos_a
