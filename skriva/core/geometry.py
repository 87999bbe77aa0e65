"""Stroke geometry: points, strokes and the primitives strokes are built from.

All coordinates live in the canonical 600x600 glyph space (origin top-left,
y grows downward), so every character can be compared and drawn uniformly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Tuple

GLYPH_SIZE = 600.0


class Point(NamedTuple):
    x: float
    y: float


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


@dataclass(frozen=True)
class Stroke:
    """One continuous pen path with no lifts."""

    points: Tuple[Point, ...]

    def __post_init__(self) -> None:
        pts = tuple(Point(float(x), float(y)) for x, y in self.points)
        if len(pts) < 2:
            raise ValueError(f"A stroke needs at least 2 points, got {len(pts)}")
        object.__setattr__(self, "points", pts)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def length(self) -> float:
        """Total polyline length."""
        return sum(distance(a, b) for a, b in zip(self.points, self.points[1:]))

    def max_spacing(self) -> float:
        """Largest gap between two consecutive points."""
        return max(distance(a, b) for a, b in zip(self.points, self.points[1:]))

    @classmethod
    def join(cls, segments: Iterable[Iterable[Point]]) -> "Stroke":
        """Concatenate sampled segments into one continuous stroke."""
        points: list[Point] = []
        for segment in segments:
            points.extend(segment)
        return cls(tuple(points))


def _check_samples(points: int) -> None:
    if points < 2:
        raise ValueError(f"Need at least 2 samples per primitive, got {points}")


def line(x1: float, y1: float, x2: float, y2: float, points: int = 20) -> Tuple[Point, ...]:
    """Sample a straight line from (x1, y1) to (x2, y2)."""
    _check_samples(points)
    out = []
    for i in range(points):
        t = i / (points - 1)
        out.append(Point(x1 + (x2 - x1) * t, y1 + (y2 - y1) * t))
    return tuple(out)


def curve(
    x1: float,
    y1: float,
    cx: float,
    cy: float,
    x2: float,
    y2: float,
    points: int = 25,
) -> Tuple[Point, ...]:
    """Sample a quadratic Bezier from (x1, y1) to (x2, y2) with control (cx, cy)."""
    _check_samples(points)
    out = []
    for i in range(points):
        t = i / (points - 1)
        u = 1.0 - t
        out.append(
            Point(
                u * u * x1 + 2 * u * t * cx + t * t * x2,
                u * u * y1 + 2 * u * t * cy + t * t * y2,
            )
        )
    return tuple(out)


def arc(
    cx: float,
    cy: float,
    radius: float,
    start_deg: float,
    end_deg: float,
    points: int = 30,
) -> Tuple[Point, ...]:
    """Sample a circular arc.

    Angles are in degrees in screen orientation: 0 points right, 90 points
    down, so sweeping from a smaller to a larger angle runs clockwise on
    screen. A full circle is written as ``start`` to ``start +/- 360``.
    """
    _check_samples(points)
    out = []
    for i in range(points):
        t = i / (points - 1)
        angle = math.radians(start_deg + (end_deg - start_deg) * t)
        out.append(Point(cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return tuple(out)
