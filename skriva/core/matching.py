"""Pointer-to-path matching.

Pure functions that decide whether a pointer position (already in glyph
space) moves the progress of a stroke forward. The matching is forgiving:
a child's trace only has to stay roughly on the path.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from skriva.core.geometry import Point, Stroke, distance


@dataclass(frozen=True)
class MatchSettings:
    """Tunable matching constants, in glyph units and seconds."""

    acceptance_radius: float = 120.0
    start_radius_factor: float = 2.0
    look_ahead: int = 5
    # Fixed per call, independent of how densely a stroke is sampled.
    max_advance: int = 2
    resume_window: int = 15
    min_update_interval: float = 0.05

    @property
    def start_radius(self) -> float:
        return self.acceptance_radius * self.start_radius_factor


def current_index(stroke: Stroke, progress: float) -> int:
    """Index of the next point to be traced for a given progress."""
    return int(math.floor(len(stroke) * progress))


def match_progress(
    pos: Point,
    stroke: Stroke,
    progress: float,
    settings: MatchSettings,
) -> Optional[float]:
    """Return the advanced progress for ``pos``, or None when it would not move.

    Only the next ``look_ahead`` points are candidates, the nearest one within
    the acceptance radius wins, and a single call never moves more than
    ``max_advance`` points forward.
    """
    n = len(stroke)
    start = current_index(stroke, progress)
    best_index = -1
    best_distance = math.inf
    for j in range(start, min(start + settings.look_ahead, n)):
        d = distance(pos, stroke.points[j])
        if d < settings.acceptance_radius and d < best_distance:
            best_distance = d
            best_index = j
    if best_index < 0:
        return None

    advance = min(best_index - start, settings.max_advance)
    new_progress = min((start + advance + 1) / n, 1.0)
    # floor() can leave the index one point behind; that is no change.
    if new_progress <= progress:
        return None
    return new_progress


def accepts_pointer_down(
    pos: Point,
    stroke: Stroke,
    progress: float,
    settings: MatchSettings,
) -> bool:
    """Whether a pointer-down at ``pos`` may start (or resume) tracing ``stroke``.

    A fresh stroke must be picked up near its first point; a partly traced
    stroke is resumed near where it was left off.
    """
    if progress <= 0.0:
        return distance(pos, stroke.start) < settings.start_radius
    if progress >= 1.0:
        return False
    start = current_index(stroke, progress)
    window = stroke.points[start:start + settings.resume_window]
    return any(distance(pos, p) < settings.acceptance_radius for p in window)
