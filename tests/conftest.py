"""Shared fixtures: a controllable clock and a helper that traces strokes."""

from __future__ import annotations

import pytest

from skriva.core.glyphs import GlyphLibrary

STEP = 0.06  # just over the 50 ms update interval


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = STEP) -> None:
        self.now += seconds


def trace_stroke(target, stroke, clock: FakeClock) -> None:
    """Put the pointer down on the stroke start and follow every point.

    ``target`` is anything with on_pointer_down/move/up (tracker, engine or
    controller).
    """
    assert target.on_pointer_down(stroke.start)
    for point in stroke.points:
        clock.advance()
        target.on_pointer_move(point)
    for _ in range(3):
        clock.advance()
        target.on_pointer_move(stroke.end)
    target.on_pointer_up()


def trace_character(target, strokes, clock: FakeClock) -> None:
    for stroke in strokes:
        trace_stroke(target, stroke, clock)


@pytest.fixture(scope="session")
def library() -> GlyphLibrary:
    return GlyphLibrary()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
