from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from skriva.core.composition import CompositionEngine, PracticeMode
from skriva.core.content import Content, InvalidContent, decompose
from skriva.core.events import Event, SessionCompleted
from skriva.core.geometry import Point
from skriva.core.glyphs import GlyphLibrary
from skriva.core.matching import MatchSettings, current_index

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]

__all__ = [
    "InvalidContent",
    "Listener",
    "PracticeMode",
    "SessionController",
    "SessionState",
    "Snapshot",
]


class SessionState(enum.Enum):
    IDLE = "idle"
    ACTIVE = "active"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Snapshot:
    """Read-only tracing state for the renderer.

    ``target`` is the point the pointer should head for next and ``heading``
    the point after it, which together give the direction arrow.
    """

    state: SessionState
    mode: Optional[PracticeMode]
    active_character_index: Optional[int]
    active_character: Optional[str]
    active_stroke_index: Optional[int]
    stroke_progress: Tuple[float, ...]
    is_drawing: bool
    completed: frozenset
    target: Optional[Point] = None
    heading: Optional[Point] = None


class SessionController:
    """Entry point for one practice widget.

    Accepts pointer input in glyph-local coordinates, drives the composition
    engine and notifies subscribers of completion events synchronously, in
    the order they happen.
    """

    def __init__(
        self,
        library: Optional[GlyphLibrary] = None,
        settings: Optional[MatchSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._library = library or GlyphLibrary()
        self._settings = settings or MatchSettings()
        self._clock = clock
        self._listeners: List[Listener] = []
        self._engine: Optional[CompositionEngine] = None
        self._state = SessionState.IDLE
        self._started_at = 0.0
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def library(self) -> GlyphLibrary:
        return self._library

    @property
    def mode(self) -> Optional[PracticeMode]:
        return self._engine.mode if self._engine else None

    @property
    def content(self) -> Optional[Content]:
        return self._engine.content if self._engine else None

    @property
    def engine(self) -> Optional[CompositionEngine]:
        return self._engine

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for completion events; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self, mode: Union[PracticeMode, str], content: str) -> None:
        """Load new content, discarding any session in progress.

        Raises InvalidContent (leaving the current session untouched) when
        ``content`` holds nothing to trace.
        """
        mode = PracticeMode(mode)
        if decompose(content).is_empty():
            raise InvalidContent("Content has no characters to trace")
        engine = CompositionEngine(
            mode, content, self._library, settings=self._settings, clock=self._clock
        )
        self._engine = engine
        self._generation += 1
        self._state = SessionState.ACTIVE
        self._started_at = self._clock()
        logger.info("Started %s practice of %r", mode.value, content)

    def reset(self) -> None:
        """Return to the first stroke of the loaded content, clearing all progress."""
        if self._engine is None:
            return
        self._engine.reset()
        self._generation += 1
        self._state = SessionState.ACTIVE
        self._started_at = self._clock()
        logger.info("Reset %s practice", self._engine.mode.value)

    def on_pointer_down(self, pos: Point) -> bool:
        if self._state is not SessionState.ACTIVE:
            return False
        return self._engine.on_pointer_down(Point(*pos))

    def on_pointer_up(self) -> None:
        if self._state is SessionState.ACTIVE:
            self._engine.on_pointer_up()

    def on_pointer_move(self, pos: Point) -> None:
        if self._state is not SessionState.ACTIVE:
            return
        engine = self._engine
        generation = self._generation
        events = engine.on_pointer_move(Point(*pos))
        if not events:
            return
        if engine.is_finished:
            self._state = SessionState.COMPLETE
            total_ms = int(round((self._clock() - self._started_at) * 1000))
            events.append(SessionCompleted(total_duration_ms=total_ms, mode=engine.mode.value))
            logger.info("Completed %s practice in %d ms", engine.mode.value, total_ms)
        for event in events:
            # A reset or restart from a listener abandons this batch.
            if self._generation != generation:
                break
            self._emit(event)

    def get_snapshot(self) -> Snapshot:
        engine = self._engine
        if engine is None:
            return Snapshot(
                state=self._state,
                mode=None,
                active_character_index=None,
                active_character=None,
                active_stroke_index=None,
                stroke_progress=(),
                is_drawing=False,
                completed=frozenset(),
            )
        tracker = engine.active_tracker
        unit = engine.active_unit
        if tracker is None or unit is None:
            return Snapshot(
                state=self._state,
                mode=engine.mode,
                active_character_index=None,
                active_character=None,
                active_stroke_index=None,
                stroke_progress=(),
                is_drawing=False,
                completed=engine.completed,
            )

        target = heading = None
        stroke = tracker.active_stroke
        if stroke is not None:
            index = min(current_index(stroke, tracker.stroke_progress[tracker.stroke_index]), len(stroke) - 1)
            target = stroke.points[index]
            heading = stroke.points[min(index + 1, len(stroke) - 1)]
        return Snapshot(
            state=self._state,
            mode=engine.mode,
            active_character_index=unit.position,
            active_character=unit.character,
            active_stroke_index=tracker.stroke_index,
            stroke_progress=tracker.stroke_progress,
            is_drawing=tracker.is_drawing,
            completed=engine.completed,
            target=target,
            heading=heading,
        )

    def _emit(self, event: Event) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %r", listener, event)
