from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence, Tuple

from skriva.core.geometry import Point, Stroke
from skriva.core.matching import MatchSettings, accepts_pointer_down, match_progress

logger = logging.getLogger(__name__)


class TraceResult(enum.Enum):
    """Outcome of a single pointer move."""

    IGNORED = "ignored"
    NO_MATCH = "no_match"
    ADVANCED = "advanced"
    STROKE_COMPLETED = "stroke_completed"
    CHARACTER_COMPLETED = "character_completed"


@dataclass
class ActiveCharacterState:
    """Per-stroke tracing progress of the character receiving input."""

    character: str
    stroke_index: int = 0
    stroke_progress: List[float] = field(default_factory=list)
    is_drawing: bool = False
    completed: bool = False


class ProgressTracker:
    """Tracks the tracing of one character, stroke by stroke.

    Strokes are traced strictly in order: the next stroke only accepts input
    after the previous one reached 1 and a fresh pointer-down picked up the
    new stroke near its start.
    """

    def __init__(
        self,
        character: str,
        strokes: Sequence[Stroke],
        settings: Optional[MatchSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not strokes:
            raise ValueError(f"No strokes to trace for {character!r}")
        self._strokes: Tuple[Stroke, ...] = tuple(strokes)
        self._settings = settings or MatchSettings()
        self._clock = clock
        self._state = ActiveCharacterState(character=character)
        self._started_at = clock()
        self._completed_at: Optional[float] = None
        self._last_update: Optional[float] = None
        self.reset()

    @property
    def character(self) -> str:
        return self._state.character

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        return self._strokes

    @property
    def state(self) -> ActiveCharacterState:
        """Snapshot copy; mutating it does not affect the tracker."""
        return replace(self._state, stroke_progress=list(self._state.stroke_progress))

    @property
    def stroke_index(self) -> int:
        return self._state.stroke_index

    @property
    def stroke_progress(self) -> Tuple[float, ...]:
        return tuple(self._state.stroke_progress)

    @property
    def is_drawing(self) -> bool:
        return self._state.is_drawing

    @property
    def is_complete(self) -> bool:
        return self._state.completed

    @property
    def duration_ms(self) -> int:
        """Milliseconds from activation until completion (or until now)."""
        end = self._completed_at if self._completed_at is not None else self._clock()
        return int(round((end - self._started_at) * 1000))

    @property
    def active_stroke(self) -> Optional[Stroke]:
        if self._state.completed:
            return None
        return self._strokes[self._state.stroke_index]

    def reset(self) -> None:
        """Clear all progress, keeping the loaded glyph."""
        self._state.stroke_index = 0
        self._state.stroke_progress = [0.0] * len(self._strokes)
        self._state.is_drawing = False
        self._state.completed = False
        self._started_at = self._clock()
        self._completed_at = None
        self._last_update = None

    def on_pointer_down(self, pos: Point) -> bool:
        """Start or resume drawing if ``pos`` is close enough to the active stroke."""
        if self._state.completed:
            return False
        index = self._state.stroke_index
        progress = self._state.stroke_progress[index]
        accepted = accepts_pointer_down(pos, self._strokes[index], progress, self._settings)
        self._state.is_drawing = accepted
        return accepted

    def on_pointer_up(self) -> None:
        self._state.is_drawing = False

    def on_pointer_move(self, pos: Point) -> TraceResult:
        if self._state.completed or not self._state.is_drawing:
            return TraceResult.IGNORED

        now = self._clock()
        if self._last_update is not None and now - self._last_update < self._settings.min_update_interval:
            return TraceResult.IGNORED

        index = self._state.stroke_index
        progress = self._state.stroke_progress[index]
        new_progress = match_progress(pos, self._strokes[index], progress, self._settings)
        if new_progress is None:
            return TraceResult.NO_MATCH

        self._state.stroke_progress[index] = new_progress
        self._last_update = now
        if new_progress < 1.0:
            return TraceResult.ADVANCED

        self._state.is_drawing = False
        if index < len(self._strokes) - 1:
            self._state.stroke_index = index + 1
            return TraceResult.STROKE_COMPLETED

        self._state.completed = True
        self._completed_at = now
        logger.debug("Character %r traced in %d ms", self.character, self.duration_ms)
        return TraceResult.CHARACTER_COMPLETED
