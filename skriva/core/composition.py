from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Set, Tuple

from skriva.core.content import Content, InvalidContent, decompose
from skriva.core.events import CharacterCompleted, Event, PairCompleted, WordCompleted
from skriva.core.geometry import Point
from skriva.core.glyphs import GlyphLibrary
from skriva.core.matching import MatchSettings
from skriva.core.tracker import ProgressTracker, TraceResult

logger = logging.getLogger(__name__)


class PracticeMode(enum.Enum):
    SINGLE_LETTER = "single-letter-loop"
    DUAL_CASE = "dual-case"
    SENTENCE = "sentence"


@dataclass(frozen=True)
class TraceUnit:
    """One character to be traced, in the order it will be traced."""

    character: str
    position: int
    word_index: int
    index_in_word: int


class CompositionEngine:
    """Sequences character trackers for one practice mode.

    Exactly one unit is active at a time. Pointer calls return the events they
    caused, in firing order: a character, then its word, then the pair.
    """

    def __init__(
        self,
        mode: PracticeMode,
        text: str,
        library: GlyphLibrary,
        settings: Optional[MatchSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._mode = mode
        self._content = decompose(text)
        self._units = _build_units(mode, self._content)
        self._library = library
        self._settings = settings or MatchSettings()
        self._clock = clock
        self._cursor = 0
        self._completed: Set[int] = set()
        self._finished = False
        self._tracker = self._make_tracker(0)

    @property
    def mode(self) -> PracticeMode:
        return self._mode

    @property
    def content(self) -> Content:
        return self._content

    @property
    def units(self) -> Tuple[TraceUnit, ...]:
        return self._units

    @property
    def active_tracker(self) -> Optional[ProgressTracker]:
        return None if self._finished else self._tracker

    @property
    def active_unit(self) -> Optional[TraceUnit]:
        return None if self._finished else self._units[self._cursor]

    @property
    def active_position(self) -> Optional[int]:
        """Index of the active character in the content text."""
        unit = self.active_unit
        return unit.position if unit else None

    @property
    def cursor(self) -> Tuple[int, int]:
        """(word index, character index within the word) of the active unit."""
        unit = self._units[self._cursor]
        return unit.word_index, unit.index_in_word

    @property
    def completed(self) -> frozenset:
        return frozenset(self._completed)

    @property
    def is_finished(self) -> bool:
        return self._finished

    def progress_for(self, unit_index: int) -> Tuple[float, ...]:
        """Stroke progress of any unit: done, active or not reached yet."""
        unit = self._units[unit_index]
        strokes = self._library.get_strokes(unit.character)
        if unit.position in self._completed:
            return tuple(1.0 for _ in strokes)
        if not self._finished and unit_index == self._cursor:
            return self._tracker.stroke_progress
        return tuple(0.0 for _ in strokes)

    def reset(self) -> None:
        self._cursor = 0
        self._completed.clear()
        self._finished = False
        self._tracker = self._make_tracker(0)

    def on_pointer_down(self, pos: Point) -> bool:
        if self._finished:
            return False
        return self._tracker.on_pointer_down(pos)

    def on_pointer_up(self) -> None:
        if not self._finished:
            self._tracker.on_pointer_up()

    def on_pointer_move(self, pos: Point) -> List[Event]:
        if self._finished:
            return []
        result = self._tracker.on_pointer_move(pos)
        if result is not TraceResult.CHARACTER_COMPLETED:
            return []
        return self._complete_active()

    def _complete_active(self) -> List[Event]:
        unit = self._units[self._cursor]
        self._completed.add(unit.position)
        events: List[Event] = [
            CharacterCompleted(
                character=unit.character,
                sentence_index=unit.position,
                duration_ms=self._tracker.duration_ms,
            )
        ]

        if self._mode is PracticeMode.SENTENCE:
            word = self._content.words[unit.word_index]
            if all(p in self._completed for p in word.positions):
                logger.debug("Word %d %r completed", word.index, word.text)
                events.append(WordCompleted(word_index=word.index, text=word.text))

        last = self._cursor == len(self._units) - 1
        if self._mode is PracticeMode.DUAL_CASE and last:
            events.append(PairCompleted(upper=self._units[0].character, lower=unit.character))

        if last:
            self._finished = True
        else:
            # The next unit is either the next letter of this word or the
            # first letter of the next word; positions are already ordered.
            self._cursor += 1
            self._tracker = self._make_tracker(self._cursor)
        return events

    def _make_tracker(self, unit_index: int) -> ProgressTracker:
        character = self._units[unit_index].character
        return ProgressTracker(
            character,
            self._library.get_strokes(character),
            settings=self._settings,
            clock=self._clock,
        )


def _build_units(mode: PracticeMode, content: Content) -> Tuple[TraceUnit, ...]:
    if content.is_empty():
        raise InvalidContent("Content has no characters to trace")

    if mode is PracticeMode.SENTENCE:
        return tuple(
            TraceUnit(content.text[pos], pos, word.index, i)
            for word in content.words
            for i, pos in enumerate(word.positions)
        )

    positions = content.traceable_positions
    if len(positions) != 1:
        raise InvalidContent(
            f"{mode.value} practice takes a single character, got {len(positions)}"
        )
    pos = positions[0]
    letter = content.text[pos]
    if mode is PracticeMode.SINGLE_LETTER:
        return (TraceUnit(letter, pos, 0, 0),)

    upper, lower = letter.upper(), letter.lower()
    if upper == lower or len(upper) != 1 or len(lower) != 1:
        raise InvalidContent(f"{letter!r} has no upper/lower case pair")
    return (TraceUnit(upper, 0, 0, 0), TraceUnit(lower, 1, 0, 1))
