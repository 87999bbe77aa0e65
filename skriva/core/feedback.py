"""Spoken feedback text for the audio collaborator."""

from __future__ import annotations

import random
from typing import Optional

from skriva.core.events import (
    CharacterCompleted,
    Event,
    PairCompleted,
    SessionCompleted,
    WordCompleted,
)

CHEER_PHRASES = (
    "Bra jobbat!",
    "Fantastiskt!",
    "Perfekt!",
    "Underbart!",
    "Jättebra!",
)

CELEBRATION_PHRASES = (
    "Fantastiskt! Du har skrivit klart hela meningen!",
    "Wow, vilket jobb! Du klarade allt!",
)


def cheer_phrase(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(CHEER_PHRASES)


def celebration_phrase(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(CELEBRATION_PHRASES)


def speech_for(event: Event, rng: Optional[random.Random] = None) -> Optional[str]:
    """Text to speak for ``event``, or None when it should stay silent.

    A finished character gets a short cheer, a finished word is read back,
    and the end of the session gets a longer celebration.
    """
    if isinstance(event, CharacterCompleted):
        return cheer_phrase(rng)
    if isinstance(event, WordCompleted):
        return event.text
    if isinstance(event, SessionCompleted):
        return celebration_phrase(rng)
    if isinstance(event, PairCompleted):
        return f"{event.upper} {event.lower}"
    return None
