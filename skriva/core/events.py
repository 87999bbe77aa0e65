"""Completion events handed to audio, logging and UI collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CharacterCompleted:
    character: str
    sentence_index: int
    duration_ms: int


@dataclass(frozen=True)
class WordCompleted:
    word_index: int
    text: str


@dataclass(frozen=True)
class PairCompleted:
    """Both cases of a letter traced in dual-case practice."""

    upper: str
    lower: str


@dataclass(frozen=True)
class SessionCompleted:
    total_duration_ms: int
    mode: str


Event = Union[CharacterCompleted, WordCompleted, PairCompleted, SessionCompleted]
