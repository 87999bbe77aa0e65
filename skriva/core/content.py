"""Practice content: the text being traced and its split into words."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

_ALLOWED = re.compile(r"[a-zA-ZåäöÅÄÖ0-9\s.,!?\-]")


@dataclass(frozen=True)
class Word:
    """Traceable character positions (indices into the content text) of one word."""

    index: int
    positions: Tuple[int, ...]
    text: str

    def __len__(self) -> int:
        return len(self.positions)


@dataclass(frozen=True)
class Content:
    text: str
    words: Tuple[Word, ...]

    @property
    def traceable_positions(self) -> List[int]:
        return [pos for word in self.words for pos in word.positions]

    def is_empty(self) -> bool:
        return not self.words


def decompose(text: str) -> Content:
    """Split ``text`` into words on any whitespace, keeping original positions."""
    words: List[Word] = []
    positions: List[int] = []
    for i, char in enumerate(text):
        if char.isspace():
            if positions:
                words.append(_word(len(words), positions, text))
                positions = []
        else:
            positions.append(i)
    if positions:
        words.append(_word(len(words), positions, text))
    return Content(text=text, words=tuple(words))


def _word(index: int, positions: List[int], text: str) -> Word:
    return Word(
        index=index,
        positions=tuple(positions),
        text="".join(text[p] for p in positions),
    )


def sanitize_sentence(text: str) -> str:
    """Keep letters, digits, whitespace and basic punctuation of free-text input."""
    return "".join(c for c in text if _ALLOWED.match(c)).strip()


class InvalidContent(ValueError):
    """Raised when practice content has nothing that can be traced."""
