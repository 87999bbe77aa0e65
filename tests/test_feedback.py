"""Tests for skriva.core.feedback – spoken phrases for completion events."""

from __future__ import annotations

import random

from skriva.core.events import CharacterCompleted, PairCompleted, SessionCompleted, WordCompleted
from skriva.core.feedback import (
    CELEBRATION_PHRASES,
    CHEER_PHRASES,
    celebration_phrase,
    cheer_phrase,
    speech_for,
)


class TestPhrases:
    def test_cheer_from_list(self):
        rng = random.Random(1)
        for _ in range(20):
            assert cheer_phrase(rng) in CHEER_PHRASES

    def test_seeded_is_repeatable(self):
        assert cheer_phrase(random.Random(3)) == cheer_phrase(random.Random(3))

    def test_celebration_from_list(self):
        assert celebration_phrase(random.Random(2)) in CELEBRATION_PHRASES

    def test_unseeded(self):
        assert cheer_phrase() in CHEER_PHRASES


class TestSpeechFor:
    def test_character_gets_cheer(self):
        text = speech_for(CharacterCompleted("A", 0, 900), random.Random(0))
        assert text in CHEER_PHRASES

    def test_word_is_read_back(self):
        assert speech_for(WordCompleted(0, "Hej")) == "Hej"

    def test_pair(self):
        assert speech_for(PairCompleted("Ö", "ö")) == "Ö ö"

    def test_session_gets_celebration(self):
        assert speech_for(SessionCompleted(5000, "sentence"), random.Random(0)) in CELEBRATION_PHRASES

    def test_unknown_is_silent(self):
        assert speech_for(object()) is None
