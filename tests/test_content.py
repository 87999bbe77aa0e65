"""Tests for skriva.core.content – word decomposition and input filtering."""

from __future__ import annotations

from skriva.core.content import Word, decompose, sanitize_sentence


class TestDecompose:
    def test_two_words(self):
        content = decompose("Hej du")
        assert [w.text for w in content.words] == ["Hej", "du"]
        assert content.words[0] == Word(index=0, positions=(0, 1, 2), text="Hej")
        assert content.words[1] == Word(index=1, positions=(4, 5), text="du")

    def test_traceable_positions_skip_whitespace(self):
        assert decompose("Hej du").traceable_positions == [0, 1, 2, 4, 5]

    def test_collapses_runs_of_whitespace(self):
        content = decompose("  a \t b  ")
        assert [w.positions for w in content.words] == [(2,), (6,)]

    def test_non_breaking_space_separates_words(self):
        content = decompose("ja\u00a0nej")
        assert [w.text for w in content.words] == ["ja", "nej"]

    def test_punctuation_belongs_to_word(self):
        assert [w.text for w in decompose("Hej, du!").words] == ["Hej,", "du!"]

    def test_empty(self):
        assert decompose("").is_empty()
        assert decompose("   \n").is_empty()

    def test_single_letter_is_one_word(self):
        content = decompose("B")
        assert len(content.words) == 1
        assert len(content.words[0]) == 1


class TestSanitizeSentence:
    def test_keeps_swedish_letters(self):
        assert sanitize_sentence("Åsa äter öl") == "Åsa äter öl"

    def test_keeps_basic_punctuation(self):
        assert sanitize_sentence("Hej, du! Vad? Ja. A-B") == "Hej, du! Vad? Ja. A-B"

    def test_drops_other_symbols(self):
        assert sanitize_sentence("Hej 😀 #du@") == "Hej  du"

    def test_trims(self):
        assert sanitize_sentence("   hej   ") == "hej"

    def test_only_symbols_becomes_empty(self):
        assert sanitize_sentence("#$%") == ""
