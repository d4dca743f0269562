"""Tests for core/wordlist.py."""

import json

import pytest

from wordgen.core.errors import WordListError
from wordgen.core.wordlist import load_words
from wordgen.core.wordsearch import Word


def test_loads_text_and_clue(words_file):
    words = load_words(words_file)
    assert words[0] == Word("CAT", "Purrs on the sofa")
    assert Word("New York", "Not an animal, but a city") in words


def test_skips_blanks_and_duplicates(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps([
        {"word": "Sea Horse", "clue": "first"},
        {"text": "seahorse", "clue": "dupe"},
        {"text": "   "},
        "not a dict",
        {"clue": "no text"},
        {"text": "Eel"},
    ]), encoding="utf-8")
    assert load_words(path) == [Word("Sea Horse", "first"), Word("Eel", "")]


def test_missing_file(tmp_path):
    with pytest.raises(WordListError, match="Could not read"):
        load_words(tmp_path / "nope.json")


def test_bad_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(WordListError):
        load_words(path)


def test_not_a_list(tmp_path):
    path = tmp_path / "obj.json"
    path.write_text('{"text": "CAT"}', encoding="utf-8")
    with pytest.raises(WordListError, match="JSON list"):
        load_words(path)
