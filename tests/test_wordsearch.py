"""Tests for the WordSearch page generator."""

import string

import pytest

from wordgen.core.directions import Difficulty
from wordgen.core.errors import ConfigurationError
from wordgen.core.wordsearch import PlacedWord, Puzzle, Word, WordSearch


class TestWordSearch:
    def test_make_grid_returns_finished_puzzle(self, animal_words):
        puzzle = WordSearch(animal_words, grid_size=10, seed=3).make_grid()
        assert isinstance(puzzle, Puzzle)
        assert puzzle.size == 10
        assert puzzle.grid.is_complete()
        assert all(ch in string.ascii_uppercase for row in puzzle.grid.rows() for ch in row)
        assert puzzle.words == [p.word for p in puzzle.placements]

    def test_generate_one_puzzle_per_page(self, animal_words):
        puzzles = WordSearch(animal_words, grid_size=9, number_of_pages=4, seed=8).generate()
        assert len(puzzles) == 4
        assert len({id(p.grid) for p in puzzles}) == 4

    def test_same_seed_same_pages(self, animal_words):
        a = WordSearch(animal_words, grid_size=9, difficulty=Difficulty.HARD, number_of_pages=3, seed=42).generate()
        b = WordSearch(animal_words, grid_size=9, difficulty=Difficulty.HARD, number_of_pages=3, seed=42).generate()
        assert [p.grid.rows() for p in a] == [p.grid.rows() for p in b]
        assert [p.words for p in a] == [p.words for p in b]

    def test_pages_differ(self, animal_words):
        puzzles = WordSearch(animal_words, grid_size=10, number_of_pages=3, seed=5).generate()
        assert len({p.grid.rows() for p in puzzles}) == 3

    def test_parallel_matches_sequential(self, animal_words):
        seq = WordSearch(animal_words, grid_size=8, number_of_pages=3, seed=13).generate()
        par = WordSearch(animal_words, grid_size=8, number_of_pages=3, seed=13).generate(workers=2)
        assert [p.grid.rows() for p in seq] == [p.grid.rows() for p in par]
        assert [p.words for p in seq] == [p.words for p in par]

    def test_unplaced_words_are_reported(self):
        words = [Word("HAMSTER"), Word("CAT")]
        puzzle = WordSearch(words, grid_size=3, seed=1).make_grid()
        assert puzzle.words == [Word("CAT")]
        assert puzzle.unplaced == [Word("HAMSTER")]

    def test_custom_alphabet(self):
        puzzle = WordSearch([Word("AB")], grid_size=4, seed=0, alphabet="Z").make_grid()
        letters = [ch for row in puzzle.grid.rows() for ch in row]
        assert letters.count("Z") == 14

    @pytest.mark.parametrize("kwargs", [
        {"grid_size": 0},
        {"grid_size": -1},
        {"number_of_pages": 0},
        {"alphabet": ""},
        {"alphabet": "A B"},
        {"difficulty": "nightmare"},
    ])
    def test_bad_configuration(self, animal_words, kwargs):
        with pytest.raises(ConfigurationError):
            WordSearch(animal_words, **kwargs)


class TestWord:
    def test_from_dict_accepts_text_or_word(self):
        assert Word.from_dict({"text": "cat", "clue": "meow"}) == Word("cat", "meow")
        assert Word.from_dict({"word": "dog"}) == Word("dog", "")

    def test_placed_word_cells(self):
        from wordgen.core.directions import Direction
        placed = PlacedWord(Word("CAT"), "CAT", 2, 2, Direction.BOTTOM_RIGHT_TOP_LEFT)
        assert list(placed.cells()) == [(2, 2), (1, 1), (0, 0)]
        assert placed.length == 3
