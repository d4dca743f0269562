from __future__ import annotations

import multiprocessing
import random
import string
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from wordgen.core.directions import Difficulty, Direction
from wordgen.core.errors import ConfigurationError
from wordgen.core.grid import EMPTY, Cell, Grid
from wordgen.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Word:
    """A word to hide plus the clue printed in the legend."""

    text: str
    clue: str = ""

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> "Word":
        text = item.get("text") or item.get("word") or ""
        return cls(text=str(text), clue=str(item.get("clue") or ""))


@dataclass(frozen=True)
class PlacedWord:
    """Where a word ended up: start cell and direction of its normalized text."""

    word: Word
    text: str
    row: int
    col: int
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.text)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """(row, col) of every letter, first to last."""
        row, col = self.row, self.col
        for _ in self.text:
            yield row, col
            row += self.direction.dy
            col += self.direction.dx


def normalize(text: str) -> str:
    # grid cells hold single uppercase letters, so phrases collapse to one token
    return "".join(str(text).split()).upper()


class PlacementEngine:
    """
    Greedy, randomized first-fit placer bound to one Grid.

    A word that fits nowhere is dropped without error; compare the input with
    the list returned by place_all() (or read `unplaced`) to see which ones.
    """

    def __init__(
        self,
        grid: Grid,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.grid = grid
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng or random.Random()
        self.placements: List[PlacedWord] = []
        self.unplaced: List[Word] = []

    # ---------- API ----------

    def place_all(self, words: Sequence[Word]) -> List[Word]:
        """Place every word it can, in random order. Returns the placed ones."""
        order = list(words)
        self.rng.shuffle(order)

        placed: List[Word] = []
        for word in order:
            if self.place_one(word):
                placed.append(word)
            else:
                self.unplaced.append(word)
                LOGGER.debug("No room for %r in %dx%d grid", word.text, self.grid.size, self.grid.size)
        return placed

    def place_one(self, word: Word) -> bool:
        text = normalize(word.text)
        if not text:
            return False

        for direction in self.difficulty.placement_types(self.rng):
            start = self.try_place(text, direction)
            if start is not None:
                row, col = start
                self.placements.append(PlacedWord(word, text, row, col, direction))
                LOGGER.debug("Placed %s at (%d, %d) %s", text, row, col, direction.arrow)
                return True
        return False

    # ---------- search ----------

    def try_place(self, text: str, direction: Direction) -> Optional[Tuple[int, int]]:
        """
        Write *text* at the first fitting start position for *direction*.

        Returns the (row, col) start on success, None if no start works.
        Extents are signed: for backwards directions the start is the high
        end of the span.
        """
        size = self.grid.size
        x_length = direction.dx * (len(text) - 1)
        y_length = direction.dy * (len(text) - 1)

        rows = list(range(size))
        cols = list(range(size))
        self.rng.shuffle(rows)
        self.rng.shuffle(cols)

        for row in rows:
            for col in cols:
                if not self.grid.contains(row + y_length, col + x_length):
                    continue
                cells = self.fit_check(row, col, text, direction)
                if cells is not None:
                    for cell, letter in zip(cells, text):
                        cell.letter = letter
                    return row, col
        return None

    def fit_check(self, row: int, col: int, text: str, direction: Direction) -> Optional[List[Cell]]:
        """Cells the word would cover, or None if a different letter is in the way."""
        cells: List[Cell] = []
        for letter in text:
            cell = self.grid.cell_at(row, col)
            if not (cell.is_empty or cell.letter == letter):
                return None
            cells.append(cell)
            row += direction.dy
            col += direction.dx
        return cells


@dataclass
class Puzzle:
    """One finished puzzle instance: the grid and what made it in."""

    grid: Grid
    words: List[Word]
    placements: List[PlacedWord] = field(default_factory=list)
    unplaced: List[Word] = field(default_factory=list)

    @property
    def size(self) -> int:
        return self.grid.size


# --- per-page worker (module level so multiprocessing can pickle it) ---
def _make_page(args: Tuple) -> Puzzle:
    words, grid_size, difficulty, alphabet, page_seed = args
    rng = random.Random(page_seed)
    grid = Grid(grid_size)
    engine = PlacementEngine(grid, difficulty, rng)
    placed = engine.place_all(words)
    grid.fill_gaps(alphabet, rng)
    return Puzzle(grid=grid, words=placed, placements=engine.placements, unplaced=engine.unplaced)


class WordSearch:
    """
    Builds word-search puzzles from a list of Words.

      - WordSearch(words, grid_size=10, difficulty=MEDIUM, number_of_pages=1, seed=None)
      - make_grid() -> Puzzle      # one fresh grid, placed and gap-filled
      - generate(workers=1) -> List[Puzzle]   # one puzzle per page

    Each page gets its own seed drawn from the master generator, so a given
    seed yields the same pages with or without a process pool.
    """

    def __init__(
        self,
        words: Sequence[Word],
        grid_size: int = 10,
        difficulty: Difficulty = Difficulty.MEDIUM,
        number_of_pages: int = 1,
        *,
        seed: Optional[int] = None,
        alphabet: str = string.ascii_uppercase,
    ) -> None:
        if isinstance(grid_size, bool) or not isinstance(grid_size, int) or grid_size <= 0:
            raise ConfigurationError(f"Grid size must be a positive integer, got {grid_size!r}")
        if not isinstance(number_of_pages, int) or number_of_pages < 1:
            raise ConfigurationError(f"Number of pages must be at least 1, got {number_of_pages!r}")
        if not alphabet:
            raise ConfigurationError("Cannot fill gaps from an empty alphabet")
        if EMPTY in alphabet:
            raise ConfigurationError(f"Alphabet {alphabet!r} contains the empty placeholder {EMPTY!r}")

        self.words: List[Word] = list(words)
        self.grid_size = grid_size
        self.difficulty = Difficulty.parse(difficulty)
        self.number_of_pages = number_of_pages
        self.alphabet = alphabet
        self.rng = random.Random(seed)

    def make_grid(self) -> Puzzle:
        return _make_page(self._page_args(self._next_seed()))

    def generate(self, workers: int = 1) -> List[Puzzle]:
        tasks = [self._page_args(self._next_seed()) for _ in range(self.number_of_pages)]
        LOGGER.info(
            "Generating %d page(s): %d words, %dx%d grid, %s",
            len(tasks), len(self.words), self.grid_size, self.grid_size, self.difficulty.value,
        )

        if workers > 1 and len(tasks) > 1:
            try:
                with multiprocessing.Pool(processes=workers) as pool:
                    return pool.map(_make_page, tasks)
            except (ImportError, OSError) as exc:
                LOGGER.warning("Process pool unavailable (%s); generating pages sequentially", exc)
        return [_make_page(args) for args in tasks]

    # ---------- helpers ----------

    def _next_seed(self) -> int:
        return self.rng.randrange(2 ** 32)

    def _page_args(self, page_seed: int) -> Tuple:
        return (self.words, self.grid_size, self.difficulty, self.alphabet, page_seed)
