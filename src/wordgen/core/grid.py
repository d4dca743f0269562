from __future__ import annotations

import random
import string
from typing import Iterator, List, Optional, Tuple

from wordgen.core.errors import ConfigurationError

EMPTY = " "


class Cell:
    """
    One mutable grid slot.

    Cells are shared by reference: the placement engine collects the Cell
    objects a word would cover and writes through them, so every lookup of the
    same (row, col) sees the change.
    """

    __slots__ = ("letter",)

    def __init__(self, letter: str = EMPTY) -> None:
        self.letter = letter

    @property
    def is_empty(self) -> bool:
        return self.letter == EMPTY

    def __repr__(self) -> str:
        return f"Cell({self.letter!r})"


class Grid:
    """
    Square N×N matrix of Cells, fully allocated from construction on.

      - cell_at(row, col) -> Cell
      - fill_gaps(alphabet, rng) -> number of cells filled
      - rows() -> read-only letters for the renderer
    """

    def __init__(self, size: int = 10) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigurationError(f"Grid size must be a positive integer, got {size!r}")
        self.size = size
        self.cells: List[List[Cell]] = [[Cell() for _ in range(size)] for _ in range(size)]

    # ---------- access ----------

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, row: int, col: int) -> Cell:
        # negative indexes would silently wrap around, so check explicitly
        if not self.contains(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.size}x{self.size} grid")
        return self.cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    # ---------- gap filling ----------

    def fill_gaps(
        self,
        alphabet: str = string.ascii_uppercase,
        rng: Optional[random.Random] = None,
    ) -> int:
        """Give every empty cell a random letter from *alphabet*."""
        if not alphabet:
            raise ConfigurationError("Cannot fill gaps from an empty alphabet")
        if EMPTY in alphabet:
            raise ConfigurationError(f"Alphabet {alphabet!r} contains the empty placeholder {EMPTY!r}")
        rng = rng or random.Random()
        filled = 0
        for cell in self:
            if cell.is_empty:
                cell.letter = rng.choice(alphabet)
                filled += 1
        return filled

    # ---------- read-only output ----------

    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(cell.letter for cell in row) for row in self.cells)

    def empty_count(self) -> int:
        return sum(1 for cell in self if cell.is_empty)

    def is_complete(self) -> bool:
        return self.empty_count() == 0

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows())
