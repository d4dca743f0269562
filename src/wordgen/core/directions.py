from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional, Tuple

from wordgen.core.errors import ConfigurationError


class Direction(Enum):
    """
    The eight ways a word can run through the grid.

    Values are (x, y) steps: x moves across columns, y moves down rows.
    """

    LEFT_RIGHT = (1, 0)                 # →
    RIGHT_LEFT = (-1, 0)                # ←
    UP_DOWN = (0, 1)                    # ↓
    DOWN_UP = (0, -1)                   # ↑
    TOP_LEFT_BOTTOM_RIGHT = (1, 1)      # ↘
    TOP_RIGHT_BOTTOM_LEFT = (-1, 1)     # ↙
    BOTTOM_LEFT_TOP_RIGHT = (1, -1)     # ↗
    BOTTOM_RIGHT_TOP_LEFT = (-1, -1)    # ↖

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def arrow(self) -> str:
        return _ARROWS[self]


_ARROWS = {
    Direction.LEFT_RIGHT: "→",
    Direction.RIGHT_LEFT: "←",
    Direction.UP_DOWN: "↓",
    Direction.DOWN_UP: "↑",
    Direction.TOP_LEFT_BOTTOM_RIGHT: "↘",
    Direction.TOP_RIGHT_BOTTOM_LEFT: "↙",
    Direction.BOTTOM_LEFT_TOP_RIGHT: "↗",
    Direction.BOTTOM_RIGHT_TOP_LEFT: "↖",
}


class Difficulty(str, Enum):
    """Which directions a puzzle may use. Only the trial order is random."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def directions(self) -> Tuple[Direction, ...]:
        return _ELIGIBLE[self]

    def placement_types(self, rng: Optional[random.Random] = None) -> List[Direction]:
        """Eligible directions in a freshly shuffled order."""
        rng = rng or random.Random()
        types = list(self.directions)
        rng.shuffle(types)
        return types

    @classmethod
    def parse(cls, name: "str | Difficulty") -> "Difficulty":
        if isinstance(name, Difficulty):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ConfigurationError(f"Unknown difficulty '{name}' (expected one of: {valid})") from None


_ELIGIBLE = {
    Difficulty.EASY: (Direction.LEFT_RIGHT, Direction.UP_DOWN),
    Difficulty.MEDIUM: (
        Direction.LEFT_RIGHT, Direction.RIGHT_LEFT,
        Direction.UP_DOWN, Direction.DOWN_UP,
    ),
    Difficulty.HARD: tuple(Direction),
}
