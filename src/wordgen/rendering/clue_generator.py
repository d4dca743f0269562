from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

from wordgen.core.wordsearch import Puzzle


class ClueGenerator:
    """
    Builds the plain-text legend for a set of puzzle pages: the hidden words
    and their clues, numbered per page in placement order. The answer
    variant adds start cell and direction arrow for each word.
    """

    def __init__(self, puzzles: Sequence[Puzzle]):
        self.puzzles = list(puzzles)
        self.word_clues: List[List[Dict]] = []
        self._generate_clues()

    def _generate_clues(self):
        self.word_clues.clear()
        for puzzle in self.puzzles:
            page = []
            for num, placed in enumerate(puzzle.placements, 1):
                page.append({
                    "num": num,
                    "word": placed.text,
                    "clue": placed.word.clue,
                    "row": placed.row + 1,
                    "col": placed.col + 1,
                    "arrow": placed.direction.arrow,
                })
            self.word_clues.append(page)

    def lines(self, answers: bool = False) -> List[str]:
        out: List[str] = []
        for page_num, page in enumerate(self.word_clues, 1):
            title = f"PAGE {page_num}"
            out.append(title)
            out.append("-" * len(title))
            for item in page:
                line = f"{item['num']}. {item['word']}"
                if item["clue"]:
                    line += f": {item['clue']}"
                if answers:
                    line += f" [{item['row']},{item['col']} {item['arrow']}]"
                out.append(line)
            if not page:
                out.append("(no words placed)")
            out.append("")
        return out

    def generate_text_file(self, filename: str | Path, answers: bool = False) -> Path:
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(self.lines(answers)))
        return path
