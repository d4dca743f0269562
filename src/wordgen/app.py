# src/wordgen/app.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from wordgen.core.directions import Difficulty
from wordgen.core.errors import ConfigurationError, WordListError
from wordgen.core.wordlist import load_words
from wordgen.core.wordsearch import Puzzle, WordSearch
from wordgen.rendering.clue_generator import ClueGenerator
from wordgen.rendering.wordsearch_renderer import WordSearchRenderer, render_pdf
from wordgen.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULTS: Dict[str, Any] = {
    "words_file": None,
    "grid_size": 10,
    "difficulty": "medium",
    "pages": 10,
    "highlight_style": "fill",
    "stroke_width": 5,
    "seed": None,
}


class WordGenApp:
    """
    Application orchestrator:
      - Reads config (data/config.json)
      - Resolves paths (data/, output/)
      - Loads the word list
      - Generates one puzzle per page
      - Renders PNG pages, a multi-page PDF and the clue legend
    """

    # -------------------- Infra --------------------
    def __init__(self, project_root: Optional[Path] = None) -> None:
        self.project_root = Path(project_root) if project_root else self._detect_project_root()
        self.data_dir = self.project_root / "data"
        self.output_dir = self.project_root / "output"
        self.config_path = self.data_dir / "config.json"
        self.config: Dict = self._load_config() or {}

    def _detect_project_root(self) -> Path:
        here = Path(__file__).resolve()
        for p in [here, *here.parents]:
            if (p / "data").exists():
                return p
        return Path.cwd()

    def _as_path(self, rel: str | Path) -> Path:
        p = Path(rel)
        return p if p.is_absolute() else (self.project_root / p)

    # -------------------- Config --------------------
    def _load_config(self) -> Optional[Dict]:
        if not self.config_path.exists():
            return None
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                cfg = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            LOGGER.warning("Ignoring unreadable config %s: %s", self.config_path, exc)
            return None
        if not isinstance(cfg, dict):
            LOGGER.warning("Ignoring config %s: expected a JSON object", self.config_path)
            return None
        return cfg

    def settings(self, **overrides: Any) -> Dict[str, Any]:
        """Built-in defaults < config.json 'wordsearch' section < explicit overrides (None = unset)."""
        merged = dict(DEFAULTS)
        ws_cfg = self.config.get("wordsearch") or {}
        if isinstance(ws_cfg, dict):
            merged.update({k: v for k, v in ws_cfg.items() if k in DEFAULTS and v is not None})
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return merged

    @staticmethod
    def _as_int(settings: Dict[str, Any], key: str) -> int:
        value = settings[key]
        if isinstance(value, bool):
            raise ConfigurationError(f"wordsearch.{key} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ConfigurationError(f"wordsearch.{key} must be an integer, got {value!r}") from None

    # ======================================================================
    #                            WORDSEARCH
    # ======================================================================
    def build(
        self,
        *,
        words_file: Optional[str] = None,
        grid_size: Optional[int] = None,
        difficulty: Optional[str] = None,
        pages: Optional[int] = None,
        seed: Optional[int] = None,
        workers: int = 1,
    ) -> List[Puzzle]:
        s = self.settings(
            words_file=words_file, grid_size=grid_size, difficulty=difficulty,
            pages=pages, seed=seed,
        )
        if not s["words_file"]:
            raise ConfigurationError("No word file given (use --words or set wordsearch.words_file in data/config.json)")

        words = load_words(self._as_path(s["words_file"]))
        if not words:
            raise WordListError(f"Word file '{s['words_file']}' has no usable words")
        LOGGER.info("Loaded %d words from %s", len(words), s["words_file"])

        ws = WordSearch(
            words,
            grid_size=self._as_int(s, "grid_size"),
            difficulty=Difficulty.parse(s["difficulty"]),
            number_of_pages=self._as_int(s, "pages"),
            seed=s["seed"],
        )
        puzzles = ws.generate(workers=workers)

        for i, puzzle in enumerate(puzzles, 1):
            LOGGER.info("Page %d: placed %d/%d words", i, len(puzzle.words), len(words))
            if puzzle.unplaced:
                LOGGER.info("Page %d: left out %s", i, ", ".join(w.text for w in puzzle.unplaced))
        return puzzles

    def render(
        self,
        puzzles: List[Puzzle],
        *,
        output_basename: str,
        highlight_style: Optional[str] = None,
        stroke_width: Optional[int] = None,
    ) -> List[Path]:
        s = self.settings(highlight_style=highlight_style, stroke_width=stroke_width)
        options = {
            "cell_size": 40,
            "padding": 25,
            "highlight_style": s["highlight_style"],
            "stroke_width": self._as_int(s, "stroke_width"),
        }

        self.output_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for i, puzzle in enumerate(puzzles, 1):
            renderer = WordSearchRenderer(puzzle, **options)
            written.append(renderer.generate_image(self.output_dir / f"{output_basename}_{i:02d}.png"))
            written.append(renderer.generate_image(self.output_dir / f"{output_basename}_{i:02d}_answers.png", answers=True))

        written.append(render_pdf(puzzles, self.output_dir / f"{output_basename}.pdf", **options))
        written.append(render_pdf(puzzles, self.output_dir / f"{output_basename}_answers.pdf", answers=True, **options))

        clues = ClueGenerator(puzzles)
        written.append(clues.generate_text_file(self.output_dir / f"{output_basename}_clues.txt"))
        written.append(clues.generate_text_file(self.output_dir / f"{output_basename}_answers.txt", answers=True))
        return written

    def run(self, *, output_basename: str = "wordsearch", **options: Any) -> List[Path]:
        render_keys = ("highlight_style", "stroke_width")
        render_opts = {k: options.pop(k) for k in render_keys if k in options}
        puzzles = self.build(**options)
        return self.render(puzzles, output_basename=output_basename, **render_opts)
