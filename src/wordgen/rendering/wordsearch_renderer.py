from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from wordgen.core.wordsearch import Puzzle
from wordgen.utils.logger import get_logger

LOGGER = get_logger(__name__)


class WordSearchRenderer:
    """
    Word-search renderer:
      - Puzzle: grid + letters + legend of hidden words with clues
      - Answers: highlighted cells (fill) OR lines (stroke) over placed words
    """

    BACKGROUND = (255, 255, 255)
    GRID = (30, 30, 30)
    TEXT = (0, 0, 0)
    HIGHLIGHT_FILL = (220, 240, 255)   # light blue
    HIGHLIGHT_STROKE = (200, 0, 0)     # red

    def __init__(
        self,
        puzzle: Puzzle,
        *,
        cell_size: int = 40,
        padding: int = 25,
        highlight_style: str = "fill",   # "fill" or "stroke"
        stroke_width: int = 5,
        font_path: str | None = None,
    ) -> None:
        self.puzzle = puzzle
        self.n = int(puzzle.size)
        self.cell = int(cell_size)
        self.pad = int(padding)
        self.style = str(highlight_style or "fill").lower()
        self.stroke_width = int(stroke_width)
        self.font = self._load_font(font_path, int(self.cell * 0.7))
        self.legend_font = self._load_font(font_path, max(10, int(self.cell * 0.4)))
        self.line_height = int(self.cell * 0.6)

    @staticmethod
    def _load_font(font_path: str | None, size: int):
        # monospaced font; fall back to PIL's bundled default
        for candidate in (font_path, "DejaVuSansMono.ttf"):
            if not candidate:
                continue
            try:
                return ImageFont.truetype(candidate, size=size)
            except OSError:
                LOGGER.debug("Font %s not available", candidate)
        return ImageFont.load_default(size=size)

    # ---------- API ----------

    def render(self, answers: bool = False) -> Image.Image:
        grid_px = self.n * self.cell
        W = self.pad * 2 + grid_px
        H = self.pad * 3 + grid_px + self._legend_height(answers)
        img = Image.new("RGB", (W, H), self.BACKGROUND)
        draw = ImageDraw.Draw(img)

        # with FILL, highlights go first so they don't cover the letters
        if answers and self.style == "fill":
            self._draw_answers_fill(draw)

        self._draw_grid(draw)
        self._draw_letters(draw)

        if answers and self.style != "fill":
            self._draw_answers_stroke(draw)

        self._draw_legend(draw, top=self.pad * 2 + grid_px, answers=answers)
        return img

    def generate_image(self, filename: str | Path, answers: bool = False) -> Path:
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render(answers=answers).save(path, format="PNG")
        return path

    # ---------- basic drawing ----------

    def _draw_grid(self, draw: ImageDraw.ImageDraw) -> None:
        end = self.pad + self.n * self.cell
        draw.rectangle([self.pad, self.pad, end, end], outline=self.GRID, width=1)
        for i in range(1, self.n):
            p = self.pad + i * self.cell
            draw.line([self.pad, p, end, p], fill=self.GRID, width=1)
            draw.line([p, self.pad, p, end], fill=self.GRID, width=1)

    def _draw_letters(self, draw: ImageDraw.ImageDraw) -> None:
        for r, row in enumerate(self.puzzle.grid.rows()):
            for c, ch in enumerate(row):
                if not ch.strip():
                    continue
                cx = self.pad + c * self.cell + self.cell / 2
                cy = self.pad + r * self.cell + self.cell / 2
                # center on the glyph bbox, compensating its (x0, y0) origin offset
                bx0, by0, bx1, by1 = draw.textbbox((0, 0), ch, font=self.font)
                x = cx - (bx1 - bx0) / 2 - bx0
                y = cy - (by1 - by0) / 2 - by0
                draw.text((x, y), ch, fill=self.TEXT, font=self.font)

    def _legend_lines(self, answers: bool) -> List[str]:
        lines = []
        for i, placed in enumerate(self.puzzle.placements, 1):
            line = f"{i}. {placed.text}"
            if placed.word.clue:
                line += f" - {placed.word.clue}"
            if answers:
                line += f"  ({placed.row + 1},{placed.col + 1} {placed.direction.name.replace('_', ' ').lower()})"
            lines.append(line)
        return lines

    def _wrap(self, line: str, max_width: float) -> List[str]:
        """Greedy word wrap; words wider than a whole line are split by character."""
        out: List[str] = []
        current = ""
        for word in line.split():
            candidate = f"{current} {word}" if current else word
            if self.legend_font.getlength(candidate) <= max_width:
                current = candidate
                continue
            if current:
                out.append(current)
            current = word
            while len(current) > 1 and self.legend_font.getlength(current) > max_width:
                cut = len(current) - 1
                while cut > 1 and self.legend_font.getlength(current[:cut]) > max_width:
                    cut -= 1
                out.append(current[:cut])
                current = current[cut:]
        if current:
            out.append(current)
        return out

    def _wrapped_legend(self, answers: bool) -> List[str]:
        max_width = self.n * self.cell
        return [part for line in self._legend_lines(answers) for part in self._wrap(line, max_width)]

    def _legend_height(self, answers: bool) -> int:
        return max(1, len(self._wrapped_legend(answers))) * self.line_height

    def _draw_legend(self, draw: ImageDraw.ImageDraw, top: int, answers: bool) -> None:
        y = top
        for line in self._wrapped_legend(answers):
            draw.text((self.pad, y), line, fill=self.TEXT, font=self.legend_font)
            y += self.line_height

    # ---------- answer key ----------

    def _collect_placements(self) -> List[Tuple[int, int, int, int, int]]:
        return [
            (p.row, p.col, p.direction.dy, p.direction.dx, p.length)
            for p in self.puzzle.placements
        ]

    def _draw_answers_fill(self, draw: ImageDraw.ImageDraw) -> None:
        for placed in self.puzzle.placements:
            for rr, cc in placed.cells():
                x0 = self.pad + cc * self.cell
                y0 = self.pad + rr * self.cell
                draw.rectangle([x0, y0, x0 + self.cell, y0 + self.cell], fill=self.HIGHLIGHT_FILL)

    def _draw_answers_stroke(self, draw: ImageDraw.ImageDraw) -> None:
        for r, c, dr, dc, L in self._collect_placements():
            x0 = self.pad + (c + 0.5) * self.cell
            y0 = self.pad + (r + 0.5) * self.cell
            x1 = self.pad + (c + (L - 1) * dc + 0.5) * self.cell
            y1 = self.pad + (r + (L - 1) * dr + 0.5) * self.cell
            draw.line([x0, y0, x1, y1], fill=self.HIGHLIGHT_STROKE, width=self.stroke_width)


def render_pdf(
    puzzles: Sequence[Puzzle],
    filename: str | Path,
    *,
    answers: bool = False,
    dpi: int = 150,
    **renderer_options,
) -> Path:
    """Write one page per puzzle into a single PDF."""
    if not puzzles:
        raise ValueError("render_pdf needs at least one puzzle")
    pages = [WordSearchRenderer(p, **renderer_options).render(answers=answers) for p in puzzles]
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    pages[0].save(path, format="PDF", save_all=True, append_images=pages[1:], resolution=float(dpi))
    return path
