import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from wordgen.app import WordGenApp
from wordgen.core.directions import Difficulty
from wordgen.core.errors import WordGenError
from wordgen.core.wordlist import load_words
from wordgen.core.wordsearch import WordSearch
from wordgen.utils.logger import configure_logging

app = typer.Typer(add_completion=False, help="Word-search puzzle generator.")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option(
        "--verbose", "-v",
        help="Show placement details while generating."
    )] = False,
):
    configure_logging(logging.DEBUG if verbose else logging.INFO)


@app.command()
def generate(
    words_file: Annotated[Optional[str], typer.Option(
        "--words", "-w",
        help="JSON file with a list of {\"text\": ..., \"clue\": ...} items."
    )] = None,
    size: Annotated[Optional[int], typer.Option(
        "--size", "-s",
        help="Grid size (NxN)."
    )] = None,
    difficulty: Annotated[Optional[str], typer.Option(
        "--difficulty", "-d",
        help="easy, medium or hard."
    )] = None,
    pages: Annotated[Optional[int], typer.Option(
        "--pages", "-p",
        help="How many puzzles (one per page) to generate."
    )] = None,
    seed: Annotated[Optional[int], typer.Option(
        "--seed",
        help="Seed for deterministic generation."
    )] = None,
    output_basename: Annotated[str, typer.Option(
        "--basename", "-b",
        help="Base name for the output files."
    )] = "wordsearch",
    style: Annotated[Optional[str], typer.Option(
        "--style",
        help="Answer highlight: fill or stroke."
    )] = None,
    workers: Annotated[int, typer.Option(
        "--workers",
        help="Generate pages in parallel with this many processes."
    )] = 1,
    project_root: Annotated[Optional[Path], typer.Option(
        "--root",
        help="Project folder holding data/ and output/."
    )] = None,
):
    """Generate word-search pages, answer keys and the clue legend."""
    wg = WordGenApp(project_root)
    typer.echo("⚙️  Generating word search...")
    try:
        written = wg.run(
            output_basename=output_basename,
            words_file=words_file,
            grid_size=size,
            difficulty=difficulty,
            pages=pages,
            seed=seed,
            workers=workers,
            highlight_style=style,
        )
    except WordGenError as e:
        typer.echo(f"❌ ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"📦 Output: {wg.output_dir}")
    for path in written:
        typer.echo(f"   - {path.name}")
    typer.echo("🎉 All done!")


@app.command()
def show(
    words_file: Annotated[str, typer.Argument(help="JSON word file.")],
    size: Annotated[int, typer.Option("--size", "-s")] = 10,
    difficulty: Annotated[str, typer.Option("--difficulty", "-d")] = "medium",
    seed: Annotated[Optional[int], typer.Option("--seed")] = None,
):
    """Print a single puzzle grid and its word list to the terminal."""
    try:
        words = load_words(words_file)
        puzzle = WordSearch(words, grid_size=size, difficulty=Difficulty.parse(difficulty), seed=seed).make_grid()
    except WordGenError as e:
        typer.echo(f"❌ ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(puzzle.grid))
    typer.echo("")
    for placed in puzzle.placements:
        typer.echo(f"{placed.direction.arrow} {placed.text}")
    if puzzle.unplaced:
        typer.echo(f"⚠️  Not placed: {', '.join(w.text for w in puzzle.unplaced)}")


def run():
    app()


if __name__ == "__main__":
    run()
