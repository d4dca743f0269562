"""Tests for the application orchestrator and the CLI."""

import json

import pytest
from typer.testing import CliRunner

from wordgen.app import DEFAULTS, WordGenApp
from wordgen.core.errors import ConfigurationError, WordListError
from wordgen.main import app as cli


@pytest.fixture
def project(tmp_path, words_file):
    cfg = {"wordsearch": {"words_file": "data/wordlists/animals.json", "grid_size": 9, "pages": 2}}
    (tmp_path / "data" / "config.json").write_text(json.dumps(cfg), encoding="utf-8")
    return tmp_path


class TestSettings:
    def test_defaults_without_config(self, tmp_path):
        assert WordGenApp(tmp_path).settings() == DEFAULTS

    def test_config_then_overrides(self, project):
        s = WordGenApp(project).settings(pages=5, difficulty=None)
        assert s["grid_size"] == 9
        assert s["pages"] == 5
        assert s["difficulty"] == "medium"

    def test_corrupt_config_falls_back(self, tmp_path):
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "config.json").write_text("{oops", encoding="utf-8")
        assert WordGenApp(tmp_path).config == {}


class TestRun:
    def test_build_uses_config(self, project):
        puzzles = WordGenApp(project).build(seed=1)
        assert len(puzzles) == 2
        assert all(p.size == 9 and p.grid.is_complete() for p in puzzles)

    def test_run_writes_outputs(self, project):
        written = WordGenApp(project).run(output_basename="zoo", seed=4, pages=1)
        names = {p.name for p in written}
        assert names == {
            "zoo_01.png", "zoo_01_answers.png", "zoo.pdf", "zoo_answers.pdf",
            "zoo_clues.txt", "zoo_answers.txt",
        }
        assert all(p.exists() for p in written)

    def test_missing_words_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            WordGenApp(tmp_path).build()

    def test_empty_word_list(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(WordListError):
            WordGenApp(tmp_path).build(words_file=str(path))


class TestCli:
    def test_generate(self, project):
        result = CliRunner().invoke(cli, ["generate", "--root", str(project), "--seed", "2", "-p", "1", "-b", "cli"])
        assert result.exit_code == 0, result.output
        assert "cli.pdf" in result.output
        assert (project / "output" / "cli_clues.txt").exists()

    def test_generate_bad_difficulty(self, project):
        result = CliRunner().invoke(cli, ["generate", "--root", str(project), "-d", "insane"])
        assert result.exit_code == 1
        assert "Unknown difficulty" in result.output

    def test_show(self, words_file):
        result = CliRunner().invoke(cli, ["show", str(words_file), "--size", "12", "--seed", "3"])
        assert result.exit_code == 0, result.output
        grid_lines = result.output.splitlines()[:12]
        assert all(len(line) == 12 for line in grid_lines)


class TestBadSettings:
    @pytest.fixture
    def write_config(self, tmp_path, words_file):
        def _write(**ws):
            cfg = {"wordsearch": {"words_file": "data/wordlists/animals.json", **ws}}
            (tmp_path / "data" / "config.json").write_text(json.dumps(cfg), encoding="utf-8")
            return tmp_path
        return _write

    @pytest.mark.parametrize("key,value", [("grid_size", "ten"), ("pages", [2]), ("grid_size", True)])
    def test_non_integer_setting(self, write_config, key, value):
        root = write_config(**{key: value})
        with pytest.raises(ConfigurationError, match=f"wordsearch.{key} must be an integer"):
            WordGenApp(root).build()

    def test_non_integer_stroke_width(self, write_config):
        root = write_config(stroke_width="thick", pages=1)
        with pytest.raises(ConfigurationError, match="stroke_width"):
            WordGenApp(root).run(seed=1)

    def test_cli_reports_bad_config(self, write_config):
        root = write_config(grid_size="ten")
        result = CliRunner().invoke(cli, ["generate", "--root", str(root)])
        assert result.exit_code == 1
        assert "wordsearch.grid_size must be an integer, got 'ten'" in result.output
        assert not isinstance(result.exception, ValueError)
