"""Tests for the nativecss command line."""

import pytest
from click.testing import CliRunner

from nativecss import __version__
from nativecss.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def stylesheet(tmp_path):
    path = tmp_path / "styles.css"
    path.write_text(".a { color: red }\n@media (min-width: 640px) { .a { width: 1rem } }\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class TestOutput:
    def test_prints_module(self, runner, stylesheet):
        result = runner.invoke(cli, [str(stylesheet)])
        assert result.exit_code == 0
        assert "module.exports = {" in result.output
        assert '".a":{"color":"red"}' in result.output
        assert '".a.0":{"width":16}' in result.output
        assert '".a":["(min-width: 640px)"]' in result.output

    def test_writes_output_file(self, runner, stylesheet, tmp_path):
        output = tmp_path / "styles.js"
        result = runner.invoke(cli, [str(stylesheet), "-o", str(output)])
        assert result.exit_code == 0
        assert "module.exports" not in result.stdout
        assert '".a":{"color":"red"}' in output.read_text(encoding="utf-8")

    def test_merges_files_in_order(self, runner, stylesheet, tmp_path):
        other = tmp_path / "other.css"
        other.write_text(".a { color: blue } .b { opacity: 0.5 }", encoding="utf-8")
        result = runner.invoke(cli, [str(stylesheet), str(other)])
        assert result.exit_code == 0
        assert '".a":{"color":"blue"}' in result.output
        assert '".b":{"opacity":0.5}' in result.output

    def test_important_scope(self, runner, tmp_path):
        path = tmp_path / "scoped.css"
        path.write_text("#app .a { color: red }", encoding="utf-8")
        result = runner.invoke(cli, [str(path), "--important", "#app"])
        assert result.exit_code == 0
        assert '".a":{"color":"red"}' in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# Exit status
# ---------------------------------------------------------------------------


class TestStrict:
    def test_problems_are_ignored_by_default(self, runner, tmp_path):
        path = tmp_path / "bad.css"
        path.write_text(".a { transition: all 1s; color: red }", encoding="utf-8")
        result = runner.invoke(cli, [str(path)])
        assert result.exit_code == 0
        assert '".a":{"color":"red"}' in result.output

    def test_strict_fails_on_problems(self, runner, tmp_path):
        path = tmp_path / "bad.css"
        path.write_text(".a { transition: all 1s; color: red }", encoding="utf-8")
        result = runner.invoke(cli, [str(path), "--strict"])
        assert result.exit_code == 1

    def test_strict_passes_clean_files(self, runner, stylesheet):
        result = runner.invoke(cli, [str(stylesheet), "--strict"])
        assert result.exit_code == 0

    def test_strict_passes_keyframes(self, runner, tmp_path):
        path = tmp_path / "animate.css"
        path.write_text(
            "@keyframes spin { to { transform: rotate(360deg) } } .animate-spin { opacity: 1 }",
            encoding="utf-8",
        )
        result = runner.invoke(cli, [str(path), "--strict"])
        assert result.exit_code == 0
        assert "\"to\"" not in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, [str(tmp_path / "missing.css")])
        assert result.exit_code != 0

    def test_requires_a_file(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code != 0
