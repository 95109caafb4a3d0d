"""Tests for the zephyr CLI commands."""
from __future__ import annotations

import json

import flask
import pytest
from click.testing import CliRunner

from zephyr import __version__
from zephyr.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("build", "check", "serve"):
            assert name in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_to_stdout(self, runner) -> None:
        result = runner.invoke(cli, ["build", "p-4", "md:p-2"])
        assert result.exit_code == 0
        assert ".p-4 {\n  padding: 1rem;\n}" in result.output
        assert "@media (min-width: 768px) {" in result.output

    def test_build_minify(self, runner) -> None:
        result = runner.invoke(cli, ["build", "--minify", "p-4"])
        assert result.exit_code == 0
        assert result.output == ".p-4{padding:1rem}"

    def test_build_reports_diagnostics(self, runner) -> None:
        result = runner.invoke(cli, ["build", "p-4", "nope"])
        assert result.exit_code == 0
        assert "WARNING [class=nope]" in result.output
        assert ".p-4" in result.output

    def test_build_json(self, runner) -> None:
        result = runner.invoke(cli, ["build", "--json", "m-1"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["rules"][0]["selector"] == ".m-1"
        assert payload["rules"][0]["properties"] == [
            {"name": "margin", "value": "0.25rem", "important": False}
        ]
        assert payload["diagnostics"] == []
        assert payload["css"].startswith(".m-1 {")

    def test_build_from_input_file(self, runner, tmp_path) -> None:
        source = tmp_path / "classes.txt"
        source.write_text("flex p-4\nflex\n")
        result = runner.invoke(cli, ["build", "--input", str(source)])
        assert result.exit_code == 0
        assert ".flex {\n  display: flex;\n}" in result.output

    def test_build_to_file(self, runner, tmp_path) -> None:
        out = tmp_path / "out.css"
        result = runner.invoke(cli, ["build", "-o", str(out), "p-4"])
        assert result.exit_code == 0
        assert "Wrote 1 rule(s)" in result.output
        assert out.read_text() == ".p-4 {\n  padding: 1rem;\n}\n"

    def test_build_with_theme(self, runner, tmp_path) -> None:
        theme = tmp_path / "theme.json"
        theme.write_text(json.dumps({"extend": {"colors": {"brand": {"500": "#ff5500"}}}}))
        result = runner.invoke(cli, ["build", "--theme", str(theme), "text-brand-500"])
        assert result.exit_code == 0
        assert "color: #ff5500;" in result.output

    def test_build_with_bad_theme(self, runner, tmp_path) -> None:
        theme = tmp_path / "theme.json"
        theme.write_text(json.dumps({"breakpoints": {"sm": 0}}))
        result = runner.invoke(cli, ["build", "--theme", str(theme), "p-4"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_build_dark_media(self, runner) -> None:
        result = runner.invoke(cli, ["build", "--dark-mode", "media", "dark:p-4"])
        assert result.exit_code == 0
        assert "@media (prefers-color-scheme: dark)" in result.output

    def test_build_without_classes(self, runner) -> None:
        result = runner.invoke(cli, ["build"])
        assert result.exit_code == 2
        assert "No classes given" in result.output


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_check_clean(self, runner) -> None:
        result = runner.invoke(cli, ["check", "p-4", "m-2"])
        assert result.exit_code == 0
        assert "OK: 2 class(es), 2 rule(s), 0 diagnostics" in result.output

    def test_check_warnings(self, runner) -> None:
        result = runner.invoke(cli, ["check", "p-4", "nope"])
        assert result.exit_code == 0
        assert "Summary: 0 error(s), 1 warning(s)" in result.output

    def test_check_strict(self, runner) -> None:
        result = runner.invoke(cli, ["check", "--strict", "nope"])
        assert result.exit_code == 1

    def test_check_errors(self, runner) -> None:
        result = runner.invoke(cli, ["check", "w-[a;b]"])
        assert result.exit_code == 1
        assert "ERROR [class=w-[a;b]]" in result.output
        assert "Summary: 1 error(s), 0 warning(s)" in result.output


# ---------------------------------------------------------------------------
# serve command
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_serve_help_shows_options(self, runner) -> None:
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        for option in ("--host", "--port", "--debug", "--theme"):
            assert option in result.output

    def test_serve_runs_app(self, runner, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(flask.Flask, "run", lambda self, **kw: calls.append((self, kw)))
        result = runner.invoke(cli, ["serve", "--port", "8123"])
        assert result.exit_code == 0
        [(app, kwargs)] = calls
        assert kwargs == {"host": "127.0.0.1", "port": 8123, "debug": False}
        assert "engine" in app.extensions
