"""Tests for the objects-tasks CLI commands."""
from __future__ import annotations

import pytest
from click.testing import CliRunner

from objects_tasks import __version__
from objects_tasks.cli.main import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OBJECTS_TASKS_LOG_LEVEL",
        "OBJECTS_TASKS_JSON_INDENT",
        "OBJECTS_TASKS_JSON_SORT_KEYS",
    ):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "normalize" in result.output
        assert "area" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_full_selector(self) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "build",
                "--pseudo-class", "focus",
                "--element", "a",
                "--attr", 'href$=".png"',
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_build_id_and_classes(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "--id", "main", "--class", "container", "--class", "editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_build_warns_on_extra_attributes(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--attr", "href", "--attr", "title"])
        assert result.exit_code == 0
        assert "[href]" in result.output
        assert "only the first attribute" in result.output


# ---------------------------------------------------------------------------
# normalize command
# ---------------------------------------------------------------------------


class TestNormalizeCommand:
    def test_normalize_combination(self) -> None:
        result = CliRunner().invoke(cli, ["normalize", "ul>li.item"])
        assert result.exit_code == 0
        assert result.output.strip() == "ul > li.item"

    def test_normalize_order_error(self) -> None:
        result = CliRunner().invoke(cli, ["normalize", ".x#y"])
        assert result.exit_code == 1
        assert "Invalid selector" in result.output

    def test_normalize_parse_error(self) -> None:
        result = CliRunner().invoke(cli, ["normalize", "div >"])
        assert result.exit_code == 1
        assert "Parse error" in result.output


# ---------------------------------------------------------------------------
# area command
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_area(self) -> None:
        result = CliRunner().invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_area_json(self) -> None:
        result = CliRunner().invoke(cli, ["area", "1.5", "2", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":1.5,"height":2.0}'

    def test_area_json_uses_env_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OBJECTS_TASKS_JSON_SORT_KEYS", "1")
        result = CliRunner().invoke(cli, ["area", "3", "4", "--json"])
        assert result.exit_code == 0
        assert result.output.strip() == '{"height":4.0,"width":3.0}'


class TestVerbose:
    def test_verbose_flag_accepted(self) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "normalize", "a.b"])
        assert result.exit_code == 0
        assert result.output.strip().endswith("a.b")


class TestEnvConfig:
    def test_invalid_indent_env_does_not_crash(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OBJECTS_TASKS_JSON_INDENT", "two")
        result = CliRunner().invoke(cli, ["area", "1", "2", "--json"])
        assert result.exit_code == 0
        assert '{"width":1.0,"height":2.0}' in result.output
