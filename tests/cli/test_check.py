"""Tests for ``loadorder check``.

Verifies:
    - A level whose packs all loaded is satisfied (exit 0).
    - A level needing rejected or unknown packs is unmet (exit 1) and
      lists what is missing.
    - Manifest errors exit with code 2.
"""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from loadorder.cli.main import cli
from tests.conftest import write_manifest


class TestCheckSatisfied:
    def test_exit_code_0(
        self, runner: CliRunner, level_ok: Path,
        primary_dir: Path, secondary_dir: Path,
    ) -> None:
        result = runner.invoke(cli, [
            "check", str(level_ok), "--primary", str(primary_dir),
            "--secondary", str(secondary_dir),
        ])
        assert result.exit_code == 0
        assert "SATISFIED" in result.output
        assert "crypt" in result.output

    def test_json(
        self, runner: CliRunner, level_ok: Path,
        primary_dir: Path, secondary_dir: Path,
    ) -> None:
        result = runner.invoke(cli, [
            "check", str(level_ok), "--primary", str(primary_dir),
            "--secondary", str(secondary_dir), "--format", "json",
        ])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "crypt"
        assert data["satisfied"] is True
        assert data["missing"] == []

    def test_level_without_dependencies(
        self, runner: CliRunner, tmp_path: Path, empty_dir: Path
    ) -> None:
        level = write_manifest(tmp_path / "levels", "tutorial.yaml", "")
        result = runner.invoke(cli, ["check", str(level), "--primary", str(empty_dir)])
        assert result.exit_code == 0


class TestCheckUnmet:
    def test_exit_code_1(
        self, runner: CliRunner, level_blocked: Path,
        primary_dir: Path, secondary_dir: Path,
    ) -> None:
        result = runner.invoke(cli, [
            "check", str(level_blocked), "--primary", str(primary_dir),
            "--secondary", str(secondary_dir),
        ])
        assert result.exit_code == 1
        assert "UNMET" in result.output
        assert "missing primary:dragons" in result.output

    def test_json_lists_missing(
        self, runner: CliRunner, level_blocked: Path,
        primary_dir: Path, secondary_dir: Path,
    ) -> None:
        result = runner.invoke(cli, [
            "check", str(level_blocked), "--primary", str(primary_dir),
            "--secondary", str(secondary_dir), "--format", "json",
        ])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["name"] == "lair"
        assert data["satisfied"] is False
        assert data["missing"] == ["primary:dragons", "secondary:dragonfire"]

    def test_secondary_needed_but_not_given(
        self, runner: CliRunner, level_ok: Path, primary_dir: Path
    ) -> None:
        result = runner.invoke(cli, [
            "check", str(level_ok), "--primary", str(primary_dir), "--format", "json",
        ])
        assert result.exit_code == 1
        assert json.loads(result.output)["missing"] == ["secondary:necromancy"]


class TestCheckErrors:
    def test_bad_query_manifest(
        self, runner: CliRunner, tmp_path: Path, empty_dir: Path
    ) -> None:
        level = write_manifest(tmp_path / "levels", "bad.yaml", "primary_dependencies: 7\n")
        result = runner.invoke(cli, ["check", str(level), "--primary", str(empty_dir)])
        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_missing_query_file(self, runner: CliRunner, empty_dir: Path) -> None:
        result = runner.invoke(cli, [
            "check", str(empty_dir / "nope.yaml"), "--primary", str(empty_dir),
        ])
        assert result.exit_code == 2
