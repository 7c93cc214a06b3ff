"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import write_manifest


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def level_ok(tmp_path: Path) -> Path:
    """A level whose packs all load from the shared pack fixtures."""
    return write_manifest(
        tmp_path / "levels", "crypt.yaml",
        "primary_dependencies: undead, crypts\nsecondary_dependencies: necromancy\n",
    )


@pytest.fixture
def level_blocked(tmp_path: Path) -> Path:
    """A classic XML level needing packs that never load."""
    return write_manifest(
        tmp_path / "levels", "lair.xml",
        '<Level enemyFileDependencies="undead, dragons" '
        'cardFileDependencies="dragonfire" />',
    )
