"""Shared fixtures for loadorder tests.

Builds temporary pack directories in both supported manifest formats:
YAML manifests and classic XML pack files.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def write_manifest(directory: Path, filename: str, content: str) -> Path:
    """Write a manifest file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content)
    return path


@pytest.fixture
def primary_dir(tmp_path: Path) -> Path:
    """Primary packs: base <- undead <- crypts, plus a self-dependent pack.

    File-name order is crypts, loop, undead, zz_base; load order must be
    zz_base, undead, crypts with loop rejected.
    """
    packs = tmp_path / "enemies"
    write_manifest(packs, "crypts.yaml", "dependencies: undead\n")
    write_manifest(packs, "loop.yaml", "name: loop\ndependencies: loop\n")
    write_manifest(
        packs, "undead.xml",
        '<EnemyTypes enemyFileDependencies=" zz_base , "><Enemies /></EnemyTypes>\n',
    )
    write_manifest(packs, "zz_base.yml", "enemies:\n  - skeleton\n")
    return packs


@pytest.fixture
def secondary_dir(tmp_path: Path) -> Path:
    """Secondary packs: spells <- necromancy (needs undead), plus a dragon pack."""
    packs = tmp_path / "cards"
    write_manifest(
        packs, "necromancy.yaml",
        "pack_dependencies: [spells]\nprimary_dependencies: undead, crypts\n",
    )
    write_manifest(
        packs, "dragonfire.xml",
        '<CardTypes enemyFileDependencies="dragons"><Cards /></CardTypes>\n',
    )
    write_manifest(packs, "spells.yaml", "cards: []\n")
    return packs


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """An existing directory without manifests."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory
