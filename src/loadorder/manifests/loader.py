"""Load pack and query manifests from disk.

A content pack is described by one manifest file. Two formats are accepted,
chosen by file suffix:

YAML (``.yaml``, ``.yml``)
    A mapping. ``name`` defaults to the file stem. Dependency fields may be
    a comma-separated string or a list of names::

        name: undead
        dependencies: base, crypts          # primary packs
        pack_dependencies: [spells]         # secondary: other secondary packs
        primary_dependencies: undead        # secondary/query: primary packs
        secondary_dependencies: spells      # query: secondary packs

    The whole mapping is kept as the record's payload.

XML (``.xml``)
    The classic pack format. The name is always the file stem and the
    dependency lists are attributes of the root element:
    ``enemyFileDependencies`` (primary packs) and ``cardFileDependencies``
    (secondary packs). The parsed root element is kept as the payload.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

import yaml

from loadorder.core.resolution import DependencyQuery, PrimaryItem, SecondaryItem
from loadorder.exceptions import ManifestError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
XML_SUFFIXES = frozenset({".xml"})
MANIFEST_SUFFIXES = YAML_SUFFIXES | XML_SUFFIXES

# XML root attributes of the classic pack format.
_XML_PRIMARY_ATTR = "enemyFileDependencies"
_XML_SECONDARY_ATTR = "cardFileDependencies"


# ---------------------------------------------------------------------------
# Raw document reading
# ---------------------------------------------------------------------------


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid YAML in manifest {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ManifestError(
            f"Manifest {path} must be a mapping, got {type(data).__name__}"
        )
    return data


def _read_xml(path: Path) -> ET.Element:
    try:
        return ET.parse(path).getroot()
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    except ET.ParseError as exc:
        raise ManifestError(f"Invalid XML in manifest {path}: {exc}") from exc


def _dependency_field(data: dict[str, Any], key: str, path: Path) -> str | None:
    """Normalize a YAML dependency value to a comma-separated string."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return ",".join(value)
    raise ManifestError(
        f"Field {key!r} in manifest {path} must be a string or a list of strings"
    )


def _manifest_name(data: dict[str, Any], path: Path) -> str:
    name = data.get("name") or path.stem
    if not isinstance(name, str) or not name.strip():
        raise ManifestError(f"Manifest {path} has no usable name")
    return name.strip()


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in MANIFEST_SUFFIXES:
        raise ManifestError(f"Unsupported manifest format: {path}")
    return suffix


# ---------------------------------------------------------------------------
# Single-manifest loaders
# ---------------------------------------------------------------------------


def load_primary_manifest(path: Path) -> PrimaryItem:
    """Load one primary pack manifest.

    Raises:
        ManifestError: If the file cannot be read or parsed.
    """
    path = Path(path)
    if _check_suffix(path) in XML_SUFFIXES:
        root = _read_xml(path)
        return PrimaryItem(
            name=path.stem,
            dependencies=root.get(_XML_PRIMARY_ATTR),
            payload=root,
            source_path=path,
        )
    data = _read_yaml(path)
    return PrimaryItem(
        name=_manifest_name(data, path),
        dependencies=_dependency_field(data, "dependencies", path),
        payload=data,
        source_path=path,
    )


def load_secondary_manifest(path: Path) -> SecondaryItem:
    """Load one secondary pack manifest.

    Raises:
        ManifestError: If the file cannot be read or parsed.
    """
    path = Path(path)
    if _check_suffix(path) in XML_SUFFIXES:
        root = _read_xml(path)
        return SecondaryItem(
            name=path.stem,
            same_category_dependencies=root.get(_XML_SECONDARY_ATTR),
            cross_category_dependencies=root.get(_XML_PRIMARY_ATTR),
            payload=root,
            source_path=path,
        )
    data = _read_yaml(path)
    return SecondaryItem(
        name=_manifest_name(data, path),
        same_category_dependencies=_dependency_field(data, "pack_dependencies", path),
        cross_category_dependencies=_dependency_field(
            data, "primary_dependencies", path
        ),
        payload=data,
        source_path=path,
    )


def load_query_manifest(path: Path) -> DependencyQuery:
    """Load the prerequisites of a downstream consumer (e.g. a level).

    Raises:
        ManifestError: If the file cannot be read or parsed.
    """
    path = Path(path)
    if _check_suffix(path) in XML_SUFFIXES:
        root = _read_xml(path)
        return DependencyQuery(
            primary_dependencies=root.get(_XML_PRIMARY_ATTR),
            secondary_dependencies=root.get(_XML_SECONDARY_ATTR),
            name=path.stem,
        )
    data = _read_yaml(path)
    return DependencyQuery(
        primary_dependencies=_dependency_field(data, "primary_dependencies", path),
        secondary_dependencies=_dependency_field(
            data, "secondary_dependencies", path
        ),
        name=_manifest_name(data, path),
    )


# ---------------------------------------------------------------------------
# Roster discovery
# ---------------------------------------------------------------------------


def discover_manifests(directory: Path) -> list[Path]:
    """Return the manifest files directly inside a directory, sorted by name.

    Subdirectories and files with other suffixes are ignored.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ManifestError(f"Pack directory not found: {directory}")
    return sorted(
        (
            entry for entry in directory.iterdir()
            if entry.is_file() and entry.suffix.lower() in MANIFEST_SUFFIXES
        ),
        key=lambda entry: entry.name,
    )


def load_primary_roster(directory: Path) -> list[PrimaryItem]:
    """Load every primary pack manifest in a directory, in file-name order."""
    roster = []
    for path in discover_manifests(directory):
        logger.debug("found primary pack manifest: %s", path.name)
        roster.append(load_primary_manifest(path))
    return roster


def load_secondary_roster(directory: Path) -> list[SecondaryItem]:
    """Load every secondary pack manifest in a directory, in file-name order."""
    roster = []
    for path in discover_manifests(directory):
        logger.debug("found secondary pack manifest: %s", path.name)
        roster.append(load_secondary_manifest(path))
    return roster
