"""Pack manifest loading: the source of the primary and secondary rosters."""

from loadorder.manifests.loader import (
    MANIFEST_SUFFIXES,
    discover_manifests,
    load_primary_manifest,
    load_primary_roster,
    load_query_manifest,
    load_secondary_manifest,
    load_secondary_roster,
)

__all__ = [
    "MANIFEST_SUFFIXES",
    "discover_manifests",
    "load_primary_manifest",
    "load_primary_roster",
    "load_query_manifest",
    "load_secondary_manifest",
    "load_secondary_roster",
]
