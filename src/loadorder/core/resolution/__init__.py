"""Staged dependency resolution for primary and secondary content packs.

Public names are re-exported here so callers can write
``from loadorder.core.resolution import StagedResolver``.
"""

from loadorder.core.resolution.models import (
    DependencyQuery,
    LoadPlan,
    PrimaryItem,
    SecondaryItem,
    parse_dependencies,
)
from loadorder.core.resolution.registry import AcceptedNames
from loadorder.core.resolution.resolver import (
    UNMET_DEPENDENCIES_MESSAGE,
    StagedResolver,
)
from loadorder.core.resolution.sinks import (
    CollectingSink,
    DiagnosticSink,
    LoggingSink,
)

__all__ = [
    "AcceptedNames",
    "CollectingSink",
    "DependencyQuery",
    "DiagnosticSink",
    "LoadPlan",
    "LoggingSink",
    "PrimaryItem",
    "SecondaryItem",
    "StagedResolver",
    "UNMET_DEPENDENCIES_MESSAGE",
    "parse_dependencies",
]
