"""Pack records, dependency queries, and dependency-string tokenizing.

Dependency lists are authored as comma-separated strings (``"base, extras"``)
because that is what pack manifests carry. Each record parses its strings
exactly once, at construction, into a tuple of *dependency tokens*: trimmed,
non-empty names. The resolver only ever looks at the tokens.

Tokenizing Rules
----------------
- ``None`` or ``""`` yields no tokens.
- Tokens are split on ``,`` and stripped of surrounding whitespace.
- Tokens that are empty after stripping are discarded, so
  ``" , , A ,"`` is equivalent to ``"A"``.
- Order is preserved and duplicates are kept; readiness is a membership
  test, so a repeated token costs nothing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def parse_dependencies(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated dependency string into dependency tokens.

    Args:
        raw: The dependency string as authored, or None.

    Returns:
        Tuple of trimmed, non-empty names in authored order.
    """
    if not raw:
        return ()
    tokens = (token.strip() for token in raw.split(","))
    return tuple(token for token in tokens if token)


# ---------------------------------------------------------------------------
# Roster records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class PrimaryItem:
    """A primary-category pack: may depend on other primary packs only.

    Records compare by identity. Two records carrying the same name are two
    distinct roster entries.

    Attributes:
        name: Unique, non-empty pack name within the primary roster.
        dependencies: Comma-separated primary pack names, or None.
        payload: Opaque pack content. Never inspected by the resolver.
        source_path: Manifest the record was loaded from, if any.
        tokens: Parsed ``dependencies``.
    """

    name: str
    dependencies: str | None = None
    payload: Any = None
    source_path: Path | None = None
    tokens: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", parse_dependencies(self.dependencies))


@dataclass(frozen=True, eq=False)
class SecondaryItem:
    """A secondary-category pack: may depend on secondary and primary packs.

    Attributes:
        name: Unique, non-empty pack name within the secondary roster.
        same_category_dependencies: Comma-separated secondary pack names.
        cross_category_dependencies: Comma-separated primary pack names.
        payload: Opaque pack content. Never inspected by the resolver.
        source_path: Manifest the record was loaded from, if any.
        same_category_tokens: Parsed ``same_category_dependencies``.
        cross_category_tokens: Parsed ``cross_category_dependencies``.
    """

    name: str
    same_category_dependencies: str | None = None
    cross_category_dependencies: str | None = None
    payload: Any = None
    source_path: Path | None = None
    same_category_tokens: tuple[str, ...] = field(init=False, repr=False)
    cross_category_tokens: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "same_category_tokens",
            parse_dependencies(self.same_category_dependencies),
        )
        object.__setattr__(
            self, "cross_category_tokens",
            parse_dependencies(self.cross_category_dependencies),
        )


@dataclass(frozen=True)
class DependencyQuery:
    """Prerequisites of a downstream consumer, e.g. a level or a stage.

    Not part of either roster. Used only for read-only satisfaction checks.
    An absent (None) string is vacuously satisfied for its category.

    Attributes:
        primary_dependencies: Comma-separated primary pack names, or None.
        secondary_dependencies: Comma-separated secondary pack names, or None.
        name: Label for reporting. Does not affect satisfaction.
    """

    primary_dependencies: str | None = None
    secondary_dependencies: str | None = None
    name: str = ""
    primary_tokens: tuple[str, ...] = field(init=False, repr=False, compare=False)
    secondary_tokens: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "primary_tokens", parse_dependencies(self.primary_dependencies)
        )
        object.__setattr__(
            self, "secondary_tokens", parse_dependencies(self.secondary_dependencies)
        )


@dataclass
class LoadPlan:
    """Outcome of running both resolution phases.

    Attributes:
        primary: Primary packs in load order.
        secondary: Secondary packs in load order.
        rejected_primary: Names of primary packs dropped for unmet
            dependencies, in input order.
        rejected_secondary: Same for secondary packs.
    """

    primary: list[PrimaryItem] = field(default_factory=list)
    secondary: list[SecondaryItem] = field(default_factory=list)
    rejected_primary: list[str] = field(default_factory=list)
    rejected_secondary: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when no pack was rejected in either phase."""
        return not self.rejected_primary and not self.rejected_secondary
