"""Staged fixed-point dependency resolution for content packs.

Packs come in two categories. Primary packs depend only on primary packs.
Secondary packs depend on secondary packs and on primary packs, never the
other way round, so the secondary phase may only run once the primary phase
has completed.

Algorithm (per phase)
---------------------
Fixed-point relaxation over the roster, in input order:

1. Skip packs already placed.
2. A pack is *ready* when every dependency token names an accepted pack.
3. A ready pack is accepted (its name added to the registry) and appended
   to the result. The pass is marked as having made progress.
4. Repeat until a pass makes no progress.

Each productive pass places at least one pack, so the loop ends after at
most n + 1 passes. Any acyclic roster is fully placed regardless of input
order. Packs that become ready in the same pass keep their relative input
order. Packs on a cycle, packs depending on themselves, and packs depending
on unknown names never become ready: each produces one warning on the
diagnostic sink and is dropped.

Thread safety: ``StagedResolver`` is NOT thread-safe while a phase is
running. Once both phases are done, ``is_satisfied`` and ``explain`` are
pure reads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from loadorder.core.resolution.models import (
    DependencyQuery,
    LoadPlan,
    PrimaryItem,
    SecondaryItem,
)
from loadorder.core.resolution.registry import AcceptedNames
from loadorder.core.resolution.sinks import DiagnosticSink, LoggingSink
from loadorder.exceptions import PhaseOrderError

logger = logging.getLogger(__name__)

_Item = TypeVar("_Item", PrimaryItem, SecondaryItem)

UNMET_DEPENDENCIES_MESSAGE = "{name} has unmet dependencies and was not loaded!"


class StagedResolver:
    """Two-phase resolver holding the accepted-names registries.

    Construct one instance per engine run and hand it to every consumer that
    needs ``is_satisfied``.

    Args:
        sink: Receiver of "not loaded" warnings. Defaults to ``LoggingSink``.
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self._sink = sink if sink is not None else LoggingSink()
        self.accepted_primary = AcceptedNames()
        self.accepted_secondary = AcceptedNames()
        self._primary_complete = False
        self._secondary_complete = False
        self._rejected_primary: list[str] = []
        self._rejected_secondary: list[str] = []

    @property
    def primary_complete(self) -> bool:
        """True once ``resolve_primary`` has returned."""
        return self._primary_complete

    @property
    def secondary_complete(self) -> bool:
        """True once ``resolve_secondary`` has returned."""
        return self._secondary_complete

    @property
    def rejected_primary_names(self) -> list[str]:
        """Primary packs dropped by the last primary phase, in input order."""
        return list(self._rejected_primary)

    @property
    def rejected_secondary_names(self) -> list[str]:
        """Secondary packs dropped by the last secondary phase."""
        return list(self._rejected_secondary)

    # ------------------------------------------------------------------
    # Resolution phases
    # ------------------------------------------------------------------

    def resolve_primary(self, items: Sequence[PrimaryItem]) -> list[PrimaryItem]:
        """Order primary packs for loading, dropping unresolvable ones.

        Args:
            items: The full primary roster, in input order.

        Returns:
            The resolvable packs, each after all of its dependencies.
        """
        accepted = self.accepted_primary
        resolved, rejected = self._relax(
            items,
            lambda item: accepted.contains_all(item.tokens),
            accepted,
        )
        self._rejected_primary = rejected
        self._primary_complete = True
        logger.debug(
            "primary phase: %d loaded, %d rejected", len(resolved), len(rejected)
        )
        return resolved

    def resolve_secondary(
        self, items: Sequence[SecondaryItem]
    ) -> list[SecondaryItem]:
        """Order secondary packs for loading, dropping unresolvable ones.

        Readiness needs every same-category token in the secondary registry
        and every cross-category token in the (read-only) primary registry.

        Args:
            items: The full secondary roster, in input order.

        Returns:
            The resolvable packs, each after all of its dependencies.

        Raises:
            PhaseOrderError: If the primary phase has not completed.
        """
        if not self._primary_complete:
            raise PhaseOrderError(
                "Cannot resolve secondary packs until primary packs are resolved"
            )

        primary = self.accepted_primary
        accepted = self.accepted_secondary
        resolved, rejected = self._relax(
            items,
            lambda item: (
                accepted.contains_all(item.same_category_tokens)
                and primary.contains_all(item.cross_category_tokens)
            ),
            accepted,
        )
        self._rejected_secondary = rejected
        self._secondary_complete = True
        logger.debug(
            "secondary phase: %d loaded, %d rejected", len(resolved), len(rejected)
        )
        return resolved

    def resolve(
        self,
        primary_items: Sequence[PrimaryItem],
        secondary_items: Sequence[SecondaryItem] = (),
    ) -> LoadPlan:
        """Run both phases in order and collect the outcome.

        Args:
            primary_items: The full primary roster.
            secondary_items: The full secondary roster.

        Returns:
            A ``LoadPlan`` with both load orders and the rejected names.
        """
        primary = self.resolve_primary(primary_items)
        secondary = self.resolve_secondary(secondary_items)
        return LoadPlan(
            primary=primary,
            secondary=secondary,
            rejected_primary=self.rejected_primary_names,
            rejected_secondary=self.rejected_secondary_names,
        )

    def _relax(
        self,
        items: Sequence[_Item],
        is_ready: Callable[[_Item], bool],
        accepted: AcceptedNames,
    ) -> tuple[list[_Item], list[str]]:
        """Run fixed-point relaxation and report what never became ready."""
        resolved: list[_Item] = []
        placed: set[int] = set()

        changed = True
        while changed:
            changed = False
            for item in items:
                if id(item) in placed:
                    continue
                if is_ready(item):
                    accepted.add(item.name)
                    resolved.append(item)
                    placed.add(id(item))
                    changed = True

        rejected = [item.name for item in items if id(item) not in placed]
        for name in rejected:
            self._sink.warning(UNMET_DEPENDENCIES_MESSAGE.format(name=name))
        return resolved, rejected

    # ------------------------------------------------------------------
    # Satisfaction queries
    # ------------------------------------------------------------------

    def is_satisfied(self, query: DependencyQuery) -> bool:
        """Check whether a downstream consumer's prerequisites are loaded.

        Pure read against the registries. Before any phase has run the
        registries are empty, so any non-empty dependency list fails.
        """
        if self.accepted_primary.first_missing(query.primary_tokens) is not None:
            return False
        if self.accepted_secondary.first_missing(query.secondary_tokens) is not None:
            return False
        return True

    def explain(self, query: DependencyQuery) -> list[str]:
        """List every missing prerequisite of a query.

        Returns:
            Missing tokens as ``"primary:<name>"`` or ``"secondary:<name>"``,
            primary first, in authored order. Empty when satisfied.
        """
        missing = [
            f"primary:{token}"
            for token in query.primary_tokens
            if token not in self.accepted_primary
        ]
        missing.extend(
            f"secondary:{token}"
            for token in query.secondary_tokens
            if token not in self.accepted_secondary
        )
        return missing
