"""Accepted-names registry: an insertion-ordered set of pack names.

The registry is both the readiness oracle during resolution and the source
of truth for satisfaction queries afterwards. It is backed by a ``dict``
(insertion-ordered since Python 3.7), which gives O(1) membership tests
while keeping acceptance order reproducible.

Thread safety: This class is NOT thread-safe. External synchronization is
required if readers run while a resolution phase is adding names.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class AcceptedNames:
    """Append-only, insertion-ordered set of accepted pack names."""

    def __init__(self) -> None:
        self._names: dict[str, None] = {}

    def add(self, name: str) -> bool:
        """Accept a name.

        Idempotent: accepting a name twice keeps its original position.

        Returns:
            True if the name was newly added, False if already present.
        """
        if name in self._names:
            return False
        self._names[name] = None
        return True

    def contains_all(self, tokens: Iterable[str]) -> bool:
        """Return True if every token has been accepted (True for none)."""
        return self.first_missing(tokens) is None

    def first_missing(self, tokens: Iterable[str]) -> str | None:
        """Return the first token that has not been accepted, or None."""
        for token in tokens:
            if token not in self._names:
                return token
        return None

    def as_list(self) -> list[str]:
        """Return the accepted names in acceptance order."""
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"AcceptedNames({list(self._names)!r})"
