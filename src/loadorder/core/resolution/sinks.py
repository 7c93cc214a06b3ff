"""Diagnostic sinks: where the resolver reports packs it could not load.

The resolver never inspects what a sink does with a message. A sink may log
it, print it, or collect it for a UI. ``LoggingSink`` is the default.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("loadorder.resolution")


class DiagnosticSink(ABC):
    """One-way receiver of human-readable resolution warnings."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Receive one warning message."""


class LoggingSink(DiagnosticSink):
    """Forward warnings to the ``loadorder.resolution`` logger."""

    def warning(self, message: str) -> None:
        logger.warning("%s", message)


class CollectingSink(DiagnosticSink):
    """Keep warnings in memory, in emission order.

    Attributes:
        messages: Every warning received so far.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def warning(self, message: str) -> None:
        self.messages.append(message)
