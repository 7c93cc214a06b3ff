"""LoadOrder: Staged dependency resolution for content packs."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
