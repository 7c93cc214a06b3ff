"""LoadOrder exception hierarchy.

All public exceptions inherit from LoadOrderError, giving callers a single
base class to catch when they want to handle any LoadOrder-specific failure
without swallowing unrelated errors.

Packs with unmet dependencies are NOT errors: the resolver reports them
through its diagnostic sink and drops them from the load order.
"""


class LoadOrderError(Exception):
    """Base exception for all LoadOrder errors."""


class PhaseOrderError(LoadOrderError):
    """Raised when resolution phases are invoked out of order.

    Secondary packs may depend on primary packs, so the secondary phase
    cannot start until the primary phase has completed. Correct call
    sequencing never triggers this.
    """


class ManifestError(LoadOrderError):
    """Raised when a pack or query manifest cannot be loaded.

    Covers unreadable files, YAML/XML syntax errors, documents that are
    not mappings, and dependency fields of an unsupported type.
    """
