"""Error taxonomy for the registry.

Each error carries a stable ``kind`` so that result objects and the HTTP
layer can report failures without depending on exception classes.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for all registry failures."""

    kind = "registry_error"


class ValidationError(RegistryError):
    """Structural failure of a schema, element, group or reference.

    Always carries the complete, aggregated list of problems.
    """

    kind = "validation_error"

    def __init__(self, errors: list[str], subject: str = ""):
        self.errors = list(errors)
        self.subject = subject
        prefix = f"{subject} validation failed" if subject else "Validation failed"
        super().__init__(f"{prefix}: {', '.join(self.errors)}")


class DuplicateIdError(RegistryError):
    kind = "duplicate_id"

    def __init__(self, entry_id: str, what: str = "Schema"):
        self.entry_id = entry_id
        super().__init__(f"{what} with ID {entry_id} already exists")


class NotFoundError(RegistryError):
    kind = "not_found"

    def __init__(self, entry_id: str, what: str = "Schema"):
        self.entry_id = entry_id
        super().__init__(f"{what} {entry_id} not found")


class DependencyError(RegistryError):
    """Deletion blocked because other schemas still reference the entry."""

    kind = "dependency_error"

    def __init__(self, entry_id: str, dependents: list[str], what: str = "schema"):
        self.entry_id = entry_id
        self.dependents = list(dependents)
        super().__init__(
            f"Cannot delete {what}: {len(self.dependents)} dependent schemas found"
        )


class UnsupportedTargetError(RegistryError):
    """Unknown serialization format, implementation language or validation framework."""

    kind = "unsupported_target"

    def __init__(self, value: str, what: str = "format", choices: list[str] | None = None):
        self.value = value
        self.choices = list(choices or [])
        message = f"Unsupported {what}: {value}"
        if self.choices:
            message += f" (expected one of: {', '.join(self.choices)})"
        super().__init__(message)
