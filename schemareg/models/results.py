"""Result and summary records returned by the registry.

Mutating operations never raise for expected failures; they return one of
the result types below with ``success`` set and the error kind filled in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from schemareg.errors import DependencyError, RegistryError, ValidationError


@dataclass
class ValidationResult:
    valid: bool = True
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> ValidationResult:
        return cls(valid=not errors, errors=list(errors))

    def summary(self) -> str:
        status = "PASS" if self.valid else "FAIL"
        return f"[{status}] {len(self.errors)} error(s)"


@dataclass
class _MutationResult:
    success: bool
    schema_id: str
    error: str | None = None
    error_kind: str | None = None
    errors: list[str] = field(default_factory=list)

    def _fill_error(self, exc: RegistryError) -> None:
        self.error = str(exc)
        self.error_kind = exc.kind
        if isinstance(exc, ValidationError):
            self.errors = list(exc.errors)


@dataclass
class RegistrationResult(_MutationResult):
    """Receipt for a schema, encoding scheme or vocabulary registration.

    ``schema_id`` holds whichever catalog ID was registered.
    """

    registration_timestamp: datetime | None = None
    schema_version: str | None = None

    @classmethod
    def failure(cls, entry_id: str, exc: RegistryError) -> RegistrationResult:
        result = cls(success=False, schema_id=entry_id)
        result._fill_error(exc)
        return result


@dataclass
class UpdateResult(_MutationResult):
    update_timestamp: datetime | None = None
    new_version: str | None = None

    @classmethod
    def failure(cls, entry_id: str, exc: RegistryError) -> UpdateResult:
        result = cls(success=False, schema_id=entry_id)
        result._fill_error(exc)
        return result


@dataclass
class DeleteResult(_MutationResult):
    deletion_timestamp: datetime | None = None
    dependencies: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, entry_id: str, exc: RegistryError) -> DeleteResult:
        result = cls(success=False, schema_id=entry_id)
        result._fill_error(exc)
        if isinstance(exc, DependencyError):
            result.dependencies = list(exc.dependents)
        return result


# --- Summaries ---


@dataclass
class SchemaSummary:
    schema_id: str
    schema_name: str
    schema_version: str
    description: str
    element_count: int
    registration_date: datetime


@dataclass
class EncodingSchemeSummary:
    scheme_id: str
    scheme_name: str
    scheme_type: str
    scheme_version: str
    description: str
    value_count: int


@dataclass
class VocabularySummary:
    vocabulary_id: str
    vocabulary_name: str
    vocabulary_type: str
    vocabulary_version: str
    description: str
    term_count: int
