"""In-memory catalogs for encoding schemes, vocabularies and schemas.

Catalogs validate and store entries and raise :mod:`schemareg.errors`
exceptions on failure. They do no locking of their own; the
:class:`~schemareg.registry.metadata_registry.MetadataRegistry` facade
serializes access across all three.
"""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Generic, Iterator, TypeVar

from schemareg.errors import DependencyError, DuplicateIdError, NotFoundError, ValidationError
from schemareg.models.catalog import ControlledVocabulary, EncodingScheme
from schemareg.models.results import (
    EncodingSchemeSummary,
    SchemaSummary,
    ValidationResult,
    VocabularySummary,
)
from schemareg.models.schema import Schema, SchemaUpdate, bump_patch, utcnow
from schemareg.registry.dependencies import find_dependents
from schemareg.validation.schema_validator import (
    validate_encoding_scheme,
    validate_schema,
    validate_vocabulary,
)

T = TypeVar("T")


class _Catalog(Generic[T]):
    """Insertion-ordered map of entries keyed by ID.

    Entries are copied on the way in and out so stored state only changes
    through catalog operations.
    """

    label = "Entry"

    def __init__(self) -> None:
        self._entries: dict[str, T] = {}

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())

    def ids(self) -> list[str]:
        return list(self._entries)

    def get(self, entry_id: str) -> T | None:
        entry = self._entries.get(entry_id)
        return copy.deepcopy(entry) if entry is not None else None

    def _require(self, entry_id: str) -> T:
        entry = self._entries.get(entry_id)
        if entry is None:
            raise NotFoundError(entry_id, self.label)
        return entry

    def _insert(self, entry_id: str, entry: T) -> T:
        if entry_id in self._entries:
            raise DuplicateIdError(entry_id, self.label)
        stored = copy.deepcopy(entry)
        self._entries[entry_id] = stored
        return stored


class EncodingSchemeCatalog(_Catalog[EncodingScheme]):
    label = "Encoding scheme"

    def register(self, scheme: EncodingScheme) -> EncodingScheme:
        result = validate_encoding_scheme(scheme)
        if not result.valid:
            raise ValidationError(result.errors, self.label)
        return self._insert(scheme.scheme_id, scheme)

    def remove(self, scheme_id: str) -> None:
        self._require(scheme_id)
        del self._entries[scheme_id]

    def summaries(self) -> list[EncodingSchemeSummary]:
        return [summarize_scheme(s) for s in self]


class VocabularyCatalog(_Catalog[ControlledVocabulary]):
    label = "Vocabulary"

    def register(self, vocabulary: ControlledVocabulary) -> ControlledVocabulary:
        result = validate_vocabulary(vocabulary)
        if not result.valid:
            raise ValidationError(result.errors, self.label)
        return self._insert(vocabulary.vocabulary_id, vocabulary)

    def remove(self, vocabulary_id: str) -> None:
        self._require(vocabulary_id)
        del self._entries[vocabulary_id]

    def summaries(self) -> list[VocabularySummary]:
        return [summarize_vocabulary(v) for v in self]


class SchemaCatalog(_Catalog[Schema]):
    """Schemas plus the validation and dependency rules that guard them."""

    label = "Schema"

    def __init__(self, encoding_schemes: EncodingSchemeCatalog, vocabularies: VocabularyCatalog):
        super().__init__()
        self.encoding_schemes = encoding_schemes
        self.vocabularies = vocabularies

    def validate(self, schema: Schema) -> ValidationResult:
        return validate_schema(schema, self.encoding_schemes, self.vocabularies)

    def register(self, schema: Schema) -> Schema:
        result = self.validate(schema)
        if not result.valid:
            raise ValidationError(result.errors, self.label)
        now = utcnow()
        return self._insert(schema.schema_id, replace(schema, registration_date=now, last_modified=now))

    def update(self, schema_id: str, update: SchemaUpdate) -> Schema:
        """Merge ``update`` over the stored schema and bump the patch version.

        The version is bumped on every call, including updates that change
        nothing. The stored schema is untouched if the candidate is invalid.
        """
        existing = self._require(schema_id)
        candidate = replace(
            copy.deepcopy(existing),
            **copy.deepcopy(update.changed_fields()),
            last_modified=utcnow(),
            schema_version=bump_patch(existing.schema_version),
        )
        result = self.validate(candidate)
        if not result.valid:
            raise ValidationError(result.errors, self.label)
        self._entries[schema_id] = candidate
        return candidate

    def remove(self, schema_id: str) -> None:
        self._require(schema_id)
        dependents = self.dependents_of(schema_id, exclude=schema_id)
        if dependents:
            raise DependencyError(schema_id, dependents, "schema")
        del self._entries[schema_id]

    def dependents_of(self, entry_id: str, exclude: str | None = None) -> list[str]:
        return find_dependents(self, entry_id, exclude=exclude)

    def summaries(self) -> list[SchemaSummary]:
        return [
            SchemaSummary(
                schema_id=s.schema_id,
                schema_name=s.schema_name,
                schema_version=s.schema_version,
                description=s.description,
                element_count=s.element_count,
                registration_date=s.registration_date,
            )
            for s in self
        ]


def summarize_scheme(scheme: EncodingScheme) -> EncodingSchemeSummary:
    return EncodingSchemeSummary(
        scheme_id=scheme.scheme_id,
        scheme_name=scheme.scheme_name,
        scheme_type=scheme.scheme_type.value,
        scheme_version=scheme.scheme_version,
        description=scheme.scheme_description,
        value_count=len(scheme.scheme_values),
    )


def summarize_vocabulary(vocabulary: ControlledVocabulary) -> VocabularySummary:
    return VocabularySummary(
        vocabulary_id=vocabulary.vocabulary_id,
        vocabulary_name=vocabulary.vocabulary_name,
        vocabulary_type=vocabulary.vocabulary_type.value,
        vocabulary_version=vocabulary.vocabulary_version,
        description=vocabulary.vocabulary_description,
        term_count=len(vocabulary.terms),
    )
