"""MetadataRegistry — the public entry point to the three catalogs.

Holds the encoding scheme, vocabulary and schema catalogs behind a single
re-entrant lock so every insert-if-absent and check-then-mutate sequence
is atomic with respect to other callers, including validation reads that
span catalogs.

Mutating operations return result objects; lookups return ``None`` for
absent IDs; projection and code generation raise.
"""

from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import Any, Callable, Iterable, TypeVar

from schemareg.designer.schema_designer import DesignPolicies, SchemaDesigner
from schemareg.errors import DependencyError, NotFoundError, RegistryError, ValidationError
from schemareg.models.catalog import ControlledVocabulary, EncodingScheme
from schemareg.models.results import (
    DeleteResult,
    EncodingSchemeSummary,
    RegistrationResult,
    SchemaSummary,
    UpdateResult,
    ValidationResult,
    VocabularySummary,
)
from schemareg.models.schema import Schema, SchemaRequirements, SchemaUpdate, utcnow
from schemareg.models.serialization import to_dict
from schemareg.projection.codegen import generate_implementation, generate_validation
from schemareg.projection.documentation import SchemaDocumentation, build_documentation
from schemareg.projection.formats import render_schema
from schemareg.projection.targets import (
    ImplementationLanguage,
    SchemaFormat,
    ValidationFramework,
    parse_target,
)
from schemareg.registry.catalogs import (
    EncodingSchemeCatalog,
    SchemaCatalog,
    VocabularyCatalog,
    summarize_scheme,
    summarize_vocabulary,
)
from schemareg.registry.defaults import (
    default_encoding_schemes,
    default_schemas,
    default_vocabularies,
)
from schemareg.registry.loader import RegistryContents, contents_from_dict

logger = logging.getLogger(__name__)

R = TypeVar("R")


class MetadataRegistry:
    """In-memory metadata schema registry."""

    def __init__(
        self,
        schemas: Iterable[Schema] | None = None,
        encoding_schemes: Iterable[EncodingScheme] | None = None,
        vocabularies: Iterable[ControlledVocabulary] | None = None,
        load_defaults: bool = True,
        designer: SchemaDesigner | None = None,
    ):
        """Build a registry, optionally seeded.

        Built-in defaults (when enabled) are loaded before injected contents.
        Catalog entries are registered before schemas so references resolve.

        Raises:
            RegistryError: a seed entry was rejected.
        """
        self._lock = threading.RLock()
        self.encoding_schemes = EncodingSchemeCatalog()
        self.vocabularies = VocabularyCatalog()
        self.schemas = SchemaCatalog(self.encoding_schemes, self.vocabularies)
        self.designer = designer or SchemaDesigner()

        if load_defaults:
            self._seed(default_encoding_schemes(), default_vocabularies(), default_schemas())
        self._seed(encoding_schemes or [], vocabularies or [], schemas or [])

    @classmethod
    def from_contents(cls, contents: RegistryContents, load_defaults: bool = True) -> MetadataRegistry:
        return cls(
            schemas=contents.schemas,
            encoding_schemes=contents.encoding_schemes,
            vocabularies=contents.vocabularies,
            load_defaults=load_defaults,
        )

    def _seed(self, schemes, vocabularies, schemas) -> None:
        for scheme in schemes:
            self.encoding_schemes.register(scheme)
        for vocabulary in vocabularies:
            self.vocabularies.register(vocabulary)
        for schema in schemas:
            self.schemas.register(schema)

    def _locked(self, fn: Callable[[], R]) -> R:
        with self._lock:
            return fn()

    # ------------------------------------------------------------------
    # Schemas
    # ------------------------------------------------------------------

    def validate_schema(self, schema: Schema) -> ValidationResult:
        return self._locked(lambda: self.schemas.validate(schema))

    def register_schema(self, schema: Schema) -> RegistrationResult:
        try:
            with self._lock:
                stored = self.schemas.register(schema)
        except RegistryError as e:
            _log_rejection("schema registration", schema.schema_id, e)
            return RegistrationResult.failure(schema.schema_id, e)

        logger.info("Registered schema %s (v%s)", stored.schema_id, stored.schema_version)
        return RegistrationResult(
            success=True,
            schema_id=stored.schema_id,
            registration_timestamp=stored.registration_date,
            schema_version=stored.schema_version,
        )

    def get_schema(self, schema_id: str) -> Schema | None:
        return self._locked(lambda: self.schemas.get(schema_id))

    def list_schemas(self) -> list[SchemaSummary]:
        return self._locked(self.schemas.summaries)

    def update_schema(self, schema_id: str, update: SchemaUpdate) -> UpdateResult:
        try:
            with self._lock:
                updated = self.schemas.update(schema_id, update)
        except RegistryError as e:
            _log_rejection("schema update", schema_id, e)
            return UpdateResult.failure(schema_id, e)

        logger.info("Updated schema %s to v%s", schema_id, updated.schema_version)
        return UpdateResult(
            success=True,
            schema_id=schema_id,
            update_timestamp=updated.last_modified,
            new_version=updated.schema_version,
        )

    def delete_schema(self, schema_id: str) -> DeleteResult:
        try:
            with self._lock:
                self.schemas.remove(schema_id)
        except RegistryError as e:
            _log_rejection("schema deletion", schema_id, e)
            return DeleteResult.failure(schema_id, e)

        logger.info("Deleted schema %s", schema_id)
        return DeleteResult(success=True, schema_id=schema_id, deletion_timestamp=utcnow())

    def find_dependents(self, entry_id: str) -> list[str]:
        """IDs of schemas that list ``entry_id`` in their scheme or vocabulary references."""
        return self._locked(lambda: self.schemas.dependents_of(entry_id))

    def search_schemas(self, text: str, limit: int = 10, offset: int = 0) -> dict[str, Any]:
        """Case-insensitive search over schema ID, name and description, best match first."""
        query = text.lower()
        with self._lock:
            candidates = list(self.schemas)

        results = []
        for schema in candidates:
            searchable = " ".join(
                filter(None, [schema.schema_id, schema.schema_name, schema.description])
            ).lower()
            if query in searchable:
                results.append(
                    {
                        "schema_id": schema.schema_id,
                        "schema_name": schema.schema_name,
                        "schema_version": schema.schema_version,
                        "score": relevance_score(query, searchable),
                    }
                )
        results.sort(key=lambda r: r["score"], reverse=True)

        return {
            "query": text,
            "results": results[offset : offset + limit],
            "total": len(results),
            "limit": limit,
            "offset": offset,
        }

    # ------------------------------------------------------------------
    # Encoding schemes
    # ------------------------------------------------------------------

    def register_encoding_scheme(self, scheme: EncodingScheme) -> RegistrationResult:
        try:
            with self._lock:
                stored = self.encoding_schemes.register(scheme)
        except RegistryError as e:
            _log_rejection("encoding scheme registration", scheme.scheme_id, e)
            return RegistrationResult.failure(scheme.scheme_id, e)

        logger.info("Registered encoding scheme %s", stored.scheme_id)
        return RegistrationResult(
            success=True,
            schema_id=stored.scheme_id,
            registration_timestamp=utcnow(),
            schema_version=stored.scheme_version,
        )

    def get_encoding_scheme(self, scheme_id: str) -> EncodingScheme | None:
        return self._locked(lambda: self.encoding_schemes.get(scheme_id))

    def list_encoding_schemes(self) -> list[EncodingSchemeSummary]:
        return self._locked(self.encoding_schemes.summaries)

    def delete_encoding_scheme(self, scheme_id: str) -> DeleteResult:
        """Remove an encoding scheme unless a schema still references it."""
        try:
            with self._lock:
                self._remove_referenced(self.encoding_schemes, scheme_id, "encoding scheme")
        except RegistryError as e:
            _log_rejection("encoding scheme deletion", scheme_id, e)
            return DeleteResult.failure(scheme_id, e)

        logger.info("Deleted encoding scheme %s", scheme_id)
        return DeleteResult(success=True, schema_id=scheme_id, deletion_timestamp=utcnow())

    # ------------------------------------------------------------------
    # Controlled vocabularies
    # ------------------------------------------------------------------

    def register_controlled_vocabulary(self, vocabulary: ControlledVocabulary) -> RegistrationResult:
        try:
            with self._lock:
                stored = self.vocabularies.register(vocabulary)
        except RegistryError as e:
            _log_rejection("vocabulary registration", vocabulary.vocabulary_id, e)
            return RegistrationResult.failure(vocabulary.vocabulary_id, e)

        logger.info("Registered vocabulary %s", stored.vocabulary_id)
        return RegistrationResult(
            success=True,
            schema_id=stored.vocabulary_id,
            registration_timestamp=utcnow(),
            schema_version=stored.vocabulary_version,
        )

    def get_controlled_vocabulary(self, vocabulary_id: str) -> ControlledVocabulary | None:
        return self._locked(lambda: self.vocabularies.get(vocabulary_id))

    def list_controlled_vocabularies(self) -> list[VocabularySummary]:
        return self._locked(self.vocabularies.summaries)

    def delete_controlled_vocabulary(self, vocabulary_id: str) -> DeleteResult:
        """Remove a vocabulary unless a schema still references it."""
        try:
            with self._lock:
                self._remove_referenced(self.vocabularies, vocabulary_id, "vocabulary")
        except RegistryError as e:
            _log_rejection("vocabulary deletion", vocabulary_id, e)
            return DeleteResult.failure(vocabulary_id, e)

        logger.info("Deleted vocabulary %s", vocabulary_id)
        return DeleteResult(success=True, schema_id=vocabulary_id, deletion_timestamp=utcnow())

    def _remove_referenced(self, catalog, entry_id: str, label: str) -> None:
        if entry_id not in catalog:
            raise NotFoundError(entry_id, label.capitalize())
        dependents = self.schemas.dependents_of(entry_id)
        if dependents:
            raise DependencyError(entry_id, dependents, label)
        catalog.remove(entry_id)

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------

    def _require_schema(self, schema_id: str) -> Schema:
        schema = self.get_schema(schema_id)
        if schema is None:
            raise NotFoundError(schema_id)
        return schema

    def render_schema(self, schema_id: str, fmt: SchemaFormat | str) -> str:
        """Serialize a schema. Raises NotFoundError / UnsupportedTargetError."""
        target = parse_target(SchemaFormat, fmt, "format")
        return render_schema(self._require_schema(schema_id), target)

    def render_documentation(self, schema_id: str) -> SchemaDocumentation:
        with self._lock:
            schema = self._require_schema(schema_id)
            return build_documentation(
                schema,
                self.encoding_schemes.get,
                self.vocabularies.get,
                summarize_scheme,
                summarize_vocabulary,
            )

    def generate_implementation_skeleton(self, schema_id: str, language: ImplementationLanguage | str) -> str:
        target = parse_target(ImplementationLanguage, language, "language")
        return generate_implementation(self._require_schema(schema_id), target)

    def generate_validation_skeleton(self, schema_id: str, framework: ValidationFramework | str) -> str:
        target = parse_target(ValidationFramework, framework, "framework")
        return generate_validation(self._require_schema(schema_id), target)

    # ------------------------------------------------------------------
    # Design
    # ------------------------------------------------------------------

    def design_schema(self, requirements: SchemaRequirements, policies: DesignPolicies | None = None) -> Schema:
        """Draft (but do not register) a schema for ``requirements``."""
        designer = SchemaDesigner(policies) if policies is not None else self.designer
        return designer.design(requirements)

    # ------------------------------------------------------------------
    # Statistics, export and import
    # ------------------------------------------------------------------

    def statistics(self) -> dict[str, Any]:
        now = utcnow()
        day_ago = now - timedelta(hours=24)
        with self._lock:
            schemas = list(self.schemas)
            return {
                "schemas": len(schemas),
                "encoding_schemes": len(self.encoding_schemes),
                "vocabularies": len(self.vocabularies),
                "elements": sum(s.element_count for s in schemas),
                "recent_registrations": sum(1 for s in schemas if s.registration_date > day_ago),
                "generated_at": now.isoformat(),
            }

    def export_contents(self) -> dict[str, list[dict]]:
        with self._lock:
            return {
                "encoding_schemes": [to_dict(s) for s in self.encoding_schemes],
                "vocabularies": [to_dict(v) for v in self.vocabularies],
                "schemas": [to_dict(s) for s in self.schemas],
            }

    def import_contents(self, data: dict) -> list[RegistrationResult]:
        """Register every entry in an exported document through the normal register path."""
        try:
            contents = contents_from_dict(data)
        except ValidationError as e:
            return [RegistrationResult.failure("", e)]

        with self._lock:
            results = [self.register_encoding_scheme(s) for s in contents.encoding_schemes]
            results += [self.register_controlled_vocabulary(v) for v in contents.vocabularies]
            results += [self.register_schema(s) for s in contents.schemas]

        logger.info(
            "Imported %d of %d entries", sum(1 for r in results if r.success), len(results)
        )
        return results


def relevance_score(query: str, text: str) -> float:
    """Word-overlap relevance in [0, 1]: substring hit +1, exact word +2, per query word."""
    query_words = query.lower().split()
    if not query_words:
        return 0.0
    text_words = text.split()
    score = 0
    for q in query_words:
        for word in text_words:
            if q in word:
                score += 1
            if word == q:
                score += 2
    return min(score / len(query_words), 1.0)


def _log_rejection(action: str, entry_id: str, exc: RegistryError) -> None:
    count = len(exc.errors) if isinstance(exc, ValidationError) else 1
    logger.warning("Rejected %s for %s: %s (%d error(s))", action, entry_id, exc.kind, count)
