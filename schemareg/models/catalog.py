"""Encoding schemes and controlled vocabularies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from schemareg.models.schema import ValidationRule


class SchemeType(Enum):
    LANGUAGE_CODES = "LANGUAGE_CODES"
    COUNTRY_CODES = "COUNTRY_CODES"
    CURRENCY_CODES = "CURRENCY_CODES"
    TIME_CODES = "TIME_CODES"
    CUSTOM = "CUSTOM"


class VocabularyType(Enum):
    RECORD_CLASSIFICATION = "RECORD_CLASSIFICATION"
    SECURITY_CLASSIFICATION = "SECURITY_CLASSIFICATION"
    BUSINESS_CLASSIFICATION = "BUSINESS_CLASSIFICATION"
    TECHNICAL_CLASSIFICATION = "TECHNICAL_CLASSIFICATION"


# --- Encoding schemes ---


@dataclass
class SchemeValue:
    value: str
    label: str
    definition: str | None = None


@dataclass
class EncodingScheme:
    """A reusable enumerable value set, e.g. language or country codes."""

    scheme_id: str = ""
    scheme_name: str = ""
    scheme_type: SchemeType = SchemeType.CUSTOM
    scheme_values: list[SchemeValue] = field(default_factory=list)
    validation_rules: list[ValidationRule] = field(default_factory=list)
    format_specification: str = ""
    scheme_description: str = ""
    scheme_authority: str = ""
    scheme_version: str = ""

    def has_value(self, value: str) -> bool:
        return any(v.value == value for v in self.scheme_values)


# --- Controlled vocabularies ---


@dataclass
class VocabularyTerm:
    term_id: str
    term_label: str
    term_definition: str = ""
    broader_term: str | None = None
    narrower_terms: list[str] = field(default_factory=list)
    related_terms: list[str] = field(default_factory=list)


@dataclass
class ControlledVocabulary:
    """A reusable hierarchical term set (broader / narrower / related)."""

    vocabulary_id: str = ""
    vocabulary_name: str = ""
    vocabulary_type: VocabularyType = VocabularyType.RECORD_CLASSIFICATION
    vocabulary_version: str = ""
    vocabulary_description: str = ""
    terms: list[VocabularyTerm] = field(default_factory=list)
    vocabulary_authority: str = ""
    vocabulary_uri: str = ""

    def get_term(self, term_id: str) -> VocabularyTerm | None:
        return next((t for t in self.terms if t.term_id == term_id), None)
