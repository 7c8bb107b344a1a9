"""Schema data models — schemas, elements, groups and their auxiliary records.

A Schema owns its Elements, ElementGroups, ValidationRules, ObligationLevels
and DefaultValues. Encoding schemes and controlled vocabularies are
referenced by ID only; their content lives in the catalogs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class DataType(Enum):
    """Value type of a metadata element."""

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DATETIME = "DATETIME"
    ARRAY = "ARRAY"  # Ordered list
    OBJECT = "OBJECT"  # Structured object
    ENUM = "ENUM"


class Obligation(Enum):
    """Whether an element must be supplied."""

    MANDATORY = "MANDATORY"
    OPTIONAL = "OPTIONAL"
    CONDITIONAL = "CONDITIONAL"


class Repeatability(Enum):
    NOT_REPEATABLE = "NOT_REPEATABLE"
    REPEATABLE = "REPEATABLE"


class RuleType(Enum):
    """Expression language of a validation rule."""

    REGEX = "REGEX"
    RANGE = "RANGE"  # "min..max", either bound optional
    ENUM = "ENUM"  # Comma-separated allowed values
    CUSTOM = "CUSTOM"  # Name of a registered predicate


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Element ---


@dataclass
class Element:
    """A single metadata field definition."""

    element_id: str = ""
    element_name: str = ""
    element_definition: str = ""
    data_type: DataType | None = None
    max_length: int | None = None
    min_length: int | None = None
    pattern: str | None = None
    obligation_level: Obligation = Obligation.OPTIONAL
    repeatability: Repeatability = Repeatability.NOT_REPEATABLE
    default_value: Any = None

    # Informational links, not enforced as a graph
    parent_element: str | None = None
    child_elements: list[str] = field(default_factory=list)
    related_elements: list[str] = field(default_factory=list)

    controlled_vocabulary: str | None = None
    encoding_scheme: str | None = None


@dataclass
class ElementGroup:
    """A named grouping of element IDs, optionally nested."""

    group_id: str = ""
    group_name: str = ""
    description: str = ""
    elements: list[str] = field(default_factory=list)
    parent_group: str | None = None
    child_groups: list[str] = field(default_factory=list)


# --- Auxiliary records ---


@dataclass
class ValidationRule:
    rule_id: str = ""
    rule_name: str = ""
    rule_type: RuleType = RuleType.CUSTOM
    rule_expression: str = ""
    rule_description: str = ""
    error_message: str = ""
    element_id: str | None = None  # Element the rule applies to, if any


@dataclass
class ObligationLevel:
    level_id: str = ""
    level_name: str = ""
    level_description: str = ""
    is_required: bool = False
    is_conditional: bool = False
    condition: str | None = None


@dataclass
class DefaultValue:
    element_id: str = ""
    default_value: Any = None
    value_type: str = ""
    value_description: str = ""


# --- Schema ---


@dataclass
class Schema:
    """A named, versioned composite metadata definition."""

    # Identity
    schema_id: str = ""
    schema_name: str = ""
    schema_version: str = "1.0.0"
    description: str = ""

    # Structure
    elements: list[Element] = field(default_factory=list)
    element_groups: list[ElementGroup] = field(default_factory=list)

    # References into the other catalogs (IDs only)
    encoding_schemes: list[str] = field(default_factory=list)
    controlled_vocabularies: list[str] = field(default_factory=list)

    validation_rules: list[ValidationRule] = field(default_factory=list)
    obligation_levels: list[ObligationLevel] = field(default_factory=list)
    default_values: list[DefaultValue] = field(default_factory=list)

    registration_date: datetime = field(default_factory=utcnow)
    last_modified: datetime = field(default_factory=utcnow)

    @property
    def element_count(self) -> int:
        return len(self.elements)

    def references(self, entry_id: str) -> bool:
        """True if this schema lists ``entry_id`` among its scheme or vocabulary references."""
        return entry_id in self.encoding_schemes or entry_id in self.controlled_vocabularies


@dataclass
class SchemaUpdate:
    """Partial update for a registered schema.

    ``None`` means "leave unchanged". Identity, version and timestamps are
    managed by the catalog and cannot be supplied here.
    """

    schema_name: str | None = None
    description: str | None = None
    elements: list[Element] | None = None
    element_groups: list[ElementGroup] | None = None
    encoding_schemes: list[str] | None = None
    controlled_vocabularies: list[str] | None = None
    validation_rules: list[ValidationRule] | None = None
    obligation_levels: list[ObligationLevel] | None = None
    default_values: list[DefaultValue] | None = None

    def changed_fields(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self) -> bool:
        return not self.changed_fields()


@dataclass
class SchemaRequirements:
    """Structured requirements document consumed by the schema designer."""

    domain: str
    schema_name: str
    description: str = ""
    business_requirements: list[str] = field(default_factory=list)
    technical_requirements: list[str] = field(default_factory=list)
    compliance_requirements: list[str] = field(default_factory=list)


def bump_patch(version: str) -> str:
    """Increment the patch component of a ``major.minor.patch`` version.

    Each component contributes its leading digits, so pre-release and build
    suffixes (``1.0.0-beta``, ``1.0.0+build.5``) are dropped. Missing or
    non-numeric components are treated as zero.
    """
    parts = (version or "").split(".")
    parts += ["0"] * (3 - len(parts))
    major, minor, patch = (_leading_int(p) for p in parts[:3])
    return f"{major}.{minor}.{patch + 1}"


def _leading_int(part: str) -> int:
    match = re.match(r"\d+", part.strip())
    return int(match.group()) if match else 0
