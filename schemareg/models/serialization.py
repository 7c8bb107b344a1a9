"""Dict <-> dataclass conversion for registry models.

Plain dicts are the interchange form for the JSON projection, YAML seed
files, the CLI and the HTTP layer. Keys are the dataclass field names.
"""

from __future__ import annotations

from dataclasses import asdict, fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from schemareg.errors import ValidationError
from schemareg.models.catalog import (
    ControlledVocabulary,
    EncodingScheme,
    SchemeType,
    SchemeValue,
    VocabularyTerm,
    VocabularyType,
)
from schemareg.models.schema import (
    DataType,
    DefaultValue,
    Element,
    ElementGroup,
    Obligation,
    ObligationLevel,
    Repeatability,
    RuleType,
    Schema,
    SchemaRequirements,
    SchemaUpdate,
    ValidationRule,
    utcnow,
)


def to_dict(obj: Any) -> Any:
    """Convert a model (or list of models) into JSON-compatible primitives."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return _plain(asdict(obj))
    return _plain(obj)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if is_dataclass(value) and not isinstance(value, type):
        return _plain(asdict(value))
    return value


def _enum(enum_cls: type[Enum], value: Any, label: str, default: Enum | None = None):
    if value is None or value == "":
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).upper())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError([f"Invalid {label} '{value}' (expected one of: {allowed})"]) from None


def _datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            raise ValidationError([f"Invalid timestamp '{value}'"]) from None
    return utcnow()


def _require_mapping(data: Any, label: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError([f"{label} entry must be a mapping, got {type(data).__name__}"])


def _pick(data: Any, cls: type) -> dict:
    _require_mapping(data, cls.__name__)
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


# --- Schema parts ---


def element_from_dict(data: dict) -> Element:
    values = _pick(data, Element)
    values["data_type"] = _enum(DataType, values.get("data_type"), "data type")
    values["obligation_level"] = _enum(
        Obligation, values.get("obligation_level"), "obligation level", Obligation.OPTIONAL
    )
    values["repeatability"] = _enum(
        Repeatability, values.get("repeatability"), "repeatability", Repeatability.NOT_REPEATABLE
    )
    values["child_elements"] = list(values.get("child_elements") or [])
    values["related_elements"] = list(values.get("related_elements") or [])
    return Element(**values)


def group_from_dict(data: dict) -> ElementGroup:
    values = _pick(data, ElementGroup)
    values["elements"] = list(values.get("elements") or [])
    values["child_groups"] = list(values.get("child_groups") or [])
    return ElementGroup(**values)


def rule_from_dict(data: dict) -> ValidationRule:
    values = _pick(data, ValidationRule)
    values["rule_type"] = _enum(RuleType, values.get("rule_type"), "rule type", RuleType.CUSTOM)
    return ValidationRule(**values)


def obligation_level_from_dict(data: dict) -> ObligationLevel:
    return ObligationLevel(**_pick(data, ObligationLevel))


def default_value_from_dict(data: dict) -> DefaultValue:
    return DefaultValue(**_pick(data, DefaultValue))


def schema_from_dict(data: dict) -> Schema:
    """Build a Schema from its dict form. Timestamps default to now."""
    _require_mapping(data, "Schema")
    return Schema(
        schema_id=data.get("schema_id", ""),
        schema_name=data.get("schema_name", ""),
        schema_version=data.get("schema_version") or "1.0.0",
        description=data.get("description", ""),
        elements=[element_from_dict(e) for e in data.get("elements") or []],
        element_groups=[group_from_dict(g) for g in data.get("element_groups") or []],
        encoding_schemes=list(data.get("encoding_schemes") or []),
        controlled_vocabularies=list(data.get("controlled_vocabularies") or []),
        validation_rules=[rule_from_dict(r) for r in data.get("validation_rules") or []],
        obligation_levels=[
            obligation_level_from_dict(o) for o in data.get("obligation_levels") or []
        ],
        default_values=[default_value_from_dict(d) for d in data.get("default_values") or []],
        registration_date=_datetime(data.get("registration_date")),
        last_modified=_datetime(data.get("last_modified")),
    )


_UPDATE_PARSERS = {
    "elements": element_from_dict,
    "element_groups": group_from_dict,
    "validation_rules": rule_from_dict,
    "obligation_levels": obligation_level_from_dict,
    "default_values": default_value_from_dict,
}


def schema_update_from_dict(data: dict) -> SchemaUpdate:
    """Build a SchemaUpdate, rejecting keys that are not updatable."""
    _require_mapping(data, "SchemaUpdate")
    allowed = {f.name for f in fields(SchemaUpdate)}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValidationError([f"Field {key} cannot be updated" for key in unknown])

    values: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        parser = _UPDATE_PARSERS.get(key)
        if parser is not None:
            values[key] = [parser(item) for item in value]
        elif key in ("encoding_schemes", "controlled_vocabularies"):
            values[key] = list(value)
        else:
            values[key] = value
    return SchemaUpdate(**values)


def requirements_from_dict(data: dict) -> SchemaRequirements:
    values = _pick(data, SchemaRequirements)
    for key in ("business_requirements", "technical_requirements", "compliance_requirements"):
        values[key] = list(values.get(key) or [])
    values.setdefault("domain", "")
    values.setdefault("schema_name", "")
    return SchemaRequirements(**values)


# --- Catalog entries ---


def encoding_scheme_from_dict(data: dict) -> EncodingScheme:
    values = _pick(data, EncodingScheme)
    values["scheme_type"] = _enum(
        SchemeType, values.get("scheme_type"), "scheme type", SchemeType.CUSTOM
    )
    values["scheme_values"] = [
        SchemeValue(**{"value": "", "label": "", **_pick(v, SchemeValue)})
        for v in values.get("scheme_values") or []
    ]
    values["validation_rules"] = [rule_from_dict(r) for r in values.get("validation_rules") or []]
    return EncodingScheme(**values)


def vocabulary_from_dict(data: dict) -> ControlledVocabulary:
    values = _pick(data, ControlledVocabulary)
    values["vocabulary_type"] = _enum(
        VocabularyType,
        values.get("vocabulary_type"),
        "vocabulary type",
        VocabularyType.RECORD_CLASSIFICATION,
    )
    values["terms"] = [_term_from_dict(t) for t in values.get("terms") or []]
    return ControlledVocabulary(**values)


def _term_from_dict(data: dict) -> VocabularyTerm:
    values = _pick(data, VocabularyTerm)
    values.setdefault("term_id", "")
    values.setdefault("term_label", "")
    values["narrower_terms"] = list(values.get("narrower_terms") or [])
    values["related_terms"] = list(values.get("related_terms") or [])
    return VocabularyTerm(**values)
