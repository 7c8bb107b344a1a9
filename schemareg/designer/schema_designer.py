"""Schema designer — drafts a schema from a requirements document.

The designer fixes the shape of the draft (ID, name, version) and hands
each part of the body to a selection policy. Policies are plain callables
collected in :class:`DesignPolicies` so callers can swap any of them.
"""

from __future__ import annotations

import copy
import re
import time
from dataclasses import dataclass
from typing import Callable

from schemareg.models.schema import (
    DataType,
    DefaultValue,
    Element,
    ElementGroup,
    Obligation,
    ObligationLevel,
    RuleType,
    Schema,
    SchemaRequirements,
    ValidationRule,
)

DRAFT_VERSION = "1.0.0"
_NAME_LIMIT = 60


@dataclass
class DesignPolicies:
    select_elements: Callable[[SchemaRequirements], list[Element]]
    structure_elements: Callable[[list[Element]], list[ElementGroup]]
    select_encoding_schemes: Callable[[SchemaRequirements], list[str]]
    select_vocabularies: Callable[[SchemaRequirements], list[str]]
    derive_rules: Callable[[list[Element]], list[ValidationRule]]
    assign_obligations: Callable[[list[Element]], list[ObligationLevel]]
    assign_defaults: Callable[[list[Element]], list[DefaultValue]]

    @classmethod
    def empty(cls) -> DesignPolicies:
        """Policies that select nothing; the draft carries only its identity."""
        return cls(
            select_elements=lambda requirements: [],
            structure_elements=lambda elements: [],
            select_encoding_schemes=lambda requirements: [],
            select_vocabularies=lambda requirements: [],
            derive_rules=lambda elements: [],
            assign_obligations=lambda elements: [],
            assign_defaults=lambda elements: [],
        )

    @classmethod
    def default(cls) -> DesignPolicies:
        return cls(
            select_elements=select_required_elements,
            structure_elements=structure_elements,
            select_encoding_schemes=select_encoding_schemes,
            select_vocabularies=select_controlled_vocabularies,
            derive_rules=establish_validation_rules,
            assign_obligations=establish_obligation_levels,
            assign_defaults=establish_default_values,
        )


class SchemaDesigner:
    """Builds draft schemas. Never fails; an empty draft is a valid outcome."""

    def __init__(self, policies: DesignPolicies | None = None, clock: Callable[[], float] = time.time):
        self.policies = policies or DesignPolicies.default()
        self._clock = clock

    def design(self, requirements: SchemaRequirements) -> Schema:
        p = self.policies
        elements = p.select_elements(requirements)
        return Schema(
            schema_id=self.generate_schema_id(requirements.domain),
            schema_name=requirements.schema_name,
            schema_version=DRAFT_VERSION,
            description=requirements.description,
            elements=elements,
            element_groups=p.structure_elements(elements),
            encoding_schemes=p.select_encoding_schemes(requirements),
            controlled_vocabularies=p.select_vocabularies(requirements),
            validation_rules=p.derive_rules(elements),
            obligation_levels=p.assign_obligations(elements),
            default_values=p.assign_defaults(elements),
        )

    def generate_schema_id(self, domain: str) -> str:
        return f"{domain}-metadata-schema-{int(self._clock() * 1000)}"


# ---------------------------------------------------------------------------
# Default policies
# ---------------------------------------------------------------------------

_IDENTIFIER = Element(
    element_id="recordId",
    element_name="Record Identifier",
    element_definition="Unique identifier for the record",
    data_type=DataType.STRING,
    max_length=255,
    obligation_level=Obligation.MANDATORY,
)

# element ID prefix -> (group ID, group name)
_GROUPS = {
    "recordId": ("identification", "Identification"),
    "business": ("business", "Business Requirements"),
    "compliance": ("compliance", "Compliance Requirements"),
}


def _requirement_element(category: str, index: int, text: str, obligation: Obligation) -> Element:
    name = text.strip()
    if len(name) > _NAME_LIMIT:
        name = name[: _NAME_LIMIT - 3].rstrip() + "..."
    return Element(
        element_id=f"{category}Requirement{index}",
        element_name=name,
        element_definition=text.strip(),
        data_type=DataType.STRING,
        max_length=500,
        obligation_level=obligation,
    )


def select_required_elements(requirements: SchemaRequirements) -> list[Element]:
    """Identifier plus one element per business and compliance requirement.

    Compliance-driven elements are mandatory; business-driven ones optional.
    """
    elements = [copy.deepcopy(_IDENTIFIER)]
    for i, text in enumerate(requirements.business_requirements, start=1):
        elements.append(_requirement_element("business", i, text, Obligation.OPTIONAL))
    for i, text in enumerate(requirements.compliance_requirements, start=1):
        elements.append(_requirement_element("compliance", i, text, Obligation.MANDATORY))
    return elements


def structure_elements(elements: list[Element]) -> list[ElementGroup]:
    members: dict[str, list[str]] = {}
    for element in elements:
        for prefix in _GROUPS:
            if element.element_id.startswith(prefix):
                members.setdefault(prefix, []).append(element.element_id)
                break

    return [
        ElementGroup(group_id=_GROUPS[prefix][0], group_name=_GROUPS[prefix][1], elements=ids)
        for prefix, ids in members.items()
    ]


def _mentions(texts: list[str], *words: str) -> bool:
    pattern = re.compile(r"\b(" + "|".join(words) + r")", re.IGNORECASE)
    return any(pattern.search(t) for t in texts)


def _all_requirements(requirements: SchemaRequirements) -> list[str]:
    return (
        requirements.business_requirements
        + requirements.technical_requirements
        + requirements.compliance_requirements
    )


def select_encoding_schemes(requirements: SchemaRequirements) -> list[str]:
    texts = _all_requirements(requirements)
    selected = []
    if _mentions(texts, "language"):
        selected.append("iso-639-1")
    if _mentions(texts, "country", "countries", "jurisdiction"):
        selected.append("iso-3166-1-alpha-2")
    return selected


def select_controlled_vocabularies(requirements: SchemaRequirements) -> list[str]:
    selected = []
    if _mentions(_all_requirements(requirements), "record type", "record classification"):
        selected.append("record-types")
    if _mentions(requirements.compliance_requirements, "security", "classif", "confidential"):
        selected.append("security-levels")
    return selected


def establish_validation_rules(elements: list[Element]) -> list[ValidationRule]:
    return [
        ValidationRule(
            rule_id=f"{e.element_id}-max-length",
            rule_name=f"{e.element_name} length",
            rule_type=RuleType.REGEX,
            rule_expression=rf"[\s\S]{{0,{e.max_length}}}",
            rule_description=f"At most {e.max_length} characters",
            error_message=f"{e.element_name} must be at most {e.max_length} characters",
            element_id=e.element_id,
        )
        for e in elements
        if e.data_type == DataType.STRING and e.max_length
    ]


def establish_obligation_levels(elements: list[Element]) -> list[ObligationLevel]:
    seen: list[Obligation] = []
    for e in elements:
        if e.obligation_level not in seen:
            seen.append(e.obligation_level)
    return [
        ObligationLevel(
            level_id=o.value.lower(),
            level_name=o.value.title(),
            level_description=f"Elements that are {o.value.lower()}",
            is_required=o == Obligation.MANDATORY,
            is_conditional=o == Obligation.CONDITIONAL,
        )
        for o in seen
    ]


def establish_default_values(elements: list[Element]) -> list[DefaultValue]:
    return [
        DefaultValue(
            element_id=e.element_id,
            default_value=e.default_value,
            value_type=e.data_type.value if e.data_type else "",
            value_description=f"Default for {e.element_name}",
        )
        for e in elements
        if e.default_value is not None
    ]
