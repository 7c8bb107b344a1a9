"""Human-oriented schema documentation.

Referenced encoding schemes and vocabularies are resolved against the live
catalogs when the documentation is built; references that no longer
resolve are left out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from schemareg.models.catalog import ControlledVocabulary, EncodingScheme
from schemareg.models.results import EncodingSchemeSummary, VocabularySummary
from schemareg.models.schema import DefaultValue, ObligationLevel, Schema, ValidationRule


@dataclass
class ElementDocumentation:
    element_id: str
    element_name: str
    definition: str
    data_type: str
    obligation_level: str
    repeatability: str


@dataclass
class GroupDocumentation:
    group_id: str
    group_name: str
    description: str
    elements: list[str] = field(default_factory=list)


@dataclass
class SchemaDocumentation:
    schema_id: str
    schema_name: str
    schema_version: str
    description: str
    elements: list[ElementDocumentation] = field(default_factory=list)
    element_groups: list[GroupDocumentation] = field(default_factory=list)
    encoding_schemes: list[EncodingSchemeSummary] = field(default_factory=list)
    controlled_vocabularies: list[VocabularySummary] = field(default_factory=list)
    validation_rules: list[ValidationRule] = field(default_factory=list)
    obligation_levels: list[ObligationLevel] = field(default_factory=list)
    default_values: list[DefaultValue] = field(default_factory=list)

    def to_markdown(self) -> str:
        lines = [
            f"# {self.schema_name}",
            f"**Schema ID:** {self.schema_id}  ",
            f"**Version:** {self.schema_version}",
            "",
            self.description,
            "",
            "## Elements",
            "| ID | Name | Type | Obligation | Repeatability | Definition |",
            "|----|------|------|------------|---------------|------------|",
        ]
        for e in self.elements:
            lines.append(
                f"| {e.element_id} | {e.element_name} | {e.data_type} | "
                f"{e.obligation_level} | {e.repeatability} | {e.definition} |"
            )

        if self.element_groups:
            lines += ["", "## Element Groups"]
            for g in self.element_groups:
                lines.append(f"- **{g.group_name}** ({g.group_id}): {', '.join(g.elements)}")
                if g.description:
                    lines.append(f"  {g.description}")

        if self.encoding_schemes:
            lines += ["", "## Encoding Schemes"]
            for s in self.encoding_schemes:
                lines.append(f"- **{s.scheme_name}** ({s.scheme_id}, v{s.scheme_version}): {s.value_count} values")

        if self.controlled_vocabularies:
            lines += ["", "## Controlled Vocabularies"]
            for v in self.controlled_vocabularies:
                lines.append(
                    f"- **{v.vocabulary_name}** ({v.vocabulary_id}, v{v.vocabulary_version}): {v.term_count} terms"
                )

        if self.validation_rules:
            lines += ["", "## Validation Rules"]
            for r in self.validation_rules:
                lines.append(f"- **{r.rule_name}** ({r.rule_type.value}): `{r.rule_expression}`")

        return "\n".join(lines) + "\n"


def build_documentation(
    schema: Schema,
    get_scheme: Callable[[str], EncodingScheme | None],
    get_vocabulary: Callable[[str], ControlledVocabulary | None],
    summarize_scheme: Callable[[EncodingScheme], EncodingSchemeSummary],
    summarize_vocabulary: Callable[[ControlledVocabulary], VocabularySummary],
) -> SchemaDocumentation:
    schemes = [get_scheme(i) for i in schema.encoding_schemes]
    vocabularies = [get_vocabulary(i) for i in schema.controlled_vocabularies]

    return SchemaDocumentation(
        schema_id=schema.schema_id,
        schema_name=schema.schema_name,
        schema_version=schema.schema_version,
        description=schema.description,
        elements=[
            ElementDocumentation(
                element_id=e.element_id,
                element_name=e.element_name,
                definition=e.element_definition,
                data_type=e.data_type.value if e.data_type else "",
                obligation_level=e.obligation_level.value,
                repeatability=e.repeatability.value,
            )
            for e in schema.elements
        ],
        element_groups=[
            GroupDocumentation(
                group_id=g.group_id,
                group_name=g.group_name,
                description=g.description,
                elements=list(g.elements),
            )
            for g in schema.element_groups
        ],
        encoding_schemes=[summarize_scheme(s) for s in schemes if s is not None],
        controlled_vocabularies=[summarize_vocabulary(v) for v in vocabularies if v is not None],
        validation_rules=list(schema.validation_rules),
        obligation_levels=list(schema.obligation_levels),
        default_values=list(schema.default_values),
    )
