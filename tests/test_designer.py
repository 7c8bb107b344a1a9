"""Tests for the schema designer and its default policies."""

from schemareg.designer.schema_designer import DesignPolicies, SchemaDesigner
from schemareg.models.schema import DataType, Obligation, RuleType, SchemaRequirements
from schemareg.registry.metadata_registry import MetadataRegistry
from schemareg.validation.rules import evaluate_rule


def _requirements(**overrides) -> SchemaRequirements:
    values = {
        "domain": "finance",
        "schema_name": "Ledger Schema",
        "description": "Ledger entries",
        "business_requirements": ["Track the language of each entry", "Record the counterparty"],
        "technical_requirements": ["Entries carry a record type"],
        "compliance_requirements": ["Retain the security classification of each entry"],
    }
    values.update(overrides)
    return SchemaRequirements(**values)


def _fixed_clock():
    return 1700000000.123


def test_schema_id_uses_domain_and_clock():
    designer = SchemaDesigner(clock=_fixed_clock)
    assert designer.generate_schema_id("finance") == "finance-metadata-schema-1700000000123"


def test_empty_policies_produce_identity_only_draft():
    designer = SchemaDesigner(DesignPolicies.empty(), clock=_fixed_clock)
    draft = designer.design(_requirements())
    assert draft.schema_id == "finance-metadata-schema-1700000000123"
    assert draft.schema_name == "Ledger Schema"
    assert draft.schema_version == "1.0.0"
    assert draft.description == "Ledger entries"
    assert draft.elements == []
    assert draft.element_groups == []
    assert draft.encoding_schemes == []
    assert draft.controlled_vocabularies == []
    assert draft.validation_rules == []


def test_default_policies_select_elements():
    draft = SchemaDesigner().design(_requirements())
    assert [e.element_id for e in draft.elements] == [
        "recordId",
        "businessRequirement1",
        "businessRequirement2",
        "complianceRequirement1",
    ]
    assert draft.elements[1].obligation_level == Obligation.OPTIONAL
    assert draft.elements[3].obligation_level == Obligation.MANDATORY
    assert draft.elements[1].element_name == "Track the language of each entry"
    assert all(e.data_type == DataType.STRING for e in draft.elements)


def test_long_requirement_names_are_truncated():
    text = "A requirement that keeps going " * 5
    draft = SchemaDesigner().design(_requirements(business_requirements=[text]))
    name = draft.elements[1].element_name
    assert len(name) <= 60
    assert name.endswith("...")
    assert draft.elements[1].element_definition == text.strip()


def test_default_policies_group_elements():
    draft = SchemaDesigner().design(_requirements())
    groups = {g.group_id: g.elements for g in draft.element_groups}
    assert groups == {
        "identification": ["recordId"],
        "business": ["businessRequirement1", "businessRequirement2"],
        "compliance": ["complianceRequirement1"],
    }


def test_default_policies_select_catalog_references():
    draft = SchemaDesigner().design(_requirements())
    assert draft.encoding_schemes == ["iso-639-1"]
    assert draft.controlled_vocabularies == ["record-types", "security-levels"]

    plain = SchemaDesigner().design(
        _requirements(business_requirements=["Operate in each jurisdiction"], technical_requirements=[],
                      compliance_requirements=[])
    )
    assert plain.encoding_schemes == ["iso-3166-1-alpha-2"]
    assert plain.controlled_vocabularies == []


def test_default_policies_derive_rules_and_obligations():
    draft = SchemaDesigner().design(_requirements())
    assert [r.rule_id for r in draft.validation_rules] == [f"{e.element_id}-max-length" for e in draft.elements]
    rule = draft.validation_rules[0]
    assert rule.rule_type == RuleType.REGEX
    assert evaluate_rule(rule, "x" * 255).passed
    assert not evaluate_rule(rule, "x" * 256).passed

    assert [o.level_id for o in draft.obligation_levels] == ["mandatory", "optional"]
    assert draft.obligation_levels[0].is_required
    assert draft.default_values == []


def test_draft_registers_against_default_catalogs():
    registry = MetadataRegistry()
    draft = registry.design_schema(_requirements())
    assert registry.validate_schema(draft).valid
    result = registry.register_schema(draft)
    assert result.success
    assert result.schema_version == "1.0.0"


def test_design_with_empty_requirements_never_fails():
    registry = MetadataRegistry()
    draft = registry.design_schema(SchemaRequirements(domain="", schema_name=""), DesignPolicies.empty())
    assert draft.schema_id.startswith("-metadata-schema-")
    assert draft.elements == []

    draft = registry.design_schema(SchemaRequirements(domain="x", schema_name="X"))
    assert [e.element_id for e in draft.elements] == ["recordId"]
