"""Schema validator — structural and referential checks.

Every check runs; problems are aggregated into a single list so a caller
sees all of them in one pass. Referential checks consult the encoding
scheme and vocabulary catalogs (anything supporting ``in``).
"""

from __future__ import annotations

from typing import Container

from schemareg.models.catalog import ControlledVocabulary, EncodingScheme
from schemareg.models.results import ValidationResult
from schemareg.models.schema import Element, ElementGroup, Schema, ValidationRule
from schemareg.validation.rules import expression_issues


def validate_schema(
    schema: Schema,
    encoding_schemes: Container[str],
    vocabularies: Container[str],
) -> ValidationResult:
    """Validate a candidate schema against the current catalogs.

    Args:
        schema: The schema to check.
        encoding_schemes: Registered encoding scheme IDs.
        vocabularies: Registered controlled vocabulary IDs.

    Returns:
        ValidationResult listing every problem found.
    """
    errors: list[str] = []

    if not schema.schema_id or not schema.schema_name:
        errors.append("Schema ID and name are required")

    for i, element in enumerate(schema.elements):
        errors.extend(f"elements[{i}]: {e}" for e in validate_element(element))

    for i, group in enumerate(schema.element_groups):
        errors.extend(f"element_groups[{i}]: {e}" for e in validate_element_group(group))

    for i, rule in enumerate(schema.validation_rules):
        errors.extend(f"validation_rules[{i}]: {e}" for e in validate_rule(rule))

    for scheme_id in schema.encoding_schemes:
        if scheme_id not in encoding_schemes:
            errors.append(f"Encoding scheme {scheme_id} not found")

    for vocabulary_id in schema.controlled_vocabularies:
        if vocabulary_id not in vocabularies:
            errors.append(f"Controlled vocabulary {vocabulary_id} not found")

    return ValidationResult.from_errors(errors)


def validate_element(element: Element) -> list[str]:
    errors: list[str] = []
    if not element.element_id or not element.element_name:
        errors.append("Element ID and name are required")
    if element.data_type is None:
        errors.append("Data type is required")
    if element.max_length is not None and element.max_length <= 0:
        errors.append("Max length must be positive")
    return errors


def validate_element_group(group: ElementGroup) -> list[str]:
    errors: list[str] = []
    if not group.group_id or not group.group_name:
        errors.append("Group ID and name are required")
    if not group.elements:
        errors.append("Group must contain at least one element")
    return errors


def validate_rule(rule: ValidationRule) -> list[str]:
    errors: list[str] = []
    if not rule.rule_id or not rule.rule_name:
        errors.append("Rule ID and name are required")
    if not rule.rule_expression:
        errors.append("Rule expression is required")
    else:
        errors.extend(expression_issues(rule))
    return errors


# --- Catalog entries ---


def validate_encoding_scheme(scheme: EncodingScheme) -> ValidationResult:
    errors: list[str] = []
    if not scheme.scheme_id or not scheme.scheme_name:
        errors.append("Scheme ID and name are required")
    if not scheme.scheme_values:
        errors.append("Scheme must contain at least one value")
    return ValidationResult.from_errors(errors)


def validate_vocabulary(vocabulary: ControlledVocabulary) -> ValidationResult:
    errors: list[str] = []
    if not vocabulary.vocabulary_id or not vocabulary.vocabulary_name:
        errors.append("Vocabulary ID and name are required")
    if not vocabulary.terms:
        errors.append("Vocabulary must contain at least one term")
    for i, term in enumerate(vocabulary.terms):
        if not term.term_id or not term.term_label:
            errors.append(f"terms[{i}]: Term ID and label are required")
    return ValidationResult.from_errors(errors)
