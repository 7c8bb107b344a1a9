"""Pydantic models for API request/response serialization.

These models mirror the registry dataclasses. Enum-valued fields are plain
strings here; they are checked when the request is converted into registry
models, so bad values come back as validation errors with the full list.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Schema parts
# ---------------------------------------------------------------------------


class ElementModel(BaseModel):
    element_id: str = ""
    element_name: str = ""
    element_definition: str = ""
    data_type: Optional[str] = None
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    pattern: Optional[str] = None
    obligation_level: Optional[str] = None
    repeatability: Optional[str] = None
    default_value: Any = None
    parent_element: Optional[str] = None
    child_elements: list[str] = Field(default_factory=list)
    related_elements: list[str] = Field(default_factory=list)
    controlled_vocabulary: Optional[str] = None
    encoding_scheme: Optional[str] = None


class ElementGroupModel(BaseModel):
    group_id: str = ""
    group_name: str = ""
    description: str = ""
    elements: list[str] = Field(default_factory=list)
    parent_group: Optional[str] = None
    child_groups: list[str] = Field(default_factory=list)


class ValidationRuleModel(BaseModel):
    rule_id: str = ""
    rule_name: str = ""
    rule_type: Optional[str] = None
    rule_expression: str = ""
    rule_description: str = ""
    error_message: str = ""
    element_id: Optional[str] = None


class ObligationLevelModel(BaseModel):
    level_id: str = ""
    level_name: str = ""
    level_description: str = ""
    is_required: bool = False
    is_conditional: bool = False
    condition: Optional[str] = None


class DefaultValueModel(BaseModel):
    element_id: str = ""
    default_value: Any = None
    value_type: str = ""
    value_description: str = ""


class SchemaRequest(BaseModel):
    """Body for schema registration."""

    model_config = ConfigDict(extra="forbid")

    schema_id: str = ""
    schema_name: str = ""
    schema_version: str = "1.0.0"
    description: str = ""
    elements: list[ElementModel] = Field(default_factory=list)
    element_groups: list[ElementGroupModel] = Field(default_factory=list)
    encoding_schemes: list[str] = Field(default_factory=list)
    controlled_vocabularies: list[str] = Field(default_factory=list)
    validation_rules: list[ValidationRuleModel] = Field(default_factory=list)
    obligation_levels: list[ObligationLevelModel] = Field(default_factory=list)
    default_values: list[DefaultValueModel] = Field(default_factory=list)


class SchemaUpdateRequest(BaseModel):
    """Body for a partial schema update. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    schema_name: Optional[str] = None
    description: Optional[str] = None
    elements: Optional[list[ElementModel]] = None
    element_groups: Optional[list[ElementGroupModel]] = None
    encoding_schemes: Optional[list[str]] = None
    controlled_vocabularies: Optional[list[str]] = None
    validation_rules: Optional[list[ValidationRuleModel]] = None
    obligation_levels: Optional[list[ObligationLevelModel]] = None
    default_values: Optional[list[DefaultValueModel]] = None


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


class SchemeValueModel(BaseModel):
    value: str
    label: str
    definition: Optional[str] = None


class EncodingSchemeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scheme_id: str = ""
    scheme_name: str = ""
    scheme_type: Optional[str] = None
    scheme_values: list[SchemeValueModel] = Field(default_factory=list)
    validation_rules: list[ValidationRuleModel] = Field(default_factory=list)
    format_specification: str = ""
    scheme_description: str = ""
    scheme_authority: str = ""
    scheme_version: str = ""


class VocabularyTermModel(BaseModel):
    term_id: str = ""
    term_label: str = ""
    term_definition: str = ""
    broader_term: Optional[str] = None
    narrower_terms: list[str] = Field(default_factory=list)
    related_terms: list[str] = Field(default_factory=list)


class VocabularyRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    vocabulary_id: str = ""
    vocabulary_name: str = ""
    vocabulary_type: Optional[str] = None
    vocabulary_version: str = ""
    vocabulary_description: str = ""
    terms: list[VocabularyTermModel] = Field(default_factory=list)
    vocabulary_authority: str = ""
    vocabulary_uri: str = ""


class RequirementsRequest(BaseModel):
    domain: str
    schema_name: str
    description: str = ""
    business_requirements: list[str] = Field(default_factory=list)
    technical_requirements: list[str] = Field(default_factory=list)
    compliance_requirements: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class RegistrationResponse(BaseModel):
    success: bool
    schema_id: str
    registration_timestamp: Optional[datetime] = None
    schema_version: Optional[str] = None


class UpdateResponse(BaseModel):
    success: bool
    schema_id: str
    update_timestamp: Optional[datetime] = None
    new_version: Optional[str] = None


class DeleteResponse(BaseModel):
    success: bool
    schema_id: str
    deletion_timestamp: Optional[datetime] = None


class ValidationResponse(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)


class SchemaSummaryResponse(BaseModel):
    schema_id: str
    schema_name: str
    schema_version: str
    description: str = ""
    element_count: int = 0
    registration_date: datetime


class EncodingSchemeSummaryResponse(BaseModel):
    scheme_id: str
    scheme_name: str
    scheme_type: str
    scheme_version: str = ""
    description: str = ""
    value_count: int = 0


class VocabularySummaryResponse(BaseModel):
    vocabulary_id: str
    vocabulary_name: str
    vocabulary_type: str
    vocabulary_version: str = ""
    description: str = ""
    term_count: int = 0
