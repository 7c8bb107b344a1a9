"""Built-in catalog contents loaded into every registry by default.

Five ISO 23081-2 record schemas (identity, description, use, event and
relation) plus the encoding schemes and vocabularies they reference.
"""

from __future__ import annotations

from schemareg.models.catalog import (
    ControlledVocabulary,
    EncodingScheme,
    SchemeType,
    SchemeValue,
    VocabularyTerm,
    VocabularyType,
)
from schemareg.models.schema import DataType, Element, Obligation, Repeatability, Schema

VOCABULARY_BASE_URI = "https://dao-registry.org/vocabularies"


def default_encoding_schemes() -> list[EncodingScheme]:
    return [
        EncodingScheme(
            scheme_id="iso-639-1",
            scheme_name="ISO 639-1 Language Codes",
            scheme_type=SchemeType.LANGUAGE_CODES,
            scheme_values=[
                SchemeValue("en", "English"),
                SchemeValue("es", "Spanish"),
                SchemeValue("fr", "French"),
                SchemeValue("de", "German"),
            ],
            format_specification="ISO 639-1:2002",
            scheme_description="Two-letter language codes",
            scheme_authority="ISO",
            scheme_version="2002",
        ),
        EncodingScheme(
            scheme_id="iso-3166-1-alpha-2",
            scheme_name="ISO 3166-1 Alpha-2 Country Codes",
            scheme_type=SchemeType.COUNTRY_CODES,
            scheme_values=[
                SchemeValue("US", "United States"),
                SchemeValue("GB", "United Kingdom"),
                SchemeValue("CA", "Canada"),
                SchemeValue("AU", "Australia"),
            ],
            format_specification="ISO 3166-1:2020",
            scheme_description="Two-letter country codes",
            scheme_authority="ISO",
            scheme_version="2020",
        ),
    ]


def default_vocabularies() -> list[ControlledVocabulary]:
    return [
        ControlledVocabulary(
            vocabulary_id="record-types",
            vocabulary_name="Record Types",
            vocabulary_type=VocabularyType.RECORD_CLASSIFICATION,
            vocabulary_version="1.0.0",
            vocabulary_description="Standard record types for DAO governance",
            terms=[
                VocabularyTerm("dao-record", "DAO Record", "Core DAO information"),
                VocabularyTerm("governance-action", "Governance Action", "Governance decision or action"),
                VocabularyTerm("treasury-transaction", "Treasury Transaction", "Treasury-related transaction"),
                VocabularyTerm("ens-record", "ENS Record", "ENS domain record"),
            ],
            vocabulary_authority="DAO Registry",
            vocabulary_uri=f"{VOCABULARY_BASE_URI}/record-types",
        ),
        ControlledVocabulary(
            vocabulary_id="security-levels",
            vocabulary_name="Security Levels",
            vocabulary_type=VocabularyType.SECURITY_CLASSIFICATION,
            vocabulary_version="1.0.0",
            vocabulary_description="Security classification levels",
            terms=[
                VocabularyTerm("public", "Public", "Publicly accessible information"),
                VocabularyTerm("internal", "Internal", "Internal organization information"),
                VocabularyTerm("confidential", "Confidential", "Confidential information"),
                VocabularyTerm("restricted", "Restricted", "Highly restricted information"),
            ],
            vocabulary_authority="DAO Registry",
            vocabulary_uri=f"{VOCABULARY_BASE_URI}/security-levels",
        ),
    ]


def _mandatory(element_id: str, name: str, definition: str, data_type: DataType = DataType.STRING, **extra) -> Element:
    return Element(
        element_id=element_id,
        element_name=name,
        element_definition=definition,
        data_type=data_type,
        obligation_level=Obligation.MANDATORY,
        **extra,
    )


def default_schemas() -> list[Schema]:
    return [
        Schema(
            schema_id="identity-metadata",
            schema_name="Identity Metadata Schema",
            description="Identity metadata elements for DAO records",
            elements=[
                _mandatory("recordId", "Record Identifier", "Unique identifier for the record", max_length=255),
                _mandatory("systemId", "System Identifier", "Identifier assigned by the system", max_length=255),
                _mandatory(
                    "recordType",
                    "Record Type",
                    "Type of record",
                    DataType.ENUM,
                    default_value="dao-record",
                    controlled_vocabulary="record-types",
                ),
            ],
            controlled_vocabularies=["record-types"],
        ),
        Schema(
            schema_id="description-metadata",
            schema_name="Description Metadata Schema",
            description="Description metadata elements for DAO records",
            elements=[
                _mandatory("title", "Title", "Title of the record", max_length=500),
                Element(
                    element_id="subject",
                    element_name="Subject",
                    element_definition="Subject keywords for the record",
                    data_type=DataType.ARRAY,
                    obligation_level=Obligation.OPTIONAL,
                    repeatability=Repeatability.REPEATABLE,
                    default_value=[],
                ),
                _mandatory(
                    "language",
                    "Language",
                    "Language of the record content",
                    default_value="en",
                    encoding_scheme="iso-639-1",
                ),
            ],
            encoding_schemes=["iso-639-1"],
        ),
        Schema(
            schema_id="use-metadata",
            schema_name="Use Metadata Schema",
            description="Use metadata elements for DAO records",
            elements=[
                _mandatory("businessFunction", "Business Function", "Business function associated with the record", max_length=255),
                _mandatory("businessProcess", "Business Process", "Business process associated with the record", max_length=255),
            ],
        ),
        Schema(
            schema_id="event-metadata",
            schema_name="Event Metadata Schema",
            description="Event metadata elements for DAO records",
            elements=[
                _mandatory("eventType", "Event Type", "Type of event", max_length=100),
                _mandatory("eventTimestamp", "Event Timestamp", "Timestamp of the event", DataType.DATETIME),
            ],
        ),
        Schema(
            schema_id="relation-metadata",
            schema_name="Relation Metadata Schema",
            description="Relation metadata elements for DAO records",
            elements=[
                _mandatory("relationshipType", "Relationship Type", "Type of relationship", max_length=100),
                _mandatory(
                    "relatedRecordId",
                    "Related Record ID",
                    "ID of the related record",
                    max_length=255,
                    repeatability=Repeatability.REPEATABLE,
                ),
            ],
        ),
    ]
