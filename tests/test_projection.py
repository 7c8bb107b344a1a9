"""Tests for schema rendering, documentation and code skeletons."""

import json
import xml.etree.ElementTree as ET

import pytest
import yaml
from rdflib import RDF, RDFS, Graph, Literal, URIRef

from helpers import make_element, make_schema, make_scheme
from schemareg.errors import NotFoundError, UnsupportedTargetError
from schemareg.models.schema import SchemaUpdate
from schemareg.models.serialization import schema_from_dict
from schemareg.projection.targets import (
    ImplementationLanguage,
    SchemaFormat,
    ValidationFramework,
    parse_target,
)
from schemareg.registry.metadata_registry import MetadataRegistry


def test_parse_target_accepts_value_or_name():
    assert parse_target(SchemaFormat, "json", "format") == SchemaFormat.JSON
    assert parse_target(ImplementationLanguage, "csharp", "language") == ImplementationLanguage.CSHARP
    assert parse_target(ImplementationLanguage, "C#", "language") == ImplementationLanguage.CSHARP
    assert parse_target(ValidationFramework, "json schema", "framework") == ValidationFramework.JSON_SCHEMA


def test_parse_target_rejects_unknown():
    with pytest.raises(UnsupportedTargetError) as exc:
        parse_target(SchemaFormat, "PDF", "format")
    assert str(exc.value) == "Unsupported format: PDF (expected one of: JSON, XML, RDF, YAML)"


# --- Formats ---


def test_every_format_renders():
    registry = MetadataRegistry()
    for fmt in SchemaFormat:
        assert registry.render_schema("identity-metadata", fmt)


def test_json_is_a_full_serialization():
    registry = MetadataRegistry()
    rendered = registry.render_schema("description-metadata", "JSON")
    assert schema_from_dict(json.loads(rendered)) == registry.get_schema("description-metadata")


def test_xml_projection():
    rendered = MetadataRegistry().render_schema("identity-metadata", SchemaFormat.XML)
    assert rendered.startswith('<?xml version="1.0" encoding="UTF-8"?>')

    xs = "{http://www.w3.org/2001/XMLSchema}"
    root = ET.fromstring(rendered.split("\n", 1)[1])
    assert root.tag == f"{xs}schema"
    assert root.get("id") == "identity-metadata"
    assert root.get("version") == "1.0.0"

    element = root.find(f"{xs}element")
    assert element.get("name") == "IdentityMetadataSchema"
    names = [e.get("name") for e in element.iter(f"{xs}element")][1:]
    assert names == ["recordId", "systemId", "recordType"]


def test_rdf_projection_parses_as_turtle():
    rendered = MetadataRegistry().render_schema("identity-metadata", "RDF")
    graph = Graph().parse(data=rendered, format="turtle")

    subject = URIRef("https://schemareg.dev/schemas/identity-metadata")
    assert (subject, RDF.type, RDFS.Class) in graph
    assert (subject, RDFS.label, Literal("Identity Metadata Schema")) in graph
    assert len(list(graph.subjects(RDFS.domain, subject))) == 3


def test_rdf_projection_encodes_free_text_ids():
    registry = MetadataRegistry(load_defaults=False)
    schema = make_schema("my schema", elements=[make_element("first name")], element_groups=[])
    assert registry.register_schema(schema).success

    graph = Graph().parse(data=registry.render_schema("my schema", "RDF"), format="turtle")
    subject = URIRef("https://schemareg.dev/schemas/my%20schema")
    assert (subject, RDFS.label, Literal("Schema my schema")) in graph
    prop = URIRef("https://schemareg.dev/schemas/my%20schema/first%20name")
    assert (prop, RDFS.domain, subject) in graph


def test_yaml_projection():
    rendered = MetadataRegistry().render_schema("event-metadata", "yaml")
    assert rendered.startswith("# YAML Schema for Event Metadata Schema\n")

    data = yaml.safe_load(rendered)["schema"]
    assert data["id"] == "event-metadata"
    assert data["version"] == "1.0.0"
    assert [e["id"] for e in data["elements"]] == ["eventType", "eventTimestamp"]
    assert data["elements"][1]["data_type"] == "DATETIME"


def test_render_errors():
    registry = MetadataRegistry()
    with pytest.raises(NotFoundError):
        registry.render_schema("missing-id", "JSON")
    with pytest.raises(UnsupportedTargetError):
        registry.render_schema("identity-metadata", "PDF")


def test_render_reflects_updates():
    registry = MetadataRegistry()
    registry.update_schema("use-metadata", SchemaUpdate(schema_name="Usage Schema"))
    assert "Usage Schema" in registry.render_schema("use-metadata", "YAML")


# --- Documentation ---


def test_documentation_resolves_references():
    docs = MetadataRegistry().render_documentation("description-metadata")
    assert docs.schema_id == "description-metadata"
    assert [e.element_id for e in docs.elements] == ["title", "subject", "language"]
    assert docs.elements[1].repeatability == "REPEATABLE"
    assert len(docs.encoding_schemes) == 1
    assert docs.encoding_schemes[0].scheme_id == "iso-639-1"
    assert docs.encoding_schemes[0].value_count == 4


def test_documentation_uses_live_catalog_state():
    registry = MetadataRegistry(load_defaults=False)
    registry.register_encoding_scheme(make_scheme("codes", values=("a",)))
    registry.register_schema(make_schema("S1", encoding_schemes=["codes"]))

    docs = registry.render_documentation("S1")
    assert docs.encoding_schemes[0].value_count == 1
    assert docs.element_groups[0].elements == ["title"]


def test_documentation_markdown():
    markdown = MetadataRegistry().render_documentation("identity-metadata").to_markdown()
    assert markdown.startswith("# Identity Metadata Schema\n")
    assert "## Elements" in markdown
    assert "| recordType | Record Type | ENUM | MANDATORY |" in markdown
    assert "## Controlled Vocabularies" in markdown


def test_documentation_for_missing_schema():
    with pytest.raises(NotFoundError):
        MetadataRegistry().render_documentation("missing-id")


# --- Code skeletons ---


def test_implementation_skeletons():
    registry = MetadataRegistry()
    typescript = registry.generate_implementation_skeleton("identity-metadata", "TypeScript")
    assert typescript.startswith("// TypeScript interface for Identity Metadata Schema\n")
    assert "export interface IdentityMetadataSchema {" in typescript

    python = registry.generate_implementation_skeleton("identity-metadata", ImplementationLanguage.PYTHON)
    assert "class IdentityMetadataSchema:" in python

    assert "public class IdentityMetadataSchema" in registry.generate_implementation_skeleton(
        "identity-metadata", "Java"
    )
    assert "public class IdentityMetadataSchema" in registry.generate_implementation_skeleton(
        "identity-metadata", "C#"
    )


def test_validation_skeletons():
    registry = MetadataRegistry()
    zod = registry.generate_validation_skeleton("use-metadata", "Zod")
    assert "import { z } from 'zod';" in zod
    assert "export const UseMetadataSchemaSchema = z.object({" in zod

    assert "Joi.object(" in registry.generate_validation_skeleton("use-metadata", "Joi")
    assert "yup.object(" in registry.generate_validation_skeleton("use-metadata", "Yup")

    document = json.loads(registry.generate_validation_skeleton("use-metadata", "JSON Schema"))
    assert document["$schema"] == "http://json-schema.org/draft-07/schema#"
    assert document["title"] == "Use Metadata Schema"
    assert document["type"] == "object"


def test_every_target_generates():
    registry = MetadataRegistry()
    for language in ImplementationLanguage:
        assert registry.generate_implementation_skeleton("event-metadata", language)
    for framework in ValidationFramework:
        assert registry.generate_validation_skeleton("event-metadata", framework)


def test_code_generation_errors():
    registry = MetadataRegistry()
    with pytest.raises(NotFoundError) as exc:
        registry.generate_implementation_skeleton("missing-id", "TypeScript")
    assert str(exc.value) == "Schema missing-id not found"

    with pytest.raises(UnsupportedTargetError):
        registry.generate_implementation_skeleton("identity-metadata", "Rust")
    with pytest.raises(UnsupportedTargetError):
        registry.generate_validation_skeleton("identity-metadata", "Ajv")
