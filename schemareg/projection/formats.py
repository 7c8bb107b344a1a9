"""Schema serialization formats.

JSON is a full serialization of the schema. XML, RDF and YAML are
documentation-style projections: a header plus the schema's identity
fields and element list. They are not meant to be read back.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from typing import Callable
from urllib.parse import quote

import yaml
from rdflib import RDF, RDFS, Graph, Literal, Namespace, URIRef
from rdflib.namespace import DCTERMS, OWL

from schemareg.models.schema import Schema
from schemareg.models.serialization import to_dict
from schemareg.projection.targets import SchemaFormat

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
SCHEMA_NAMESPACE = Namespace("https://schemareg.dev/schemas/")


def type_name(schema: Schema) -> str:
    """Schema name with whitespace removed, used for generated type names."""
    return re.sub(r"\s+", "", schema.schema_name)


def render_schema(schema: Schema, fmt: SchemaFormat) -> str:
    return _RENDERERS[fmt](schema)


def _render_json(schema: Schema) -> str:
    return json.dumps(to_dict(schema), indent=2)


def _render_xml(schema: Schema) -> str:
    ET.register_namespace("xs", XSD_NAMESPACE)
    xs = f"{{{XSD_NAMESPACE}}}"

    root = ET.Element(f"{xs}schema", {"id": schema.schema_id, "version": schema.schema_version})
    root_element = ET.SubElement(root, f"{xs}element", {"name": type_name(schema)})
    annotation = ET.SubElement(root_element, f"{xs}annotation")
    ET.SubElement(annotation, f"{xs}documentation").text = schema.description or schema.schema_name

    sequence = ET.SubElement(ET.SubElement(root_element, f"{xs}complexType"), f"{xs}sequence")
    for element in schema.elements:
        ET.SubElement(sequence, f"{xs}element", {"name": element.element_id})

    ET.indent(root)
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def _iri_segment(value: str) -> str:
    # IDs may hold spaces or slashes
    return quote(value, safe="")


def _render_rdf(schema: Schema) -> str:
    graph = Graph()
    graph.bind("dcterms", DCTERMS)
    graph.bind("owl", OWL)
    graph.bind("schema", SCHEMA_NAMESPACE)

    schema_segment = _iri_segment(schema.schema_id)
    subject = URIRef(SCHEMA_NAMESPACE[schema_segment])
    graph.add((subject, RDF.type, RDFS.Class))
    graph.add((subject, DCTERMS.identifier, Literal(schema.schema_id)))
    graph.add((subject, RDFS.label, Literal(schema.schema_name)))
    graph.add((subject, OWL.versionInfo, Literal(schema.schema_version)))
    if schema.description:
        graph.add((subject, RDFS.comment, Literal(schema.description)))

    for element in schema.elements:
        prop = URIRef(SCHEMA_NAMESPACE[f"{schema_segment}/{_iri_segment(element.element_id)}"])
        graph.add((prop, RDF.type, RDF.Property))
        graph.add((prop, RDFS.domain, subject))
        graph.add((prop, RDFS.label, Literal(element.element_name)))

    return graph.serialize(format="turtle")


def _render_yaml(schema: Schema) -> str:
    data = {
        "schema": {
            "id": schema.schema_id,
            "name": schema.schema_name,
            "version": schema.schema_version,
            "description": schema.description,
            "elements": [
                {
                    "id": e.element_id,
                    "name": e.element_name,
                    "data_type": e.data_type.value if e.data_type else None,
                }
                for e in schema.elements
            ],
        }
    }
    body = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, width=100)
    return f"# YAML Schema for {schema.schema_name}\n{body}"


_RENDERERS: dict[SchemaFormat, Callable[[Schema], str]] = {
    SchemaFormat.JSON: _render_json,
    SchemaFormat.XML: _render_xml,
    SchemaFormat.RDF: _render_rdf,
    SchemaFormat.YAML: _render_yaml,
}
