"""Builders shared by the test modules."""

from schemareg.models.catalog import ControlledVocabulary, EncodingScheme, SchemeValue, VocabularyTerm
from schemareg.models.schema import DataType, Element, ElementGroup, Schema


def make_element(element_id: str = "title", **overrides) -> Element:
    values = {
        "element_id": element_id,
        "element_name": element_id.title(),
        "element_definition": f"The {element_id}",
        "data_type": DataType.STRING,
        "max_length": 100,
    }
    values.update(overrides)
    return Element(**values)


def make_schema(schema_id: str = "S1", **overrides) -> Schema:
    values = {
        "schema_id": schema_id,
        "schema_name": f"Schema {schema_id}",
        "description": f"Test schema {schema_id}",
        "elements": [make_element("title")],
        "element_groups": [ElementGroup(group_id="core", group_name="Core", elements=["title"])],
    }
    values.update(overrides)
    return Schema(**values)


def make_scheme(scheme_id: str = "iso-639-1", values=("en", "es")) -> EncodingScheme:
    return EncodingScheme(
        scheme_id=scheme_id,
        scheme_name=f"Scheme {scheme_id}",
        scheme_values=[SchemeValue(v, v.upper()) for v in values],
        scheme_version="1",
    )


def make_vocabulary(vocabulary_id: str = "levels", terms=("low", "high")) -> ControlledVocabulary:
    return ControlledVocabulary(
        vocabulary_id=vocabulary_id,
        vocabulary_name=f"Vocabulary {vocabulary_id}",
        vocabulary_version="1.0.0",
        terms=[VocabularyTerm(t, t.title()) for t in terms],
    )
