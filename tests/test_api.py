"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from schemareg.api.deps import get_registry
from schemareg.api.main import app
from schemareg.registry.metadata_registry import MetadataRegistry

NEW_SCHEMA = {
    "schema_id": "S1",
    "schema_name": "Schema One",
    "description": "First test schema",
    "encoding_schemes": ["iso-639-1"],
    "elements": [
        {"element_id": "title", "element_name": "Title", "data_type": "STRING", "max_length": 100}
    ],
}


@pytest.fixture
def client():
    registry = MetadataRegistry()
    app.dependency_overrides[get_registry] = lambda: registry
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["name"] == "Metadata Schema Registry API"


def test_list_schemas(client):
    response = client.get("/api/schemas")
    assert response.status_code == 200
    assert [s["schema_id"] for s in response.json()][:2] == ["identity-metadata", "description-metadata"]


def test_register_and_get_schema(client):
    response = client.post("/api/schemas", json=NEW_SCHEMA)
    assert response.status_code == 201
    assert response.json()["success"] is True
    assert response.json()["schema_version"] == "1.0.0"

    schema = client.get("/api/schemas/S1").json()
    assert schema["elements"][0]["data_type"] == "STRING"
    assert schema["elements"][0]["obligation_level"] == "OPTIONAL"

    duplicate = client.post("/api/schemas", json=NEW_SCHEMA)
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"]["error_kind"] == "duplicate_id"


def test_register_invalid_schema_returns_all_errors(client):
    body = dict(NEW_SCHEMA, encoding_schemes=["nope"], elements=[{"element_id": "a", "data_type": "STRING"}])
    response = client.post("/api/schemas", json=body)
    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == [
        "elements[0]: Element ID and name are required",
        "Encoding scheme nope not found",
    ]


def test_register_rejects_unknown_enum(client):
    body = dict(NEW_SCHEMA, elements=[{"element_id": "a", "element_name": "A", "data_type": "BLOB"}])
    response = client.post("/api/schemas", json=body)
    assert response.status_code == 422
    assert response.json()["detail"]["error_kind"] == "validation_error"


def test_validate_endpoint(client):
    response = client.post("/api/schemas/validate", json=dict(NEW_SCHEMA, schema_name=""))
    assert response.json() == {"valid": False, "errors": ["Schema ID and name are required"]}
    assert client.get("/api/schemas/S1").status_code == 404


def test_get_missing_schema(client):
    assert client.get("/api/schemas/missing-id").status_code == 404


def test_update_schema(client):
    client.post("/api/schemas", json=NEW_SCHEMA)
    response = client.patch("/api/schemas/S1", json={"description": "Changed"})
    assert response.status_code == 200
    assert response.json()["new_version"] == "1.0.1"
    assert client.get("/api/schemas/S1").json()["description"] == "Changed"


def test_update_rejects_managed_fields(client):
    client.post("/api/schemas", json=NEW_SCHEMA)
    response = client.patch("/api/schemas/S1", json={"schema_version": "9.0.0"})
    assert response.status_code == 422
    assert client.get("/api/schemas/S1").json()["schema_version"] == "1.0.0"


def test_update_missing_schema(client):
    response = client.patch("/api/schemas/missing-id", json={"description": "x"})
    assert response.status_code == 404


def test_delete_schema(client):
    client.post("/api/schemas", json=NEW_SCHEMA)
    assert client.delete("/api/schemas/S1").status_code == 200
    assert client.get("/api/schemas/S1").status_code == 404
    assert client.delete("/api/schemas/S1").status_code == 404


def test_delete_referenced_encoding_scheme_conflicts(client):
    response = client.delete("/api/encoding-schemes/iso-639-1")
    assert response.status_code == 409
    assert response.json()["detail"]["dependencies"] == ["description-metadata"]
    assert client.get("/api/schemas/iso-639-1/dependents").json() == ["description-metadata"]


def test_encoding_scheme_endpoints(client):
    body = {
        "scheme_id": "iso-4217",
        "scheme_name": "Currency Codes",
        "scheme_type": "CURRENCY_CODES",
        "scheme_values": [{"value": "USD", "label": "US Dollar"}],
    }
    assert client.post("/api/encoding-schemes", json=body).status_code == 201
    assert client.get("/api/encoding-schemes/iso-4217").json()["scheme_type"] == "CURRENCY_CODES"
    assert len(client.get("/api/encoding-schemes").json()) == 3
    assert client.delete("/api/encoding-schemes/iso-4217").status_code == 200
    assert client.get("/api/encoding-schemes/iso-4217").status_code == 404


def test_vocabulary_endpoints(client):
    body = {"vocabulary_id": "colours", "vocabulary_name": "Colours", "terms": []}
    response = client.post("/api/vocabularies", json=body)
    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == ["Vocabulary must contain at least one term"]

    body["terms"] = [{"term_id": "red", "term_label": "Red"}]
    assert client.post("/api/vocabularies", json=body).status_code == 201
    assert client.get("/api/vocabularies/colours").json()["terms"][0]["term_label"] == "Red"


def test_search(client):
    data = client.get("/api/schemas/search", params={"q": "event"}).json()
    assert data["total"] == 1
    assert data["results"][0]["schema_id"] == "event-metadata"


def test_render_and_code(client):
    response = client.get("/api/schemas/identity-metadata/render", params={"format": "YAML"})
    assert response.status_code == 200
    assert response.text.startswith("# YAML Schema for Identity Metadata Schema")

    assert client.get("/api/schemas/identity-metadata/render", params={"format": "PDF"}).status_code == 400
    assert client.get("/api/schemas/missing-id/code", params={"language": "TypeScript"}).status_code == 404

    code = client.get("/api/schemas/identity-metadata/code", params={"language": "C#"})
    assert "public class IdentityMetadataSchema" in code.text

    validation = client.get("/api/schemas/identity-metadata/validation-code")
    assert validation.status_code == 200
    assert '"$schema"' in validation.text


def test_docs(client):
    docs = client.get("/api/schemas/description-metadata/docs").json()
    assert docs["encoding_schemes"][0]["scheme_id"] == "iso-639-1"


def test_design_and_stats(client):
    body = {"domain": "hr", "schema_name": "Staff", "compliance_requirements": ["Keep records confidential"]}
    draft = client.post("/api/design", json=body).json()
    assert draft["schema_id"].startswith("hr-metadata-schema-")
    assert draft["controlled_vocabularies"] == ["security-levels"]

    stats = client.get("/api/stats").json()
    assert stats["schemas"] == 5


def test_update_schema_with_suffixed_version(client):
    client.post("/api/schemas", json=dict(NEW_SCHEMA, schema_version="1.0.0-beta"))
    response = client.patch("/api/schemas/S1", json={"description": "Changed"})
    assert response.status_code == 200
    assert response.json()["new_version"] == "1.0.1"


def test_render_rdf_for_id_with_space(client):
    assert client.post("/api/schemas", json=dict(NEW_SCHEMA, schema_id="my schema")).status_code == 201
    response = client.get("/api/schemas/my schema/render", params={"format": "RDF"})
    assert response.status_code == 200
    assert "my%20schema" in response.text
