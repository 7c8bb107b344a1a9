"""Schemas router -- CRUD, search, projection and code generation."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from schemareg.api.deps import get_registry, raise_for_error, raise_for_result
from schemareg.api.models import (
    DeleteResponse,
    RegistrationResponse,
    SchemaRequest,
    SchemaSummaryResponse,
    SchemaUpdateRequest,
    UpdateResponse,
    ValidationResponse,
)
from schemareg.errors import RegistryError
from schemareg.models.serialization import schema_from_dict, schema_update_from_dict, to_dict
from schemareg.registry.metadata_registry import MetadataRegistry

router = APIRouter(prefix="/api/schemas", tags=["schemas"])


def _parse_schema(body: SchemaRequest):
    try:
        return schema_from_dict(body.model_dump())
    except RegistryError as e:
        raise_for_error(e)


@router.post("", response_model=RegistrationResponse, status_code=201, summary="Register a schema")
async def register_schema(body: SchemaRequest, registry: MetadataRegistry = Depends(get_registry)):
    """Validate and register a new schema."""
    result = registry.register_schema(_parse_schema(body))
    raise_for_result(result)
    return RegistrationResponse(**to_dict(result))


@router.get("", response_model=list[SchemaSummaryResponse], summary="List schemas")
async def list_schemas(registry: MetadataRegistry = Depends(get_registry)):
    return [SchemaSummaryResponse(**to_dict(s)) for s in registry.list_schemas()]


@router.get("/search", summary="Search schemas")
async def search_schemas(
    q: str = Query(..., description="Free-text search"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    registry: MetadataRegistry = Depends(get_registry),
):
    return registry.search_schemas(q, limit=limit, offset=offset)


@router.post("/validate", response_model=ValidationResponse, summary="Validate without registering")
async def validate_schema(body: SchemaRequest, registry: MetadataRegistry = Depends(get_registry)):
    result = registry.validate_schema(_parse_schema(body))
    return ValidationResponse(valid=result.valid, errors=result.errors)


@router.get("/{schema_id}", response_model=dict[str, Any], summary="Get a schema")
async def get_schema(schema_id: str, registry: MetadataRegistry = Depends(get_registry)):
    schema = registry.get_schema(schema_id)
    if schema is None:
        raise HTTPException(status_code=404, detail=f"Schema '{schema_id}' not found")
    return to_dict(schema)


@router.patch("/{schema_id}", response_model=UpdateResponse, summary="Update a schema")
async def update_schema(
    schema_id: str,
    body: SchemaUpdateRequest,
    registry: MetadataRegistry = Depends(get_registry),
):
    """Merge the supplied fields over the stored schema; bumps the patch version."""
    try:
        update = schema_update_from_dict(body.model_dump(exclude_unset=True))
    except RegistryError as e:
        raise_for_error(e)
    result = registry.update_schema(schema_id, update)
    raise_for_result(result)
    return UpdateResponse(**to_dict(result))


@router.delete("/{schema_id}", response_model=DeleteResponse, summary="Delete a schema")
async def delete_schema(schema_id: str, registry: MetadataRegistry = Depends(get_registry)):
    result = registry.delete_schema(schema_id)
    raise_for_result(result)
    return DeleteResponse(**to_dict(result))


@router.get("/{schema_id}/dependents", response_model=list[str], summary="Schemas referencing an ID")
async def get_dependents(schema_id: str, registry: MetadataRegistry = Depends(get_registry)):
    return registry.find_dependents(schema_id)


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


@router.get("/{schema_id}/render", response_class=PlainTextResponse, summary="Render a schema")
async def render_schema(
    schema_id: str,
    format: str = Query("JSON", description="JSON, XML, RDF or YAML"),
    registry: MetadataRegistry = Depends(get_registry),
):
    try:
        return registry.render_schema(schema_id, format)
    except RegistryError as e:
        raise_for_error(e)


@router.get("/{schema_id}/docs", summary="Schema documentation")
async def schema_docs(schema_id: str, registry: MetadataRegistry = Depends(get_registry)):
    try:
        return to_dict(registry.render_documentation(schema_id))
    except RegistryError as e:
        raise_for_error(e)


@router.get("/{schema_id}/code", response_class=PlainTextResponse, summary="Implementation skeleton")
async def implementation_code(
    schema_id: str,
    language: str = Query("TypeScript", description="TypeScript, Python, Java or C#"),
    registry: MetadataRegistry = Depends(get_registry),
):
    try:
        return registry.generate_implementation_skeleton(schema_id, language)
    except RegistryError as e:
        raise_for_error(e)


@router.get(
    "/{schema_id}/validation-code",
    response_class=PlainTextResponse,
    summary="Validation-schema skeleton",
)
async def validation_code(
    schema_id: str,
    framework: str = Query("JSON Schema", description="Zod, Joi, Yup or JSON Schema"),
    registry: MetadataRegistry = Depends(get_registry),
):
    try:
        return registry.generate_validation_skeleton(schema_id, framework)
    except RegistryError as e:
        raise_for_error(e)
