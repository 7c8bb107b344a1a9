"""Catalog routers -- encoding schemes and controlled vocabularies."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from schemareg.api.deps import get_registry, raise_for_error, raise_for_result
from schemareg.api.models import (
    DeleteResponse,
    EncodingSchemeRequest,
    EncodingSchemeSummaryResponse,
    RegistrationResponse,
    VocabularyRequest,
    VocabularySummaryResponse,
)
from schemareg.errors import RegistryError
from schemareg.models.serialization import encoding_scheme_from_dict, to_dict, vocabulary_from_dict
from schemareg.registry.metadata_registry import MetadataRegistry

schemes_router = APIRouter(prefix="/api/encoding-schemes", tags=["encoding-schemes"])
vocabularies_router = APIRouter(prefix="/api/vocabularies", tags=["vocabularies"])


# ---------------------------------------------------------------------------
# Encoding schemes
# ---------------------------------------------------------------------------


@schemes_router.post("", response_model=RegistrationResponse, status_code=201)
async def register_encoding_scheme(
    body: EncodingSchemeRequest, registry: MetadataRegistry = Depends(get_registry)
):
    try:
        scheme = encoding_scheme_from_dict(body.model_dump())
    except RegistryError as e:
        raise_for_error(e)
    result = registry.register_encoding_scheme(scheme)
    raise_for_result(result)
    return RegistrationResponse(**to_dict(result))


@schemes_router.get("", response_model=list[EncodingSchemeSummaryResponse])
async def list_encoding_schemes(registry: MetadataRegistry = Depends(get_registry)):
    return [EncodingSchemeSummaryResponse(**to_dict(s)) for s in registry.list_encoding_schemes()]


@schemes_router.get("/{scheme_id}", response_model=dict[str, Any])
async def get_encoding_scheme(scheme_id: str, registry: MetadataRegistry = Depends(get_registry)):
    scheme = registry.get_encoding_scheme(scheme_id)
    if scheme is None:
        raise HTTPException(status_code=404, detail=f"Encoding scheme '{scheme_id}' not found")
    return to_dict(scheme)


@schemes_router.delete("/{scheme_id}", response_model=DeleteResponse)
async def delete_encoding_scheme(scheme_id: str, registry: MetadataRegistry = Depends(get_registry)):
    """Delete an encoding scheme; refused while any schema references it."""
    result = registry.delete_encoding_scheme(scheme_id)
    raise_for_result(result)
    return DeleteResponse(**to_dict(result))


# ---------------------------------------------------------------------------
# Controlled vocabularies
# ---------------------------------------------------------------------------


@vocabularies_router.post("", response_model=RegistrationResponse, status_code=201)
async def register_vocabulary(body: VocabularyRequest, registry: MetadataRegistry = Depends(get_registry)):
    try:
        vocabulary = vocabulary_from_dict(body.model_dump())
    except RegistryError as e:
        raise_for_error(e)
    result = registry.register_controlled_vocabulary(vocabulary)
    raise_for_result(result)
    return RegistrationResponse(**to_dict(result))


@vocabularies_router.get("", response_model=list[VocabularySummaryResponse])
async def list_vocabularies(registry: MetadataRegistry = Depends(get_registry)):
    return [VocabularySummaryResponse(**to_dict(v)) for v in registry.list_controlled_vocabularies()]


@vocabularies_router.get("/{vocabulary_id}", response_model=dict[str, Any])
async def get_vocabulary(vocabulary_id: str, registry: MetadataRegistry = Depends(get_registry)):
    vocabulary = registry.get_controlled_vocabulary(vocabulary_id)
    if vocabulary is None:
        raise HTTPException(status_code=404, detail=f"Vocabulary '{vocabulary_id}' not found")
    return to_dict(vocabulary)


@vocabularies_router.delete("/{vocabulary_id}", response_model=DeleteResponse)
async def delete_vocabulary(vocabulary_id: str, registry: MetadataRegistry = Depends(get_registry)):
    """Delete a vocabulary; refused while any schema references it."""
    result = registry.delete_controlled_vocabulary(vocabulary_id)
    raise_for_result(result)
    return DeleteResponse(**to_dict(result))
