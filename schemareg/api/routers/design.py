"""Design and statistics router."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from schemareg.api.deps import get_registry
from schemareg.api.models import RequirementsRequest
from schemareg.models.serialization import requirements_from_dict, to_dict
from schemareg.registry.metadata_registry import MetadataRegistry

router = APIRouter(prefix="/api", tags=["design"])


@router.post("/design", summary="Draft a schema from requirements")
async def design_schema(body: RequirementsRequest, registry: MetadataRegistry = Depends(get_registry)):
    """Return a draft schema. The draft is not registered."""
    draft = registry.design_schema(requirements_from_dict(body.model_dump()))
    return to_dict(draft)


@router.get("/stats", summary="Registry statistics")
async def statistics(registry: MetadataRegistry = Depends(get_registry)):
    return registry.statistics()
