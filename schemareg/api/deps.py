"""Shared dependencies and error mapping for the API routers."""

from __future__ import annotations

from functools import lru_cache
from typing import NoReturn

from fastapi import HTTPException, status

from schemareg.config import build_registry, load_settings
from schemareg.errors import (
    DependencyError,
    DuplicateIdError,
    NotFoundError,
    RegistryError,
    UnsupportedTargetError,
    ValidationError,
)
from schemareg.registry.metadata_registry import MetadataRegistry

_STATUS_BY_KIND = {
    ValidationError.kind: status.HTTP_422_UNPROCESSABLE_ENTITY,
    DuplicateIdError.kind: status.HTTP_409_CONFLICT,
    NotFoundError.kind: status.HTTP_404_NOT_FOUND,
    DependencyError.kind: status.HTTP_409_CONFLICT,
    UnsupportedTargetError.kind: status.HTTP_400_BAD_REQUEST,
}


@lru_cache(maxsize=1)
def get_registry() -> MetadataRegistry:
    """Process-wide registry built from environment settings."""
    return build_registry(load_settings())


def raise_for_result(result) -> None:
    """Turn a failed registry result into an HTTP error carrying every detail."""
    if result.success:
        return
    detail = {"error": result.error, "error_kind": result.error_kind, "errors": result.errors}
    if getattr(result, "dependencies", None):
        detail["dependencies"] = result.dependencies
    raise HTTPException(status_code=_STATUS_BY_KIND.get(result.error_kind, 400), detail=detail)


def raise_for_error(exc: RegistryError) -> NoReturn:
    detail = {"error": str(exc), "error_kind": exc.kind}
    if isinstance(exc, ValidationError):
        detail["errors"] = exc.errors
    raise HTTPException(status_code=_STATUS_BY_KIND.get(exc.kind, 400), detail=detail) from exc
