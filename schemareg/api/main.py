"""FastAPI application for the metadata schema registry.

Provides REST API endpoints wrapping the registry for:
- Schema registration, update, deletion and search
- Encoding scheme and controlled vocabulary catalogs
- Schema rendering, documentation and code skeletons
- Schema design from requirements
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schemareg import __version__
from schemareg.api.routers import catalogs, design, schemas

app = FastAPI(
    title="Metadata Schema Registry API",
    description=(
        "REST API for registering, validating, cross-referencing and "
        "projecting metadata schemas, encoding schemes and controlled vocabularies."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(schemas.router)
app.include_router(catalogs.schemes_router)
app.include_router(catalogs.vocabularies_router)
app.include_router(design.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "Metadata Schema Registry API",
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health():
    return {"status": "ok"}
