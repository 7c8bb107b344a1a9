"""HTTP API for the metadata schema registry (FastAPI)."""
