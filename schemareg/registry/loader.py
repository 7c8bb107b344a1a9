"""Seed file loading.

A seed file is a YAML (or JSON) document with any of the top-level keys
``encoding_schemes``, ``vocabularies`` and ``schemas``, each a list of
entries in their dict form.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from schemareg.errors import ValidationError
from schemareg.models.catalog import ControlledVocabulary, EncodingScheme
from schemareg.models.schema import Schema
from schemareg.models.serialization import (
    encoding_scheme_from_dict,
    schema_from_dict,
    vocabulary_from_dict,
)

logger = logging.getLogger(__name__)


@dataclass
class RegistryContents:
    """Initial contents for a registry, in registration order."""

    encoding_schemes: list[EncodingScheme] = field(default_factory=list)
    vocabularies: list[ControlledVocabulary] = field(default_factory=list)
    schemas: list[Schema] = field(default_factory=list)


def contents_from_dict(data: dict) -> RegistryContents:
    if not isinstance(data, dict):
        raise ValidationError(["Seed document must be a mapping"], "Seed file")
    return RegistryContents(
        encoding_schemes=[encoding_scheme_from_dict(s) for s in data.get("encoding_schemes") or []],
        vocabularies=[vocabulary_from_dict(v) for v in data.get("vocabularies") or []],
        schemas=[schema_from_dict(s) for s in data.get("schemas") or []],
    )


def load_registry_file(path: str | Path) -> RegistryContents:
    """Read a seed file into model objects ready for registry injection."""
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    contents = contents_from_dict(data)
    logger.info(
        "Loaded seed file %s: %d schemes, %d vocabularies, %d schemas",
        path,
        len(contents.encoding_schemes),
        len(contents.vocabularies),
        len(contents.schemas),
    )
    return contents
