"""Environment-driven settings.

- ``SCHEMAREG_SEED_FILE``: optional YAML/JSON seed file loaded at startup
- ``SCHEMAREG_LOAD_DEFAULTS``: ``1`` (default) loads the built-in catalogs
- ``SCHEMAREG_LOG_LEVEL``: logging level name, default ``INFO``
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from schemareg.registry.loader import load_registry_file
from schemareg.registry.metadata_registry import MetadataRegistry

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    seed_file: str | None = None
    load_defaults: bool = True
    log_level: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        seed_file=env.get("SCHEMAREG_SEED_FILE") or None,
        load_defaults=env.get("SCHEMAREG_LOAD_DEFAULTS", "1").strip().lower() not in _FALSE_VALUES,
        log_level=env.get("SCHEMAREG_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_registry(settings: Settings) -> MetadataRegistry:
    """Create a registry from settings, loading the seed file if one is configured."""
    if settings.seed_file:
        contents = load_registry_file(settings.seed_file)
        return MetadataRegistry.from_contents(contents, load_defaults=settings.load_defaults)
    return MetadataRegistry(load_defaults=settings.load_defaults)
