"""Projection targets: serialization formats, languages and validation frameworks."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from schemareg.errors import UnsupportedTargetError

E = TypeVar("E", bound=Enum)


class SchemaFormat(Enum):
    JSON = "JSON"  # Structured data, full serialization
    XML = "XML"  # Markup
    RDF = "RDF"  # Graph triples (Turtle)
    YAML = "YAML"  # Human block


class ImplementationLanguage(Enum):
    TYPESCRIPT = "TypeScript"
    PYTHON = "Python"
    JAVA = "Java"
    CSHARP = "C#"


class ValidationFramework(Enum):
    ZOD = "Zod"
    JOI = "Joi"
    YUP = "Yup"
    JSON_SCHEMA = "JSON Schema"


def parse_target(enum_cls: type[E], value: str | E, what: str) -> E:
    """Resolve ``value`` to a member of ``enum_cls`` by value or name, ignoring case.

    Raises:
        UnsupportedTargetError: ``value`` names no member.
    """
    if isinstance(value, enum_cls):
        return value
    wanted = str(value).strip().lower()
    for member in enum_cls:
        if wanted in (member.value.lower(), member.name.lower()):
            return member
    raise UnsupportedTargetError(str(value), what, [m.value for m in enum_cls])
