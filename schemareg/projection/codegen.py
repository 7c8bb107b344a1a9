"""Implementation and validation skeletons for registered schemas.

These are scaffolds: a type (or validation schema) named after the schema,
with a placeholder body for the fields.
"""

from __future__ import annotations

import json
from typing import Callable

from schemareg.models.schema import Schema
from schemareg.projection.formats import type_name
from schemareg.projection.targets import ImplementationLanguage, ValidationFramework

# ---------------------------------------------------------------------------
# Implementation templates
# ---------------------------------------------------------------------------

_TYPESCRIPT_TEMPLATE = """\
// TypeScript interface for {name}
export interface {type_name} {{
  // TypeScript implementation
}}
"""

_PYTHON_TEMPLATE = """\
# Python class for {name}
class {type_name}:
    # Python implementation
    pass
"""

_JAVA_TEMPLATE = """\
// Java class for {name}
public class {type_name} {{
    // Java implementation
}}
"""

_CSHARP_TEMPLATE = """\
// C# class for {name}
public class {type_name}
{{
    // C# implementation
}}
"""

# ---------------------------------------------------------------------------
# Validation templates
# ---------------------------------------------------------------------------

_ZOD_TEMPLATE = """\
import {{ z }} from 'zod';

// Zod schema for {name}
export const {type_name}Schema = z.object({{
  // Zod validation implementation
}});
"""

_JOI_TEMPLATE = """\
const Joi = require('joi');

// Joi schema for {name}
const {type_name}Schema = Joi.object({{
  // Joi validation implementation
}});
"""

_YUP_TEMPLATE = """\
import * as yup from 'yup';

// Yup schema for {name}
export const {type_name}Schema = yup.object({{
  // Yup validation implementation
}});
"""

_IMPLEMENTATION_TEMPLATES: dict[ImplementationLanguage, str] = {
    ImplementationLanguage.TYPESCRIPT: _TYPESCRIPT_TEMPLATE,
    ImplementationLanguage.PYTHON: _PYTHON_TEMPLATE,
    ImplementationLanguage.JAVA: _JAVA_TEMPLATE,
    ImplementationLanguage.CSHARP: _CSHARP_TEMPLATE,
}


def _from_template(template: str) -> Callable[[Schema], str]:
    return lambda schema: template.format(name=schema.schema_name, type_name=type_name(schema))


def _json_schema_validation(schema: Schema) -> str:
    document = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "$id": schema.schema_id,
        "title": schema.schema_name,
        "type": "object",
        "properties": {},
    }
    return json.dumps(document, indent=2) + "\n"


_VALIDATION_GENERATORS: dict[ValidationFramework, Callable[[Schema], str]] = {
    ValidationFramework.ZOD: _from_template(_ZOD_TEMPLATE),
    ValidationFramework.JOI: _from_template(_JOI_TEMPLATE),
    ValidationFramework.YUP: _from_template(_YUP_TEMPLATE),
    ValidationFramework.JSON_SCHEMA: _json_schema_validation,
}


def generate_implementation(schema: Schema, language: ImplementationLanguage) -> str:
    return _from_template(_IMPLEMENTATION_TEMPLATES[language])(schema)


def generate_validation(schema: Schema, framework: ValidationFramework) -> str:
    return _VALIDATION_GENERATORS[framework](schema)
