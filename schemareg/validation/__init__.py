"""Validation for registry entries.

- Rule evaluation: applies a ValidationRule expression to a value
- Schema validation: structural and referential checks run before a
  schema is admitted or updated
"""
