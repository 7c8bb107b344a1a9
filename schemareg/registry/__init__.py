"""Registry — the three interdependent metadata catalogs.

The registry provides:
- Cataloging: encoding schemes, controlled vocabularies and schemas
- Referential integrity: schemas may only reference registered entries
- Versioning: every schema update bumps the patch version
- Dependency tracking: entries still referenced cannot be deleted
"""
