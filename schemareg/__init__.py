"""schemareg — Metadata Schema Registry.

Registers, versions, validates, cross-references and projects structured
metadata schemas, encoding schemes and controlled vocabularies.
"""

__version__ = "0.1.0"
