"""Render registered schemas for people and other tools.

- Formats: JSON, XML, RDF (Turtle) and YAML serializations
- Documentation: element/group docs with resolved catalog summaries
- Code generation: implementation and validation skeletons
"""
