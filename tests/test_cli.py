"""Tests for the schemareg command-line interface."""

import json
import os
import tempfile

import yaml
from click.testing import CliRunner

from schemareg import __version__
from schemareg.cli import main


def _run(*args):
    return CliRunner().invoke(main, list(args))


def _write_yaml(data) -> str:
    fd, path = tempfile.mkstemp(suffix=".yaml")
    with os.fdopen(fd, "w") as f:
        yaml.safe_dump(data, f)
    return path


def test_version():
    result = _run("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_without_defaults():
    result = _run("--no-defaults", "schemas", "list")
    assert result.exit_code == 0
    assert "No schemas registered." in result.output


def test_show_missing_schema_fails():
    result = _run("schemas", "show", "missing")
    assert result.exit_code == 1
    assert "Schema missing not found" in result.output


def test_render_yaml():
    result = _run("schemas", "render", "identity-metadata", "--format", "yaml")
    assert result.exit_code == 0
    assert "# YAML Schema for Identity Metadata Schema" in result.output
    assert "recordType" in result.output


def test_render_rejects_unknown_format():
    result = _run("schemas", "render", "identity-metadata", "--format", "PDF")
    assert result.exit_code == 2


def test_codegen():
    result = _run("schemas", "codegen", "identity-metadata", "-l", "Python")
    assert result.exit_code == 0
    assert "class IdentityMetadataSchema:" in result.output

    result = _run("schemas", "codegen", "identity-metadata", "-l", "Rust")
    assert result.exit_code == 1
    assert "Unsupported language: Rust" in result.output


def test_validation_code():
    result = _run("schemas", "validation-code", "use-metadata", "-f", "Zod")
    assert result.exit_code == 0
    assert "UseMetadataSchemaSchema" in result.output


def test_docs():
    result = _run("schemas", "docs", "description-metadata")
    assert result.exit_code == 0
    assert "## Encoding Schemes" in result.output


def test_validate_schema_file():
    good = _write_yaml(
        {
            "schema_id": "S1",
            "schema_name": "One",
            "encoding_schemes": ["iso-639-1"],
            "elements": [{"element_id": "a", "element_name": "A", "data_type": "STRING"}],
        }
    )
    bad = _write_yaml({"schema_id": "S1", "schema_name": "One", "encoding_schemes": ["nope"]})
    try:
        result = _run("schemas", "validate", good)
        assert result.exit_code == 0
        assert "Schema is valid" in result.output

        result = _run("schemas", "validate", bad)
        assert result.exit_code == 1
        assert "Encoding scheme nope not found" in result.output
    finally:
        os.unlink(good)
        os.unlink(bad)


def test_seed_file_option():
    path = _write_yaml(
        {
            "vocabularies": [
                {"vocabulary_id": "colours", "vocabulary_name": "Colours",
                 "terms": [{"term_id": "red", "term_label": "Red"}]}
            ],
            "schemas": [{"schema_id": "paint", "schema_name": "Paint", "controlled_vocabularies": ["colours"]}],
        }
    )
    try:
        result = _run("--no-defaults", "--seed-file", path, "export")
        assert result.exit_code == 0
        exported = json.loads(result.output)
        assert [s["schema_id"] for s in exported["schemas"]] == ["paint"]
        assert [v["vocabulary_id"] for v in exported["vocabularies"]] == ["colours"]
        assert exported["encoding_schemes"] == []
    finally:
        os.unlink(path)


def test_invalid_seed_file_fails():
    path = _write_yaml({"schemas": [{"schema_id": "paint", "schema_name": "Paint", "encoding_schemes": ["x"]}]})
    try:
        result = _run("--seed-file", path, "schemas", "list")
        assert result.exit_code == 1
        assert "Failed to load registry" in result.output
    finally:
        os.unlink(path)


def test_design():
    path = _write_yaml(
        {
            "domain": "finance",
            "schema_name": "Ledger",
            "business_requirements": ["Track the language of each entry"],
        }
    )
    try:
        result = _run("design", path)
        assert result.exit_code == 0
        draft = yaml.safe_load(result.output)
        assert draft["schema_id"].startswith("finance-metadata-schema-")
        assert draft["schema_version"] == "1.0.0"
        assert draft["encoding_schemes"] == ["iso-639-1"]
    finally:
        os.unlink(path)


def test_stats():
    result = _run("stats")
    assert result.exit_code == 0
    assert "Registry Statistics" in result.output


def test_seed_file_with_malformed_entry_fails():
    path = _write_yaml({"schemas": [{"schema_id": "A", "schema_name": "A", "elements": ["oops"]}]})
    try:
        result = _run("--seed-file", path, "schemas", "list")
        assert result.exit_code == 1
        assert "must be a mapping" in result.output
    finally:
        os.unlink(path)
