"""schemareg CLI — inspect, validate, project and design metadata schemas."""

from __future__ import annotations

import json

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from schemareg import __version__
from schemareg.config import Settings, build_registry, configure_logging, load_settings
from schemareg.errors import RegistryError
from schemareg.models.serialization import requirements_from_dict, schema_from_dict, to_dict
from schemareg.projection.targets import ImplementationLanguage, SchemaFormat, ValidationFramework
from schemareg.registry.metadata_registry import MetadataRegistry

console = Console()


def _registry(ctx: click.Context) -> MetadataRegistry:
    return ctx.find_root().obj["registry"]


def _fail(ctx: click.Context, message: str):
    console.print(f"[red]{message}[/]")
    ctx.exit(1)


def _read_document(ctx: click.Context, path: str) -> dict:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        _fail(ctx, f"Failed to parse {path}: {e}")
    if not isinstance(data, dict):
        _fail(ctx, f"{path} must contain a mapping")
    return data


@click.group()
@click.version_option(version=__version__)
@click.option("--seed-file", "-s", default=None, help="YAML/JSON file with extra catalog entries")
@click.option("--no-defaults", is_flag=True, help="Do not load the built-in catalogs")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, seed_file: str | None, no_defaults: bool, verbose: bool):
    """schemareg — Metadata Schema Registry.

    Register, validate, cross-reference and project metadata schemas,
    encoding schemes and controlled vocabularies.
    """
    env = load_settings()
    settings = Settings(
        seed_file=seed_file or env.seed_file,
        load_defaults=env.load_defaults and not no_defaults,
        log_level="DEBUG" if verbose else env.log_level,
    )
    configure_logging(settings.log_level)

    try:
        registry = build_registry(settings)
    except (RegistryError, OSError, yaml.YAMLError) as e:
        _fail(ctx, f"Failed to load registry: {e}")
    ctx.obj = {"registry": registry}


# ── Schemas ──────────────────────────────────────────────────────────


@main.group()
def schemas():
    """Inspect and project registered schemas."""


@schemas.command(name="list")
@click.pass_context
def list_schemas(ctx: click.Context):
    """List all registered schemas."""
    entries = _registry(ctx).list_schemas()
    if not entries:
        console.print("[yellow]No schemas registered.[/]")
        return

    table = Table(title=f"Schemas ({len(entries)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Version")
    table.add_column("Elements", justify="right")
    table.add_column("Description")

    for entry in entries:
        table.add_row(
            entry.schema_id,
            entry.schema_name,
            entry.schema_version,
            str(entry.element_count),
            entry.description[:50],
        )

    console.print(table)


@schemas.command(name="show")
@click.argument("schema_id")
@click.pass_context
def show_schema(ctx: click.Context, schema_id: str):
    """Print a schema as JSON."""
    schema = _registry(ctx).get_schema(schema_id)
    if schema is None:
        _fail(ctx, f"Schema {schema_id} not found")
    console.print_json(json.dumps(to_dict(schema)))


@schemas.command()
@click.argument("schema_id")
@click.option(
    "--format",
    "-f",
    "fmt",
    default=SchemaFormat.JSON.value,
    type=click.Choice([f.value for f in SchemaFormat], case_sensitive=False),
)
@click.pass_context
def render(ctx: click.Context, schema_id: str, fmt: str):
    """Render a schema as JSON, XML, RDF or YAML."""
    try:
        output = _registry(ctx).render_schema(schema_id, fmt)
    except RegistryError as e:
        _fail(ctx, str(e))
    click.echo(output)


@schemas.command()
@click.argument("schema_id")
@click.pass_context
def docs(ctx: click.Context, schema_id: str):
    """Print human-readable documentation for a schema."""
    try:
        documentation = _registry(ctx).render_documentation(schema_id)
    except RegistryError as e:
        _fail(ctx, str(e))
    click.echo(documentation.to_markdown())


@schemas.command()
@click.argument("schema_id")
@click.option(
    "--language",
    "-l",
    default=ImplementationLanguage.TYPESCRIPT.value,
    help=f"One of: {', '.join(l.value for l in ImplementationLanguage)}",
)
@click.pass_context
def codegen(ctx: click.Context, schema_id: str, language: str):
    """Generate an implementation skeleton for a schema."""
    try:
        output = _registry(ctx).generate_implementation_skeleton(schema_id, language)
    except RegistryError as e:
        _fail(ctx, str(e))
    click.echo(output)


@schemas.command(name="validation-code")
@click.argument("schema_id")
@click.option(
    "--framework",
    "-f",
    default=ValidationFramework.JSON_SCHEMA.value,
    help=f"One of: {', '.join(f.value for f in ValidationFramework)}",
)
@click.pass_context
def validation_code(ctx: click.Context, schema_id: str, framework: str):
    """Generate a validation-schema skeleton for a schema."""
    try:
        output = _registry(ctx).generate_validation_skeleton(schema_id, framework)
    except RegistryError as e:
        _fail(ctx, str(e))
    click.echo(output)


@schemas.command()
@click.argument("schema_path")
@click.pass_context
def validate(ctx: click.Context, schema_path: str):
    """Validate a schema document against the registry's catalogs."""
    data = _read_document(ctx, schema_path)
    try:
        schema = schema_from_dict(data)
    except RegistryError as e:
        _fail(ctx, str(e))

    console.print(f"\n[bold blue]schemareg[/] — Validating: {schema_path}\n")
    result = _registry(ctx).validate_schema(schema)
    if result.valid:
        console.print("  [green]v[/] Schema is valid")
        return

    console.print("[red]Schema validation FAILED:[/]")
    for error in result.errors:
        console.print(f"  [red]x[/] {error}")
    ctx.exit(1)


@schemas.command()
@click.argument("query")
@click.option("--limit", default=10, show_default=True)
@click.pass_context
def search(ctx: click.Context, query: str, limit: int):
    """Search schemas by ID, name and description."""
    found = _registry(ctx).search_schemas(query, limit=limit)
    if not found["results"]:
        console.print("[yellow]No matching schemas found.[/]")
        return

    for hit in found["results"]:
        console.print(f"  [cyan]{hit['schema_id']}[/] v{hit['schema_version']} ({hit['score']:.2f})")
        console.print(f"    {hit['schema_name']}")


# ── Encoding schemes ─────────────────────────────────────────────────


@main.group()
def schemes():
    """Inspect registered encoding schemes."""


@schemes.command(name="list")
@click.pass_context
def list_schemes(ctx: click.Context):
    """List all encoding schemes."""
    table = Table(title="Encoding Schemes")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Version")
    table.add_column("Values", justify="right")

    for s in _registry(ctx).list_encoding_schemes():
        table.add_row(s.scheme_id, s.scheme_name, s.scheme_type, s.scheme_version, str(s.value_count))

    console.print(table)


@schemes.command(name="show")
@click.argument("scheme_id")
@click.pass_context
def show_scheme(ctx: click.Context, scheme_id: str):
    """Show an encoding scheme and its values."""
    scheme = _registry(ctx).get_encoding_scheme(scheme_id)
    if scheme is None:
        _fail(ctx, f"Encoding scheme {scheme_id} not found")

    body = "\n".join(f"{v.value}  {v.label}" for v in scheme.scheme_values)
    console.print(Panel(body, title=f"{scheme.scheme_name} ({scheme.format_specification})"))


# ── Vocabularies ─────────────────────────────────────────────────────


@main.group()
def vocabularies():
    """Inspect registered controlled vocabularies."""


@vocabularies.command(name="list")
@click.pass_context
def list_vocabularies(ctx: click.Context):
    """List all controlled vocabularies."""
    table = Table(title="Controlled Vocabularies")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Version")
    table.add_column("Terms", justify="right")

    for v in _registry(ctx).list_controlled_vocabularies():
        table.add_row(v.vocabulary_id, v.vocabulary_name, v.vocabulary_type, v.vocabulary_version, str(v.term_count))

    console.print(table)


@vocabularies.command(name="show")
@click.argument("vocabulary_id")
@click.pass_context
def show_vocabulary(ctx: click.Context, vocabulary_id: str):
    """Show a controlled vocabulary and its terms."""
    vocabulary = _registry(ctx).get_controlled_vocabulary(vocabulary_id)
    if vocabulary is None:
        _fail(ctx, f"Vocabulary {vocabulary_id} not found")

    body = "\n".join(f"{t.term_id}  {t.term_label}  {t.term_definition}" for t in vocabulary.terms)
    console.print(Panel(body, title=f"{vocabulary.vocabulary_name} ({vocabulary.vocabulary_uri})"))


# ── Design ───────────────────────────────────────────────────────────


@main.command()
@click.argument("requirements_path")
@click.option("--register", is_flag=True, help="Register the draft after designing it")
@click.pass_context
def design(ctx: click.Context, requirements_path: str, register: bool):
    """Draft a schema from a requirements YAML document."""
    data = _read_document(ctx, requirements_path)
    registry = _registry(ctx)
    draft = registry.design_schema(requirements_from_dict(data))
    click.echo(yaml.safe_dump(to_dict(draft), sort_keys=False, width=100))

    if register:
        result = registry.register_schema(draft)
        if not result.success:
            _fail(ctx, result.error or "Registration failed")
        console.print(f"[green]Registered[/] {result.schema_id} (v{result.schema_version})")


# ── Statistics / export ──────────────────────────────────────────────


@main.command()
@click.pass_context
def stats(ctx: click.Context):
    """Show registry statistics."""
    statistics = _registry(ctx).statistics()
    table = Table(title="Registry Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    for key, value in statistics.items():
        table.add_row(key.replace("_", " "), str(value))
    console.print(table)


@main.command()
@click.pass_context
def export(ctx: click.Context):
    """Print the full registry contents as JSON."""
    click.echo(json.dumps(_registry(ctx).export_contents(), indent=2))


if __name__ == "__main__":
    main()
