"""CLI entry point for http-api-docs."""

from datetime import date, datetime
from pathlib import Path

import click

from http_api_docs.generator.docs import generate_docs
from http_api_docs.generator.markdown import MarkdownFormatter
from http_api_docs.parser.schema import ApiSchema, SchemaError, load_schema


def _load(schema_path: Path) -> ApiSchema:
    """Load the schema, turning schema errors into CLI errors."""
    try:
        return load_schema(schema_path)
    except SchemaError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def main():
    """HTTP API Docs: render the RPC API reference from an endpoint schema."""
    pass


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path for the Markdown reference.")
@click.option("--api-version", envvar="HTTP_API_DOCS_VERSION", default=None, help="API version shown in the intro. Defaults to the schema's version.")
@click.option("--date", "generated_on", default=None, type=click.DateTime(formats=["%Y-%m-%d"]), help="Generation date shown in the intro (YYYY-MM-DD). Defaults to today.")
def generate(schema_path: Path, output: Path, api_version: str | None, generated_on: datetime | None):
    """Generate the full API reference document."""
    click.echo(f"Loading {schema_path}...")
    schema = _load(schema_path)
    click.echo(f"Found {len(schema.endpoints)} endpoints.")

    version = api_version or schema.version
    if not version:
        raise click.UsageError("No API version: pass --api-version or set 'version' in the schema.")
    if api_version and schema.version and api_version != schema.version:
        click.echo(f"Warning: schema was extracted from v{schema.version}, documenting as v{api_version}.", err=True)

    day = generated_on.date() if generated_on else date.today()
    formatter = MarkdownFormatter(version=version, generated_on=day)
    result = generate_docs(schema.endpoints, formatter)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result, encoding="utf-8")
    click.echo(f"API reference saved to {output}")


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def index(schema_path: Path):
    """Print the endpoint index of a schema."""
    schema = _load(schema_path)
    # The index does not depend on version or date
    formatter = MarkdownFormatter(version=schema.version or "", generated_on=date.today())
    click.echo(formatter.generate_index(schema.endpoints), nl=False)
