"""CLI entry point for postman-openapi."""

import logging
from pathlib import Path

import click

from postman_openapi.converter.flatten import convert
from postman_openapi.errors import CollectionError
from postman_openapi.parser.detect import detect_format
from postman_openapi.parser.postman import load_collection
from postman_openapi.writer import resolve_format, write_document


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
def main():
    """Postman to OpenAPI — turn request collections into API descriptions."""
    pass


@main.command("convert")
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the OpenAPI document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format (auto: from file suffix).")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0), help="JSON indentation.")
@click.option("--title", default=None, help="Override the document title.")
@click.option("--api-version", default=None, help="Override the document version.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def convert_cmd(collection_path: Path, output: Path, fmt: str, indent: int, title: str | None, api_version: str | None, verbose: bool):
    """Convert a Postman collection into an OpenAPI 3.0 document."""
    _setup_logging(verbose)

    if detect_format(collection_path) == "openapi":
        raise click.UsageError(f"{collection_path} is already an OpenAPI document.")

    click.echo(f"Reading {collection_path}...")
    try:
        collection = load_collection(collection_path)
    except CollectionError as e:
        raise click.ClickException(str(e)) from e

    doc = convert(collection, title=title, version=api_version)
    click.echo(f"Found {len(doc.paths)} paths, {doc.operation_count()} operations.")

    write_document(doc, output, fmt=fmt, indent=indent)
    click.echo(f"OpenAPI document ({resolve_format(output, fmt)}) saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def detect(doc_path: Path):
    """Print the detected format of an API document."""
    click.echo(detect_format(doc_path))
