"""CLI entry point for openapi-path-item."""

from pathlib import Path

import click

from openapi_path_item.codec import detect_format, dump_paths, load_paths
from openapi_path_item.errors import PathItemError
from openapi_path_item.models.path_item import Paths


def _load(doc_path: Path, fmt: str = "auto") -> Paths:
    try:
        return load_paths(doc_path, fmt)
    except PathItemError as e:
        raise click.ClickException(f"Failed to decode {doc_path}: {e}") from e


@click.group()
def main():
    """OpenAPI Path Item tools: inspect and normalize the paths of an API document."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Input format.")
def show(doc_path: Path, fmt: str):
    """List every path and the HTTP methods it defines."""
    paths = _load(doc_path, fmt)
    click.echo(f"Found {len(paths)} paths.")

    for path, entry in paths.items():
        if entry.is_reference:
            click.echo(f"  {path} -> {entry.ref}")
            continue
        methods = [key.value.upper() for key in entry.value.operations()]
        if methods:
            click.echo(f"  {path}: {', '.join(methods)}")
        else:
            click.echo(f"  {path}: (no operations)")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the normalized paths map.")
@click.option("--to", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format.")
def normalize(doc_path: Path, output: Path, fmt: str):
    """Decode every path item and write the re-encoded paths map."""
    click.echo(f"Reading paths from {doc_path}...")
    paths = _load(doc_path)

    if fmt == "auto":
        fmt = detect_format(output)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_paths(paths, fmt), encoding="utf-8")
    click.echo(f"Wrote {len(paths)} paths to {output} ({fmt})")
