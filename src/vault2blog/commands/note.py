"""Command group: inspect individual vault notes."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from vault2blog.commands import examples_option
from vault2blog.domain.note import Note
from vault2blog.output.console import create_console, get_output


@click.group()
def note() -> None:
    """Parse notes the way the publisher sees them."""


@note.command()
@examples_option(
    """\
  vault2blog note show ~/vault/posts/hello.md
  vault2blog note show ~/vault/posts/hello.md --json
  vault2blog note show ~/vault/posts/hello.md --processed"""
)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--processed", is_flag=True, help="Print the publishable form instead.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
def show(path: Path, processed: bool, json_output: bool) -> None:
    """Show a note's frontmatter and body."""
    doc = Note(path)

    if processed:
        rendered = doc.processed_file()
        if rendered is None:
            raise click.ClickException(f"{path}: no publishable frontmatter")
        click.echo(rendered, nl=False)
        return

    fm = doc.frontmatter
    if json_output:
        payload = {
            "path": str(doc.file_path),
            "frontmatter": fm.model_dump(mode="json") if fm is not None else None,
            "content": doc.original_content,
        }
        click.echo(json.dumps(payload, indent=2))
        if fm is None:
            raise SystemExit(1)
        return

    if fm is None:
        raise click.ClickException(f"{path}: missing or invalid frontmatter")

    console = create_console()
    table = Table(show_header=False, box=None)
    for key, value in fm.model_dump().items():
        table.add_row(f"[v2b.key]{escape(key)}[/]", escape(str(value)))
    console.print(f"[v2b.title]{escape(str(getattr(fm, 'title', path.name)))}[/]")
    console.print(table)
    if doc.original_content:
        console.print()
        console.print(doc.original_content, markup=False)
    click.echo(get_output(console), nl=False)
