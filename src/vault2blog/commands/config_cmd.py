"""Command group: inspect the directory configuration."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from vault2blog.commands import examples_option
from vault2blog.output.console import create_console, get_output

if TYPE_CHECKING:
    from vault2blog.commands._context import AppContext


@click.group()
def config() -> None:
    """Show the vault, blog and backup directories."""


@config.command()
@examples_option(
    """\
  vault2blog config show
  vault2blog config show --json
  vault2blog -c ./configuration.json config show
  vault2blog --source-dir ~/vault --blog-dir ~/blog/src/content config show"""
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.pass_obj
def show(app: AppContext, json_output: bool) -> None:
    """Print the active configuration, bootstrapping it on first run."""
    cfg = app.config
    if json_output:
        click.echo(json.dumps(cfg.model_dump(by_alias=True), indent=2))
        return

    console = create_console()
    for label, value in (
        ("source", cfg.source_dir),
        ("blog", cfg.blog_dir),
        ("backup", cfg.backup_dir),
    ):
        shown = value if value is not None else "-"
        console.print(f"[v2b.key]{label:<7}[/] [v2b.path]{shown}[/]")
    click.echo(get_output(console), nl=False)
