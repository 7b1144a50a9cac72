"""Root CLI group for vault2blog with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from vault2blog import __version__
from vault2blog.commands import register_commands
from vault2blog.commands._context import AppContext
from vault2blog.config.settings import RuntimeSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="vault2blog")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Override config file path.",
)
@click.option("--source-dir", default=None, help="Vault directory (skips the config file).")
@click.option("--blog-dir", default=None, help="Blog content directory.")
@click.option("--backup-dir", default=None, help="Backup directory.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: Path | None,
    source_dir: str | None,
    blog_dir: str | None,
    backup_dir: str | None,
) -> None:
    """vault2blog: publish Obsidian notes to a blog."""
    settings = RuntimeSettings()
    ctx.obj = AppContext(
        verbose=verbose or settings.verbose,
        log_json=log_json or settings.log_json,
        config_path=config_path,
        source_dir=source_dir,
        blog_dir=blog_dir,
        backup_dir=backup_dir,
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
