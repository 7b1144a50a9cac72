"""Subcommand modules for vault2blog.

Provides register_commands() which uses deferred imports to keep
``vault2blog --help`` fast, and the ``--examples`` flag shared by the
``show`` commands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

F = TypeVar("F", bound=Callable[..., object])


def examples_option(examples: str) -> Callable[[F], F]:
    """Add an eager ``--examples`` flag that prints *examples* and exits."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


def register_commands(cli: click.Group) -> None:
    """Register the ``config`` and ``note`` groups on the root CLI group."""
    from vault2blog.commands.config_cmd import config
    from vault2blog.commands.note import note

    cli.add_command(config)
    cli.add_command(note)
