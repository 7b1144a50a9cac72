"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``.  The configuration is initialized lazily so
``--help`` and commands that only read notes never prompt.
"""

from __future__ import annotations

from pathlib import Path

import click

from vault2blog.config.logging import configure_logging
from vault2blog.config.models import Config, ExplicitSource, IntegratedSource
from vault2blog.config.store import ConfigStore
from vault2blog.errors import ConfigError


class AppContext:
    """Global CLI options plus lazy access to the configuration."""

    def __init__(
        self,
        *,
        verbose: bool = False,
        log_json: bool = False,
        config_path: Path | None = None,
        source_dir: str | None = None,
        blog_dir: str | None = None,
        backup_dir: str | None = None,
    ) -> None:
        self.verbose = verbose
        self.log_json = log_json
        self.config_path = config_path
        self.source_dir = source_dir
        self.blog_dir = blog_dir
        self.backup_dir = backup_dir

        configure_logging(verbose=verbose, log_json=log_json)

    @property
    def config(self) -> Config:
        """The process configuration, initialized on first access.

        Explicit when both ``--source-dir`` and ``--blog-dir`` were given,
        otherwise loaded from (or bootstrapped into) the config file.
        """
        if self.source_dir and self.blog_dir:
            source: ExplicitSource | IntegratedSource = ExplicitSource(
                source_dir=self.source_dir,
                blog_dir=self.blog_dir,
                backup_dir=self.backup_dir,
            )
        else:
            source = IntegratedSource(path=self.config_path)
        try:
            ConfigStore.initialize(source)
            return ConfigStore.retrieve()
        except ConfigError as exc:
            raise click.ClickException(str(exc)) from exc
