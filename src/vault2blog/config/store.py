"""Process-wide configuration store.

INVARIANT: at most one :class:`Config` lives per process.  The only forward
transition is ``Uninitialized -> Initialized`` via :meth:`ConfigStore.initialize`;
:meth:`ConfigStore.UNSAFE_destroy` is the only way back and exists for tests.

``initialize`` dispatches on the source kind:

- ``explicit``: build from the given values, defaulting ``backup_dir``.
- ``integrated``: load the persisted JSON file.  A malformed file is
  reported and leaves the store uninitialized.  A missing file starts the
  interactive first-run bootstrap, which writes the file.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, ClassVar

import click
import structlog
from pydantic import TypeAdapter, ValidationError
from rich.markup import escape

from vault2blog.config.models import Config, ConfigSource, ExplicitSource, IntegratedSource
from vault2blog.config.settings import (
    RuntimeSettings,
    default_backup_dir,
    default_config_path,
)
from vault2blog.errors import ConfigReadError, UninitializedConfigError
from vault2blog.output.console import create_stderr_console

log = structlog.get_logger(logger_name=__name__)

Prompter = Callable[[str], str]
"""Text-input capability: returns the answer, or ``""`` when left blank."""

SOURCE_DIR_PROMPT = "Please provide a source directory (Obsidian vault path)"
BLOG_DIR_PROMPT = (
    "Please provide the blog content directory. If using Astro, this would be inside /content"
)
BACKUP_DIR_PROMPT = (
    "(Optional) Please provide the backup directory. If left blank, we will use "
    "our default backup directory in $HOME/.vault2blog/backups."
)

_SOURCE_ADAPTER: TypeAdapter[ExplicitSource | IntegratedSource] = TypeAdapter(ConfigSource)


def click_prompter(text: str) -> str:
    """Prompt on the terminal, accepting an empty answer."""
    return click.prompt(text, default="", show_default=False)


class ConfigStore:
    """Holder of the process-wide :class:`Config` singleton."""

    _instance: ClassVar[Config | None] = None

    @classmethod
    def initialize(
        cls,
        source: ExplicitSource | IntegratedSource | Mapping[str, Any],
        *,
        prompter: Prompter | None = None,
        settings: RuntimeSettings | None = None,
    ) -> Config | None:
        """Create the configuration, or return the one that already exists.

        Once a configuration exists every argument is ignored.

        Args:
            source: An :class:`ExplicitSource`, an :class:`IntegratedSource`,
                or a mapping with a ``kind`` key validating to one of them.
            prompter: Text-input used by the first-run bootstrap.
                Defaults to :func:`click_prompter`.
            settings: Runtime settings; read from the environment if omitted.

        Returns:
            The configuration, or ``None`` when a persisted file was found
            but could not be parsed.

        Raises:
            ConfigReadError: The persisted file exists but reading it failed
                for a reason other than it being absent.
        """
        if cls._instance is not None:
            return cls._instance

        if isinstance(source, Mapping):
            source = _SOURCE_ADAPTER.validate_python(source)

        if isinstance(source, ExplicitSource):
            cls._instance = Config(
                source_dir=source.source_dir,
                blog_dir=source.blog_dir,
                backup_dir=(
                    source.backup_dir if source.backup_dir is not None else default_backup_dir()
                ),
            )
            log.debug("config_initialized", kind=source.kind)
        else:
            path = source.path if source.path is not None else default_config_path()
            cls._instance = _load_or_bootstrap(
                path,
                prompter or click_prompter,
                settings or RuntimeSettings(),
            )
        return cls._instance

    @classmethod
    def retrieve(cls) -> Config:
        """Return the current configuration.

        Raises:
            UninitializedConfigError: No configuration has been created yet.
        """
        if cls._instance is None:
            raise UninitializedConfigError()
        return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def UNSAFE_destroy(cls) -> None:  # noqa: N802
        """Test-only: delete the default config file and drop the singleton.

        Any failure to delete the file is ignored.
        """
        with contextlib.suppress(OSError):
            default_config_path().unlink(missing_ok=True)
        cls._instance = None


# ---------------------------------------------------------------------------
# Integrated source: load or bootstrap
# ---------------------------------------------------------------------------


def _load_or_bootstrap(path: Path, prompter: Prompter, settings: RuntimeSettings) -> Config | None:
    plog = log.bind(config_path=str(path))
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return _bootstrap(path, prompter, settings)
    except UnicodeDecodeError as exc:
        return _report_malformed(plog, path, f"File is not valid UTF-8: {exc}")
    except OSError as exc:
        msg = f"Could not read configuration at {path}: {exc}"
        raise ConfigReadError(msg) from exc

    try:
        config = Config.model_validate_json(raw)
    except ValidationError as exc:
        return _report_malformed(plog, path, str(exc))

    plog.debug("config_loaded")
    return config


def _report_malformed(
    plog: structlog.typing.FilteringBoundLogger, path: Path, detail: str
) -> None:
    plog.error("config_malformed", detail=detail)
    create_stderr_console().print(
        "[v2b.error]We found your configuration but could not parse it.[/] "
        f"It seems that the format is wrong: [v2b.path]{escape(str(path))}[/]\n"
        f"{escape(detail)}"
    )


def _bootstrap(path: Path, prompter: Prompter, settings: RuntimeSettings) -> Config:
    """First run: prompt for the directories and persist them to *path*."""
    create_stderr_console().print(
        "👋 Hey, this looks like the first time you use vault2blog. "
        "Creating a configuration file."
    )
    source_dir = prompter(SOURCE_DIR_PROMPT) or ""
    blog_dir = prompter(BLOG_DIR_PROMPT) or ""
    backup_dir = prompter(BACKUP_DIR_PROMPT) or default_backup_dir()
    config = Config(source_dir=source_dir, blog_dir=blog_dir, backup_dir=backup_dir)

    if not settings.is_testing:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.to_json(), encoding="utf-8")
        log.info("config_bootstrapped", config_path=str(path))
        return config

    # Never touch the real file in test mode.
    fd, tmp_name = tempfile.mkstemp(prefix="vault2blog-", suffix=".json")
    os.close(fd)
    target = Path(tmp_name)
    try:
        target.write_text(config.to_json(), encoding="utf-8")
        log.info("config_bootstrapped", config_path=str(target), testing=True)
    finally:
        target.unlink(missing_ok=True)
    return config
