"""Exception hierarchy for vault2blog.

Only configuration problems raise. Document problems degrade to ``None``
on the :class:`~vault2blog.domain.note.Note` accessors instead.
"""

from __future__ import annotations


class Vault2BlogError(Exception):
    """Base class for all vault2blog errors."""


class ConfigError(Vault2BlogError):
    """Base class for configuration errors."""


class UninitializedConfigError(ConfigError):
    """Raised by ``ConfigStore.retrieve()`` before a successful initialize."""

    def __init__(self) -> None:
        super().__init__(
            "The configuration has not been initialized. "
            "Use ConfigStore.initialize() before retrieving it."
        )


class ConfigReadError(ConfigError):
    """The configuration file exists but could not be read."""


class MarkupError(Vault2BlogError):
    """A frontmatter block could not be parsed or serialized."""
