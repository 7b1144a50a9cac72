"""Pydantic models for the directory configuration and its sources.

The persisted file uses camelCase keys (``sourceDir``, ``blogDir``,
``backupDir``); Python code uses the snake_case field names.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Config(BaseModel):
    """The three directory roots, frozen after construction.

    Instances are handed out by :class:`~vault2blog.config.store.ConfigStore`;
    build them directly only in tests.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    source_dir: str = Field(alias="sourceDir")
    blog_dir: str = Field(alias="blogDir")
    backup_dir: str | None = Field(default=None, alias="backupDir")

    def to_json(self) -> str:
        """Serialize with the persisted camelCase keys."""
        return self.model_dump_json(by_alias=True)


# --- initialization sources (discriminated on ``kind``) ---


class ExplicitSource(BaseModel):
    """Directory values given directly, e.g. from CLI flags."""

    model_config = {"frozen": True}

    kind: Literal["explicit"] = "explicit"
    source_dir: str
    blog_dir: str
    backup_dir: str | None = None


class IntegratedSource(BaseModel):
    """Load from a persisted file, bootstrapping it on first run."""

    model_config = {"frozen": True}

    kind: Literal["integrated"] = "integrated"
    path: Path | None = None


ConfigSource = Annotated[ExplicitSource | IntegratedSource, Field(discriminator="kind")]
