"""Frontmatter schema for published notes.

The schema is pluggable: a :data:`FrontmatterSchema` is any callable that
turns the parsed metadata into a pydantic model, raising ``ValueError``
(``pydantic.ValidationError`` is one) when the shape does not match.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, field_validator

FrontmatterSchema = Callable[[Any], BaseModel]


class BlogFrontmatter(BaseModel):
    """Frontmatter of a blog post.

    Unknown keys are kept as-is so they survive re-serialization.
    """

    model_config = {"frozen": True, "extra": "allow"}

    title: str
    created_at: datetime | date
    last_modified_at: datetime | date

    @field_validator("created_at", "last_modified_at", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        # Date-only text becomes a date; anything with a time stays a datetime.
        if isinstance(value, str):
            text = value.strip()
            for parse in (date.fromisoformat, datetime.fromisoformat):
                try:
                    return parse(text)
                except ValueError:
                    continue
        return value


def validate_blog_frontmatter(raw: Any) -> BlogFrontmatter:
    """Default :data:`FrontmatterSchema`."""
    return BlogFrontmatter.model_validate(raw)
