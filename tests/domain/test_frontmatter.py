"""Tests for the BlogFrontmatter schema."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from vault2blog.domain.frontmatter import BlogFrontmatter, validate_blog_frontmatter


def _raw(**overrides: object) -> dict[str, object]:
    raw: dict[str, object] = {
        "title": "Post",
        "created_at": date(2024, 1, 1),
        "last_modified_at": date(2024, 1, 2),
    }
    raw.update(overrides)
    return raw


class TestBlogFrontmatter:
    def test_required_fields(self) -> None:
        fm = validate_blog_frontmatter(_raw())
        assert fm.title == "Post"
        assert fm.created_at == date(2024, 1, 1)

    @pytest.mark.parametrize("missing", ["title", "created_at", "last_modified_at"])
    def test_missing_field_rejected(self, missing: str) -> None:
        raw = _raw()
        del raw[missing]
        with pytest.raises(ValidationError):
            BlogFrontmatter.model_validate(raw)

    @pytest.mark.parametrize("value", [date(2024, 1, 1), "2024-01-01", " 2024-01-01 "])
    def test_date_only_values_become_dates(self, value: object) -> None:
        created = validate_blog_frontmatter(_raw(created_at=value)).created_at
        assert type(created) is date
        assert created == date(2024, 1, 1)

    @pytest.mark.parametrize(
        "value",
        [
            datetime(2024, 1, 1, 8, 0),
            "2024-01-01T08:00:00",
            "2024-01-01 08:00:00",
        ],
    )
    def test_timestamps_keep_their_time(self, value: object) -> None:
        created = validate_blog_frontmatter(_raw(created_at=value)).created_at
        assert created == datetime(2024, 1, 1, 8, 0)

    def test_midnight_timestamp_stays_datetime(self) -> None:
        created = validate_blog_frontmatter(_raw(created_at="2024-01-01T00:00:00")).created_at
        assert isinstance(created, datetime)

    def test_unparseable_date_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_blog_frontmatter(_raw(last_modified_at="next week"))

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_blog_frontmatter(["title", "Post"])

    def test_extra_fields_kept_in_order(self) -> None:
        fm = validate_blog_frontmatter(_raw(slug="post", draft=False))
        assert list(fm.model_dump()) == [
            "title",
            "created_at",
            "last_modified_at",
            "slug",
            "draft",
        ]

    def test_frozen(self) -> None:
        fm = validate_blog_frontmatter(_raw())
        with pytest.raises(ValidationError):
            fm.title = "Changed"  # type: ignore[misc]
