"""Note: read-only snapshot of one vault file.

A note is expected to look like::

    ---
    title: Hello
    created_at: 2024-01-01
    last_modified_at: 2024-01-02
    ---
    Body text

Splitting on ``---`` lines gives three sections: an empty preamble, the
metadata block and the body.  Anything else is a structural mismatch.

INVARIANT: only the initial file read may raise.  Structural mismatches,
parse errors, schema errors and serialization errors all degrade to
``None`` so a batch can skip a bad note and carry on.
"""

from __future__ import annotations

import re
from pathlib import Path

import structlog
from pydantic import BaseModel

from vault2blog.domain.frontmatter import FrontmatterSchema, validate_blog_frontmatter
from vault2blog.domain.markup import MarkupCodec, YamlCodec
from vault2blog.errors import MarkupError

log = structlog.get_logger(logger_name=__name__)

FRONTMATTER_DELIMITER = "---"

_DELIMITER_LINE = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)


def split_sections(text: str) -> tuple[str, str, str] | None:
    """Split *text* into ``(preamble, metadata, body)``.

    The body keeps any later ``---`` lines (e.g. Markdown rules).  Returns
    None when there are fewer than two delimiter lines or the preamble is
    not blank.
    """
    parts = _DELIMITER_LINE.split(text, maxsplit=2)
    if len(parts) < 3 or parts[0].strip():
        return None
    preamble, metadata, body = parts
    return preamble, metadata, body


class Note:
    """Parsed view of a single vault note.

    Attributes:
        file_path: Path the note was read from.
        original_file: Full raw text, read once at construction.
    """

    def __init__(
        self,
        file_path: str | Path,
        *,
        codec: MarkupCodec | None = None,
        schema: FrontmatterSchema | None = None,
    ) -> None:
        self.file_path = Path(file_path)
        self.original_file = self.file_path.read_text(encoding="utf-8")
        self._codec: MarkupCodec = codec or YamlCodec()
        self._schema: FrontmatterSchema = schema or validate_blog_frontmatter
        self._sections = split_sections(self.original_file)
        self._frontmatter = self.parse_frontmatter()

    def __repr__(self) -> str:
        return f"Note({str(self.file_path)!r})"

    def _log(self) -> structlog.typing.FilteringBoundLogger:
        return log.bind(note_path=str(self.file_path))

    @property
    def frontmatter(self) -> BaseModel | None:
        """Validated frontmatter, or None if missing or invalid."""
        return self._frontmatter

    @property
    def original_frontmatter(self) -> str | None:
        """The raw metadata block, whether or not it parsed.

        None unless a closing delimiter line exists: a lone opening ``---``
        followed by text has no metadata block, so nothing after it is
        reported here.
        """
        if self._sections is None:
            return None
        return self._sections[1]

    @property
    def original_content(self) -> str | None:
        """The body after the frontmatter, stripped; None if malformed."""
        if self._sections is None:
            return None
        return self._sections[2].strip()

    def parse_frontmatter(self) -> BaseModel | None:
        """Parse and validate the metadata block.

        Returns None when there is no block, the YAML is invalid, or the
        result does not match the schema.
        """
        raw = self.original_frontmatter
        if raw is None:
            return None
        try:
            data = self._codec.parse(raw)
            return self._schema(data)
        except (MarkupError, ValueError, TypeError) as exc:
            self._log().debug("frontmatter_invalid", error=str(exc))
            return None

    def processed_file(self) -> str | None:
        """Render the frontmatter for publication.

        The original body is not reattached: the result is the delimited
        metadata block followed by an empty body.
        """
        if self._frontmatter is None:
            return None
        try:
            serialized = self._codec.serialize(self._frontmatter.model_dump())
        except MarkupError as exc:
            self._log().warning(
                "note_processing_failed",
                title=getattr(self._frontmatter, "title", None),
                error=str(exc),
            )
            return None
        if not serialized.endswith("\n"):
            serialized += "\n"
        return f"{FRONTMATTER_DELIMITER}\n{serialized}{FRONTMATTER_DELIMITER}\n"
