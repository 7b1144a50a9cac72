"""YAML codec for frontmatter blocks.

A :class:`MarkupCodec` parses a metadata block into Python objects and
serializes them back.  Both directions raise
:class:`~vault2blog.errors.MarkupError` on failure.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Protocol

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from vault2blog.errors import MarkupError


class MarkupCodec(Protocol):
    def parse(self, text: str) -> Any: ...

    def serialize(self, data: Any) -> str: ...


def _new_yaml() -> YAML:
    """Create a fresh round-trip YAML parser.

    ruamel.yaml's YAML object is stateful and a failed dump can leave it
    broken, so every operation gets its own instance.
    """
    y = YAML()
    y.preserve_quotes = True
    y.default_flow_style = False
    return y


class YamlCodec:
    """ruamel.yaml round-trip codec."""

    def parse(self, text: str) -> Any:
        try:
            return _new_yaml().load(text)
        except YAMLError as exc:
            raise MarkupError(f"Invalid YAML: {exc}") from exc

    def serialize(self, data: Any) -> str:
        buf = StringIO()
        try:
            _new_yaml().dump(data, buf)
        except YAMLError as exc:
            raise MarkupError(f"Could not serialize YAML: {exc}") from exc
        return buf.getvalue()
