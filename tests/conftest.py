"""Shared pytest fixtures and test helpers for vault2blog tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from vault2blog.config.store import ConfigStore

SAMPLE_NOTE = (
    "---\ntitle: Test\ncreated_at: 2024-01-01\nlast_modified_at: 2024-01-02\n---\nBody text"
)


@pytest.fixture(autouse=True)
def home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty directory so no real config is touched."""
    fake_home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.delenv("VAULT2BLOG_ENV_MODE", raising=False)
    monkeypatch.delenv("VAULT2BLOG_VERBOSE", raising=False)
    monkeypatch.delenv("VAULT2BLOG_LOG_JSON", raising=False)
    return fake_home


@pytest.fixture(autouse=True)
def _reset_store(home: Path) -> Generator[None]:
    """Every test starts and ends with an uninitialized store."""
    ConfigStore.UNSAFE_destroy()
    yield
    ConfigStore.UNSAFE_destroy()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None]:
    """Undo ``configure_logging`` so later tests never write to a closed stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_note(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a note file under ``tmp_path/vault``."""
    vault = tmp_path / "vault"
    vault.mkdir(exist_ok=True)

    def _write(content: str = SAMPLE_NOTE, name: str = "note.md") -> Path:
        path = vault / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class ScriptedPrompter:
    """Prompter answering from a fixed script and recording the questions."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, text: str) -> str:
        self.prompts.append(text)
        return self.answers.pop(0)
