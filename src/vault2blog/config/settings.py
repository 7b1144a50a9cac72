"""Runtime settings read from ``VAULT2BLOG_*`` environment variables.

Home-derived defaults are functions rather than module constants so that
they follow ``HOME`` at call time (tests redirect it with monkeypatch).
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

APP_DIRNAME = ".vault2blog"
CONFIG_FILENAME = "configuration.json"
BACKUP_DIRNAME = "backups"
TEST_MODE = "TEST"


def app_home() -> Path:
    """``$HOME/.vault2blog``."""
    return Path.home() / APP_DIRNAME


def default_config_path() -> Path:
    """Location of the persisted configuration when no path is given."""
    return app_home() / CONFIG_FILENAME


def default_backup_dir() -> str:
    """Backup directory used when none is supplied."""
    return str(app_home() / BACKUP_DIRNAME)


class RuntimeSettings(BaseSettings):
    """Environment-driven switches for the current process.

    Attributes:
        env_mode: ``"TEST"`` redirects the first-run configuration write to
            a disposable temporary file.
        verbose: Default for the CLI ``--verbose`` flag.
        log_json: Default for the CLI ``--log-json`` flag.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VAULT2BLOG_",
    }

    env_mode: str = "production"
    verbose: bool = False
    log_json: bool = False

    @property
    def is_testing(self) -> bool:
        return self.env_mode.upper() == TEST_MODE
