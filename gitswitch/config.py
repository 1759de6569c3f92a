"""Runtime configuration.

Every setting comes from the environment with a sensible default. Use
get_settings() to access it; the result is cached for the process.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import click

logger = logging.getLogger(__name__)

APP_NAME = "gitswitch"
DATA_FILE_NAME = "gitusers.json"
LOG_FILE_NAME = "gitswitch.log"
DEFAULT_KEY_LENGTH = 3


def _parse_int_env(name: str, default: int) -> int:
    """Parse a non-negative integer environment variable.

    Args:
        name: Environment variable name.
        default: Value used when unset or invalid.

    Returns:
        Parsed value or default.
    """
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={value!r}")
        return default
    if parsed < 0:
        logger.warning(f"Ignoring negative {name}={value!r}")
        return default
    return parsed


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values."""
    app_dir: Path
    key_length: int = DEFAULT_KEY_LENGTH
    git_executable: str = "git"

    @property
    def data_file(self) -> Path:
        return self.app_dir / DATA_FILE_NAME

    @property
    def log_file(self) -> Path:
        return self.app_dir / LOG_FILE_NAME


def load_settings() -> Settings:
    """Build settings from the current environment."""
    home = os.getenv("GITSWITCH_HOME")
    app_dir = Path(home).expanduser() if home else Path(click.get_app_dir(APP_NAME))
    return Settings(
        app_dir=app_dir,
        key_length=_parse_int_env("GITSWITCH_KEY_LENGTH", DEFAULT_KEY_LENGTH),
        git_executable=os.getenv("GITSWITCH_GIT") or "git",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings."""
    return load_settings()
