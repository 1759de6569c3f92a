"""Global Git identity management."""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .exceptions import GitConfigError
from .identity import Identity

logger = logging.getLogger(__name__)

GIT_NOT_FOUND = "Git executable not found. Make sure Git is installed and in the path variable"


def set_global_value(key: str, value: str, git_executable: str = "git") -> None:
    """Set a single value in the global Git configuration.

    Args:
        key: Config key, e.g. user.name
        value: New value
        git_executable: Git command to run

    Raises:
        GitConfigError: If Git cannot be started or exits with an error
    """
    cmd = [git_executable, "config", "--global", key, value]
    logger.debug(f"Running: {' '.join(cmd[:-1])} <value>")
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        logger.warning(f"git config {key} failed with code {e.returncode}: {e.stderr}")
        raise GitConfigError(
            f"Failed to set {key}",
            details=(e.stderr or "").strip() or None,
        ) from e
    except OSError as e:
        logger.warning(f"Could not start {git_executable}: {e}")
        raise GitConfigError(GIT_NOT_FOUND, details=str(e)) from e


def apply_identity(identity: Identity, git_executable: str = "git") -> None:
    """Make an identity the global Git user."""
    set_global_value("user.name", identity.name, git_executable)
    set_global_value("user.email", identity.email, git_executable)
    logger.debug(f"Global Git identity set to {identity.initials}")


def get_global_value(
    key: str,
    config_path: Optional[Path] = None,
    git_executable: str = "git",
) -> Optional[str]:
    """Read a single value the way git config --global resolves it.

    Args:
        key: Config key, e.g. user.name
        config_path: Config file to read instead of the user's global one
        git_executable: Git command to run

    Returns:
        The value, or None if it is not set

    Raises:
        GitConfigError: If Git cannot be started or exits with an error
    """
    try:
        # GitPython refuses to import without a working git executable
        from git.cmd import Git
        from git.exc import GitCommandError, GitCommandNotFound
    except ImportError as e:
        logger.debug(f"GitPython unavailable: {e}")
        raise GitConfigError(GIT_NOT_FOUND, details=str(e)) from e

    scope = ["--file", str(config_path)] if config_path else ["--global"]
    cmd = [git_executable, "config", *scope, "--get", key]
    try:
        value = Git().execute(cmd)
    except GitCommandNotFound as e:
        logger.debug(f"Could not start {git_executable}: {e}")
        raise GitConfigError(GIT_NOT_FOUND, details=str(e)) from e
    except GitCommandError as e:
        # git config --get exits with 1 when the key is unset
        if e.status == 1:
            return None
        logger.warning(f"git config --get {key} failed with code {e.status}")
        raise GitConfigError(f"Failed to read {key}", details=str(e.stderr).strip() or None) from e

    return str(value) or None


def read_global_identity(
    config_path: Optional[Path] = None,
    git_executable: str = "git",
) -> tuple[Optional[str], Optional[str]]:
    """Read user.name and user.email from the global Git configuration.

    Returns:
        Tuple of (name, email); missing values are None
    """
    name = get_global_value("user.name", config_path, git_executable)
    email = get_global_value("user.email", config_path, git_executable)
    logger.debug("Read global identity")
    return (name, email)
