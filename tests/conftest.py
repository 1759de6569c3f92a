"""Test configuration and fixtures."""

import subprocess
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from gitswitch.config import get_settings
from gitswitch.identity import IdentityStore


@pytest.fixture(autouse=True)
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point the app directory at a temporary location."""
    app_dir = tmp_path / "gitswitch"
    monkeypatch.setenv("GITSWITCH_HOME", str(app_dir))
    monkeypatch.delenv("GITSWITCH_KEY_LENGTH", raising=False)
    monkeypatch.delenv("GITSWITCH_GIT", raising=False)
    get_settings.cache_clear()
    yield app_dir
    get_settings.cache_clear()


@pytest.fixture
def store(temp_home: Path) -> IdentityStore:
    """Create an identity store in the temporary app directory."""
    return IdentityStore(temp_home / "gitusers.json")


@pytest.fixture
def mock_run() -> Generator[Mock, None, None]:
    """Mock subprocess.run for git invocations."""
    with patch("gitswitch.gitconfig.subprocess.run") as mock:
        mock.side_effect = lambda cmd, *args, **kwargs: subprocess.CompletedProcess(
            cmd, returncode=0, stdout="", stderr=""
        )
        yield mock
