"""Tests for runtime configuration."""

from pathlib import Path

import pytest

from gitswitch.config import DEFAULT_KEY_LENGTH, get_settings, load_settings


def test_defaults(temp_home: Path) -> None:
    """Test settings with no overrides besides the app directory."""
    settings = load_settings()

    assert settings.app_dir == temp_home
    assert settings.data_file == temp_home / "gitusers.json"
    assert settings.log_file == temp_home / "gitswitch.log"
    assert settings.key_length == DEFAULT_KEY_LENGTH
    assert settings.git_executable == "git"


def test_app_dir_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the per-user app directory is used without an override."""
    monkeypatch.delenv("GITSWITCH_HOME")
    monkeypatch.setattr("gitswitch.config.click.get_app_dir", lambda name: f"/appdata/{name}")

    assert load_settings().app_dir == Path("/appdata/gitswitch")


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test environment overrides."""
    monkeypatch.setenv("GITSWITCH_KEY_LENGTH", "0")
    monkeypatch.setenv("GITSWITCH_GIT", "/usr/local/bin/git")

    settings = load_settings()

    assert settings.key_length == 0
    assert settings.git_executable == "/usr/local/bin/git"


@pytest.mark.parametrize("value", ["three", "-1", ""])
def test_invalid_key_length(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    """Test that invalid key lengths fall back to the default."""
    monkeypatch.setenv("GITSWITCH_KEY_LENGTH", value)

    assert load_settings().key_length == DEFAULT_KEY_LENGTH


def test_get_settings_cached() -> None:
    """Test that settings are resolved once."""
    assert get_settings() is get_settings()
