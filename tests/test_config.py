"""Tests for ConfigManager and settings.conf parsing."""

import logging
from pathlib import Path

import pytest

from multisum.config import ConfigManager, default_config_dir


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Provide a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


def _write_settings(config_dir: Path, body: str) -> None:
    (config_dir / "settings.conf").write_text(body, encoding="utf-8")


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    """Test defaults are used and no file is created."""
    manager = ConfigManager(tmp_path / "nowhere")

    config = manager.load_global_config()

    assert config == manager.get_default_global_config()
    assert config["max_workers"] == 1
    assert config["chunk_size"] == 65536
    assert not manager.settings_file.exists()


def test_values_loaded(config_dir: Path) -> None:
    """Test every key is read, with inline comments ignored."""
    _write_settings(
        config_dir,
        "[DEFAULT]\n"
        "log_level = debug  # file level\n"
        "console_log_level = ERROR\n"
        "log_to_file = yes\n"
        "chunk_size = 4096\n"
        "max_workers = 8 ; threads\n",
    )

    config = ConfigManager(config_dir).load_global_config()

    assert config == {
        "log_level": "DEBUG",
        "console_log_level": "ERROR",
        "log_to_file": True,
        "chunk_size": 4096,
        "max_workers": 8,
    }


@pytest.mark.parametrize(
    ("body", "key"),
    [
        ("log_level = LOUD", "log_level"),
        ("console_log_level = 3", "console_log_level"),
        ("log_to_file = maybe", "log_to_file"),
        ("chunk_size = big", "chunk_size"),
        ("max_workers = 0", "max_workers"),
    ],
)
def test_invalid_value_falls_back(
    config_dir: Path, caplog: pytest.LogCaptureFixture, body: str, key: str
) -> None:
    """Test an invalid value is replaced by its default with a warning."""
    _write_settings(config_dir, f"[DEFAULT]\n{body}\n")
    manager = ConfigManager(config_dir)

    with caplog.at_level(logging.WARNING):
        config = manager.load_global_config()

    assert config[key] == manager.get_default_global_config()[key]
    assert key in caplog.text


def test_unreadable_file_falls_back(
    config_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Test a file without a section header gives defaults."""
    _write_settings(config_dir, "max_workers = 4\n")
    manager = ConfigManager(config_dir)

    with caplog.at_level(logging.WARNING):
        config = manager.load_global_config()

    assert config == manager.get_default_global_config()
    assert "Failed to read" in caplog.text


def test_default_config_dir_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test MULTISUM_CONFIG_DIR overrides the settings directory."""
    monkeypatch.setenv("MULTISUM_CONFIG_DIR", "/tmp/multisum-conf")
    assert default_config_dir() == Path("/tmp/multisum-conf")


def test_default_config_dir_home(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the settings directory defaults to ~/.config/multisum."""
    monkeypatch.delenv("MULTISUM_CONFIG_DIR", raising=False)
    assert default_config_dir() == Path.home() / ".config" / "multisum"
