"""Global configuration manager for INI settings.

Settings live in ``~/.config/multisum/settings.conf`` (the directory can be
overridden with ``MULTISUM_CONFIG_DIR``). Only the ``[DEFAULT]`` section is
read. A missing file means defaults; the file is never written implicitly.

Example settings.conf::

    [DEFAULT]
    log_level = DEBUG          # file log level
    console_log_level = WARNING
    log_to_file = true
    chunk_size = 1048576
    max_workers = 4
"""

import configparser
import os
from pathlib import Path
from typing import TypedDict

from multisum.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_TO_FILE,
    DEFAULT_MAX_WORKERS,
    ENV_CONFIG_DIR,
    KEY_CHUNK_SIZE,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    KEY_LOG_TO_FILE,
    KEY_MAX_WORKERS,
    SECTION_DEFAULT,
    VALID_LOG_LEVELS,
)
from multisum.logger import get_logger

logger = get_logger(__name__)


class GlobalConfig(TypedDict):
    """Typed view of settings.conf."""

    log_level: str
    console_log_level: str
    log_to_file: bool
    chunk_size: int
    max_workers: int


def default_config_dir() -> Path:
    """Return the settings directory, honouring MULTISUM_CONFIG_DIR."""
    env_dir = os.getenv(ENV_CONFIG_DIR)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR


class ConfigManager:
    """Loads settings.conf into a GlobalConfig."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to ~/.config/multisum)

        """
        self.config_dir = config_dir or default_config_dir()
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> GlobalConfig:
        """Get default global configuration values.

        Returns:
            Default configuration dictionary

        """
        return GlobalConfig(
            log_level=DEFAULT_LOG_LEVEL,
            console_log_level=DEFAULT_CONSOLE_LOG_LEVEL,
            log_to_file=DEFAULT_LOG_TO_FILE,
            chunk_size=DEFAULT_CHUNK_SIZE,
            max_workers=DEFAULT_MAX_WORKERS,
        )

    def load_global_config(self) -> GlobalConfig:
        """Load settings.conf, falling back to defaults per key.

        Returns:
            Loaded configuration

        """
        config = self.get_default_global_config()
        if not self.settings_file.exists():
            logger.debug("No settings file at %s, using defaults", self.settings_file)
            return config

        parser = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except (OSError, configparser.Error) as e:
            logger.warning("Failed to read %s: %s", self.settings_file, e)
            return config

        section = parser[SECTION_DEFAULT]

        config["log_level"] = self._parse_level(
            section.get(KEY_LOG_LEVEL), config["log_level"], KEY_LOG_LEVEL
        )
        config["console_log_level"] = self._parse_level(
            section.get(KEY_CONSOLE_LOG_LEVEL),
            config["console_log_level"],
            KEY_CONSOLE_LOG_LEVEL,
        )

        try:
            config["log_to_file"] = section.getboolean(
                KEY_LOG_TO_FILE, fallback=config["log_to_file"]
            )
        except ValueError:
            logger.warning("Invalid boolean for %s, using default", KEY_LOG_TO_FILE)

        config["chunk_size"] = self._parse_positive_int(
            section.get(KEY_CHUNK_SIZE), config["chunk_size"], KEY_CHUNK_SIZE
        )
        config["max_workers"] = self._parse_positive_int(
            section.get(KEY_MAX_WORKERS), config["max_workers"], KEY_MAX_WORKERS
        )
        return config

    @staticmethod
    def _parse_level(value: str | None, default: str, key: str) -> str:
        if value is None:
            return default
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning("Invalid log level '%s' for %s, using %s", value, key, default)
            return default
        return level

    @staticmethod
    def _parse_positive_int(value: str | None, default: int, key: str) -> int:
        if value is None:
            return default
        try:
            number = int(value)
        except ValueError:
            logger.warning("Invalid integer '%s' for %s, using %d", value, key, default)
            return default
        if number < 1:
            logger.warning("%s must be positive, using %d", key, default)
            return default
        return number
