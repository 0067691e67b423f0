"""Centralized constants module for multisum.

This module serves as the single source of truth for all shared constants
across the multisum codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from multisum.constants import STDIN_SENTINEL
"""

from typing import Final

# =============================================================================
# Hashing Constants
# =============================================================================

# Bytes read per chunk when streaming a file through a digest
DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024

# Path token meaning "read from standard input"
STDIN_SENTINEL: Final[str] = "-"

# Legal bit lengths per family token (canonical lowercase family names)
SHA_LENGTHS: Final[tuple[int, ...]] = (160, 256, 512)
SHA3_LENGTHS: Final[tuple[int, ...]] = (256, 512)
BLAKE2B_LENGTHS: Final[tuple[int, ...]] = (256, 512)
MD5_LENGTH: Final[int] = 128

# Length assumed for a bare "BLAKE2b" name in BSD lines (b2sum --tag)
BLAKE2B_BSD_DEFAULT_LENGTH: Final[int] = 512

HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "multisum"

# Environment overrides (mainly used by the test-suite)
ENV_CONFIG_DIR: Final[str] = "MULTISUM_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "MULTISUM_LOG_DIR"

SECTION_DEFAULT: Final[str] = "DEFAULT"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_TO_FILE: Final[str] = "log_to_file"
KEY_CHUNK_SIZE: Final[str] = "chunk_size"
KEY_MAX_WORKERS: Final[str] = "max_workers"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_LOG_TO_FILE: Final[bool] = False
DEFAULT_MAX_WORKERS: Final[int] = 1

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Logging Constants
# =============================================================================

LOG_FILE_NAME: Final[str] = "multisum.log"

# Rotate log files once they reach this size (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Exit Status Constants
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130
