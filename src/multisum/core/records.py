"""Checksum records and verification result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from multisum.constants import HEX_DIGITS
from multisum.core.algorithms import AlgorithmSpec


class Mode(Enum):
    """GNU read mode marker: ``' '`` for text, ``'*'`` for binary."""

    TEXT = " "
    BINARY = "*"


class Dialect(Enum):
    """Checksum line convention."""

    GNU = "gnu"
    BSD = "bsd"


def is_valid_digest(digest_hex: str, width: int) -> bool:
    """Check that ``digest_hex`` is hex of exactly ``width`` characters."""
    return len(digest_hex) == width and all(c in HEX_DIGITS for c in digest_hex)


@dataclass(slots=True, frozen=True)
class ChecksumRecord:
    """One line of a checksum file.

    Attributes:
        algorithm: Algorithm the digest was produced with
        digest_hex: Lowercase hex digest of ``algorithm.hex_width`` chars
        file_path: Path exactly as written in the file or given by the user
        mode: Text or binary marker (always TEXT for BSD lines)
        dialect: Line convention the record is rendered in

    Raises:
        ValueError: If the digest is not lowercase fixed-width hex.

    """

    algorithm: AlgorithmSpec
    digest_hex: str
    file_path: str
    mode: Mode = Mode.TEXT
    dialect: Dialect = Dialect.GNU

    def __post_init__(self) -> None:
        if not is_valid_digest(self.digest_hex, self.algorithm.hex_width):
            msg = (
                f"digest must be {self.algorithm.hex_width} hex characters "
                f"for {self.algorithm.canonical_name}"
            )
            raise ValueError(msg)
        if self.digest_hex != self.digest_hex.lower():
            msg = "digest must be lowercase"
            raise ValueError(msg)
        if not self.file_path:
            msg = "file path must not be empty"
            raise ValueError(msg)
        # BSD lines do not encode a mode
        if self.dialect is Dialect.BSD and self.mode is not Mode.TEXT:
            object.__setattr__(self, "mode", Mode.TEXT)


@dataclass(slots=True, frozen=True)
class FileError:
    """A file that could not be opened or read while generating."""

    file_path: str
    reason: str


class OutcomeKind(Enum):
    """Classification of a verified checksum line."""

    MATCH = "match"
    MISMATCH = "mismatch"
    UNREADABLE_FILE = "unreadable_file"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    FORMAT_ERROR = "format_error"


@dataclass(slots=True, frozen=True)
class VerificationOutcome:
    """Result of checking one line of a checksum file."""

    kind: OutcomeKind
    file_path: str | None
    line_number: int
    line: str
    expected: str | None = None
    actual: str | None = None
    reason: str | None = None

    @property
    def passed(self) -> bool:
        """Whether the line verified successfully."""
        return self.kind is OutcomeKind.MATCH

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for the JSON report.

        Returns:
            Dictionary representation

        """
        result: dict[str, Any] = {
            "kind": self.kind.value,
            "path": self.file_path,
            "line_number": self.line_number,
        }
        if self.expected:
            result["expected"] = self.expected
        if self.actual:
            result["actual"] = self.actual
        if self.reason:
            result["reason"] = self.reason
        return result
