"""BSD checksum line format: ``NAME (PATH) = HEX``."""

from __future__ import annotations

import re

from multisum.core.algorithms import lookup_display_name
from multisum.core.records import ChecksumRecord, Dialect, Mode, is_valid_digest
from multisum.exceptions import MalformedLineError, UnsupportedAlgorithmError

# PATH runs to the last ") = " so paths containing parentheses survive.
_BSD_LINE_PATTERN = re.compile(
    r"^(?P<name>[A-Za-z0-9_-]+) \((?P<path>.*)\) = (?P<digest>\S*)$",
    re.DOTALL,
)


def match_bsd_line(line: str) -> re.Match[str] | None:
    """Return the BSD pattern match for ``line``, or None."""
    return _BSD_LINE_PATTERN.match(line)


def encode_bsd_line(record: ChecksumRecord) -> str:
    """Render ``record`` as a BSD line (without newline)."""
    return (
        f"{record.algorithm.canonical_name} ({record.file_path}) = "
        f"{record.digest_hex}"
    )


def decode_bsd_line(line: str, match: re.Match[str]) -> ChecksumRecord:
    """Build a record from a matched BSD line.

    The algorithm comes from the NAME in the line; the digest width is
    checked against that algorithm.

    Args:
        line: The raw line (newline already stripped).
        match: Result of :func:`match_bsd_line`.

    Returns:
        The decoded record.

    Raises:
        UnsupportedAlgorithmError: If NAME is not a supported algorithm.
        MalformedLineError: If the digest or path is invalid.

    """
    name = match.group("name")
    algorithm = lookup_display_name(name)
    if algorithm is None:
        raise UnsupportedAlgorithmError(line, name, match.group("path") or None)

    digest = match.group("digest")
    if not digest:
        raise MalformedLineError(line, "missing digest")
    if not is_valid_digest(digest, len(digest)):
        raise MalformedLineError(line, "digest contains non-hex characters")
    if len(digest) != algorithm.hex_width:
        msg = (
            f"digest length mismatch for algorithm {algorithm.canonical_name} "
            f"(expected {algorithm.hex_width} hex characters, got {len(digest)})"
        )
        raise MalformedLineError(line, msg)

    path = match.group("path")
    if not path:
        raise MalformedLineError(line, "missing file path")
    if "\0" in path:
        raise MalformedLineError(line, "file path contains NUL")

    return ChecksumRecord(
        algorithm=algorithm,
        digest_hex=digest.lower(),
        file_path=path,
        mode=Mode.TEXT,
        dialect=Dialect.BSD,
    )
