"""GNU checksum line format: ``HEX  PATH`` (text) or ``HEX *PATH`` (binary)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from multisum.core.records import ChecksumRecord, Dialect, Mode, is_valid_digest
from multisum.exceptions import MalformedLineError

if TYPE_CHECKING:
    from multisum.core.algorithms import AlgorithmSpec


def encode_gnu_line(record: ChecksumRecord) -> str:
    """Render ``record`` as a GNU line (without newline)."""
    return f"{record.digest_hex} {record.mode.value}{record.file_path}"


def decode_gnu_line(line: str, expected: AlgorithmSpec) -> ChecksumRecord:
    """Decode a GNU line, tagging it with the invocation algorithm.

    A digest width is shared by several algorithms (SHA-512, SHA3-512 and
    BLAKE2b-512 all use 128 hex characters), so the algorithm is never
    guessed from the line. A legacy single-space line (``HEX PATH``) is
    read as text mode.

    Args:
        line: The raw line (newline already stripped).
        expected: Algorithm selected for this invocation.

    Returns:
        The decoded record.

    Raises:
        MalformedLineError: If the line is not a valid GNU line for
            ``expected``.

    """
    digest, separator, rest = line.partition(" ")
    if not separator:
        raise MalformedLineError(line, "missing separator after digest")
    if not digest:
        raise MalformedLineError(line, "missing digest")
    if not is_valid_digest(digest, len(digest)):
        raise MalformedLineError(line, "digest contains non-hex characters")
    if len(digest) != expected.hex_width:
        msg = (
            f"digest length mismatch for algorithm {expected.canonical_name} "
            f"(expected {expected.hex_width} hex characters, got {len(digest)})"
        )
        raise MalformedLineError(line, msg)

    mode = Mode.TEXT
    path = rest
    if rest[:1] in (Mode.TEXT.value, Mode.BINARY.value):
        mode = Mode(rest[0])
        path = rest[1:]

    if not path:
        raise MalformedLineError(line, "missing file path")
    if "\0" in path:
        raise MalformedLineError(line, "file path contains NUL")

    return ChecksumRecord(
        algorithm=expected,
        digest_hex=digest.lower(),
        file_path=path,
        mode=mode,
        dialect=Dialect.GNU,
    )
