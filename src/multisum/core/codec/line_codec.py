"""Dialect dispatch for encoding and decoding checksum lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from multisum.core.codec.bsd import decode_bsd_line, encode_bsd_line, match_bsd_line
from multisum.core.codec.gnu import decode_gnu_line, encode_gnu_line
from multisum.core.records import ChecksumRecord, Dialect
from multisum.exceptions import MalformedLineError

if TYPE_CHECKING:
    from multisum.core.algorithms import AlgorithmSpec


def strip_line_ending(line: str) -> str:
    """Remove one trailing newline (and a CR before it), nothing else.

    Leading and trailing spaces belong to the path and are kept.
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class LineCodec:
    """Encodes records to lines and decodes lines of either dialect.

    Decoding is pure: it never touches the file system.
    """

    def encode(self, record: ChecksumRecord) -> str:
        """Render a record in its dialect, without a trailing newline.

        Args:
            record: The record to render.

        Returns:
            ``HEX  PATH`` / ``HEX *PATH`` for GNU, ``NAME (PATH) = HEX``
            for BSD.

        """
        if record.dialect is Dialect.BSD:
            return encode_bsd_line(record)
        return encode_gnu_line(record)

    def decode(self, line: str, expected: AlgorithmSpec) -> ChecksumRecord:
        """Decode one checksum line, detecting the dialect.

        BSD lines carry their own algorithm name. GNU lines are tagged
        with ``expected``, the algorithm selected for this invocation.

        Args:
            line: Raw line, optionally ending in a newline.
            expected: Algorithm selected for this invocation.

        Returns:
            The decoded record.

        Raises:
            UnsupportedAlgorithmError: If a BSD line names an unknown
                algorithm.
            MalformedLineError: If the line matches neither dialect.

        """
        content = strip_line_ending(line)
        if not content:
            raise MalformedLineError(content, "empty line")

        match = match_bsd_line(content)
        if match is not None:
            return decode_bsd_line(content, match)
        return decode_gnu_line(content, expected)
