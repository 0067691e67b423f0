"""Byte-stream acquisition for paths and standard input."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO, TextIO

from multisum.constants import STDIN_SENTINEL


def is_stdin(path: str) -> bool:
    """Whether ``path`` is the standard-input sentinel."""
    return path == STDIN_SENTINEL


@contextmanager
def open_source(path: str) -> Iterator[BinaryIO]:
    """Open ``path`` for binary reading, or yield stdin for ``-``.

    Standard input is never closed by this helper.

    Raises:
        OSError: If the file cannot be opened.

    """
    if is_stdin(path):
        yield sys.stdin.buffer
        return

    with open(path, "rb") as stream:
        yield stream


@contextmanager
def open_text_source(path: str) -> Iterator[TextIO]:
    """Open a checksum file (or stdin for ``-``) for line reading.

    Undecodable bytes are kept as surrogate escapes so file names that
    are not valid UTF-8 still reach the file system unchanged.

    Raises:
        OSError: If the file cannot be opened.

    """
    if is_stdin(path):
        yield sys.stdin
        return

    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
        yield stream
