"""Streaming digest computation.

Wraps :mod:`hashlib` behind a small feed/finish interface so the engines
never touch algorithm objects directly. Files are hashed in fixed-size
chunks and are never loaded fully into memory.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import TYPE_CHECKING, BinaryIO, Protocol

from multisum.constants import DEFAULT_CHUNK_SIZE
from multisum.core.algorithms import AlgorithmSpec, HashFamily

if TYPE_CHECKING:
    from hashlib import _Hash


class DigestProvider(Protocol):
    """A streaming hash: feed bytes in order, then finish exactly once."""

    def feed(self, data: bytes) -> None: ...

    def finish(self) -> str: ...


DigestFactory = Callable[[AlgorithmSpec], DigestProvider]


def _new_hasher(spec: AlgorithmSpec) -> _Hash:
    if spec.family is HashFamily.SHA:
        return hashlib.new("sha1" if spec.bit_length == 160 else f"sha{spec.bit_length}")
    if spec.family is HashFamily.SHA3:
        return hashlib.new(f"sha3_{spec.bit_length}")
    if spec.family is HashFamily.BLAKE2B:
        return hashlib.blake2b(digest_size=spec.bit_length // 8)
    return hashlib.md5()  # noqa: S324 - checksum use, not security


class HashlibDigest:
    """DigestProvider backed by hashlib."""

    def __init__(self, spec: AlgorithmSpec) -> None:
        """Create a fresh hash state for the given algorithm.

        Args:
            spec: Validated algorithm to hash with.

        """
        self.spec = spec
        self._hasher = _new_hasher(spec)
        self._finished = False

    @classmethod
    def open(cls, spec: AlgorithmSpec) -> HashlibDigest:
        """Open a new digest handle for ``spec``."""
        return cls(spec)

    def feed(self, data: bytes) -> None:
        """Add the next chunk of input.

        Raises:
            RuntimeError: If the handle was already finished.

        """
        if self._finished:
            msg = "digest handle already finished"
            raise RuntimeError(msg)
        self._hasher.update(data)

    def finish(self) -> str:
        """Return the lowercase hex digest and consume the handle.

        Raises:
            RuntimeError: If the handle was already finished.

        """
        if self._finished:
            msg = "digest handle already finished"
            raise RuntimeError(msg)
        self._finished = True
        return self._hasher.hexdigest().lower()


def digest_stream(
    spec: AlgorithmSpec,
    stream: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    open_digest: DigestFactory = HashlibDigest.open,
) -> str:
    """Hash a binary stream chunk by chunk.

    Args:
        spec: Algorithm to hash with.
        stream: Readable binary file object.
        chunk_size: Bytes read per chunk.
        open_digest: Factory returning a fresh DigestProvider.

    Returns:
        Lowercase hexadecimal digest.

    Raises:
        OSError: If reading the stream fails.

    Example:
        >>> import io
        >>> spec = AlgorithmSpec(HashFamily.SHA, 256)
        >>> digest_stream(spec, io.BytesIO(b"abc"))[:16]
        'ba7816bf8f01cfea'

    """
    provider = open_digest(spec)
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        provider.feed(chunk)
    return provider.finish()
