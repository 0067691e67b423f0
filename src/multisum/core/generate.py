"""Checksum generation for a list of files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from multisum.constants import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_WORKERS
from multisum.core.algorithms import AlgorithmSpec
from multisum.core.digest import DigestFactory, HashlibDigest, digest_stream
from multisum.core.records import ChecksumRecord, Dialect, FileError, Mode
from multisum.core.sources import open_source
from multisum.logger import get_logger

logger = get_logger(__name__)


def describe_os_error(error: OSError) -> str:
    """Short reason for an I/O failure, e.g. ``No such file or directory``."""
    return error.strerror or str(error)


class GenerateEngine:
    """Streams files through a digest and builds checksum records.

    The engine holds only immutable settings, so one instance can be
    reused for any number of file lists.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_workers: int = DEFAULT_MAX_WORKERS,
        open_digest: DigestFactory = HashlibDigest.open,
    ) -> None:
        """Initialize the engine.

        Args:
            chunk_size: Bytes read per chunk while hashing.
            max_workers: Files digested concurrently; 1 means sequential.
            open_digest: Factory for fresh digest handles.

        """
        self.chunk_size = chunk_size
        self.max_workers = max_workers
        self.open_digest = open_digest

    def digest_path(self, spec: AlgorithmSpec, path: str) -> str:
        """Compute the digest of one file (or stdin for ``-``).

        Args:
            spec: Algorithm to hash with.
            path: File path or the stdin sentinel.

        Returns:
            Lowercase hex digest.

        Raises:
            OSError: If the file cannot be opened or read.

        """
        logger.debug("🧮 Computing %s for %s", spec.canonical_name, path)
        with open_source(path) as stream:
            digest = digest_stream(spec, stream, self.chunk_size, self.open_digest)
        logger.debug("   Hash: %s", digest)
        return digest

    def _generate_one(
        self, spec: AlgorithmSpec, path: str, mode: Mode, dialect: Dialect
    ) -> ChecksumRecord | FileError:
        try:
            digest = self.digest_path(spec, path)
        except OSError as e:
            reason = describe_os_error(e)
            logger.debug("❌ Failed to read %s: %s", path, reason)
            return FileError(path, reason)
        except ValueError as e:
            # open() rejects paths with embedded NUL bytes
            logger.debug("❌ Invalid path %r: %s", path, e)
            return FileError(path, str(e))
        return ChecksumRecord(
            algorithm=spec,
            digest_hex=digest,
            file_path=path,
            mode=mode,
            dialect=dialect,
        )

    def generate(
        self,
        spec: AlgorithmSpec,
        file_paths: Iterable[str],
        mode: Mode = Mode.TEXT,
        dialect: Dialect = Dialect.GNU,
    ) -> Iterator[ChecksumRecord | FileError]:
        """Yield one record or error per path, in input order.

        A file that cannot be read yields a :class:`FileError` and does
        not stop the remaining paths. With ``max_workers > 1`` files are
        hashed on a thread pool but results still come out in input order.

        Args:
            spec: Algorithm to hash with.
            file_paths: Paths to hash; ``-`` reads standard input.
            mode: GNU text/binary marker recorded on each line.
            dialect: Line convention of the produced records.

        Yields:
            ChecksumRecord on success, FileError on I/O failure.

        """
        if self.max_workers <= 1:
            for path in file_paths:
                yield self._generate_one(spec, path, mode, dialect)
            return

        executor = ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            yield from executor.map(
                lambda path: self._generate_one(spec, path, mode, dialect),
                file_paths,
            )
        finally:
            executor.shutdown(wait=True, cancel_futures=True)
