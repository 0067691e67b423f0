"""Checksum-file verification.

Every line of a checksum file produces exactly one
:class:`VerificationOutcome`; a bad line or an unreadable file is reported
as its own entry and never stops the remaining lines.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from multisum.core.algorithms import AlgorithmSpec
from multisum.core.codec import LineCodec, strip_line_ending
from multisum.core.generate import GenerateEngine, describe_os_error
from multisum.core.records import Dialect, OutcomeKind, VerificationOutcome
from multisum.exceptions import MalformedLineError, UnsupportedAlgorithmError
from multisum.logger import get_logger

logger = get_logger(__name__)


def compare_digests(actual: str, expected: str) -> bool:
    """Compare two hex digests, ignoring case.

    Digests are not secrets here, so a constant-time comparison is not
    needed.
    """
    return actual.lower() == expected.lower()


def is_ignorable_line(content: str) -> bool:
    """Blank lines and ``#`` comments carry no checksum."""
    return not content or content.startswith("#")


class VerifyEngine:
    """Re-digests the files named in a checksum file and classifies them."""

    def __init__(
        self,
        generator: GenerateEngine | None = None,
        codec: LineCodec | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            generator: Engine used to digest each referenced file; its
                ``max_workers`` also bounds concurrent verification.
            codec: Line decoder.

        """
        self.generator = generator or GenerateEngine()
        self.codec = codec or LineCodec()

    def verify(
        self, spec: AlgorithmSpec, lines: Iterable[str]
    ) -> Iterator[VerificationOutcome]:
        """Yield one outcome per checksum line, in file order.

        The algorithm selected for the invocation (``spec``) is always the
        one used to re-digest files. A BSD line naming a different
        algorithm is reported as UNSUPPORTED_ALGORITHM rather than being
        re-hashed with another algorithm than the one it declares.

        Args:
            spec: Algorithm selected for this invocation.
            lines: Lines of a checksum file, with or without newlines.

        Yields:
            VerificationOutcome for each non-blank, non-comment line.

        """
        numbered = (
            (line_number, content)
            for line_number, content in enumerate(map(strip_line_ending, lines), 1)
            if not is_ignorable_line(content)
        )

        if self.generator.max_workers <= 1:
            for line_number, content in numbered:
                yield self._verify_line(spec, line_number, content)
            return

        executor = ThreadPoolExecutor(max_workers=self.generator.max_workers)
        try:
            yield from executor.map(
                lambda item: self._verify_line(spec, *item), numbered
            )
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def _verify_line(
        self, spec: AlgorithmSpec, line_number: int, content: str
    ) -> VerificationOutcome:
        try:
            record = self.codec.decode(content, spec)
        except UnsupportedAlgorithmError as e:
            logger.debug("⚠️  Line %d: %s", line_number, e.reason)
            return VerificationOutcome(
                kind=OutcomeKind.UNSUPPORTED_ALGORITHM,
                file_path=e.file_path,
                line_number=line_number,
                line=content,
                reason=e.reason,
            )
        except MalformedLineError as e:
            logger.debug("⚠️  Line %d improperly formatted: %s", line_number, e.reason)
            return VerificationOutcome(
                kind=OutcomeKind.FORMAT_ERROR,
                file_path=None,
                line_number=line_number,
                line=content,
                reason=e.reason,
            )

        if record.dialect is Dialect.BSD and record.algorithm != spec:
            reason = (
                f"line declares {record.algorithm.canonical_name} but "
                f"{spec.canonical_name} was selected"
            )
            logger.warning("%s: %s", record.file_path, reason)
            return VerificationOutcome(
                kind=OutcomeKind.UNSUPPORTED_ALGORITHM,
                file_path=record.file_path,
                line_number=line_number,
                line=content,
                reason=reason,
            )

        try:
            actual = self.generator.digest_path(spec, record.file_path)
        except OSError as e:
            reason = describe_os_error(e)
            logger.debug("❌ %s: %s", record.file_path, reason)
            return VerificationOutcome(
                kind=OutcomeKind.UNREADABLE_FILE,
                file_path=record.file_path,
                line_number=line_number,
                line=content,
                reason=reason,
            )

        if compare_digests(actual, record.digest_hex):
            logger.debug("✅ %s verification PASSED", record.file_path)
            return VerificationOutcome(
                kind=OutcomeKind.MATCH,
                file_path=record.file_path,
                line_number=line_number,
                line=content,
                expected=record.digest_hex,
                actual=actual,
            )

        logger.debug("❌ %s verification FAILED", record.file_path)
        logger.debug("   Expected: %s", record.digest_hex)
        logger.debug("   Actual:   %s", actual)
        return VerificationOutcome(
            kind=OutcomeKind.MISMATCH,
            file_path=record.file_path,
            line_number=line_number,
            line=content,
            expected=record.digest_hex,
            actual=actual,
        )


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


@dataclass
class VerificationSummary:
    """Aggregate status of a verification run, owned by the caller.

    Attributes:
        counts: Number of outcomes per kind

    """

    counts: Counter[OutcomeKind] = field(default_factory=Counter)

    def add(self, outcome: VerificationOutcome) -> None:
        """Record one outcome."""
        self.counts[outcome.kind] += 1

    @property
    def total(self) -> int:
        """Number of outcomes recorded."""
        return sum(self.counts.values())

    @property
    def passed(self) -> bool:
        """True when every recorded outcome is a match."""
        return self.counts[OutcomeKind.MATCH] == self.total

    def warnings(self) -> list[str]:
        """GNU-style summary lines for each kind of failure."""
        messages = []
        format_errors = self.counts[OutcomeKind.FORMAT_ERROR]
        if format_errors:
            messages.append(
                _plural(format_errors, "line is", "lines are")
                + " improperly formatted"
            )
        unsupported = self.counts[OutcomeKind.UNSUPPORTED_ALGORITHM]
        if unsupported:
            messages.append(
                _plural(unsupported, "line uses", "lines use")
                + " an unsupported algorithm"
            )
        unreadable = self.counts[OutcomeKind.UNREADABLE_FILE]
        if unreadable:
            messages.append(
                _plural(unreadable, "listed file", "listed files")
                + " could not be read"
            )
        mismatched = self.counts[OutcomeKind.MISMATCH]
        if mismatched:
            messages.append(
                _plural(mismatched, "computed checksum", "computed checksums")
                + " did NOT match"
            )
        return messages

    def to_dict(self) -> dict[str, int]:
        """Counts per kind for the JSON report."""
        return {kind.value: self.counts[kind] for kind in OutcomeKind}
