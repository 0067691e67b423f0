"""Rendering of generate and verify results for the presentation layer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import orjson

from multisum.core.algorithms import AlgorithmSpec
from multisum.core.codec import LineCodec
from multisum.core.records import (
    ChecksumRecord,
    FileError,
    OutcomeKind,
    VerificationOutcome,
)
from multisum.core.verify import VerificationSummary


def format_outcome(outcome: VerificationOutcome, source: str) -> str:
    """Human-readable line for one verification outcome.

    Args:
        outcome: The outcome to render.
        source: Name of the checksum file the line came from.

    Returns:
        ``path: OK``, ``path: FAILED``, ``path: FAILED open or read`` and
        similar lines for unsupported algorithms and malformed lines.

    """
    if outcome.kind is OutcomeKind.MATCH:
        return f"{outcome.file_path}: OK"
    if outcome.kind is OutcomeKind.MISMATCH:
        return f"{outcome.file_path}: FAILED"
    if outcome.kind is OutcomeKind.UNREADABLE_FILE:
        return f"{outcome.file_path}: FAILED open or read"
    if outcome.kind is OutcomeKind.UNSUPPORTED_ALGORITHM:
        label = outcome.file_path or f"{source}:{outcome.line_number}"
        return f"{label}: FAILED unsupported algorithm ({outcome.reason})"
    return f"{source}:{outcome.line_number}: improperly formatted line ({outcome.reason})"


def format_file_error(error: FileError) -> str:
    """Diagnostic line for a file that could not be hashed."""
    return f"multisum: {error.file_path}: {error.reason}"


def _dumps(payload: dict[str, Any]) -> str:
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")


def generate_report(
    spec: AlgorithmSpec,
    results: Iterable[ChecksumRecord | FileError],
    codec: LineCodec | None = None,
) -> str:
    """JSON document describing a generate run.

    Args:
        spec: Algorithm used.
        results: Records and errors in input order.
        codec: Codec used to render each record's line.

    Returns:
        Indented JSON text.

    """
    codec = codec or LineCodec()
    records: list[dict[str, Any]] = []
    errors: list[dict[str, Any]] = []
    for result in results:
        if isinstance(result, FileError):
            errors.append({"path": result.file_path, "reason": result.reason})
        else:
            records.append(
                {
                    "path": result.file_path,
                    "digest": result.digest_hex,
                    "mode": result.mode.name.lower(),
                    "line": codec.encode(result),
                }
            )
    return _dumps(
        {
            "algorithm": spec.canonical_name,
            "records": records,
            "errors": errors,
            "passed": not errors,
        }
    )


def verify_report(
    spec: AlgorithmSpec,
    outcomes: Iterable[tuple[str, VerificationOutcome]],
    summary: VerificationSummary,
    failed_sources: Iterable[dict[str, str]] = (),
) -> str:
    """JSON document describing a verify run.

    Args:
        spec: Algorithm used.
        outcomes: (checksum file, outcome) pairs in processing order.
        summary: Aggregate counts of the run.
        failed_sources: Checksum files that could not be processed at all,
            as ``{"source": ..., "reason": ...}`` dicts.

    Returns:
        Indented JSON text.

    """
    failed = list(failed_sources)
    return _dumps(
        {
            "algorithm": spec.canonical_name,
            "outcomes": [
                {"source": source, **outcome.to_dict()}
                for source, outcome in outcomes
            ],
            "failed_sources": failed,
            "summary": summary.to_dict(),
            "passed": summary.passed and not failed,
        }
    )
