"""Tests for result rendering and JSON reports."""

import orjson

from multisum.core.algorithms import AlgorithmSpec
from multisum.core.records import (
    ChecksumRecord,
    Dialect,
    FileError,
    Mode,
    OutcomeKind,
    VerificationOutcome,
)
from multisum.core.report import (
    format_file_error,
    format_outcome,
    generate_report,
    verify_report,
)
from multisum.core.verify import VerificationSummary

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestFormatOutcome:
    """Tests for format_outcome."""

    def test_match(self) -> None:
        """Test OK line."""
        outcome = VerificationOutcome(OutcomeKind.MATCH, "abc.txt", 1, "")
        assert format_outcome(outcome, "SUMS") == "abc.txt: OK"

    def test_mismatch(self) -> None:
        """Test FAILED line."""
        outcome = VerificationOutcome(OutcomeKind.MISMATCH, "abc.txt", 1, "")
        assert format_outcome(outcome, "SUMS") == "abc.txt: FAILED"

    def test_unreadable(self) -> None:
        """Test open or read failure line."""
        outcome = VerificationOutcome(OutcomeKind.UNREADABLE_FILE, "gone", 1, "")
        assert format_outcome(outcome, "SUMS") == "gone: FAILED open or read"

    def test_unsupported_without_path(self) -> None:
        """Test unsupported algorithm falls back to source and line."""
        outcome = VerificationOutcome(
            OutcomeKind.UNSUPPORTED_ALGORITHM,
            None,
            4,
            "",
            reason="unsupported algorithm 'CRC32'",
        )
        assert format_outcome(outcome, "SUMS") == (
            "SUMS:4: FAILED unsupported algorithm "
            "(unsupported algorithm 'CRC32')"
        )

    def test_format_error(self) -> None:
        """Test improperly formatted line."""
        outcome = VerificationOutcome(
            OutcomeKind.FORMAT_ERROR, None, 2, "junk", reason="missing digest"
        )
        assert format_outcome(outcome, "SUMS") == (
            "SUMS:2: improperly formatted line (missing digest)"
        )


def test_format_file_error() -> None:
    """Test generate error line."""
    error = FileError("missing.bin", "No such file or directory")
    assert format_file_error(error) == (
        "multisum: missing.bin: No such file or directory"
    )


def test_generate_report(sha256_spec: AlgorithmSpec) -> None:
    """Test JSON report of a generate run."""
    results = [
        ChecksumRecord(sha256_spec, ABC_SHA256, "abc.txt", Mode.BINARY),
        FileError("missing.bin", "No such file or directory"),
        ChecksumRecord(sha256_spec, ABC_SHA256, "copy.txt", dialect=Dialect.BSD),
    ]

    report = orjson.loads(generate_report(sha256_spec, results))

    assert report["algorithm"] == "SHA256"
    assert report["passed"] is False
    assert report["errors"] == [
        {"path": "missing.bin", "reason": "No such file or directory"}
    ]
    assert report["records"] == [
        {
            "path": "abc.txt",
            "digest": ABC_SHA256,
            "mode": "binary",
            "line": f"{ABC_SHA256} *abc.txt",
        },
        {
            "path": "copy.txt",
            "digest": ABC_SHA256,
            "mode": "text",
            "line": f"SHA256 (copy.txt) = {ABC_SHA256}",
        },
    ]


def test_verify_report(sha256_spec: AlgorithmSpec) -> None:
    """Test JSON report of a verify run."""
    outcome = VerificationOutcome(
        OutcomeKind.MATCH,
        "abc.txt",
        1,
        f"{ABC_SHA256}  abc.txt",
        expected=ABC_SHA256,
        actual=ABC_SHA256,
    )
    summary = VerificationSummary()
    summary.add(outcome)

    report = orjson.loads(verify_report(sha256_spec, [("SUMS", outcome)], summary))

    assert report["passed"] is True
    assert report["failed_sources"] == []
    assert report["summary"]["match"] == 1
    assert report["outcomes"] == [
        {
            "source": "SUMS",
            "kind": "match",
            "path": "abc.txt",
            "line_number": 1,
            "expected": ABC_SHA256,
            "actual": ABC_SHA256,
        }
    ]


def test_verify_report_failed_source(sha256_spec: AlgorithmSpec) -> None:
    """Test a checksum file that could not be read fails the report."""
    report = orjson.loads(
        verify_report(
            sha256_spec,
            [],
            VerificationSummary(),
            [{"source": "SUMS", "reason": "No such file or directory"}],
        )
    )

    assert report["passed"] is False
    assert report["failed_sources"][0]["source"] == "SUMS"
