"""Tests for GenerateEngine."""

import hashlib
import io
from pathlib import Path

import pytest

from multisum.core.algorithms import AlgorithmSpec, HashFamily
from multisum.core.codec import LineCodec
from multisum.core.generate import GenerateEngine, describe_os_error
from multisum.core.records import ChecksumRecord, Dialect, FileError, Mode

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.fixture
def many_files(tmp_path: Path) -> list[str]:
    """Create files with distinct content and return their paths."""
    paths = []
    for index in range(12):
        file_path = tmp_path / f"file{index:02d}.bin"
        file_path.write_bytes(f"content {index}".encode() * (index + 1))
        paths.append(str(file_path))
    return paths


class TestGenerateEngine:
    """Tests for GenerateEngine.generate."""

    def test_gnu_line_for_abc(
        self, abc_file: Path, sha256_spec: AlgorithmSpec
    ) -> None:
        """Test the GNU line for a file containing ``abc``."""
        results = list(GenerateEngine().generate(sha256_spec, ["abc.txt"]))

        assert results == [ChecksumRecord(sha256_spec, ABC_SHA256, "abc.txt")]
        assert LineCodec().encode(results[0]) == f"{ABC_SHA256}  abc.txt"

    def test_bsd_and_binary(
        self, abc_file: Path, sha256_spec: AlgorithmSpec
    ) -> None:
        """Test mode and dialect are carried onto the records."""
        engine = GenerateEngine()

        (binary,) = engine.generate(sha256_spec, ["abc.txt"], mode=Mode.BINARY)
        (bsd,) = engine.generate(sha256_spec, ["abc.txt"], dialect=Dialect.BSD)

        assert binary.mode is Mode.BINARY
        assert bsd.dialect is Dialect.BSD
        assert LineCodec().encode(bsd) == f"SHA256 (abc.txt) = {ABC_SHA256}"

    def test_path_kept_as_given(
        self, abc_file: Path, sha256_spec: AlgorithmSpec
    ) -> None:
        """Test the record path is not normalized."""
        (record,) = GenerateEngine().generate(sha256_spec, ["./abc.txt"])
        assert record.file_path == "./abc.txt"

    def test_missing_file_isolated(
        self, abc_file: Path, sha256_spec: AlgorithmSpec
    ) -> None:
        """Test a missing file yields a FileError and later files still run."""
        results = list(
            GenerateEngine().generate(sha256_spec, ["missing.bin", "abc.txt"])
        )

        assert results[0] == FileError("missing.bin", "No such file or directory")
        assert isinstance(results[1], ChecksumRecord)
        assert results[1].digest_hex == ABC_SHA256

    def test_nul_in_path_is_file_error(
        self, abc_file: Path, sha256_spec: AlgorithmSpec
    ) -> None:
        """Test a path open() rejects yields a FileError, not an exception."""
        results = list(
            GenerateEngine().generate(sha256_spec, ["a\x00b", "abc.txt"])
        )

        assert isinstance(results[0], FileError)
        assert results[0].file_path == "a\x00b"
        assert results[1].digest_hex == ABC_SHA256

    def test_directory_is_file_error(
        self, tmp_path: Path, sha256_spec: AlgorithmSpec
    ) -> None:
        """Test a directory cannot be hashed."""
        (result,) = GenerateEngine().generate(sha256_spec, [str(tmp_path)])
        assert isinstance(result, FileError)

    @pytest.mark.parametrize("max_workers", [1, 4])
    def test_order_preserved(self, many_files: list[str], max_workers: int) -> None:
        """Test results come out in input order, with or without threads."""
        spec = AlgorithmSpec(HashFamily.BLAKE2B, 256)
        paths = [*many_files[:5], "nope.bin", *many_files[5:]]

        results = list(
            GenerateEngine(max_workers=max_workers).generate(spec, paths)
        )

        assert [result.file_path for result in results] == paths
        for result in results:
            if result.file_path == "nope.bin":
                assert isinstance(result, FileError)
                continue
            expected = hashlib.blake2b(
                Path(result.file_path).read_bytes(), digest_size=32
            ).hexdigest()
            assert result.digest_hex == expected

    def test_reusable(self, abc_file: Path, sha256_spec: AlgorithmSpec) -> None:
        """Test one engine gives the same answer on repeated runs."""
        engine = GenerateEngine(chunk_size=1)
        first = list(engine.generate(sha256_spec, ["abc.txt"]))
        second = list(engine.generate(sha256_spec, ["abc.txt"]))
        assert first == second

    def test_stdin(
        self, monkeypatch: pytest.MonkeyPatch, sha256_spec: AlgorithmSpec
    ) -> None:
        """Test ``-`` hashes standard input."""
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"abc")))

        (record,) = GenerateEngine().generate(sha256_spec, ["-"])

        assert record == ChecksumRecord(sha256_spec, ABC_SHA256, "-")


def test_describe_os_error() -> None:
    """Test OS errors are reduced to their reason."""
    error = FileNotFoundError(2, "No such file or directory", "x")
    assert describe_os_error(error) == "No such file or directory"
    assert describe_os_error(OSError("boom")) == "boom"
