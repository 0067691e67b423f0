"""Pytest configuration and fixtures for multisum tests."""

import logging
from pathlib import Path

import pytest

from multisum.core.algorithms import AlgorithmSpec, HashFamily


@pytest.fixture(autouse=True)
def isolate_user_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings and log files out of the real home directory."""
    monkeypatch.setenv("MULTISUM_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("MULTISUM_LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("multisum") and isinstance(logger, logging.Logger):
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def sha256_spec() -> AlgorithmSpec:
    """SHA-256 algorithm spec."""
    return AlgorithmSpec(HashFamily.SHA, 256)


@pytest.fixture
def abc_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create ``abc.txt`` containing ``abc`` and chdir next to it.

    SHA256: ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad
    """
    monkeypatch.chdir(tmp_path)
    file_path = tmp_path / "abc.txt"
    file_path.write_bytes(b"abc")
    return file_path
