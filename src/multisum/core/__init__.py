"""Checksum record model and the generate/verify engines."""

from multisum.core.algorithms import (
    AlgorithmSpec,
    HashFamily,
    lookup_display_name,
    resolve,
)
from multisum.core.codec import LineCodec
from multisum.core.digest import DigestProvider, HashlibDigest, digest_stream
from multisum.core.generate import GenerateEngine
from multisum.core.records import (
    ChecksumRecord,
    Dialect,
    FileError,
    Mode,
    OutcomeKind,
    VerificationOutcome,
)
from multisum.core.verify import VerificationSummary, VerifyEngine

__all__ = [
    "AlgorithmSpec",
    "ChecksumRecord",
    "Dialect",
    "DigestProvider",
    "FileError",
    "GenerateEngine",
    "HashFamily",
    "HashlibDigest",
    "LineCodec",
    "Mode",
    "OutcomeKind",
    "VerificationOutcome",
    "VerificationSummary",
    "VerifyEngine",
    "digest_stream",
    "lookup_display_name",
    "resolve",
]
