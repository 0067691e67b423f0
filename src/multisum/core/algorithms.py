"""Algorithm selection and validation.

Turns the (family, length) tokens given on the command line into an
immutable :class:`AlgorithmSpec`, and maps BSD-style algorithm names
(``SHA256``, ``BLAKE2b-512``...) back to specs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from multisum.constants import (
    BLAKE2B_BSD_DEFAULT_LENGTH,
    BLAKE2B_LENGTHS,
    MD5_LENGTH,
    SHA3_LENGTHS,
    SHA_LENGTHS,
)
from multisum.exceptions import ConfigError


class HashFamily(Enum):
    """Supported digest families."""

    SHA = "sha"
    SHA3 = "sha3"
    MD5 = "md5"
    BLAKE2B = "blake2b"

    @property
    def legal_lengths(self) -> tuple[int, ...]:
        """Bit lengths accepted for this family."""
        return _LEGAL_LENGTHS[self]


_LEGAL_LENGTHS: dict[HashFamily, tuple[int, ...]] = {
    HashFamily.SHA: SHA_LENGTHS,
    HashFamily.SHA3: SHA3_LENGTHS,
    HashFamily.MD5: (MD5_LENGTH,),
    HashFamily.BLAKE2B: BLAKE2B_LENGTHS,
}

FAMILY_ALIASES: dict[str, HashFamily] = {
    "sha": HashFamily.SHA,
    "sha3": HashFamily.SHA3,
    "md5": HashFamily.MD5,
    "b2": HashFamily.BLAKE2B,
    "blake": HashFamily.BLAKE2B,
    "blake2": HashFamily.BLAKE2B,
    "blake2b": HashFamily.BLAKE2B,
}


def format_lengths(lengths: tuple[int, ...]) -> str:
    """Render a legal-length set as ``{160, 256, 512}``."""
    return "{" + ", ".join(str(length) for length in lengths) + "}"


@dataclass(frozen=True)
class AlgorithmSpec:
    """A validated (family, bit length) pair.

    Build instances through :func:`resolve`; direct construction is
    validated as well so an illegal pair can never exist.
    """

    family: HashFamily
    bit_length: int

    def __post_init__(self) -> None:
        if self.bit_length not in self.family.legal_lengths:
            msg = (
                f"unsupported length {self.bit_length} for "
                f"{self.family.value}; legal lengths are "
                f"{format_lengths(self.family.legal_lengths)}"
            )
            raise ConfigError(msg)

    @property
    def canonical_name(self) -> str:
        """Name used in BSD lines and diagnostics, e.g. ``SHA3-256``."""
        if self.family is HashFamily.SHA:
            return "SHA1" if self.bit_length == 160 else f"SHA{self.bit_length}"
        if self.family is HashFamily.SHA3:
            return f"SHA3-{self.bit_length}"
        if self.family is HashFamily.BLAKE2B:
            return f"BLAKE2b-{self.bit_length}"
        return "MD5"

    @property
    def hex_width(self) -> int:
        """Number of hex characters in a digest of this algorithm."""
        return self.bit_length // 4

    def __str__(self) -> str:
        return self.canonical_name


def _parse_length(length_token: int | str | None) -> int | None:
    if length_token is None or isinstance(length_token, int):
        return length_token
    token = length_token.strip()
    if not token:
        return None
    if not (token.isascii() and token.isdigit()):
        msg = f"invalid length '{length_token}'"
        raise ConfigError(msg)
    return int(token)


def resolve(family_token: str, length_token: int | str | None = None) -> AlgorithmSpec:
    """Validate the requested family and length into an AlgorithmSpec.

    Args:
        family_token: Family name or alias, case-insensitive
            (sha, sha3, md5, b2, blake, blake2, blake2b).
        length_token: Bit length as int or numeric string, or None.

    Returns:
        The validated algorithm spec.

    Raises:
        ConfigError: If the family is unknown or the length is missing,
            not applicable or outside the legal set.

    Example:
        >>> resolve("SHA", "256").canonical_name
        'SHA256'

    """
    family = FAMILY_ALIASES.get(family_token.strip().lower())
    if family is None:
        msg = (
            f"unknown checksum type '{family_token}'; accepted types are "
            f"{', '.join(FAMILY_ALIASES)}"
        )
        raise ConfigError(msg)

    length = _parse_length(length_token)

    if family is HashFamily.MD5:
        if length not in (None, MD5_LENGTH):
            msg = f"length not applicable to this family ({family.value})"
            raise ConfigError(msg)
        return AlgorithmSpec(family, MD5_LENGTH)

    if length is None:
        msg = f"length required for {family.value}"
        raise ConfigError(msg)

    return AlgorithmSpec(family, length)


def _normalize_display_name(name: str) -> str:
    return name.upper().replace("-", "").replace("_", "")


_DISPLAY_NAMES: dict[str, AlgorithmSpec] = {
    _normalize_display_name(spec.canonical_name): spec
    for spec in (
        AlgorithmSpec(family, length)
        for family in HashFamily
        for length in family.legal_lengths
    )
}
_DISPLAY_NAMES["SHA160"] = AlgorithmSpec(HashFamily.SHA, 160)
_DISPLAY_NAMES["BLAKE2B"] = AlgorithmSpec(
    HashFamily.BLAKE2B, BLAKE2B_BSD_DEFAULT_LENGTH
)


def lookup_display_name(name: str) -> AlgorithmSpec | None:
    """Map a BSD-line algorithm name back to a spec.

    Case and ``-``/``_`` separators are ignored, so ``SHA-256``,
    ``sha256`` and ``SHA256`` are the same name. A bare ``BLAKE2b``
    means BLAKE2b-512, as written by ``b2sum --tag``.

    Args:
        name: Algorithm name as found in the line.

    Returns:
        The matching spec, or None if the name is not supported.

    """
    return _DISPLAY_NAMES.get(_normalize_display_name(name))
