"""Checksum line encoding and decoding (GNU and BSD dialects)."""

from __future__ import annotations

from multisum.core.codec.bsd import decode_bsd_line, encode_bsd_line, match_bsd_line
from multisum.core.codec.gnu import decode_gnu_line, encode_gnu_line
from multisum.core.codec.line_codec import LineCodec, strip_line_ending

__all__ = [
    "LineCodec",
    "decode_bsd_line",
    "decode_gnu_line",
    "encode_bsd_line",
    "encode_gnu_line",
    "match_bsd_line",
    "strip_line_ending",
]
