"""Modified UTF-8 codec for jmutf.

This module provides encoding and decoding between Python strings and the
modified UTF-8 format used by Java's DataInput/DataOutput streams.
"""

from __future__ import annotations

from .decoder import DecodeResult, decode, try_decode
from .encoder import encode, encode_codepoint

__all__ = [
    "encode",
    "encode_codepoint",
    "decode",
    "try_decode",
    "DecodeResult",
]
