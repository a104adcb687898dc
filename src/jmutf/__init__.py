"""jmutf: Java Modified UTF-8 Codec

A Python library for the "modified UTF-8" encoding used by Java's
DataInput/DataOutput streams, JNI and class files. It differs from standard
UTF-8 in that U+0000 is written as the two bytes C0 80, and characters above
U+FFFF are written as a 6-byte surrogate pair instead of a 4-byte sequence.

Key Features:
- Bit-exact encoder and validating decoder
- Classified decode errors (DecodeErrorKind)
- Optional registration with Python's codecs module
- Pydantic field types

Quick Start:
    >>> from jmutf import encode, decode
    >>>
    >>> data = encode("nul\\x00 and \\U0001f4a9")
    >>> data
    b'nul\\xc0\\x80 and \\xed\\xa0\\xbd\\xed\\xb2\\xa9'
    >>> decode(data)
    'nul\\x00 and \\U0001f4a9'
"""

from __future__ import annotations

from .codec import DecodeResult, decode, encode, encode_codepoint, try_decode
from .config import CodecOptions
from .exceptions import DecodeError, DecodeErrorKind, EncodeError, JmutfError
from .models import MaxEncodedLength, ModifiedUTF8Str
from .registry import register, unregister
from .utils import JAVA_UTF_MAX_BYTES, encoded_length, fits_java_utf

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_codepoint",
    "decode",
    "try_decode",
    "DecodeResult",
    # Options
    "CodecOptions",
    # Exceptions
    "JmutfError",
    "EncodeError",
    "DecodeError",
    "DecodeErrorKind",
    # codecs registry
    "register",
    "unregister",
    # Pydantic fields
    "ModifiedUTF8Str",
    "MaxEncodedLength",
    # Sizing
    "JAVA_UTF_MAX_BYTES",
    "encoded_length",
    "fits_java_utf",
    # Version
    "__version__",
]
