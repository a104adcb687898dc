"""Exception hierarchy for jmutf.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from JmutfError for easy catching of any jmutf-specific error.
Encode and decode failures also inherit from ValueError, matching what the
built-in codecs raise for bad input.
"""

from __future__ import annotations

import enum


class JmutfError(Exception):
    """Base exception for all jmutf errors."""

    pass


class DecodeErrorKind(enum.Enum):
    """Closed set of reasons a modified UTF-8 byte sequence is rejected.

    The value of each member is the human-readable reason.
    """

    INVALID_NUL = "short NUL byte not allowed"
    UNEXPECTED_END = "unexpected end of data"
    UNEXPECTED_END_SURROGATE = "unexpected end of data (missing low surrogate)"
    INVALID_ENCODING = "invalid encoding"


class EncodeError(JmutfError, ValueError):
    """Raised when a codepoint cannot be encoded under the selected policy.

    Examples:
        - Unpaired surrogate in the input string with errors="strict"
        - Integer codepoint outside [0, 0x10FFFF]
        - Encoded output longer than a configured maximum

    Attributes:
        codepoint: Offending codepoint, or None for length violations
        position: Index of the offending character in the input, if known
    """

    def __init__(self, message: str, codepoint: int | None = None, position: int | None = None):
        super().__init__(message)
        self.codepoint = codepoint
        self.position = position


class DecodeError(JmutfError, ValueError):
    """Raised when a byte sequence is not valid modified UTF-8.

    Attributes:
        kind: DecodeErrorKind classifying the failure
        position: Byte offset of the sequence that failed to decode
    """

    def __init__(self, kind: DecodeErrorKind, position: int):
        super().__init__(f"{kind.value} at byte {position}")
        self.kind = kind
        self.position = position
