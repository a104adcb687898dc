"""Byte grammar of modified UTF-8.

Modified UTF-8 differs from standard UTF-8 in three ways:

- U+0000 is written as the overlong pair ``C0 80``, so encoded strings never
  contain a zero byte.
- Only the 1-, 2- and 3-byte forms are used.
- Supplementary characters (U+10000 and up) are written as a surrogate pair,
  each half encoded with the 3-byte form (6 bytes total).

Range                  Encoding
0x0                    11000000 10000000
0x1 .. 0x7f            0xxxxxxx
0x80 .. 0x7ff          110xxxxx 10xxxxxx
0x800 .. 0xffff        1110xxxx 10xxxxxx 10xxxxxx
0x10000 .. 0x10ffff    surrogate pair (6 bytes)
"""

from __future__ import annotations

from typing import Literal

MAX_CODEPOINT = 0x10FFFF
SUPPLEMENTARY_BASE = 0x10000

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF

REPLACEMENT_CHARACTER = 0xFFFD

# Overlong encoding of U+0000
NUL_SEQUENCE = b"\xc0\x80"

# Lead and continuation byte patterns (mask, expected value)
TWO_BYTE_MASK = 0xE0
TWO_BYTE_LEAD = 0xC0
THREE_BYTE_MASK = 0xF0
THREE_BYTE_LEAD = 0xE0
CONTINUATION_MASK = 0xC0
CONTINUATION = 0x80

PAYLOAD_BITS = 0x3F

EncodeErrors = Literal["strict", "replace", "surrogatepass"]
ENCODE_ERROR_POLICIES: tuple[str, ...] = ("strict", "replace", "surrogatepass")


def is_high_surrogate(codepoint: int) -> bool:
    """Return True if codepoint is in [0xD800, 0xDBFF]."""
    return HIGH_SURROGATE_MIN <= codepoint <= HIGH_SURROGATE_MAX


def is_low_surrogate(codepoint: int) -> bool:
    """Return True if codepoint is in [0xDC00, 0xDFFF]."""
    return LOW_SURROGATE_MIN <= codepoint <= LOW_SURROGATE_MAX


def is_surrogate(codepoint: int) -> bool:
    """Return True if codepoint is a high or low surrogate."""
    return HIGH_SURROGATE_MIN <= codepoint <= LOW_SURROGATE_MAX


def split_surrogates(codepoint: int) -> tuple[int, int]:
    """Split a supplementary codepoint into its (high, low) surrogate pair.

    Args:
        codepoint: Codepoint in [0x10000, 0x10FFFF]

    Returns:
        Tuple of (high surrogate, low surrogate)

    Example:
        >>> [hex(s) for s in split_surrogates(0x10437)]
        ['0xd801', '0xdc37']
    """
    offset = codepoint - SUPPLEMENTARY_BASE
    high = (offset >> 10) + HIGH_SURROGATE_MIN
    low = (offset & 0x3FF) + LOW_SURROGATE_MIN
    return high, low


def join_surrogates(high: int, low: int) -> int:
    """Combine a (high, low) surrogate pair back into one codepoint."""
    return SUPPLEMENTARY_BASE + ((high - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)


def encoded_width(codepoint: int) -> int:
    """Number of bytes the encoder emits for a single codepoint.

    Surrogates (encoded with the 3-byte form under "surrogatepass", or
    replaced by U+FFFD under "replace") count as 3 bytes.
    """
    if codepoint == 0:
        return 2
    if codepoint <= 0x7F:
        return 1
    if codepoint <= 0x7FF:
        return 2
    if codepoint <= 0xFFFF:
        return 3
    return 6
