"""Modified UTF-8 decoder.

This module provides the decode() function that converts modified UTF-8 bytes
back to a Python string, and try_decode() which reports failures as a value
instead of raising.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from ..exceptions import DecodeError, DecodeErrorKind
from .grammar import (
    CONTINUATION,
    CONTINUATION_MASK,
    NUL_SEQUENCE,
    PAYLOAD_BITS,
    THREE_BYTE_LEAD,
    THREE_BYTE_MASK,
    TWO_BYTE_LEAD,
    TWO_BYTE_MASK,
    is_high_surrogate,
    is_low_surrogate,
    join_surrogates,
)


class DecodeResult(NamedTuple):
    """Outcome of try_decode().

    Attributes:
        text: Decoded string, or "" when decoding failed
        error: DecodeError describing the failure, or None on success
    """

    text: str
    error: DecodeError | None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode(data: Any, *, fast_path: bool = True) -> str:
    """Decode modified UTF-8 bytes to a string.

    The input is validated against the restricted modified UTF-8 grammar:
    standalone zero bytes, truncated sequences, unpaired high surrogates and
    4-byte sequences are all rejected. A lone low surrogate is decoded as an
    ordinary character.

    Args:
        data: bytes, bytearray, memoryview or other buffer holding the
            complete encoded sequence
        fast_path: If True, input that is already valid standard UTF-8 (and
            free of zero bytes and 4-byte sequences) is decoded by the
            built-in codec. The result is identical either way.

    Returns:
        Decoded string

    Raises:
        TypeError: If data does not support the buffer protocol
        DecodeError: If data is not valid modified UTF-8; ``kind`` holds the
            DecodeErrorKind and ``position`` the failing byte offset

    Examples:
        ```python
        from jmutf import decode, DecodeError

        decode(b"\\xc0\\x80")                        # '\\x00'
        decode(b"\\xed\\xa0\\xbd\\xed\\xb2\\xa9")    # '\\U0001f4a9'

        try:
            decode(b"\\xc0")
        except DecodeError as e:
            print(e.kind)  # DecodeErrorKind.UNEXPECTED_END
        ```
    """
    raw = _as_bytes(data)

    if fast_path and b"\x00" not in raw:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            pass
        else:
            # 4-byte sequences are valid UTF-8 but not modified UTF-8
            if not text or max(text) <= "\uffff":
                return text

    return _decode_modified(raw)


def try_decode(data: Any, *, fast_path: bool = True) -> DecodeResult:
    """Decode modified UTF-8 bytes, returning the error instead of raising.

    Args:
        data: Buffer holding the complete encoded sequence
        fast_path: See decode()

    Returns:
        DecodeResult(text, None) on success, DecodeResult("", error) on failure

    Raises:
        TypeError: If data does not support the buffer protocol
    """
    try:
        return DecodeResult(decode(data, fast_path=fast_path), None)
    except DecodeError as e:
        return DecodeResult("", e)


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, bytes):
        return data
    try:
        return memoryview(data).tobytes()
    except TypeError as e:
        raise TypeError(
            f"decode() argument must be a bytes-like object, not {type(data).__name__}"
        ) from e


def _decode_modified(raw: bytes) -> str:
    """Run the modified UTF-8 state machine over the whole buffer.

    Args:
        raw: Encoded bytes

    Returns:
        Decoded string

    Raises:
        DecodeError: On the first grammar violation
    """
    chars: list[str] = []
    size = len(raw)
    i = 0

    while i < size:
        lead = raw[i]

        if lead == 0:
            raise DecodeError(DecodeErrorKind.INVALID_NUL, i)

        if lead < 0x80:
            chars.append(chr(lead))
            i += 1

        elif lead & TWO_BYTE_MASK == TWO_BYTE_LEAD:
            if i + 1 >= size:
                raise DecodeError(DecodeErrorKind.UNEXPECTED_END, i)

            if raw[i : i + 2] == NUL_SEQUENCE:
                chars.append("\x00")
            else:
                second = _continuation(raw, i + 1, i)
                chars.append(chr(((lead & 0x1F) << 6) | second))
            i += 2

        elif lead & THREE_BYTE_MASK == THREE_BYTE_LEAD:
            if i + 2 >= size:
                raise DecodeError(DecodeErrorKind.UNEXPECTED_END, i)

            codepoint = _triplet(raw, i)

            if is_high_surrogate(codepoint):
                if i + 5 >= size:
                    raise DecodeError(DecodeErrorKind.UNEXPECTED_END_SURROGATE, i)

                if raw[i + 3] == 0:
                    raise DecodeError(DecodeErrorKind.INVALID_NUL, i + 3)

                if raw[i + 3] & THREE_BYTE_MASK != THREE_BYTE_LEAD:
                    raise DecodeError(DecodeErrorKind.INVALID_ENCODING, i + 3)

                low = _triplet(raw, i + 3)
                if not is_low_surrogate(low):
                    raise DecodeError(DecodeErrorKind.INVALID_ENCODING, i + 3)

                chars.append(chr(join_surrogates(codepoint, low)))
                i += 6
            else:
                chars.append(chr(codepoint))
                i += 3

        else:
            # Continuation byte in lead position, or a 4-byte-and-longer lead
            raise DecodeError(DecodeErrorKind.INVALID_ENCODING, i)

    return "".join(chars)


def _triplet(raw: bytes, start: int) -> int:
    """Decode the 3-byte sequence at start (lead already checked)."""
    second = _continuation(raw, start + 1, start)
    third = _continuation(raw, start + 2, start)
    return ((raw[start] & 0x0F) << 12) | (second << 6) | third


def _continuation(raw: bytes, index: int, start: int) -> int:
    """Return the payload bits of the continuation byte at index.

    Raises:
        DecodeError: If the byte is zero or not of the form 10xxxxxx
    """
    byte = raw[index]
    if byte == 0:
        raise DecodeError(DecodeErrorKind.INVALID_NUL, index)
    if byte & CONTINUATION_MASK != CONTINUATION:
        raise DecodeError(DecodeErrorKind.INVALID_ENCODING, start)
    return byte & PAYLOAD_BITS
