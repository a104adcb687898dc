"""Modified UTF-8 encoder.

This module provides the encode() function that converts a Python string to
modified UTF-8 bytes, one codepoint at a time.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from .grammar import (
    ENCODE_ERROR_POLICIES,
    MAX_CODEPOINT,
    NUL_SEQUENCE,
    REPLACEMENT_CHARACTER,
    EncodeErrors,
    is_surrogate,
    split_surrogates,
)


def encode(text: str, errors: EncodeErrors = "strict") -> bytes:
    """Encode a string to modified UTF-8.

    Every character is encoded independently. U+0000 becomes ``C0 80`` and
    characters above U+FFFF become a 6-byte surrogate pair, so the output
    never contains a zero byte or a 4-byte sequence.

    Args:
        text: String to encode
        errors: Policy for unpaired surrogates in ``text``:
            "strict" raises EncodeError, "replace" writes U+FFFD,
            "surrogatepass" writes the surrogate with the 3-byte form

    Returns:
        Modified UTF-8 bytes

    Raises:
        TypeError: If text is not a str
        ValueError: If errors is not a known policy
        EncodeError: If text holds an unpaired surrogate and errors="strict"

    Examples:
        ```python
        from jmutf import encode

        encode("ASCII")         # b'ASCII'
        encode("\\x00")          # b'\\xc0\\x80'
        encode("\\U0001f4a9")    # b'\\xed\\xa0\\xbd\\xed\\xb2\\xa9'
        ```
    """
    if not isinstance(text, str):
        raise TypeError(f"encode() argument must be str, not {type(text).__name__}")
    _check_policy(errors)

    output = bytearray()
    for position, char in enumerate(text):
        _encode_codepoint(output, ord(char), errors, position)

    return bytes(output)


def encode_codepoint(codepoint: int, errors: EncodeErrors = "strict") -> bytes:
    """Encode a single integer codepoint to modified UTF-8.

    Unlike encode(), this accepts any integer, so values outside
    [0, 0x10FFFF] are reachable. They raise EncodeError under "strict" and
    "surrogatepass" and are replaced by U+FFFD under "replace".

    Args:
        codepoint: Codepoint to encode
        errors: Policy for surrogates and out-of-range values

    Returns:
        Encoded bytes (1, 2, 3 or 6 bytes)

    Raises:
        ValueError: If errors is not a known policy
        EncodeError: If the codepoint is rejected by the policy
    """
    _check_policy(errors)

    output = bytearray()
    _encode_codepoint(output, codepoint, errors, None)
    return bytes(output)


def _check_policy(errors: str) -> None:
    if errors not in ENCODE_ERROR_POLICIES:
        raise ValueError(
            f"Invalid errors policy: {errors!r}. Must be one of {', '.join(ENCODE_ERROR_POLICIES)}"
        )


def _encode_codepoint(
    output: bytearray, codepoint: int, errors: str, position: int | None
) -> None:
    """Append the encoding of one codepoint to output.

    Args:
        output: Buffer to append to
        codepoint: Codepoint to encode
        errors: Validated errors policy
        position: Index of the character in the input string, if any

    Raises:
        EncodeError: If the codepoint is rejected by the policy
    """
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        if errors != "replace":
            raise EncodeError(
                f"Codepoint {codepoint:#x} out of range [0x0, {MAX_CODEPOINT:#x}]",
                codepoint=codepoint,
                position=position,
            )
        codepoint = REPLACEMENT_CHARACTER
    elif is_surrogate(codepoint) and errors != "surrogatepass":
        if errors == "strict":
            raise EncodeError(
                f"Unpaired surrogate U+{codepoint:04X}"
                + (f" at position {position}" if position is not None else ""),
                codepoint=codepoint,
                position=position,
            )
        codepoint = REPLACEMENT_CHARACTER

    if codepoint == 0:
        output += NUL_SEQUENCE
    elif codepoint <= 0x7F:
        output.append(codepoint)
    elif codepoint <= 0x7FF:
        output.append(0xC0 | (codepoint >> 6))
        output.append(0x80 | (codepoint & 0x3F))
    elif codepoint <= 0xFFFF:
        _append_triplet(output, codepoint)
    else:
        high, low = split_surrogates(codepoint)
        _append_triplet(output, high)
        _append_triplet(output, low)


def _append_triplet(output: bytearray, codepoint: int) -> None:
    output.append(0xE0 | (codepoint >> 12))
    output.append(0x80 | ((codepoint >> 6) & 0x3F))
    output.append(0x80 | (codepoint & 0x3F))
