"""Encoded size calculation utilities.

This module provides functions to calculate the modified UTF-8 size of a
string without actually encoding it.
"""

from __future__ import annotations

from ..codec.grammar import ENCODE_ERROR_POLICIES, encoded_width, is_surrogate
from ..exceptions import EncodeError

# Largest payload DataOutput.writeUTF accepts (its length prefix is an unsigned short)
JAVA_UTF_MAX_BYTES = 0xFFFF


def encoded_length(text: str, errors: str = "strict") -> int:
    """Calculate the modified UTF-8 length of a string in bytes.

    Args:
        text: String to measure
        errors: Same policy as encode(); only "strict" changes the outcome,
            by rejecting unpaired surrogates

    Returns:
        Number of bytes encode(text, errors) would return

    Raises:
        ValueError: If errors is not a known policy
        EncodeError: If text holds an unpaired surrogate and errors="strict"

    Example:
        >>> encoded_length("A\\x00\\u00e9\\u65e5\\U0001f4a9")
        14  # 1 + 2 + 2 + 3 + 6
    """
    if errors not in ENCODE_ERROR_POLICIES:
        raise ValueError(f"Invalid errors policy: {errors!r}")

    total = 0
    for position, char in enumerate(text):
        codepoint = ord(char)
        if errors == "strict" and is_surrogate(codepoint):
            raise EncodeError(
                f"Unpaired surrogate U+{codepoint:04X} at position {position}",
                codepoint=codepoint,
                position=position,
            )
        total += encoded_width(codepoint)

    return total


def fits_java_utf(text: str, errors: str = "strict") -> bool:
    """Check whether a string can be written with DataOutput.writeUTF.

    Example:
        >>> fits_java_utf("x" * 65535)
        True
        >>> fits_java_utf("\\x00" * 40000)
        False
    """
    return encoded_length(text, errors) <= JAVA_UTF_MAX_BYTES
