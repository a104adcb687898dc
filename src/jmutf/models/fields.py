"""Pydantic field types for modified UTF-8 strings.

This module provides an annotated string type and a length constraint for
Pydantic models whose string fields travel as modified UTF-8 (for example
values read from or written to a Java DataInput/DataOutput stream).
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer, SerializationInfo

from ..codec.decoder import decode
from ..codec.encoder import encode
from ..exceptions import DecodeError
from ..utils.sizing import encoded_length


def _decode_bytes(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return decode(value)
        except DecodeError as e:
            raise ValueError(f"invalid modified UTF-8: {e}") from e
    return value


def _encode_str(value: str, info: SerializationInfo) -> Any:
    if info.mode_is_json():
        return value
    # Lone surrogates are legal decoder output; write them back unchanged
    return encode(value, errors="surrogatepass")


ModifiedUTF8Str = Annotated[
    str,
    BeforeValidator(_decode_bytes),
    PlainSerializer(_encode_str, when_used="unless-none"),
]
"""A str field that also accepts modified UTF-8 bytes.

Validation decodes bytes input; model_dump() (Python mode) encodes the value
back to modified UTF-8 bytes. JSON mode keeps the plain string.

Example:
    >>> class Entry(BaseModel):
    ...     name: ModifiedUTF8Str
    >>> Entry(name=b"a\\xc0\\x80b").name
    'a\\x00b'
    >>> Entry(name="a\\x00b").model_dump()
    {'name': b'a\\xc0\\x80b'}
"""


def MaxEncodedLength(limit: int) -> AfterValidator:
    """Create a constraint on the modified UTF-8 size of a string field.

    Args:
        limit: Maximum encoded size in bytes (inclusive)

    Returns:
        Pydantic AfterValidator suitable for use in Annotated metadata.

    Example:
        >>> class Record(BaseModel):
        ...     title: Annotated[ModifiedUTF8Str, MaxEncodedLength(JAVA_UTF_MAX_BYTES)]
    """
    if limit <= 0:
        raise ValueError("limit must be > 0")

    def check(value: str) -> str:
        length = encoded_length(value)
        if length > limit:
            raise ValueError(f"encoded size {length} bytes exceeds {limit}")
        return value

    return AfterValidator(check)
