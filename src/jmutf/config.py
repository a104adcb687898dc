"""Codec options.

This module provides the CodecOptions dataclass that bundles the keyword
arguments accepted by encode() and decode(), with validation.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec.decoder import decode
from .codec.encoder import encode
from .codec.grammar import ENCODE_ERROR_POLICIES
from .exceptions import EncodeError


@dataclass(frozen=True)
class CodecOptions:
    """Options for encoding and decoding modified UTF-8.

    Attributes:
        errors: Encode policy for unpaired surrogates, one of
            "strict" (raise), "replace" (write U+FFFD) or
            "surrogatepass" (write the surrogate as-is). Default "strict".

        fast_path: Let decode() hand input that is already standard UTF-8 to
            the built-in codec (default True). Output is identical either way.

        max_encoded_length: Optional upper bound on the encoded size in bytes.
            Use JAVA_UTF_MAX_BYTES (65535) for strings written with
            DataOutput.writeUTF.

    Examples:
        ```python
        from jmutf import CodecOptions, JAVA_UTF_MAX_BYTES

        options = CodecOptions(errors="replace", max_encoded_length=JAVA_UTF_MAX_BYTES)
        data = options.encode("caf\\u00e9")
        text = options.decode(data)
        ```
    """

    errors: str = "strict"
    fast_path: bool = True
    max_encoded_length: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.errors not in ENCODE_ERROR_POLICIES:
            raise ValueError(
                f"errors must be one of {', '.join(ENCODE_ERROR_POLICIES)}, got {self.errors!r}"
            )

        if self.max_encoded_length is not None and self.max_encoded_length <= 0:
            raise ValueError(f"max_encoded_length must be > 0, got {self.max_encoded_length}")

    def encode(self, text: str) -> bytes:
        """Encode text with these options, enforcing max_encoded_length."""
        data = encode(text, errors=self.errors)  # type: ignore[arg-type]
        self.check_length(len(data))
        return data

    def decode(self, data: bytes) -> str:
        """Decode data with these options."""
        return decode(data, fast_path=self.fast_path)

    def check_length(self, length: int) -> None:
        """Raise EncodeError if length exceeds max_encoded_length."""
        if self.max_encoded_length is not None and length > self.max_encoded_length:
            raise EncodeError(
                f"Encoded size ({length} bytes) exceeds "
                f"max_encoded_length={self.max_encoded_length}"
            )
