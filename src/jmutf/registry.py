"""Registration with Python's codecs machinery.

After register(), modified UTF-8 is available by name to str.encode(),
bytes.decode() and codecs.lookup():

    >>> import jmutf
    >>> jmutf.register()
    >>> "\\x00".encode("mutf-8")
    b'\\xc0\\x80'
    >>> b"\\xc0\\x80".decode("java-utf-8")
    '\\x00'

Encoding accepts the "strict", "replace" and "surrogatepass" error handlers;
other names raise LookupError. Decoding accepts "strict" only.

Only the stateless interface is provided; there is no incremental or stream
codec.
"""

from __future__ import annotations

import codecs
from typing import Any

from .codec.decoder import decode
from .codec.encoder import encode
from .codec.grammar import ENCODE_ERROR_POLICIES
from .exceptions import DecodeError, EncodeError

CODEC_NAME = "mutf-8"
CODEC_ALIASES: tuple[str, ...] = ("mutf-8", "mutf8", "java-utf-8", "modified-utf-8")

_NORMALIZED_ALIASES = frozenset(alias.replace("-", "_") for alias in CODEC_ALIASES)

_registered = False


def _normalize(name: str) -> str:
    return name.lower().replace("-", "_").replace(" ", "_")


def _encode(text: str, errors: str = "strict") -> tuple[bytes, int]:
    if errors not in ENCODE_ERROR_POLICIES:
        raise LookupError(f"unknown error handler name {errors!r} for {CODEC_NAME}")
    try:
        return encode(text, errors=errors), len(text)  # type: ignore[arg-type]
    except EncodeError as e:
        position = e.position if e.position is not None else 0
        raise UnicodeEncodeError(CODEC_NAME, text, position, position + 1, str(e)) from e


def _decode(data: Any, errors: str = "strict") -> tuple[str, int]:
    if errors != "strict":
        raise ValueError(f"{CODEC_NAME} decoding supports only errors='strict', got {errors!r}")

    raw = bytes(memoryview(data))
    try:
        return decode(raw), len(raw)
    except DecodeError as e:
        raise UnicodeDecodeError(
            CODEC_NAME, raw, e.position, e.position + 1, e.kind.value
        ) from e


def search(name: str) -> codecs.CodecInfo | None:
    """codecs search function answering for the modified UTF-8 aliases."""
    if _normalize(name) not in _NORMALIZED_ALIASES:
        return None
    return codecs.CodecInfo(encode=_encode, decode=_decode, name=CODEC_NAME)


def register() -> None:
    """Register the modified UTF-8 codec. Calling it again is a no-op."""
    global _registered
    if not _registered:
        codecs.register(search)
        _registered = True


def unregister() -> None:
    """Remove the modified UTF-8 codec registered by register()."""
    global _registered
    if _registered:
        codecs.unregister(search)
        _registered = False
