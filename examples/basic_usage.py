#!/usr/bin/env python3
"""Basic usage example for jmutf.

This example demonstrates:
1. Encoding a string to modified UTF-8
2. Decoding it back, and handling malformed input
3. Calculating encoded sizes against the writeUTF limit
4. Using the codec through str.encode()/bytes.decode()
"""

from __future__ import annotations

import jmutf
from jmutf import DecodeError, decode, encode, encoded_length, fits_java_utf, try_decode


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("jmutf Basic Usage Example")
    print("=" * 60)
    print()

    text = "nul\x00 café \U0001f4a9"

    print("1. Encoding...")
    data = encode(text)
    print(f"   Text:    {text!r}")
    print(f"   Encoded: {data.hex(' ')}")
    print(f"   Standard UTF-8 would be {len(text.encode('utf-8'))} bytes, modified is {len(data)}")
    print()

    print("2. Decoding...")
    print(f"   Decoded: {decode(data)!r}")
    try:
        decode(b"\xed\xa0\xbd")
    except DecodeError as e:
        print(f"   Truncated pair rejected: {e.kind.name} at byte {e.position}")
    result = try_decode(b"abc\x00")
    print(f"   try_decode(b'abc\\x00') -> text={result.text!r}, error={result.error}")
    print()

    print("3. Sizing...")
    print(f"   encoded_length: {encoded_length(text)} bytes")
    print(f"   fits writeUTF:  {fits_java_utf(text)}")
    print()

    print("4. codecs registry...")
    jmutf.register()
    encoded = "x\x00".encode("mutf-8")
    print(f"   'x\\x00'.encode('mutf-8') -> {encoded!r}")
    jmutf.unregister()


if __name__ == "__main__":
    main()
