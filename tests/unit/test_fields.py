"""Unit tests for Pydantic field types."""

from __future__ import annotations

from typing import Annotated, Optional

import pytest
from pydantic import BaseModel, ValidationError

from jmutf import JAVA_UTF_MAX_BYTES, MaxEncodedLength, ModifiedUTF8Str


class ClassEntry(BaseModel):
    """Model with a modified UTF-8 string field."""

    name: ModifiedUTF8Str
    comment: Optional[ModifiedUTF8Str] = None


class BoundedEntry(BaseModel):
    """Model with an encoded-size constraint."""

    title: Annotated[ModifiedUTF8Str, MaxEncodedLength(4)]


class JavaRecord(BaseModel):
    """Model limited to what DataOutput.writeUTF can write."""

    value: Annotated[ModifiedUTF8Str, MaxEncodedLength(JAVA_UTF_MAX_BYTES)]


class TestModifiedUTF8Str:
    """Test ModifiedUTF8Str validation and serialization."""

    def test_accepts_str(self) -> None:
        """Plain strings are kept as-is."""
        assert ClassEntry(name="a\x00b").name == "a\x00b"

    def test_accepts_bytes(self) -> None:
        """Modified UTF-8 bytes are decoded."""
        entry = ClassEntry(name=b"a\xc0\x80b\xed\xa0\xbd\xed\xb2\xa9")
        assert entry.name == "a\x00b\U0001f4a9"

    def test_rejects_invalid_bytes(self) -> None:
        """Invalid modified UTF-8 is a validation error."""
        with pytest.raises(ValidationError, match="invalid modified UTF-8"):
            ClassEntry(name=b"a\x00b")

    def test_dump_python(self) -> None:
        """Python-mode dumps produce modified UTF-8 bytes."""
        dumped = ClassEntry(name="a\x00b").model_dump()
        assert dumped == {"name": b"a\xc0\x80b", "comment": None}

    def test_dump_json(self) -> None:
        """JSON dumps keep the text."""
        entry = ClassEntry(name="\U0001f4a9", comment="ok")
        assert ClassEntry.model_validate_json(entry.model_dump_json()) == entry

    def test_dump_lone_low_surrogate(self) -> None:
        """Bytes holding a lone low surrogate dump back to the same bytes."""
        entry = ClassEntry(name=b"a\xed\xb0\x80b")

        assert entry.name == "a\udc00b"
        assert entry.model_dump() == {"name": b"a\xed\xb0\x80b", "comment": None}

    def test_dump_roundtrip(self) -> None:
        """A Python-mode dump validates back to the same model."""
        entry = ClassEntry(name="nul\x00", comment="\U0001f4a9")
        assert ClassEntry.model_validate(entry.model_dump()) == entry


class TestMaxEncodedLength:
    """Test MaxEncodedLength constraints."""

    def test_within_limit(self) -> None:
        """Values up to the limit are accepted."""
        assert BoundedEntry(title="\x00\x00").title == "\x00\x00"

    def test_over_limit(self) -> None:
        """Values over the limit fail validation."""
        with pytest.raises(ValidationError, match="exceeds 4"):
            BoundedEntry(title="\x00\x00a")

    def test_bytes_input(self) -> None:
        """Limit applies to decoded bytes input too."""
        with pytest.raises(ValidationError):
            BoundedEntry(title=b"\xed\xa0\xbd\xed\xb2\xa9")

    def test_java_limit(self) -> None:
        """writeUTF-sized strings are accepted, larger ones rejected."""
        JavaRecord(value="x" * JAVA_UTF_MAX_BYTES)
        with pytest.raises(ValidationError):
            JavaRecord(value="x" * (JAVA_UTF_MAX_BYTES + 1))

    def test_invalid_limit(self) -> None:
        """Non-positive limits are rejected."""
        with pytest.raises(ValueError):
            MaxEncodedLength(0)
