"""Unit tests for codecs registration."""

from __future__ import annotations

import codecs

import pytest

import jmutf


@pytest.mark.usefixtures("registered_codec")
class TestRegisteredCodec:
    """Test the codec through Python's codecs machinery."""

    @pytest.mark.parametrize("name", ["mutf-8", "MUTF8", "java-utf-8", "java_utf_8", "modified-utf-8"])
    def test_lookup(self, name: str) -> None:
        """All aliases resolve to the same codec."""
        assert codecs.lookup(name).name == "mutf-8"

    def test_str_encode(self, sample_text: str, sample_encoded: bytes) -> None:
        """str.encode() uses the modified UTF-8 encoder."""
        assert sample_text.encode("mutf-8") == sample_encoded

    def test_bytes_decode(self, sample_text: str, sample_encoded: bytes) -> None:
        """bytes.decode() uses the modified UTF-8 decoder."""
        assert sample_encoded.decode("mutf-8") == sample_text

    def test_encode_errors(self) -> None:
        """Encode errors surface as UnicodeEncodeError."""
        with pytest.raises(UnicodeEncodeError) as exc_info:
            "ab\ud800".encode("mutf-8")

        assert exc_info.value.start == 2
        assert isinstance(exc_info.value.__cause__, jmutf.EncodeError)

    def test_encode_error_policies(self) -> None:
        """The encode errors argument selects the policy."""
        assert "\ud800".encode("mutf-8", "replace") == b"\xef\xbf\xbd"
        assert "\ud800".encode("mutf-8", "surrogatepass") == b"\xed\xa0\x80"

    def test_unknown_encode_handler(self) -> None:
        """Unknown error handler names raise LookupError like the built-in codecs."""
        with pytest.raises(LookupError, match="unknown error handler name 'ignore'"):
            "abc".encode("mutf-8", "ignore")

    def test_decode_errors(self) -> None:
        """Decode errors surface as UnicodeDecodeError."""
        with pytest.raises(UnicodeDecodeError) as exc_info:
            b"abc\x00".decode("mutf-8")

        assert exc_info.value.start == 3
        assert exc_info.value.reason == jmutf.DecodeErrorKind.INVALID_NUL.value
        assert exc_info.value.__cause__.kind is jmutf.DecodeErrorKind.INVALID_NUL

    def test_decode_only_strict(self) -> None:
        """Decoding supports only the strict policy."""
        with pytest.raises(ValueError, match="only errors='strict'"):
            b"abc".decode("mutf-8", "replace")

    def test_register_is_idempotent(self) -> None:
        """Registering twice does not fail."""
        jmutf.register()
        assert codecs.lookup("mutf-8").name == "mutf-8"


def test_unknown_name_not_answered() -> None:
    """The search function ignores other codec names."""
    assert jmutf.registry.search("utf-8") is None
    assert jmutf.registry.search("latin-1") is None


def test_unregister() -> None:
    """After unregister() the name no longer resolves."""
    jmutf.register()
    jmutf.unregister()

    with pytest.raises(LookupError):
        codecs.lookup("mutf-8")
