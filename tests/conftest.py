"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

import jmutf


@pytest.fixture
def sample_text() -> str:
    """Text touching every encoded width: NUL, ASCII, 2-, 3- and 6-byte forms."""
    return "nul\x00 åäö 日本語 \U0001f4a9"


@pytest.fixture
def sample_encoded() -> bytes:
    """Modified UTF-8 encoding of sample_text."""
    return (
        b"nul\xc0\x80 "
        + "åäö 日本語 ".encode("utf-8")
        + b"\xed\xa0\xbd\xed\xb2\xa9"
    )


@pytest.fixture
def registered_codec():
    """Register the codec for the duration of a test."""
    jmutf.register()
    yield
    jmutf.unregister()
