"""Pydantic integration for jmutf.

This module provides field types for Pydantic models that carry modified
UTF-8 strings.
"""

from __future__ import annotations

from .fields import MaxEncodedLength, ModifiedUTF8Str

__all__ = [
    "ModifiedUTF8Str",
    "MaxEncodedLength",
]
