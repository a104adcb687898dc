"""Utility functions for jmutf.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import JAVA_UTF_MAX_BYTES, encoded_length, fits_java_utf

__all__ = [
    "JAVA_UTF_MAX_BYTES",
    "encoded_length",
    "fits_java_utf",
]
