"""Utility functions for ratcodec.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, width_class_for

__all__ = [
    "encoded_size",
    "width_class_for",
]
