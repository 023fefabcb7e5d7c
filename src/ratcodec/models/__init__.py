"""Pydantic models for ratcodec.

This module provides the RationalInfo model describing one encoded value.
"""

from __future__ import annotations

from .info import RationalInfo

__all__ = [
    "RationalInfo",
]
