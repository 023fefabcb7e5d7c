"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from ratcodec import CodecConfig


@pytest.fixture
def legacy_config() -> CodecConfig:
    """Configuration reproducing the historical bytes and skip arithmetic."""
    return CodecConfig.legacy()


@pytest.fixture
def coefficient_stream() -> bytes:
    """Encoded 1, 3/4, -300 written back to back."""
    return bytes.fromhex("0101" "110304" "822c01")
