"""Exception hierarchy for ratcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RationalCodecError for easy catching of any
ratcodec-specific error. None of them is process-fatal: every condition is
reported to the immediate caller.
"""

from __future__ import annotations


class RationalCodecError(Exception):
    """Base exception for all ratcodec errors."""

    pass


class EncodeError(RationalCodecError):
    """Raised when encoding a rational fails.

    Examples:
        - Numerator or denominator outside the 64-bit range
        - Zero denominator
        - Non-integer input
    """

    pass


class BufferOverflowError(EncodeError):
    """Raised when a fixed-size destination cannot hold the encoded value.

    The destination is left untouched when this is raised.
    """

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(
            f"Destination too small: need {needed} bytes, have {available} bytes"
        )
        self.needed = needed
        self.available = available


class DecodeError(RationalCodecError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Reserved width-class in the discriminant
        - Trailing bytes after a single value
    """

    pass


class FormatError(DecodeError):
    """Raised when a discriminant uses an unsupported width-class.

    The data is corrupt or comes from an incompatible format version
    (for example a reserved polynomial or finite-field representation).
    """

    pass


class BufferUnderrunError(DecodeError):
    """Raised when fewer bytes remain than the discriminant declares."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"Not enough bytes: need {needed}, have {available}")
        self.needed = needed
        self.available = available


# Short aliases
BufferOverflow = BufferOverflowError
BufferUnderrun = BufferUnderrunError
