"""Discriminant layout shared by the encoder and the decoder.

Every encoded rational starts with one discriminant byte::

    [ S | D D D | N N N N ]

    S = sign of the decoded numerator
    D = denominator width-class (0 means the denominator is 1 and omitted)
    N = numerator width-class (0 is reserved)

Width-classes 1-4 select 1, 2, 4 and 8 byte little-endian magnitudes. Codes
above 4 are reserved for other representations (rational polynomials,
finite-field elements) and are rejected by this codec.
"""

from __future__ import annotations

import enum

from ..exceptions import FormatError

SIGN_BIT = 0b1000_0000
DEN_MASK = 0b0111_0000
NUM_MASK = 0b0000_1111
DEN_SHIFT = 4

# Literal byte the historical writer puts in front of a 4-byte denominator
DEN32_MARKER = 0x03

MAX_MAGNITUDE = (1 << 64) - 1
MIN_I64 = -(1 << 63)
MAX_I64 = (1 << 63) - 1

# Largest magnitude of either operand once a signed 64-bit pair is sign-normalized
MAX_NORMALIZED = 1 << 63


class WidthClass(enum.IntEnum):
    """Byte width selector stored in the discriminant nibbles."""

    ABSENT = 0
    U8 = 1
    U16 = 2
    U32 = 3
    U64 = 4

    @property
    def byte_width(self) -> int:
        """Number of magnitude bytes this class occupies."""
        return _BYTE_WIDTHS[self]

    @property
    def limit(self) -> int:
        """Top value of the class, which is never used for a magnitude."""
        return _LIMITS[self]

    @classmethod
    def for_magnitude(cls, magnitude: int) -> WidthClass:
        """Pick the smallest class whose top value is strictly above ``magnitude``.

        The top value itself is promoted: 255 is stored in two bytes, 65535 in
        four bytes and 4294967295 in eight bytes.

        Raises:
            ValueError: If magnitude is negative or needs more than 64 bits
        """
        if magnitude < 0:
            raise ValueError(f"magnitude must be non-negative, got {magnitude}")
        if magnitude > MAX_MAGNITUDE:
            raise ValueError(f"magnitude {magnitude} does not fit in 64 bits")

        for width_class in (cls.U8, cls.U16, cls.U32):
            if magnitude < width_class.limit:
                return width_class
        return cls.U64

    @classmethod
    def numerator_from_code(cls, code: int) -> WidthClass:
        """Map a numerator nibble to its class.

        Raises:
            FormatError: For the reserved codes 0 and 5-15
        """
        if code == cls.ABSENT or code > cls.U64:
            raise FormatError(f"Unsupported numerator width-class {code}")
        return cls(code)

    @classmethod
    def denominator_from_code(cls, code: int) -> WidthClass:
        """Map a denominator field to its class.

        Raises:
            FormatError: For the reserved codes 5-7
        """
        if code > cls.U64:
            raise FormatError(f"Unsupported denominator width-class {code}")
        return cls(code)


_BYTE_WIDTHS = {
    WidthClass.ABSENT: 0,
    WidthClass.U8: 1,
    WidthClass.U16: 2,
    WidthClass.U32: 4,
    WidthClass.U64: 8,
}

_LIMITS = {
    WidthClass.ABSENT: 0,
    WidthClass.U8: 0xFF,
    WidthClass.U16: 0xFFFF,
    WidthClass.U32: 0xFFFF_FFFF,
    WidthClass.U64: MAX_MAGNITUDE,
}


def pack_discriminant(
    numerator: WidthClass, denominator: WidthClass = WidthClass.ABSENT, negative: bool = False
) -> int:
    """Build a discriminant byte from its three fields."""
    disc = int(numerator) | (int(denominator) << DEN_SHIFT)
    if negative:
        disc |= SIGN_BIT
    return disc


def unpack_discriminant(disc: int) -> tuple[bool, WidthClass, WidthClass]:
    """Split a discriminant byte into (negative, numerator class, denominator class).

    Raises:
        FormatError: If either width-class is reserved
    """
    negative = bool(disc & SIGN_BIT)
    numerator = WidthClass.numerator_from_code(disc & NUM_MASK)
    denominator = WidthClass.denominator_from_code((disc & DEN_MASK) >> DEN_SHIFT)
    return negative, numerator, denominator
