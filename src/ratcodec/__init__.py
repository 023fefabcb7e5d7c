"""ratcodec: Compact Rational Number Codec

A Python library for a compact, self-describing binary encoding of signed
rational numbers. Values are meant to be embedded inline in a larger
serialized stream (for example the coefficients of algebraic expressions)
without a fixed-width field or an external length table.

Key Features:
- One discriminant byte packing the sign and both operand widths
- 1, 2, 4 or 8 byte little-endian magnitudes, chosen per value
- Decode, skip or test for zero/one straight from the byte stream
- Capacity-checked writes into fixed-size buffers

Quick Start:
    >>> from ratcodec import write_frac, get_frac_i64
    >>>
    >>> data = write_frac(3, 4)
    >>> bytes(data).hex()
    '110304'
    >>> num, den, rest = get_frac_i64(data)
    >>> (num, den)
    (3, 4)
"""

from __future__ import annotations

from .codec import (
    WidthClass,
    decode_frac,
    encode_frac,
    encode_num,
    get_frac_i64,
    get_frac_u64,
    inspect_rational,
    is_one_rat,
    is_zero_rat,
    iter_rationals,
    read_rationals,
    skip_rational,
    skip_rationals,
    write_frac,
    write_frac_fixed,
    write_frac_unsigned,
    write_frac_unsigned_fixed,
    write_num,
    write_rationals,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    BufferOverflow,
    BufferOverflowError,
    BufferUnderrun,
    BufferUnderrunError,
    DecodeError,
    EncodeError,
    FormatError,
    RationalCodecError,
)
from .models import RationalInfo
from .utils import encoded_size, width_class_for

__version__ = "0.1.0"

__all__ = [
    # Encoder
    "write_num",
    "write_frac",
    "write_frac_unsigned",
    "write_frac_fixed",
    "write_frac_unsigned_fixed",
    "encode_num",
    "encode_frac",
    # Decoder
    "get_frac_i64",
    "get_frac_u64",
    "decode_frac",
    "skip_rational",
    "is_zero_rat",
    "is_one_rat",
    "inspect_rational",
    # Streams
    "write_rationals",
    "iter_rationals",
    "read_rationals",
    "skip_rationals",
    # Format and configuration
    "WidthClass",
    "CodecConfig",
    "DEFAULT_CONFIG",
    "RationalInfo",
    # Sizing
    "encoded_size",
    "width_class_for",
    # Exceptions
    "RationalCodecError",
    "EncodeError",
    "DecodeError",
    "FormatError",
    "BufferOverflowError",
    "BufferUnderrunError",
    "BufferOverflow",  # Short alias
    "BufferUnderrun",  # Short alias
    # Version
    "__version__",
]
