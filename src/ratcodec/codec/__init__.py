"""Compact binary codec for rational numbers.

This module provides the encoder, the decoder and the shared discriminant
format for self-describing numerator/denominator pairs.
"""

from __future__ import annotations

from .decoder import (
    decode_frac,
    get_frac_i64,
    get_frac_u64,
    inspect_rational,
    is_one_rat,
    is_zero_rat,
    skip_rational,
)
from .encoder import (
    encode_frac,
    encode_num,
    write_frac,
    write_frac_fixed,
    write_frac_unsigned,
    write_frac_unsigned_fixed,
    write_num,
)
from .format import WidthClass
from .stream import iter_rationals, read_rationals, skip_rationals, write_rationals

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
    # Format
    "WidthClass",
]
