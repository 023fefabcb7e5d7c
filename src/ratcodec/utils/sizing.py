"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of rationals
without actually encoding them.
"""

from __future__ import annotations

from ..codec.format import WidthClass
from ..config import CodecConfig, resolve_config


def width_class_for(magnitude: int) -> WidthClass:
    """Return the width-class the encoder uses for ``magnitude``.

    Example:
        >>> width_class_for(254)
        <WidthClass.U8: 1>
        >>> width_class_for(255)
        <WidthClass.U16: 2>
    """
    return WidthClass.for_magnitude(magnitude)


def encoded_size(
    numerator: int, denominator: int = 1, *, config: CodecConfig | None = None
) -> int:
    """Calculate the encoded size of a rational in bytes.

    Only magnitudes matter, so signs are ignored. A denominator of 1 (or -1)
    is omitted exactly as the encoder omits it.

    Args:
        numerator: Numerator (any sign)
        denominator: Denominator (any sign, default 1)
        config: Codec configuration (DEFAULT_CONFIG if None)

    Returns:
        Size in bytes, discriminant included

    Raises:
        ValueError: If a magnitude needs more than 64 bits

    Example:
        >>> encoded_size(3, 4)
        3
        >>> encoded_size(300)
        3
    """
    config = resolve_config(config)

    size = 1 + WidthClass.for_magnitude(abs(numerator)).byte_width

    den = abs(denominator)
    if den != 1:
        den_class = WidthClass.for_magnitude(den)
        size += den_class.byte_width
        if den_class is WidthClass.U32 and config.den32_marker:
            size += 1

    return size
