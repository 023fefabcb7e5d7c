"""Rational number encoder.

This module turns integers and numerator/denominator pairs into the compact
self-describing format described in :mod:`ratcodec.codec.format`. Values are
either appended to a growable ``bytearray`` or written into a fixed-size
buffer whose capacity is checked first.
"""

from __future__ import annotations

from ..config import CodecConfig, resolve_config
from ..exceptions import BufferOverflowError, EncodeError
from .bytebuf import ByteWriter
from .format import (
    DEN32_MARKER,
    MAX_I64,
    MAX_MAGNITUDE,
    MIN_I64,
    SIGN_BIT,
    WidthClass,
    pack_discriminant,
)


def write_num(value: int, dest: bytearray | None = None) -> bytearray:
    """Encode a signed 64-bit integer with an implicit denominator of 1.

    The magnitude is written first and the sign bit is then set in the
    already-written discriminant.

    Args:
        value: Signed integer in the 64-bit range
        dest: Buffer to append to (a new one is created if None)

    Returns:
        The destination buffer

    Raises:
        EncodeError: If value is not an integer or is out of range

    Examples:
        ```python
        from ratcodec import write_num

        write_num(-5)   # bytearray(b'\\x81\\x05')
        write_num(300)  # bytearray(b'\\x02\\x2c\\x01')
        ```
    """
    _check_signed("value", value)

    writer = ByteWriter(dest)
    start = writer.position()
    _write_magnitude(writer, abs(value))

    if value < 0:
        writer.or_byte(start, SIGN_BIT)

    return writer.buffer


def write_frac(
    numerator: int,
    denominator: int,
    dest: bytearray | None = None,
    *,
    config: CodecConfig | None = None,
) -> bytearray:
    """Encode a signed 64-bit fraction.

    The sign bit is the XOR of the numerator and denominator signs; the
    decoder folds it onto the numerator. A zero numerator counts as
    non-negative.

    Args:
        numerator: Signed numerator in the 64-bit range
        denominator: Signed non-zero denominator in the 64-bit range
        dest: Buffer to append to (a new one is created if None)
        config: Codec configuration (DEFAULT_CONFIG if None)

    Returns:
        The destination buffer

    Raises:
        EncodeError: If an operand is invalid or the denominator is zero
    """
    _check_signed("numerator", numerator)
    _check_signed("denominator", denominator)

    writer = ByteWriter(dest)
    start = writer.position()
    write_frac_unsigned(abs(numerator), abs(denominator), writer.buffer, config=config)

    if (numerator < 0) != (denominator < 0):
        writer.or_byte(start, SIGN_BIT)

    return writer.buffer


def write_frac_unsigned(
    numerator: int,
    denominator: int,
    dest: bytearray | None = None,
    *,
    config: CodecConfig | None = None,
) -> bytearray:
    """Encode a fraction of two unsigned magnitudes (up to 2**64 - 1).

    A denominator of exactly 1 is omitted and leaves the discriminant's
    denominator field at 0.

    Raises:
        EncodeError: If an operand is invalid or the denominator is zero
    """
    _check_unsigned("numerator", numerator)
    _check_unsigned("denominator", denominator)
    if denominator == 0:
        raise EncodeError("denominator must be non-zero")

    config = resolve_config(config)
    writer = ByteWriter(dest)
    start = writer.position()

    _write_magnitude(writer, numerator)

    if denominator != 1:
        den_class = WidthClass.for_magnitude(denominator)
        writer.or_byte(start, pack_discriminant(WidthClass.ABSENT, den_class))
        if den_class is WidthClass.U32 and config.den32_marker:
            writer.write_byte(DEN32_MARKER)
        writer.write_uint_le(denominator, den_class.byte_width)

    return writer.buffer


def write_frac_fixed(
    numerator: int,
    denominator: int,
    dest: bytearray | memoryview,
    offset: int = 0,
    *,
    config: CodecConfig | None = None,
) -> int:
    """Encode a signed fraction into a preallocated buffer.

    The value is written at ``dest[offset:]``. Nothing is written unless the
    whole value fits.

    Args:
        numerator: Signed numerator in the 64-bit range
        denominator: Signed non-zero denominator in the 64-bit range
        dest: Writable buffer with a fixed capacity
        offset: Index of the first byte to write
        config: Codec configuration (DEFAULT_CONFIG if None)

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If an operand is invalid or offset is negative
        BufferOverflowError: If the value does not fit after ``offset``
    """
    _check_offset(offset)
    return _copy_fixed(write_frac(numerator, denominator, config=config), dest, offset)


def write_frac_unsigned_fixed(
    numerator: int,
    denominator: int,
    dest: bytearray | memoryview,
    offset: int = 0,
    *,
    config: CodecConfig | None = None,
) -> int:
    """Encode a fraction of two unsigned magnitudes into a preallocated buffer.

    Same layout as write_frac_unsigned(); same capacity rules as
    write_frac_fixed().

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If an operand is invalid or offset is negative
        BufferOverflowError: If the value does not fit after ``offset``
    """
    _check_offset(offset)
    return _copy_fixed(
        write_frac_unsigned(numerator, denominator, config=config), dest, offset
    )


def encode_num(value: int) -> bytes:
    """Encode an integer and return immutable bytes."""
    return bytes(write_num(value))


def encode_frac(numerator: int, denominator: int, *, config: CodecConfig | None = None) -> bytes:
    """Encode a fraction and return immutable bytes."""
    return bytes(write_frac(numerator, denominator, config=config))


def _write_magnitude(writer: ByteWriter, magnitude: int) -> None:
    """Write a numerator-only discriminant followed by the magnitude bytes."""
    num_class = WidthClass.for_magnitude(magnitude)
    writer.write_byte(pack_discriminant(num_class))
    writer.write_uint_le(magnitude, num_class.byte_width)


def _check_signed(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"{name} must be an int, got {type(value).__name__}")
    if value < MIN_I64 or value > MAX_I64:
        raise EncodeError(f"{name} {value} out of signed 64-bit range [{MIN_I64}, {MAX_I64}]")


def _check_unsigned(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > MAX_MAGNITUDE:
        raise EncodeError(f"{name} {value} out of unsigned 64-bit range [0, {MAX_MAGNITUDE}]")


def _check_offset(offset: int) -> None:
    if offset < 0:
        raise EncodeError(f"offset must be >= 0, got {offset}")


def _copy_fixed(encoded: bytearray, dest: bytearray | memoryview, offset: int) -> int:
    """Copy an encoded value into ``dest`` only if all of it fits."""
    available = max(len(dest) - offset, 0)
    if len(encoded) > available:
        raise BufferOverflowError(len(encoded), available)

    dest[offset : offset + len(encoded)] = encoded
    return len(encoded)
