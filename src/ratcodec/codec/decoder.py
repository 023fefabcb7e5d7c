"""Rational number decoder.

This module reads values produced by :mod:`ratcodec.codec.encoder`. Every
function takes a bytes-like object that starts at a discriminant byte and
returns a ``memoryview`` of whatever follows the consumed value, so callers can
walk a stream of back-to-back rationals without copying.
"""

from __future__ import annotations

from structlog import get_logger

from ..config import CodecConfig, resolve_config
from ..exceptions import DecodeError, FormatError
from ..models.info import RationalInfo
from .bytebuf import ByteReader, BytesLike
from .format import DEN32_MARKER, MAX_NORMALIZED, WidthClass, unpack_discriminant

log = get_logger()

# Minimal encodings of the literals produced by write_num(0) / write_num(1)
_ZERO_FAST = (0x01, 0x00)
_ONE_FAST = (0x01, 0x01)


def get_frac_i64(
    buffer: BytesLike, *, config: CodecConfig | None = None
) -> tuple[int, int, memoryview]:
    """Decode one rational from the start of ``buffer``.

    The sign flag is applied to the numerator only, so the returned
    denominator is never negative. Magnitudes are not wrapped: a sign-flagged
    8-byte magnitude of 2**63 decodes to -2**63. Magnitudes above 2**63 only
    come from write_frac_unsigned() and are rejected; read those with
    get_frac_u64().

    Args:
        buffer: Bytes starting at a discriminant byte
        config: Codec configuration (DEFAULT_CONFIG if None)

    Returns:
        Tuple (numerator, denominator, remaining bytes)

    Raises:
        FormatError: If the discriminant uses a reserved width-class
        BufferUnderrunError: If the buffer ends inside the value
        DecodeError: If a magnitude is outside the signed 64-bit range

    Examples:
        ```python
        from ratcodec import get_frac_i64

        num, den, rest = get_frac_i64(b"\\x11\\x03\\x04")
        assert (num, den) == (3, 4)
        assert len(rest) == 0
        ```
    """
    reader = ByteReader(buffer)
    numerator, denominator = _read_frac(reader, resolve_config(config))
    if abs(numerator) > MAX_NORMALIZED or denominator > MAX_NORMALIZED:
        log.debug("rational outside signed range", numerator=numerator, denominator=denominator)
        raise DecodeError(
            f"Rational {numerator}/{denominator} is outside the signed 64-bit range"
        )
    return numerator, denominator, reader.remaining()


def get_frac_u64(
    buffer: BytesLike, *, config: CodecConfig | None = None
) -> tuple[int, int, memoryview]:
    """Decode one rational written by write_frac_unsigned().

    Returns:
        Tuple (numerator, denominator, remaining bytes), both up to 2**64 - 1

    Raises:
        FormatError: If the discriminant uses a reserved width-class
        BufferUnderrunError: If the buffer ends inside the value
        DecodeError: If the sign flag is set
    """
    reader = ByteReader(buffer)
    numerator, denominator = _read_frac(reader, resolve_config(config))
    if numerator < 0:
        raise DecodeError("Sign flag set on an unsigned rational")
    return numerator, denominator, reader.remaining()


def decode_frac(buffer: BytesLike, *, config: CodecConfig | None = None) -> tuple[int, int]:
    """Decode a buffer holding exactly one rational.

    Raises:
        DecodeError: If bytes remain after the value (or any decode failure)
    """
    numerator, denominator, rest = get_frac_i64(buffer, config=config)
    if len(rest):
        raise DecodeError(f"{len(rest)} trailing bytes after rational")
    return numerator, denominator


def skip_rational(buffer: BytesLike, *, config: CodecConfig | None = None) -> memoryview:
    """Advance past one rational without decoding its magnitudes.

    With the default "byte_width" arithmetic the result starts at the next
    value. With "width_code" the raw class codes are summed instead of the
    byte widths, which reproduces the historical reader and under-advances by
    1 byte for each 4-byte operand and by 4 bytes for each 8-byte operand.

    Raises:
        FormatError: If the discriminant uses a reserved width-class
        BufferUnderrunError: If fewer bytes remain than the count to skip
    """
    config = resolve_config(config)
    reader = ByteReader(buffer)
    _, num_class, den_class = _read_discriminant(reader)

    if config.skip_arithmetic == "width_code":
        size = int(num_class) + int(den_class)
    else:
        size = num_class.byte_width + den_class.byte_width
        if den_class is WidthClass.U32 and config.den32_marker:
            size += 1

    reader.skip(size)
    return reader.remaining()


def is_zero_rat(buffer: BytesLike, *, config: CodecConfig | None = None) -> bool:
    """Return True if the rational at the start of ``buffer`` equals zero.

    The minimal encoding ``01 00`` is answered from the first two bytes; any
    other layout is decoded and compared. A stored 0/0 is not zero.

    Raises:
        FormatError: If the discriminant uses a reserved width-class
        BufferUnderrunError: If the buffer ends inside the value
    """
    if _starts_with(buffer, _ZERO_FAST):
        return True
    numerator, denominator, _ = get_frac_i64(buffer, config=config)
    return denominator != 0 and numerator == 0


def is_one_rat(buffer: BytesLike, *, config: CodecConfig | None = None) -> bool:
    """Return True if the rational at the start of ``buffer`` equals one.

    The minimal encoding ``01 01`` is answered from the first two bytes; any
    other layout is decoded and compared.

    Raises:
        FormatError: If the discriminant uses a reserved width-class
        BufferUnderrunError: If the buffer ends inside the value
    """
    if _starts_with(buffer, _ONE_FAST):
        return True
    numerator, denominator, _ = get_frac_i64(buffer, config=config)
    return denominator != 0 and numerator == denominator


def _starts_with(buffer: BytesLike, prefix: tuple[int, int]) -> bool:
    view = memoryview(buffer)
    return len(view) >= 2 and (view[0], view[1]) == prefix


def _read_discriminant(reader: ByteReader) -> tuple[bool, WidthClass, WidthClass]:
    disc = reader.read_byte()
    try:
        return unpack_discriminant(disc)
    except FormatError:
        log.debug("rejected discriminant", discriminant=f"{disc:#04x}")
        raise


def _read_frac(reader: ByteReader, config: CodecConfig) -> tuple[int, int]:
    negative, num_class, den_class = _read_discriminant(reader)

    numerator = reader.read_uint_le(num_class.byte_width)

    if den_class is WidthClass.ABSENT:
        denominator = 1
    else:
        if den_class is WidthClass.U32 and config.den32_marker:
            marker = reader.read_byte()
            if marker != DEN32_MARKER:
                log.debug("bad denominator marker", marker=marker)
                raise FormatError(
                    f"Expected denominator marker {DEN32_MARKER:#04x}, got {marker:#04x}"
                )
        denominator = reader.read_uint_le(den_class.byte_width)

    if negative:
        numerator = -numerator

    return numerator, denominator


def inspect_rational(buffer: BytesLike, *, config: CodecConfig | None = None) -> RationalInfo:
    """Decode one rational and describe its layout.

    Raises:
        FormatError: If the discriminant uses a reserved width-class
        BufferUnderrunError: If the buffer ends inside the value
    """
    reader = ByteReader(buffer)
    numerator, denominator = _read_frac(reader, resolve_config(config))
    raw = reader.consumed()
    negative, num_class, den_class = unpack_discriminant(raw[0])

    return RationalInfo(
        discriminant=raw[0],
        negative=negative,
        numerator_class=num_class,
        denominator_class=den_class,
        numerator=numerator,
        denominator=denominator,
        size=len(raw),
        hex=raw.hex(),
    )
