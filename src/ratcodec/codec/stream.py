"""Helpers for runs of back-to-back rationals.

Host formats store coefficients one after another with no separators and know
how many to expect. These helpers walk such runs using the single-value
encoder and decoder.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..config import CodecConfig
from ..exceptions import DecodeError, EncodeError
from .bytebuf import BytesLike
from .decoder import get_frac_i64, skip_rational
from .encoder import write_frac, write_num

Rational = int | tuple[int, int]


def write_rationals(
    values: Iterable[Rational],
    dest: bytearray | None = None,
    *,
    config: CodecConfig | None = None,
) -> bytearray:
    """Append each value to ``dest``.

    Args:
        values: Integers (written with write_num) or (numerator, denominator) pairs
        dest: Buffer to append to (a new one is created if None)
        config: Codec configuration (DEFAULT_CONFIG if None)

    Returns:
        The destination buffer

    Raises:
        EncodeError: If a value is invalid
    """
    dest = bytearray() if dest is None else dest
    for value in values:
        if isinstance(value, tuple):
            if len(value) != 2:
                raise EncodeError(f"Expected (numerator, denominator), got {value!r}")
            write_frac(value[0], value[1], dest, config=config)
        else:
            write_num(value, dest)
    return dest


def iter_rationals(
    buffer: BytesLike, *, config: CodecConfig | None = None
) -> Iterator[tuple[int, int]]:
    """Yield (numerator, denominator) pairs until the buffer is exhausted."""
    rest = memoryview(buffer)
    while len(rest):
        numerator, denominator, rest = get_frac_i64(rest, config=config)
        yield numerator, denominator


def read_rationals(
    buffer: BytesLike, count: int, *, config: CodecConfig | None = None
) -> tuple[list[tuple[int, int]], memoryview]:
    """Decode exactly ``count`` rationals.

    Returns:
        Tuple (decoded pairs, remaining bytes)

    Raises:
        DecodeError: If count is negative, the buffer holds fewer values or is corrupt
    """
    if count < 0:
        raise DecodeError(f"count must be >= 0, got {count}")

    rest = memoryview(buffer)
    values: list[tuple[int, int]] = []
    for _ in range(count):
        numerator, denominator, rest = get_frac_i64(rest, config=config)
        values.append((numerator, denominator))
    return values, rest


def skip_rationals(
    buffer: BytesLike, count: int, *, config: CodecConfig | None = None
) -> memoryview:
    """Skip ``count`` rationals and return the remaining bytes.

    Raises:
        DecodeError: If count is negative, the buffer holds fewer values or is corrupt
    """
    if count < 0:
        raise DecodeError(f"count must be >= 0, got {count}")

    rest = memoryview(buffer)
    for _ in range(count):
        rest = skip_rational(rest, config=config)
    return rest
