#!/usr/bin/env python3
"""Basic usage example for ratcodec.

This example demonstrates:
1. Encoding the coefficients of a polynomial back to back
2. Skipping to a coefficient without decoding the ones before it
3. Testing coefficients for zero and one
4. Writing into a fixed-size buffer
"""

from __future__ import annotations

from ratcodec import (
    BufferOverflowError,
    encoded_size,
    get_frac_i64,
    is_one_rat,
    is_zero_rat,
    iter_rationals,
    skip_rationals,
    write_frac_fixed,
    write_rationals,
)

# 1 + 3/4 x - 300 x^2 + 0 x^3 + 1/65535 x^4
COEFFICIENTS = [1, (3, 4), -300, 0, (1, 65535)]


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ratcodec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding coefficients...")
    data = write_rationals(COEFFICIENTS)
    print(f"   {len(COEFFICIENTS)} coefficients -> {len(data)} bytes")
    print(f"   Bytes: {data.hex(' ')}")
    print()

    print("2. Decoding all coefficients...")
    for power, (num, den) in enumerate(iter_rationals(data)):
        print(f"   x^{power}: {num}/{den}")
    print()

    print("3. Jumping to the x^2 coefficient...")
    rest = skip_rationals(data, 2)
    num, den, _ = get_frac_i64(rest)
    print(f"   x^2: {num}/{den}")
    print()

    print("4. Zero/one checks...")
    rest = memoryview(data)
    for power in range(len(COEFFICIENTS)):
        print(f"   x^{power}: zero={is_zero_rat(rest)} one={is_one_rat(rest)}")
        rest = skip_rationals(rest, 1)
    print()

    print("5. Fixed-size buffer...")
    buf = bytearray(encoded_size(1, 65535))
    written = write_frac_fixed(1, 65535, buf)
    print(f"   Wrote {written} bytes: {buf.hex(' ')}")
    try:
        write_frac_fixed(1, 65535, bytearray(2))
    except BufferOverflowError as e:
        print(f"   Too small: {e}")
    print()


if __name__ == "__main__":
    main()
