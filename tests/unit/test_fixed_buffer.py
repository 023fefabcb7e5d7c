"""Unit tests for writing into fixed-size buffers."""

from __future__ import annotations

import pytest

from ratcodec import (
    BufferOverflow,
    BufferOverflowError,
    CodecConfig,
    EncodeError,
    encoded_size,
    get_frac_i64,
    get_frac_u64,
    write_frac,
    write_frac_fixed,
    write_frac_unsigned,
    write_frac_unsigned_fixed,
)


class TestWriteFracFixed:
    """Test capacity-checked writes."""

    def test_exact_fit(self) -> None:
        """Test a buffer of exactly the encoded size."""
        buf = bytearray(3)
        written = write_frac_fixed(3, 4, buf)

        assert written == 3
        assert bytes(buf) == b"\x11\x03\x04"

    def test_sign(self) -> None:
        """Test the sign bit matches the growable path."""
        buf = bytearray(3)
        write_frac_fixed(3, -4, buf)
        assert bytes(buf) == bytes(write_frac(3, -4))

    def test_offset(self) -> None:
        """Test writing after existing content."""
        buf = bytearray(b"\xaa\xbb\x00\x00\x00\xcc")
        written = write_frac_fixed(3, 4, buf, offset=2)

        assert written == 3
        assert bytes(buf) == b"\xaa\xbb\x11\x03\x04\xcc"

    def test_sequential_writes(self) -> None:
        """Test packing several values using the returned size."""
        buf = bytearray(encoded_size(-5) + encoded_size(300, 7))
        offset = write_frac_fixed(-5, 1, buf)
        offset += write_frac_fixed(300, 7, buf, offset)

        assert offset == len(buf)
        num, den, rest = get_frac_i64(buf)
        assert (num, den) == (-5, 1)
        assert get_frac_i64(rest)[:2] == (300, 7)

    def test_memoryview_destination(self) -> None:
        """Test a writable memoryview is accepted."""
        backing = bytearray(8)
        view = memoryview(backing)[4:]
        write_frac_fixed(-5, 1, view)
        assert bytes(backing) == b"\x00" * 4 + b"\x81\x05\x00\x00"

    def test_den32_marker(self, legacy_config: CodecConfig) -> None:
        """Test the marker is included when configured."""
        buf = bytearray(7)
        assert write_frac_fixed(1, 65535, buf, config=legacy_config) == 7
        assert buf.hex() == "310103ffff0000"


class TestOverflow:
    """Test destination capacity errors."""

    def test_too_small(self) -> None:
        """Test nothing is written when the value does not fit."""
        buf = bytearray(2)
        with pytest.raises(BufferOverflowError) as exc_info:
            write_frac_fixed(3, 4, buf)

        assert exc_info.value.needed == 3
        assert exc_info.value.available == 2
        assert bytes(buf) == b"\x00\x00"

    def test_offset_near_end(self) -> None:
        """Test capacity is measured from the offset."""
        buf = bytearray(5)
        with pytest.raises(BufferOverflowError):
            write_frac_fixed(3, 4, buf, offset=3)
        assert bytes(buf) == bytes(5)

    def test_offset_past_end(self) -> None:
        """Test an offset beyond the buffer has no capacity."""
        with pytest.raises(BufferOverflowError) as exc_info:
            write_frac_fixed(1, 1, bytearray(2), offset=4)
        assert exc_info.value.available == 0

    def test_is_encode_error(self) -> None:
        """Test overflow can be caught as EncodeError and via its alias."""
        assert BufferOverflow is BufferOverflowError
        with pytest.raises(EncodeError):
            write_frac_fixed(1, 2**40, bytearray(4))

    def test_negative_offset(self) -> None:
        """Test a negative offset is rejected."""
        with pytest.raises(EncodeError, match="offset"):
            write_frac_fixed(1, 1, bytearray(4), offset=-1)


class TestWriteFracUnsignedFixed:
    """Test capacity-checked writes of unsigned magnitudes."""

    def test_matches_growable_path(self) -> None:
        """Test the bytes equal write_frac_unsigned()."""
        buf = bytearray(4)
        assert write_frac_unsigned_fixed(300, 7, buf) == 4
        assert bytes(buf) == bytes(write_frac_unsigned(300, 7))

    def test_largest_magnitude(self) -> None:
        """Test 2**64 - 1 fills the 8-byte class."""
        buf = bytearray(9)
        assert write_frac_unsigned_fixed(2**64 - 1, 1, buf) == 9
        assert buf.hex() == "04" + "ff" * 8
        assert get_frac_u64(buf)[:2] == (2**64 - 1, 1)

    def test_offset(self) -> None:
        """Test writing after existing content."""
        buf = bytearray(b"\xaa\x00\x00\x00\xcc")
        assert write_frac_unsigned_fixed(3, 4, buf, offset=1) == 3
        assert bytes(buf) == b"\xaa\x11\x03\x04\xcc"

    def test_overflow_leaves_destination_untouched(self) -> None:
        """Test nothing is written when the value does not fit."""
        buf = bytearray(b"\xaa" * 8)
        with pytest.raises(BufferOverflowError) as exc_info:
            write_frac_unsigned_fixed(2**64 - 1, 1, buf)

        assert exc_info.value.needed == 9
        assert exc_info.value.available == 8
        assert bytes(buf) == b"\xaa" * 8

    def test_den32_marker(self, legacy_config: CodecConfig) -> None:
        """Test the marker is included when configured."""
        buf = bytearray(7)
        assert write_frac_unsigned_fixed(1, 65535, buf, config=legacy_config) == 7
        assert buf.hex() == "310103ffff0000"

    def test_invalid_operands(self) -> None:
        """Test operand errors are raised before anything is written."""
        buf = bytearray(4)
        with pytest.raises(EncodeError):
            write_frac_unsigned_fixed(-1, 1, buf)
        with pytest.raises(EncodeError):
            write_frac_unsigned_fixed(1, 0, buf)
        assert bytes(buf) == bytes(4)

    def test_negative_offset(self) -> None:
        """Test a negative offset is rejected."""
        with pytest.raises(EncodeError, match="offset"):
            write_frac_unsigned_fixed(1, 1, bytearray(4), offset=-1)
