"""Unit tests for byte buffer utilities."""

from __future__ import annotations

import pytest

from ratcodec.codec.bytebuf import ByteReader, ByteWriter
from ratcodec.exceptions import BufferUnderrunError


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_appends_to_existing_buffer(self) -> None:
        """Test writing after existing content."""
        buf = bytearray(b"\xaa")
        writer = ByteWriter(buf)
        writer.write_byte(0x02)
        writer.write_uint_le(300, 2)

        assert writer.buffer is buf
        assert bytes(buf) == b"\xaa\x02\x2c\x01"
        assert writer.position() == 4

    def test_new_buffer(self) -> None:
        """Test a writer without a destination creates one."""
        writer = ByteWriter()
        writer.write_uint_le(1, 4)
        assert bytes(writer.buffer) == b"\x01\x00\x00\x00"

    def test_write_bounds(self) -> None:
        """Test byte and uint bounds checking."""
        writer = ByteWriter()

        with pytest.raises(ValueError, match="0-255"):
            writer.write_byte(256)

        with pytest.raises(ValueError, match="negative"):
            writer.write_uint_le(-1, 2)

        with pytest.raises(ValueError, match="more than 2 bytes"):
            writer.write_uint_le(65536, 2)

    def test_or_byte(self) -> None:
        """Test patching an already-written byte."""
        writer = ByteWriter()
        writer.write_byte(0x01)
        writer.or_byte(0, 0x80)
        assert bytes(writer.buffer) == b"\x81"


class TestByteReader:
    """Test ByteReader functionality."""

    def test_read_values(self) -> None:
        """Test reading bytes and little-endian integers."""
        reader = ByteReader(b"\x02\x2c\x01\xff")
        assert reader.read_byte() == 2
        assert reader.read_uint_le(2) == 300
        assert reader.bytes_remaining() == 1
        assert reader.position() == 3
        assert bytes(reader.remaining()) == b"\xff"
        assert bytes(reader.consumed()) == b"\x02\x2c\x01"

    def test_peek_does_not_consume(self) -> None:
        """Test peek_byte leaves the position unchanged."""
        reader = ByteReader(b"\x01\x02")
        assert reader.peek_byte() == 1
        assert reader.peek_byte(1) == 2
        assert reader.position() == 0

    def test_underrun(self) -> None:
        """Test reading past the end raises BufferUnderrunError."""
        reader = ByteReader(b"\x01")

        with pytest.raises(BufferUnderrunError) as exc_info:
            reader.read_uint_le(2)
        assert exc_info.value.needed == 2
        assert exc_info.value.available == 1

        reader.read_byte()
        with pytest.raises(BufferUnderrunError):
            reader.read_byte()

        with pytest.raises(BufferUnderrunError):
            reader.skip(1)

    def test_accepts_bytes_like(self) -> None:
        """Test bytes, bytearray and memoryview inputs."""
        for data in (b"\x05", bytearray(b"\x05"), memoryview(b"\x05")):
            assert ByteReader(data).read_byte() == 5

    def test_does_not_copy(self) -> None:
        """Test the remainder is a view into the original buffer."""
        buf = bytearray(b"\x01\x02\x03")
        reader = ByteReader(buf)
        reader.read_byte()
        rest = reader.remaining()
        buf[2] = 0x09
        assert bytes(rest) == b"\x02\x09"
