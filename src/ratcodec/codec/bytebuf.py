"""Byte-level writing and reading utilities.

This module provides the little-endian primitives the rational codec is built
on. The writer appends to a caller-owned ``bytearray``; the reader walks a
``memoryview`` without copying.
"""

from __future__ import annotations

from ..exceptions import BufferUnderrunError

BytesLike = bytes | bytearray | memoryview


class ByteWriter:
    """Appends values to a growable byte buffer.

    Example:
        >>> buf = bytearray()
        >>> writer = ByteWriter(buf)
        >>> writer.write_byte(0x02)
        >>> writer.write_uint_le(300, 2)
        >>> bytes(buf)
        b'\\x02,\\x01'
    """

    def __init__(self, dest: bytearray | None = None) -> None:
        """Initialize a writer appending to ``dest`` (a new buffer if None)."""
        self.buffer = bytearray() if dest is None else dest

    def position(self) -> int:
        """Return the index the next byte will be written at."""
        return len(self.buffer)

    def write_byte(self, value: int) -> None:
        """Write a single unsigned byte.

        Raises:
            ValueError: If value is not in 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value must be 0-255, got {value}")
        self.buffer.append(value)

    def write_uint_le(self, value: int, num_bytes: int) -> None:
        """Write an unsigned integer as ``num_bytes`` little-endian bytes.

        Raises:
            ValueError: If value is negative or doesn't fit in num_bytes
        """
        if value < 0:
            raise ValueError(f"write_uint_le requires non-negative value, got {value}")
        try:
            self.buffer.extend(value.to_bytes(num_bytes, "little"))
        except OverflowError as err:
            raise ValueError(f"Value {value} requires more than {num_bytes} bytes") from err

    def or_byte(self, index: int, mask: int) -> None:
        """OR ``mask`` into an already-written byte."""
        self.buffer[index] |= mask


class ByteReader:
    """Reads little-endian values from a byte buffer.

    Example:
        >>> reader = ByteReader(b"\\x02\\x2c\\x01")
        >>> reader.read_byte()
        2
        >>> reader.read_uint_le(2)
        300
    """

    def __init__(self, data: BytesLike) -> None:
        """Initialize a reader over ``data``.

        Args:
            data: Any bytes-like object; it is viewed, not copied
        """
        view = memoryview(data)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self._view = view
        self._position = 0

    def _require(self, num_bytes: int) -> None:
        available = len(self._view) - self._position
        if num_bytes > available:
            raise BufferUnderrunError(num_bytes, available)

    def read_byte(self) -> int:
        """Read one unsigned byte.

        Raises:
            BufferUnderrunError: If the buffer is exhausted
        """
        self._require(1)
        value = self._view[self._position]
        self._position += 1
        return value

    def peek_byte(self, offset: int = 0) -> int:
        """Return the byte ``offset`` positions ahead without consuming it.

        Raises:
            BufferUnderrunError: If that byte does not exist
        """
        self._require(offset + 1)
        return self._view[self._position + offset]

    def read_uint_le(self, num_bytes: int) -> int:
        """Read an unsigned little-endian integer of ``num_bytes`` bytes.

        Raises:
            BufferUnderrunError: If not enough bytes are available
        """
        self._require(num_bytes)
        start = self._position
        self._position += num_bytes
        return int.from_bytes(self._view[start : self._position], "little")

    def skip(self, num_bytes: int) -> None:
        """Advance past ``num_bytes`` bytes.

        Raises:
            BufferUnderrunError: If not enough bytes are available
        """
        self._require(num_bytes)
        self._position += num_bytes

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._view) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position

    def remaining(self) -> memoryview:
        """Return a view of the unread bytes."""
        return self._view[self._position :]

    def consumed(self, start: int = 0) -> memoryview:
        """Return a view of the bytes read since ``start``."""
        return self._view[start : self._position]
