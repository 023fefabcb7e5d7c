"""Unit tests for the zero/one checks.

The checks answer the minimal encodings (01 00 and 01 01) from the first two
bytes and decode anything else, so they agree with a full decode for every
input.
"""

from __future__ import annotations

import pytest

from ratcodec import (
    BufferUnderrunError,
    FormatError,
    is_one_rat,
    is_zero_rat,
    write_frac,
    write_num,
)


class TestIsZero:
    """Test is_zero_rat."""

    def test_minimal_zero(self) -> None:
        """Test write_num(0) is zero."""
        assert bytes(write_num(0)) == b"\x01\x00"
        assert is_zero_rat(write_num(0)) is True

    def test_zero_over_denominator(self) -> None:
        """Test 0/d is zero regardless of d and sign."""
        assert is_zero_rat(write_frac(0, 5)) is True
        assert is_zero_rat(write_frac(0, -5)) is True
        assert is_zero_rat(write_frac(0, 65535)) is True

    def test_wide_zero(self) -> None:
        """Test zero stored in a wider class."""
        assert is_zero_rat(b"\x04" + b"\x00" * 8) is True

    @pytest.mark.parametrize("value", [1, -1, 254, 255, 2**40])
    def test_non_zero(self, value: int) -> None:
        """Test non-zero integers."""
        assert is_zero_rat(write_num(value)) is False

    def test_fixed_offset_layout_is_not_zero(self) -> None:
        """Test 1/0 is not mistaken for zero by its byte pattern."""
        assert is_zero_rat(b"\x11\x01\x00") is False

    def test_zero_over_zero_is_not_zero(self) -> None:
        """Test a stored 0/0 is not reported as zero."""
        assert is_zero_rat(b"\x11\x00\x00") is False
        assert is_one_rat(b"\x11\x00\x00") is False

    def test_trailing_data_ignored(self) -> None:
        """Test only the first value is inspected."""
        assert is_zero_rat(write_num(0) + write_num(9)) is True
        assert is_zero_rat(write_num(9) + write_num(0)) is False


class TestIsOne:
    """Test is_one_rat."""

    def test_minimal_one(self) -> None:
        """Test write_num(1) is one."""
        assert bytes(write_num(1)) == b"\x01\x01"
        assert is_one_rat(write_num(1)) is True

    def test_equal_operands(self) -> None:
        """Test n/n is one."""
        assert is_one_rat(write_frac(3, 3)) is True
        assert is_one_rat(write_frac(-7, -7)) is True
        assert is_one_rat(write_frac(65535, 65535)) is True

    def test_explicit_denominator_one(self) -> None:
        """Test non-minimal encodings of one."""
        assert is_one_rat(b"\x11\x01\x01") is True
        assert is_one_rat(b"\x02\x01\x00") is True

    @pytest.mark.parametrize(
        ("numerator", "denominator"),
        [(-1, 1), (1, -1), (0, 1), (2, 1), (1, 2), (3, 4), (7, -7)],
    )
    def test_not_one(self, numerator: int, denominator: int) -> None:
        """Test values other than one."""
        assert is_one_rat(write_frac(numerator, denominator)) is False

    def test_zero_is_not_one(self) -> None:
        """Test zero and one are exclusive."""
        assert is_one_rat(write_num(0)) is False
        assert is_zero_rat(write_num(1)) is False


class TestErrors:
    """Test error handling."""

    def test_truncated(self) -> None:
        """Test short buffers raise BufferUnderrunError."""
        with pytest.raises(BufferUnderrunError):
            is_zero_rat(b"")

        with pytest.raises(BufferUnderrunError):
            is_one_rat(b"\x01")

    def test_reserved_class(self) -> None:
        """Test reserved classes raise FormatError."""
        with pytest.raises(FormatError):
            is_zero_rat(b"\x00\x00")

        with pytest.raises(FormatError):
            is_one_rat(b"\x05\x01\x01")
