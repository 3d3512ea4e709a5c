# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for shared argument checks."""

from fractions import Fraction

import pytest

from bigleb128.checks import check_offset, to_integer
from bigleb128.errors import InvalidInputError


class TestToInteger:
    """Tests for to_integer function."""

    def test_truncates_toward_zero(self):
        """Fractions lose their fractional part in both directions."""
        assert to_integer(2.9) == 2
        assert to_integer(-2.9) == -2
        assert to_integer(Fraction(-7, 2)) == -3

    def test_large_int_unchanged(self):
        """Ints pass through at full precision."""
        assert to_integer(2 ** 200 + 1) == 2 ** 200 + 1

    def test_invalid_raises(self):
        """Non-finite and non-numeric values raise InvalidInputError."""
        for value in (float("inf"), float("nan"), b"\x01"):
            with pytest.raises(InvalidInputError, match="as LEB128"):
                to_integer(value)


class TestCheckOffset:
    """Tests for check_offset function."""

    def test_accepts_non_negative(self):
        """Zero and positive offsets are fine."""
        check_offset(0)
        check_offset(10)

    def test_negative_raises(self):
        """Negative offsets raise ValueError."""
        with pytest.raises(ValueError, match="got -1"):
            check_offset(-1)
