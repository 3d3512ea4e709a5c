# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Argument checks shared by the LEB128 codecs."""

import math

from .errors import InvalidInputError


def to_integer(value) -> int:
    """
    Truncate value toward zero to an int.

    Raises:
        InvalidInputError: If value is not a finite number
    """
    try:
        return math.trunc(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidInputError(f"Cannot encode {value!r} as LEB128") from e


def check_offset(offset: int) -> None:
    """Reject offsets that would index from the end of the data."""
    if offset < 0:
        raise ValueError(f"Offset must be non-negative, got {offset}")
