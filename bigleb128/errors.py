# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the LEB128 codecs and cursors."""


class LEB128Error(ValueError):
    """Base exception for LEB128 encode/decode errors."""
    pass


class InvalidInputError(LEB128Error):
    """Value cannot be encoded (negative unsigned, non-finite, ...)."""
    pass


class TruncatedInputError(LEB128Error):
    """Input ended before a terminating byte was found."""
    pass
