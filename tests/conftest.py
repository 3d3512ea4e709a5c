# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for codec and cursor tests."""

import pytest

from bigleb128.cursor import BytePipe
from bigleb128.serial_cursor import SerialCursor

# Short timeout so truncation tests fail fast on the loopback
SERIAL_TIMEOUT = 0.05


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--serial-url",
        action="store",
        default="loop://",
        help="pyserial URL for serial cursor tests; must echo what is written",
    )


@pytest.fixture
def pipe():
    """Empty in-memory cursor."""
    return BytePipe()


@pytest.fixture
def serial_cursor(request):
    """Serial cursor over the loopback (or --serial-url) port."""
    url = request.config.getoption("--serial-url")
    with SerialCursor(url, timeout=SERIAL_TIMEOUT) as cursor:
        yield cursor
