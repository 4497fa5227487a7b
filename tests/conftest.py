# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for loopback integration tests."""

import pytest

# pyserial's built-in loopback; pass --port to use a jumpered TX/RX device instead
DEFAULT_LOOPBACK_URL = "loop://"
LOOPBACK_TIMEOUT = 0.2


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--port",
        action="store",
        default=DEFAULT_LOOPBACK_URL,
        help="Serial port or pyserial URL with TX looped back to RX (default: loop://)",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: tests that exchange bytes over a serial loopback"
    )


@pytest.fixture(scope="session")
def loopback_url(request):
    """Get the loopback port from command line."""
    return request.config.getoption("--port")


@pytest.fixture
def loopback(loopback_url):
    """
    Open a serial loopback.

    Function-scoped so each test starts with empty buffers.
    """
    from govarint.transport import SerialPort

    port = SerialPort(loopback_url, timeout=LOOPBACK_TIMEOUT)
    yield port
    port.close()
