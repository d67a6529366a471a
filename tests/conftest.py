"""
Pytest configuration for c_http_protocols tests.

This file contains shared fixtures for all tests in the project.
"""

import itertools
from typing import List

import pytest

from c_http_protocols import ProtocolSet


@pytest.fixture
def empty_set() -> ProtocolSet:
    """The zero-value protocol set."""
    return ProtocolSet()


@pytest.fixture
def full_set() -> ProtocolSet:
    """A set with every protocol enabled."""
    return ProtocolSet(http1=True, http2=True, unencrypted_http2=True)


@pytest.fixture
def all_combinations() -> List[ProtocolSet]:
    """All eight flag combinations, in a fixed order."""
    return [
        ProtocolSet(http1=h1, http2=h2, unencrypted_http2=h2c)
        for h1, h2, h2c in itertools.product((False, True), repeat=3)
    ]


@pytest.fixture
def server_settings():
    """Flat settings mapping as a config loader would produce it."""
    return {
        "server.http1": "yes",
        "server.http2": True,
        "server.unencrypted_http2": "off",
        "server.port": 8443,
    }
