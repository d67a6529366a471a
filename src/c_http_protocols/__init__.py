"""
c_http_protocols - HTTP protocol capability sets

A small value type describing which HTTP protocol variants an endpoint
speaks (HTTP/1, HTTP/2 over TLS, unencrypted HTTP/2), plus helpers to
build it from configuration.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .protocols import Protocol, ProtocolSet
from .config import (
    format_protocols,
    lookup_protocol,
    parse_protocols,
    protocols_from_mapping,
)
from .exceptions import HTTPProtocolsError, ConfigurationError, UnknownProtocolError

__all__ = [
    "Protocol",
    "ProtocolSet",
    "format_protocols",
    "lookup_protocol",
    "parse_protocols",
    "protocols_from_mapping",
    "HTTPProtocolsError",
    "ConfigurationError",
    "UnknownProtocolError",
]
