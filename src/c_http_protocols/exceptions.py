"""
Custom exceptions for c_http_protocols.

ProtocolSet itself never raises. These exceptions are used by the
configuration helpers when a setting cannot be interpreted.
"""

from typing import Optional


class HTTPProtocolsError(Exception):
    """Base exception for all c_http_protocols errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(HTTPProtocolsError):
    """Raised when a protocol setting cannot be interpreted."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Configuration error: {message}", cause)


class UnknownProtocolError(ConfigurationError):
    """Raised when a configured protocol name is not recognised."""

    def __init__(self, name: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"unknown protocol {name!r}", cause)
        self.name = name
