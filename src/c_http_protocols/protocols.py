"""
HTTP protocol sets for c_http_protocols.

This module defines ProtocolSet, the small value type describing which
HTTP protocol variants an endpoint is willing to speak. Negotiation code
reads it; configuration code writes it. It never raises.
"""

import enum
from typing import Any, Tuple

from typing_extensions import Self


class Protocol(enum.IntFlag):
    """Individual protocol bits held by a ProtocolSet."""
    HTTP1 = 1 << 0              # HTTP/1.0 and HTTP/1.1, plaintext or TLS
    HTTP2 = 1 << 1              # HTTP/2 over TLS
    UNENCRYPTED_HTTP2 = 1 << 2  # HTTP/2 over plaintext (h2c)


# Declaration order; str() always renders in this order.
_RENDER_ORDER: Tuple[Tuple[Protocol, str], ...] = (
    (Protocol.HTTP1, "HTTP1"),
    (Protocol.HTTP2, "HTTP2"),
    (Protocol.UNENCRYPTED_HTTP2, "UnencryptedHTTP2"),
)

_ALL_BITS = int(Protocol.HTTP1 | Protocol.HTTP2 | Protocol.UNENCRYPTED_HTTP2)


class ProtocolSet:
    """
    Set of HTTP protocols enabled for an endpoint.

    The three flags are independent and every combination is valid,
    including the empty set, which is what ``ProtocolSet()`` returns.
    Sets compare by value. They are mutable through the ``set_*``
    methods, so they are unhashable; use ``copy()`` or the ``with_*``
    methods to hand out an independent instance.
    """

    __slots__ = ("_bits",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        http1: bool = False,
        http2: bool = False,
        unencrypted_http2: bool = False,
    ) -> None:
        self._bits = 0
        self.set(Protocol.HTTP1, http1)
        self.set(Protocol.HTTP2, http2)
        self.set(Protocol.UNENCRYPTED_HTTP2, unencrypted_http2)

    def has(self, protocol: Protocol) -> bool:
        """Report whether every bit of ``protocol`` is in the set."""
        bits = int(protocol) & _ALL_BITS
        return bits != 0 and self._bits & bits == bits

    def set(self, protocol: Protocol, enabled: bool) -> None:
        """Add or remove ``protocol`` according to ``enabled``."""
        bits = int(protocol) & _ALL_BITS
        if enabled:
            self._bits |= bits
        else:
            self._bits &= ~bits

    def is_http1(self) -> bool:
        """Report whether the set includes HTTP/1."""
        return self.has(Protocol.HTTP1)

    def set_http1(self, enabled: bool) -> None:
        """Add or remove HTTP/1."""
        self.set(Protocol.HTTP1, enabled)

    def is_http2(self) -> bool:
        """Report whether the set includes HTTP/2 over TLS."""
        return self.has(Protocol.HTTP2)

    def set_http2(self, enabled: bool) -> None:
        """Add or remove HTTP/2 over TLS."""
        self.set(Protocol.HTTP2, enabled)

    def is_unencrypted_http2(self) -> bool:
        """Report whether the set includes unencrypted HTTP/2."""
        return self.has(Protocol.UNENCRYPTED_HTTP2)

    def set_unencrypted_http2(self, enabled: bool) -> None:
        """Add or remove unencrypted HTTP/2."""
        self.set(Protocol.UNENCRYPTED_HTTP2, enabled)

    def copy(self) -> Self:
        """Return an independent set with the same flags."""
        other = self.__class__.__new__(self.__class__)
        other._bits = self._bits
        return other

    __copy__ = copy

    def with_http1(self, enabled: bool) -> Self:
        """Create a new set with HTTP/1 added or removed."""
        other = self.copy()
        other.set_http1(enabled)
        return other

    def with_http2(self, enabled: bool) -> Self:
        """Create a new set with HTTP/2 over TLS added or removed."""
        other = self.copy()
        other.set_http2(enabled)
        return other

    def with_unencrypted_http2(self, enabled: bool) -> Self:
        """Create a new set with unencrypted HTTP/2 added or removed."""
        other = self.copy()
        other.set_unencrypted_http2(enabled)
        return other

    def names(self) -> Tuple[str, ...]:
        """Names of the enabled protocols, in declaration order."""
        return tuple(name for protocol, name in _RENDER_ORDER if self.has(protocol))

    def is_empty(self) -> bool:
        return self._bits == 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ProtocolSet):
            return NotImplemented
        return self._bits == other._bits

    def __str__(self) -> str:
        return "{" + ",".join(self.names()) + "}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"
