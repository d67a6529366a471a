"""
Configuration helpers for c_http_protocols.

These functions build ProtocolSet values from the shapes settings usually
arrive in: a list of protocol names, or a flat mapping of boolean-ish
options. They reject values they cannot interpret, but never judge
whether a combination suits a particular transport.
"""

import logging
import re
from typing import Any, Dict, Iterable, Mapping, Tuple, Union

from .exceptions import ConfigurationError, UnknownProtocolError
from .protocols import Protocol, ProtocolSet

logger = logging.getLogger(__name__)


# Accepted spellings, compared lower-cased
_PROTOCOL_ALIASES: Dict[str, Protocol] = {
    "http1": Protocol.HTTP1,
    "http/1.1": Protocol.HTTP1,
    "http/1.0": Protocol.HTTP1,
    "http/1": Protocol.HTTP1,
    "h1": Protocol.HTTP1,
    "http2": Protocol.HTTP2,
    "h2": Protocol.HTTP2,
    "unencryptedhttp2": Protocol.UNENCRYPTED_HTTP2,
    "unencrypted_http2": Protocol.UNENCRYPTED_HTTP2,
    "h2c": Protocol.UNENCRYPTED_HTTP2,
}

_PROTOCOL_TOKENS: Tuple[Tuple[Protocol, str], ...] = (
    (Protocol.HTTP1, "http/1.1"),
    (Protocol.HTTP2, "h2"),
    (Protocol.UNENCRYPTED_HTTP2, "h2c"),
)

_MAPPING_KEYS: Tuple[Tuple[str, Protocol], ...] = (
    ("http1", Protocol.HTTP1),
    ("http2", Protocol.HTTP2),
    ("unencrypted_http2", Protocol.UNENCRYPTED_HTTP2),
)

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})

_SEPARATORS = re.compile(r"[,\s]+")


def lookup_protocol(name: str) -> Protocol:
    """
    Resolve a single protocol name or alias.

    Args:
        name: Protocol name such as "HTTP1", "h2" or "h2c" (case-insensitive)

    Returns:
        The matching Protocol flag

    Raises:
        UnknownProtocolError: If the name is not recognised
    """
    try:
        return _PROTOCOL_ALIASES[name.strip().lower()]
    except KeyError as e:
        raise UnknownProtocolError(name, cause=e) from e


def parse_protocols(value: Union[str, Iterable[str]]) -> ProtocolSet:
    """
    Build a ProtocolSet from a list of protocol names.

    Args:
        value: Either a string of names separated by commas or whitespace,
            or an iterable of individual names

    Returns:
        New ProtocolSet with every named protocol enabled

    Raises:
        UnknownProtocolError: If a name is not recognised
        ConfigurationError: If an item of the iterable is not a string
    """
    if isinstance(value, str):
        tokens: Iterable[Any] = _SEPARATORS.split(value)
    else:
        tokens = value

    protocols = ProtocolSet()
    for token in tokens:
        if not isinstance(token, str):
            raise ConfigurationError(
                f"protocol names must be strings, got {type(token).__name__}"
            )
        if not token.strip():
            continue
        protocols.set(lookup_protocol(token), True)

    logger.debug(f"Parsed protocols {protocols} from {value!r}")
    return protocols


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
    elif isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")


def protocols_from_mapping(settings: Mapping[str, Any], prefix: str = "") -> ProtocolSet:
    """
    Build a ProtocolSet from flat boolean settings.

    Reads the keys ``http1``, ``http2`` and ``unencrypted_http2``, each
    optionally preceded by ``prefix`` (for example ``"server."``). Missing
    keys leave their protocol disabled and unrelated keys are ignored.

    Raises:
        ConfigurationError: If a value is not boolean-like
    """
    protocols = ProtocolSet()
    for key, protocol in _MAPPING_KEYS:
        full_key = prefix + key
        if full_key in settings:
            protocols.set(protocol, _coerce_bool(full_key, settings[full_key]))

    logger.debug(f"Loaded protocols {protocols} from settings (prefix={prefix!r})")
    return protocols


def format_protocols(protocols: ProtocolSet, style: str = "names") -> str:
    """
    Render a ProtocolSet for logs or configuration files.

    ``style="names"`` joins the names used by ``str()`` ("HTTP1,HTTP2");
    ``style="tokens"`` joins short tokens ("http/1.1,h2,h2c") that
    parse_protocols reads back.

    Raises:
        ConfigurationError: If the style is unknown
    """
    if style == "names":
        return ",".join(protocols.names())
    if style == "tokens":
        return ",".join(
            token for protocol, token in _PROTOCOL_TOKENS if protocols.has(protocol)
        )
    raise ConfigurationError(f"unknown format style {style!r}")
