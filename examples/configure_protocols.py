"""
Protocol configuration example using c_http_protocols.

This example builds the enabled-protocol set for a server from a few
different configuration shapes and prints what a listener would accept.
"""

import logging

from c_http_protocols import (
    ConfigurationError,
    ProtocolSet,
    format_protocols,
    parse_protocols,
    protocols_from_mapping,
)

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


def describe(label: str, protocols: ProtocolSet) -> None:
    """Log what a listener with these protocols would accept."""
    logger.info(f"{label}: {protocols}")
    if protocols.is_http2() or protocols.is_http1():
        logger.info(f"  TLS listener offers: {format_protocols(protocols, style='tokens')}")
    if protocols.is_unencrypted_http2():
        logger.info("  plaintext listener accepts HTTP/2 prior knowledge")


def main():
    """Run the examples."""
    built = ProtocolSet()
    built.set_http1(True)
    built.set_http2(True)
    describe("Built with setters", built)

    describe("Parsed from string", parse_protocols("http/1.1, h2c"))

    settings = {"server.http1": "on", "server.unencrypted_http2": "yes"}
    describe("Loaded from settings", protocols_from_mapping(settings, prefix="server."))

    describe("Without HTTP/1", built.with_http1(False))

    try:
        parse_protocols("http1, spdy")
    except ConfigurationError as e:
        logger.error(f"Rejected configuration: {e}")


if __name__ == "__main__":
    main()
