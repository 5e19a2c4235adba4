"""URL handling utilities."""

from __future__ import annotations

from urllib.parse import urlsplit

from hack_or_snooze.errors import ParseError

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def extract_host(url: str) -> str:
    """Extract the host component of an absolute URL.

    Mirrors what a browser reports as ``URL.host``: the lower-cased hostname,
    followed by ``:port`` when the URL names a port other than the
    scheme's default.

    Args:
        url: The URL to extract the host from.

    Returns:
        The host, e.g. ``"example.com"`` or ``"localhost:8080"``.

    Raises:
        ParseError: If the URL has no scheme or no host, or an invalid port.
    """
    try:
        parsed = urlsplit(url)
        port = parsed.port
    except ValueError as e:
        raise ParseError(f"Invalid URL: {url!r}") from e

    if not parsed.scheme or not parsed.hostname:
        raise ParseError(f"Invalid URL: {url!r}")

    host = parsed.hostname
    if ":" in host:
        host = f"[{host}]"  # IPv6 literal
    if port is None or DEFAULT_PORTS.get(parsed.scheme.lower()) == port:
        return host
    return f"{host}:{port}"
