"""Tests for URL utilities."""

import pytest

from hack_or_snooze.errors import ParseError
from hack_or_snooze.url import extract_host


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.com/a", "example.com"),
        ("http://x.com", "x.com"),
        ("https://www.Example.COM/path?q=1#frag", "www.example.com"),
        ("https://user:pw@example.com/", "example.com"),
        ("http://localhost:3000/", "localhost:3000"),
        ("http://[::1]:8000/", "[::1]:8000"),
        ("https://example.com:443/a", "example.com"),
        ("http://example.com:80/", "example.com"),
        ("HTTPS://example.com:443/", "example.com"),
        ("http://example.com:443/", "example.com:443"),
        ("https://example.com:80/", "example.com:80"),
    ],
)
def test_extract_host(url: str, expected: str) -> None:
    assert extract_host(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "not-a-url",
        "",
        "example.com/path",
        "mailto:someone@example.com",
        "http://example.com:notaport/",
    ],
)
def test_extract_host_rejects_invalid(url: str) -> None:
    with pytest.raises(ParseError, match="Invalid URL"):
        extract_host(url)


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        extract_host("not-a-url")
