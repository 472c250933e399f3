"""Customer record sources."""

from __future__ import annotations

from customer_locator.sources.base import CustomerSource, SourceError, decode_customer
from customer_locator.sources.json_lines import JsonLinesFileSource, JsonLinesHttpSource
from customer_locator.sources.memory import InMemorySource

_URL_SCHEMES = ("http://", "https://")


def source_for(location: str, *, timeout: float = 15.0) -> CustomerSource:
    """Pick a source for a file path or an http(s) URL."""
    if location.lower().startswith(_URL_SCHEMES):
        return JsonLinesHttpSource(location, timeout=timeout)
    return JsonLinesFileSource(location)


__all__ = [
    "CustomerSource",
    "InMemorySource",
    "JsonLinesFileSource",
    "JsonLinesHttpSource",
    "SourceError",
    "decode_customer",
    "source_for",
]
