#!/usr/bin/env python3
"""
URL Resolver: scheme detection and URL form helpers shared by the generator,
the transformer and the URL descriptor.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

# <scheme>://<target>; a Windows drive letter ("C:\...") or a
# protocol-relative URL ("//host/...") never matches.
SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*)://")

# data: URIs carry no "//" after the scheme
DATA_URI_PATTERN = re.compile(r"^(data):", re.IGNORECASE)


def get_scheme(uri: str) -> Optional[str]:
    """
    Return the lower-cased scheme of a URI, or None for a plain path.

    Examples:
        "public://cat.jpg" → "public"
        "data:image/png;base64,..." → "data"
        "core/misc/logo.svg" → None
    """
    match = SCHEME_PATTERN.match(uri) or DATA_URI_PATTERN.match(uri)
    if not match:
        return None
    return match.group(1).lower()


def get_target(uri: str) -> str:
    """Return the part of a URI following its scheme (the whole URI when it has none)."""
    match = SCHEME_PATTERN.match(uri)
    if match:
        return uri[match.end():]
    match = DATA_URI_PATTERN.match(uri)
    if match:
        return uri[match.end():]
    return uri


def is_absolute(url: str) -> bool:
    """True when the URL carries its own scheme."""
    return get_scheme(url) is not None


def is_protocol_relative(url: str) -> bool:
    return url.startswith("//")


def has_host(url: str) -> bool:
    """True when the URL names a host (absolute or protocol-relative)."""
    try:
        return bool(urlsplit(url).netloc)
    except ValueError:
        return False


def resolve_relative(url: str, context) -> str:
    """
    Anchor a URL that is relative to the application base path.
    Absolute, protocol-relative and root-relative URLs pass through unchanged.
    """
    if is_absolute(url) or url.startswith("/"):
        return url
    return context.base_path + url


def to_absolute(url: str, context) -> str:
    """
    Render any URL form as an absolute URL under the given base URL context.

    Examples (context https://example.com/sub/):
        "https://cdn.example.com/x.png" → unchanged
        "//cdn.example.com/x.png" → "https://cdn.example.com/x.png"
        "/sub/sites/x.png" → "https://example.com/sub/sites/x.png"
        "sites/x.png" → "https://example.com/sub/sites/x.png"
    """
    if is_absolute(url):
        return url
    if is_protocol_relative(url):
        return f"{context.scheme}:{url}"
    return context.origin + resolve_relative(url, context)
