"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple
from urllib.parse import parse_qs, urlparse

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def trim_slashes(path: str) -> str:
    """Strip leading and trailing slashes."""
    return path.strip("/")


def request_path(uri: str) -> str:
    """Get the normalized path of a request URI.

    Drops scheme, host, query string and fragment, then trims slashes.
    """
    if "://" in uri:
        path = urlparse(uri).path
    else:
        path = uri.split("?", 1)[0].split("#", 1)[0]
    return trim_slashes(path)


def normalize_base_url(base_url: str) -> str:
    """Normalize base URL so it ends with exactly one slash."""
    scheme, sep, rest = base_url.partition("://")
    if not sep:
        # Protocol-relative bases keep their leading "//"
        scheme = ""
        sep = "//" if base_url.startswith("//") else ""
        rest = base_url[len(sep):]

    # Remove double slashes
    while "//" in rest:
        rest = rest.replace("//", "/")

    base = f"{scheme}{sep}{rest}"
    return base.rstrip("/") + "/"


def join_path(*parts: str) -> str:
    """Join path parts with single slashes, trimming the result."""
    return trim_slashes("/".join(parts))


def parse_query(query_string: str) -> Dict[str, str]:
    """Parse a query string (or form body), keeping the first value per key."""
    parsed = parse_qs(query_string, keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


def parse_content_type(content_type: str) -> Tuple[str, Dict[str, str]]:
    """Parse Content-Type header."""
    parts = content_type.split(";")
    media_type = parts[0].strip().lower()

    params = {}
    for part in parts[1:]:
        if "=" in part:
            key, value = part.split("=", 1)
            params[key.strip().lower()] = value.strip().strip('"')

    return media_type, params


def read_form_field(
    body: bytes,
    content_type: str,
    name: str,
) -> Optional[str]:
    """Read one field from a url-encoded form body."""
    media_type, params = parse_content_type(content_type)
    if media_type != FORM_CONTENT_TYPE or not body:
        return None

    try:
        text = body.decode(params.get("charset", "utf-8"), errors="replace")
    except LookupError:
        # Unknown charset
        text = body.decode("utf-8", errors="replace")

    return parse_query(text).get(name)


__all__ = [
    "FORM_CONTENT_TYPE",
    "trim_slashes",
    "request_path",
    "normalize_base_url",
    "join_path",
    "parse_query",
    "parse_content_type",
    "read_form_field",
]
