"""Request Context - The request facts a router dispatches on.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, MutableMapping, Optional

from routy_core.utils.helpers import (
    FORM_CONTENT_TYPE,
    parse_content_type,
    parse_query,
    read_form_field,
)

DEFAULT_OVERRIDE_FIELD = "_method"


@dataclass(frozen=True)
class RequestContext:
    """Request context value object.

    Carries the method, path and optional method-override value of one
    request, plus the host and scheme used to derive a default base URL.
    """

    method: str
    path: str = ""
    override: Optional[str] = None
    host: str = "localhost"
    scheme: str = "http"
    query: Dict[str, str] = field(default_factory=dict, compare=False)

    @classmethod
    def from_raw(
        cls,
        data: bytes,
        override_field: str = DEFAULT_OVERRIDE_FIELD,
    ) -> "RequestContext":
        """Parse request context from a raw HTTP/1.x request message.

        The override value is taken from the query string first, then from
        a url-encoded form body.
        """
        head, _, body = data.partition(b"\r\n\r\n")
        lines = head.split(b"\r\n")

        # Parse request line
        request_line = lines[0].decode("latin-1")
        parts = request_line.split(" ")
        method = parts[0].upper()
        target = parts[1] if len(parts) > 1 else "/"

        # Parse query string
        path, _, query_string = target.partition("?")
        query = parse_query(query_string) if query_string else {}

        # Parse headers
        headers = {}
        for line in lines[1:]:
            if b":" in line:
                key, value = line.decode("latin-1").split(":", 1)
                headers[key.strip().lower()] = value.strip()

        override = query.get(override_field)
        if override is None:
            override = read_form_field(
                body, headers.get("content-type", ""), override_field
            )

        return cls(
            method=method,
            path=path,
            override=override,
            host=headers.get("host", "localhost"),
            query=query,
        )

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, Any],
        override_field: str = DEFAULT_OVERRIDE_FIELD,
    ) -> "RequestContext":
        """Build request context from a WSGI environ mapping."""
        query_string = environ.get("QUERY_STRING", "")
        query = parse_query(query_string) if query_string else {}

        path = environ.get("PATH_INFO")
        if path is None:
            path = environ.get("REQUEST_URI", "")

        override = query.get(override_field)
        if override is None:
            override = cls._read_environ_form(environ, override_field)

        host = environ.get("HTTP_HOST") or environ.get("SERVER_NAME", "localhost")

        return cls(
            method=environ.get("REQUEST_METHOD", "GET").upper(),
            path=path,
            override=override,
            host=host,
            scheme=environ.get("wsgi.url_scheme", "http"),
            query=query,
        )

    @staticmethod
    def _read_environ_form(
        environ: Mapping[str, Any],
        override_field: str,
    ) -> Optional[str]:
        """Read the override field from a url-encoded WSGI request body.

        The consumed body is put back on ``wsgi.input`` so handlers can still
        read it. Read-only environs are never read from.
        """
        stream = environ.get("wsgi.input")
        if stream is None or not isinstance(environ, MutableMapping):
            return None

        content_type = environ.get("CONTENT_TYPE", "")
        if parse_content_type(content_type)[0] != FORM_CONTENT_TYPE:
            return None

        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            return None

        if length <= 0:
            return None

        body = stream.read(length)
        environ["wsgi.input"] = io.BytesIO(body)
        return read_form_field(body, content_type, override_field)


__all__ = [
    "RequestContext",
    "DEFAULT_OVERRIDE_FIELD",
]
