"""Request shape accepted by the router.

The router only needs ``url`` (and optionally ``method``) and writes
``params`` and ``query`` back onto the object. :class:`Request` is a
ready-made mutable carrier for that; any object with a ``url`` attribute
works just as well.
"""

from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import urlsplit

from wren.errors import RequestFormatError
from wren.http.query import QueryParams


class SupportsURL(Protocol):
    """Anything the router can dispatch: it must expose ``url``."""

    url: str


@dataclass
class Request:
    """A mutable request context.

    ``method`` left as ``None`` falls back to the router's
    ``RouterConfig.default_method``.

    Not slotted: middleware earlier in a chain may attach attributes
    (``request.user = ...``) for later handlers to read.

    Usage::

        request = Request("https://example.com/todos/13?limit=5")
        await router.handle(request)
        request.params  # {"id": "13"}
        request.query   # QueryParams({'limit': '5'})
    """

    url: str
    method: str | None = None
    params: dict[str, str] = field(default_factory=dict)
    query: QueryParams = field(default_factory=QueryParams)


def split_url(url: object) -> tuple[str, str]:
    """Split an absolute URL into ``(path, query_string)``.

    The path is returned still percent-encoded so an encoded ``/`` never
    splits a segment. An empty path is normalized to ``/``.

    Raises ``RequestFormatError`` if *url* is not a string or lacks a
    scheme or host.
    """
    if not isinstance(url, str):
        raise RequestFormatError(url)
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise RequestFormatError(url, f"Malformed request url {url!r}: {exc}") from exc
    if not parts.scheme or not parts.netloc:
        raise RequestFormatError(url)
    return parts.path or "/", parts.query
