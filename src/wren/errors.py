"""Wren exception hierarchy.

Shared across the pattern compiler, the router, and request parsing so
every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a route registration is invalid.

    Surfaced immediately from ``Router.on()`` and the verb helpers; the
    route table is left untouched.
    """


class RequestFormatError(WrenError, ValueError):
    """Raised when a request's ``url`` is not an absolute URL.

    Fatal to the whole ``handle()`` call; never reported as a no-match.
    """

    def __init__(self, url: object, detail: str = "") -> None:
        self.url = url
        default_detail = f"Request url must be an absolute URL, got {url!r}"
        super().__init__(detail or default_detail)
