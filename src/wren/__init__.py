"""Wren — a small request router for edge and serverless handlers.

Matches ``method + url`` against ordered path templates and runs each
route's handler chain until a handler produces a value.

Basic usage::

    from wren import Router, Request

    router = Router(base="/api")

    def show(request):
        return {"id": request.params.get("id"), "limit": request.query.get("limit")}

    router.get("/todos/:id?", show)

    result = await router.handle(Request("https://example.com/api/todos/13?limit=5"))
"""

__version__ = "0.1.0"
__all__ = [
    "CONTINUE",
    "ConfigurationError",
    "Continue",
    "Done",
    "PathPattern",
    "Request",
    "RequestFormatError",
    "RouteEntry",
    "Router",
    "RouterConfig",
    "WrenError",
    "compile_pattern",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from wren.routing.router import Router

        return Router

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name in ("PathPattern", "compile_pattern"):
        from wren.routing import pattern as _pattern

        return getattr(_pattern, name)

    if name == "RouteEntry":
        from wren.routing.route import RouteEntry

        return RouteEntry

    if name in ("CONTINUE", "Continue", "Done"):
        from wren.routing import chain as _chain

        return getattr(_chain, name)

    if name in ("WrenError", "ConfigurationError", "RequestFormatError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
