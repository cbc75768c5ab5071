"""Ordered, first-match-wins router.

Routes are registered during setup and appended to a per-method table in
registration order. Dispatch walks that order; there is no sorting by
specificity.
"""

from __future__ import annotations

import heapq
import logging
import threading
from collections.abc import Callable
from operator import attrgetter
from typing import Any

import anyio

from wren._internal.types import Handler
from wren.config import RouterConfig
from wren.errors import ConfigurationError, RequestFormatError
from wren.http.query import QueryParams
from wren.http.request import SupportsURL, split_url
from wren.routing.chain import CONTINUE, Done, Outcome, run_chain
from wren.routing.pattern import compile_pattern
from wren.routing.route import ALL, RouteEntry

logger = logging.getLogger("wren.routing")

# Names that belong to dispatch and can never be registered as a method
RESERVED_METHODS: frozenset[str] = frozenset({"HANDLE", "HANDLE_SYNC", "DISPATCH"})


def join_base(base: str, template: str) -> str:
    """Prefix *template* with *base* without doubling the joining slash."""
    if base.endswith("/") and template.startswith("/"):
        return base[:-1] + template
    return base + template


class Router:
    """Request router with per-route handler chains.

    Usage::

        router = Router(base="/api")
        router.get("/todos/:id?", load_user, show_todo)
        router.post("/todos", create_todo)

        result = await router.handle(request)
        if result is None:
            ...  # nothing matched; caller builds the 404

    A router's ``handle`` has the same shape as a handler, so routers nest::

        parent.all("/api/*", router.handle)

    Thread safety:
        Registration appends under a lock, so interleaving it with dispatch
        cannot corrupt the table. The intended discipline is still a
        registration phase followed by read-only dispatch; call ``seal()``
        to enforce it.
    """

    __slots__ = ("_lock", "_sealed", "_sequence", "_table", "config")

    def __init__(self, config: RouterConfig | None = None, *, base: str | None = None) -> None:
        config = config or RouterConfig()
        if base is not None:
            config = RouterConfig(
                base=base,
                default_method=config.default_method,
                decode_params=config.decode_params,
            )
        self.config: RouterConfig = config
        self._table: dict[str, list[RouteEntry]] = {}
        self._sequence = 0
        self._sealed = False
        self._lock = threading.Lock()

    @property
    def base(self) -> str:
        return self.config.base

    # -- Registration --

    def on(self, method: str, template: str, *handlers: Handler) -> Router:
        """Register *handlers* for *method* requests matching *template*.

        Returns the router so calls chain. Raises ``ConfigurationError`` for
        a reserved or empty method, an empty or non-callable handler list,
        a malformed template, or when the router is sealed.
        """
        key = _normalize_method(method)
        if not key:
            msg = "HTTP method name must be a non-empty string."
            raise ConfigurationError(msg)
        if key in RESERVED_METHODS:
            msg = f"{method!r} is reserved for dispatch and cannot be registered as a method."
            raise ConfigurationError(msg)
        if not handlers:
            msg = f"Route {key} {template!r} needs at least one handler."
            raise ConfigurationError(msg)
        for handler in handlers:
            if not callable(handler):
                msg = f"Handler {handler!r} for route {key} {template!r} is not callable."
                raise ConfigurationError(msg)

        pattern = compile_pattern(join_base(self.config.base, template))

        with self._lock:
            if self._sealed:
                msg = "Cannot add routes after the router is sealed."
                raise ConfigurationError(msg)
            entry = RouteEntry(
                method=key,
                pattern=pattern,
                handlers=tuple(handlers),
                order=self._sequence,
            )
            self._sequence += 1
            self._table.setdefault(key, []).append(entry)

        logger.debug("Registered %s %s (%d handlers)", key, pattern.template, len(handlers))
        return self

    def get(self, template: str, *handlers: Handler) -> Router:
        return self.on("GET", template, *handlers)

    def post(self, template: str, *handlers: Handler) -> Router:
        return self.on("POST", template, *handlers)

    def put(self, template: str, *handlers: Handler) -> Router:
        return self.on("PUT", template, *handlers)

    def patch(self, template: str, *handlers: Handler) -> Router:
        return self.on("PATCH", template, *handlers)

    def delete(self, template: str, *handlers: Handler) -> Router:
        return self.on("DELETE", template, *handlers)

    def head(self, template: str, *handlers: Handler) -> Router:
        return self.on("HEAD", template, *handlers)

    def options(self, template: str, *handlers: Handler) -> Router:
        return self.on("OPTIONS", template, *handlers)

    def all(self, template: str, *handlers: Handler) -> Router:
        """Register *handlers* for every request method."""
        return self.on(ALL, template, *handlers)

    def route(self, method: str, template: str) -> Callable[[Handler], Handler]:
        """Register a single handler via decorator::

            @router.route("GET", "/todos/:id")
            async def show(request): ...
        """

        def decorator(func: Handler) -> Handler:
            self.on(method, template, func)
            return func

        return decorator

    def seal(self) -> None:
        """End the registration phase. Later registrations raise."""
        with self._lock:
            self._sealed = True
        logger.debug("Sealed router with %d routes", self._sequence)

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def routes(self) -> list[RouteEntry]:
        """Return all registered routes in registration order."""
        with self._lock:
            entries = [entry for bucket in self._table.values() for entry in bucket]
        return sorted(entries, key=attrgetter("order"))

    # -- Dispatch --

    def candidates(self, method: str) -> list[RouteEntry]:
        """Entries that may answer *method*, in registration order.

        Merges the method's own list with the ``ALL`` list.
        """
        key = _normalize_method(method)
        own = self._table.get(key, ())
        every = self._table.get(ALL, ()) if key != ALL else ()
        if not every:
            return list(own)
        if not own:
            return list(every)
        return list(heapq.merge(own, every, key=attrgetter("order")))

    async def dispatch(self, request: SupportsURL, *args: Any) -> Outcome:
        """Match *request* and run chains until one produces a value.

        Sets ``request.params`` and ``request.query`` before each matching
        chain runs. Extra *args* are passed to every handler after the
        request. A ``bytes`` method is decoded as latin-1. Raises
        ``RequestFormatError`` for a missing or non-absolute ``url`` or a
        method that is not text; handler exceptions propagate.
        """
        url = getattr(request, "url", None)
        path, query_string = split_url(url)
        method = getattr(request, "method", None) or self.config.default_method
        if isinstance(method, bytes):
            method = method.decode("latin-1")
        if not isinstance(method, str):
            msg = f"Request method must be a string, got {method!r}"
            raise RequestFormatError(url, msg)
        method = _normalize_method(method)
        query = QueryParams(query_string)

        for entry in self.candidates(method):
            params = entry.pattern.match(path, decode=self.config.decode_params)
            if params is None:
                continue
            logger.debug("%s %s matched %s %s", method, path, entry.method, entry.template)
            request.params = params  # type: ignore[attr-defined]
            request.query = query  # type: ignore[attr-defined]
            outcome = await run_chain(entry.handlers, request, *args)
            if outcome is not CONTINUE:
                return outcome

        return CONTINUE

    async def handle(self, request: SupportsURL, *args: Any) -> Any:
        """Dispatch *request* and return the first produced value, or ``None``.

        ``None`` means nothing answered; the caller decides what a miss
        looks like (usually a 404). Usable as a handler on another router.
        """
        outcome = await self.dispatch(request, *args)
        if isinstance(outcome, Done):
            return outcome.value
        return None

    def handle_sync(self, request: SupportsURL, *args: Any) -> Any:
        """Run ``handle`` to completion on a fresh event loop.

        For synchronous callers only; must not be called from inside a
        running event loop.
        """
        return anyio.run(self.handle, request, *args)

    def __repr__(self) -> str:
        return f"Router(base={self.config.base!r}, routes={self._sequence})"


def _normalize_method(method: object) -> str:
    if not isinstance(method, str):
        return ""
    return method.strip().upper()
