"""RouteEntry frozen dataclass."""

from dataclasses import dataclass

from wren._internal.types import Handler
from wren.routing.pattern import PathPattern

# Method key for routes that answer every request method
ALL = "ALL"


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One compiled pattern and its ordered handler chain.

    Created by ``Router.on()``; never mutated afterwards. ``order`` is the
    registration sequence number within the owning router and decides
    match priority.
    """

    method: str
    pattern: PathPattern
    handlers: tuple[Handler, ...]
    order: int

    @property
    def template(self) -> str:
        """The full template, base path included."""
        return self.pattern.template
