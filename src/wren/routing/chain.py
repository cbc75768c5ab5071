"""Handler chains and their outcome.

A route's handlers run strictly in order. Each one either lets the chain
continue (returns ``None`` or ``CONTINUE``) or finishes the dispatch
(returns anything else, or wraps a value in ``Done``)::

    def auth(request):
        if "token" not in request.query:
            return {"status": 401}   # Done: later handlers never run
        request.user = "alice"       # Continue: mutation is visible below

    def show(request):
        return {"user": request.user}
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, TypeAlias

from wren._internal.invoke import invoke
from wren._internal.types import Handler


class Continue(Enum):
    """No value produced; dispatch moves on."""

    CONTINUE = "continue"

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE: Final = Continue.CONTINUE


@dataclass(frozen=True, slots=True)
class Done:
    """A handler produced a value. Terminates the chain and the dispatch."""

    value: Any


Outcome: TypeAlias = Continue | Done


def to_outcome(result: Any) -> Outcome:
    """Classify a raw handler return value."""
    if result is None or result is CONTINUE:
        return CONTINUE
    if isinstance(result, Done):
        return result
    return Done(result)


async def run_chain(handlers: Sequence[Handler], request: Any, *args: Any) -> Outcome:
    """Run *handlers* in order until one produces a value.

    Awaitable results are awaited before the next handler is invoked.
    Exceptions propagate untouched.
    """
    for handler in handlers:
        outcome = to_outcome(await invoke(handler, request, *args))
        if outcome is not CONTINUE:
            return outcome
    return CONTINUE
