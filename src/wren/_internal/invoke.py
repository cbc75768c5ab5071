"""Call a route handler whether it is ``def`` or ``async def``.

The sync/async check lives here so the chain runner never has to care
which kind of handler it was given::

    result = await invoke(handler, request, env)
"""

import inspect
from typing import Any

from wren._internal.types import Handler


async def invoke(handler: Handler, request: Any, *args: Any) -> Any:
    """Call *handler* with the request and any extra dispatch args.

    An awaitable result (coroutine, future, task) is awaited before it is
    returned, so the next handler in a chain only starts once this one is
    finished.
    """
    result = handler(request, *args)
    if inspect.isawaitable(result):
        return await result
    return result
