"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the request (plus any extra dispatch args)
Handler: TypeAlias = Callable[..., Any]
