"""Router configuration.

RouterConfig is a frozen dataclass, immutable after creation, so a
router's base path and defaults are fixed for its whole lifetime.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(base="/api/v0")
    """

    # Prefix prepended to every route template before compilation
    base: str = ""

    # Method assumed when a request carries none
    default_method: str = "GET"

    # Percent-decode captured path parameters ("a%20b" -> "a b")
    decode_params: bool = True
