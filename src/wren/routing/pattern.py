"""Path template compilation.

Turns a route template into an anchored regular expression plus the
ordered names of the parameters it captures::

    "/users"             matches exactly "/users"
    "/todos/:id"         captures one non-empty segment as ``id``
    "/todos/:id?"        the "/" and the segment are both optional
    "/files/*"           matches "/files", "/files/" and anything deeper
"""

import re
from dataclasses import dataclass
from urllib.parse import unquote

from wren.errors import ConfigurationError

# One token per wildcard or parameter; everything between is literal.
_TOKEN = re.compile(
    r"(?P<wildcard>/?\*)"
    r"|/:(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?P<optional>\?)?"
)

# A ":" after "/" that does not start a valid parameter name
_BAD_PARAM = re.compile(r"/:(?![A-Za-z_])")

_SEGMENT = r"[^/]+"


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled, immutable route matcher."""

    template: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]
    optional_names: frozenset[str] = frozenset()
    wildcard: bool = False

    def match(self, path: str, *, decode: bool = True) -> dict[str, str] | None:
        """Match *path* in full and return its captured parameters.

        Returns ``None`` when the path does not match. Optional parameters
        whose segment is absent are left out of the result rather than
        mapped to an empty value.
        """
        m = self.regex.fullmatch(path)
        if m is None:
            return None
        params: dict[str, str] = {}
        for name in self.param_names:
            value = m.group(name)
            if value is None:
                continue
            params[name] = unquote(value) if decode else value
        return params


def compile_pattern(template: str) -> PathPattern:
    """Compile a path template into a :class:`PathPattern`.

    Literal text is matched verbatim (regex metacharacters are escaped).
    Raises ``ConfigurationError`` for malformed or duplicate parameter
    names.
    """
    if _BAD_PARAM.search(template):
        msg = (
            f"Invalid parameter in route template {template!r}: "
            "names must start with a letter or underscore (e.g. '/:id')."
        )
        raise ConfigurationError(msg)

    pieces: list[str] = []
    names: list[str] = []
    optional: set[str] = set()
    wildcard = False
    pos = 0

    for token in _TOKEN.finditer(template):
        pieces.append(re.escape(template[pos : token.start()]))
        pos = token.end()

        star = token.group("wildcard")
        if star is not None:
            pieces.append("(?:/.*)?" if star.startswith("/") else ".*")
            wildcard = pos == len(template)
            continue

        name = token.group("name")
        if name in names:
            msg = f"Duplicate parameter {name!r} in route template {template!r}."
            raise ConfigurationError(msg)
        names.append(name)
        capture = f"/(?P<{name}>{_SEGMENT})"
        if token.group("optional"):
            optional.add(name)
            capture = f"(?:{capture})?"
        pieces.append(capture)

    pieces.append(re.escape(template[pos:]))

    return PathPattern(
        template=template,
        regex=re.compile("".join(pieces)),
        param_names=tuple(names),
        optional_names=frozenset(optional),
        wildcard=wildcard,
    )
