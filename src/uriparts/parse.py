"""uriparts.parse
Turns grammar captures into URI objects.
"""

import dataclasses

from typing import Any, Mapping, Self

import logbook

from .grammar import match
from .serialize import serialize

log = logbook.Logger("uriparts")

# Largest value that fits in an unsigned 16-bit port.
MAX_PORT: int = 65535


@dataclasses.dataclass(frozen=True)
class URI:
    """A parsed URI. Use URI.parse or build rather than instantiating this directly.
    Every field other than scheme is either None or a non-empty value.
    """

    scheme: str
    username: str | None = None
    password: str | None = None
    host: str | None = None
    port: int | None = None
    path: str | None = None
    query: str | None = None
    fragment: str | None = None

    @classmethod
    def parse(cls: type[Self], data: str) -> Self | None:
        """Parses data, returning None if it isn't a URI.
        e.g. URI.parse("https://example.org/book/README.html").host == "example.org"
        """
        captures: dict[str, str | None] | None = match(data)
        if captures is None:
            return None
        return build(captures, cls)

    # Older name for parse.
    new = parse

    @property
    def userinfo(self: Self) -> str | None:
        """username:password"""
        if self.username is None:
            return None
        if self.password is None:
            return self.username
        return f"{self.username}:{self.password}"

    @property
    def authority(self: Self) -> str | None:
        """userinfo@host:port"""
        if self.host is None:
            return None
        result: str = ""
        if self.userinfo is not None:
            result += f"{self.userinfo}@"
        result += self.host
        if self.port is not None:
            result += f":{self.port}"
        return result

    def as_dict(self: Self) -> dict[str, Any]:
        return {field.name: value for field in dataclasses.fields(self) if (value := getattr(self, field.name)) is not None}

    def serialize(self: Self) -> str:
        return serialize(self)

    def __str__(self: Self) -> str:
        return serialize(self)


def _none_if_empty(value: str | None) -> str | None:
    if value is None or len(value) == 0:
        return None
    return value


def _parse_port(digits: str | None) -> int | None:
    """Returns digits as a port number, or None if there are none or they don't fit in 16 bits."""
    if not digits:
        return None
    # int() alone would also take "8_0", " 80 ", "-0" and non-ASCII digits.
    if not (digits.isascii() and digits.isdigit()):
        log.debug(f"dropping unparsable port {digits!r}")
        return None
    port: int = int(digits, base=10)
    if not 0 <= port <= MAX_PORT:
        log.debug(f"dropping out-of-range port {digits}")
        return None
    return port


def build(captures: Mapping[str, str | None], cls: type[URI] = URI) -> URI | None:
    """Builds a URI from the captures returned by uriparts.grammar.match.
    Returns None if there's no scheme. Empty captures become None.
    """
    scheme: str | None = captures.get("scheme")
    if not scheme:
        log.debug("captures have no scheme")
        return None

    return cls(
        scheme=scheme,
        username=_none_if_empty(captures.get("username")),
        password=_none_if_empty(captures.get("password")),
        host=_none_if_empty(captures.get("host")),
        port=_parse_port(captures.get("port")),
        path=_none_if_empty(captures.get("path")),
        query=_none_if_empty(captures.get("query")),
        fragment=_none_if_empty(captures.get("fragment")),
    )


def parse_uri(data: str) -> URI | None:
    """Permissive URI parser.
    Returns None rather than raising when data isn't a URI.
    """
    return URI.parse(data)
