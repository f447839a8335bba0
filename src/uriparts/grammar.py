"""uriparts.grammar
The permissive URI grammar, compiled once at import time.
This is deliberately looser than RFC 3986: it accepts "scheme:path",
"scheme:/path" and "scheme://authority/path" alike.
"""

import re2

# Capture names, in the order they appear in a URI.
GROUPS: tuple[str, ...] = ("scheme", "username", "password", "host", "port", "path", "query", "fragment")

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME: str = r"(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*)"

# Between zero and three slashes may follow the scheme's colon.
_SLASHES: str = r"/{0,3}"

# The userinfo parts are lazy so they never eat the "@" or a ":password".
_USERNAME: str = r"(?P<username>.*?)?"
_PASSWORD: str = r"(?::(?P<password>.*?))?"
_AT: str = r"@?"

# The "?" in this class lets a query leak into the host when no path
# precedes it and the query only uses host characters ("http://host?q" has
# host "host?q", "http://host?q=1" has query "q=1").
_HOST: str = r"(?P<host>[0-9.A-Za-z?-]+)"

# ASCII digits only, so "http://host:١٢/" does not match at all.
_PORT: str = r"(?::(?P<port>[0-9]+))?"

# A stray ":" between host and path is tolerated and dropped.
_PATH: str = r"(?::?(?P<path>/[^?#]*))?"

_QUERY: str = r"(?:\?(?P<query>[^#]*))?"

_FRAGMENT: str = r"(?:#(?P<fragment>.*))?"

_URI: str = rf"\A{_SCHEME}:{_SLASHES}{_USERNAME}{_PASSWORD}{_AT}{_HOST}{_PORT}{_PATH}{_QUERY}{_FRAGMENT}\z"
# re2 runs in time linear in the input, whatever the input looks like.
_URI_PAT = re2.compile(_URI)


def match(data: str) -> dict[str, str | None] | None:
    """Returns the named captures of data, or None if the whole string doesn't match the grammar.
    e.g. match("gopher://foo.bar:1234/asdf")["port"] == "1234"
    """
    if not isinstance(data, str):
        raise TypeError(f"expected str, got {type(data).__name__}")
    m = _URI_PAT.match(data)
    if m is None:
        return None
    return m.groupdict()


def is_uri(data: str) -> bool:
    return match(data) is not None
