"""uriparts.serialize
Writes a URI back out in canonical form:
scheme://[username[:password]@]host[:port]path[?query][#fragment]
"""

from typing import TYPE_CHECKING

import logbook

if TYPE_CHECKING:
    from .parse import URI

log = logbook.Logger("uriparts")


class UnserializableURIError(ValueError):
    """Raised when a URI can't be written out, i.e. it has no host."""

    def __init__(self, uri: "URI") -> None:
        super().__init__(f"cannot serialize a URI without a host: {uri!r}")
        self.uri = uri


def serialize(uri: "URI") -> str:
    """Returns uri as a string. Field values are written verbatim; nothing is encoded or normalized.
    A missing path is written as "/".
    """
    if uri.host is None:
        log.debug(f"refusing to serialize hostless {uri!r}")
        raise UnserializableURIError(uri)

    result: str = f"{uri.scheme}://"
    result += uri.authority
    result += uri.path if uri.path is not None else "/"
    if uri.query is not None:
        result += f"?{uri.query}"
    if uri.fragment is not None:
        result += f"#{uri.fragment}"
    return result
