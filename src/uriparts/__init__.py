__version__ = "0.2.0"

from .grammar import is_uri, match
from .parse import MAX_PORT, URI, build, parse_uri
from .serialize import UnserializableURIError, serialize
