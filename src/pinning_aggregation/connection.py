"""Connection string parsing: `<designator>[+<subscheme>]://<host>[:<port>][/path]`."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit

from pinning_aggregation.errors import InvalidConnectionString

DESIGNATOR_PATTERN = re.compile(r"^(\w+)\+?")


def parse_connection_string(connection_string: str) -> SplitResult:
    """Split a connection string, rejecting anything that is not an absolute URI."""
    try:
        parts = urlsplit(connection_string)
        parts.port  # raises ValueError on a non-numeric or out of range port
    except ValueError as exc:
        raise InvalidConnectionString(connection_string, str(exc)) from exc
    if not parts.scheme or not parts.netloc:
        raise InvalidConnectionString(connection_string)
    return parts


def designator_of(connection_string: str) -> str | None:
    """Leading word of the scheme: `ipfs+https://host` gives `ipfs`."""
    scheme = parse_connection_string(connection_string).scheme
    match = DESIGNATOR_PATTERN.match(scheme)
    return match.group(1) if match else None


def subscheme_of(connection_string: str) -> str | None:
    """Part of the scheme after `+`: `ipfs+https://host` gives `https`."""
    scheme = parse_connection_string(connection_string).scheme
    _, plus, sub = scheme.partition("+")
    return sub if plus else None
