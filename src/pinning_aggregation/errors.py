"""Exception types raised while resolving and opening pinning backends."""

from __future__ import annotations


class PinningError(Exception):
    """Base class for pinning aggregation errors"""


class UnknownPinningService(PinningError):
    """Raised if a connection string matches no registered backend variant"""

    designator: str | None

    def __init__(self, designator: str | None) -> None:
        super().__init__(f"Unknown pinning service {designator}")
        self.designator = designator


class InvalidConnectionString(PinningError, ValueError):
    """Raised if a connection string can not be parsed as a URI"""

    connection_string: str

    def __init__(self, connection_string: str, reason: str = "malformed URI") -> None:
        super().__init__(f"Invalid connection string {connection_string!r}: {reason}")
        self.connection_string = connection_string


class NoIpfsInstanceError(PinningError):
    def __init__(self) -> None:
        super().__init__("No IPFS instance available")
