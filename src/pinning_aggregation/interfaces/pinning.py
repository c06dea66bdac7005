"""Pinning protocols - the capability contract every backend satisfies."""

from __future__ import annotations

from typing import Awaitable, Protocol, Union

from pinning_aggregation.models.records import CID, CidList, PinningContext, PinningInfo


class Pinning(Protocol):
    """One pinning service, or several united behind the same contract."""

    id: str

    async def open(self) -> None:
        """Establish the connection to the service."""
        ...

    async def close(self) -> None:
        """Release whatever open() acquired."""
        ...

    async def pin(self, cid: CID | str) -> None:
        ...

    async def unpin(self, cid: CID | str) -> None:
        ...

    async def ls(self) -> CidList:
        """Map every pinned CID to the ids of the services holding it."""
        ...

    async def info(self) -> PinningInfo:
        """Diagnostic record keyed by service id."""
        ...


class PinningStatic(Protocol):
    """A backend variant: the class side of a Pinning implementation."""

    designator: str

    def build(
        self, connection_string: str, context: PinningContext
    ) -> Union[Pinning, Awaitable[Pinning]]:
        """Construct a backend for the connection string, possibly asynchronously."""
        ...
