"""IPFS pinning backend."""

from __future__ import annotations

import logging

from pinning_aggregation.connection import parse_connection_string, subscheme_of
from pinning_aggregation.errors import InvalidConnectionString, NoIpfsInstanceError
from pinning_aggregation.identity import backend_id
from pinning_aggregation.ipfs.client import KuboClient
from pinning_aggregation.models.records import CID, CidList, PinningContext, PinningInfo

log = logging.getLogger(__name__)

FROM_CONTEXT_HOST = "__context"
DEFAULT_KUBO_PORT = 5001

_PROTOCOLS = {None: "http", "http": "http", "https": "https"}


class IpfsPinning:
    """Pin content to an IPFS node.

    The connection string names the node: `ipfs://3.3.3.3:5001` translates
    into the `http://3.3.3.3:5001` Kubo RPC endpoint, `ipfs+https://host`
    into `https://host:5001`.

    A host that already manages a Kubo connection can share it: the special
    `__context` hostname (`ipfs://__context`) makes open() borrow
    `context.ipfs` instead of connecting on its own.
    """

    designator = "ipfs"

    def __init__(self, connection_string: str, context: PinningContext) -> None:
        parts = parse_connection_string(connection_string)
        if parts.hostname == FROM_CONTEXT_HOST:
            self.ipfs_address = FROM_CONTEXT_HOST
        else:
            protocol = _PROTOCOLS.get(subscheme_of(connection_string))
            if protocol is None:
                raise InvalidConnectionString(
                    connection_string, f"unsupported scheme {parts.scheme}",
                )
            host = parts.hostname or ""
            if ":" in host:
                host = f"[{host}]"
            port = parts.port or DEFAULT_KUBO_PORT
            self.ipfs_address = f"{protocol}://{host}:{port}"

        self.connection_string = connection_string
        self.id = backend_id(self.designator, connection_string)
        self._context = context
        self._ipfs: KuboClient | None = None
        self._owns_ipfs = False

    @classmethod
    def build(cls, connection_string: str, context: PinningContext) -> IpfsPinning:
        return cls(connection_string, context)

    @property
    def ipfs(self) -> KuboClient | None:
        return self._ipfs

    async def open(self) -> None:
        if self._ipfs is not None:
            return
        if self.ipfs_address == FROM_CONTEXT_HOST:
            if self._context.ipfs is None:
                raise NoIpfsInstanceError()
            self._ipfs = self._context.ipfs
            self._owns_ipfs = False
        else:
            self._ipfs = KuboClient(self.ipfs_address, timeout=self._context.kubo_timeout)
            self._owns_ipfs = True
        log.debug("Opened IPFS backend %s at %s", self.id, self.ipfs_address)

    async def close(self) -> None:
        # A borrowed connection belongs to the context
        if self._ipfs is not None and self._owns_ipfs:
            await self._ipfs.aclose()
        self._ipfs = None
        self._owns_ipfs = False

    async def pin(self, cid: CID | str) -> None:
        if self._ipfs is not None:
            await self._ipfs.pin_add(str(cid), recursive=False)

    async def unpin(self, cid: CID | str) -> None:
        if self._ipfs is not None:
            await self._ipfs.pin_rm(str(cid))

    async def ls(self) -> CidList:
        if self._ipfs is None:
            return {}
        return {cid: [self.id] for cid in await self._ipfs.pin_ls()}

    async def info(self) -> PinningInfo:
        return {self.id: {}}
