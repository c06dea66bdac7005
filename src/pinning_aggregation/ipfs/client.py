"""Kubo HTTP RPC client - the connection handle behind an IPFS backend."""

from __future__ import annotations

import logging

import httpx

log = logging.getLogger(__name__)


class KuboClient:
    """Pins, unpins and lists pins on a Kubo node.

    Uses the Kubo HTTP RPC API at /api/v0/ for:
    - pin/add: Pin a CID
    - pin/rm: Remove a pin
    - pin/ls: List pinned CIDs

    Non-2xx responses raise httpx.HTTPStatusError; nothing is retried.
    """

    def __init__(self, kubo_rpc_url: str = "http://127.0.0.1:5001", timeout: float = 30) -> None:
        self._base_url = kubo_rpc_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}/api/v0/{endpoint}"

    async def _post(self, endpoint: str, params: dict[str, str] | None = None) -> httpx.Response:
        resp = await self._client.post(self._url(endpoint), params=params)
        resp.raise_for_status()
        return resp

    async def pin_add(self, cid: str, recursive: bool = False) -> None:
        await self._post("pin/add", {"arg": cid, "recursive": str(recursive).lower()})
        log.debug("Kubo %s pinned %s", self._base_url, cid)

    async def pin_rm(self, cid: str) -> None:
        await self._post("pin/rm", {"arg": cid})
        log.debug("Kubo %s unpinned %s", self._base_url, cid)

    async def pin_ls(self) -> list[str]:
        """All CIDs pinned on the node, of any pin type."""
        resp = await self._post("pin/ls")
        try:
            keys = resp.json().get("Keys", {})
        except ValueError as exc:
            raise httpx.DecodingError(
                f"malformed pin/ls reply from {self._base_url}", request=resp.request,
            ) from exc
        return list(keys)

    async def aclose(self) -> None:
        await self._client.aclose()
