"""Shared fixtures for pinning_aggregation tests."""

from __future__ import annotations

import pytest
from aiohttp import web

from pinning_aggregation.models.records import PinningContext

TEST_CID = "QmSnuWmxptJZdLJpKRarxBMS2Ju2oANVrgbr2xWbie9b2D"
OTHER_CID = "QmT78zSuBmuS4z925WZfrqQ1qHaJ56DQaTfyMUF7F8ff5o"


class FakeKubo:
    """In-process stand-in for the Kubo RPC pin endpoints."""

    def __init__(self) -> None:
        self.pins: dict[str, str] = {}  # cid -> pin type
        self.requests: list[tuple[str, dict[str, str]]] = []
        self.fail_status: int | None = None
        self.ls_body: str | None = None  # raw pin/ls reply instead of JSON
        self.url = ""
        self.connection_string = ""

    async def handle(self, request: web.Request) -> web.Response:
        endpoint = request.match_info["endpoint"]
        params = dict(request.query)
        self.requests.append((endpoint, params))

        if self.fail_status is not None:
            return _error(f"{endpoint} unavailable", self.fail_status)

        cid = params.get("arg", "")
        if endpoint == "pin/add":
            recursive = params.get("recursive", "true") == "true"
            self.pins[cid] = "recursive" if recursive else "direct"
            return web.json_response({"Pins": [cid]})
        if endpoint == "pin/rm":
            if cid not in self.pins:
                return _error("not pinned or pinned indirectly", 500)
            del self.pins[cid]
            return web.json_response({"Pins": [cid]})
        if endpoint == "pin/ls":
            if self.ls_body is not None:
                return web.Response(text=self.ls_body, content_type="text/plain")
            keys = {c: {"Type": t} for c, t in self.pins.items()}
            return web.json_response({"Keys": keys})
        return web.Response(status=404)


def _error(message: str, status: int) -> web.Response:
    return web.json_response({"Message": message, "Code": 0, "Type": "error"}, status=status)


@pytest.fixture
async def kubo_server():
    """Local HTTP server speaking the Kubo pin RPC. Yields the FakeKubo state."""
    kubo = FakeKubo()
    app = web.Application()
    app.router.add_post("/api/v0/{endpoint:.+}", kubo.handle)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    host, port = runner.addresses[0][:2]
    kubo.url = f"http://{host}:{port}"
    kubo.connection_string = f"ipfs://{host}:{port}"
    yield kubo
    await runner.cleanup()


@pytest.fixture
def context():
    """Empty PinningContext: no host-managed IPFS connection."""
    return PinningContext(kubo_timeout=5)
