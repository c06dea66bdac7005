"""Tier 2 fixtures: real Kubo daemon at localhost:5001."""

from __future__ import annotations

import httpx
import pytest

from pinning_aggregation.ipfs import KuboClient
from pinning_aggregation.models.records import PinningContext

KUBO_RPC_URL = "http://127.0.0.1:5001"


@pytest.fixture(scope="session")
def kubo_available():
    """Check if local Kubo daemon is running. Skip tier2 tests if not."""
    try:
        r = httpx.post(f"{KUBO_RPC_URL}/api/v0/id", timeout=3)
        if r.status_code == 200:
            return True
        pytest.skip("Kubo daemon not available at localhost:5001")
    except (httpx.ConnectError, httpx.TimeoutException):
        pytest.skip("Kubo daemon not available at localhost:5001")


@pytest.fixture
async def surrogate_cid(kubo_available):
    """Add surrogate content to Kubo without pinning it. Returns its CID."""
    content = b"pinning-aggregation-test-alpha"
    async with httpx.AsyncClient() as client:
        resp = await client.post(
            f"{KUBO_RPC_URL}/api/v0/add",
            params={"pin": "false"},
            files={"file": ("test.txt", content)},
        )
        cid = resp.json()["Hash"]
        yield cid
        # Teardown: clean up pin if the test left one
        await client.post(f"{KUBO_RPC_URL}/api/v0/pin/rm", params={"arg": cid})


@pytest.fixture
async def kubo_context(kubo_available):
    """PinningContext carrying a host-managed connection to the real Kubo."""
    client = KuboClient(KUBO_RPC_URL, timeout=10)
    yield PinningContext(ipfs=client, kubo_timeout=10)
    await client.aclose()
