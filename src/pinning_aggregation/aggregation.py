"""Pinning aggregation - one pinning contract fanned out over many backends."""

from __future__ import annotations

import inspect
import logging
from typing import Sequence

from pinning_aggregation.connection import designator_of
from pinning_aggregation.dispatch import all_succeed, best_effort
from pinning_aggregation.errors import UnknownPinningService
from pinning_aggregation.identity import aggregation_id
from pinning_aggregation.interfaces.pinning import Pinning, PinningStatic
from pinning_aggregation.models.records import CID, CidList, PinningContext, PinningInfo

log = logging.getLogger(__name__)


def find_pinner(designator: str | None, pinners: Sequence[PinningStatic]) -> PinningStatic:
    """First registered variant declaring the designator."""
    for pinner in pinners:
        if pinner.designator == designator:
            return pinner
    raise UnknownPinningService(designator)


def _warn_on_duplicates(pinners: Sequence[PinningStatic]) -> None:
    seen: set[str] = set()
    for pinner in pinners:
        if pinner.designator in seen:
            log.warning(
                "Designator %r registered more than once, first registration wins",
                pinner.designator,
            )
        seen.add(pinner.designator)


class PinningAggregation:
    """Multitude of pinning services united.

    Every operation is dispatched to all backends concurrently. open, close,
    pin, ls and info succeed only if every backend succeeds; unpin is best
    effort and never raises.
    """

    def __init__(self, backends: Sequence[Pinning]) -> None:
        self.backends: tuple[Pinning, ...] = tuple(backends)
        self.id = aggregation_id(b.id for b in self.backends)

    @classmethod
    async def build(
        cls,
        context: PinningContext,
        connection_strings: Sequence[str],
        pinners: Sequence[PinningStatic] = (),
    ) -> PinningAggregation:
        """Resolve every connection string to a backend variant and construct it.

        All strings are resolved before any backend is constructed, so an
        unknown designator fails the build without side effects.
        """
        _warn_on_duplicates(pinners)
        found = [
            (s, find_pinner(designator_of(s), pinners)) for s in connection_strings
        ]

        backends: list[Pinning] = []
        for connection_string, pinner in found:
            backend = pinner.build(connection_string, context)
            if inspect.isawaitable(backend):
                backend = await backend
            log.debug("Resolved %s backend %s", pinner.designator, backend.id)
            backends.append(backend)

        return cls(backends)

    async def open(self) -> None:
        """Open all the services. Every call should succeed."""
        await all_succeed(b.open() for b in self.backends)
        log.info("Opened %d pinning backends", len(self.backends))

    async def close(self) -> None:
        """Close all the services. Every call should succeed."""
        await all_succeed(b.close() for b in self.backends)

    async def pin(self, cid: CID | str) -> None:
        """Pin on every service. Every call should succeed; no rollback."""
        await all_succeed(b.pin(cid) for b in self.backends)
        log.info("Pinned %s on %d backends", cid, len(self.backends))

    async def unpin(self, cid: CID | str) -> None:
        """Unpin from every service. Individual failures do not propagate."""
        failures = await best_effort(b.unpin(cid) for b in self.backends)
        if failures:
            log.warning(
                "Unpin of %s failed on %d of %d backends",
                cid, len(failures), len(self.backends),
            )
            for exc in failures:
                log.debug("Unpin failure for %s: %r", cid, exc)

    async def ls(self) -> CidList:
        """List pinned CIDs, each with the ids of every backend reporting it."""
        per_backend = await all_succeed(b.ls() for b in self.backends)
        result: CidList = {}
        for listing in per_backend:
            for cid, designators in listing.items():
                result.setdefault(cid, []).extend(designators)
        return result

    async def info(self) -> PinningInfo:
        per_backend = await all_succeed(b.info() for b in self.backends)
        result: PinningInfo = {}
        for info in per_backend:
            result.update(info)
        return result
