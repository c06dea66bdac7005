"""Value types shared by the aggregator and its backends."""

from __future__ import annotations

from collections import UserString
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pinning_aggregation.ipfs.client import KuboClient

CidString = str
Designator = str
CidList = dict[CidString, list[Designator]]
PinningInfo = dict[str, Any]


class CID(UserString):
    """Content identifier, compared and hashed by its string form."""

    def __repr__(self):
        return f"{self.__class__.__name__}({self.data})"


@dataclass
class PinningContext:
    """Host-managed resources handed to every backend constructor."""

    ipfs: KuboClient | None = None
    kubo_timeout: float = 30  # seconds, for clients a backend opens itself
