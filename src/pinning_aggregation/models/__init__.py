"""Data models for pinning_aggregation."""

from pinning_aggregation.models.records import (
    CID,
    CidList,
    CidString,
    Designator,
    PinningContext,
    PinningInfo,
)
from pinning_aggregation.models.config import AggregationConfig

__all__ = [
    "CID", "CidList", "CidString", "Designator", "PinningContext", "PinningInfo",
    "AggregationConfig",
]
