"""Uniform pinning over several content-addressed storage services."""

from pinning_aggregation.aggregation import PinningAggregation, find_pinner
from pinning_aggregation.connection import designator_of
from pinning_aggregation.errors import (
    InvalidConnectionString,
    NoIpfsInstanceError,
    PinningError,
    UnknownPinningService,
)
from pinning_aggregation.interfaces import Pinning, PinningStatic
from pinning_aggregation.models import CID, CidList, PinningContext, PinningInfo

__all__ = [
    "PinningAggregation", "find_pinner", "designator_of",
    "PinningError", "UnknownPinningService", "InvalidConnectionString", "NoIpfsInstanceError",
    "Pinning", "PinningStatic",
    "CID", "CidList", "PinningContext", "PinningInfo",
]
