"""Protocol interfaces for pinning_aggregation components."""

from pinning_aggregation.interfaces.pinning import Pinning, PinningStatic

__all__ = ["Pinning", "PinningStatic"]
