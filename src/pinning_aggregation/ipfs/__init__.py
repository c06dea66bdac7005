"""IPFS backend: Kubo RPC client and the `ipfs` pinning variant."""

from pinning_aggregation.ipfs.client import KuboClient
from pinning_aggregation.ipfs.pinning import IpfsPinning, FROM_CONTEXT_HOST

__all__ = ["KuboClient", "IpfsPinning", "FROM_CONTEXT_HOST"]
