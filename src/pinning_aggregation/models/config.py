"""Configuration models for the aggregation CLI."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AggregationConfig:
    """Complete aggregation configuration."""

    # Aggregation
    connection_strings: list[str] = field(default_factory=list)
    log_level: str = "info"

    # IPFS
    ipfs_timeout: float = 30  # seconds
    ipfs_context_url: str = ""  # host-managed Kubo RPC for ipfs://__context
