"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from pinning_aggregation.models.config import AggregationConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "PINNING_AGGREGATION_",
) -> AggregationConfig:
    """Load aggregation configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (PINNING_AGGREGATION_CONNECTION_STRINGS, etc.)
        2. TOML config file
        3. Defaults from AggregationConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = AggregationConfig()

    # ── Aggregation section ────────────────────────────────
    aggregation = raw.get("aggregation", {})
    if v := aggregation.get("connection_strings"):
        cfg.connection_strings = [str(s) for s in v]
    if v := aggregation.get("log_level"):
        cfg.log_level = str(v)

    # ── IPFS section ───────────────────────────────────────
    ipfs = raw.get("ipfs", {})
    if v := ipfs.get("timeout"):
        cfg.ipfs_timeout = float(v)
    if v := ipfs.get("context_url"):
        cfg.ipfs_context_url = str(v)

    # ── Environment variable overrides (highest priority) ──
    if strings := os.environ.get(f"{env_prefix}CONNECTION_STRINGS"):
        cfg.connection_strings = [s.strip() for s in strings.split(",") if s.strip()]
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level
    if url := os.environ.get(f"{env_prefix}IPFS_CONTEXT_URL"):
        cfg.ipfs_context_url = url

    return cfg
