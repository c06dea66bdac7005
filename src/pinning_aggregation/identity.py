"""Deterministic ids for backends and aggregations."""

from __future__ import annotations

import base64
import hashlib
from typing import Iterable


def digest(text: str) -> str:
    """URL-safe base64 of the SHA-256 of text."""
    raw = hashlib.sha256(text.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(raw).decode("ascii")


def backend_id(designator: str, connection_string: str) -> str:
    return f"{designator}@{digest(connection_string)}"


def aggregation_id(backend_ids: Iterable[str]) -> str:
    # Sorted: the same set of backends yields the same id in any order
    joined = "\n".join(sorted(backend_ids))
    return f"pinning-aggregation@{digest(joined)}"
