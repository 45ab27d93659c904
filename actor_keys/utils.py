"""
actor_keys.utils
----------------
Small helpers shared by the key record and the fingerprint deriver:
compact JSON, colon-separated hex rendering, and the wire format used for
key expiration timestamps.
"""

from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

INFINITY = "infinity"
EXPIRATION_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def compact_json(obj: Mapping[str, Any]) -> str:
    # Insertion order is kept so the actor field stays first
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def colon_hex(data: bytes) -> str:
    return ":".join(f"{b:02x}" for b in data)


def format_expiration(when: Optional[datetime]) -> str:
    """Render a datetime as an expiration_date value; None means no expiry."""
    if when is None:
        return INFINITY
    if when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    return when.strftime(EXPIRATION_FORMAT)


def parse_expiration(value: str) -> Optional[datetime]:
    if value == INFINITY:
        return None
    return datetime.strptime(value, EXPIRATION_FORMAT).replace(tzinfo=timezone.utc)
