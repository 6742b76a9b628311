"""UTC clock helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def now_utc_iso() -> str:
    """Current UTC time in RFC 3339 form, whole seconds, with a Z suffix."""
    return now_utc().strftime("%Y-%m-%dT%H:%M:%SZ")