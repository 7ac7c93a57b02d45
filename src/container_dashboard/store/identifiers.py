"""Id and timestamp sources for new records."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4


def new_id() -> str:
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def later_than(previous: datetime) -> datetime:
    """Current time, bumped past ``previous`` when the clock has not advanced."""
    now = utc_now()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now
