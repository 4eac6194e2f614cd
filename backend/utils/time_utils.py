from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Server-side 'now' in UTC (naive, canonical)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """
    Return the zone that defines calendar days for reporting.

    - None / "" -> None, meaning the server's local time rules
    - IANA name (e.g. "Europe/Warsaw") -> that zone
    """
    if not name:
        return None
    return ZoneInfo(name)


def start_of_day(now: datetime, tz: Optional[tzinfo]) -> datetime:
    """
    Midnight of the day containing `now` in zone `tz`, as UTC-naive.

    `now` is UTC-naive (as produced by utcnow()). With tz=None the system
    local rules are used, so the offset at midnight is looked up for
    midnight itself, not copied from `now` (they differ on DST change days).
    """
    aware_now = now.replace(tzinfo=timezone.utc)
    if tz is None:
        local_midnight = aware_now.astimezone().replace(
            tzinfo=None, hour=0, minute=0, second=0, microsecond=0
        ).astimezone()
    else:
        local_midnight = aware_now.astimezone(tz).replace(hour=0, minute=0, second=0, microsecond=0)
    return local_midnight.astimezone(timezone.utc).replace(tzinfo=None)


def to_utc_z(dt: Optional[datetime]) -> Optional[str]:
    """
    Serializes datetime to ISO-8601 with trailing 'Z'.
    If dt is naive, it is treated as UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
