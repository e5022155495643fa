"""Timezone utilities for rendering a sampled instant.

This module provides the formatting helpers used to build time payloads.
All helpers are pure: they take an already-sampled datetime and never read
the clock themselves.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from email.utils import format_datetime

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Normalize a datetime to UTC.

    Args:
        dt: Datetime to normalize

    Returns:
        datetime: Datetime in UTC; naive datetimes are assumed to be UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def utc_offset_minutes(dt: datetime, tz: tzinfo) -> int:
    """Get the UTC offset of a zone at a given instant, in whole minutes.

    Positive values are east of UTC. Sub-minute offsets are truncated toward zero.

    Args:
        dt: Instant at which to evaluate the offset
        tz: Zone to evaluate

    Returns:
        int: Offset in minutes
    """
    offset = ensure_utc(dt).astimezone(tz).utcoffset() or timedelta(0)
    return int(offset.total_seconds() / 60)


def format_utc_offset(minutes: int) -> str:
    """Format an offset in minutes as ``+HH:MM`` or ``-HH:MM``.

    A zero offset renders as ``+00:00``.

    Args:
        minutes: Offset in minutes, positive east of UTC

    Returns:
        str: Signed, zero-padded offset string
    """
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def to_epoch_millis(dt: datetime) -> int:
    """Get the integer number of milliseconds since the Unix epoch."""
    return (ensure_utc(dt) - EPOCH) // timedelta(milliseconds=1)


def to_local_iso(dt: datetime, offset_minutes: int) -> str:
    """Render an instant as local wall-clock ISO-8601 with an explicit offset.

    The wall clock is the UTC instant shifted by ``offset_minutes``, rendered
    with millisecond precision and suffixed with the formatted offset instead
    of ``Z``.

    Args:
        dt: Instant to render
        offset_minutes: Local UTC offset in minutes

    Returns:
        str: e.g. ``2024-05-01T14:03:07.123+02:00``
    """
    wall_clock = ensure_utc(dt) + timedelta(minutes=offset_minutes)
    rendered = wall_clock.replace(tzinfo=None).isoformat(timespec="milliseconds")
    return rendered + format_utc_offset(offset_minutes)


def to_rfc1123(dt: datetime) -> str:
    """Render an instant as an RFC-1123 UTC string, e.g. ``Wed, 01 May 2024 12:03:07 GMT``."""
    return format_datetime(ensure_utc(dt), usegmt=True)
