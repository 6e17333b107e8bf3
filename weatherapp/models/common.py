"""Common time helpers shared across models."""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Map an IANA zone name to a tzinfo. None means the system local zone."""
    if not name:
        return None
    return ZoneInfo(name)


def local_now(tz: tzinfo | None = None) -> datetime:
    """Wall-clock time in the viewer's zone (system local when tz is None)."""
    if tz is None:
        return datetime.now().astimezone()
    return datetime.now(tz)
