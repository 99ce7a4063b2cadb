from datetime import datetime, timedelta, timezone
from email.utils import format_datetime


def utc_now() -> datetime:
    """Default clock for crawls and profiling: the current time, UTC-aware."""
    return datetime.now(timezone.utc)


def format_rfc1123(value: datetime) -> str:
    """Format `value` as an RFC 1123 date, e.g. ``Tue, 20 Oct 2026 08:15:00 GMT``.

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def format_duration(duration: timedelta) -> str:
    """Render a duration as ``{minutes}m {seconds}s {millis}ms``."""
    total_ms = duration // timedelta(milliseconds=1)
    if total_ms < 0:
        total_ms = 0
    minutes, rest = divmod(total_ms, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes}m {seconds}s {millis}ms"
