"""Utility functions for RFC 3339 timestamps."""

import re
from datetime import datetime

import pytz

_RFC3339_RE = re.compile(
    r"(?P<base>[0-9]{4}-[0-9]{2}-[0-9]{2}[Tt ][0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


def parse_rfc3339(value: str | None) -> datetime | None:
    """Parses an RFC 3339 timestamp into an aware datetime, or None if it can't be parsed."""
    if not value or not isinstance(value, str):
        return None
    match = _RFC3339_RE.fullmatch(value)
    if not match:
        return None

    # fromisoformat only takes 3 or 6 fractional digits on older interpreters
    fraction = (match.group("fraction") or "").ljust(6, "0")[:6]
    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        return datetime.fromisoformat(f"{match.group('base')[:10]}T{match.group('base')[11:]}.{fraction}{offset}")
    except ValueError:
        # Out-of-range fields, e.g. month 13
        return None


def format_rfc3339(dt: datetime) -> str:
    """Formats a datetime as an RFC 3339 UTC string. Naive values are treated as UTC."""
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def utc_now() -> datetime:
    return datetime.now(pytz.utc)
