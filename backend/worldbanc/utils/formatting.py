"""Size and timestamp formatting for listing entries."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

UNKNOWN_SIZE = "unknown"
PLACEHOLDER = "-"

JST = timezone(timedelta(hours=9), name="JST")

_BYTE_UNITS = ("B", "KB", "MB", "GB")


def format_readable_bytes(value: Any) -> str:
    """Convert a byte count to a decimal unit string, capped at TB.

    Division truncates: 1999 -> "1 KB". Unusable input is echoed as "<value> B".
    """
    try:
        if value == UNKNOWN_SIZE:
            return "- B"
        amount = value
        for unit in _BYTE_UNITS:
            if amount < 1000:
                return f"{amount} {unit}"
            amount = int(amount // 1000)
        return f"{amount} TB"
    except Exception:
        return f"{value} B"


def format_jst(instant: datetime | float | int | None) -> str:
    """Render an instant as ``YYYY-MM-DD HH:mm`` in UTC+9.

    Accepts a datetime (naive values are taken as host local time) or a POSIX
    timestamp such as ``st_mtime``.
    """
    if instant is None:
        return PLACEHOLDER
    try:
        if isinstance(instant, datetime):
            jst = instant.astimezone(JST)
        else:
            jst = datetime.fromtimestamp(instant, tz=JST)
        return jst.strftime("%Y-%m-%d %H:%M")
    except (TypeError, ValueError, OverflowError, OSError):
        return PLACEHOLDER
