"""
Display helpers for session listings.
"""

from datetime import datetime, timezone
from typing import Optional


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_session_title(created_at: datetime, now: Optional[datetime] = None) -> str:
    """
    Human-friendly label for a session based on its age.

    Examples: "3:05 PM" (today), "Yesterday", "Tuesday", "Mar 4", "Dec 30, 2023".
    """
    created_at = _as_utc(created_at)
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    diff_hours = (now - created_at).total_seconds() / 3600

    if diff_hours < 24:
        hour = created_at.hour % 12 or 12
        period = "AM" if created_at.hour < 12 else "PM"
        return f"{hour}:{created_at.minute:02d} {period}"
    if diff_hours < 48:
        return "Yesterday"
    if diff_hours < 24 * 7:
        return created_at.strftime("%A")

    title = f"{created_at.strftime('%b')} {created_at.day}"
    if created_at.year != now.year:
        title += f", {created_at.year}"
    return title
