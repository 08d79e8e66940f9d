"""Pure helpers for the admin dashboard overview panels."""

from datetime import datetime, timezone

from hostel_web.schemas.contact import ContactMessage
from hostel_web.schemas.notifications import Notification

PANEL_PREVIEW_SIZE = 5

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _as_utc(value: datetime | None) -> datetime:
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def time_ago(timestamp: datetime | None, now: datetime | None = None) -> str:
    if timestamp is None:
        return "-"
    now = _as_utc(now or datetime.now(timezone.utc))
    diff = now - _as_utc(timestamp)

    minutes = int(diff.total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes} minute(s) ago"
    if hours < 24:
        return f"{hours} hour(s) ago"
    return f"{days} day(s) ago"


def sort_notifications(notifications: list[Notification]) -> list[Notification]:
    """Newest first; notifications without a timestamp sink to the bottom."""
    return sorted(notifications, key=lambda n: _as_utc(n.createdAt), reverse=True)


def newest_messages_first(messages: list[ContactMessage]) -> list[ContactMessage]:
    # Backend returns messages in insertion order
    return list(reversed(messages))


def preview(items: list, show_all: bool) -> list:
    return list(items) if show_all else list(items[:PANEL_PREVIEW_SIZE])

