from datetime import datetime, timedelta, timezone

from hostel_web.mappers.dashboard import (
    PANEL_PREVIEW_SIZE,
    newest_messages_first,
    preview,
    sort_notifications,
    time_ago,
)
from hostel_web.schemas.contact import ContactMessage
from hostel_web.schemas.notifications import Notification

NOW = datetime(2024, 6, 10, 12, 0, tzinfo=timezone.utc)


def test_time_ago_just_now():
    assert time_ago(NOW - timedelta(seconds=30), NOW) == "Just now"


def test_time_ago_minutes():
    assert time_ago(NOW - timedelta(minutes=5), NOW) == "5 minute(s) ago"


def test_time_ago_hours():
    assert time_ago(NOW - timedelta(hours=3, minutes=10), NOW) == "3 hour(s) ago"


def test_time_ago_days():
    assert time_ago(NOW - timedelta(days=2, hours=1), NOW) == "2 day(s) ago"


def test_time_ago_naive_timestamp_treated_as_utc():
    assert time_ago(datetime(2024, 6, 10, 11, 0), NOW) == "1 hour(s) ago"


def test_time_ago_missing():
    assert time_ago(None, NOW) == "-"


def test_sort_notifications_newest_first():
    items = [
        Notification(id=1, createdAt=NOW - timedelta(days=1)),
        Notification(id=2, createdAt=None),
        Notification(id=3, createdAt=NOW),
    ]
    assert [n.id for n in sort_notifications(items)] == [3, 1, 2]


def test_messages_newest_first():
    messages = [ContactMessage(id=i) for i in (1, 2, 3)]
    assert [m.id for m in newest_messages_first(messages)] == [3, 2, 1]


def test_preview_truncates_unless_show_all():
    items = list(range(8))
    assert preview(items, show_all=False) == items[:PANEL_PREVIEW_SIZE]
    assert preview(items, show_all=True) == items
