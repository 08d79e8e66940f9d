"""Pure functions for the booking price shown to the guest.

No I/O, no side effects. The backend owns the authoritative price; this is
the client-side estimate sent along with the booking.
"""

import math
from datetime import date, datetime

from hostel_web.schemas.booking import BookingDraft
from hostel_web.schemas.responses import PriceBreakdown
from hostel_web.schemas.rooms import RoomCategory

# EUR per guest per night
ROOM_PRICES: dict[str, int] = {
    RoomCategory.RN1: 25,
    RoomCategory.RN2: 20,
    RoomCategory.RN3: 15,
}

_SECONDS_PER_DAY = 24 * 3600


def _to_datetime(value: date | datetime | str | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def nights(
    check_in: date | datetime | str | None,
    check_out: date | datetime | str | None,
) -> int:
    """Whole nights between two dates, rounded up. 0 for unset, equal,
    inverted or malformed input."""
    start = _to_datetime(check_in)
    end = _to_datetime(check_out)
    if start is None or end is None:
        return 0
    # Mixed naive/aware values can't be compared
    if (start.tzinfo is None) != (end.tzinfo is None):
        return 0

    seconds = (end - start).total_seconds()
    if seconds <= 0:
        return 0
    return math.ceil(seconds / _SECONDS_PER_DAY)


def nightly_rate(room_type: str | None) -> int:
    if not room_type:
        return 0
    return ROOM_PRICES.get(room_type, 0)


def compute_total(
    check_in: date | datetime | str | None,
    check_out: date | datetime | str | None,
    room_type: str | None,
    guests: int,
) -> int:
    total = nights(check_in, check_out) * nightly_rate(room_type) * guests
    return max(total, 0)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def price_breakdown(draft: BookingDraft) -> PriceBreakdown:
    stay = nights(draft.check_in, draft.check_out)
    rate = nightly_rate(draft.room_type)
    total = compute_total(draft.check_in, draft.check_out, draft.room_type, draft.guests)

    summary = None
    if stay > 0 and rate > 0:
        summary = (
            f"Total ({_plural(stay, 'night')} × {_plural(draft.guests, 'guest')} "
            f"@ €{rate}/night) : €{total}.00"
        )

    return PriceBreakdown(
        nights=stay,
        guests=draft.guests,
        nightly_rate=rate,
        total=total,
        summary=summary,
    )
