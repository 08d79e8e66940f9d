import uuid

from hostel_web.forms.booking_form import BookingIntentForm
from hostel_web.outbox import NotificationOutbox
from hostel_web.schemas.booking import SearchCriteria
from hostel_web.services.availability import AvailabilityService
from hostel_web.services.user_booking import UserBookingService


class DraftStore:
    """Open booking forms, keyed by draft id. Oldest drafts are evicted first."""

    def __init__(
        self,
        availability: AvailabilityService,
        bookings: UserBookingService,
        outbox: NotificationOutbox,
        max_drafts: int = 1000,
    ) -> None:
        self._availability = availability
        self._bookings = bookings
        self._outbox = outbox
        self._max_drafts = max_drafts
        self._forms: dict[str, BookingIntentForm] = {}

    def __len__(self) -> int:
        return len(self._forms)

    def _evict(self) -> None:
        if len(self._forms) <= self._max_drafts:
            return
        # Never evict a form with a submission in flight
        candidates = sorted(
            (f for f in self._forms.values() if not f.submitting),
            key=lambda f: f.created_at,
        )
        while len(self._forms) > self._max_drafts and candidates:
            self._forms.pop(candidates.pop(0).draft_id, None)

    async def open_draft(
        self,
        criteria: SearchCriteria | None = None,
        selected_room: str | None = None,
    ) -> BookingIntentForm:
        form = BookingIntentForm(
            draft_id=uuid.uuid4().hex[:12],
            availability=self._availability,
            bookings=self._bookings,
            outbox=self._outbox,
        )
        if selected_room:
            form.selection.set(selected_room)
        self._forms[form.draft_id] = form
        self._evict()
        await form.mount(criteria)
        return form

    def get(self, draft_id: str) -> BookingIntentForm | None:
        return self._forms.get(draft_id)
