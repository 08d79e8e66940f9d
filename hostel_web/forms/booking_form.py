"""Booking intent form: draft state, availability lookup and submission.

One instance per open booking view. State changes only through the methods
below; derived values (nights, rate, total) are recomputed on every read.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from hostel_web.exceptions.custom import (
    BookingSubmissionError,
    HostelApiError,
    RateLimitError,
    SubmissionInProgressError,
)
from hostel_web.mappers.booking_message import build_booking_notification
from hostel_web.mappers.pricing import compute_total, price_breakdown
from hostel_web.mappers.room_catalog import ROOM_LABELS, payment_method_options, room_label
from hostel_web.outbox import NotificationOutbox
from hostel_web.schemas.booking import (
    BookingConfirmation,
    BookingDraft,
    CreateBookingRequest,
    DraftUpdate,
    SearchCriteria,
)
from hostel_web.schemas.responses import AvailabilityStatus, AvailabilityView, DraftView
from hostel_web.services.availability import AvailabilityService
from hostel_web.services.user_booking import UserBookingService

logger = logging.getLogger(__name__)

SEEDED_FIELDS = ("check_in", "check_out", "guests")

# Draft fields that accept None; None for any other field means "leave as is"
_NULLABLE_FIELDS = {"room_type", "check_in", "check_out", "dob"}

GENERIC_FAILURE_MESSAGE = "An error occurred. Please try again."


class RoomSelectionSignal:
    """Single-slot hand-off of a room picked on the showcase."""

    def __init__(self) -> None:
        self._room_type: str | None = None

    @property
    def pending(self) -> str | None:
        return self._room_type

    def set(self, room_type: str) -> None:
        self._room_type = room_type

    def consume(self) -> str | None:
        room_type, self._room_type = self._room_type, None
        return room_type


class BookingIntentForm:
    def __init__(
        self,
        draft_id: str,
        availability: AvailabilityService,
        bookings: UserBookingService,
        outbox: NotificationOutbox,
        selection: RoomSelectionSignal | None = None,
    ) -> None:
        self.draft_id = draft_id
        self.selection = selection or RoomSelectionSignal()
        self.draft = BookingDraft()
        self.criteria: SearchCriteria | None = None
        self.confirmation: BookingConfirmation | None = None
        self.availability_status = AvailabilityStatus.idle
        self.available_categories: list[str] = []
        self.created_at = datetime.now(timezone.utc)

        self._availability = availability
        self._bookings = bookings
        self._outbox = outbox
        self._touched: set[str] = set()
        self._query_seq = 0
        self._submitting = False

    # --- derived state ---

    @property
    def touched(self) -> frozenset[str]:
        return frozenset(self._touched)

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def total(self) -> int:
        d = self.draft
        return compute_total(d.check_in, d.check_out, d.room_type, d.guests)

    def view(self) -> DraftView:
        return DraftView(
            draft_id=self.draft_id,
            draft=self.draft.model_copy(),
            criteria=self.criteria,
            touched=sorted(self._touched),
            room_label=room_label(self.draft.room_type),
            selected_room=self.selection.pending,
            price=price_breakdown(self.draft),
            availability=AvailabilityView(
                status=self.availability_status,
                categories=list(self.available_categories),
                labels={c: ROOM_LABELS.get(c, c) for c in self.available_categories},
            ),
            payment_methods=payment_method_options(),
            submitting=self._submitting,
            confirmation=self.confirmation,
        )

    # --- inputs ---

    async def mount(self, criteria: SearchCriteria | None = None) -> None:
        self._apply_selection()
        if criteria is not None:
            await self.apply_criteria(criteria)

    async def apply_criteria(self, criteria: SearchCriteria) -> None:
        """Seed untouched stay fields from the search widget and re-query
        availability. Re-applying equal criteria is a no-op."""
        if criteria == self.criteria:
            return
        self.criteria = criteria
        self._seed(criteria)
        self._apply_selection()
        await self.refresh_availability(criteria)

    def update(self, changes: DraftUpdate) -> None:
        values = changes.model_dump(exclude_unset=True)
        applied = {
            field: value
            for field, value in values.items()
            if value is not None or field in _NULLABLE_FIELDS
        }
        if not applied:
            return
        self.draft = self.draft.model_copy(update=applied)
        self._touched.update(applied)

    def reset(self) -> None:
        self.draft = BookingDraft()
        self._touched.clear()

    def _seed(self, criteria: SearchCriteria) -> None:
        seeded = {
            "check_in": criteria.check_in,
            "check_out": criteria.check_out,
            "guests": criteria.guests if criteria.guests > 0 else 1,
        }
        updates = {k: seeded[k] for k in SEEDED_FIELDS if k not in self._touched}
        if updates:
            self.draft = self.draft.model_copy(update=updates)

    def _apply_selection(self) -> None:
        room_type = self.selection.consume()
        if room_type:
            logger.info("Draft %s pre-selected room %s", self.draft_id, room_type)
            self.draft = self.draft.model_copy(update={"room_type": room_type})

    # --- availability ---

    async def refresh_availability(self, criteria: SearchCriteria) -> None:
        if not criteria.check_in or not criteria.check_out or criteria.guests < 1:
            logger.debug("Draft %s: incomplete search criteria, skipping availability", self.draft_id)
            return

        self._query_seq += 1
        seq = self._query_seq
        self.availability_status = AvailabilityStatus.loading

        try:
            categories = await self._availability.fetch_available(
                criteria.check_in, criteria.check_out, criteria.guests
            )
        except (HostelApiError, RateLimitError) as exc:
            if seq != self._query_seq:
                logger.debug("Draft %s: discarding stale availability failure #%d", self.draft_id, seq)
                return
            logger.error("Draft %s: availability lookup failed: %s", self.draft_id, exc)
            self.available_categories = []
            self.availability_status = AvailabilityStatus.failed
            return

        if seq != self._query_seq:
            logger.debug("Draft %s: discarding stale availability result #%d", self.draft_id, seq)
            return

        self.available_categories = categories
        self.availability_status = (
            AvailabilityStatus.available if categories else AvailabilityStatus.none
        )
        if categories and not self.draft.room_type:
            self.draft = self.draft.model_copy(update={"room_type": categories[0]})
            logger.debug("Draft %s auto-selected room %s", self.draft_id, categories[0])

    # --- submission ---

    def build_payload(self) -> CreateBookingRequest:
        d = self.draft
        return CreateBookingRequest(
            customerFirstName=d.first_name,
            customerLastName=d.last_name,
            customerEmail=d.email,
            customerPhone=d.phone,
            customerDateOfBirth=d.dob,
            roomNumber=d.room_type,
            checkInDate=d.check_in,
            checkOutDate=d.check_out,
            totalPrice=self.total,
        )

    async def submit(self) -> BookingConfirmation:
        if self._submitting:
            raise SubmissionInProgressError(self.draft_id)

        self._submitting = True
        try:
            payload = self.build_payload()
            guests = self.draft.guests
            try:
                confirmation = await self._bookings.create_booking(payload)
            except RateLimitError as exc:
                raise BookingSubmissionError(
                    "Booking failed: too many requests, please try again later", status_code=429
                ) from exc
            except HostelApiError as exc:
                if exc.status_code is None:
                    logger.error("Draft %s: booking request failed: %s", self.draft_id, exc)
                    raise BookingSubmissionError(GENERIC_FAILURE_MESSAGE) from exc
                raise BookingSubmissionError(
                    f"Booking failed: {exc.message}", status_code=exc.status_code
                ) from exc
            except ValueError as exc:
                logger.exception("Draft %s: unreadable booking confirmation", self.draft_id)
                raise BookingSubmissionError(GENERIC_FAILURE_MESSAGE) from exc

            self.confirmation = confirmation
            self.reset()

            entry = self._outbox.enqueue(
                build_booking_notification(payload, guests),
                booking_id=confirmation.bookingId,
            )
            self._outbox.schedule_delivery(entry.entry_id)
            return confirmation
        finally:
            self._submitting = False
