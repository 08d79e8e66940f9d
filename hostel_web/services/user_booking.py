import logging

from hostel_web.schemas.booking import BookingConfirmation, CreateBookingRequest
from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

CREATE_BOOKING_PATH = "/api/user/bookings/createBooking"


class UserBookingService(HostelApiService):
    async def create_booking(self, payload: CreateBookingRequest) -> BookingConfirmation:
        resp = await self._request(
            "POST", CREATE_BOOKING_PATH, json=payload.model_dump(mode="json")
        )
        confirmation = BookingConfirmation(**self._json_object(resp))
        logger.info(
            "Created booking %s for room %s (payment %s)",
            confirmation.bookingId, confirmation.roomNumber, confirmation.paymentId,
        )
        return confirmation
