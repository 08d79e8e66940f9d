import logging

from hostel_web.schemas.booking import AdminBooking, CreateBookingRequest
from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

MANAGE_BOOKING_PATH = "/api/admin/dashboard/manageBooking"


class AdminBookingService(HostelApiService):
    async def get_all_bookings(self) -> list[AdminBooking]:
        resp = await self._request("GET", f"{MANAGE_BOOKING_PATH}/getAllBookings")
        bookings = [AdminBooking(**b) for b in self._json_records(resp)]
        logger.info("Fetched %d bookings", len(bookings))
        return bookings

    async def create_booking(self, payload: CreateBookingRequest) -> None:
        await self._request(
            "POST",
            f"{MANAGE_BOOKING_PATH}/createBooking",
            json=payload.model_dump(mode="json"),
        )
        logger.info("Created booking for %s", payload.customerEmail)

    async def update_booking(self, booking: AdminBooking) -> None:
        await self._request(
            "PUT",
            f"{MANAGE_BOOKING_PATH}/updateBooking",
            json=booking.model_dump(mode="json"),
        )
        logger.info("Updated booking %s", booking.bookingId)

    async def delete_booking(self, booking_id: int) -> None:
        await self._request("DELETE", f"{MANAGE_BOOKING_PATH}/deleteBooking/{booking_id}")
        logger.info("Deleted booking %s", booking_id)
