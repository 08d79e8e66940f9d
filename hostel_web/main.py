import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from hostel_web.config import Settings
from hostel_web.exceptions.custom import (
    BookingSubmissionError,
    HostelApiError,
    NotAuthenticatedError,
    RateLimitError,
    SubmissionInProgressError,
)
from hostel_web.exceptions.handlers import (
    booking_submission_error_handler,
    hostel_api_error_handler,
    not_authenticated_handler,
    rate_limit_error_handler,
    submission_in_progress_handler,
)
from hostel_web.forms.store import DraftStore
from hostel_web.outbox import NotificationOutbox
from hostel_web.routers.admin import router as admin_router
from hostel_web.routers.booking import router as booking_router
from hostel_web.routers.contact import router as contact_router
from hostel_web.routers.rooms import router as rooms_router
from hostel_web.services.admin_auth import AdminAuthService
from hostel_web.services.admin_bookings import AdminBookingService
from hostel_web.services.admin_customers import AdminCustomerService
from hostel_web.services.admin_notifications import AdminNotificationService
from hostel_web.services.admin_payments import AdminPaymentService
from hostel_web.services.admin_rooms import AdminRoomService
from hostel_web.services.availability import AvailabilityService
from hostel_web.services.contact import ContactService
from hostel_web.services.user_booking import UserBookingService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(
        base_url=settings.hostel_api_base_url,
        timeout=settings.request_timeout,
    ) as client:
        availability = AvailabilityService(client)
        contact = ContactService(client)

        outbox = NotificationOutbox(
            contact,
            max_attempts=settings.notification_max_attempts,
            retry_delay=settings.notification_retry_delay,
        )

        app.state.settings = settings
        app.state.outbox = outbox
        app.state.availability_service = availability
        app.state.contact_service = contact
        app.state.draft_store = DraftStore(
            availability,
            UserBookingService(client),
            outbox,
            max_drafts=settings.max_drafts,
        )

        app.state.admin_auth_service = AdminAuthService(client)
        app.state.admin_booking_service = AdminBookingService(client)
        app.state.admin_customer_service = AdminCustomerService(client)
        app.state.admin_room_service = AdminRoomService(client)
        app.state.admin_payment_service = AdminPaymentService(client)
        app.state.admin_notification_service = AdminNotificationService(client)

        yield

        # Let in-flight notification deliveries finish before the client closes
        await outbox.wait_idle()


app = FastAPI(title="Hostel Web", lifespan=lifespan)

app.add_exception_handler(HostelApiError, hostel_api_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(BookingSubmissionError, booking_submission_error_handler)
app.add_exception_handler(SubmissionInProgressError, submission_in_progress_handler)
app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)

app.include_router(rooms_router)
app.include_router(booking_router)
app.include_router(contact_router)
app.include_router(admin_router)
