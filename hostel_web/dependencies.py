from typing import Annotated

from fastapi import Depends, Request

from hostel_web.config import Settings
from hostel_web.exceptions.custom import NotAuthenticatedError
from hostel_web.forms.store import DraftStore
from hostel_web.outbox import NotificationOutbox
from hostel_web.services.admin_auth import AdminAuthService
from hostel_web.services.admin_bookings import AdminBookingService
from hostel_web.services.admin_customers import AdminCustomerService
from hostel_web.services.admin_notifications import AdminNotificationService
from hostel_web.services.admin_payments import AdminPaymentService
from hostel_web.services.admin_rooms import AdminRoomService
from hostel_web.services.availability import AvailabilityService
from hostel_web.services.contact import ContactService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_draft_store(request: Request) -> DraftStore:
    return request.app.state.draft_store


def get_outbox(request: Request) -> NotificationOutbox:
    return request.app.state.outbox


def get_availability_service(request: Request) -> AvailabilityService:
    return request.app.state.availability_service


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
DraftStoreDep = Annotated[DraftStore, Depends(get_draft_store)]
OutboxDep = Annotated[NotificationOutbox, Depends(get_outbox)]
AvailabilityDep = Annotated[AvailabilityService, Depends(get_availability_service)]
ContactDep = Annotated[ContactService, Depends(get_contact_service)]


def get_admin_auth_service(request: Request) -> AdminAuthService:
    return request.app.state.admin_auth_service


def get_admin_booking_service(request: Request) -> AdminBookingService:
    return request.app.state.admin_booking_service


def get_admin_customer_service(request: Request) -> AdminCustomerService:
    return request.app.state.admin_customer_service


def get_admin_room_service(request: Request) -> AdminRoomService:
    return request.app.state.admin_room_service


def get_admin_payment_service(request: Request) -> AdminPaymentService:
    return request.app.state.admin_payment_service


def get_admin_notification_service(request: Request) -> AdminNotificationService:
    return request.app.state.admin_notification_service


AdminAuthDep = Annotated[AdminAuthService, Depends(get_admin_auth_service)]
AdminBookingDep = Annotated[AdminBookingService, Depends(get_admin_booking_service)]
AdminCustomerDep = Annotated[AdminCustomerService, Depends(get_admin_customer_service)]
AdminRoomDep = Annotated[AdminRoomService, Depends(get_admin_room_service)]
AdminPaymentDep = Annotated[AdminPaymentService, Depends(get_admin_payment_service)]
AdminNotificationDep = Annotated[AdminNotificationService, Depends(get_admin_notification_service)]


def current_admin_id(request: Request) -> str | None:
    return request.cookies.get(request.app.state.settings.admin_cookie_name) or None


def require_admin(request: Request) -> str:
    """Presence of the adminId cookie admits the caller; there is no expiry."""
    admin_id = current_admin_id(request)
    if admin_id is None:
        raise NotAuthenticatedError()
    return admin_id


AdminIdDep = Annotated[str, Depends(require_admin)]
