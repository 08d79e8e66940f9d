import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from hostel_web.dependencies import (
    AdminAuthDep,
    AdminBookingDep,
    AdminCustomerDep,
    AdminIdDep,
    AdminNotificationDep,
    AdminPaymentDep,
    AdminRoomDep,
    ContactDep,
    OutboxDep,
    SettingsDep,
    current_admin_id,
)
from hostel_web.exceptions.custom import HostelApiError, RateLimitError
from hostel_web.mappers.dashboard import (
    newest_messages_first,
    preview,
    sort_notifications,
    time_ago,
)
from hostel_web.outbox import OutboxEntry
from hostel_web.schemas.auth import AdminLoginRequest
from hostel_web.schemas.booking import AdminBooking, CreateBookingRequest
from hostel_web.schemas.contact import ContactMessage
from hostel_web.schemas.customers import Customer, UpdateCustomerRequest
from hostel_web.schemas.notifications import Notification
from hostel_web.schemas.payments import Payment
from hostel_web.schemas.responses import (
    AdminSessionResponse,
    DashboardOverview,
    MessagesPanel,
    NotificationItem,
    NotificationsPanel,
)
from hostel_web.schemas.rooms import (
    Bed,
    CreateBedRequest,
    CreateRoomRequest,
    Room,
    RoomWithBeds,
    UpdateRoomRequest,
)
from hostel_web.services.admin_notifications import AdminNotificationService
from hostel_web.services.contact import ContactService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

LOGIN_FAILED_MESSAGE = "Login failed. Please try again."


# --- session ---


@router.get("/login")
async def login_page(request: Request):
    if current_admin_id(request):
        return RedirectResponse(url="/admin/dashboard", status_code=303)
    return {"authenticated": False}


@router.post("/login", response_model=AdminSessionResponse)
async def login(credentials: AdminLoginRequest, service: AdminAuthDep, settings: SettingsDep):
    try:
        result = await service.login(credentials)
    except (HostelApiError, RateLimitError) as exc:
        logger.error("Admin login error: %s", exc)
        return JSONResponse(
            status_code=401,
            content=AdminSessionResponse(success=False, message=LOGIN_FAILED_MESSAGE).model_dump(),
        )

    if not result.success or result.adminId is None:
        return JSONResponse(
            status_code=401,
            content=AdminSessionResponse(
                success=False, message=result.message or LOGIN_FAILED_MESSAGE
            ).model_dump(),
        )

    response = JSONResponse(
        content=AdminSessionResponse(
            success=True, admin_id=result.adminId, message=result.message
        ).model_dump()
    )
    response.set_cookie(settings.admin_cookie_name, str(result.adminId), httponly=True)
    return response


@router.post("/logout")
async def logout(settings: SettingsDep):
    response = RedirectResponse(url="/admin/login", status_code=303)
    response.delete_cookie(settings.admin_cookie_name)
    return response


# --- dashboard overview ---


async def _notifications_panel(
    service: AdminNotificationService, show_all: bool, now: datetime
) -> NotificationsPanel:
    try:
        notifications = sort_notifications(await service.get_all_notifications())
    except (HostelApiError, RateLimitError) as exc:
        logger.error("Error fetching notifications: %s", exc)
        return NotificationsPanel(error="Failed to load notifications.")

    return NotificationsPanel(
        items=[
            NotificationItem(notification=n, received=time_ago(n.createdAt, now))
            for n in preview(notifications, show_all)
        ],
        total=len(notifications),
    )


async def _messages_panel(service: ContactService, show_all: bool) -> MessagesPanel:
    try:
        messages = newest_messages_first(await service.get_all_messages())
    except (HostelApiError, RateLimitError) as exc:
        logger.error("Error fetching contact messages: %s", exc)
        return MessagesPanel(error="Failed to fetch messages.")

    return MessagesPanel(
        items=preview(messages, show_all),
        total=len(messages),
        unread=sum(1 for m in messages if not m.isRead),
    )


@router.get("/dashboard", response_model=DashboardOverview)
async def dashboard(
    _admin_id: AdminIdDep,
    notifications: AdminNotificationDep,
    contact: ContactDep,
    show_all: bool = False,
) -> DashboardOverview:
    now = datetime.now(timezone.utc)
    notifications_panel, messages_panel = await asyncio.gather(
        _notifications_panel(notifications, show_all, now),
        _messages_panel(contact, show_all),
    )
    return DashboardOverview(
        generated_at=now,
        notifications=notifications_panel,
        messages=messages_panel,
    )


# --- bookings ---


@router.get("/bookings", response_model=list[AdminBooking])
async def list_bookings(_admin_id: AdminIdDep, service: AdminBookingDep) -> list[AdminBooking]:
    return await service.get_all_bookings()


@router.post("/bookings", response_model=list[AdminBooking], status_code=201)
async def create_booking(
    booking: CreateBookingRequest, _admin_id: AdminIdDep, service: AdminBookingDep
) -> list[AdminBooking]:
    await service.create_booking(booking)
    return await service.get_all_bookings()


@router.put("/bookings/{booking_id}", response_model=list[AdminBooking])
async def update_booking(
    booking_id: int, booking: AdminBooking, _admin_id: AdminIdDep, service: AdminBookingDep
) -> list[AdminBooking]:
    await service.update_booking(booking.model_copy(update={"bookingId": booking_id}))
    return await service.get_all_bookings()


@router.delete("/bookings/{booking_id}", response_model=list[AdminBooking])
async def delete_booking(
    booking_id: int, _admin_id: AdminIdDep, service: AdminBookingDep
) -> list[AdminBooking]:
    await service.delete_booking(booking_id)
    return await service.get_all_bookings()


# --- customers ---


@router.get("/customers", response_model=list[Customer])
async def list_customers(_admin_id: AdminIdDep, service: AdminCustomerDep) -> list[Customer]:
    return await service.get_all_customers()


@router.put("/customers/{customer_id}", response_model=list[Customer])
async def update_customer(
    customer_id: str,
    customer: UpdateCustomerRequest,
    _admin_id: AdminIdDep,
    service: AdminCustomerDep,
) -> list[Customer]:
    await service.update_customer(customer.model_copy(update={"customerId": customer_id}))
    return await service.get_all_customers()


# --- rooms & beds ---


@router.get("/rooms", response_model=list[Room])
async def list_rooms(_admin_id: AdminIdDep, service: AdminRoomDep) -> list[Room]:
    return await service.get_all_rooms()


@router.get("/rooms/{room_id}", response_model=RoomWithBeds)
async def get_room(room_id: str, _admin_id: AdminIdDep, service: AdminRoomDep) -> RoomWithBeds:
    return await service.get_room_with_beds(room_id)


@router.post("/rooms", response_model=list[Room], status_code=201)
async def create_room(
    room: CreateRoomRequest, _admin_id: AdminIdDep, service: AdminRoomDep
) -> list[Room]:
    await service.create_room_with_beds(room)
    return await service.get_all_rooms()


@router.put("/rooms/{room_id}", response_model=list[Room])
async def update_room(
    room_id: str, room: UpdateRoomRequest, _admin_id: AdminIdDep, service: AdminRoomDep
) -> list[Room]:
    await service.update_room(room_id, room)
    return await service.get_all_rooms()


@router.delete("/rooms/{room_id}", response_model=list[Room])
async def delete_room(room_id: str, _admin_id: AdminIdDep, service: AdminRoomDep) -> list[Room]:
    await service.delete_room(room_id)
    return await service.get_all_rooms()


@router.get("/rooms/{room_id}/beds", response_model=list[Bed])
async def list_beds(room_id: str, _admin_id: AdminIdDep, service: AdminRoomDep) -> list[Bed]:
    return await service.get_beds_by_room(room_id)


@router.post("/rooms/{room_id}/beds", response_model=RoomWithBeds, status_code=201)
async def add_bed(
    room_id: str, bed: CreateBedRequest, _admin_id: AdminIdDep, service: AdminRoomDep
) -> RoomWithBeds:
    await service.add_bed(room_id, bed)
    return await service.get_room_with_beds(room_id)


# --- payments ---


@router.get("/payments", response_model=list[Payment])
async def list_payments(_admin_id: AdminIdDep, service: AdminPaymentDep) -> list[Payment]:
    return await service.get_all_payments_sorted()


# --- notifications & contact messages ---


@router.get("/notifications", response_model=list[Notification])
async def list_notifications(
    _admin_id: AdminIdDep, service: AdminNotificationDep
) -> list[Notification]:
    return sort_notifications(await service.get_all_notifications())


@router.patch("/notifications/{notification_id}/read", response_model=list[Notification])
async def mark_notification_read(
    notification_id: int, _admin_id: AdminIdDep, service: AdminNotificationDep
) -> list[Notification]:
    await service.mark_as_read(notification_id)
    return sort_notifications(await service.get_all_notifications())


@router.get("/messages", response_model=list[ContactMessage])
async def list_messages(
    _admin_id: AdminIdDep, service: ContactDep, unread_only: bool = False
) -> list[ContactMessage]:
    if unread_only:
        return newest_messages_first(await service.get_unread_messages())
    return newest_messages_first(await service.get_all_messages())


@router.put("/messages/{message_id}/read", response_model=list[ContactMessage])
async def mark_message_read(
    message_id: int, _admin_id: AdminIdDep, service: ContactDep
) -> list[ContactMessage]:
    await service.mark_as_read(message_id)
    return newest_messages_first(await service.get_all_messages())


# --- notification outbox ---


@router.get("/outbox", response_model=list[OutboxEntry])
async def list_outbox(_admin_id: AdminIdDep, outbox: OutboxDep) -> list[OutboxEntry]:
    return outbox.entries()


@router.post("/outbox/retry", status_code=202)
async def retry_outbox(_admin_id: AdminIdDep, outbox: OutboxDep) -> dict:
    tasks = outbox.retry_failed()
    return {"rescheduled": len(tasks)}
