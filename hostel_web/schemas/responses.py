from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel

from hostel_web.schemas.booking import BookingConfirmation, BookingDraft, PaymentMethod, SearchCriteria
from hostel_web.schemas.contact import ContactMessage
from hostel_web.schemas.notifications import Notification


class AvailabilityStatus(StrEnum):
    idle = "idle"
    loading = "loading"
    available = "available"
    none = "none"  # confirmed zero availability
    failed = "failed"  # couldn't check


class AvailabilityView(BaseModel):
    status: AvailabilityStatus
    categories: list[str] = []
    labels: dict[str, str] = {}


class PaymentMethodOption(BaseModel):
    method: PaymentMethod
    label: str
    enabled: bool


class PriceBreakdown(BaseModel):
    nights: int
    guests: int
    nightly_rate: int
    total: int
    summary: str | None = None  # only set when the total is displayable


class DraftView(BaseModel):
    draft_id: str
    draft: BookingDraft
    criteria: SearchCriteria | None = None
    touched: list[str] = []
    room_label: str | None = None
    selected_room: str | None = None  # showcase pick applied on the next criteria change
    price: PriceBreakdown
    availability: AvailabilityView
    payment_methods: list[PaymentMethodOption]
    submitting: bool = False
    confirmation: BookingConfirmation | None = None


class ContactSentResponse(BaseModel):
    status: str  # "sent"
    message: str


class NotificationItem(BaseModel):
    notification: Notification
    received: str  # "Just now" | "N minute(s) ago" | ...


class NotificationsPanel(BaseModel):
    items: list[NotificationItem] = []
    total: int = 0
    error: str | None = None


class MessagesPanel(BaseModel):
    items: list[ContactMessage] = []
    total: int = 0
    unread: int = 0
    error: str | None = None


class DashboardOverview(BaseModel):
    generated_at: datetime
    notifications: NotificationsPanel
    messages: MessagesPanel


class AdminSessionResponse(BaseModel):
    success: bool
    admin_id: int | None = None
    message: str | None = None
