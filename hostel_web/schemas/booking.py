from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class BookingStatus(StrEnum):
    Booked = "Booked"
    Cancelled = "Cancelled"
    Completed = "Completed"


class PaymentMethod(StrEnum):
    credit = "credit"
    paypal = "paypal"
    applepay = "applepay"
    googlepay = "googlepay"


ENABLED_PAYMENT_METHODS = frozenset({PaymentMethod.credit})


class SearchCriteria(BaseModel):
    model_config = {"frozen": True}

    check_in: date | None = None
    check_out: date | None = None
    guests: int = 1


class BookingDraft(BaseModel):
    room_type: str | None = None
    check_in: date | None = None
    check_out: date | None = None
    guests: int = 1
    first_name: str = ""
    last_name: str = ""
    dob: date | None = None
    email: str = ""
    phone: str = ""
    payment_method: PaymentMethod = PaymentMethod.credit
    cardholder: str = ""
    card_number: str = ""
    expiry: str = ""  # MM/YY
    cvv: str = ""


class DraftUpdate(BaseModel):
    """Partial update of a draft; only fields that are set are applied."""

    room_type: str | None = None
    check_in: date | None = None
    check_out: date | None = None
    guests: int | None = Field(default=None, ge=1)
    first_name: str | None = None
    last_name: str | None = None
    dob: date | None = None
    email: str | None = None
    phone: str | None = None
    payment_method: PaymentMethod | None = None
    cardholder: str | None = None
    card_number: str | None = Field(default=None, max_length=16)
    expiry: str | None = Field(default=None, max_length=5)
    cvv: str | None = Field(default=None, max_length=4)

    @field_validator("payment_method")
    @classmethod
    def _payment_method_enabled(cls, value: PaymentMethod | None) -> PaymentMethod | None:
        if value is not None and value not in ENABLED_PAYMENT_METHODS:
            raise ValueError(f"Payment method '{value}' is not available yet")
        return value


class CreateBookingRequest(BaseModel):
    customerFirstName: str
    customerLastName: str
    customerEmail: str
    customerPhone: str
    customerDateOfBirth: date | None = None
    roomNumber: str | None = None
    checkInDate: date | None = None
    checkOutDate: date | None = None
    totalPrice: float


class BookingConfirmation(BaseModel):
    bookingId: int | None = None
    customerFullName: str | None = None
    roomNumber: str | None = None
    checkInDate: date | None = None
    checkOutDate: date | None = None
    totalPrice: float | None = None
    paymentId: str | None = None


class AdminBooking(BaseModel):
    bookingId: int
    customerFullName: str | None = None
    customerEmail: str | None = None
    roomNumber: str | None = None
    bedNumber: str | None = None
    bookingStatus: BookingStatus | None = None
    checkInDate: date | None = None
    checkOutDate: date | None = None
    createdAt: datetime | None = None
    totalPrice: float | None = None
