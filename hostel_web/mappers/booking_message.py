from hostel_web.schemas.booking import CreateBookingRequest
from hostel_web.schemas.contact import ContactRequest


def _format_price(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.2f}"


def build_booking_notification(payload: CreateBookingRequest, guests: int) -> ContactRequest:
    """Summary sent to staff after a booking is created."""
    full_name = f"{payload.customerFirstName} {payload.customerLastName}".strip()
    lines = [
        "🛏️ New Booking:",
        f"Room: {payload.roomNumber or '-'}",
        f"Guests: {guests}",
        f"Check-in: {payload.checkInDate.isoformat() if payload.checkInDate else '-'}",
        f"Check-out: {payload.checkOutDate.isoformat() if payload.checkOutDate else '-'}",
        f"Total: €{_format_price(payload.totalPrice)}",
    ]
    return ContactRequest(
        name=full_name or "-",
        email=payload.customerEmail or "-",
        message="\n".join(lines),
    )
