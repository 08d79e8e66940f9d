from hostel_web.schemas.booking import ENABLED_PAYMENT_METHODS, PaymentMethod
from hostel_web.schemas.responses import PaymentMethodOption
from hostel_web.schemas.rooms import RoomCategory, ShowcaseRoom

ROOM_LABELS: dict[str, str] = {
    RoomCategory.RN1: "2-Bed Room",
    RoomCategory.RN2: "4-Bed Room",
    RoomCategory.RN3: "6-Bed Room",
}

PAYMENT_METHOD_LABELS: dict[PaymentMethod, str] = {
    PaymentMethod.credit: "Credit/Debit Card",
    PaymentMethod.paypal: "PayPal",
    PaymentMethod.applepay: "Apple Pay",
    PaymentMethod.googlepay: "Google Pay",
}

SHOWCASE_ROOMS: list[ShowcaseRoom] = [
    ShowcaseRoom(
        number=RoomCategory.RN1,
        type="2-Bed Room",
        capacity="2 Guests",
        beds="2 Beds",
        price=25,
        image="/public/2-bed.jpeg",
        description=(
            "Perfect for solo travelers or couples. Offers privacy, comfort, "
            "and modern design as well as private bathroom."
        ),
    ),
    ShowcaseRoom(
        number=RoomCategory.RN2,
        type="4-Bed Room",
        capacity="4 Guests",
        beds="4 Beds",
        price=20,
        image="/public/4-bed.jpg",
        description=(
            "Ideal for backpackers or small groups. Each bed has individual "
            "lockers and lights. Common room is great for socializing with "
            "other travellers. Bathrooms and toilets are shared."
        ),
    ),
    ShowcaseRoom(
        number=RoomCategory.RN3,
        type="6-Bed Room",
        capacity="6 Guests",
        beds="6 Beds",
        price=15,
        image="/public/6-bed.jpg",
        description=(
            "Great for large groups or budget travelers. Spacious and clean "
            "with a cozy vibe. Bathrooms and toilets are shared."
        ),
    ),
]


def room_label(room_type: str | None) -> str | None:
    """Human label for a category; unknown identifiers are shown as-is."""
    if not room_type:
        return None
    return ROOM_LABELS.get(room_type, room_type)


def payment_method_options() -> list[PaymentMethodOption]:
    return [
        PaymentMethodOption(
            method=method,
            label=PAYMENT_METHOD_LABELS[method],
            enabled=method in ENABLED_PAYMENT_METHODS,
        )
        for method in PaymentMethod
    ]
