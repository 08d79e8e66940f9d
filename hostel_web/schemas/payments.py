from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class PaymentType(StrEnum):
    CREDIT_CARD = "CREDIT_CARD"
    CASH = "CASH"
    PAYPAL = "PAYPAL"


class Payment(BaseModel):
    paymentId: str
    bookingId: int | None = None
    paymentType: PaymentType | None = None
    paymentDate: datetime | None = None
    amount: float | None = None
