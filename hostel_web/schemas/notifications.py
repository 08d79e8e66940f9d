from datetime import date, datetime

from pydantic import BaseModel


class Notification(BaseModel):
    id: int
    title: str | None = None
    message: str | None = None
    isRead: bool = False
    createdAt: datetime | None = None
    customerFullName: str | None = None
    roomNumber: str | None = None
    bedNumber: str | None = None
    checkInDate: date | None = None
    checkOutDate: date | None = None
    totalPrice: float | None = None
