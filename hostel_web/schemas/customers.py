from datetime import date, datetime

from pydantic import BaseModel


class Customer(BaseModel):
    customerId: str
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    phone: str | None = None
    dateOfBirth: date | None = None
    registeredAt: datetime | None = None
    roomNumber: str | None = None
    bedNumber: str | None = None


class RoomLink(BaseModel):
    roomId: str | None = None


class BedLink(BaseModel):
    bedId: str | None = None


class UpdateCustomerRequest(BaseModel):
    customerId: str | None = None
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    phone: str | None = None
    dateOfBirth: date | None = None
    roomNumber: str | None = None
    bedNumber: str | None = None
    roomId: str | None = None
    bedId: str | None = None

    def to_payload(self) -> dict:
        """Backend expects room/bed as nested references."""
        payload = self.model_dump(mode="json", exclude={"roomId", "bedId"})
        payload["room"] = RoomLink(roomId=self.roomId).model_dump()
        payload["bed"] = BedLink(bedId=self.bedId).model_dump()
        return payload
