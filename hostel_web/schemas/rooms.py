from enum import StrEnum

from pydantic import BaseModel


class RoomCategory(StrEnum):
    RN1 = "RN1"
    RN2 = "RN2"
    RN3 = "RN3"


class ShowcaseRoom(BaseModel):
    number: RoomCategory
    type: str
    capacity: str
    beds: str
    price: int  # EUR per night
    image: str
    description: str


class BedRef(BaseModel):
    bedNumber: str | None = None


class Bed(BaseModel):
    bedId: str | None = None
    bedNumber: str | None = None
    roomId: str | None = None


class Room(BaseModel):
    roomId: str
    roomNumber: str | None = None
    floor: int | None = None
    capacity: int | None = None
    beds: list[Bed] = []


class RoomWithBeds(BaseModel):
    roomId: str
    roomNumber: str | None = None
    capacity: int | None = None
    floor: int | None = None
    beds: list[BedRef] = []


class CreateRoomRequest(BaseModel):
    roomNumber: str
    floor: int
    capacity: int
    bedCount: int


class UpdateRoomRequest(BaseModel):
    roomId: str | None = None
    roomNumber: str
    floor: int
    capacity: int


class CreateBedRequest(BaseModel):
    bedId: str | None = None
    bedNumber: str
