import logging

from hostel_web.schemas.rooms import (
    Bed,
    CreateBedRequest,
    CreateRoomRequest,
    Room,
    RoomWithBeds,
    UpdateRoomRequest,
)
from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/api/admin/dashboard"
MANAGE_ROOM_PATH = f"{DASHBOARD_PATH}/manageRoom"
MANAGE_BED_PATH = f"{DASHBOARD_PATH}/manageBed"


class AdminRoomService(HostelApiService):
    async def get_all_rooms(self) -> list[Room]:
        resp = await self._request("GET", f"{MANAGE_ROOM_PATH}/getAllRooms")
        rooms = [Room(**r) for r in self._json_records(resp)]
        logger.info("Fetched %d rooms", len(rooms))
        return rooms

    async def get_room_with_beds(self, room_id: str) -> RoomWithBeds:
        resp = await self._request(
            "GET", f"{MANAGE_ROOM_PATH}/getRoomWithBeds", params={"room_id": room_id}
        )
        return RoomWithBeds(**self._json_object(resp))

    async def create_room_with_beds(self, request: CreateRoomRequest) -> None:
        await self._request(
            "POST", f"{MANAGE_ROOM_PATH}/createRoomWithBeds", json=request.model_dump()
        )
        logger.info("Created room %s with %d beds", request.roomNumber, request.bedCount)

    async def update_room(self, room_id: str, request: UpdateRoomRequest) -> None:
        body = request.model_copy(update={"roomId": room_id}).model_dump()
        await self._request(
            "PUT", f"{MANAGE_ROOM_PATH}/updateRoom", json=body, params={"room_id": room_id}
        )
        logger.info("Updated room %s", room_id)

    async def delete_room(self, room_id: str) -> None:
        await self._request(
            "DELETE", f"{MANAGE_ROOM_PATH}/deleteRoom", params={"room_id": room_id}
        )
        logger.info("Deleted room %s", room_id)

    async def get_beds_by_room(self, room_id: str) -> list[Bed]:
        resp = await self._request(
            "GET", f"{MANAGE_BED_PATH}/getBedsByRoomId", params={"room_id": room_id}
        )
        return [Bed(**b) for b in self._json_records(resp)]

    async def add_bed(self, room_id: str, request: CreateBedRequest) -> None:
        body = {**request.model_dump(), "roomId": room_id}
        await self._request(
            "POST", f"{MANAGE_BED_PATH}/addBed", json=body, params={"room_id": room_id}
        )
        logger.info("Added bed %s to room %s", request.bedNumber, room_id)
