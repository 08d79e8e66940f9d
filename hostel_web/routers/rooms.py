from datetime import date

from fastapi import APIRouter, Query

from hostel_web.dependencies import AvailabilityDep
from hostel_web.mappers.room_catalog import SHOWCASE_ROOMS
from hostel_web.schemas.rooms import ShowcaseRoom

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("", response_model=list[ShowcaseRoom])
async def list_showcase_rooms() -> list[ShowcaseRoom]:
    return SHOWCASE_ROOMS


@router.get("/available", response_model=list[str])
async def available_rooms(
    service: AvailabilityDep,
    check_in: date,
    check_out: date,
    guests: int = Query(default=1, ge=1),
) -> list[str]:
    return await service.fetch_available(check_in, check_out, guests)
