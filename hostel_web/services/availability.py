import logging
from datetime import date

from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

AVAILABLE_ROOMS_PATH = "/api/user/rooms/available"


class AvailabilityService(HostelApiService):
    async def fetch_available(self, check_in: date, check_out: date, guests: int) -> list[str]:
        """Room categories with free capacity for the stay, in backend order."""
        params = {
            "checkIn": check_in.isoformat(),
            "checkOut": check_out.isoformat(),
            "guests": guests,
        }
        resp = await self._request("GET", AVAILABLE_ROOMS_PATH, params=params)

        categories = [c for c in self._json_list(resp) if isinstance(c, str)]
        logger.info(
            "Availability %s..%s for %d guest(s): %s",
            params["checkIn"], params["checkOut"], guests, categories or "none",
        )
        return categories
