import logging

from hostel_web.schemas.notifications import Notification
from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

MANAGE_NOTIFICATIONS_PATH = "/api/admin/dashboard/manageNotifications"


class AdminNotificationService(HostelApiService):
    async def get_all_notifications(self) -> list[Notification]:
        resp = await self._request("GET", MANAGE_NOTIFICATIONS_PATH)
        return [Notification(**n) for n in self._json_records(resp)]

    async def mark_as_read(self, notification_id: int) -> None:
        await self._request("PATCH", f"{MANAGE_NOTIFICATIONS_PATH}/{notification_id}/markAsRead")
        logger.info("Marked notification %s as read", notification_id)
