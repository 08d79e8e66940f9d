import logging

from hostel_web.schemas.contact import ContactMessage, ContactRequest
from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

CONTACT_PATH = "/api/contact"
SEND_EMAIL_PATH = f"{CONTACT_PATH}/send-email"
SEND_SMS_PATH = f"{CONTACT_PATH}/send-sms"
ALL_MESSAGES_PATH = f"{CONTACT_PATH}/all"
UNREAD_MESSAGES_PATH = f"{CONTACT_PATH}/unread"
MARK_AS_READ_PATH = f"{CONTACT_PATH}/mark-as-read"


class ContactService(HostelApiService):
    async def send_email(self, request: ContactRequest) -> None:
        await self._request("POST", SEND_EMAIL_PATH, json=request.model_dump())
        logger.info("Contact message sent for %s", request.email)

    async def send_sms(self, request: ContactRequest) -> None:
        await self._request("POST", SEND_SMS_PATH, json=request.model_dump())
        logger.info("SMS notification sent for %s", request.email)

    async def get_all_messages(self) -> list[ContactMessage]:
        resp = await self._request("GET", ALL_MESSAGES_PATH)
        return [ContactMessage(**m) for m in self._json_records(resp)]

    async def get_unread_messages(self) -> list[ContactMessage]:
        resp = await self._request("GET", UNREAD_MESSAGES_PATH)
        return [ContactMessage(**m) for m in self._json_records(resp)]

    async def mark_as_read(self, message_id: int) -> None:
        await self._request("PUT", f"{MARK_AS_READ_PATH}/{message_id}")
        logger.info("Marked contact message %s as read", message_id)
