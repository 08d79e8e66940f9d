from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel

from hostel_web.exceptions.custom import HostelApiError, RateLimitError
from hostel_web.schemas.contact import ContactRequest
from hostel_web.services.contact import ContactService

logger = logging.getLogger(__name__)


class DeliveryStatus(StrEnum):
    pending = "pending"
    delivering = "delivering"
    delivered = "delivered"
    failed = "failed"


class OutboxEntry(BaseModel):
    entry_id: str
    status: DeliveryStatus
    created_at: datetime
    request: ContactRequest
    booking_id: int | None = None
    attempts: int = 0
    last_error: str | None = None
    delivered_at: datetime | None = None


class NotificationOutbox:
    """Post-booking notifications, delivered in the background with retry.

    Delivery never reports back to the booking flow; entries are inspected
    through the outbox itself.
    """

    def __init__(
        self,
        contact: ContactService,
        max_attempts: int = 3,
        retry_delay: float = 2.0,
        max_entries: int = 1000,
    ) -> None:
        self._contact = contact
        self._max_attempts = max(max_attempts, 1)
        self._retry_delay = retry_delay
        self._max_entries = max_entries
        self._entries: dict[str, OutboxEntry] = {}
        self._tasks: set[asyncio.Task] = set()

    def _evict(self) -> None:
        if len(self._entries) <= self._max_entries:
            return
        # Remove oldest settled entries first
        candidates = sorted(
            (e for e in self._entries.values()
             if e.status in (DeliveryStatus.delivered, DeliveryStatus.failed)),
            key=lambda e: e.created_at,
        )
        while len(self._entries) > self._max_entries and candidates:
            self._entries.pop(candidates.pop(0).entry_id, None)

    def enqueue(self, request: ContactRequest, booking_id: int | None = None) -> OutboxEntry:
        entry = OutboxEntry(
            entry_id=uuid.uuid4().hex[:12],
            status=DeliveryStatus.pending,
            created_at=datetime.now(timezone.utc),
            request=request,
            booking_id=booking_id,
        )
        self._entries[entry.entry_id] = entry
        self._evict()
        return entry

    def get_entry(self, entry_id: str) -> OutboxEntry | None:
        return self._entries.get(entry_id)

    def entries(self, status: DeliveryStatus | None = None) -> list[OutboxEntry]:
        items = sorted(self._entries.values(), key=lambda e: e.created_at)
        if status is None:
            return items
        return [e for e in items if e.status == status]

    def schedule_delivery(self, entry_id: str) -> asyncio.Task:
        task = asyncio.create_task(self.deliver(entry_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def deliver(self, entry_id: str) -> OutboxEntry | None:
        entry = self._entries.get(entry_id)
        if entry is None or entry.status in (DeliveryStatus.delivered, DeliveryStatus.delivering):
            return entry

        entry.status = DeliveryStatus.delivering
        for attempt in range(1, self._max_attempts + 1):
            entry.attempts += 1
            try:
                await self._contact.send_sms(entry.request)
            except (HostelApiError, RateLimitError) as exc:
                entry.last_error = str(exc)
                logger.warning(
                    "Notification %s attempt %d/%d failed: %s",
                    entry_id, attempt, self._max_attempts, exc,
                )
                if attempt < self._max_attempts:
                    await asyncio.sleep(self._retry_delay * attempt)
                continue

            entry.status = DeliveryStatus.delivered
            entry.delivered_at = datetime.now(timezone.utc)
            entry.last_error = None
            logger.info("Notification %s delivered after %d attempt(s)", entry_id, attempt)
            return entry

        entry.status = DeliveryStatus.failed
        logger.error("Notification %s gave up after %d attempts", entry_id, self._max_attempts)
        return entry

    def retry_failed(self) -> list[asyncio.Task]:
        """Re-schedule every failed entry for another round of attempts."""
        tasks = []
        for entry in self.entries(DeliveryStatus.failed):
            entry.status = DeliveryStatus.pending
            tasks.append(self.schedule_delivery(entry.entry_id))
        return tasks

    async def wait_idle(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
