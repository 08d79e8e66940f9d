from hostel_web.schemas.payments import Payment
from hostel_web.services.base import HostelApiService

MANAGE_PAYMENT_PATH = "/api/admin/dashboard/managePayment"


class AdminPaymentService(HostelApiService):
    async def get_all_payments_sorted(self) -> list[Payment]:
        resp = await self._request("GET", f"{MANAGE_PAYMENT_PATH}/allSorted")
        return [Payment(**p) for p in self._json_records(resp)]
