import logging

from hostel_web.schemas.customers import Customer, UpdateCustomerRequest
from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

MANAGE_CUSTOMER_PATH = "/api/admin/dashboard/manageCustomer"


class AdminCustomerService(HostelApiService):
    async def get_all_customers(self) -> list[Customer]:
        resp = await self._request("GET", f"{MANAGE_CUSTOMER_PATH}/findAll")
        customers = [Customer(**c) for c in self._json_records(resp)]
        logger.info("Fetched %d customers", len(customers))
        return customers

    async def update_customer(self, request: UpdateCustomerRequest) -> None:
        await self._request(
            "PUT", f"{MANAGE_CUSTOMER_PATH}/updateCustomer", json=request.to_payload()
        )
        logger.info("Updated customer %s", request.customerId)
