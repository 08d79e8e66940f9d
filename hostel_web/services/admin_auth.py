import json
import logging

from hostel_web.exceptions.custom import HostelApiError
from hostel_web.schemas.auth import AdminLoginRequest, AdminLoginResponse
from hostel_web.services.base import HostelApiService

logger = logging.getLogger(__name__)

ADMIN_LOGIN_PATH = "/api/admin/login"

_REJECTED_STATUSES = (400, 401, 403)


class AdminAuthService(HostelApiService):
    async def login(self, request: AdminLoginRequest) -> AdminLoginResponse:
        """Bad credentials come back as success=false, either with a 200 or
        with a 4xx carrying the same body."""
        try:
            resp = await self._request("POST", ADMIN_LOGIN_PATH, json=request.model_dump())
        except HostelApiError as exc:
            if exc.status_code not in _REJECTED_STATUSES:
                raise
            result = self._parse_rejection(exc.message)
        else:
            result = self._parse_reply(resp.text)

        if result.success:
            logger.info("Admin %s logged in (adminId=%s)", request.username, result.adminId)
        else:
            logger.warning("Admin login rejected for %s: %s", request.username, result.message)
        return result

    @staticmethod
    def _parse_reply(body: str) -> AdminLoginResponse:
        # An unreadable 2xx body is a failed login with no backend message
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError):
            return AdminLoginResponse(success=False)
        if not isinstance(data, dict):
            return AdminLoginResponse(success=False)
        return AdminLoginResponse(**data)

    @staticmethod
    def _parse_rejection(body: str) -> AdminLoginResponse:
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError):
            return AdminLoginResponse(success=False, message=body or None)
        if not isinstance(data, dict):
            return AdminLoginResponse(success=False, message=body or None)
        return AdminLoginResponse(**{**data, "success": False})
