import pytest
import respx
from httpx import Response

from hostel_web.exceptions.custom import HostelApiError
from hostel_web.schemas.auth import AdminLoginRequest
from hostel_web.services.admin_auth import ADMIN_LOGIN_PATH, AdminAuthService

URL = f"http://backend.test{ADMIN_LOGIN_PATH}"
CREDENTIALS = AdminLoginRequest(username="admin", password="secret")


@respx.mock
@pytest.mark.asyncio
async def test_login_success(backend):
    respx.post(URL).mock(
        return_value=Response(200, json={"success": True, "adminId": 1, "message": "Welcome"})
    )

    result = await AdminAuthService(backend).login(CREDENTIALS)

    assert result.success is True
    assert result.adminId == 1


@respx.mock
@pytest.mark.asyncio
async def test_login_rejected_with_200(backend):
    respx.post(URL).mock(
        return_value=Response(200, json={"success": False, "message": "Invalid credentials"})
    )

    result = await AdminAuthService(backend).login(CREDENTIALS)

    assert result.success is False
    assert result.message == "Invalid credentials"


@respx.mock
@pytest.mark.asyncio
async def test_login_rejected_with_401_json(backend):
    respx.post(URL).mock(
        return_value=Response(401, json={"success": True, "message": "Invalid credentials"})
    )

    result = await AdminAuthService(backend).login(CREDENTIALS)

    assert result.success is False
    assert result.message == "Invalid credentials"


@respx.mock
@pytest.mark.asyncio
async def test_login_rejected_with_plain_text(backend):
    respx.post(URL).mock(return_value=Response(403, text="Forbidden"))

    result = await AdminAuthService(backend).login(CREDENTIALS)

    assert result.success is False
    assert result.message == "Forbidden"


@respx.mock
@pytest.mark.asyncio
async def test_login_server_error_propagates(backend):
    respx.post(URL).mock(return_value=Response(500, text="db down"))

    with pytest.raises(HostelApiError):
        await AdminAuthService(backend).login(CREDENTIALS)


@respx.mock
@pytest.mark.asyncio
async def test_login_unreadable_200_body(backend):
    respx.post(URL).mock(return_value=Response(200, text="<html>oops</html>"))

    result = await AdminAuthService(backend).login(CREDENTIALS)

    assert result.success is False
    assert result.message is None


@respx.mock
@pytest.mark.asyncio
async def test_login_non_object_200_body(backend):
    respx.post(URL).mock(return_value=Response(200, json=["ok"]))

    result = await AdminAuthService(backend).login(CREDENTIALS)

    assert result.success is False
    assert result.adminId is None
