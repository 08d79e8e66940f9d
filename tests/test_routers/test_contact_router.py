import json

import respx
from httpx import Response

from hostel_web.services.contact import SEND_EMAIL_PATH

BASE = "http://backend.test"

MESSAGE = {"name": "Ana", "email": "ana@example.com", "message": "Do you have lockers?"}


@respx.mock
async def test_contact_sent(client):
    route = respx.post(f"{BASE}{SEND_EMAIL_PATH}").mock(return_value=Response(200))

    resp = await client.post("/contact", json=MESSAGE)

    assert resp.status_code == 200
    assert resp.json() == {"status": "sent", "message": "Message sent successfully!"}
    assert json.loads(route.calls.last.request.content) == MESSAGE


@respx.mock
async def test_contact_backend_failure(client):
    respx.post(f"{BASE}{SEND_EMAIL_PATH}").mock(return_value=Response(500, text="smtp down"))

    resp = await client.post("/contact", json=MESSAGE)

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Failed to send message. Please try again."


async def test_contact_requires_all_fields(client):
    resp = await client.post("/contact", json={**MESSAGE, "message": ""})
    assert resp.status_code == 422
