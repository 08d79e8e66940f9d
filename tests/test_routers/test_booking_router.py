import json

import httpx
import respx
from httpx import Response

from hostel_web.services.availability import AVAILABLE_ROOMS_PATH
from hostel_web.services.contact import SEND_SMS_PATH
from hostel_web.services.user_booking import CREATE_BOOKING_PATH

BASE = "http://backend.test"

CRITERIA = {"check_in": "2024-06-01", "check_out": "2024-06-03", "guests": 2}

GUEST = {
    "first_name": "Ana",
    "last_name": "Silva",
    "dob": "1995-03-02",
    "email": "ana@example.com",
    "phone": "+351900000000",
    "cardholder": "ANA SILVA",
    "card_number": "4111111111111111",
    "expiry": "12/27",
    "cvv": "123",
}

CONFIRMATION = {
    "bookingId": 42,
    "customerFullName": "Ana Silva",
    "roomNumber": "RN1",
    "checkInDate": "2024-06-01",
    "checkOutDate": "2024-06-03",
    "totalPrice": 100,
    "paymentId": "PAY-1",
}


def _mock_availability(categories=("RN1", "RN3")):
    return respx.get(f"{BASE}{AVAILABLE_ROOMS_PATH}").mock(
        return_value=Response(200, json=list(categories))
    )


async def _open(client, **body):
    resp = await client.post("/booking/drafts", json=body)
    assert resp.status_code == 201
    return resp.json()


# --- showcase & availability ---


async def test_showcase_rooms(client):
    resp = await client.get("/rooms")

    assert resp.status_code == 200
    rooms = resp.json()
    assert [r["number"] for r in rooms] == ["RN1", "RN2", "RN3"]
    assert [r["price"] for r in rooms] == [25, 20, 15]


@respx.mock
async def test_available_rooms(client):
    route = _mock_availability()

    resp = await client.get(
        "/rooms/available",
        params={"check_in": "2024-06-01", "check_out": "2024-06-03", "guests": 2},
    )

    assert resp.status_code == 200
    assert resp.json() == ["RN1", "RN3"]
    assert route.calls.last.request.url.params["guests"] == "2"


async def test_available_rooms_rejects_zero_guests(client):
    resp = await client.get(
        "/rooms/available",
        params={"check_in": "2024-06-01", "check_out": "2024-06-03", "guests": 0},
    )
    assert resp.status_code == 422


@respx.mock
async def test_available_rooms_backend_error(client):
    respx.get(f"{BASE}{AVAILABLE_ROOMS_PATH}").mock(return_value=Response(500, text="boom"))

    resp = await client.get(
        "/rooms/available",
        params={"check_in": "2024-06-01", "check_out": "2024-06-03", "guests": 1},
    )

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Hostel API error: boom"


# --- drafts ---


async def test_open_empty_draft(client):
    draft = await _open(client)

    assert draft["draft"]["guests"] == 1
    assert draft["draft"]["payment_method"] == "credit"
    assert draft["availability"]["status"] == "idle"
    assert draft["price"]["total"] == 0
    methods = {m["method"]: m["enabled"] for m in draft["payment_methods"]}
    assert methods == {"credit": True, "paypal": False, "applepay": False, "googlepay": False}


@respx.mock
async def test_open_draft_with_criteria(client):
    _mock_availability()

    draft = await _open(client, criteria=CRITERIA)

    assert draft["draft"]["room_type"] == "RN1"
    assert draft["availability"]["status"] == "available"
    assert draft["price"]["total"] == 100
    assert draft["room_label"] == "2-Bed Room"


@respx.mock
async def test_open_draft_with_selected_room(client):
    _mock_availability()

    draft = await _open(client, criteria=CRITERIA, selected_room="RN3")

    assert draft["draft"]["room_type"] == "RN3"
    assert draft["price"]["total"] == 60


async def test_get_unknown_draft(client):
    resp = await client.get("/booking/drafts/doesnotexist")
    assert resp.status_code == 404


async def test_update_draft_marks_touched(client):
    draft = await _open(client)

    resp = await client.patch(
        f"/booking/drafts/{draft['draft_id']}", json={"first_name": "Ana", "guests": 3}
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["draft"]["first_name"] == "Ana"
    assert body["draft"]["guests"] == 3
    assert body["touched"] == ["first_name", "guests"]


async def test_update_draft_rejects_disabled_payment_method(client):
    draft = await _open(client)

    resp = await client.patch(
        f"/booking/drafts/{draft['draft_id']}", json={"payment_method": "paypal"}
    )
    assert resp.status_code == 422


@respx.mock
async def test_criteria_change_keeps_user_edits(client):
    _mock_availability()
    draft = await _open(client, criteria=CRITERIA)
    draft_id = draft["draft_id"]

    await client.patch(f"/booking/drafts/{draft_id}", json={"check_in": "2024-06-02"})
    resp = await client.put(
        f"/booking/drafts/{draft_id}/criteria",
        json={"check_in": "2024-07-01", "check_out": "2024-07-04", "guests": 4},
    )

    body = resp.json()
    assert body["draft"]["check_in"] == "2024-06-02"
    assert body["draft"]["check_out"] == "2024-07-04"
    assert body["draft"]["guests"] == 4


@respx.mock
async def test_criteria_change_availability_failure(client):
    respx.get(f"{BASE}{AVAILABLE_ROOMS_PATH}").mock(
        side_effect=[Response(200, json=["RN1"]), Response(503, text="down")]
    )
    draft = await _open(client, criteria=CRITERIA)

    resp = await client.put(
        f"/booking/drafts/{draft['draft_id']}/criteria", json={**CRITERIA, "guests": 3}
    )

    assert resp.status_code == 200
    assert resp.json()["availability"]["status"] == "failed"
    assert resp.json()["availability"]["categories"] == []


@respx.mock
async def test_room_selection_applied_on_next_criteria(client):
    _mock_availability()
    draft = await _open(client, criteria=CRITERIA)
    draft_id = draft["draft_id"]

    resp = await client.post(
        f"/booking/drafts/{draft_id}/room-selection", json={"room_number": "RN2"}
    )
    assert resp.json()["draft"]["room_type"] == "RN1"

    resp = await client.put(f"/booking/drafts/{draft_id}/criteria", json={**CRITERIA, "guests": 1})
    assert resp.json()["draft"]["room_type"] == "RN2"


# --- submission ---


@respx.mock
async def test_submit_success(admin_client):
    from hostel_web.main import app

    client = admin_client
    _mock_availability()
    booking = respx.post(f"{BASE}{CREATE_BOOKING_PATH}").mock(
        return_value=Response(200, json=CONFIRMATION)
    )
    sms = respx.post(f"{BASE}{SEND_SMS_PATH}").mock(return_value=Response(200))

    draft = await _open(client, criteria=CRITERIA)
    draft_id = draft["draft_id"]
    await client.patch(f"/booking/drafts/{draft_id}", json=GUEST)

    resp = await client.post(f"/booking/drafts/{draft_id}/submit")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "confirmed"
    assert body["confirmation"]["bookingId"] == 42
    assert body["draft"]["draft"]["first_name"] == ""
    assert body["draft"]["confirmation"]["paymentId"] == "PAY-1"

    sent = json.loads(booking.calls.last.request.content)
    assert sent["customerFirstName"] == "Ana"
    assert sent["roomNumber"] == "RN1"
    assert sent["checkInDate"] == "2024-06-01"
    assert sent["totalPrice"] == 100

    await app.state.outbox.wait_idle()
    assert sms.call_count == 1
    assert "Total: €100" in json.loads(sms.calls.last.request.content)["message"]

    outbox = await client.get("/admin/outbox")
    assert outbox.status_code == 200
    [entry] = outbox.json()
    assert entry["booking_id"] == 42
    assert entry["status"] == "delivered"


@respx.mock
async def test_submit_rejected_by_backend(client):
    _mock_availability()
    respx.post(f"{BASE}{CREATE_BOOKING_PATH}").mock(
        return_value=Response(409, text="No beds available")
    )

    draft = await _open(client, criteria=CRITERIA)
    draft_id = draft["draft_id"]
    await client.patch(f"/booking/drafts/{draft_id}", json=GUEST)

    resp = await client.post(f"/booking/drafts/{draft_id}/submit")

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Booking failed: No beds available"

    kept = await client.get(f"/booking/drafts/{draft_id}")
    assert kept.json()["draft"]["first_name"] == "Ana"
    assert kept.json()["submitting"] is False


@respx.mock
async def test_submit_backend_unreachable(client):
    respx.post(f"{BASE}{CREATE_BOOKING_PATH}").mock(side_effect=httpx.ConnectError("refused"))

    draft = await _open(client)
    resp = await client.post(f"/booking/drafts/{draft['draft_id']}/submit")

    assert resp.status_code == 502
    assert resp.json()["detail"] == "An error occurred. Please try again."


async def test_submit_unknown_draft(client):
    resp = await client.post("/booking/drafts/nope/submit")
    assert resp.status_code == 404


@respx.mock
async def test_submit_unreadable_confirmation(client):
    _mock_availability()
    respx.post(f"{BASE}{CREATE_BOOKING_PATH}").mock(return_value=Response(200, json=["ok"]))

    draft = await _open(client, criteria=CRITERIA)
    draft_id = draft["draft_id"]
    await client.patch(f"/booking/drafts/{draft_id}", json=GUEST)

    resp = await client.post(f"/booking/drafts/{draft_id}/submit")

    assert resp.status_code == 502
    assert resp.json()["detail"] == "An error occurred. Please try again."

    kept = (await client.get(f"/booking/drafts/{draft_id}")).json()
    assert kept["draft"]["first_name"] == "Ana"
    assert kept["draft"]["room_type"] == "RN1"
    assert kept["confirmation"] is None
    assert kept["submitting"] is False


@respx.mock
async def test_pending_room_selection_visible_until_applied(client):
    _mock_availability()
    draft = await _open(client, criteria=CRITERIA)
    draft_id = draft["draft_id"]
    assert draft["selected_room"] is None

    resp = await client.post(
        f"/booking/drafts/{draft_id}/room-selection", json={"room_number": "RN2"}
    )
    assert resp.json()["selected_room"] == "RN2"

    resp = await client.put(f"/booking/drafts/{draft_id}/criteria", json={**CRITERIA, "guests": 1})
    assert resp.json()["selected_room"] is None
    assert resp.json()["draft"]["room_type"] == "RN2"
