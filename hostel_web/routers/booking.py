import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from hostel_web.dependencies import DraftStoreDep
from hostel_web.forms.booking_form import BookingIntentForm
from hostel_web.forms.store import DraftStore
from hostel_web.schemas.booking import BookingConfirmation, DraftUpdate, SearchCriteria
from hostel_web.schemas.responses import DraftView

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/booking", tags=["booking"])


class OpenDraftRequest(BaseModel):
    criteria: SearchCriteria | None = None
    selected_room: str | None = None


class RoomSelectionRequest(BaseModel):
    room_number: str = Field(min_length=1)


class SubmissionResponse(BaseModel):
    status: str  # "confirmed"
    confirmation: BookingConfirmation
    draft: DraftView


def _get_form(store: DraftStore, draft_id: str) -> BookingIntentForm:
    form = store.get(draft_id)
    if form is None:
        raise HTTPException(status_code=404, detail="Draft not found")
    return form


@router.post("/drafts", response_model=DraftView, status_code=201)
async def open_draft(
    store: DraftStoreDep,
    request: OpenDraftRequest | None = None,
) -> DraftView:
    request = request or OpenDraftRequest()
    form = await store.open_draft(request.criteria, request.selected_room)
    logger.info("Opened draft %s", form.draft_id)
    return form.view()


@router.get("/drafts/{draft_id}", response_model=DraftView)
async def get_draft(draft_id: str, store: DraftStoreDep) -> DraftView:
    return _get_form(store, draft_id).view()


@router.patch("/drafts/{draft_id}", response_model=DraftView)
async def update_draft(draft_id: str, changes: DraftUpdate, store: DraftStoreDep) -> DraftView:
    form = _get_form(store, draft_id)
    form.update(changes)
    return form.view()


@router.put("/drafts/{draft_id}/criteria", response_model=DraftView)
async def apply_criteria(
    draft_id: str, criteria: SearchCriteria, store: DraftStoreDep
) -> DraftView:
    form = _get_form(store, draft_id)
    await form.apply_criteria(criteria)
    return form.view()


@router.post("/drafts/{draft_id}/room-selection", response_model=DraftView)
async def select_room(
    draft_id: str, request: RoomSelectionRequest, store: DraftStoreDep
) -> DraftView:
    form = _get_form(store, draft_id)
    form.selection.set(request.room_number)
    return form.view()


@router.post("/drafts/{draft_id}/submit", response_model=SubmissionResponse)
async def submit_draft(draft_id: str, store: DraftStoreDep) -> SubmissionResponse:
    form = _get_form(store, draft_id)
    confirmation = await form.submit()
    return SubmissionResponse(status="confirmed", confirmation=confirmation, draft=form.view())
