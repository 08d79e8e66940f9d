import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from hostel_web.dependencies import ContactDep
from hostel_web.exceptions.custom import HostelApiError, RateLimitError
from hostel_web.schemas.contact import ContactRequest
from hostel_web.schemas.responses import ContactSentResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactSentResponse)
async def send_contact_message(request: ContactRequest, service: ContactDep):
    try:
        await service.send_email(request)
    except (HostelApiError, RateLimitError) as exc:
        logger.error("Contact form error: %s", exc)
        return JSONResponse(
            status_code=502,
            content={"detail": "Failed to send message. Please try again."},
        )
    return ContactSentResponse(status="sent", message="Message sent successfully!")
