from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ...domain.contact_models import ContactMessage, ContactResponse
from ...security.rate_limit import RateLimitExceeded, rate_limit_action
from ...services.email_delivery import EmailDeliveryClient
from ..dependencies import get_email_client

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=ContactResponse)
def send_message(
    msg: ContactMessage,
    request: Request,
    client: EmailDeliveryClient = Depends(get_email_client),
) -> ContactResponse:
    try:
        rate_limit_action(
            "contact_message",
            _rate_limit_identifier(request),
            limit_env="PORTFOLIO_CONTACT_RATE_LIMIT",
            window_env="PORTFOLIO_CONTACT_RATE_WINDOW",
            default_limit=5,
            default_window_seconds=3600,
        )
    except RateLimitExceeded as exc:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many messages. Please try again later.",
            headers={"Retry-After": str(exc.retry_after_seconds)},
        ) from exc

    result = client.send(msg)
    if not result.ok:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Something went wrong. Please try again or email me directly.",
        )
    return ContactResponse(status="sent", detail="Message sent successfully! I'll get back to you soon.")


def _rate_limit_identifier(request: Request) -> str:
    return request.client.host if request.client else "unknown"
