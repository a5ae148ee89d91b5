"""API endpoints for the follow-up email composer."""

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_copilot
from app.schemas import EmailResponse, EmailSendResponse, EmailUpdate
from app.services import SalesCopilot

router = APIRouter(prefix="/email", tags=["email"])


@router.get("", response_model=EmailResponse)
async def get_email(copilot: SalesCopilot = Depends(get_copilot)):
    """Get the composer contents."""
    if copilot.state.email is None:
        raise HTTPException(status_code=404, detail="The email composer is not open")
    return EmailResponse.model_validate(copilot.state.email)


@router.post("/compose", response_model=EmailResponse)
async def compose_email(copilot: SalesCopilot = Depends(get_copilot)):
    """Open the composer with an AI-drafted follow-up."""
    return EmailResponse.model_validate(await copilot.compose_email())


@router.patch("", response_model=EmailResponse)
async def edit_email(
    update: EmailUpdate,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Edit subject or body before sending."""
    return EmailResponse.model_validate(copilot.edit_email(update.subject, update.body))


@router.post("/send", response_model=EmailSendResponse)
async def send_email(copilot: SalesCopilot = Depends(get_copilot)):
    """Send the email (simulated) and close the composer."""
    return EmailSendResponse(**copilot.send_email())


@router.post("/discard", status_code=204)
async def discard_email(copilot: SalesCopilot = Depends(get_copilot)):
    """Close the composer without sending."""
    copilot.discard_email()
