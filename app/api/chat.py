"""API endpoints for the chat transcript."""

from fastapi import APIRouter, Depends

from app.dependencies import get_copilot
from app.schemas import MessageCreate, MessageResponse
from app.services import SalesCopilot

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/messages", response_model=list[MessageResponse])
async def list_messages(copilot: SalesCopilot = Depends(get_copilot)):
    """Transcript in chronological order."""
    return [MessageResponse.model_validate(m) for m in copilot.state.messages]


@router.post("/messages", response_model=list[MessageResponse], status_code=201)
async def send_message(
    message: MessageCreate,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Append free text to the transcript."""
    copilot.send_message(message.content)
    return [MessageResponse.model_validate(m) for m in copilot.state.messages]
