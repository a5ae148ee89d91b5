"""API endpoints for the copilot session as a whole."""

from fastapi import APIRouter, Depends

from app.dependencies import get_copilot
from app.models import UserRole
from app.schemas import (
    PricingResponse,
    ProposalContentResponse,
    ProposalResponse,
    RoleUpdate,
    SessionResponse,
)
from app.services import SalesCopilot

router = APIRouter(prefix="/session", tags=["session"])


def proposal_response(copilot: SalesCopilot) -> ProposalResponse:
    return ProposalResponse(
        proposal=ProposalContentResponse.model_validate(copilot.state.proposal),
        summary=PricingResponse.model_validate(copilot.pricing),
        approval_status=copilot.state.approval_status.value,
    )


def session_response(copilot: SalesCopilot) -> SessionResponse:
    state = copilot.state
    return SessionResponse.model_validate(
        {
            "role": state.role,
            "lead": state.lead,
            "proposal": state.proposal,
            "summary": copilot.pricing,
            "approval_status": state.approval_status,
            "approval": state.approval,
            "versions": state.versions,
            "templates": state.templates,
            "messages": state.messages,
            "email": state.email,
            "autosave_pending": copilot.autosaver.pending,
        },
        from_attributes=True,
    )


@router.get("", response_model=SessionResponse)
async def get_session(copilot: SalesCopilot = Depends(get_copilot)):
    """Full snapshot of the session state."""
    return session_response(copilot)


@router.put("/role", response_model=SessionResponse)
async def switch_role(
    update: RoleUpdate,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Switch the viewer role between sales rep and manager."""
    copilot.set_role(update.role)
    return session_response(copilot)


@router.post("/reset", response_model=SessionResponse)
async def reset_session(copilot: SalesCopilot = Depends(get_copilot)):
    """Discard all state and start over."""
    copilot.reset()
    return session_response(copilot)


@router.get("/roles/list")
async def list_roles():
    """List available viewer roles."""
    return [{"value": role.value, "name": role.name} for role in UserRole]
