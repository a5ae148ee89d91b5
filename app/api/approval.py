"""API endpoints for the manager approval workflow."""

from fastapi import APIRouter, Depends

from app.dependencies import get_copilot
from app.models import ApprovalStatus
from app.schemas import ApprovalCreate, ApprovalReview, ApprovalStateResponse
from app.services import SalesCopilot

router = APIRouter(prefix="/approval", tags=["approval"])


def approval_state(copilot: SalesCopilot) -> ApprovalStateResponse:
    return ApprovalStateResponse.model_validate(
        {"status": copilot.state.approval_status, "request": copilot.state.approval},
        from_attributes=True,
    )


@router.get("", response_model=ApprovalStateResponse)
async def get_approval(copilot: SalesCopilot = Depends(get_copilot)):
    """Get the live approval request, if any."""
    return approval_state(copilot)


@router.post("", response_model=ApprovalStateResponse, status_code=201)
async def request_approval(
    request: ApprovalCreate,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Submit the proposal for manager approval (sales rep only)."""
    copilot.request_approval(request.note, request.requested_discount)
    return approval_state(copilot)


@router.post("/review", response_model=ApprovalStateResponse)
async def review_approval(
    review: ApprovalReview,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Approve or reject the pending request (manager only)."""
    if review.decision == "approve":
        copilot.approve(review.note)
    else:
        copilot.reject(review.note)
    return approval_state(copilot)


@router.get("/statuses/list")
async def list_approval_statuses():
    """List available approval statuses."""
    return [{"value": st.value, "name": st.name} for st in ApprovalStatus]
