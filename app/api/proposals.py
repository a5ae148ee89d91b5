"""API endpoints for the live proposal and its version history."""

from fastapi import APIRouter, Depends

from app.api.session import proposal_response
from app.dependencies import get_copilot
from app.schemas import (
    ExportRequest,
    ExportResponse,
    ProposalResponse,
    ProposalUpdate,
    QuantityChange,
    VersionResponse,
)
from app.services import SalesCopilot

router = APIRouter(prefix="/proposal", tags=["proposal"])


@router.get("", response_model=ProposalResponse)
async def get_proposal(copilot: SalesCopilot = Depends(get_copilot)):
    """Get the live proposal with its pricing summary."""
    return proposal_response(copilot)


@router.patch("", response_model=ProposalResponse)
async def update_proposal(
    proposal_data: ProposalUpdate,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Edit proposal text sections."""
    copilot.update_proposal(**proposal_data.model_dump(exclude_unset=True, exclude_none=True))
    return proposal_response(copilot)


@router.post("/generate", response_model=ProposalResponse)
async def generate_proposal(copilot: SalesCopilot = Depends(get_copilot)):
    """Generate a draft with an AI executive summary and preset pricing."""
    await copilot.generate_draft()
    return proposal_response(copilot)


@router.post("/items/{item_id}/quantity", response_model=ProposalResponse)
async def change_quantity(
    item_id: str,
    change: QuantityChange,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Step a line item's quantity; never drops below zero."""
    copilot.change_quantity(item_id, change.delta)
    return proposal_response(copilot)


@router.get("/versions", response_model=list[VersionResponse])
async def list_versions(copilot: SalesCopilot = Depends(get_copilot)):
    """List saved versions, newest first."""
    return [VersionResponse.model_validate(v) for v in copilot.state.versions]


@router.get("/versions/{version_id}", response_model=VersionResponse)
async def get_version(
    version_id: str,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Get a single version by ID."""
    return VersionResponse.model_validate(copilot.get_version(version_id))


@router.post("/versions/{version_id}/restore", response_model=ProposalResponse)
async def restore_version(
    version_id: str,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Replace the live proposal with a stored version."""
    copilot.restore_version(version_id)
    return proposal_response(copilot)


@router.post("/export", response_model=ExportResponse)
async def export_proposal(
    request: ExportRequest,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Prepare a PDF/DOCX export of the approved proposal."""
    return ExportResponse(**copilot.export(request.format))
