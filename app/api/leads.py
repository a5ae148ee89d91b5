"""API endpoints for the CRM lead."""

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_copilot
from app.schemas import LeadResponse
from app.services import SalesCopilot

router = APIRouter(prefix="/leads", tags=["leads"])


@router.post("/ingest", response_model=LeadResponse)
async def ingest_lead(copilot: SalesCopilot = Depends(get_copilot)):
    """Ingest the opportunity from the (mock) CRM."""
    lead = copilot.ingest_lead()
    return LeadResponse.model_validate(lead)


@router.get("/current", response_model=LeadResponse)
async def get_current_lead(copilot: SalesCopilot = Depends(get_copilot)):
    """Get the lead of this session."""
    if copilot.state.lead is None:
        raise HTTPException(status_code=404, detail="No lead ingested")
    return LeadResponse.model_validate(copilot.state.lead)
