"""API endpoints for reusable proposal templates."""

from fastapi import APIRouter, Depends

from app.api.session import proposal_response
from app.dependencies import get_copilot
from app.schemas import ProposalResponse, TemplateCreate, TemplateResponse
from app.services import SalesCopilot

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=list[TemplateResponse])
async def list_templates(copilot: SalesCopilot = Depends(get_copilot)):
    """List saved templates."""
    return [TemplateResponse.model_validate(t) for t in copilot.state.templates]


@router.post("", response_model=TemplateResponse, status_code=201)
async def create_template(
    template_data: TemplateCreate,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Save the current proposal text as a template."""
    return TemplateResponse.model_validate(copilot.save_template(template_data.name))


@router.post("/{template_id}/apply", response_model=ProposalResponse)
async def apply_template(
    template_id: str,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Overwrite the proposal's text sections with a template."""
    copilot.apply_template(template_id)
    return proposal_response(copilot)


@router.delete("/{template_id}", status_code=204)
async def delete_template(
    template_id: str,
    copilot: SalesCopilot = Depends(get_copilot),
):
    """Delete a template."""
    copilot.delete_template(template_id)
