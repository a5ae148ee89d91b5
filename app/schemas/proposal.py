"""Pydantic schemas for the proposal, its pricing, versions and templates."""

from decimal import Decimal
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Decimal internally, a JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class LineItemResponse(BaseModel):
    """Schema for a pricing line item."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: Money
    quantity: int
    line_total: Money


class PricingResponse(BaseModel):
    """Derived pricing totals."""
    model_config = ConfigDict(from_attributes=True)

    subtotal: Money
    volume_discount_rate: Money
    volume_discount_amount: Money
    discount_rate: Money
    manual_discount_amount: Money
    total: Money
    volume_discount_applied: bool


class ProposalBase(BaseModel):
    """Free-text sections of a proposal."""
    executive_summary: str
    scope_of_work: str
    deliverables: str
    timeline: str
    terms: str


class ProposalContentResponse(ProposalBase):
    """Schema for proposal content (live or snapshotted)."""
    model_config = ConfigDict(from_attributes=True)

    pricing: list[LineItemResponse]
    discount: int


class ProposalResponse(BaseModel):
    """Live proposal with its pricing summary and approval status."""
    proposal: ProposalContentResponse
    summary: PricingResponse
    approval_status: str


class ProposalUpdate(BaseModel):
    """Schema for editing proposal text sections."""
    model_config = ConfigDict(extra="forbid")

    executive_summary: Optional[str] = None
    scope_of_work: Optional[str] = None
    deliverables: Optional[str] = None
    timeline: Optional[str] = None
    terms: Optional[str] = None


class QuantityChange(BaseModel):
    """Step a line item's quantity up or down."""
    delta: int = Field(..., description="Units to add; negative to remove")


class VersionResponse(BaseModel):
    """Schema for a version history entry."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    timestamp: str
    label: str
    proposal: ProposalContentResponse


class ExportRequest(BaseModel):
    format: Literal["pdf", "docx"] = "pdf"


class ExportResponse(BaseModel):
    format: str
    filename: str
    message: str


class TemplateCreate(BaseModel):
    """Save the current proposal text as a named template."""
    name: str = Field(..., min_length=1, max_length=255)


class TemplateResponse(ProposalBase):
    """Schema for a proposal template."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
