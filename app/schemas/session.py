"""Pydantic schemas for the chat transcript, email composer and session."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models import ApprovalStatus, MessageRole, UserRole
from app.schemas.approval import ApprovalResponse
from app.schemas.lead import LeadResponse
from app.schemas.proposal import (
    PricingResponse,
    ProposalContentResponse,
    TemplateResponse,
    VersionResponse,
)


class MessageCreate(BaseModel):
    """Free text typed into the chat."""
    content: str = Field(..., min_length=1, max_length=4000)


class MessageResponse(BaseModel):
    """Schema for a transcript entry."""
    model_config = ConfigDict(from_attributes=True)

    role: MessageRole
    content: str
    timestamp: datetime


class RoleUpdate(BaseModel):
    role: UserRole


class EmailUpdate(BaseModel):
    """Cosmetic edits in the composer."""
    subject: Optional[str] = Field(None, max_length=500)
    body: Optional[str] = None


class EmailResponse(BaseModel):
    """Schema for the email composer contents."""
    model_config = ConfigDict(from_attributes=True)

    recipient: str
    subject: str
    body: str
    attachment: str
    is_generating: bool


class EmailSendResponse(BaseModel):
    recipient: str
    subject: str
    attachment: str
    message: str


class SessionResponse(BaseModel):
    """Full snapshot of the copilot session."""
    role: UserRole
    lead: Optional[LeadResponse] = None
    proposal: ProposalContentResponse
    summary: PricingResponse
    approval_status: ApprovalStatus
    approval: Optional[ApprovalResponse] = None
    versions: list[VersionResponse]
    templates: list[TemplateResponse]
    messages: list[MessageResponse]
    email: Optional[EmailResponse] = None
    autosave_pending: bool
