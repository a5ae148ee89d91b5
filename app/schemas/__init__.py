"""Pydantic schemas for API validation."""

from app.schemas.lead import LeadResponse
from app.schemas.proposal import (
    ExportRequest,
    ExportResponse,
    LineItemResponse,
    PricingResponse,
    ProposalContentResponse,
    ProposalResponse,
    ProposalUpdate,
    QuantityChange,
    TemplateCreate,
    TemplateResponse,
    VersionResponse,
)
from app.schemas.approval import (
    ApprovalCreate,
    ApprovalResponse,
    ApprovalReview,
    ApprovalStateResponse,
)
from app.schemas.session import (
    EmailResponse,
    EmailSendResponse,
    EmailUpdate,
    MessageCreate,
    MessageResponse,
    RoleUpdate,
    SessionResponse,
)

__all__ = [
    "LeadResponse",
    "ExportRequest",
    "ExportResponse",
    "LineItemResponse",
    "PricingResponse",
    "ProposalContentResponse",
    "ProposalResponse",
    "ProposalUpdate",
    "QuantityChange",
    "TemplateCreate",
    "TemplateResponse",
    "VersionResponse",
    "ApprovalCreate",
    "ApprovalResponse",
    "ApprovalReview",
    "ApprovalStateResponse",
    "EmailResponse",
    "EmailSendResponse",
    "EmailUpdate",
    "MessageCreate",
    "MessageResponse",
    "RoleUpdate",
    "SessionResponse",
]
