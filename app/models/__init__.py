"""Domain models."""

from app.models.lead import Lead
from app.models.proposal import (
    TEXT_FIELDS,
    LineItem,
    ProposalContent,
    ProposalTemplate,
    Version,
)
from app.models.approval import (
    APPROVAL_TRANSITIONS,
    ApprovalRequest,
    ApprovalStatus,
    UserRole,
)
from app.models.session import CopilotState, EmailDraft, Message, MessageRole

__all__ = [
    "Lead",
    "TEXT_FIELDS",
    "LineItem",
    "ProposalContent",
    "ProposalTemplate",
    "Version",
    "APPROVAL_TRANSITIONS",
    "ApprovalRequest",
    "ApprovalStatus",
    "UserRole",
    "CopilotState",
    "EmailDraft",
    "Message",
    "MessageRole",
]
