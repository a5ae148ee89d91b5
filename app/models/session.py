"""Copilot session state: transcript, email draft and the state container."""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.models.approval import ApprovalRequest, ApprovalStatus, UserRole
from app.models.lead import Lead
from app.models.proposal import ProposalContent, ProposalTemplate, Version


class MessageRole(str, enum.Enum):
    """Author of a transcript entry."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(frozen=True)
class Message:
    """One entry of the chat transcript."""
    role: MessageRole
    content: str
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class EmailDraft:
    """Follow-up email shown in the composer before a simulated send."""
    recipient: str
    subject: str
    body: str = ""
    attachment: str = "proposal_factory_automation.pdf"
    is_generating: bool = False


@dataclass
class CopilotState:
    """Everything the copilot knows about the current session."""
    role: UserRole = UserRole.SALES_REP
    lead: Optional[Lead] = None
    proposal: ProposalContent = field(default_factory=ProposalContent)
    # Newest first
    versions: list[Version] = field(default_factory=list)
    templates: list[ProposalTemplate] = field(default_factory=list)
    approval: Optional[ApprovalRequest] = None
    messages: list[Message] = field(default_factory=list)
    email: Optional[EmailDraft] = None
    # Content of the most recent snapshot, compared by the auto-save timer
    last_saved: Optional[ProposalContent] = None

    @property
    def approval_status(self) -> ApprovalStatus:
        return self.approval.status if self.approval else ApprovalStatus.DRAFT
