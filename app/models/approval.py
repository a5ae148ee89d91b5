"""Approval request model and its status transitions."""

import enum
from dataclasses import dataclass
from typing import Optional


class UserRole(str, enum.Enum):
    """Role of the person viewing the copilot."""
    SALES_REP = "Sales Rep"
    MANAGER = "Manager"


class ApprovalStatus(str, enum.Enum):
    """Status of a proposal's approval request."""
    DRAFT = "Draft"                   # No request submitted
    PENDING = "Pending Approval"      # Waiting for the manager
    APPROVED = "Approved"
    REJECTED = "Rejected"


# action -> allowed source statuses, target status, role allowed to act
APPROVAL_TRANSITIONS = {
    "submit": {
        "from": {ApprovalStatus.DRAFT, ApprovalStatus.REJECTED},
        "to": ApprovalStatus.PENDING,
        "role": UserRole.SALES_REP,
    },
    "approve": {
        "from": {ApprovalStatus.PENDING},
        "to": ApprovalStatus.APPROVED,
        "role": UserRole.MANAGER,
    },
    "reject": {
        "from": {ApprovalStatus.PENDING},
        "to": ApprovalStatus.REJECTED,
        "role": UserRole.MANAGER,
    },
}


@dataclass(frozen=True)
class ApprovalRequest:
    """The single live approval request for the proposal."""
    id: str
    requester: str
    note: str
    status: ApprovalStatus
    timestamp: str
    requested_discount: Optional[int] = None
    manager_note: Optional[str] = None

    def __repr__(self) -> str:
        return f"<ApprovalRequest(id={self.id}, status={self.status.value})>"
