"""Pydantic schemas for the approval workflow."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.config import settings
from app.models import ApprovalStatus


class ApprovalCreate(BaseModel):
    """Sales rep's request for manager approval."""
    note: str = Field("", max_length=2000)
    requested_discount: Optional[int] = Field(
        None,
        ge=0,
        le=settings.max_requested_discount,
        description="Requested discount percentage",
    )


class ApprovalReview(BaseModel):
    """Manager's decision on the pending request."""
    decision: Literal["approve", "reject"]
    note: str = Field("", max_length=2000)


class ApprovalResponse(BaseModel):
    """Schema for the live approval request."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    requester: str
    note: str
    status: ApprovalStatus
    timestamp: str
    requested_discount: Optional[int] = None
    manager_note: Optional[str] = None


class ApprovalStateResponse(BaseModel):
    """Current approval status, with the request when one exists."""
    status: ApprovalStatus
    request: Optional[ApprovalResponse] = None
