"""Pydantic schemas for the ingested lead."""

from pydantic import BaseModel, ConfigDict


class LeadResponse(BaseModel):
    """Schema for Lead response."""
    model_config = ConfigDict(from_attributes=True)

    company: str
    contact: str
    email: str
    opportunity: str
    pain_points: list[str]
