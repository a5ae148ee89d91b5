"""Lead model for the opportunity ingested from the CRM."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Lead:
    """A prospective customer record ingested from the CRM."""
    company: str
    contact: str
    email: str
    opportunity: str
    pain_points: tuple[str, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        return f"<Lead(company='{self.company}', opportunity='{self.opportunity}')>"
