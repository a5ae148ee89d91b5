"""Proposal content, line items, version snapshots and templates."""

import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


# Fields a user edits directly and a template carries
TEXT_FIELDS = (
    "executive_summary",
    "scope_of_work",
    "deliverables",
    "timeline",
    "terms",
)


def new_id() -> str:
    """Short random identifier for versions, templates and requests."""
    return uuid.uuid4().hex[:9]


def display_timestamp(moment: datetime | None = None) -> str:
    return (moment or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")


@dataclass
class LineItem:
    """One priced unit in the proposal's pricing table."""
    id: str
    name: str
    price: Decimal
    quantity: int = 1

    def __post_init__(self) -> None:
        self.price = Decimal(str(self.price))
        self.quantity = max(0, int(self.quantity))

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass
class ProposalContent:
    """The live, editable proposal document."""
    executive_summary: str = ""
    scope_of_work: str = ""
    deliverables: str = ""
    timeline: str = ""
    terms: str = ""
    pricing: list[LineItem] = field(default_factory=list)
    # Manager-approved discount percentage
    discount: int = 0

    def copy(self) -> "ProposalContent":
        """Independent deep copy."""
        return copy.deepcopy(self)

    def find_item(self, item_id: str) -> LineItem | None:
        return next((item for item in self.pricing if item.id == item_id), None)


@dataclass(frozen=True)
class Version:
    """Immutable snapshot of the proposal at a point in time."""
    id: str
    timestamp: str
    proposal: ProposalContent
    label: str

    @classmethod
    def snapshot(cls, proposal: ProposalContent, label: str) -> "Version":
        return cls(
            id=new_id(),
            timestamp=display_timestamp(),
            proposal=proposal.copy(),
            label=label,
        )


@dataclass(frozen=True)
class ProposalTemplate:
    """Reusable, pricing-independent bundle of proposal text sections."""
    id: str
    name: str
    executive_summary: str
    scope_of_work: str
    deliverables: str
    timeline: str
    terms: str

    @classmethod
    def from_proposal(cls, name: str, proposal: ProposalContent) -> "ProposalTemplate":
        return cls(
            id=new_id(),
            name=name,
            **{name_: getattr(proposal, name_) for name_ in TEXT_FIELDS},
        )
