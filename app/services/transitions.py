"""
Copilot state transitions.

Every function takes the current ``CopilotState`` and returns a new one;
the input state is never mutated. The controller in
``app.services.copilot`` owns the live state and swaps it for the result.

Approval transitions follow ``APPROVAL_TRANSITIONS``:

    Draft / Rejected --submit--> Pending --approve--> Approved
                                         --reject---> Rejected
"""

import logging
from dataclasses import replace
from typing import Optional

from app.exceptions import NotFoundError, PermissionDeniedError, TransitionError, WorkflowError
from app.models import (
    APPROVAL_TRANSITIONS,
    TEXT_FIELDS,
    ApprovalRequest,
    ApprovalStatus,
    CopilotState,
    Lead,
    Message,
    MessageRole,
    ProposalContent,
    ProposalTemplate,
    UserRole,
    Version,
)
from app.models.proposal import display_timestamp, new_id
from app.services import narration
from app.services.sample_data import INITIAL_PROPOSAL_TEXT, initial_pricing

logger = logging.getLogger(__name__)


def initial_state() -> CopilotState:
    """A fresh session with the copilot's greeting."""
    proposal = ProposalContent(**INITIAL_PROPOSAL_TEXT)
    return CopilotState(
        proposal=proposal,
        last_saved=proposal.copy(),
        messages=[Message(MessageRole.ASSISTANT, narration.GREETING)],
    )


# ---------------------------------------------------------------------------
# Transcript & role
# ---------------------------------------------------------------------------

def add_message(state: CopilotState, role: MessageRole, content: str) -> CopilotState:
    return replace(state, messages=[*state.messages, Message(role, content)])


def set_role(state: CopilotState, role: UserRole) -> CopilotState:
    return replace(state, role=UserRole(role))


# ---------------------------------------------------------------------------
# Lead & draft
# ---------------------------------------------------------------------------

def ingest_lead(state: CopilotState, lead: Lead) -> CopilotState:
    if state.lead is not None:
        raise WorkflowError(f'Lead "{state.lead.company}" is already ingested')
    state = add_message(state, MessageRole.USER, narration.INGEST_REQUEST)
    state = replace(state, lead=lead)
    return add_message(
        state,
        MessageRole.ASSISTANT,
        narration.INGEST_DONE.format(company=lead.company, opportunity=lead.opportunity),
    )


def require_lead(state: CopilotState) -> Lead:
    if state.lead is None:
        raise WorkflowError("No lead ingested yet")
    return state.lead


def start_draft(state: CopilotState) -> CopilotState:
    """Narrate the start of draft generation."""
    require_lead(state)
    state = add_message(state, MessageRole.USER, narration.GENERATE_REQUEST)
    return add_message(state, MessageRole.SYSTEM, narration.GENERATE_PROGRESS)


def apply_generated_draft(state: CopilotState, executive_summary: str) -> CopilotState:
    """Replace the proposal with a fresh draft around the generated summary."""
    proposal = ProposalContent(
        **{**INITIAL_PROPOSAL_TEXT, "executive_summary": executive_summary},
        pricing=initial_pricing(),
        discount=0,
    )
    state = replace(state, proposal=proposal)
    state = save_version(state, narration.LABEL_AI_DRAFT)
    return add_message(state, MessageRole.ASSISTANT, narration.GENERATE_DONE)


# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------

def update_fields(state: CopilotState, **fields: str) -> CopilotState:
    """Overwrite free-text sections of the proposal."""
    unknown = set(fields) - set(TEXT_FIELDS)
    if unknown:
        raise ValueError(f"Not an editable proposal field: {', '.join(sorted(unknown))}")
    proposal = replace(state.proposal.copy(), **fields)
    return replace(state, proposal=proposal)


def change_quantity(state: CopilotState, item_id: str, delta: int) -> CopilotState:
    """Adjust a line item's quantity, never below zero."""
    proposal = state.proposal.copy()
    item = proposal.find_item(item_id)
    if item is None:
        raise NotFoundError(f"Line item {item_id} not found")
    item.quantity = max(0, item.quantity + delta)
    return replace(state, proposal=proposal)


# ---------------------------------------------------------------------------
# Versions
# ---------------------------------------------------------------------------

def save_version(state: CopilotState, label: str) -> CopilotState:
    """Snapshot the live proposal (newest first) and make it the saved baseline."""
    version = Version.snapshot(state.proposal, label)
    logger.info("Saved version %s (%s)", version.id, label, extra={"version_id": version.id, "label": label})
    return replace(
        state,
        versions=[version, *state.versions],
        last_saved=state.proposal.copy(),
    )


def find_version(state: CopilotState, version_id: str) -> Version:
    for version in state.versions:
        if version.id == version_id:
            return version
    raise NotFoundError(f"Version {version_id} not found")


def restore_version(state: CopilotState, version_id: str) -> CopilotState:
    """Replace the live proposal with a copy of a stored snapshot."""
    version = find_version(state, version_id)
    state = replace(
        state,
        proposal=version.proposal.copy(),
        last_saved=version.proposal.copy(),
    )
    return add_message(
        state,
        MessageRole.SYSTEM,
        narration.RESTORED.format(label=version.label, timestamp=version.timestamp),
    )


def autosave(state: CopilotState) -> tuple[CopilotState, bool]:
    """Snapshot the proposal if it changed since the last snapshot."""
    if state.proposal == state.last_saved:
        return state, False
    return save_version(state, narration.LABEL_MANUAL), True


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

def save_template(state: CopilotState, name: str) -> tuple[CopilotState, ProposalTemplate]:
    template = ProposalTemplate.from_proposal(name, state.proposal)
    return replace(state, templates=[*state.templates, template]), template


def find_template(state: CopilotState, template_id: str) -> ProposalTemplate:
    for template in state.templates:
        if template.id == template_id:
            return template
    raise NotFoundError(f"Template {template_id} not found")


def apply_template(state: CopilotState, template_id: str) -> CopilotState:
    """Overwrite the proposal's text sections; pricing and discount stay."""
    template = find_template(state, template_id)
    state = update_fields(state, **{name: getattr(template, name) for name in TEXT_FIELDS})
    return add_message(state, MessageRole.SYSTEM, narration.TEMPLATE_APPLIED.format(name=template.name))


def delete_template(state: CopilotState, template_id: str) -> CopilotState:
    find_template(state, template_id)
    return replace(state, templates=[t for t in state.templates if t.id != template_id])


# ---------------------------------------------------------------------------
# Approval workflow
# ---------------------------------------------------------------------------

def validate_approval_action(state: CopilotState, action: str) -> ApprovalStatus:
    """
    Check role and current status for an approval action.

    Returns the target status; raises ``PermissionDeniedError`` or
    ``TransitionError``.
    """
    rule = APPROVAL_TRANSITIONS.get(action)
    current = state.approval_status
    if not rule:
        raise TransitionError(action, current.value, f"Unknown action: {action}")
    if state.role != rule["role"]:
        raise PermissionDeniedError(action, state.role.value)
    if current not in rule["from"]:
        raise TransitionError(action, current.value)
    return rule["to"]


def submit_approval(
    state: CopilotState,
    note: str = "",
    requested_discount: Optional[int] = None,
    requester: str = UserRole.SALES_REP.value,
) -> CopilotState:
    """Create a fresh pending request, replacing any rejected one."""
    target = validate_approval_action(state, "submit")
    if not state.proposal.pricing:
        raise TransitionError("submit", state.approval_status.value, "no drafted proposal to approve")

    requested_discount = requested_discount or None
    state = add_message(state, MessageRole.USER, narration.approval_request(requested_discount))
    request = ApprovalRequest(
        id=new_id(),
        requester=requester,
        note=note.strip() or narration.DEFAULT_REQUEST_NOTE,
        status=target,
        timestamp=display_timestamp(),
        requested_discount=requested_discount,
    )
    logger.info(
        "Approval %s submitted (discount=%s)", request.id, requested_discount,
        extra={"approval_id": request.id, "status": target.value},
    )
    state = replace(state, approval=request)
    return add_message(state, MessageRole.ASSISTANT, narration.APPROVAL_SENT)


def review_approval(state: CopilotState, action: str, manager_note: str = "") -> CopilotState:
    """Approve or reject the pending request."""
    if action not in ("approve", "reject"):
        raise TransitionError(action, state.approval_status.value, f"Unknown action: {action}")
    target = validate_approval_action(state, action)
    request = replace(state.approval, status=target, manager_note=manager_note)
    state = replace(state, approval=request)
    logger.info(
        "Approval %s %s", request.id, target.value,
        extra={"approval_id": request.id, "status": target.value},
    )

    if target is ApprovalStatus.REJECTED:
        return add_message(state, MessageRole.ASSISTANT, narration.REJECTED.format(note=manager_note))

    final_discount = request.requested_discount or state.proposal.discount
    proposal = replace(state.proposal.copy(), discount=final_discount)
    state = replace(state, proposal=proposal)
    state = save_version(state, narration.LABEL_APPROVED)
    return add_message(state, MessageRole.ASSISTANT, narration.approved(final_discount, manager_note))


def require_approved(state: CopilotState, action: str) -> None:
    """Finalization (export, email) needs an approved proposal."""
    if state.approval_status is not ApprovalStatus.APPROVED:
        raise TransitionError(action, state.approval_status.value, "proposal is not approved")
