"""Sales copilot controller - owns the session state and drives the workflow."""

import logging
import time
from dataclasses import replace
from typing import Optional

from app.config import settings
from app.exceptions import WorkflowError
from app.models import (
    CopilotState,
    EmailDraft,
    Lead,
    Message,
    MessageRole,
    ProposalContent,
    ProposalTemplate,
    UserRole,
    Version,
)
from app.services import transitions
from app.services.autosave import AutoSaver
from app.services.content_generator import ContentGeneratorService
from app.services.pricing import PricingSummary, calculate_pricing
from app.services.sample_data import SAMPLE_LEAD

logger = logging.getLogger(__name__)


class SalesCopilot:
    """
    Single owner of the copilot's in-memory session.

    Synchronous methods apply a transition and swap in the resulting state.
    ``generate_draft`` and ``compose_email`` await the AI; whatever the
    state looks like when the text arrives, the text overwrites the summary
    or email body.
    """

    EXPORT_FORMATS = ("pdf", "docx")

    def __init__(
        self,
        generator: Optional[ContentGeneratorService] = None,
        autosave_delay: Optional[float] = None,
    ):
        self.generator = generator or ContentGeneratorService()
        delay = settings.autosave_quiet_seconds if autosave_delay is None else autosave_delay
        self.autosaver = AutoSaver(self._autosave, delay)
        self.state: CopilotState = transitions.initial_state()

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def reset(self) -> CopilotState:
        self.autosaver.cancel()
        self.state = transitions.initial_state()
        return self.state

    def set_role(self, role: UserRole) -> UserRole:
        self.state = transitions.set_role(self.state, role)
        return self.state.role

    @property
    def pricing(self) -> PricingSummary:
        return calculate_pricing(self.state.proposal.pricing, self.state.proposal.discount)

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    def send_message(self, content: str) -> Optional[Message]:
        """Echo free text into the transcript; blank input is ignored."""
        if not content.strip():
            return None
        self.state = transitions.add_message(self.state, MessageRole.USER, content)
        return self.state.messages[-1]

    def ingest_lead(self) -> Lead:
        self.state = transitions.ingest_lead(self.state, SAMPLE_LEAD)
        logger.info("Ingested lead %s", SAMPLE_LEAD.company)
        return self.state.lead

    async def generate_draft(self) -> ProposalContent:
        self.state = transitions.start_draft(self.state)
        summary = await self.generator.generate_executive_summary(self.state.lead)
        self.state = transitions.apply_generated_draft(self.state, summary)
        return self.state.proposal

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def update_proposal(self, **fields: str) -> ProposalContent:
        if fields:
            self.state = transitions.update_fields(self.state, **fields)
            self.autosaver.schedule()
        return self.state.proposal

    def change_quantity(self, item_id: str, delta: int) -> ProposalContent:
        self.state = transitions.change_quantity(self.state, item_id, delta)
        self.autosaver.schedule()
        return self.state.proposal

    def _autosave(self) -> None:
        self.state, saved = transitions.autosave(self.state)
        if saved:
            logger.info("Auto-saved proposal as %s", self.state.versions[0].id)

    # ------------------------------------------------------------------
    # Versions & templates
    # ------------------------------------------------------------------

    def restore_version(self, version_id: str) -> ProposalContent:
        self.state = transitions.restore_version(self.state, version_id)
        self.autosaver.cancel()
        return self.state.proposal

    def get_version(self, version_id: str) -> Version:
        return transitions.find_version(self.state, version_id)

    def save_template(self, name: str) -> ProposalTemplate:
        self.state, template = transitions.save_template(self.state, name)
        return template

    def apply_template(self, template_id: str) -> ProposalContent:
        self.state = transitions.apply_template(self.state, template_id)
        self.autosaver.schedule()
        return self.state.proposal

    def delete_template(self, template_id: str) -> None:
        self.state = transitions.delete_template(self.state, template_id)

    # ------------------------------------------------------------------
    # Approval
    # ------------------------------------------------------------------

    def request_approval(self, note: str = "", requested_discount: Optional[int] = None):
        self.state = transitions.submit_approval(
            self.state, note, requested_discount, requester=settings.sales_rep_name
        )
        return self.state.approval

    def approve(self, manager_note: str = ""):
        self.state = transitions.review_approval(self.state, "approve", manager_note)
        return self.state.approval

    def reject(self, manager_note: str = ""):
        self.state = transitions.review_approval(self.state, "reject", manager_note)
        return self.state.approval

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def export(self, fmt: str) -> dict:
        """Simulated document export; no file is rendered."""
        fmt = fmt.lower()
        if fmt not in self.EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format: {fmt}")
        transitions.require_approved(self.state, "export")
        filename = f"Proposal_Automation_{int(time.time() * 1000)}.{fmt}"
        logger.info("Prepared %s export %s", fmt.upper(), filename)
        return {
            "format": fmt,
            "filename": filename,
            "message": f'Generating {fmt.upper()} export...\nFile "{filename}" has been prepared for download.',
        }

    async def compose_email(self) -> EmailDraft:
        """Open the composer and fill it with a generated follow-up."""
        lead = transitions.require_lead(self.state)
        transitions.require_approved(self.state, "compose_email")
        draft = EmailDraft(
            recipient=lead.email,
            subject=f"Proposal: {lead.opportunity}",
            is_generating=True,
        )
        self.state = replace(self.state, email=draft)
        body = await self.generator.generate_follow_up_email(lead, self.state.proposal.executive_summary)
        if self.state.email is None:
            # Discarded while generating
            return replace(draft, body=body, is_generating=False)
        self.state = replace(self.state, email=replace(self.state.email, body=body, is_generating=False))
        return self.state.email

    def require_email(self) -> EmailDraft:
        if self.state.email is None:
            raise WorkflowError("The email composer is not open")
        return self.state.email

    def edit_email(self, subject: Optional[str] = None, body: Optional[str] = None) -> EmailDraft:
        draft = self.require_email()
        changes = {k: v for k, v in (("subject", subject), ("body", body)) if v is not None}
        self.state = replace(self.state, email=replace(draft, **changes))
        return self.state.email

    def send_email(self) -> dict:
        """Simulated delivery; closes the composer."""
        draft = self.require_email()
        logger.info("Simulated email send to %s (%s)", draft.recipient, draft.subject)
        self.state = replace(self.state, email=None)
        return {
            "recipient": draft.recipient,
            "subject": draft.subject,
            "attachment": draft.attachment,
            "message": "Email sent successfully!",
        }

    def discard_email(self) -> None:
        self.state = replace(self.state, email=None)

    async def shutdown(self) -> None:
        self.autosaver.cancel()
