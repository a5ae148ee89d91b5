"""Tests for the SalesCopilot controller."""

import asyncio

import pytest

from app.exceptions import PermissionDeniedError, TransitionError, WorkflowError
from app.models import ApprovalStatus, MessageRole, UserRole
from app.services import AIService, ContentGeneratorService, SalesCopilot
from tests.stubs import GENERATED_SUMMARY, StubProvider


async def approve(copilot: SalesCopilot, discount=None, note="Looks good"):
    copilot.request_approval("Please review", discount)
    copilot.set_role(UserRole.MANAGER)
    copilot.approve(note)
    copilot.set_role(UserRole.SALES_REP)


class TestWorkflow:
    """End-to-end copilot flows."""

    @pytest.mark.asyncio
    async def test_acme_flow(self, copilot: SalesCopilot):
        """Ingest, draft, request 10%, approve."""
        lead = copilot.ingest_lead()
        assert lead.company.startswith("Acme Manufacturing")

        proposal = await copilot.generate_draft()
        assert len(proposal.pricing) == 3
        assert proposal.executive_summary == GENERATED_SUMMARY

        copilot.request_approval("Strategic account", 10)
        assert copilot.state.approval.status == ApprovalStatus.PENDING

        copilot.set_role(UserRole.MANAGER)
        copilot.approve("Approved for Q3")

        assert copilot.state.proposal.discount == 10
        assert copilot.state.versions[0].label == "Approved Version"
        approved = [m.content for m in copilot.state.messages if m.content.startswith("Approved!")]
        assert approved and "10%" in approved[-1]
        assert copilot.pricing.manual_discount_amount == 3100

    @pytest.mark.asyncio
    async def test_generation_narration(self, drafted_copilot: SalesCopilot):
        roles = [m.role for m in drafted_copilot.state.messages[-3:]]
        assert roles == [MessageRole.USER, MessageRole.SYSTEM, MessageRole.ASSISTANT]

    @pytest.mark.asyncio
    async def test_generation_failure_uses_fallback(self):
        ai = AIService(providers=[StubProvider(fail=True)])
        copilot = SalesCopilot(generator=ContentGeneratorService(ai))
        copilot.ingest_lead()

        proposal = await copilot.generate_draft()

        assert proposal.executive_summary == ContentGeneratorService.SUMMARY_FALLBACK
        assert copilot.state.versions[0].label == "AI Draft Generated"

    @pytest.mark.asyncio
    async def test_generation_overwrites_intervening_edits(self, copilot: SalesCopilot):
        """The summary lands on whatever the proposal is when it arrives."""
        release = asyncio.Event()

        class SlowProvider(StubProvider):
            async def generate(self, prompt, system_prompt=None):
                await release.wait()
                return "Late summary"

        copilot.generator = ContentGeneratorService(AIService(providers=[SlowProvider()]))
        copilot.ingest_lead()

        task = asyncio.create_task(copilot.generate_draft())
        await asyncio.sleep(0)
        copilot.update_proposal(executive_summary="Typed while waiting")
        release.set()
        await task

        assert copilot.state.proposal.executive_summary == "Late summary"

    def test_free_text_is_echoed(self, copilot: SalesCopilot):
        message = copilot.send_message("What about delivery dates?")
        assert message.role == MessageRole.USER
        assert copilot.state.messages[-1].content == "What about delivery dates?"

    def test_blank_text_ignored(self, copilot: SalesCopilot):
        count = len(copilot.state.messages)
        assert copilot.send_message("   ") is None
        assert len(copilot.state.messages) == count

    @pytest.mark.asyncio
    async def test_reset(self, drafted_copilot: SalesCopilot):
        drafted_copilot.update_proposal(terms="x")
        state = drafted_copilot.reset()

        assert state.lead is None
        assert state.versions == []
        assert not drafted_copilot.autosaver.pending

    @pytest.mark.asyncio
    async def test_role_gate(self, drafted_copilot: SalesCopilot):
        drafted_copilot.request_approval("note", 5)
        with pytest.raises(PermissionDeniedError):
            drafted_copilot.reject("no")


class TestFinalization:
    """Export and follow-up email."""

    @pytest.mark.asyncio
    async def test_export_requires_approval(self, drafted_copilot: SalesCopilot):
        with pytest.raises(TransitionError):
            drafted_copilot.export("pdf")

    @pytest.mark.asyncio
    async def test_export_filename(self, drafted_copilot: SalesCopilot):
        await approve(drafted_copilot)

        result = drafted_copilot.export("DOCX")

        assert result["filename"].startswith("Proposal_Automation_")
        assert result["filename"].endswith(".docx")
        assert result["message"].startswith("Generating DOCX export...")

    @pytest.mark.asyncio
    async def test_export_unknown_format(self, drafted_copilot: SalesCopilot):
        await approve(drafted_copilot)
        with pytest.raises(ValueError):
            drafted_copilot.export("odt")

    @pytest.mark.asyncio
    async def test_compose_edit_send(self, drafted_copilot: SalesCopilot, stub_provider: StubProvider):
        await approve(drafted_copilot)
        stub_provider.response = "Hi Riya, following up on our proposal."

        draft = await drafted_copilot.compose_email()

        assert draft.recipient == "riya.sharma@acme-mfg.co.in"
        assert draft.subject == "Proposal: Factory Floor Automation - Phase 1"
        assert draft.body == "Hi Riya, following up on our proposal."
        assert not draft.is_generating
        assert GENERATED_SUMMARY in stub_provider.prompts[-1]

        drafted_copilot.edit_email(body="Edited body")
        result = drafted_copilot.send_email()

        assert result["message"] == "Email sent successfully!"
        assert result["attachment"] == "proposal_factory_automation.pdf"
        assert drafted_copilot.state.email is None

    @pytest.mark.asyncio
    async def test_compose_requires_approval(self, drafted_copilot: SalesCopilot):
        with pytest.raises(TransitionError):
            await drafted_copilot.compose_email()

    @pytest.mark.asyncio
    async def test_send_without_composer(self, drafted_copilot: SalesCopilot):
        with pytest.raises(WorkflowError):
            drafted_copilot.send_email()

    @pytest.mark.asyncio
    async def test_email_fallback(self, drafted_copilot: SalesCopilot, stub_provider: StubProvider):
        await approve(drafted_copilot)
        stub_provider.fail = True

        draft = await drafted_copilot.compose_email()

        assert draft.body == ContentGeneratorService.EMAIL_FALLBACK
