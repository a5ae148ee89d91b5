"""Tests for the debounced auto-save."""

import asyncio

import pytest

from app.services.autosave import AutoSaver
from app.services.copilot import SalesCopilot
from tests.stubs import TEST_AUTOSAVE_DELAY


class TestAutoSaver:
    """Tests for the AutoSaver timer."""

    @pytest.mark.asyncio
    async def test_fires_after_quiet_period(self):
        calls = []
        saver = AutoSaver(lambda: calls.append(1), delay=0.02)

        saver.schedule()
        assert saver.pending
        await asyncio.sleep(0.06)

        assert calls == [1]
        assert not saver.pending

    @pytest.mark.asyncio
    async def test_reschedule_restarts_timer(self):
        calls = []
        saver = AutoSaver(lambda: calls.append(1), delay=0.05)

        saver.schedule()
        await asyncio.sleep(0.03)
        saver.schedule()
        await asyncio.sleep(0.03)
        assert calls == []

        await asyncio.sleep(0.06)
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_cancel(self):
        calls = []
        saver = AutoSaver(lambda: calls.append(1), delay=0.02)

        saver.schedule()
        saver.cancel()
        await asyncio.sleep(0.05)

        assert calls == []
        assert not saver.pending


class TestCopilotAutoSave:
    """Auto-save wired into the copilot."""

    @pytest.mark.asyncio
    async def test_edit_creates_manual_revision(self, drafted_copilot: SalesCopilot):
        drafted_copilot.update_proposal(terms="Net 45")
        assert drafted_copilot.autosaver.pending

        await asyncio.sleep(TEST_AUTOSAVE_DELAY * 3)

        versions = drafted_copilot.state.versions
        assert [v.label for v in versions] == ["Manual Revision", "AI Draft Generated"]
        assert versions[0].proposal.terms == "Net 45"

    @pytest.mark.asyncio
    async def test_burst_of_edits_saves_once(self, drafted_copilot: SalesCopilot):
        for delta in (1, 1, 1):
            drafted_copilot.change_quantity("1", delta)
            await asyncio.sleep(TEST_AUTOSAVE_DELAY / 3)

        await asyncio.sleep(TEST_AUTOSAVE_DELAY * 3)

        labels = [v.label for v in drafted_copilot.state.versions]
        assert labels.count("Manual Revision") == 1
        assert drafted_copilot.state.versions[0].proposal.find_item("1").quantity == 4

    @pytest.mark.asyncio
    async def test_unchanged_content_does_not_resave(self, drafted_copilot: SalesCopilot):
        drafted_copilot.change_quantity("1", 1)
        drafted_copilot.change_quantity("1", -1)

        await asyncio.sleep(TEST_AUTOSAVE_DELAY * 3)

        assert len(drafted_copilot.state.versions) == 1

    @pytest.mark.asyncio
    async def test_restore_cancels_pending_save(self, drafted_copilot: SalesCopilot):
        version_id = drafted_copilot.state.versions[0].id
        drafted_copilot.update_proposal(executive_summary="Scratch")

        drafted_copilot.restore_version(version_id)
        assert not drafted_copilot.autosaver.pending

        await asyncio.sleep(TEST_AUTOSAVE_DELAY * 3)
        assert len(drafted_copilot.state.versions) == 1

    @pytest.mark.asyncio
    async def test_template_application_creates_manual_revision(self, drafted_copilot: SalesCopilot):
        template = drafted_copilot.save_template("Manufacturing")
        drafted_copilot.update_proposal(terms="Net 90")
        await asyncio.sleep(TEST_AUTOSAVE_DELAY * 3)
        assert len(drafted_copilot.state.versions) == 2

        drafted_copilot.apply_template(template.id)
        assert drafted_copilot.autosaver.pending

        await asyncio.sleep(TEST_AUTOSAVE_DELAY * 3)

        versions = drafted_copilot.state.versions
        assert [v.label for v in versions] == ["Manual Revision", "Manual Revision", "AI Draft Generated"]
        assert versions[0].proposal.terms == template.terms

    @pytest.mark.asyncio
    async def test_shutdown_cancels_pending_save(self, drafted_copilot: SalesCopilot):
        drafted_copilot.update_proposal(terms="Net 45")
        assert drafted_copilot.autosaver.pending

        await drafted_copilot.shutdown()
        assert not drafted_copilot.autosaver.pending

        await asyncio.sleep(TEST_AUTOSAVE_DELAY * 3)
        assert len(drafted_copilot.state.versions) == 1
